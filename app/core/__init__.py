"""Core app configuration, database access, security and exceptions."""

from app.core.config import JwtSettings, get_settings, settings
from app.core.database import get_db

__all__ = ["JwtSettings", "get_settings", "settings", "get_db"]
