"""Persistence stores over a SQLAlchemy session; callers never see query objects."""

from app.repositories.products import ProductStore
from app.repositories.users import UserStore

__all__ = ["ProductStore", "UserStore"]
