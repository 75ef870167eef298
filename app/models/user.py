"""ORM model for application users (registration, login and bearer tokens)."""

from sqlalchemy import JSON, Column, DateTime, Integer, String

from app.models.base import Base

USERNAME_MAX_LEN = 50
EMAIL_MAX_LEN = 100


class User(Base):
    """
    User account for JWT authentication.

    roles: flat, ordered list of role names (e.g. ["admin"]); may be empty.
    last_login: set by a successful login, None until then.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(USERNAME_MAX_LEN), nullable=False, unique=True, index=True)
    email = Column(String(EMAIL_MAX_LEN), nullable=True, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    roles = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)
