"""User persistence: lookups by username/email/id, insert, save, delete."""

from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.base import store_errors


class UserStore:
    """Store over the users table. Writes commit immediately; failures raise StoreError."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_username(self, username: str) -> User | None:
        with store_errors(self._db, "find user by username"):
            return self._db.query(User).filter(User.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        with store_errors(self._db, "check username exists"):
            return (
                self._db.query(User.id).filter(User.username == username).first()
                is not None
            )

    def exists_by_email(self, email: str) -> bool:
        with store_errors(self._db, "check email exists"):
            return self._db.query(User.id).filter(User.email == email).first() is not None

    def find_by_id(self, user_id: int) -> User | None:
        with store_errors(self._db, "find user by id"):
            return self._db.get(User, user_id)

    def insert(self, user: User) -> int:
        """Persist a new user and return the identity assigned by the database."""
        with store_errors(self._db, "insert user"):
            self._db.add(user)
            self._db.commit()
            self._db.refresh(user)
            return user.id

    def save(self, user: User) -> None:
        with store_errors(self._db, "save user"):
            self._db.add(user)
            self._db.commit()

    def delete(self, user: User) -> None:
        with store_errors(self._db, "delete user"):
            self._db.delete(user)
            self._db.commit()
