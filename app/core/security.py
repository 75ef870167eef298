"""Password hashing and JWT creation/verification for authentication."""

import base64
import hashlib
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

import bcrypt
import jwt

from app.core.config import JwtSettings
from app.models.user import User

# Prefixes of modular-crypt bcrypt hashes; anything else is a legacy SHA-256 hash.
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

HashScheme = Literal["sha256", "bcrypt"]


def _sha256_b64(plain_password: str) -> str:
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def hash_password(plain_password: str) -> str:
    """
    Deterministic SHA-256 hash, base64 encoded (44 chars).

    Unsalted: identical passwords produce identical hashes, so stored hashes are
    open to precomputed-table attacks. Use PasswordHasher(scheme="bcrypt") for new
    deployments; existing hashes keep verifying either way.
    """
    return _sha256_b64(plain_password)


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash of either supported format."""
    if hashed.startswith(BCRYPT_PREFIXES):
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False
    return _sha256_b64(plain_password) == hashed


class PasswordHasher:
    """Hashes new passwords with the configured scheme; verifies any stored format."""

    def __init__(self, scheme: HashScheme = "sha256", bcrypt_rounds: int = 12) -> None:
        self.scheme = scheme
        self.bcrypt_rounds = bcrypt_rounds

    def hash(self, plain_password: str) -> str:
        if self.scheme == "bcrypt":
            pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
            salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
            return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")
        return hash_password(plain_password)

    def verify(self, plain_password: str, hashed: str) -> bool:
        return verify_password(plain_password, hashed)


class TokenIssuer:
    """Issues and validates HMAC-signed JWT access tokens for a fixed JwtSettings."""

    def __init__(self, jwt_settings: JwtSettings) -> None:
        self._settings = jwt_settings

    @property
    def settings(self) -> JwtSettings:
        return self._settings

    def issue(self, user: User, now: datetime | None = None) -> str:
        """Create a token with sub (user id), unique_name (username), a fresh jti, iss, aud and exp."""
        issued_at = now or datetime.now(UTC)
        expire = issued_at + timedelta(minutes=self._settings.expire_minutes)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "unique_name": user.username,
            "jti": str(uuid.uuid4()),
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "iat": issued_at,
            "exp": expire,
        }
        return jwt.encode(
            payload,
            self._settings.secret,
            algorithm=self._settings.algorithm,
        )

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token: signature, issuer, audience and expiry.
        Raises jwt.PyJWTError on any mismatch or on an expired token.
        """
        return jwt.decode(
            token,
            self._settings.secret,
            algorithms=[self._settings.algorithm],
            audience=self._settings.audience,
            issuer=self._settings.issuer,
            options={"require": ["exp", "sub", "iss", "aud"]},
        )
