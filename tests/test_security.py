"""Unit tests for app.core.security: password hashing schemes and JWT issuance/validation."""

import os
import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt
from pydantic import ValidationError as SettingsValidationError

from app.core.config import JwtSettings, Settings
from app.core.security import PasswordHasher, TokenIssuer, hash_password, verify_password
from app.models.user import User
from support import TEST_JWT


class TestSha256Hashing(unittest.TestCase):
    """Default scheme: deterministic, unsalted SHA-256, base64 encoded."""

    def test_known_digest(self) -> None:
        self.assertEqual(
            hash_password("password"),
            "XohImNooBHFR0OVvjcYpJ3NgPQ1qq73WKhHvch0VQtg=",
        )

    def test_same_input_same_hash(self) -> None:
        self.assertEqual(hash_password("s3cret"), hash_password("s3cret"))

    def test_fixed_size_output(self) -> None:
        self.assertEqual(len(hash_password("")), 44)
        self.assertEqual(len(hash_password("x" * 10_000)), 44)

    def test_different_passwords_differ(self) -> None:
        hashes = {hash_password(f"password-{i}") for i in range(200)}
        self.assertEqual(len(hashes), 200)

    def test_verify_round_trip(self) -> None:
        for password in ("pw", "", "ünïcødé", "with spaces and $ymbols"):
            self.assertTrue(verify_password(password, hash_password(password)))

    def test_verify_rejects_wrong_password(self) -> None:
        self.assertFalse(verify_password("wrong", hash_password("right")))


class TestPasswordHasherSchemes(unittest.TestCase):
    """bcrypt is opt-in; verification accepts either stored format."""

    def test_default_scheme_is_deterministic(self) -> None:
        hasher = PasswordHasher()
        self.assertEqual(hasher.hash("pw"), hash_password("pw"))

    def test_bcrypt_hashes_are_salted(self) -> None:
        hasher = PasswordHasher(scheme="bcrypt", bcrypt_rounds=4)
        first, second = hasher.hash("pw"), hasher.hash("pw")
        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("$2"))
        self.assertTrue(hasher.verify("pw", first))
        self.assertTrue(hasher.verify("pw", second))
        self.assertFalse(hasher.verify("other", first))

    def test_bcrypt_hasher_still_verifies_sha256_hashes(self) -> None:
        hasher = PasswordHasher(scheme="bcrypt", bcrypt_rounds=4)
        self.assertTrue(hasher.verify("legacy", hash_password("legacy")))

    def test_malformed_bcrypt_hash_is_rejected(self) -> None:
        self.assertFalse(verify_password("pw", "$2b$not-a-real-hash"))


class TestTokenIssuer(unittest.TestCase):
    """Token claims, signing parameters and validation failures."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer(TEST_JWT)
        self.user = User(id=7, username="alice")

    def test_claims(self) -> None:
        payload = self.issuer.decode(self.issuer.issue(self.user))
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["unique_name"], "alice")
        self.assertEqual(payload["iss"], TEST_JWT.issuer)
        self.assertEqual(payload["aud"], TEST_JWT.audience)
        self.assertTrue(payload["jti"])

    def test_expiry_is_issuance_plus_ttl(self) -> None:
        now = datetime.now(UTC) - timedelta(minutes=1)
        payload = self.issuer.decode(self.issuer.issue(self.user, now=now))
        self.assertEqual(payload["exp"] - payload["iat"], TEST_JWT.expire_minutes * 60)
        self.assertEqual(payload["iat"], int(now.timestamp()))

    def test_fresh_jti_per_issuance(self) -> None:
        jtis = {self.issuer.decode(self.issuer.issue(self.user))["jti"] for _ in range(5)}
        self.assertEqual(len(jtis), 5)

    def test_signed_with_hs256(self) -> None:
        header = jwt.get_unverified_header(self.issuer.issue(self.user))
        self.assertEqual(header["alg"], "HS256")

    def test_expired_token_rejected(self) -> None:
        long_ago = datetime.now(UTC) - timedelta(minutes=TEST_JWT.expire_minutes + 5)
        token = self.issuer.issue(self.user, now=long_ago)
        with self.assertRaises(jwt.ExpiredSignatureError):
            self.issuer.decode(token)

    def test_wrong_audience_rejected(self) -> None:
        other = TokenIssuer(
            JwtSettings(
                secret=TEST_JWT.secret,
                issuer=TEST_JWT.issuer,
                audience="someone-else",
                expire_minutes=5,
            )
        )
        with self.assertRaises(jwt.InvalidAudienceError):
            self.issuer.decode(other.issue(self.user))

    def test_wrong_issuer_rejected(self) -> None:
        other = TokenIssuer(
            JwtSettings(
                secret=TEST_JWT.secret,
                issuer="impostor",
                audience=TEST_JWT.audience,
                expire_minutes=5,
            )
        )
        with self.assertRaises(jwt.InvalidIssuerError):
            self.issuer.decode(other.issue(self.user))

    def test_wrong_secret_rejected(self) -> None:
        other = TokenIssuer(
            JwtSettings(
                secret="a-completely-different-secret-0123456789",
                issuer=TEST_JWT.issuer,
                audience=TEST_JWT.audience,
                expire_minutes=5,
            )
        )
        with self.assertRaises(jwt.InvalidSignatureError):
            self.issuer.decode(other.issue(self.user))


class TestJwtConfiguration(unittest.TestCase):
    """Startup fails fast without a usable JWT configuration."""

    def test_missing_secret_fails(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(SettingsValidationError):
                Settings(_env_file=None)

    def test_blank_secret_fails(self) -> None:
        with self.assertRaises(SettingsValidationError):
            Settings(_env_file=None, JWT_SECRET="   ")

    def test_non_positive_expiry_fails(self) -> None:
        with self.assertRaises(SettingsValidationError):
            Settings(_env_file=None, JWT_SECRET="x" * 40, JWT_EXPIRE_MINUTES=0)

    def test_jwt_settings_snapshot(self) -> None:
        config = Settings(
            _env_file=None,
            JWT_SECRET="x" * 40,
            JWT_ISSUER="iss",
            JWT_AUDIENCE="aud",
            JWT_EXPIRE_MINUTES=15,
        )
        self.assertEqual(
            config.jwt_settings(),
            JwtSettings(secret="x" * 40, issuer="iss", audience="aud", expire_minutes=15),
        )

    def test_struct_rejects_empty_secret(self) -> None:
        with self.assertRaises(ValueError):
            JwtSettings(secret="", issuer="i", audience="a", expire_minutes=5)


if __name__ == "__main__":
    unittest.main()
