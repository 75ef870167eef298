"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--email EMAIL] [--role ROLE ...]
Example:
  python -m app.scripts.create_user admin your-secure-password --role admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.exceptions import StoreError, ValidationError
from app.core.logging_config import configure_logging
from app.core.security import PasswordHasher, TokenIssuer
from app.repositories.users import UserStore
from app.services.identity import CredentialService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a catalog user, optionally with roles.")
    parser.add_argument("username", help="Username (1-50 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--email", default=None, help="Optional email address")
    parser.add_argument(
        "--role",
        dest="roles",
        action="append",
        default=[],
        help="Role to grant; repeat for several (e.g. --role admin)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = SessionLocal()
    try:
        service = CredentialService(
            UserStore(db),
            PasswordHasher(settings.PASSWORD_HASH_SCHEME, settings.BCRYPT_ROUNDS),
            TokenIssuer(settings.jwt_settings()),
        )
        result = service.register(
            args.username.strip(),
            args.password,
            email=args.email,
            roles=args.roles,
        )
    except ValidationError as e:
        for err in e.errors:
            print(f"{err.property_name}: {err.error_message}", file=sys.stderr)
        return 1
    except StoreError as e:
        logger.error("Could not create user: %s", e.message)
        return 1
    finally:
        db.close()

    if not result.succeeded:
        print(f"{result.errors[0]}: '{args.username}'.", file=sys.stderr)
        return 1
    print(f"Created user '{args.username}' (id {result.value}) with roles {args.roles}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
