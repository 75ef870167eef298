"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.errors import setup_exception_handlers
from app.core.config import Settings, get_settings
from app.core.logging_config import configure_logging
from app.core.security import PasswordHasher, TokenIssuer


def create_app(config: Settings | None = None) -> FastAPI:
    """
    Build the application. JWT settings are snapshotted once here and shared by
    token issuance and bearer validation through app.state.
    """
    config = config or get_settings()
    configure_logging(config.LOG_LEVEL)

    application = FastAPI(
        title="Product Catalog API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.state.settings = config
    application.state.token_issuer = TokenIssuer(config.jwt_settings())
    application.state.password_hasher = PasswordHasher(
        scheme=config.PASSWORD_HASH_SCHEME,
        bcrypt_rounds=config.BCRYPT_ROUNDS,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if config.APP_ENV == "dev" else config.CORS_ORIGINS,
        allow_credentials=config.APP_ENV != "dev",
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(application)
    application.include_router(api_router, prefix=config.API_PREFIX)

    @application.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Product Catalog API"}

    return application


app = create_app()
