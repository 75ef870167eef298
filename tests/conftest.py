"""
Test environment. Settings are read at import time (the process refuses to start
without JWT_SECRET), so the variables must be set before any app module loads.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-for-the-catalog-suite-0123456789")
os.environ.setdefault("JWT_ISSUER", "catalog-tests")
os.environ.setdefault("JWT_AUDIENCE", "catalog-tests-clients")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "dev")
