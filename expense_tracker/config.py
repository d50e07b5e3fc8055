import os
from datetime import timedelta

from dotenv import load_dotenv

# load .env from the project root
basedir = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
load_dotenv(os.path.join(basedir, ".env"))


class Config:

    # -------------------------
    # Server
    # -------------------------
    PORT = int(os.getenv("PORT", "3000"))
    # NODE_ENV is honoured for deployments that already set it
    ENVIRONMENT = os.getenv("ENVIRONMENT") or os.getenv("NODE_ENV", "development")

    # -------------------------
    # Database
    # -------------------------
    DB_USER = os.getenv("DB_USER")
    DB_PASSWORD = os.getenv("DB_PASSWORD")
    DB_HOST = os.getenv("DB_HOST")
    DB_PORT = os.getenv("DB_PORT")
    DB_NAME = os.getenv("DB_NAME")

    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI") or os.getenv("DATABASE_URL")
    if not SQLALCHEMY_DATABASE_URI:
        if all([DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, DB_NAME]):
            SQLALCHEMY_DATABASE_URI = (
                f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}"
                f"@{DB_HOST}:{DB_PORT}/{DB_NAME}"
            )
        else:
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{os.path.join(basedir, 'expense_tracker.db')}"

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # -------------------------
    # JWT / session cookie
    # -------------------------
    # No fallback: create_app refuses to start without a signing key.
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "")
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_COOKIE_SAMESITE = "Strict"
    JWT_COOKIE_SECURE = ENVIRONMENT == "production"
    JWT_COOKIE_CSRF_PROTECT = False

    BCRYPT_ROUNDS = 10

    # -------------------------
    # Rate limiting
    # -------------------------
    RATELIMIT_ENABLED = os.getenv("RATELIMIT_ENABLED", "true").lower() in ("true", "1", "yes")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # -------------------------
    # Routing
    # -------------------------
    ENABLE_CATEGORY_ROUTES = os.getenv("ENABLE_CATEGORY_ROUTES", "true").lower() in ("true", "1", "yes")


class TestConfig(Config):
    TESTING = True
    ENVIRONMENT = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"
    JWT_COOKIE_SECURE = False
    BCRYPT_ROUNDS = 4
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    ENABLE_CATEGORY_ROUTES = True
