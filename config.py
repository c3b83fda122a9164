import os

from dotenv import load_dotenv

load_dotenv()


def _env_list(name, default):
    return [value.strip() for value in os.getenv(name, default).split(",") if value.strip()]


class Config:
    """Settings shared by every environment, overridable through .env"""

    API_VERSION = "1.0.0"

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    DEBUG = os.getenv("DEBUG", "True") == "True"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Local sqlite file unless DATABASE_URI points at a server
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI", "sqlite:///vocabulary.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session cookie is the only credential the client holds
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")

    # Frontend origins allowed to call /api and /auth with credentials
    ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", "http://localhost:3000")

    # Applied when a new word is saved without languages
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "serbian")
    DEFAULT_TRANSLATION_LANGUAGE = os.getenv("DEFAULT_TRANSLATION_LANGUAGE", "english")

    MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))


class DevelopmentConfig(Config):
    """Local development over plain HTTP"""

    DEBUG = True
    SESSION_COOKIE_SECURE = False


class ProductionConfig(Config):
    """Deployed API behind HTTPS, frontend on another domain"""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # SameSite=None is only honoured together with Secure
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "None")
    SESSION_COOKIE_PATH = "/"

    REMEMBER_COOKIE_HTTPONLY = True
    REMEMBER_COOKIE_SECURE = True
    REMEMBER_COOKIE_SAMESITE = SESSION_COOKIE_SAMESITE
    REMEMBER_COOKIE_DURATION = int(os.getenv("REMEMBER_COOKIE_DAYS", "7")) * 24 * 3600
    REMEMBER_COOKIE_PATH = "/"

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_recycle": 3600,
        "pool_pre_ping": True,
    }


class TestingConfig(Config):
    """In-memory database, fixed secret"""

    TESTING = True
    DEBUG = True
    LOG_LEVEL = "WARNING"
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SESSION_COOKIE_SECURE = False


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
