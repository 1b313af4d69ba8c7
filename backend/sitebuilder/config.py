import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Tenancy
    DEFAULT_TEMPLATE_SUBDOMAIN = os.getenv("DEFAULT_TEMPLATE_SUBDOMAIN", "golden-crumb")
    TENANT_CACHE_TTL = float(os.getenv("TENANT_CACHE_TTL", "5"))
    STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///sitebuilder-dev.db")

def store_engine_options(database_uri, timeout_seconds):
    """
    Bound every store call by STORE_TIMEOUT_SECONDS: waiting for a pooled
    connection, connecting, and running a statement.
    """
    options = {"pool_pre_ping": True, "pool_timeout": timeout_seconds}
    uri = database_uri or ""

    if uri.startswith("postgresql"):
        options["connect_args"] = {
            "connect_timeout": max(1, int(timeout_seconds)),
            "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
        }
    elif uri.startswith("sqlite"):
        # SQLite has no statement timeout; bound the wait on a locked database instead.
        options["connect_args"] = {"timeout": timeout_seconds}

    return options

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    SQLALCHEMY_ENGINE_OPTIONS = store_engine_options(
        SQLALCHEMY_DATABASE_URI, BaseConfig.STORE_TIMEOUT_SECONDS
    )

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-length-for-hs256"
    LOG_LEVEL = "DEBUG"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
