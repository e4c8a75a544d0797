import os


def _flag(name, default="0"):
    return (os.getenv(name, default) or "").strip().lower() in ("1", "true", "yes")


class BaseConfig:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URL = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_ENABLED = _flag("RATELIMIT_ENABLED", "1")
    CHECKOUT_LIMIT_PER_IP = os.getenv("CHECKOUT_LIMIT_PER_IP", "20 per hour")
    SEED_ON_STARTUP = _flag("SEED_ON_STARTUP", "0")
    ALLOW_DESTRUCTIVE_SEED = _flag("ALLOW_DESTRUCTIVE_SEED", "0")
    DEFAULT_SESSION_ID = os.getenv("DEFAULT_SESSION_ID", "8c85c569-a597-4a15-9436-32e7270ed42c")
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "simple-shop-backend")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///dev.db")
    # Wipes and reseeds the database on every start; development only
    SEED_ON_STARTUP = _flag("SEED_ON_STARTUP", "1")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-key"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    RATELIMIT_ENABLED = False
    SEED_ON_STARTUP = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")

    @staticmethod
    def validate():
        missing = []
        if not os.getenv("SECRET_KEY"):
            missing.append("SECRET_KEY")
        if not os.getenv("DATABASE_URL"):
            missing.append("DATABASE_URL")
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )
        if _flag("SEED_ON_STARTUP") and not _flag("ALLOW_DESTRUCTIVE_SEED"):
            raise RuntimeError(
                "SEED_ON_STARTUP drops every table; refusing in production without ALLOW_DESTRUCTIVE_SEED=true"
            )


def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
