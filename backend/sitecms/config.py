import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name, default="false"):
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "memory" keeps everything in-process, "database" uses SQLALCHEMY_DATABASE_URI
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
    SEED_DEFAULT_CONTENT = _flag("SEED_DEFAULT_CONTENT", "true")
    AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", "true")

    # Single shared secret for the admin area
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "8390")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///sitecms-dev.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    STORAGE_BACKEND = "memory"
    SEED_DEFAULT_CONTENT = False
    AUTO_CREATE_TABLES = True
    ADMIN_PASSWORD = "8390"

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "database")
    AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", "false")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
