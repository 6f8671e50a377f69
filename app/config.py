import os

from dotenv import load_dotenv

from surveillance.common.data_access import DATASETS_CONFIG_PATH as DEFAULT_DATASETS_CONFIG
from surveillance.common.data_access import DEFAULT_TIMEOUT

load_dotenv()


def resolve_asset_base_url() -> str:
    """Asset root of the deployed dashboard: an http(s) base URL or a local directory."""
    raw_base = os.getenv("ASSET_BASE_URL", "public").strip()
    if raw_base.startswith(("http://", "https://")) and not raw_base.endswith("/"):
        return f"{raw_base}/"
    return raw_base


class BaseConfig:
    ASSET_BASE_URL = resolve_asset_base_url()
    DATASETS_CONFIG_PATH = os.getenv("DATASETS_CONFIG_PATH", str(DEFAULT_DATASETS_CONFIG))
    FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT)))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    API_TITLE = os.getenv("API_TITLE", "Dashboard Surveilans Penyakit API")
    API_VERSION = os.getenv("API_VERSION", "1.0.0")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True


config_by_name = {
    "default": BaseConfig,
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
