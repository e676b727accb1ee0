from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_NAMESPACE = "vantage-roi-calculator"


class Settings(BaseSettings):
    persistence_namespace: str = DEFAULT_NAMESPACE
    data_dir: str = ".roi_data"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "ROI_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
