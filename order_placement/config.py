# order_placement/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # both must be strictly exceeded for an order to be expedited
    EXPEDITE_MIN_PURCHASES: int = 5000
    EXPEDITE_MIN_CREDIT_RATING: int = 500

    LOG_LEVEL: str = "WARNING"

    # Example .env:
    # ORDER_LOG_LEVEL=DEBUG
    # ORDER_EXPEDITE_MIN_PURCHASES=10000

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORDER_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

