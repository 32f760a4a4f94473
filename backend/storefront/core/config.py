from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    app_name: str = "Travel Storefront"
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    hall_fee: float = Field(500.0, validation_alias="HALL_FEE")
    price_range_max: float = Field(1000.0, validation_alias="PRICE_RANGE_MAX")
    max_search_guests: int = Field(10, validation_alias="MAX_SEARCH_GUESTS")
    suggestion_min_length: int = Field(2, validation_alias="SUGGESTION_MIN_LENGTH")
    suggestion_debounce_ms: int = Field(300, validation_alias="SUGGESTION_DEBOUNCE_MS")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
