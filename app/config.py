# app/config.py
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings, read from environment variables or a local .env file.
    Tests construct Settings(...) directly and hand it to create_app().
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    # shared secret expected in the query string, e.g. ?apikey=12345
    api_key: str = Field(default="12345", alias="API_KEY")
    api_key_param: str = Field(default="apikey", alias="API_KEY_PARAM")
    public_paths: List[str] = Field(default_factory=lambda: ["/"], alias="PUBLIC_PATHS")

    seed_products: bool = Field(default=True, alias="SEED_PRODUCTS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
