import logging
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="RECIPE_IMPORT_LOG_LEVEL")
    html_parser: str = Field("lxml", alias="RECIPE_IMPORT_HTML_PARSER")
    json_ld_content_types: List[str] = Field(
        default_factory=lambda: ["application/ld+json"],
        alias="RECIPE_IMPORT_JSON_LD_CONTENT_TYPES",
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
