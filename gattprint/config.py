from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class FormatterSettings(BaseSettings):
    failure_text: str = Field("Pretty-printing failed", validation_alias="PRETTY_PRINT_FAILURE_TEXT")
    log_ring_size: int = Field(200, validation_alias="PRETTY_PRINT_LOG_RING_SIZE")

    # Working precision for exact decimal division; an inexact quotient is a render failure.
    decimal_precision: int = Field(100, validation_alias="PRETTY_PRINT_DECIMAL_PRECISION")
    formatter_cache_size: int = Field(128, validation_alias="PRETTY_PRINT_CACHE_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> FormatterSettings:
    return FormatterSettings()
