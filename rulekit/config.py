from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Messages
    CULTURE: str = "en"
    SPLIT_PASCAL_CASE_DISPLAY_NAMES: bool = True  # "FirstName" -> "First Name"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return v.upper()

    class Config:
        env_prefix = "RULEKIT_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
