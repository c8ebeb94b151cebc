from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)
    LOG_FAILURES: bool = True  # Boundary helpers log failed validations

    # Error rendering
    ERROR_SEPARATOR: str = "; "
    SENSITIVE_FIELDS: frozenset[str] = frozenset({"password", "token", "secret"})

    model_config = SettingsConfigDict(env_prefix="VALTREE_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
