import logging
import sys
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Error: SUPABASE_URL and SUPABASE_KEY must be set in the .env file."


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    PROJECT_NAME: str = "KYP Backend API"

    # Logging: DEBUG, INFO, WARNING, ERROR (env: LOG_LEVEL)
    LOG_LEVEL: str = "INFO"

    # Supabase project credentials; both required, no defaults
    SUPABASE_URL: str
    SUPABASE_KEY: str
    PRODUCTS_TABLE: str = "products"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    @field_validator("SUPABASE_URL", "SUPABASE_KEY")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build settings from the environment, after loading env_file (if any) into it with python-dotenv.
    Missing Supabase credentials are fatal: print a diagnostic and exit with status 1.
    """
    if env_file:
        load_dotenv(env_file)
    try:
        return Settings()
    except ValidationError as e:
        fields = {err["loc"][0] for err in e.errors() if err.get("loc")}
        if fields <= {"SUPABASE_URL", "SUPABASE_KEY"}:
            print(MISSING_CREDENTIALS_MESSAGE, file=sys.stderr)
        else:
            print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)


@lru_cache()
def get_settings() -> Settings:
    return load_settings()


settings = get_settings()
