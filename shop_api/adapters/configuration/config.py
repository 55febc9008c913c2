# shop_api/adapters/configuration/config.py

"""
Application Settings Configuration
"""

import json
from pathlib import Path
from dotenv import load_dotenv

# configura corretamente para a raiz do projeto
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)

from pydantic import SecretStr, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, List, Union
from logging import getLevelName


class Settings(BaseSettings):
    """
    Application Settings for environment configuration, database, auth and logging.
    """
    model_config = ConfigDict(
        env_file=str(env_path),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # General Project Info
    PROJECT_NAME: str = Field(default="Shop API", description="Name of the project")
    VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Environment: development, production, testing")
    DEBUG: bool = Field(default=False, description="Enable debug mode (detailed error logs)")
    API_PREFIX: str = Field(default="/api", description="Prefix under which every route is mounted")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    MESSAGES_LANGUAGE: str = Field(default="en", description="Language of user facing messages: en or pt")

    # Database
    DB_DRIVER: str = Field(default="asyncpg", description="Database driver (asyncpg)")
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="postgres")
    POSTGRES_DB: str = Field(default="shop")
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: Optional[str] = Field(default=None, description="Database connection URL")
    TEST_MODE: bool = Field(default=False, description="Enable test mode (use test database)")
    TEST_POSTGRES_DB: Optional[str] = Field(default=None, description="Name of the test database")

    # Auth Settings
    SECRET_KEY: SecretStr = Field(..., description="Secret used to sign tokens (required, no default)")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24, description="Access token expiration time (minutes)")
    BCRYPT_ROUNDS: int = Field(default=12, description="bcrypt cost factor")

    # Blacklist
    BLACKLIST_FALLBACK_MINUTES: int = Field(
        default=60 * 24,
        description="Lifetime of a blacklist entry when the token expiry cannot be read",
    )
    BLACKLIST_CLEANUP_ON_STARTUP: bool = Field(default=True, description="Purge expired blacklist entries on startup")

    # Security (CORS)
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(default=["http://localhost:8000", "http://127.0.0.1:8000"],
                                    description="Allowed CORS origins")

    def model_post_init(self, __context) -> None:
        """Build DATABASE_URL from the POSTGRES_* values when it was not given."""
        if not self.DATABASE_URL:
            if self.TEST_MODE and self.TEST_POSTGRES_DB:
                db_name = self.TEST_POSTGRES_DB
            else:
                db_name = self.POSTGRES_DB

            self.DATABASE_URL = (
                f"postgresql+{self.DB_DRIVER}://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{db_name}"
            )

    @field_validator("TEST_MODE", "DEBUG", "BLACKLIST_CLEANUP_ON_STARTUP", mode="before")
    def parse_boolean(cls, v: Union[str, bool]) -> bool:
        """Convert string boolean values to proper boolean."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "y", "on")
        return bool(v)

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Assemble CORS origins if provided as comma-separated string.
        """
        if isinstance(v, str) and v.strip().startswith("["):
            v = json.loads(v)
        elif isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS format: {v!r}")

    @field_validator("SECRET_KEY")
    def require_secret(cls, v: SecretStr) -> SecretStr:
        """Recusa segredo vazio: tokens assinados com ele seriam forjáveis."""
        if not v.get_secret_value().strip():
            raise ValueError("SECRET_KEY must not be empty")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that the log level is a valid level name.
        """
        lvl = v.upper()
        if getLevelName(lvl) == "Level %s" % lvl:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return lvl

    @field_validator("MESSAGES_LANGUAGE", mode="before")
    def validate_language(cls, v: str) -> str:
        if v.lower() not in ["en", "pt"]:
            raise ValueError(f"MESSAGES_LANGUAGE must be 'en' or 'pt', got: {v}")
        return v.lower()

    @field_validator("ACCESS_TOKEN_EXPIRE_MINUTES", "BLACKLIST_FALLBACK_MINUTES", "BCRYPT_ROUNDS", mode="before")
    def validate_positive_int(cls, v: Union[str, int]) -> int:
        """Converte e valida inteiros que precisam ser positivos."""
        if isinstance(v, str):
            try:
                v = int(v)
            except ValueError:
                raise ValueError(f"Expected an integer, got: {v}")
        if v <= 0:
            raise ValueError(f"Expected a positive value, got: {v}")
        return v


# Create settings instance
settings = Settings()

# Quick debug if run directly
if __name__ == "__main__":
    import json

    print(json.dumps(settings.model_dump(mode="json"), indent=4))
