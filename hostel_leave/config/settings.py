"""
Environment configuration for the hostel leave management backend.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
import secrets
import string
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import pytz
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    @staticmethod
    def get_secret_key_default() -> str:
        """Generate a default secret key if not provided"""
        alphabet = string.ascii_letters + string.digits
        return ''.join(secrets.choice(alphabet) for _ in range(32))

    # Application configuration
    APP_NAME: str = Field(default="Hostel Leave Management System", alias="PROJECT_NAME")
    API_VERSION: str = Field(default="1.0.0", alias="PROJECT_VERSION")
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    TIMEZONE: str = "Asia/Kolkata"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    CORS_ORIGINS: str = Field(default="*", alias="BACKEND_CORS_ORIGINS")

    # Database configuration
    DATABASE_URL: str = "sqlite:///./hostel_leave.db"
    DB_POOL_SIZE: int = 10
    DB_POOL_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Security configuration
    JWT_SECRET_KEY: str = Field(
        default_factory=lambda: Settings.get_secret_key_default(),
        alias="JWT_SECRET",
    )
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 6
    PASSWORD_BCRYPT_ROUNDS: int = 10
    ADMIN_SECRET: Optional[str] = None
    # Signup always issues a token; login only does when this is enabled.
    LOGIN_ISSUES_TOKEN: bool = False

    # Static assets (generated PDFs live under PUBLIC_DIR/pdfs)
    PUBLIC_DIR: str = "public"
    PDF_SUBDIR: str = "pdfs"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Validators
    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level so 'debug' and 'DEBUG' both work"""
        return v.upper()

    @field_validator('ADMIN_SECRET')
    @classmethod
    def blank_admin_secret_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """An empty ADMIN_SECRET must not open the admin routes"""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator('TIMEZONE')
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown time zone: {v}")
        return v

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from a comma list or a JSON list"""
        raw = self.CORS_ORIGINS.strip()
        if raw.startswith('[') and raw.endswith(']'):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    def get_pdf_dir(self) -> Path:
        """Filesystem directory for generated leave certificates"""
        return Path(self.PUBLIC_DIR) / self.PDF_SUBDIR

    def get_pdf_url_prefix(self) -> str:
        """Public URL prefix the PDF directory is served under"""
        return f"/{self.PDF_SUBDIR}"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
