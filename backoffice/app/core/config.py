"""
Configuration settings for the Transaction Back-Office service.

This module handles application configuration using Pydantic settings.
Every field can be overridden through the environment or a `.env` file.
"""

import secrets
from pydantic import PrivateAttr
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Transaction Back-Office"
    api_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Database Configuration
    database_url: str = "sqlite+aiosqlite:///./app.db"
    db_echo: bool = False

    # Security Configuration (JWT)
    secret_key: Optional[str] = None
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 8 * 60
    bcrypt_rounds: int = 10

    # Bootstrap defaults
    default_admin_username: str = "admin"
    default_admin_password: str = "Admin@123"
    default_admin_display_name: str = "Administrator"
    default_commission_percent: str = "2.5"

    # Front-end
    static_dir: str = "./public"
    cors_origins: List[str] = ["*"]

    _secret_key_generated: bool = PrivateAttr(default=False)

    class Config:
        env_file = ".env"
        case_sensitive = False

    def model_post_init(self, __context) -> None:
        # Never sign with a shared hardcoded key; an unset key gets a per-process one.
        if not self.secret_key:
            self.secret_key = secrets.token_urlsafe(32)
            self._secret_key_generated = True

    @property
    def secret_key_generated(self) -> bool:
        """True when SECRET_KEY was not configured and a random key is in use."""
        return self._secret_key_generated


settings = Settings()
