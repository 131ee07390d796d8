"""Configuration management for the MIDI configurator backend."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONFIGURATOR_",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"), description="Directory for client storage files")

    # Payment gateway
    payu_api_key: str = Field(default="", description="PayU API key used to sign payments")
    payu_merchant_id: str = Field(default="", description="PayU merchant id")

    # Order notification email
    smtp_host: str = Field(default="smtp.gmail.com", description="SMTP server host")
    smtp_port: int = Field(default=465, description="SMTP server port (465 = implicit TLS)")
    smtp_use_ssl: bool = Field(default=True, description="Connect with implicit TLS instead of STARTTLS")
    notify_email_user: Optional[str] = Field(default=None, description="SMTP login and sender address")
    notify_email_pass: Optional[str] = Field(default=None, description="SMTP password")
    notify_email_to: Optional[str] = Field(default=None, description="Recipient of order notifications")
    notify_sender_name: str = Field(default="Notificaciones Beato", description="Display name of the sender")

    # Web server
    web_host: str = Field(default="127.0.0.1", description="Web server host")
    web_port: int = Field(default=4000, description="Web server port")
    cors_origins: List[str] = Field(default=["*"], description="Origins allowed to call the API")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="text", description="Log output format: json or text")

    @property
    def notify_recipient(self) -> Optional[str]:
        """Admin address order notifications go to."""
        return self.notify_email_to or self.notify_email_user


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings]) -> None:
    """Override global settings (None resets to environment defaults)."""
    global _settings
    _settings = settings
