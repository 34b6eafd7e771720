# restock/core/config.py

from typing import List, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from restock.core.exceptions import ConfigError

PRODUCTION_API_BASE = "https://api.ebay.com"
SANDBOX_API_BASE = "https://api.sandbox.ebay.com"

# Germany = site 77
PRODUCTION_SITE_ID = "77"
SANDBOX_SITE_ID = "0"

REQUIRED_SETTINGS = (
    "EBAY_CLIENT_ID",
    "EBAY_CLIENT_SECRET",
    "EBAY_REFRESH_TOKEN",
    "TARGET_ITEM_IDS",
)


class Settings(BaseSettings):
    """
    Restock bot settings.
    Loads values from environment variables (.env file)
    """
    # eBay OAuth
    EBAY_CLIENT_ID: str = ""
    EBAY_CLIENT_SECRET: str = ""
    EBAY_REFRESH_TOKEN: str = ""
    EBAY_ENVIRONMENT: str = "production"

    # Trading API
    EBAY_SITE_ID: Optional[str] = None
    EBAY_COMPATIBILITY_LEVEL: str = "1209"
    EBAY_HTTP_TIMEOUT_SECONDS: Optional[float] = None

    # Restock targets
    TARGET_ITEM_IDS: str = ""
    TARGET_STOCK: int = 3
    POLL_INTERVAL_MS: int = 300000

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_sandbox(self) -> bool:
        return (self.EBAY_ENVIRONMENT or "production").lower() == "sandbox"

    @property
    def api_base(self) -> str:
        return SANDBOX_API_BASE if self.is_sandbox else PRODUCTION_API_BASE

    @property
    def token_url(self) -> str:
        return f"{self.api_base}/identity/v1/oauth2/token"

    @property
    def trading_endpoint(self) -> str:
        return f"{self.api_base}/ws/api.dll"

    @property
    def site_id(self) -> str:
        if self.EBAY_SITE_ID:
            return self.EBAY_SITE_ID
        return SANDBOX_SITE_ID if self.is_sandbox else PRODUCTION_SITE_ID

    @property
    def item_ids(self) -> List[str]:
        return [item_id.strip() for item_id in self.TARGET_ITEM_IDS.split(",") if item_id.strip()]

    @property
    def poll_interval_seconds(self) -> float:
        return self.POLL_INTERVAL_MS / 1000

    def missing_required(self) -> List[str]:
        """Names of required settings that are unset or blank."""
        missing = [name for name in REQUIRED_SETTINGS if not getattr(self, name).strip()]
        if "TARGET_ITEM_IDS" not in missing and not self.item_ids:
            missing.append("TARGET_ITEM_IDS")
        return missing

    def check_required(self) -> None:
        """Raise ConfigError naming every missing required setting."""
        missing = self.missing_required()
        if missing:
            raise ConfigError(f"Missing env vars. Need {', '.join(missing)}.")


def load_settings(**overrides) -> Settings:
    """
    Build and validate settings once at startup.

    Raises:
        ConfigError: If a value has the wrong type or a required value is missing
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    settings.check_required()
    return settings
