# tests/conftest.py
import pytest

from restock.core.config import Settings
from restock.services.ebay.auth import EbayAuthManager
from restock.services.ebay.token_manager import TokenCache

RESTOCK_ENV_VARS = (
    "EBAY_CLIENT_ID",
    "EBAY_CLIENT_SECRET",
    "EBAY_REFRESH_TOKEN",
    "EBAY_ENVIRONMENT",
    "EBAY_SITE_ID",
    "EBAY_COMPATIBILITY_LEVEL",
    "EBAY_HTTP_TIMEOUT_SECONDS",
    "TARGET_ITEM_IDS",
    "TARGET_STOCK",
    "POLL_INTERVAL_MS",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove restock env vars and any .env file from the test's view"""
    for name in RESTOCK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(clean_env):
    """Provide test settings"""
    return Settings(
        _env_file=None,
        EBAY_CLIENT_ID="test-client-id",
        EBAY_CLIENT_SECRET="test-client-secret",
        EBAY_REFRESH_TOKEN="test-refresh-token",
        TARGET_ITEM_IDS="111, 222",
        TARGET_STOCK=3,
    )


@pytest.fixture
def token_cache():
    return TokenCache()


@pytest.fixture
def auth_manager(settings, token_cache):
    return EbayAuthManager(settings, token_cache=token_cache)
