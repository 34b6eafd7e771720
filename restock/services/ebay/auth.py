"""
eBay OAuth authentication using the refresh token grant.
Access tokens live only in the in-memory TokenCache.
"""

import logging
from typing import Optional

import httpx

from restock.core.config import Settings
from restock.core.exceptions import AuthError
from .token_manager import AccessToken, TokenCache

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 3600


class EbayAuthManager:
    """
    Exchanges the long-lived refresh token for short-lived access tokens
    """

    def __init__(self, settings: Settings, token_cache: Optional[TokenCache] = None):
        self.settings = settings
        self.client_id = settings.EBAY_CLIENT_ID
        self.client_secret = settings.EBAY_CLIENT_SECRET
        self.refresh_token = settings.EBAY_REFRESH_TOKEN
        self.token_refresh_url = settings.token_url
        self.token_cache = token_cache or TokenCache()

        logger.debug(f"EbayAuthManager initialized. Sandbox: {settings.is_sandbox}")

    async def get_access_token(self) -> AccessToken:
        """
        Get a valid access token, refreshing if necessary

        Raises:
            AuthError: If the refresh call fails or returns no token
        """
        cached = self.token_cache.get_access_token()
        if cached:
            return cached

        return await self.refresh_access_token()

    async def refresh_access_token(self) -> AccessToken:
        refresh_data = {
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token,
        }
        auth = httpx.BasicAuth(self.client_id, self.client_secret)

        logger.info("[AUTH] Refreshing access token...")
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.post(
                    self.token_refresh_url,
                    data=refresh_data,
                    auth=auth,
                )
        except httpx.HTTPError as e:
            logger.error(f"[AUTH] Network error refreshing token: {str(e)}")
            raise AuthError(f"Network error refreshing access token: {str(e)}") from e

        if response.status_code != 200:
            error_text = response.text
            logger.error(f"[AUTH] Token refresh failed: HTTP {response.status_code} {error_text}")
            if "invalid_grant" in error_text:
                raise AuthError("Invalid refresh token. Please regenerate your eBay tokens.")
            raise AuthError(f"Failed to refresh access token: {error_text}")

        try:
            token_data = response.json()
        except ValueError as e:
            raise AuthError(f"Token endpoint returned a non-JSON body: {response.text}") from e

        access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
        if not access_token:
            raise AuthError("Token endpoint response did not contain an access_token")

        try:
            expires_in = int(token_data.get("expires_in") or DEFAULT_EXPIRES_IN)
        except (TypeError, ValueError) as e:
            raise AuthError(f"Token endpoint returned an invalid expires_in: {token_data.get('expires_in')!r}") from e

        token = self.token_cache.save_access_token(access_token, expires_in)

        logger.info(f"[AUTH] Access token refreshed, expires in {expires_in} seconds")
        return token

    def _client_options(self) -> dict:
        if self.settings.EBAY_HTTP_TIMEOUT_SECONDS is None:
            return {}
        return {"timeout": self.settings.EBAY_HTTP_TIMEOUT_SECONDS}
