"""
In-memory access token cache for the eBay OAuth token.
The refresh token always comes from settings, access tokens are never persisted.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

logger = logging.getLogger(__name__)

# A cached token is reused only while more than this much lifetime remains
EXPIRY_MARGIN = timedelta(seconds=60)


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at: datetime

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now < self.expires_at - EXPIRY_MARGIN


class TokenCache:
    """
    Holds at most one access token.
    The token is replaced wholesale on every save, never updated in place.
    """

    def __init__(self):
        self._token: Optional[AccessToken] = None

    @property
    def token(self) -> Optional[AccessToken]:
        return self._token

    def get_access_token(self) -> Optional[AccessToken]:
        """Get access token from memory if still valid"""
        if self._token is None:
            return None

        if self._token.is_valid():
            logger.debug(f"Returning cached access token (expires: {self._token.expires_at})")
            return self._token

        logger.debug("Access token expired or expiring soon")
        return None

    def save_access_token(self, value: str, expires_in: int) -> AccessToken:
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        self._token = AccessToken(value=value, expires_at=expires_at)
        return self._token

    def clear(self):
        self._token = None
