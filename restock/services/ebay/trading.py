# restock/services/ebay/trading.py
import logging
from typing import Dict, Optional, Sequence

import httpx

from restock.core.config import Settings
from restock.core.exceptions import HttpError
from restock.schemas.inventory import InventoryUpdateResult, ItemTarget
from restock.services.ebay.payloads import build_revise_inventory_status_request
from restock.services.ebay.responses import parse_revise_inventory_status_response
from restock.services.ebay.token_manager import AccessToken

logger = logging.getLogger(__name__)

REVISE_INVENTORY_STATUS = "ReviseInventoryStatus"


class EbayTradingAPI:
    """Client for the XML Trading API (ws/api.dll)."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.endpoint = settings.trading_endpoint
        self.site_id = settings.site_id
        self.compatibility_level = settings.EBAY_COMPATIBILITY_LEVEL
        self.app_name = settings.EBAY_CLIENT_ID
        self.timeout = settings.EBAY_HTTP_TIMEOUT_SECONDS

    def _get_headers(self, call_name: str, token: AccessToken) -> Dict[str, str]:
        return {
            'Content-Type': 'text/xml',
            'X-EBAY-API-CALL-NAME': call_name,
            'X-EBAY-API-SITEID': self.site_id,
            'X-EBAY-API-COMPATIBILITY-LEVEL': self.compatibility_level,
            # OAuth user token, not an Authorization: Bearer header
            'X-EBAY-API-IAF-TOKEN': token.value,
            'X-EBAY-API-APP-NAME': self.app_name,
        }

    async def execute_call(self, call_name: str, xml_request: str, token: AccessToken) -> str:
        """
        Execute a Trading API call

        Args:
            call_name: The API call name
            xml_request: The XML request body
            token: OAuth access token

        Returns:
            str: Raw XML response body

        Raises:
            HttpError: On a non-2xx response or a transport failure
        """
        headers = self._get_headers(call_name, token)
        client_options = {} if self.timeout is None else {"timeout": self.timeout}

        try:
            async with httpx.AsyncClient(**client_options) as client:
                response = await client.post(
                    self.endpoint,
                    headers=headers,
                    content=xml_request,
                )
        except httpx.HTTPError as e:
            logger.error(f"[TRADING ERROR] {str(e)}")
            raise HttpError(f"Network error in Trading API call {call_name}: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"[TRADING ERROR] HTTP {response.status_code}")
            if response.text:
                logger.error(response.text)
            raise HttpError(
                f"Trading API call {call_name} failed with HTTP {response.status_code}",
                status=response.status_code,
                body=response.text,
            )

        return response.text

    async def revise_inventory_status(
        self, items: Sequence[ItemTarget], token: AccessToken
    ) -> Optional[InventoryUpdateResult]:
        """Force-set quantities for items and parse the acknowledgement."""
        xml_request = build_revise_inventory_status_request(items)
        logger.debug(f"[DEBUG] Sending {REVISE_INVENTORY_STATUS} request for {len(items)} items")

        xml_response = await self.execute_call(REVISE_INVENTORY_STATUS, xml_request, token)
        return parse_revise_inventory_status_response(xml_response)
