# restock/services/restock_service.py
import logging
from typing import Optional

from restock.core.config import Settings
from restock.core.exceptions import AuthError, HttpError, ParseError
from restock.schemas.inventory import InventoryUpdateRequest, InventoryUpdateResult
from restock.services.ebay.auth import EbayAuthManager
from restock.services.ebay.responses import log_inventory_update_result
from restock.services.ebay.trading import EbayTradingAPI

logger = logging.getLogger(__name__)


class RestockService:
    """
    Runs one restock cycle: token -> build -> call -> parse -> report.

    The only state shared between cycles is the auth manager's token cache.
    """

    def __init__(
        self,
        settings: Settings,
        auth_manager: Optional[EbayAuthManager] = None,
        trading_api: Optional[EbayTradingAPI] = None,
    ):
        self.settings = settings
        self.auth_manager = auth_manager or EbayAuthManager(settings)
        self.trading_api = trading_api or EbayTradingAPI(settings)
        self.request = InventoryUpdateRequest.from_item_ids(settings.item_ids, settings.TARGET_STOCK)

    async def process_items(self) -> Optional[InventoryUpdateResult]:
        item_ids = [item.item_id for item in self.request.items]

        logger.info("--- TRADING POLL START ---")
        logger.info(
            f"[INFO] Updating ItemIDs: {', '.join(item_ids)} | target quantity = {self.settings.TARGET_STOCK}"
        )

        try:
            token = await self.auth_manager.get_access_token()
        except AuthError as e:
            logger.error(f"[FATAL] Could not obtain access token, aborting this poll. ({str(e)})")
            return None

        result = None
        try:
            result = await self.trading_api.revise_inventory_status(self.request.items, token)
            if result is not None:
                log_inventory_update_result(result, self.settings.TARGET_STOCK)
        except (HttpError, ParseError) as e:
            logger.error(f"[FATAL] ReviseInventoryStatus call failed. ({str(e)})")

        logger.info("--- TRADING POLL END ---")
        return result
