# restock/services/ebay/responses.py
"""
Interpret ReviseInventoryStatus responses.

xmltodict returns a dict for a single repeated element and a list for several,
so every repeated element goes through as_list() after parsing.
"""

import logging
from typing import Any, List, Optional
from xml.parsers.expat import ExpatError

import xmltodict

from restock.core.exceptions import ParseError
from restock.schemas.inventory import ErrorRecord, InventoryUpdateResult, ItemConfirmation

logger = logging.getLogger(__name__)

RESPONSE_ROOT = "ReviseInventoryStatusResponse"


def as_list(value: Any) -> List[Any]:
    """Normalize an xmltodict node to a list regardless of cardinality."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _text(node: Any) -> Optional[str]:
    # Elements that carry attributes come back as {"@attr": ..., "#text": ...}
    if isinstance(node, dict):
        return node.get("#text")
    return node


def _normalize(resp: dict) -> dict:
    normalized = dict(resp)
    normalized["Errors"] = as_list(resp.get("Errors"))
    normalized["InventoryStatus"] = as_list(resp.get("InventoryStatus"))
    return normalized


def parse_revise_inventory_status_response(xml: str) -> Optional[InventoryUpdateResult]:
    """
    Parse a ReviseInventoryStatus response into an InventoryUpdateResult.

    Returns None (after logging) when the response root is missing.

    Raises:
        ParseError: If the body is not well-formed XML
    """
    try:
        parsed = xmltodict.parse(xml)
    except ExpatError as e:
        logger.error(f"[PARSE] Response is not valid XML: {str(e)}")
        raise ParseError(f"Invalid XML in {RESPONSE_ROOT}: {str(e)}") from e

    resp = parsed.get(RESPONSE_ROOT) if isinstance(parsed, dict) else None
    if not isinstance(resp, dict):
        logger.error(f"[PARSE] Unexpected response: {parsed}")
        return None

    resp = _normalize(resp)

    errors = [
        ErrorRecord(
            error_code=_text(error.get("ErrorCode")),
            short_message=_text(error.get("ShortMessage")),
            long_message=_text(error.get("LongMessage")),
            severity_code=_text(error.get("SeverityCode")),
        )
        for error in resp["Errors"]
        if isinstance(error, dict)
    ]

    items = [
        ItemConfirmation(
            item_id=_text(status.get("ItemID")),
            sku=_text(status.get("SKU")),
            quantity=_text(status.get("Quantity")),
        )
        for status in resp["InventoryStatus"]
        if isinstance(status, dict)
    ]

    return InventoryUpdateResult(ack=_text(resp.get("Ack")), errors=errors, items=items)


def log_inventory_update_result(result: InventoryUpdateResult, quantity: int) -> None:
    """Report ack, errors and per-item confirmations to the log."""
    logger.info(f"[TRADING] Ack = {result.ack}")

    for error in result.errors:
        logger.error(f"[ERROR] {error.error_code} {error.short_message} {error.long_message or ''}".rstrip())

    for item in result.items:
        sku = f" | SKU={item.sku}" if item.sku else ""
        logger.info(f"[ITEM] ItemID={item.item_id} | SetQty={quantity}{sku}")
