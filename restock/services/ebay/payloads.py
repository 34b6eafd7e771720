# restock/services/ebay/payloads.py
from typing import Sequence

from restock.schemas.inventory import ItemTarget

TRADING_NAMESPACE = "urn:ebay:apis:eBLBaseComponents"


def build_revise_inventory_status_request(items: Sequence[ItemTarget]) -> str:
    """
    Build the ReviseInventoryStatus XML body, one InventoryStatus block per item.

    Item IDs are inserted verbatim.
    """
    # TODO: XML-escape item_id before interpolating it
    inventory_status_blocks = "".join(
        f"""
    <InventoryStatus>
      <ItemID>{item.item_id}</ItemID>
      <Quantity>{item.quantity}</Quantity>
    </InventoryStatus>"""
        for item in items
    )

    return f"""<?xml version="1.0" encoding="utf-8"?>
<ReviseInventoryStatusRequest xmlns="{TRADING_NAMESPACE}">
  {inventory_status_blocks}
</ReviseInventoryStatusRequest>"""
