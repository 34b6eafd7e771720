# tests/unit/services/ebay/test_ebay_payloads.py
import xmltodict

from restock.schemas.inventory import InventoryUpdateRequest, ItemTarget
from restock.services.ebay.payloads import build_revise_inventory_status_request


def test_build_request_two_items():
    request = InventoryUpdateRequest.from_item_ids(["111", "222"], 3)
    xml = build_revise_inventory_status_request(request.items)

    assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert xml.count("<InventoryStatus>") == 2

    parsed = xmltodict.parse(xml)["ReviseInventoryStatusRequest"]
    assert parsed["@xmlns"] == "urn:ebay:apis:eBLBaseComponents"
    assert parsed["InventoryStatus"] == [
        {"ItemID": "111", "Quantity": "3"},
        {"ItemID": "222", "Quantity": "3"},
    ]


def test_build_request_preserves_order():
    items = [ItemTarget(item_id=item_id, quantity=7) for item_id in ("9", "1", "5")]
    xml = build_revise_inventory_status_request(items)

    assert xml.index("<ItemID>9</ItemID>") < xml.index("<ItemID>1</ItemID>") < xml.index("<ItemID>5</ItemID>")
    assert xml.count("<Quantity>7</Quantity>") == 3


def test_build_request_no_items():
    xml = build_revise_inventory_status_request([])

    assert "<InventoryStatus>" not in xml
    assert xmltodict.parse(xml)["ReviseInventoryStatusRequest"]["@xmlns"] == "urn:ebay:apis:eBLBaseComponents"


def test_build_request_inserts_item_id_verbatim():
    xml = build_revise_inventory_status_request([ItemTarget(item_id="11&22", quantity=3)])

    assert "<ItemID>11&22</ItemID>" in xml
    assert "&amp;" not in xml
