from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ItemTarget(BaseModel):
    item_id: str
    quantity: int

    model_config = ConfigDict(frozen=True)


class InventoryUpdateRequest(BaseModel):
    """Ordered items sent in one ReviseInventoryStatus call."""
    items: List[ItemTarget]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_item_ids(cls, item_ids: List[str], quantity: int) -> "InventoryUpdateRequest":
        return cls(items=[ItemTarget(item_id=item_id, quantity=quantity) for item_id in item_ids])


class ErrorRecord(BaseModel):
    error_code: Optional[str] = None
    short_message: Optional[str] = None
    long_message: Optional[str] = None
    severity_code: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ItemConfirmation(BaseModel):
    item_id: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class InventoryUpdateResult(BaseModel):
    ack: Optional[str] = None
    errors: List[ErrorRecord] = []
    items: List[ItemConfirmation] = []

    model_config = ConfigDict(frozen=True)
