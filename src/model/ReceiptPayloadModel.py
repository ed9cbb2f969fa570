"""Pydantic schemas for the receipt submission body.

Field types are checked strictly: a number where a string is expected
is a format error, not a value to coerce. Absent or null fields become
empty values so validation can report them, and unknown keys are
ignored. A null body or a null item decodes to an empty Receipt or
ReceiptItem.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError, field_validator

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt, ReceiptFormatError


class ReceiptItemPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    short_description: StrictStr = Field(default="", alias="shortDescription")
    price: StrictStr = Field(default="")

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(short_description=self.short_description, price=self.price)


class ReceiptPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    retailer: StrictStr = Field(default="")
    purchase_date: StrictStr = Field(default="", alias="purchaseDate")
    purchase_time: StrictStr = Field(default="", alias="purchaseTime")
    total: StrictStr = Field(default="")
    items: List[Optional[ReceiptItemPayload]] = Field(default_factory=list)

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _null_as_no_items(cls, value):
        return [] if value is None else value

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(item.to_item() if item is not None else ReceiptItem() for item in self.items),
        )


_body_adapter = TypeAdapter(Optional[ReceiptPayload])


def decode_receipt(body: bytes) -> Receipt:
    """Decode a raw JSON request body into a Receipt."""
    try:
        payload = _body_adapter.validate_json(body)
    except ValidationError as e:
        raise ReceiptFormatError(str(e)) from e
    if payload is None:
        return Receipt()
    return payload.to_receipt()
