from dataclasses import dataclass, field
from typing import Tuple

from src.model.ReceiptItemModel import ReceiptItem


class ReceiptFormatError(ValueError):
    """Raised when a submitted payload cannot be decoded into a Receipt."""


@dataclass(frozen=True)
class Receipt:
    retailer: str = ""
    purchase_date: str = ""
    purchase_time: str = ""
    total: str = ""
    items: Tuple[ReceiptItem, ...] = field(default_factory=tuple)
