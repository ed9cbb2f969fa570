from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptItem:
    short_description: str = ""
    price: str = ""
