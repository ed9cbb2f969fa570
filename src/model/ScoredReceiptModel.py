from dataclasses import dataclass

from src.model.ReceiptModel import Receipt


@dataclass(frozen=True)
class ScoredReceipt:
    receipt: Receipt
    points: int
