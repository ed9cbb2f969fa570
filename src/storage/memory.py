import threading
from typing import Dict, Optional, Tuple

from src.model.ReceiptModel import Receipt
from src.model.ScoredReceiptModel import ScoredReceipt


class InMemoryReceiptStore:
    """Thread-safe map of receipt id to ScoredReceipt.

    A single lock guards every read and write, so a get_points call made
    after save returns always sees that save. Nothing is ever evicted.
    """

    def __init__(self):
        self._receipts: Dict[str, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def save(self, receipt_id: str, receipt: Receipt, points: int) -> None:
        with self._lock:
            self._receipts[receipt_id] = ScoredReceipt(receipt=receipt, points=points)

    def get_points(self, receipt_id: str) -> Tuple[int, bool]:
        with self._lock:
            scored = self._receipts.get(receipt_id)
        if scored is None:
            return 0, False
        return scored.points, True

    def get_receipt(self, receipt_id: str) -> Optional[ScoredReceipt]:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
