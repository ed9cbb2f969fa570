import re
from typing import List, Tuple

from src.model.ReceiptModel import Receipt


class ReceiptValidationError(Exception):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


RETAILER_PATTERN = re.compile(r'[A-Za-z0-9 \t\n\f\r\-&]+', re.ASCII)
DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)
TIME_PATTERN = re.compile(r'\d{2}:\d{2}', re.ASCII)
AMOUNT_PATTERN = re.compile(r'\d+\.\d{2}', re.ASCII)


def validate_receipt(receipt: Receipt) -> Tuple[bool, List[str]]:
    """Check every field of a receipt and collect all defects in field order."""
    errors = []

    if receipt.retailer == "":
        errors.append("Retailer is required.")
    elif not RETAILER_PATTERN.fullmatch(receipt.retailer):
        errors.append("Retailer contains invalid characters.")

    if receipt.purchase_date == "":
        errors.append("PurchaseDate is required.")
    elif not DATE_PATTERN.fullmatch(receipt.purchase_date):
        errors.append("PurchaseDate must be in YYYY-MM-DD format.")

    if receipt.purchase_time == "":
        errors.append("PurchaseTime is required.")
    elif not TIME_PATTERN.fullmatch(receipt.purchase_time):
        errors.append("PurchaseTime must be in HH:MM format.")

    if receipt.total == "":
        errors.append("Total is required.")
    elif not AMOUNT_PATTERN.fullmatch(receipt.total):
        errors.append("Total must be a decimal value with two decimal places.")

    if not receipt.items:
        errors.append("At least one item is required.")

    for i, item in enumerate(receipt.items, start=1):
        if item.short_description == "":
            errors.append(f"Item {i} is missing a ShortDescription.")
        if item.price == "":
            errors.append(f"Item {i} is missing a Price.")
        elif not AMOUNT_PATTERN.fullmatch(item.price):
            errors.append(f"Item {i} Price must be a decimal value with two decimal places.")

    return len(errors) == 0, errors
