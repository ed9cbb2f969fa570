"""Points rules for processed receipts.

Each rule takes a Receipt and returns the points it contributes. Rules
never fail: amounts that do not parse count as 0.0, an unparseable
purchase date counts as 0001-01-01 and an unparseable time as 00:00.
"""

import logging
import math
import re
from datetime import date, datetime, time
from typing import Callable, List, Tuple

from src.model.ReceiptModel import Receipt
from src.receipts.validator import DATE_PATTERN, TIME_PATTERN

logger = logging.getLogger(__name__)

ZERO_DATE = date.min
ZERO_TIME = time.min

ALPHANUMERIC = re.compile(r'[A-Za-z0-9]')

# Unicode White_Space, which leaves \x1c-\x1f in place.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_amount(value: str) -> float:
    try:
        amount = float(value)
    except ValueError:
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def parse_purchase_date(value: str) -> date:
    if not DATE_PATTERN.fullmatch(value):
        return ZERO_DATE
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return ZERO_DATE


def parse_purchase_time(value: str) -> time:
    if not TIME_PATTERN.fullmatch(value):
        return ZERO_TIME
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return ZERO_TIME


def retailer_name_points(receipt: Receipt) -> int:
    return len(ALPHANUMERIC.findall(receipt.retailer))


def round_dollar_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    return 50 if total == math.floor(total) else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    # int() truncates toward zero, so 0.29 * 100 -> 28
    cents = int(parse_amount(receipt.total) * 100)
    return 25 if cents % 25 == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def item_description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        # Length in UTF-8 bytes.
        length = len(item.short_description.strip(WHITESPACE).encode("utf-8"))
        if length > 0 and length % 3 == 0:
            points += math.ceil(parse_amount(item.price) * 0.2)
    return points


def large_total_points(receipt: Receipt) -> int:
    # Disabled rule, kept so the breakdown lists all eight rules.
    return 0


def odd_day_points(receipt: Receipt) -> int:
    return 6 if parse_purchase_date(receipt.purchase_date).day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    return 10 if parse_purchase_time(receipt.purchase_time).hour == 14 else 0


RULES: List[Tuple[str, Callable[[Receipt], int]]] = [
    ("retailer_name", retailer_name_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("item_description", item_description_points),
    ("large_total", large_total_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
]


def points_breakdown(receipt: Receipt) -> List[Tuple[str, int]]:
    return [(name, rule(receipt)) for name, rule in RULES]


def calculate_points(receipt: Receipt) -> int:
    breakdown = points_breakdown(receipt)
    logger.debug("Points breakdown: %s", breakdown)
    return sum(points for _, points in breakdown)
