"""Points rules for normalized receipts.

Each rule is a pure function of the receipt returning a non-negative
contribution. :func:`score` is the sum over :data:`RULES`; the rules are
independent and all of them apply.

* ``retailer_name`` – one point per letter or digit in the retailer name.
* ``round_dollar`` – 50 points when the total is a whole, positive dollar
  amount.
* ``quarter_multiple`` – 25 points when the total is a multiple of 0.25.
* ``item_pairs`` – 5 points for every two items submitted.
* ``description_length`` – for each item whose trimmed description length
  is a positive multiple of three, the price times 0.2 rounded up.
* ``odd_day`` – 6 points when the purchase day is odd.
* ``afternoon`` – 10 points when the purchase time is after 14:00 and
  before 16:00.

Amounts are integer cents, so every currency check is exact whatever the
number of digits.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from . import NormalizedItem, NormalizedReceipt
from .charsets import count_alphanumeric
from .dates import minutes_since_midnight

CENTS_PER_DOLLAR = 100
QUARTER_CENTS = 25
# price * 0.2 in dollars is price_cents / 500
CENTS_PER_DESCRIPTION_POINT = 500
AFTERNOON_START = 14 * 60
AFTERNOON_END = 16 * 60


def retailer_name_points(receipt: NormalizedReceipt) -> int:
    return count_alphanumeric(receipt.retailer)


def round_dollar_points(receipt: NormalizedReceipt) -> int:
    cents = receipt.total_cents
    if cents > 0 and cents % CENTS_PER_DOLLAR == 0:
        return 50
    return 0


def quarter_multiple_points(receipt: NormalizedReceipt) -> int:
    return 25 if receipt.total_cents % QUARTER_CENTS == 0 else 0


def item_pairs_points(receipt: NormalizedReceipt) -> int:
    return receipt.item_count // 2 * 5


def _item_description_points(item: NormalizedItem) -> int:
    length = len(item.description)
    if length == 0 or length % 3 != 0:
        return 0
    return -(-item.price_cents // CENTS_PER_DESCRIPTION_POINT)


def description_length_points(receipt: NormalizedReceipt) -> int:
    return sum(_item_description_points(item) for item in receipt.items)


def odd_day_points(receipt: NormalizedReceipt) -> int:
    return 6 if receipt.purchase_date.day % 2 == 1 else 0


def afternoon_points(receipt: NormalizedReceipt) -> int:
    minutes = minutes_since_midnight(receipt.purchase_time)
    return 10 if AFTERNOON_START < minutes < AFTERNOON_END else 0


RULES: Tuple[Tuple[str, Callable[[NormalizedReceipt], int]], ...] = (
    ("retailer_name", retailer_name_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pairs_points),
    ("description_length", description_length_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
)


def score_breakdown(receipt: NormalizedReceipt) -> Dict[str, int]:
    return {name: rule(receipt) for name, rule in RULES}


def score(receipt: NormalizedReceipt) -> int:
    return sum(score_breakdown(receipt).values())
