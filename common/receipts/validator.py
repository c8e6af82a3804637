"""Turn an untrusted :class:`RawReceipt` into a :class:`NormalizedReceipt`.

Rules are checked in document order and the first failure raises
:class:`ValidationError`. The error reason names the failing field so it
can be logged; it is never returned to clients.
"""

from __future__ import annotations

from . import NormalizedItem, NormalizedReceipt, RawItem, RawReceipt
from .amounts import parse_amount
from .charsets import is_item_description, is_retailer_name
from .dates import parse_purchase_date, parse_purchase_time
from .errors import ValidationError


def _validate_amount(raw: str, label: str) -> int:
    amount = parse_amount(raw)
    if amount is None:
        raise ValidationError(f"invalid {label} format (N.NN)")
    return amount


def _validate_item(index: int, item: RawItem) -> NormalizedItem:
    # A whitespace-only description satisfies the character check, so the
    # trimmed emptiness check has to run on its own.
    description = item.short_description.strip()
    if not description:
        raise ValidationError(f"item {index}: shortDescription required")
    if not is_item_description(item.short_description):
        raise ValidationError(f"item {index}: invalid shortDescription format")

    price_cents = parse_amount(item.price)
    if price_cents is None:
        raise ValidationError(f"item {index}: invalid price format (N.NN)")
    return NormalizedItem(description=description, price_cents=price_cents)


def validate(raw: RawReceipt) -> NormalizedReceipt:
    if not is_retailer_name(raw.retailer):
        raise ValidationError("invalid retailer format")

    purchase_date = parse_purchase_date(raw.purchase_date)
    if purchase_date is None:
        raise ValidationError("invalid purchaseDate format (YYYY-MM-DD)")

    purchase_time = parse_purchase_time(raw.purchase_time)
    if purchase_time is None:
        raise ValidationError("invalid purchaseTime format (HH:MM)")

    total_cents = _validate_amount(raw.total, "total")

    if not raw.items:
        raise ValidationError("items array cannot be empty")

    items = tuple(_validate_item(i, item) for i, item in enumerate(raw.items))

    return NormalizedReceipt(
        retailer=raw.retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total_cents=total_cents,
        item_count=len(raw.items),
        items=items,
    )
