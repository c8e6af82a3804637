from __future__ import annotations

import logging
import re
import uuid

from common.store.points import PointsStore

from . import RawReceipt
from .errors import NotFoundError, ValidationError
from .scorer import score_breakdown
from .validator import validate

LOG = logging.getLogger(__name__)

RECEIPT_ID_RE = re.compile(r"\S+")


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptService:
    def __init__(self, store: PointsStore) -> None:
        self.store = store

    def process(self, raw: RawReceipt) -> str:
        try:
            receipt = validate(raw)
            breakdown = score_breakdown(receipt)
        except ValidationError:
            raise
        except Exception as exc:
            LOG.exception("unexpected failure while scoring receipt")
            raise ValidationError(f"unexpected failure: {exc!r}") from exc

        points = sum(breakdown.values())
        receipt_id = new_receipt_id()
        self.store.put(receipt_id, points)

        LOG.debug("Receipt %s breakdown: %s", receipt_id, breakdown)
        LOG.info(
            "Receipt processed id=%s points=%s retailer=%r",
            receipt_id,
            points,
            receipt.retailer,
        )
        return receipt_id

    def points(self, receipt_id: str) -> int:
        if not receipt_id or not RECEIPT_ID_RE.fullmatch(receipt_id):
            raise NotFoundError(f"invalid receipt id format: {receipt_id!r}")

        points = self.store.get(receipt_id)
        if points is None:
            raise NotFoundError(f"receipt id not found: {receipt_id}")

        LOG.info("Points retrieved id=%s points=%s", receipt_id, points)
        return points
