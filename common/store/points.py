from __future__ import annotations

import threading
from typing import Dict, Optional, Protocol


class PointsStore(Protocol):
    def put(self, receipt_id: str, points: int) -> None: ...

    def get(self, receipt_id: str) -> Optional[int]: ...


class InMemoryPointsStore:
    """Process-local id -> points table.

    Entries are write-once. Every access goes through one lock, which is
    enough since handlers run on a threadpool and never hold it for long.
    """

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        with self._lock:
            if receipt_id in self._points:
                raise ValueError(f"receipt id already stored: {receipt_id}")
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Optional[int]:
        with self._lock:
            return self._points.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points
