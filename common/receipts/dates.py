from datetime import date, time
from typing import Optional
import re

DATE_RE = re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})", re.ASCII)
TIME_RE = re.compile(r"(?P<hour>\d{2}):(?P<minute>\d{2})", re.ASCII)


def parse_purchase_date(raw: str | None) -> Optional[date]:
    if not raw:
        return None
    m = DATE_RE.fullmatch(raw)
    if not m:
        return None
    try:
        return date(int(m.group("year")), int(m.group("month")), int(m.group("day")))
    except ValueError:
        return None


def parse_purchase_time(raw: str | None) -> Optional[time]:
    if not raw:
        return None
    m = TIME_RE.fullmatch(raw)
    if not m:
        return None
    try:
        return time(int(m.group("hour")), int(m.group("minute")))
    except ValueError:
        return None


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute
