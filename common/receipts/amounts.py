import re
from typing import Optional

AMOUNT_RE = re.compile(r"\d+\.\d{2}", re.ASCII)


def parse_amount(raw: str | None) -> Optional[int]:
    """Parse a ``N.NN`` currency string into whole cents.

    Anything else (missing cents, a single decimal digit, signs, grouping
    separators, surrounding whitespace) yields ``None``.
    """
    if not raw or not AMOUNT_RE.fullmatch(raw):
        return None
    return int(raw.replace(".", ""))
