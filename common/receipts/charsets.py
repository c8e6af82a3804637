import unicodedata


RETAILER_PUNCTUATION = frozenset("-&")
DESCRIPTION_PUNCTUATION = frozenset("-")


def is_letter_or_digit(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category.startswith("L") or category == "Nd"


def _consists_of(value: str, punctuation: frozenset[str]) -> bool:
    if not value:
        return False
    return all(
        is_letter_or_digit(ch) or ch.isspace() or ch in punctuation
        for ch in value
    )


def is_retailer_name(value: str) -> bool:
    return _consists_of(value, RETAILER_PUNCTUATION)


def is_item_description(value: str) -> bool:
    return _consists_of(value, DESCRIPTION_PUNCTUATION)


def count_alphanumeric(value: str) -> int:
    return sum(1 for ch in value if is_letter_or_digit(ch))
