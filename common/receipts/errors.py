INVALID_RECEIPT_MSG = "The receipt is invalid."
NOT_FOUND_MSG = "No receipt found for that ID."


class ReceiptError(Exception):
    """Base error for the receipt pipeline.

    ``reason`` describes the concrete failure for logs. Clients only ever
    see ``public_message``.
    """

    public_message = ""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ValidationError(ReceiptError):
    public_message = INVALID_RECEIPT_MSG


class NotFoundError(ReceiptError):
    public_message = NOT_FOUND_MSG
