"""
Typed errors raised by the market services.

Each error carries an ErrorKind tag and a human readable message. The request
layer renders them through a single exception handler, so services never
return sentinel values for failures.
"""

from typing import Any

from credit_market.core.models.base import ErrorKind


class MarketError(Exception):
    """Base class for every recoverable market error."""

    kind: ErrorKind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class NotFound(MarketError):
    kind = ErrorKind.NOT_FOUND


class ContractNotInitialized(NotFound):
    def __init__(self) -> None:
        super().__init__("Contract not found, please initialize contract")


class Unauthorized(MarketError):
    kind = ErrorKind.UNAUTHORIZED


class AlreadyPaid(MarketError):
    kind = ErrorKind.ALREADY_PAID

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(f"Credit order {order_id} has already been paid")


class InvalidRequest(MarketError):
    kind = ErrorKind.INVALID_REQUEST


class InsufficientBalance(InvalidRequest):
    """Raised when a producer holds fewer credits than an operation needs."""

    def __init__(self, producer_id: int, requested: int, available: int) -> None:
        self.producer_id = producer_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Producer {producer_id} does not have enough credits: "
            f"requested {requested}, available {available}"
        )


class DuplicateBid(InvalidRequest):
    def __init__(self, client_id: int, order_id: int) -> None:
        super().__init__(
            f"Client {client_id} has already bid for credit order {order_id}"
        )


class BidTooLow(InvalidRequest):
    def __init__(self, offer_per_credit: int, min_offer_per_credit: int) -> None:
        self.offer_per_credit = offer_per_credit
        self.min_offer_per_credit = min_offer_per_credit
        super().__init__(
            f"Offer per credit {offer_per_credit} is lower than the current "
            f"minimum {min_offer_per_credit}"
        )


class NotYetBid(InvalidRequest):
    def __init__(self, order_id: int) -> None:
        super().__init__(f"No client has bid for credit order {order_id}")


class IdentifierExhausted(RuntimeError):
    """The shared id counter cannot advance without reusing an identifier."""


class IdentifierCollision(RuntimeError):
    """A freshly allocated identifier is already present in the store."""
