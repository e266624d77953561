import enum
from enum import Enum

from pydantic import BaseModel


class OrderState(str, Enum):
    OPEN = "Open"
    CLAIMED = "Claimed"
    SETTLED = "Settled"

    @classmethod
    def of(cls, paid: bool, client_id: int | None) -> "OrderState":
        if paid:
            return cls.SETTLED
        if client_id is not None:
            return cls.CLAIMED
        return cls.OPEN

    @classmethod
    def values(cls):
        return [e.value for e in cls]


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    ALREADY_PAID = "AlreadyPaid"
    INVALID_REQUEST = "InvalidRequest"


class logging_levels(str, enum.Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingLevelRequest(BaseModel):
    level: logging_levels


class Ack(BaseModel):
    message: str
