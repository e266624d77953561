from typing import Type, TypeVar

from sqlalchemy import BigInteger
from sqlmodel import Field, Session, SQLModel, select

from credit_market.core.exceptions import InvalidRequest

T = TypeVar("T", bound="KeyedRecord")

# Ids and balances live in signed BIGINT columns
MAX_STORED_INTEGER = 2**63 - 1


def check_amount(label: str, value: int) -> int:
    """Reject quantities that cannot be stored as an unsigned ledger amount."""
    if not 0 <= value <= MAX_STORED_INTEGER:
        raise InvalidRequest(
            f"{label} must be between 0 and {MAX_STORED_INTEGER}, got {value}"
        )
    return value


class KeyedRecord(SQLModel):
    id: int = Field(
        primary_key=True,
        sa_type=BigInteger,
        sa_column_kwargs={"autoincrement": False},
    )

    @classmethod
    def by_id(cls: Type[T], id_: int, session: Session) -> T | None:
        return session.get(cls, id_)

    @classmethod
    def all(cls: Type[T], session: Session) -> list[T]:
        return list(session.exec(select(cls).order_by(cls.id)).all())  # type: ignore[arg-type]

    @classmethod
    def exists(cls, id_: int, session: Session) -> bool:
        return session.get(cls, id_) is not None

    def snapshot(self: T) -> T:
        """Return a detached copy of this record, unbound from any session."""
        return type(self)(**self.model_dump())
