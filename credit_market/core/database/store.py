"""
Entity store for the credit market.

One ordered key-value region per entity kind (a SQLModel table keyed by a
64-bit id) plus the shared identifier counter. All reads and writes happen
inside ``EntityStore.atomic()``, which is both the mutual-exclusion boundary
and the database transaction for a whole market operation.
"""

import threading
from contextlib import contextmanager
from typing import Generator, Type, TypeVar

from sqlalchemy import BigInteger
from sqlalchemy.engine.base import Engine
from sqlmodel import Field, Session

from credit_market.core.exceptions import IdentifierCollision, IdentifierExhausted
from credit_market.logging_config import logger
from credit_market.utils import MAX_STORED_INTEGER, KeyedRecord

T = TypeVar("T", bound=KeyedRecord)

ID_COUNTER_KEY = 0


class IdCounter(KeyedRecord, table=True):
    __tablename__: str = "id_counter"  # type: ignore

    value: int = Field(default=0, ge=0, sa_type=BigInteger)


class EntityStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._lock = threading.RLock()
        self._session: Session | None = None

    @contextmanager
    def atomic(self) -> Generator["EntityStore", None, None]:
        """Run the enclosed block as one serialised, all-or-nothing unit.

        Nested calls join the outermost unit. Any exception raised inside the
        block rolls back every write made since the outermost call began.
        """
        with self._lock:
            if self._session is not None:
                yield self
                return

            with Session(self.engine, expire_on_commit=False) as session:
                self._session = session
                try:
                    with session.begin():
                        yield self
                except Exception:
                    logger.debug("Rolled back store transaction")
                    raise
                finally:
                    self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("EntityStore used outside of an atomic() block")
        return self._session

    def get(self, model: Type[T], id_: int) -> T | None:
        session = self.session
        # Ids outside the column range can never have been allocated
        if not 0 <= id_ <= MAX_STORED_INTEGER:
            return None

        record = model.by_id(id_, session)
        if record is None:
            return None
        return record.snapshot()

    def insert(self, entity: T) -> T | None:
        """Upsert ``entity`` under its id and return the previous value, if any."""
        session = self.session
        existing = type(entity).by_id(entity.id, session)
        previous = existing.snapshot() if existing is not None else None

        session.merge(entity)
        session.flush()
        return previous

    def create(self, entity: T) -> T:
        """Store a new entity, refusing to overwrite an existing id."""
        if type(entity).exists(entity.id, self.session):
            raise IdentifierCollision(
                f"{type(entity).__name__} id {entity.id} was already in use"
            )
        self.insert(entity)
        return entity

    def scan_all(self, model: Type[T]) -> list[T]:
        return [record.snapshot() for record in model.all(self.session)]

    def next_id(self) -> int:
        """Return the current counter value and advance the counter by one."""
        session = self.session
        counter = IdCounter.by_id(ID_COUNTER_KEY, session)
        if counter is None:
            counter = IdCounter(id=ID_COUNTER_KEY, value=0)
            session.add(counter)

        current = counter.value
        if current >= MAX_STORED_INTEGER:
            raise IdentifierExhausted(
                f"Identifier counter exhausted at {current}; refusing to reuse ids"
            )

        counter.value = current + 1
        session.flush()
        return current
