from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from credit_market.client import models as client_models
from credit_market.contract import models as contract_models
from credit_market.core.database import store as store_models
from credit_market.core.database.store import EntityStore
from credit_market.logging_config import logger
from credit_market.order import models as order_models
from credit_market.producer import models as producer_models
from credit_market.settings import settings

"""
Importing the model modules registers every table on SQLModel.metadata
"""

__all__ = [
    "SQLModel",
    "contract_models",
    "client_models",
    "producer_models",
    "order_models",
    "store_models",
]


class DButils:
    def __init__(
        self,
        connection_str: str | None = None,
        echo: bool | None = None,
        test: bool = False,
    ):
        if test:
            # One shared in-memory connection so every session sees the same data
            self.connection_str = "sqlite://"
        else:
            self.connection_str = connection_str or settings.DATABASE_URL

        echo = settings.DATABASE_ECHO if echo is None else echo
        engine_kwargs: dict[str, Any] = {"echo": echo}

        if self.connection_str.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if test or self.connection_str in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_recycle=1800,
            )

        logger.info(f"Database connection initialised: {self._redacted()}")
        self.engine = create_engine(self.connection_str, **engine_kwargs)

    def _redacted(self) -> str:
        return make_url(self.connection_str).render_as_string(hide_password=True)

    def create_tables(self) -> None:
        SQLModel.metadata.create_all(self.engine)

    def get_store(self) -> EntityStore:
        return EntityStore(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


# The web layer owns one store per process; services always receive it explicitly
_db_client: DButils | None = None
_store: EntityStore | None = None


def get_db_client() -> DButils:
    global _db_client

    if _db_client is None:
        _db_client = DButils()
        _db_client.create_tables()

    return _db_client


def get_store() -> EntityStore:
    """FastAPI dependency for the process-wide entity store."""
    global _store

    if _store is None:
        _store = get_db_client().get_store()

    return _store
