import os
from typing import Any, Callable, Generator

# Keep the application's own store in memory when the app lifespan runs
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from starlette.testclient import TestClient  # noqa: E402

from credit_market.client import services as client_services  # noqa: E402
from credit_market.client.models import Client  # noqa: E402
from credit_market.contract import services as contract_services  # noqa: E402
from credit_market.contract.models import Contract  # noqa: E402
from credit_market.core.database import db  # noqa: E402
from credit_market.core.database.store import EntityStore  # noqa: E402
from credit_market.main import app  # noqa: E402
from credit_market.order import services as order_services  # noqa: E402
from credit_market.order.models import CreditOrder  # noqa: E402
from credit_market.producer import services as producer_services  # noqa: E402
from credit_market.producer.models import Producer  # noqa: E402

CONTRACT_PASSWORD = "admin_password"
PRODUCER_PASSWORD = "producer_password"
CREDIT_PER_ENERGY = 5


@pytest.fixture()
def db_client() -> Generator[db.DButils, None, None]:
    """In-memory SQLite database with all tables created, discarded after each test."""
    db_utils = db.DButils(test=True)
    db_utils.create_tables()
    yield db_utils
    db_utils.dispose()


@pytest.fixture()
def store(db_client: db.DButils) -> EntityStore:
    return db_client.get_store()


@pytest.fixture()
def api_client(store: EntityStore) -> Generator[TestClient, None, None]:
    """API Client for testing routes"""

    def get_store_override():
        return store

    app.dependency_overrides[db.get_store] = get_store_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture()
def fake_contract(store: EntityStore) -> Contract:
    return contract_services.initialize_contract(
        store, CONTRACT_PASSWORD, CREDIT_PER_ENERGY
    )


@pytest.fixture()
def producer_factory(store: EntityStore, fake_contract: Contract) -> Callable[..., Producer]:
    """Factory function to create producers, optionally funded through an energy award."""

    def _create_producer(
        name_suffix: str = "", energy: int = 0, password: str = PRODUCER_PASSWORD
    ) -> Producer:
        producer = producer_services.register_producer(
            store, f"fake_producer{name_suffix}", "555-0100", password
        )
        if energy:
            producer_services.award_energy(store, producer.id, CONTRACT_PASSWORD, energy)
        return producer_services.get_producer_record(store, producer.id)

    return _create_producer


@pytest.fixture()
def client_factory(store: EntityStore) -> Callable[..., Client]:
    def _create_client(name_suffix: str = "") -> Client:
        return client_services.register_client(
            store, f"fake_client{name_suffix}", "555-0199"
        )

    return _create_client


@pytest.fixture()
def fake_producer(producer_factory: Any) -> Producer:
    """A producer holding 50 credits from 10 units of energy."""
    return producer_factory(energy=10)


@pytest.fixture()
def fake_unfunded_producer(producer_factory: Any) -> Producer:
    return producer_factory("_unfunded")


@pytest.fixture()
def fake_client(client_factory: Any) -> Client:
    return client_factory()


@pytest.fixture()
def fake_client_2(client_factory: Any) -> Client:
    return client_factory("_2")


@pytest.fixture()
def fake_open_order(store: EntityStore, fake_producer: Producer) -> CreditOrder:
    return order_services.place_order(
        store, fake_producer.id, credits=50, min_offer_per_credit=2
    )


@pytest.fixture()
def fake_claimed_order(
    store: EntityStore, fake_open_order: CreditOrder, fake_client: Client
) -> CreditOrder:
    return order_services.place_bid(
        store, fake_client.id, fake_open_order.id, offer_per_credit=3
    )
