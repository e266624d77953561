import pytest

from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import InsufficientBalance, InvalidRequest, NotFound
from credit_market.ledger.services import credit_client, debit_producer
from credit_market.producer.models import Producer
from credit_market.utils import MAX_STORED_INTEGER


class TestLedgerServices:
    def test_credit_client(self, store: EntityStore, fake_client: Client):
        with store.atomic():
            credit_client(store, fake_client.id, 5)
            credit_client(store, fake_client.id, 3)
            client = store.get(Client, fake_client.id)

        assert client is not None
        assert client.credits == 8

    def test_credit_missing_client(self, store: EntityStore):
        with pytest.raises(NotFound):
            with store.atomic():
                credit_client(store, 999, 5)

    def test_credit_client_overflow(self, store: EntityStore, fake_client: Client):
        with pytest.raises(InvalidRequest):
            with store.atomic():
                credit_client(store, fake_client.id, MAX_STORED_INTEGER)
                credit_client(store, fake_client.id, 1)

        with store.atomic():
            client = store.get(Client, fake_client.id)
        assert client is not None
        assert client.credits == 0

    def test_debit_producer(self, store: EntityStore, fake_producer: Producer):
        with store.atomic():
            producer = debit_producer(store, fake_producer.id, 20)

        assert producer.credits == 30

    def test_debit_producer_to_zero(self, store: EntityStore, fake_producer: Producer):
        with store.atomic():
            producer = debit_producer(store, fake_producer.id, fake_producer.credits)

        assert producer.credits == 0

    def test_debit_producer_insufficient_balance(
        self, store: EntityStore, fake_producer: Producer
    ):
        with pytest.raises(InsufficientBalance) as exc_info:
            with store.atomic():
                debit_producer(store, fake_producer.id, 51)

        assert exc_info.value.requested == 51
        assert exc_info.value.available == 50
        assert exc_info.value.kind.value == "InvalidRequest"

        with store.atomic():
            producer = store.get(Producer, fake_producer.id)
        assert producer is not None
        assert producer.credits == 50

    def test_debit_missing_producer(self, store: EntityStore):
        with pytest.raises(NotFound):
            with store.atomic():
                debit_producer(store, 999, 1)

    def test_negative_amounts_are_rejected(
        self, store: EntityStore, fake_producer: Producer, fake_client: Client
    ):
        with pytest.raises(InvalidRequest):
            with store.atomic():
                credit_client(store, fake_client.id, -1)

        with pytest.raises(InvalidRequest):
            with store.atomic():
                debit_producer(store, fake_producer.id, -1)

        with store.atomic():
            client = store.get(Client, fake_client.id)
            producer = store.get(Producer, fake_producer.id)
        assert client is not None and client.credits == 0
        assert producer is not None and producer.credits == 50
