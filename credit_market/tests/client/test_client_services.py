import pytest

from credit_market.client import services
from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import NotFound


class TestClientServices:
    def test_register_client(self, store: EntityStore):
        client = services.register_client(store, "Acme", "555-0199")

        assert client.name == "Acme"
        assert client.phone == "555-0199"
        assert client.credits == 0

        stored = services.get_client(store, client.id)
        assert stored.model_dump() == client.model_dump()

    def test_get_missing_client(self, store: EntityStore):
        with pytest.raises(NotFound):
            services.get_client(store, 999)

    def test_list_clients(self, store: EntityStore, client_factory):
        assert services.list_clients(store) == []

        created = [client_factory(f"_{i}") for i in range(3)]
        listed = services.list_clients(store)

        assert [c.id for c in listed] == [c.id for c in created]

    def test_update_client_keeps_credits(self, store: EntityStore, fake_client: Client):
        with store.atomic():
            fake_client.credits = 12
            store.insert(fake_client)

        updated = services.update_client(store, fake_client.id, "Renamed", "555-0000")

        assert updated.name == "Renamed"
        assert updated.phone == "555-0000"
        assert updated.credits == 12
        assert services.get_client(store, fake_client.id).name == "Renamed"

    def test_update_missing_client(self, store: EntityStore):
        with pytest.raises(NotFound):
            services.update_client(store, 999, "name", "phone")

        assert services.list_clients(store) == []
