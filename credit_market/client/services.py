from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import NotFound
from credit_market.logging_config import logger


def register_client(store: EntityStore, name: str, phone: str) -> Client:
    with store.atomic():
        client = Client(id=store.next_id(), name=name, phone=phone, credits=0)
        store.create(client)

    logger.info(f"Registered client {client.id}")
    return client


def get_client(store: EntityStore, client_id: int) -> Client:
    with store.atomic():
        client = store.get(Client, client_id)

    if client is None:
        raise NotFound(f"Client with id {client_id} not found")
    return client


def list_clients(store: EntityStore) -> list[Client]:
    with store.atomic():
        return store.scan_all(Client)


def update_client(store: EntityStore, client_id: int, name: str, phone: str) -> Client:
    """Replace a Client's contact details. The credit balance is left untouched."""
    with store.atomic():
        client = store.get(Client, client_id)
        if client is None:
            raise NotFound(f"Client with id {client_id} not found")

        client.name = name
        client.phone = phone
        store.insert(client)

    return client
