"""
Ledger primitives used by order settlement.

Each primitive is a single read-modify-write on one entity and must run inside
the caller's ``EntityStore.atomic()`` block, so that a failure later in the
same operation rolls the balance change back. Balances never go negative.
"""

from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import InsufficientBalance, InvalidRequest, NotFound
from credit_market.logging_config import logger
from credit_market.producer.models import Producer
from credit_market.utils import MAX_STORED_INTEGER, check_amount


def credit_client(store: EntityStore, client_id: int, amount: int) -> Client:
    check_amount("Credit amount", amount)
    client = store.get(Client, client_id)
    if client is None:
        raise NotFound(f"Client with id {client_id} not found")

    if client.credits + amount > MAX_STORED_INTEGER:
        raise InvalidRequest(f"Crediting client {client_id} would overflow its ledger")

    client.credits += amount
    store.insert(client)
    return client


def debit_producer(store: EntityStore, producer_id: int, amount: int) -> Producer:
    check_amount("Debit amount", amount)
    producer = store.get(Producer, producer_id)
    if producer is None:
        raise NotFound(f"Producer with id {producer_id} not found")

    if producer.credits < amount:
        logger.warning(
            f"Insufficient credits: producer={producer_id} "
            f"requested={amount} available={producer.credits}"
        )
        raise InsufficientBalance(producer_id, amount, producer.credits)

    producer.credits -= amount
    store.insert(producer)
    return producer
