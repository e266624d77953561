from credit_market.contract.services import verify_contract_password
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import InvalidRequest, NotFound
from credit_market.core.security import get_password_hash, verify_password
from credit_market.logging_config import logger
from credit_market.producer.models import Producer
from credit_market.producer.schemas import ProducerRead
from credit_market.utils import MAX_STORED_INTEGER, check_amount


def register_producer(
    store: EntityStore, name: str, phone: str, password: str
) -> Producer:
    hashed_password = get_password_hash(password)

    with store.atomic():
        producer = Producer(
            id=store.next_id(),
            name=name,
            phone=phone,
            hashed_password=hashed_password,
            energy_supply=0,
            credits=0,
        )
        store.create(producer)

    logger.info(f"Registered producer {producer.id}")
    return producer


def get_producer_record(store: EntityStore, producer_id: int) -> Producer:
    with store.atomic():
        producer = store.get(Producer, producer_id)

    if producer is None:
        raise NotFound(f"Producer with id {producer_id} not found")
    return producer


def get_producer(store: EntityStore, producer_id: int) -> ProducerRead:
    return get_producer_record(store, producer_id).to_read()


def list_producers(store: EntityStore) -> list[ProducerRead]:
    with store.atomic():
        producers = store.scan_all(Producer)
    return [producer.to_read() for producer in producers]


def check_producer_password(producer: Producer, password: str) -> bool:
    return verify_password(password, producer.hashed_password)


def award_energy(
    store: EntityStore, producer_id: int, contract_password: str, energy_amount: int
) -> ProducerRead:
    """Record supplied energy for a Producer and mint the matching credits.

    This is the only operation that creates credits. The Producer receives
    ``energy_amount * credit_per_energy`` credits at the contract's rate.

    Args:
        store (EntityStore): The market's entity store.
        producer_id (int): The Producer that supplied the energy.
        contract_password (str): The contract administrator password.
        energy_amount (int): The units of energy supplied.

    Returns:
        ProducerRead: The Producer after the award.

    Raises:
        NotFound: If the Producer or the contract does not exist.
        Unauthorized: If the contract password is wrong.
        InvalidRequest: If ``energy_amount`` is negative or the new totals
            exceed what the ledger can store.
    """
    check_amount("Energy amount", energy_amount)

    with store.atomic():
        producer = store.get(Producer, producer_id)
        if producer is None:
            raise NotFound(f"Producer with id {producer_id} not found")

        contract = verify_contract_password(store, contract_password)

        minted = energy_amount * contract.credit_per_energy
        if (
            producer.energy_supply + energy_amount > MAX_STORED_INTEGER
            or producer.credits + minted > MAX_STORED_INTEGER
        ):
            raise InvalidRequest(
                f"Awarding {energy_amount} energy to producer {producer_id} "
                "would overflow its ledger"
            )

        producer.energy_supply += energy_amount
        producer.credits += minted
        store.insert(producer)

    logger.info(
        f"Awarded producer {producer_id} {minted} credits for {energy_amount} energy"
    )
    return producer.to_read()
