from fastapi import APIRouter, Depends

from credit_market.core.database import db
from credit_market.core.database.store import EntityStore
from credit_market.core.models.base import Ack

from . import services
from .schemas import EnergyAward, ProducerCreate, ProducerRead

# Router initialisation
router = APIRouter(tags=["Producers"])


@router.post("/create", status_code=201, response_model=ProducerRead)
def create_producer(
    producer_base: ProducerCreate,
    store: EntityStore = Depends(db.get_store),
):
    producer = services.register_producer(
        store, producer_base.name, producer_base.phone, producer_base.password
    )
    return producer.to_read()


@router.post("/award_energy", response_model=Ack)
def award_energy(
    energy_award: EnergyAward,
    store: EntityStore = Depends(db.get_store),
):
    services.award_energy(
        store,
        energy_award.producer_id,
        energy_award.contract_password,
        energy_award.energy_amount,
    )
    return Ack(message=f"Producer id: {energy_award.producer_id} awarded successfully")


@router.get("/list", response_model=list[ProducerRead])
def list_producers(store: EntityStore = Depends(db.get_store)):
    return services.list_producers(store)


@router.get("/{producer_id}", response_model=ProducerRead)
def read_producer(producer_id: int, store: EntityStore = Depends(db.get_store)):
    return services.get_producer(store, producer_id)
