from fastapi import APIRouter, Depends

from credit_market.core.database import db
from credit_market.core.database.store import EntityStore
from credit_market.core.models.base import Ack

from . import services
from .schemas import ContractInitialise

# Router initialisation
router = APIRouter(tags=["Contract"])


@router.post("/initialize", response_model=Ack)
def initialize_contract(
    contract_init: ContractInitialise,
    store: EntityStore = Depends(db.get_store),
):
    services.initialize_contract(
        store, contract_init.password, contract_init.credit_per_energy
    )
    return Ack(message="Contract initiated successfully")
