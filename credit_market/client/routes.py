from fastapi import APIRouter, Depends

from credit_market.core.database import db
from credit_market.core.database.store import EntityStore
from credit_market.core.models.base import Ack

from . import services
from .schemas import ClientCreate, ClientRead, ClientUpdate

# Router initialisation
router = APIRouter(tags=["Clients"])


@router.post("/create", status_code=201, response_model=ClientRead)
def create_client(
    client_base: ClientCreate,
    store: EntityStore = Depends(db.get_store),
):
    return services.register_client(store, client_base.name, client_base.phone)


@router.get("/list", response_model=list[ClientRead])
def list_clients(store: EntityStore = Depends(db.get_store)):
    return services.list_clients(store)


@router.get("/{client_id}", response_model=ClientRead)
def read_client(client_id: int, store: EntityStore = Depends(db.get_store)):
    return services.get_client(store, client_id)


@router.patch("/update/{client_id}", response_model=Ack)
def update_client(
    client_id: int,
    client_update: ClientUpdate,
    store: EntityStore = Depends(db.get_store),
):
    services.update_client(store, client_id, client_update.name, client_update.phone)
    return Ack(message=f"Client id: {client_id} updated successfully")
