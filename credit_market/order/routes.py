from fastapi import APIRouter, Depends, Query

from credit_market.core.database import db
from credit_market.core.database.store import EntityStore
from credit_market.core.models.base import Ack

from . import services
from .schemas import BidCreate, CreditOrderCreate, CreditOrderRead, SettlementRequest

# Router initialisation
router = APIRouter(tags=["Orders"])


@router.post("/create", status_code=201, response_model=CreditOrderRead)
def create_order(
    order_base: CreditOrderCreate,
    store: EntityStore = Depends(db.get_store),
):
    return services.place_order(
        store,
        order_base.producer_id,
        order_base.credits,
        order_base.min_offer_per_credit,
    )


@router.get("/open", response_model=list[CreditOrderRead])
def list_open_orders(store: EntityStore = Depends(db.get_store)):
    return services.list_open_orders(store)


@router.get("/list", response_model=list[CreditOrderRead])
def list_orders(
    producer_id: int | None = Query(None, description="Filter by producer ID"),
    client_id: int | None = Query(None, description="Filter by bidding client ID"),
    store: EntityStore = Depends(db.get_store),
):
    return services.list_orders(store, producer_id=producer_id, client_id=client_id)


@router.get("/{order_id}", response_model=CreditOrderRead)
def read_order(order_id: int, store: EntityStore = Depends(db.get_store)):
    return services.get_order(store, order_id)


@router.post("/bid", response_model=Ack)
def place_bid(bid: BidCreate, store: EntityStore = Depends(db.get_store)):
    services.place_bid(store, bid.client_id, bid.order_id, bid.offer_per_credit)
    return Ack(message="Client bid successfully")


@router.post("/settle", response_model=Ack)
def settle_order(
    settlement: SettlementRequest,
    store: EntityStore = Depends(db.get_store),
):
    services.settle_order(store, settlement.order_id, settlement.producer_password)
    return Ack(message="Credit order marked as paid")
