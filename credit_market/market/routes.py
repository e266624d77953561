from fastapi import APIRouter, Depends

from credit_market.core.database import db
from credit_market.core.database.store import EntityStore

from . import services
from .schemas import MarketSummary

# Router initialisation
router = APIRouter(tags=["Market"])


@router.get("/summary", response_model=MarketSummary)
def read_market_summary(store: EntityStore = Depends(db.get_store)):
    return services.get_market_summary(store)
