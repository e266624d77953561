from collections import Counter

from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.models.base import OrderState
from credit_market.market.schemas import MarketSummary
from credit_market.order.models import CreditOrder
from credit_market.producer.models import Producer


def get_market_summary(store: EntityStore) -> MarketSummary:
    """Get a summary of balances and order states across the whole market.

    All three tables are scanned inside one atomic block, so the totals are
    taken from a single consistent state.
    """
    with store.atomic():
        clients = store.scan_all(Client)
        producers = store.scan_all(Producer)
        orders = store.scan_all(CreditOrder)

    orders_by_state = Counter(order.state for order in orders)

    return MarketSummary(
        num_clients=len(clients),
        num_producers=len(producers),
        num_open_orders=orders_by_state[OrderState.OPEN],
        num_claimed_orders=orders_by_state[OrderState.CLAIMED],
        num_settled_orders=orders_by_state[OrderState.SETTLED],
        total_energy_supply=sum(p.energy_supply for p in producers),
        client_credits=sum(c.credits for c in clients),
        producer_credits=sum(p.credits for p in producers),
    )
