"""
Credit order settlement.

Orders follow a one-way state machine::

    Open (no client, unpaid) -> Claimed (client set, unpaid) -> Settled (paid)

Placing an order checks the Producer's balance but does not reserve it, so a
Producer may have several open orders whose totals exceed its credits; the
balance is enforced again when an order is settled. Settlement moves the
order's ``min_offer_per_credit`` value, the single accepted price, from the
Producer to the Client.
"""

from credit_market.client.models import Client
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import (
    AlreadyPaid,
    BidTooLow,
    DuplicateBid,
    InsufficientBalance,
    NotFound,
    NotYetBid,
    Unauthorized,
)
from credit_market.ledger.services import credit_client, debit_producer
from credit_market.logging_config import logger
from credit_market.order.models import CreditOrder
from credit_market.producer.models import Producer
from credit_market.producer.services import check_producer_password
from credit_market.utils import check_amount


def _require_order(store: EntityStore, order_id: int) -> CreditOrder:
    order = store.get(CreditOrder, order_id)
    if order is None:
        raise NotFound(f"Credit order with id {order_id} not found")
    return order


def place_order(
    store: EntityStore, producer_id: int, credits: int, min_offer_per_credit: int
) -> CreditOrder:
    check_amount("Credits", credits)
    check_amount("Minimum offer per credit", min_offer_per_credit)

    with store.atomic():
        producer = store.get(Producer, producer_id)
        if producer is None:
            raise NotFound(f"Producer with id {producer_id} not found")

        if producer.credits < credits:
            raise InsufficientBalance(producer_id, credits, producer.credits)

        order = CreditOrder(
            id=store.next_id(),
            producer_id=producer_id,
            client_id=None,
            credits=credits,
            min_offer_per_credit=min_offer_per_credit,
            paid=False,
        )
        store.create(order)

    logger.info(
        f"Producer {producer_id} placed order {order.id} for {credits} credits "
        f"at a minimum of {min_offer_per_credit}"
    )
    return order


def get_order(store: EntityStore, order_id: int) -> CreditOrder:
    with store.atomic():
        return _require_order(store, order_id)


def list_orders(
    store: EntityStore,
    producer_id: int | None = None,
    client_id: int | None = None,
) -> list[CreditOrder]:
    with store.atomic():
        orders = store.scan_all(CreditOrder)

    if producer_id is not None:
        orders = [o for o in orders if o.producer_id == producer_id]
    if client_id is not None:
        orders = [o for o in orders if o.client_id == client_id]
    return orders


def list_open_orders(store: EntityStore) -> list[CreditOrder]:
    """All orders that have not been settled, whether or not they carry a bid."""
    with store.atomic():
        return [o for o in store.scan_all(CreditOrder) if not o.paid]


def place_bid(
    store: EntityStore, client_id: int, order_id: int, offer_per_credit: int
) -> CreditOrder:
    """Claim an unpaid order for a Client at ``offer_per_credit``.

    A later bid from a different Client replaces the current claimant, and the
    order's minimum rises to every accepted offer. No credits move until the
    Producer settles the order.

    Raises:
        InvalidRequest: If the offer is negative or too large to store.
        NotFound: If the order or the Client does not exist.
        AlreadyPaid: If the order has been settled.
        DuplicateBid: If the Client already holds the claim on the order.
        BidTooLow: If the offer is below the order's current minimum.
    """
    check_amount("Offer per credit", offer_per_credit)

    with store.atomic():
        order = _require_order(store, order_id)

        if store.get(Client, client_id) is None:
            raise NotFound(f"Client with id {client_id} not found")

        if order.paid:
            raise AlreadyPaid(order_id)

        if order.client_id == client_id:
            raise DuplicateBid(client_id, order_id)

        if offer_per_credit < order.min_offer_per_credit:
            raise BidTooLow(offer_per_credit, order.min_offer_per_credit)

        previous_client_id = order.client_id
        order.client_id = client_id
        order.min_offer_per_credit = offer_per_credit
        store.insert(order)

    if previous_client_id is not None:
        logger.info(
            f"Client {client_id} outbid client {previous_client_id} on order "
            f"{order_id} at {offer_per_credit}"
        )
    else:
        logger.info(f"Client {client_id} bid {offer_per_credit} on order {order_id}")
    return order


def settle_order(
    store: EntityStore, order_id: int, producer_password: str
) -> CreditOrder:
    """Mark a claimed order paid and transfer its price from Producer to Client.

    The debit, the credit and the state change form one unit: if any step
    fails, none of them is visible afterwards.

    Raises:
        NotFound: If the order, its Producer or its Client does not exist.
        Unauthorized: If ``producer_password`` is not the Producer's password.
        AlreadyPaid: If the order has already been settled.
        NotYetBid: If no Client has bid on the order.
        InsufficientBalance: If the Producer holds fewer credits than the price.
    """
    with store.atomic():
        order = _require_order(store, order_id)

        producer = store.get(Producer, order.producer_id)
        if producer is None:
            raise NotFound(f"Producer with id {order.producer_id} not found")

        if not check_producer_password(producer, producer_password):
            logger.warning(f"Rejected producer password for order {order_id}")
            raise Unauthorized("Unauthorized, method only available to producers")

        if order.paid:
            raise AlreadyPaid(order_id)

        if order.client_id is None:
            raise NotYetBid(order_id)

        amount = order.min_offer_per_credit
        debit_producer(store, order.producer_id, amount)
        credit_client(store, order.client_id, amount)

        order.paid = True
        store.insert(order)

    logger.info(
        f"Settled order {order_id}: moved {amount} credits from producer "
        f"{order.producer_id} to client {order.client_id}"
    )
    return order
