from sqlalchemy import BigInteger
from sqlmodel import Field

from credit_market import utils
from credit_market.core.models.base import OrderState
from credit_market.order.schemas import CreditOrderBase

# A CreditOrder is a Producer's offer to sell a fixed lot of credits. It moves
# Open -> Claimed when a Client bids, and Claimed -> Settled when the Producer
# marks it paid. Settled orders are never modified again.


class CreditOrder(CreditOrderBase, utils.KeyedRecord, table=True):
    __tablename__: str = "credit_order"  # type: ignore

    producer_id: int = Field(foreign_key="producer.id", index=True, sa_type=BigInteger)
    client_id: int | None = Field(
        default=None, foreign_key="client.id", index=True, sa_type=BigInteger
    )
    credits: int = Field(ge=0, sa_type=BigInteger)
    min_offer_per_credit: int = Field(ge=0, sa_type=BigInteger)
    paid: bool = Field(default=False)

    @property
    def state(self) -> OrderState:
        return OrderState.of(self.paid, self.client_id)
