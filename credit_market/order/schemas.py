from pydantic import BaseModel, computed_field
from sqlmodel import Field, SQLModel

from credit_market.core.models.base import OrderState
from credit_market.utils import MAX_STORED_INTEGER


class CreditOrderBase(SQLModel):
    producer_id: int = Field(description="The Producer selling the credit lot.")
    credits: int = Field(
        ge=0,
        le=MAX_STORED_INTEGER,
        description="The number of credits in the lot, fixed when the order is placed.",
    )
    min_offer_per_credit: int = Field(
        ge=0,
        le=MAX_STORED_INTEGER,
        description="""The lowest acceptable offer. Each accepted bid raises it to the bid value,
                       and settlement moves exactly this amount from the Producer to the Client.""",
    )


class CreditOrderCreate(CreditOrderBase):
    pass


class CreditOrderRead(CreditOrderBase):
    id: int
    client_id: int | None = None
    paid: bool = False

    @computed_field  # type: ignore[misc]
    @property
    def state(self) -> OrderState:
        return OrderState.of(self.paid, self.client_id)


class BidCreate(BaseModel):
    client_id: int
    order_id: int
    offer_per_credit: int = Field(ge=0, le=MAX_STORED_INTEGER)


class SettlementRequest(BaseModel):
    order_id: int
    producer_password: str
