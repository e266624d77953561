from sqlalchemy import BigInteger, CheckConstraint
from sqlmodel import Field

from credit_market import utils
from credit_market.client.schemas import ClientBase

# Clients buy credit lots from producers. A Client's balance only changes
# when a producer settles an order the Client has bid on.


class Client(ClientBase, utils.KeyedRecord, table=True):
    __table_args__ = (
        CheckConstraint("credits >= 0", name="client_credits_non_negative"),
    )

    credits: int = Field(default=0, ge=0, sa_type=BigInteger)
