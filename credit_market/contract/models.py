from sqlalchemy import BigInteger
from sqlmodel import Field

from credit_market import utils

# The contract is a singleton: one administrator password and one
# energy-to-credit conversion rate for the whole market, stored at a fixed key.

CONTRACT_KEY = 0


class Contract(utils.KeyedRecord, table=True):
    hashed_password: str = Field(description="Hash of the contract administrator password.")
    credit_per_energy: int = Field(ge=0, sa_type=BigInteger)
