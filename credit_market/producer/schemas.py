from pydantic import BaseModel
from sqlmodel import Field, SQLModel

from credit_market.utils import MAX_STORED_INTEGER


class ProducerBase(SQLModel):
    name: str = Field(min_length=1, description="The display name of the Producer.")
    phone: str = Field(description="A contact phone number for the Producer.")


class ProducerCreate(ProducerBase):
    password: str = Field(
        min_length=1,
        description="The password the Producer uses to settle its credit orders.",
    )


class ProducerRead(ProducerBase):
    id: int
    energy_supply: int = Field(
        ge=0,
        le=MAX_STORED_INTEGER,
        description="Total renewable energy the Producer has reported to the contract.",
    )
    credits: int = Field(ge=0, le=MAX_STORED_INTEGER)


class EnergyAward(BaseModel):
    producer_id: int
    contract_password: str
    energy_amount: int = Field(ge=0, le=MAX_STORED_INTEGER)
