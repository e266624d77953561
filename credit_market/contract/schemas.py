from pydantic import BaseModel, Field

from credit_market.utils import MAX_STORED_INTEGER


class ContractInitialise(BaseModel):
    password: str = Field(
        min_length=1,
        description="The administrator password required to award energy to producers.",
    )
    credit_per_energy: int = Field(
        ge=0,
        le=MAX_STORED_INTEGER,
        description="The number of credits minted for each unit of supplied energy.",
    )
