from sqlalchemy import BigInteger, CheckConstraint
from sqlmodel import Field

from credit_market import utils
from credit_market.producer.schemas import ProducerBase, ProducerRead

# Producers earn credits when the contract administrator awards them for
# supplied renewable energy, and sell those credits through credit orders.


class Producer(ProducerBase, utils.KeyedRecord, table=True):
    __table_args__ = (
        CheckConstraint("credits >= 0", name="producer_credits_non_negative"),
        CheckConstraint("energy_supply >= 0", name="producer_energy_non_negative"),
    )

    hashed_password: str
    energy_supply: int = Field(default=0, ge=0, sa_type=BigInteger)
    credits: int = Field(default=0, ge=0, sa_type=BigInteger)

    def to_read(self) -> ProducerRead:
        return ProducerRead(
            id=self.id,
            name=self.name,
            phone=self.phone,
            energy_supply=self.energy_supply,
            credits=self.credits,
        )
