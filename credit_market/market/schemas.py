from pydantic import BaseModel, computed_field


class MarketSummary(BaseModel):
    num_clients: int
    num_producers: int
    num_open_orders: int
    num_claimed_orders: int
    num_settled_orders: int
    total_energy_supply: int
    client_credits: int
    producer_credits: int

    @computed_field  # type: ignore[misc]
    @property
    def total_credits(self) -> int:
        """Credits in circulation. Only energy awards change this total."""
        return self.client_credits + self.producer_credits
