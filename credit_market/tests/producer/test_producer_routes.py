from fastapi.testclient import TestClient

from credit_market.contract.models import Contract
from credit_market.producer.models import Producer

from ..conftest import CONTRACT_PASSWORD


class TestProducerRoutes:
    def test_create_producer_hides_password(self, api_client: TestClient):
        response = api_client.post(
            "/producer/create",
            json={"name": "Solar Farm", "phone": "555-0100", "password": "secret"},
        )

        assert response.status_code == 201
        producer = response.json()
        assert set(producer) == {"id", "name", "phone", "energy_supply", "credits"}
        assert producer["credits"] == 0

    def test_award_energy(
        self,
        api_client: TestClient,
        fake_contract: Contract,
        fake_unfunded_producer: Producer,
    ):
        response = api_client.post(
            "/producer/award_energy",
            json={
                "producer_id": fake_unfunded_producer.id,
                "contract_password": CONTRACT_PASSWORD,
                "energy_amount": 10,
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": f"Producer id: {fake_unfunded_producer.id} awarded successfully"
        }

        producer = api_client.get(f"/producer/{fake_unfunded_producer.id}").json()
        assert producer["energy_supply"] == 10
        assert producer["credits"] == 50

    def test_award_energy_wrong_password(
        self, api_client: TestClient, fake_unfunded_producer: Producer
    ):
        response = api_client.post(
            "/producer/award_energy",
            json={
                "producer_id": fake_unfunded_producer.id,
                "contract_password": "wrong_password",
                "energy_amount": 10,
            },
        )

        assert response.status_code == 401
        assert response.json()["error_type"] == "Unauthorized"

    def test_list_producers(self, api_client: TestClient, fake_producer: Producer):
        response = api_client.get("/producer/list")

        assert response.status_code == 200
        producers = response.json()
        assert [p["id"] for p in producers] == [fake_producer.id]
        assert "hashed_password" not in producers[0]
