from fastapi.testclient import TestClient

from credit_market.client.models import Client


class TestClientRoutes:
    def test_create_and_read_client(self, api_client: TestClient):
        response = api_client.post(
            "/client/create", json={"name": "Acme", "phone": "555-0199"}
        )
        assert response.status_code == 201

        created = response.json()
        assert created["name"] == "Acme"
        assert created["credits"] == 0

        response = api_client.get(f"/client/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_read_missing_client(self, api_client: TestClient):
        response = api_client.get("/client/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error_type"] == "NotFound"
        assert body["error_message"] == "Client with id 999 not found"

    def test_list_clients(self, api_client: TestClient, fake_client: Client):
        response = api_client.get("/client/list")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [fake_client.id]

    def test_update_client(self, api_client: TestClient, fake_client: Client):
        response = api_client.patch(
            f"/client/update/{fake_client.id}",
            json={"name": "Renamed", "phone": "555-0000"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": f"Client id: {fake_client.id} updated successfully"
        }

        client = api_client.get(f"/client/{fake_client.id}").json()
        assert client["name"] == "Renamed"
        assert client["phone"] == "555-0000"

    def test_create_client_requires_name(self, api_client: TestClient):
        response = api_client.post("/client/create", json={"phone": "555-0199"})

        assert response.status_code == 422
