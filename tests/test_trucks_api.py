# tests/test_trucks_api.py
"""End-to-end tests of /api/v1/trucks through the FastAPI app."""

from unittest.mock import patch
from fastapi.testclient import TestClient
from app.main import app

BASE = "/api/v1/trucks"


def create(client, model="Volvo FH16", status="active", details="new"):
    resp = client.post(BASE, json={"model": model, "status": status, "details": details})
    assert resp.status_code == 200, resp.text
    return resp.json()


class TestTruckLifecycle:
    def test_full_scenario(self, admin_client):
        created = create(admin_client)
        assert created["id"] is not None
        assert created["status"] == "ACTIVE"
        url = f"{BASE}/{created['id']}"

        assert admin_client.get(url).json() == created

        resp = admin_client.put(url, json={"model": "Volvo FH16", "status": "bogus", "details": "new"})
        assert resp.status_code == 400
        assert admin_client.get(url).json() == created

        resp = admin_client.delete(url)
        assert resp.status_code == 200
        assert resp.text == f"Truck with Id: {created['id']} Deleted Successfully"

        resp = admin_client.get(url)
        assert resp.status_code == 404
        assert resp.text == f"Truck not found with ID :{created['id']}"

    def test_list_all(self, admin_client):
        create(admin_client, "A")
        create(admin_client, "B", status="retired")
        body = admin_client.get(BASE).json()
        assert [t["model"] for t in body] == ["A", "B"]
        assert body[1]["status"] == "RETIRED"

    def test_update_replaces_every_field(self, admin_client):
        created = create(admin_client)
        resp = admin_client.put(f"{BASE}/{created['id']}",
                                json={"model": "Scania R", "status": "In_Maintenance", "details": None})
        assert resp.json() == {"id": created["id"], "model": "Scania R",
                               "status": "IN_MAINTENANCE", "details": None}

    def test_update_missing(self, admin_client):
        resp = admin_client.put(f"{BASE}/77", json={"model": "x", "status": "active", "details": ""})
        assert resp.status_code == 404
        assert resp.text == "Truck not found with ID to update :77"
        assert admin_client.get(BASE).json() == []

    def test_delete_missing(self, admin_client):
        resp = admin_client.delete(f"{BASE}/5")
        assert resp.status_code == 404
        assert resp.text == "Truck not found with ID to Delete :5"

    def test_create_invalid_status_writes_nothing(self, admin_client):
        resp = admin_client.post(BASE, json={"model": "x", "status": "parked", "details": ""})
        assert resp.status_code == 400
        assert "parked" in resp.text
        assert admin_client.get(BASE).json() == []

    def test_missing_field_rejected_at_decode(self, admin_client):
        resp = admin_client.post(BASE, json={"model": "x"})
        assert resp.status_code == 422

    def test_non_integer_id(self, admin_client):
        assert admin_client.get(f"{BASE}/abc").status_code == 422


class TestTruckPagination:
    def seed(self, client):
        for model in ["Volvo FH16", "Scania R", "MAN TGX", "DAF XF", "Actros"]:
            create(client, model)

    def test_defaults(self, admin_client):
        self.seed(admin_client)
        body = admin_client.get(f"{BASE}/paginated").json()
        assert [t["id"] for t in body["content"]] == [1, 2]
        assert body["totalElements"] == 5
        assert body["totalPages"] == 3
        assert body["size"] == 2
        assert body["number"] == 0
        assert body["first"] is True and body["last"] is False
        assert body["sort"] == {"property": "id", "direction": "ASC"}

    def test_override_all_params(self, admin_client):
        self.seed(admin_client)
        body = admin_client.get(f"{BASE}/paginated",
                                params={"page": 1, "size": 3, "sort": "model,desc"}).json()
        assert [t["model"] for t in body["content"]] == ["DAF XF", "Actros"]
        assert body["numberOfElements"] == 2
        assert body["last"] is True

    def test_repeated_sort_params(self, admin_client):
        self.seed(admin_client)
        resp = admin_client.get(f"{BASE}/paginated?sort=model&sort=asc&size=1")
        assert resp.json()["content"][0]["model"] == "Actros"

    def test_bad_sort_direction(self, admin_client):
        resp = admin_client.get(f"{BASE}/paginated", params={"sort": "id,sideways"})
        assert resp.status_code == 400

    def test_bad_sort_field(self, admin_client):
        resp = admin_client.get(f"{BASE}/paginated", params={"sort": "colour,asc"})
        assert resp.status_code == 400

    def test_zero_size_rejected(self, admin_client):
        assert admin_client.get(f"{BASE}/paginated", params={"size": 0}).status_code == 422


class TestUnexpectedErrors:
    def test_generic_handler_returns_500(self, client):
        boom = RuntimeError("store unavailable")
        with patch("app.services.truck_service.TruckService.get_all_trucks", side_effect=boom):
            with TestClient(app, raise_server_exceptions=False) as c:
                resp = c.get(BASE, auth=("admin", "admin123"))
        assert resp.status_code == 500
        assert resp.text == "An unexpected error occurred: store unavailable"


class TestOutOfRangeInput:
    HUGE_ID = 99999999999999999999

    def test_huge_id_rejected_at_decode(self, admin_client):
        assert admin_client.get(f"{BASE}/{self.HUGE_ID}").status_code == 422
        assert admin_client.delete(f"{BASE}/{self.HUGE_ID}").status_code == 422
        resp = admin_client.put(f"{BASE}/{self.HUGE_ID}",
                                json={"model": "x", "status": "active", "details": ""})
        assert resp.status_code == 422

    def test_id_just_inside_integer_range_is_not_found(self, admin_client):
        resp = admin_client.get(f"{BASE}/{2**31 - 1}")
        assert resp.status_code == 404

    def test_zero_id_rejected(self, admin_client):
        assert admin_client.get(f"{BASE}/0").status_code == 422

    def test_huge_page_rejected(self, admin_client):
        resp = admin_client.get(f"{BASE}/paginated", params={"page": 10**19, "size": 2})
        assert resp.status_code == 422

    def test_oversized_page_size_rejected(self, admin_client):
        assert admin_client.get(f"{BASE}/paginated", params={"size": 1001}).status_code == 422

    def test_largest_page_and_size_return_empty_page(self, admin_client):
        create(admin_client)
        body = admin_client.get(f"{BASE}/paginated", params={"page": 2**31 - 1, "size": 1000}).json()
        assert body["content"] == []
        assert body["totalElements"] == 1
