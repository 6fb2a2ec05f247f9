import pytest
from unittest.mock import patch, AsyncMock
from fastapi.testclient import TestClient
from dbplayground.main import app
from dbplayground.exceptions import DatabaseError

@pytest.fixture
def client() -> TestClient:
    return TestClient(app)

def test_healthz(client: TestClient):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]

def test_request_id_is_echoed(client: TestClient):
    response = client.get("/healthz", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

def test_create_and_read_user(client: TestClient):
    response = client.post("/users", json={"first_name": "Nick", "last_name": "Schmitt", "age": 28})
    assert response.status_code == 201
    created = response.json()
    assert created["first_name"] == "Nick"
    assert created["id"]

    response = client.get(f"/users/{created['id']}")
    assert response.status_code == 200
    assert response.json()["last_name"] == "Schmitt"

def test_create_rejects_invalid_payload(client: TestClient):
    response = client.post("/users", json={"first_name": "", "last_name": "Bell"})
    assert response.status_code == 422

def test_list_and_filter(client: TestClient, make_user):
    make_user("Rome", "Bell", 33)
    make_user("Nick", "Schmitt", 28)

    response = client.get("/users")
    assert [u["first_name"] for u in response.json()] == ["Rome", "Nick"]

    response = client.get("/users", params={"first_name": "Rome"})
    assert [u["last_name"] for u in response.json()] == ["Bell"]

def test_names(client: TestClient, make_user):
    make_user("Rome", "Bell", 33)
    make_user("Brian", "Krabec", 27)

    response = client.get("/users/names")
    assert response.json() == ["Rome Bell", "Brian Krabec"]

def test_lookup_found(client: TestClient, make_user):
    make_user("Nick", "Schmitt", 28)

    response = client.get("/users/lookup", params={"first_name": "Nick"})
    assert response.status_code == 200
    assert response.json()["age"] == 28

def test_lookup_missing_is_404(client: TestClient):
    response = client.get("/users/lookup", params={"first_name": "Nick"})
    assert response.status_code == 404
    detail = response.json()["detail"]
    assert detail["error"] == "UserNotFoundError"
    assert detail["where"] == {"first_name": "Nick"}

def test_unknown_user_id_is_404(client: TestClient):
    response = client.get("/users/424242")
    assert response.status_code == 404

def test_database_error_maps_to_500(client: TestClient):
    with patch("dbplayground.routers.users.find_all", new_callable=AsyncMock) as mock_find_all:
        mock_find_all.side_effect = DatabaseError("find_all", "database is locked")
        response = client.get("/users")

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["error"] == "DatabaseError"
    assert detail["operation"] == "find_all"
    assert detail["database_error"] == "database is locked"

def test_unexpected_error_maps_to_generic_500(client: TestClient):
    with patch("dbplayground.routers.users.find_all", new_callable=AsyncMock) as mock_find_all:
        mock_find_all.side_effect = RuntimeError("boom")
        response = client.get("/users/names")

    assert response.status_code == 500
    assert response.json()["detail"] == {
        "error": "InternalServerError",
        "message": "An unexpected error occurred",
    }
