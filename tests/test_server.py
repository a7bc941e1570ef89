import pytest
from fastapi.testclient import TestClient

import server
from errors import GroupClosureViolation


@pytest.fixture
def client():
    return TestClient(server.app)


@pytest.fixture
def headers():
    return {server.API_KEY_HEADER: server.API_KEY}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["tables_ready"] is True


def test_api_info(client):
    assert client.get("/api-info").json()["name"] == "Verhoeff D5 API"


def test_tables(client):
    data = client.get("/tables").json()
    assert data["inv"] == [0, 4, 3, 2, 1, 5, 6, 7, 8, 9]
    assert len(data["d"]) == 10
    assert len(data["p"]) == 8


def test_self_test(client):
    data = client.get("/self-test").json()
    assert data == {"match": True, "mismatches": []}


def test_validate_requires_api_key(client):
    assert client.post("/validate", json={"number": "2363"}).status_code == 401
    response = client.post("/validate", json={"number": "2363"}, headers={server.API_KEY_HEADER: "wrong"})
    assert response.status_code == 401


def test_validate(client, headers):
    data = client.post("/validate", json={"number": "2363"}, headers=headers).json()
    assert data["success"] is True
    assert data["valid"] is True

    data = client.post("/validate", json={"number": "23-64"}, headers=headers).json()
    assert data["valid"] is False
    assert data["digits"] == "2364"


def test_generate(client, headers):
    data = client.post("/generate", json={"number": "236"}, headers=headers).json()
    assert data["success"] is True
    assert data["check_digit"] == 3
    assert data["with_check_digit"] == "2363"


def test_generate_empty(client, headers):
    data = client.post("/generate", json={"number": ""}, headers=headers).json()
    assert data["check_digit"] == 0
    assert data["with_check_digit"] == "0"


def test_validate_aadhaar(client, headers):
    number = server.get_components()["validator"].append_check_digit("82351974062")
    data = client.post("/validate-aadhaar", json={"aadhaar_number": number}, headers=headers).json()
    assert data["valid"] is True
    assert data["formatted_number"] == f"{number[:4]} {number[4:8]} {number[8:]}"


def test_validate_aadhaar_wrong_length(client, headers):
    data = client.post("/validate-aadhaar", json={"aadhaar_number": "1234 5678 901"}, headers=headers).json()
    assert data["valid"] is False
    assert "12 digits" in data["message"]


def test_construction_failure_is_reported(client, headers, monkeypatch):
    def broken():
        raise GroupClosureViolation((1, 0, 2, 3, 4), 1, 5)

    monkeypatch.setattr(server, "components", {})
    monkeypatch.setattr(server, "get_tables", broken)

    assert client.get("/health").json()["status"] == "unhealthy"
    data = client.post("/validate", json={"number": "2363"}, headers=headers).json()
    assert data["success"] is False


def test_generate_long_number(client, headers):
    number = "9876543210" * 50
    data = client.post("/generate", json={"number": number}, headers=headers).json()
    assert data["success"] is True
    assert data["with_check_digit"] == number + str(data["check_digit"])
