import pytest

import server


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("SYNONYM_EXPAND", "false")
    monkeypatch.setenv("SYNONYM_DEDUP", "true")
    monkeypatch.setenv("SYNONYM_LOWERCASE", "true")
    app = server.create_app()
    with app.test_client() as client:
        yield client


def test_root_ready(client):
    response = client.get("/api/synonyms/")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_parse_returns_edges(client):
    response = client.post(
        "/api/synonyms/parse", json={"rules": "a, b|plz, plaza", "expand": True}
    )
    assert response.status_code == 200
    data = response.get_json()
    assert data["edges"] == [
        {"input": "a", "output": "b", "include_original": True},
        {"input": "b", "output": "a", "include_original": True},
        {"input": "plz", "output": "plaza", "include_original": True},
        {"input": "plaza", "output": "plz", "include_original": True},
    ]
    assert data["graph"]["max_horizontal_context"] == 1


def test_parse_uses_configured_defaults(client):
    response = client.post("/api/synonyms/parse", json={"rules": "A, B"})
    assert response.status_code == 200
    assert response.get_json()["edges"] == [
        {"input": "a", "output": "a", "include_original": False},
        {"input": "b", "output": "a", "include_original": False},
    ]


def test_parse_rejects_invalid_mapping(client):
    response = client.post("/api/synonyms/parse", json={"rules": "a, b, c"})
    assert response.status_code == 400
    assert "synonym mapping is invalid" in response.get_json()["error"]


def test_parse_requires_rules_string(client):
    response = client.post("/api/synonyms/parse", json={"rules": 42})
    assert response.status_code == 400


def test_validate(client):
    ok = client.post("/api/synonyms/validate", json={"rules": "a, b"})
    assert ok.get_json() == {"valid": True}

    bad = client.post("/api/synonyms/validate", json={"rules": "a"})
    assert bad.status_code == 400
    assert bad.get_json()["valid"] is False
