"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from syrup_calculator.api.app import create_app


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "base_id": "test-base",
        "flavor_id": "test-flavor",
        "volume": 250,
        "target_caffeine": 80,
        "serving_size": 250,
    }
    payload.update(overrides)
    return payload


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_bases_uses_yield_key(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/bases")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["id"] == "test-base"
    assert data[0]["yield"] == {"syrup": 1000, "drink": 5000}


def test_list_flavors_by_base(container) -> None:
    client = TestClient(create_app(container))

    assert len(client.get("/flavors").json()) == 2
    assert client.get("/flavors", params={"base_id": "plain"}).json() == []


def test_calculate_returns_recipe_and_verdict(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculate", json=_payload())

    assert response.status_code == 200
    data = response.json()
    assert data["syrup_volume"] == 50
    assert data["water_volume"] == 200
    amounts = {item["id"]: item["amount"] for item in data["ingredients"]}
    assert amounts["caffeine"] == 0.08
    assert data["ingredients"][0]["unit"] == "g"
    assert data["safety"]["passed"] is True


def test_calculate_reports_blocking_dose(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculate", json=_payload(target_caffeine=400))

    assert response.status_code == 200
    safety = response.json()["safety"]
    assert safety["passed"] is False
    assert safety["errors"] == ["Caffeine exceeds safe serving limit (200mg)"]


def test_calculate_unknown_recipe_is_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculate", json=_payload(flavor_id="nope"))

    assert response.status_code == 404


def test_calculate_incompatible_pair_is_409(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculate", json=_payload(base_id="plain"))

    assert response.status_code == 409


def test_calculate_invalid_volume_is_422_with_field(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calculate", json=_payload(volume=0))

    assert response.status_code == 422
    assert response.json()["field"] == "volume"
