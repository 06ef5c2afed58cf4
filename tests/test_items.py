"""Tests for inventory endpoints."""

import logging

import pytest
from fastapi.testclient import TestClient

from app.main import create_app

MOUSE = {
    "name": "Mouse",
    "status": "available",
    "quantity": 20,
    "category": "Electronics",
    "supplier": "Tech Corp",
    "weight": 0.1,
}


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns correct response."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert "version" in data


def test_health_check(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_get_items_returns_seed(client: TestClient) -> None:
    """Test the seed inventory is listed in order."""
    response = client.get("/items")
    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data] == list(range(1, 11))
    assert data[0] == {
        "id": 1,
        "name": "Laptop",
        "status": "available",
        "quantity": 10,
        "category": "Electronics",
        "supplier": "Tech Corp",
        "weight": 2.5,
    }


def test_all_matches_items(client: TestClient) -> None:
    """Test /all is an alias of /items."""
    assert client.get("/all").json() == client.get("/items").json()


def test_get_item(client: TestClient) -> None:
    response = client.get("/item/4")
    assert response.status_code == 200
    assert response.json()["name"] == "Smartphone"
    assert response.json()["quantity"] == 0


def test_get_item_loose_id(client: TestClient) -> None:
    """Test numeric-looking path ids resolve to the same item."""
    for token in ("01", "1.0", "1e0"):
        response = client.get(f"/item/{token}")
        assert response.status_code == 200
        assert response.json()["id"] == 1


def test_get_item_not_found(client: TestClient) -> None:
    """Test getting non-existent item returns 404."""
    for token in ("999", "abc"):
        response = client.get(f"/item/{token}")
        assert response.status_code == 404
        assert response.json() == {"error": "Item not found"}


def test_create_item_example(client: TestClient) -> None:
    """Test the create, read, delete, read cycle on a new item."""
    create_response = client.post("/item", json=MOUSE)
    assert create_response.status_code == 201
    created = create_response.json()
    assert created == {"id": 11, **MOUSE}

    get_response = client.get("/item/11")
    assert get_response.status_code == 200
    assert get_response.json() == created

    delete_response = client.delete("/item/11")
    assert delete_response.status_code == 200
    assert delete_response.json() == created

    assert client.get("/item/11").status_code == 404


def test_create_item_appears_in_list(client: TestClient) -> None:
    before = client.get("/items").json()
    created = client.post("/item", json=MOUSE).json()
    after = client.get("/items").json()
    assert created["id"] == max(item["id"] for item in before) + 1
    assert after == before + [created]


def test_create_item_ids_stay_unique(client: TestClient) -> None:
    client.delete("/item/3")
    client.post("/item", json=MOUSE)
    client.post("/item", json={**MOUSE, "name": "Keyboard"})
    client.delete("/item/12")
    client.post("/item", json={**MOUSE, "name": "Monitor"})

    ids = [item["id"] for item in client.get("/items").json()]
    assert len(ids) == len(set(ids))
    assert ids[-1] == 12


def test_create_item_zero_numbers_allowed(client: TestClient) -> None:
    response = client.post("/item", json={**MOUSE, "quantity": 0, "weight": 0})
    assert response.status_code == 201
    assert response.json()["quantity"] == 0
    assert response.json()["weight"] == 0.0


def test_create_item_coerces_numbers(client: TestClient) -> None:
    response = client.post("/item", json={**MOUSE, "quantity": "12 boxes", "weight": "1.5kg"})
    assert response.status_code == 201
    assert response.json()["quantity"] == 12
    assert response.json()["weight"] == 1.5


def test_create_item_non_numeric_is_accepted(client: TestClient) -> None:
    """Test non-numeric quantity and weight are stored, serialized as null."""
    response = client.post("/item", json={**MOUSE, "quantity": "lots", "weight": None})
    assert response.status_code == 201
    data = response.json()
    assert data["quantity"] is None
    assert data["weight"] is None
    assert client.get(f"/item/{data['id']}").json() == data


def test_create_item_missing_fields(client: TestClient) -> None:
    """Test any missing required field is rejected without changing the list."""
    count = len(client.get("/items").json())

    for field in MOUSE:
        payload = {key: value for key, value in MOUSE.items() if key != field}
        response = client.post("/item", json=payload)
        assert response.status_code == 400, field
        assert response.json() == {"error": "Missing required fields"}

    for field in ("name", "status", "category", "supplier"):
        response = client.post("/item", json={**MOUSE, field: ""})
        assert response.status_code == 400, field

    assert len(client.get("/items").json()) == count


def test_create_item_without_body(client: TestClient) -> None:
    response = client.post("/item")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_create_item_malformed_body(client: TestClient) -> None:
    response = client.post(
        "/item", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_get_categories(client: TestClient) -> None:
    response = client.get("/categories")
    assert response.status_code == 200
    assert response.json() == [
        "Electronics",
        "Furniture",
        "Office Supplies",
        "Tools",
        "Appliances",
        "Groceries",
        "Clothing",
        "Lighting",
    ]


def test_by_category(client: TestClient) -> None:
    response = client.get("/byCategory", params={"category": "Furniture"})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [2, 10]


def test_by_category_is_case_sensitive(client: TestClient) -> None:
    response = client.get("/byCategory", params={"category": "furniture"})
    assert response.status_code == 200
    assert response.json() == []


def test_by_category_without_category(client: TestClient) -> None:
    response = client.get("/byCategory")
    assert response.status_code == 200
    assert len(response.json()) == 10


def test_delete_item(client: TestClient) -> None:
    response = client.delete("/item/5")
    assert response.status_code == 200
    assert response.json()["name"] == "Drill Machine"

    ids = [item["id"] for item in client.get("/items").json()]
    assert ids == [1, 2, 3, 4, 6, 7, 8, 9, 10]


def test_delete_nonexistent_item(client: TestClient) -> None:
    """Test deleting non-existent item returns 404."""
    response = client.delete("/item/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}
    assert len(client.get("/items").json()) == 10


def test_supplier_items(client: TestClient) -> None:
    response = client.get("/supplier-items", params={"supplier": "Tech Corp"})
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Laptop"]


def test_supplier_items_no_match(client: TestClient) -> None:
    response = client.get("/supplier-items", params={"supplier": "Nobody Ltd."})
    assert response.status_code == 200
    assert response.json() == []


def test_supplier_items_requires_supplier(client: TestClient) -> None:
    response = client.get("/supplier-items")
    assert response.status_code == 400
    assert response.json() == {"error": "Supplier parameter required"}


def test_unknown_route(client: TestClient) -> None:
    response = client.get("/nope")
    assert response.status_code == 404
    assert "error" in response.json()


def test_wrong_method(client: TestClient) -> None:
    response = client.put("/item/1", json=MOUSE)
    assert response.status_code == 405
    assert "error" in response.json()


def test_cors_any_origin(client: TestClient) -> None:
    response = client.get("/items", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_create_item_falsy_non_text_field(client: TestClient) -> None:
    """Test falsy values of any type count as missing."""
    for value in (False, 0, None):
        response = client.post("/item", json={**MOUSE, "name": value})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}


def test_access_and_error_log_lines(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    """Test a failing request logs one error line and one access line."""
    caplog.set_level(logging.INFO)

    client.get("/item/999")

    messages = [record.getMessage() for record in caplog.records]
    assert "[ERROR] 404 GET /item/999 - Item not found" in messages
    access = [message for message in messages if message.startswith("404 GET /item/999 - ")]
    assert len(access) == 1
    assert access[0].endswith("ms")


def test_access_log_includes_query(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    client.get("/byCategory", params={"category": "Tools"})

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("200 GET /byCategory?category=Tools - ") for message in messages)


def test_listing_failure_uses_server_message(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test unexpected store failures on listings answer 500 with a fixed message."""

    def broken() -> list:
        raise RuntimeError("collection unavailable")

    store = client.app.state.store
    monkeypatch.setattr(store, "list_categories", broken)
    monkeypatch.setattr(store, "list_items", broken)

    response = client.get("/categories")
    assert response.status_code == 500
    assert response.json() == {"error": "Server error retrieving categories"}

    response = client.get("/items")
    assert response.status_code == 500
    assert response.json() == {"error": "Server error retrieving inventory"}


def test_unhandled_failure_answers_500(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test an exception escaping a handler still gets the error body and log."""
    caplog.set_level(logging.INFO)

    def broken(item_id: object) -> None:
        raise RuntimeError("kaboom")

    monkeypatch.setattr(client.app.state.store, "get_item", broken)

    response = client.get("/item/1")
    assert response.status_code == 500
    assert response.json() == {"error": "kaboom"}
    messages = [record.getMessage() for record in caplog.records]
    assert "[ERROR] 500 GET /item/1 - kaboom" in messages


def test_server_start_restores_seed() -> None:
    """Test starting the application again serves the seed inventory."""
    application = create_app()
    with TestClient(application) as first:
        first.post("/item", json=MOUSE)
        first.delete("/item/1")

    with TestClient(application) as second:
        ids = [item["id"] for item in second.get("/items").json()]
        assert ids == list(range(1, 11))
