from datetime import datetime, timezone

import pytest

ORDER = {
    "table_number": 12,
    "line_items": [
        {"id": "1", "name": "Cerveza Corona", "unit_price": 4500, "quantity": 2},
        {"id": "2", "name": "Café Americano", "unit_price": 2800, "quantity": 1},
    ],
    "note": "sin hielo",
}


@pytest.fixture
def order_id(client):
    return client.post("/orders/", json=ORDER).json()["id"]


def test_create_order(client):
    response = client.post("/orders/", json=ORDER)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pendiente"
    assert body["total_amount"] == 11800
    assert body["delivered_at"] is None


@pytest.mark.parametrize("table_number", [0, 501, -1])
def test_create_order_with_invalid_table(client, table_number):
    response = client.post("/orders/", json={**ORDER, "table_number": table_number})

    assert response.status_code == 400
    assert "solution" in response.json()


def test_create_order_without_items(client):
    assert client.post("/orders/", json={**ORDER, "line_items": []}).status_code == 422


def test_view_lists_active_and_stats(client, order_id):
    body = client.get("/orders/").json()

    assert [order["id"] for order in body["active"]] == [order_id]
    assert body["history"] == []
    assert body["stats"] == {"pending": 1, "in_preparation": 0, "ready": 0, "delivered": 0}


def test_view_respects_date_filter(client, order_id):
    body = client.get("/orders/", params={"date_from": "2020-01-01", "date_to": "2020-01-02"}).json()

    assert body["orders"] == []
    assert body["date_from"] == "2020-01-01"


def test_status_update_moves_to_history(client, order_id):
    response = client.patch(f"/orders/{order_id}/status", json={"status": "Entregado"})

    assert response.status_code == 200
    assert response.json()["delivered_at"] is not None

    view = client.get("/orders/").json()
    assert view["active"] == []
    assert [order["id"] for order in view["history"]] == [order_id]


def test_unknown_status(client, order_id):
    response = client.patch(f"/orders/{order_id}/status", json={"status": "Cancelado"})

    assert response.status_code == 400


def test_status_update_on_missing_order(client):
    response = client.patch("/orders/no-existe/status", json={"status": "Preparado"})

    assert response.status_code == 404


def test_get_order(client, order_id):
    assert client.get(f"/orders/{order_id}").json()["id"] == order_id
    assert client.get("/orders/no-existe").status_code == 404


def test_transitions(client, order_id):
    body = client.get(f"/orders/{order_id}/transitions").json()

    assert body["current"] == "Pendiente"
    assert body["next"] == "En Preparación"
    assert body["options"] == ["En Preparación", "Preparado", "Entregado"]
    assert body["is_terminal"] is False


def test_delivered_has_no_transitions(client, order_id):
    client.patch(f"/orders/{order_id}/status", json={"status": "Entregado"})

    body = client.get(f"/orders/{order_id}/transitions").json()

    assert body["options"] == []
    assert body["next"] is None
    assert body["is_terminal"] is True


def test_refresh(client, order_id):
    response = client.post("/orders/refresh")

    assert response.status_code == 200
    assert len(response.json()["orders"]) == 1


def test_order_card(client, order_id):
    response = client.get(f"/orders/{order_id}/card")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    card = response.text
    assert "MESA 12" in card
    assert "2x Cerveza Corona" in card
    assert "$9.000" in card
    assert "$11.800" in card
    assert "Nota: sin hielo" in card


def test_view_with_date_range_includes_orders_of_that_day(client, order_id):
    today = datetime.now(timezone.utc).date().isoformat()

    response = client.get("/orders/", params={"date_from": today, "date_to": today})

    assert response.status_code == 200
    assert [order["id"] for order in response.json()["orders"]] == [order_id]
