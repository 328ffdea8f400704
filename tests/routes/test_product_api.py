PRODUCT = {"name": "Empanada de Pino", "price": 2500, "category": "alimentos"}


def test_menu_is_gated_and_grouped(client, menu):
    sections = client.get("/menu/").json()

    assert [section["category"] for section in sections] == ["alimentos", "bebidas"]
    names = {section["category"]: [p["name"] for p in section["products"]] for section in sections}
    assert names["alimentos"] == ["Hamburguesa Clásica"]
    assert names["bebidas"] == ["Café Americano", "Cerveza Corona"]


def test_admin_list_includes_every_category(client, menu):
    products = client.get("/products/").json()

    assert len(products) == 6
    assert {p["category"] for p in products} == {"alimentos", "bebidas", "postres", "snacks"}


def test_create_product_shows_in_menu(client, menu):
    client.get("/menu/")

    response = client.post("/products/", json=PRODUCT)

    assert response.status_code == 201
    alimentos = client.get("/menu/").json()[0]["products"]
    assert "Empanada de Pino" in [p["name"] for p in alimentos]


def test_create_product_with_invalid_category(client):
    response = client.post("/products/", json={**PRODUCT, "category": "cocteles"})

    assert response.status_code == 400
    assert client.get("/products/").json() == []


def test_update_product_availability(client, menu):
    response = client.put(f"/products/{menu['cerveza']}", json={"available": False})

    assert response.status_code == 200
    bebidas = client.get("/menu/").json()[1]["products"]
    assert [p["name"] for p in bebidas] == ["Café Americano"]


def test_update_missing_product(client):
    assert client.put("/products/no-existe", json={"price": 100}).status_code == 404


def test_delete_product(client, menu):
    response = client.delete(f"/products/{menu['torta']}")

    assert response.json() == {"message": "Producto eliminado con éxito"}
    assert len(client.get("/products/").json()) == 5


def test_stats(client, menu):
    body = client.get("/products/stats").json()

    assert body["total"] == 6
    assert body["available"] == 5
    assert body["unavailable"] == 1
    assert body["categories"] == ["alimentos", "bebidas", "postres", "snacks"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "environment": "test"}
