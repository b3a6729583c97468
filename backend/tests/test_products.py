def test_create_normalises_fields(make_product):
    product = make_product(name=" Widget ", sku=" abc1 ", imageUrl="/img/w.png")
    assert product["name"] == "Widget"
    assert product["sku"] == "ABC1"
    assert product["quantity"] == 10
    assert product["imageUrl"] == "/img/w.png"


def test_quantity_defaults_to_zero(auth_client):
    response = auth_client.post(
        "/api/products",
        json={"name": "Bolt", "price": 0.1, "category": "Hardware", "sku": "B-1"},
    )
    assert response.status_code == 201
    assert response.json()["data"]["quantity"] == 0
    assert response.json()["data"]["imageUrl"] is None


def test_duplicate_sku_rejected(auth_client, make_product):
    make_product(sku="ABC1")
    response = auth_client.post(
        "/api/products",
        json={"name": "Other", "price": 2, "quantity": 1, "category": "Hardware", "sku": "abc1"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Error creating product"
    assert "sku: SKU 'ABC1' already exists" in body["error"]
    assert auth_client.get("/api/products").json()["count"] == 1


def test_missing_required_fields(auth_client):
    response = auth_client.post("/api/products", json={"name": "Nameless price"})
    assert response.status_code == 400
    error = response.json()["error"]
    assert "Price is required" in error
    assert "Category is required" in error
    assert "SKU is required" in error


def test_negative_values_rejected(auth_client):
    response = auth_client.post(
        "/api/products",
        json={"name": "W", "price": -1, "quantity": -2, "category": "c", "sku": "neg"},
    )
    assert response.status_code == 400
    assert "Price cannot be negative" in response.json()["error"]
    assert "Quantity cannot be negative" in response.json()["error"]


def test_wrong_types_are_bad_request(auth_client):
    response = auth_client.post(
        "/api/products",
        json={"name": "W", "price": "cheap", "category": "c", "sku": "t"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_list_sorted_and_filtered(auth_client, make_product):
    make_product(name="Zinc plate", sku="Z1", category="Metal")
    make_product(name="Brass hinge", sku="B1", category="Metal", description="door fitting")
    make_product(name="Oak board", sku="O1", category="Wood")

    everything = auth_client.get("/api/products").json()
    assert [p["name"] for p in everything["data"]] == ["Brass hinge", "Oak board", "Zinc plate"]

    metal = auth_client.get("/api/products", params={"category": "Metal"}).json()
    assert metal["count"] == 2

    search = auth_client.get("/api/products", params={"search": "DOOR"}).json()
    assert [p["sku"] for p in search["data"]] == ["B1"]


def test_update_is_partial_and_revalidated(auth_client, make_product):
    product = make_product(sku="ABC1")
    url = f"/api/products/{product['id']}"

    response = auth_client.put(url, json={"price": 12.25})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["price"] == 12.25
    assert data["name"] == "Widget"
    assert data["sku"] == "ABC1"

    # Keeping its own SKU is fine, taking another product's is not
    assert auth_client.put(url, json={"sku": "abc1"}).status_code == 200
    make_product(sku="XYZ9")
    clash = auth_client.put(url, json={"sku": "xyz9"})
    assert clash.status_code == 400
    assert clash.json()["message"] == "Error updating product"

    invalid = auth_client.put(url, json={"name": None})
    assert invalid.status_code == 400
    assert auth_client.get(url).json()["data"]["sku"] == "ABC1"


def test_delete_product(auth_client, make_product):
    product = make_product()
    url = f"/api/products/{product['id']}"
    response = auth_client.delete(url)
    assert response.json() == {"success": True, "message": "Product deleted successfully", "data": {}}
    assert auth_client.get(url).status_code == 404


def test_missing_product_not_found(auth_client):
    assert auth_client.get("/api/products/77").json() == {"success": False, "message": "Product not found"}
    assert auth_client.put("/api/products/77", json={"price": 1}).status_code == 404
    assert auth_client.delete("/api/products/77").status_code == 404


def test_null_quantity_is_rejected(auth_client, make_product):
    product = make_product(quantity=10)
    url = f"/api/products/{product['id']}"

    response = auth_client.put(url, json={"quantity": None})
    assert response.status_code == 400
    assert "quantity: Quantity is required" in response.json()["error"]
    assert auth_client.get(url).json()["data"]["quantity"] == 10

    created = auth_client.post(
        "/api/products",
        json={"name": "Bolt", "price": 1, "quantity": None, "category": "Hardware", "sku": "NULLQ"},
    )
    assert created.status_code == 400
    assert created.json()["message"] == "Error creating product"
    assert auth_client.get("/api/products").json()["count"] == 1
