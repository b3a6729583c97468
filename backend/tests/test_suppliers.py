def test_supplier_crud(auth_client):
    response = auth_client.post(
        "/api/suppliers",
        json={"name": "Acme", "contactName": "Jo Park", "email": "sales@acme.com", "phone": "555-0100"},
    )
    assert response.status_code == 201
    supplier = response.json()["data"]
    assert supplier["contactName"] == "Jo Park"
    url = f"/api/suppliers/{supplier['id']}"

    assert auth_client.get(url).json()["data"]["email"] == "sales@acme.com"

    updated = auth_client.put(url, json={"address": "1 Main St"})
    assert updated.status_code == 200
    assert updated.json()["message"] == "Supplier updated successfully"
    assert updated.json()["data"]["address"] == "1 Main St"
    assert updated.json()["data"]["name"] == "Acme"

    assert auth_client.delete(url).json()["data"] == {}
    assert auth_client.get(url).status_code == 404


def test_list_sorted_by_name(auth_client):
    for name in ("Zeta Parts", "Alpha Supply"):
        auth_client.post("/api/suppliers", json={"name": name})
    body = auth_client.get("/api/suppliers").json()
    assert body["count"] == 2
    assert [s["name"] for s in body["data"]] == ["Alpha Supply", "Zeta Parts"]


def test_invalid_email_rejected(auth_client):
    response = auth_client.post("/api/suppliers", json={"name": "Acme", "email": "acme"})
    assert response.status_code == 400
    assert response.json()["message"] == "Error creating supplier"
    assert "email: Please provide a valid email" in response.json()["error"]


def test_missing_supplier_not_found(auth_client):
    assert auth_client.get("/api/suppliers/12").status_code == 404
    assert auth_client.put("/api/suppliers/12", json={"name": "x"}).status_code == 404
    response = auth_client.delete("/api/suppliers/12")
    assert response.status_code == 404
    assert response.json()["message"] == "Supplier not found"
