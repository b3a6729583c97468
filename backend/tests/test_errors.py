from sqlalchemy import text


def test_non_integer_id_is_bad_request(auth_client):
    response = auth_client.get("/api/categories/not-a-number")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_unknown_route_uses_envelope(auth_client):
    response = auth_client.get("/api/warehouses")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_store_failure_is_server_error(auth_client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE categories"))

    response = auth_client.get("/api/categories")
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Database error"
    assert "categories" in body["error"]


def test_health(client):
    assert client.get("/api/health").json() == {"success": True, "data": {"status": "ok"}}
