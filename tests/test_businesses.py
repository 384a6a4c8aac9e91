# tests/test_businesses.py

def test_business_crud(client, admin_headers):
    business_data = {
        "name": "Stuart Coffee Co.",
        "description": "Espresso and pastries",
        "category": "Cafe",
        "address": "12 Main St",
        "latitude": 27.197,
        "longitude": -80.252,
        "waitTime": 5,
        "featured": True,
    }
    response = client.post("/api/v1/businesses/", json=business_data, headers=admin_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] > 0
    assert created["name"] == "Stuart Coffee Co."
    assert created["waitTime"] == 5
    assert created["featured"] is True
    assert created["active"] is True

    response = client.get(f"/api/v1/businesses/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["address"] == "12 Main St"

    response = client.put(
        f"/api/v1/businesses/{created['id']}",
        json={"category": "Coffee", "isOpen": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["category"] == "Coffee"
    assert updated["isOpen"] is False
    # Fields not sent are left alone
    assert updated["name"] == "Stuart Coffee Co."

    response = client.delete(f"/api/v1/businesses/{created['id']}", headers=admin_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/businesses/{created['id']}", headers=admin_headers)
    assert response.status_code == 404

def test_list_businesses_newest_first(client, admin_headers):
    for name in ("First", "Second", "Third"):
        client.post("/api/v1/businesses/", json={"name": name}, headers=admin_headers)

    response = client.get("/api/v1/businesses/", headers=admin_headers)
    assert response.status_code == 200
    assert [b["name"] for b in response.json()] == ["Third", "Second", "First"]

def test_create_business_invalid(client, admin_headers):
    response = client.post("/api/v1/businesses/", json={"description": "no name"}, headers=admin_headers)
    assert response.status_code == 400

def test_missing_business(client, admin_headers):
    assert client.get("/api/v1/businesses/42", headers=admin_headers).status_code == 404
    assert client.put("/api/v1/businesses/42", json={"name": "x"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/v1/businesses/42", headers=admin_headers).status_code == 404

def test_update_business_rejects_null_on_required_fields(client, admin_headers):
    business = client.post(
        "/api/v1/businesses/",
        json={"name": "Flagler Books", "description": "Used books", "imageUrl": "https://img/books.png"},
        headers=admin_headers,
    ).json()

    for field in ("name", "isOpen", "featured", "active"):
        response = client.put(f"/api/v1/businesses/{business['id']}", json={field: None}, headers=admin_headers)
        assert response.status_code == 400, field
        assert response.json()["detail"] == "Invalid request data"

    # Optional fields can still be cleared
    response = client.put(
        f"/api/v1/businesses/{business['id']}",
        json={"description": None, "imageUrl": None},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["description"] is None
    assert response.json()["imageUrl"] is None
    assert response.json()["name"] == "Flagler Books"
