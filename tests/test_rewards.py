# tests/test_rewards.py

def test_reward_crud(client, admin_headers):
    business = client.post("/api/v1/businesses/", json={"name": "Bakery"}, headers=admin_headers).json()

    response = client.post(
        "/api/v1/rewards/",
        json={
            "name": "Free Croissant",
            "description": "One croissant on the house",
            "pointThreshold": 100,
            "expirationDate": "2025-12-31T23:59:00",
            "businessId": business["id"],
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    reward = response.json()
    assert reward["pointThreshold"] == 100
    assert reward["redeemedCount"] == 0
    assert reward["businessId"] == business["id"]

    response = client.put(f"/api/v1/rewards/{reward['id']}", json={"active": False}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["active"] is False

    listing = client.get("/api/v1/rewards/", headers=admin_headers).json()
    assert [r["id"] for r in listing] == [reward["id"]]

    assert client.delete(f"/api/v1/rewards/{reward['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/v1/rewards/{reward['id']}", headers=admin_headers).status_code == 404

def test_reward_point_threshold_must_be_positive(client, admin_headers):
    response = client.post(
        "/api/v1/rewards/",
        json={"name": "Nothing", "description": "Zero points", "pointThreshold": 0},
        headers=admin_headers,
    )
    assert response.status_code == 400

    reward = client.post(
        "/api/v1/rewards/",
        json={"name": "Mug", "description": "Branded mug", "pointThreshold": 50},
        headers=admin_headers,
    ).json()
    response = client.put(f"/api/v1/rewards/{reward['id']}", json={"pointThreshold": -1}, headers=admin_headers)
    assert response.status_code == 400

def test_update_reward_rejects_null_on_required_fields(client, admin_headers):
    reward = client.post(
        "/api/v1/rewards/",
        json={
            "name": "Tote Bag",
            "description": "Canvas tote",
            "pointThreshold": 75,
            "expirationDate": "2025-12-31T23:59:00",
        },
        headers=admin_headers,
    ).json()

    for field in ("name", "description", "pointThreshold", "active"):
        response = client.put(f"/api/v1/rewards/{reward['id']}", json={field: None}, headers=admin_headers)
        assert response.status_code == 400, field

    response = client.put(f"/api/v1/rewards/{reward['id']}", json={"expirationDate": None}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["expirationDate"] is None
    assert response.json()["pointThreshold"] == 75
