def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "CareerPath API"


def test_startup_seeds_database(client):
    response = client.get("/api/v1/employees", params={"pageSize": 10})
    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == 10
    assert len(data["data"]) == 10


def test_startup_roles_available(client):
    response = client.get("/api/v1/roles")
    assert response.status_code == 200
    assert len(response.json()) == 8
