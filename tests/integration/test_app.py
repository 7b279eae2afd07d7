"""Integration tests for application-level routes and error handling."""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "domains": {
            "identity": {"name": "identity"},
            "catalogue": {"name": "catalogue"},
            "ordering": {"name": "ordering"},
        },
    }


def test_shared_errors_use_error_body(client):
    response = client.get("/api/orders", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}
