"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    """The health endpoint is mounted outside the API prefix."""
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    response = client.get("/health")
    data = response.json()
    assert data["service"] == "bank-accounts-api"
    assert data["status"] == "healthy"


def test_health_check_reports_database_status(client):
    """
    Verify the response includes database connectivity status.

    Monitoring systems read this field to detect database outages.
    """
    response = client.get("/health")
    data = response.json()
    assert data["database"] in ("healthy", "unhealthy")
