from app.core.config import settings


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_info(client):
    response = client.get("/api/info")
    assert response.json()["name"] == settings.PROJECT_NAME
