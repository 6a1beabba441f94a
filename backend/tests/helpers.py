from fastapi.testclient import TestClient
from sqlmodel import Session

from app.models.user import User, UserCreate
from app.store import users as user_store

PASSWORD = "Quokka-Violet-Tangerine-42-Harbor!"  # noqa: S105

PROFILES = {
    "alice": ("Alice", "Anderson", "555-0100-11"),
    "bob": ("Bob", "Baker", "555-0100-22"),
    "carol": ("Carol", "Carter", "555-0100-33"),
}


def make_user(db_session: Session, username: str) -> User:
    first_name, last_name, phone = PROFILES[username]
    return user_store.register(
        UserCreate(
            username=username,
            password=PASSWORD,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        ),
        db_session,
    )


def register(client: TestClient, username: str) -> str:
    """Register a user over HTTP and return their session token."""
    first_name, last_name, phone = PROFILES[username]
    response = client.post(
        "/api/v1/auth/register",
        json={
            "username": username,
            "password": PASSWORD,
            "first_name": first_name,
            "last_name": last_name,
            "phone": phone,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["token"]


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
