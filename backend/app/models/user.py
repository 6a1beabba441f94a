from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    """Base user fields."""

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    phone: str = Field(max_length=20)
    is_active: bool = True


class User(UserBase, table=True):
    """User database model keyed by username."""

    username: str = Field(primary_key=True, max_length=30)
    hashed_password: str

    join_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_login_at: datetime | None = None


class UserCreate(SQLModel):
    """User creation schema."""

    username: str
    password: str
    first_name: str
    last_name: str
    phone: str
