from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration request schema."""

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    phone: str = Field(..., min_length=1, max_length=20)


class LoginRequest(BaseModel):
    """Login request schema."""

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=1, max_length=500)


class TokenResponse(BaseModel):
    """Session token issued on login or registration."""

    token: str
    csrf_token: str


class LogoutResponse(BaseModel):
    """Logout response schema."""

    message: str
