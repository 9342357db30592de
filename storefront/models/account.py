"""Account models for the storefront"""

from pydantic import BaseModel, field_validator


class Account(BaseModel):
    """Registered account, stored as-is in the users list"""
    email: str
    password: str


class Credentials(BaseModel):
    """Register / login request body"""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        # Stored keys must match what identity resolution produces
        value = value.strip()
        if not value:
            raise ValueError("Email must not be blank")
        return value


class AuthResponse(BaseModel):
    """Register / login API response"""
    success: bool = True
    email: str
