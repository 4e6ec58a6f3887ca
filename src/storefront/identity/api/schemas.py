"""Pydantic request/response schemas for accounts, sessions and addresses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
class RegisterRequest(BaseModel):
    email: str = Field(max_length=254)
    password: str = Field(max_length=128)
    name: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=30)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "anna@example.com",
                    "password": "correct-horse",
                    "name": "Anna Svensson",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str = Field(max_length=254)
    password: str = Field(max_length=128)


class TokenRequest(BaseModel):
    token: str = Field(min_length=1, max_length=100)


class EmailRequest(BaseModel):
    email: str = Field(max_length=254)


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1, max_length=100)
    new_password: str = Field(max_length=128)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(max_length=128)
    new_password: str = Field(max_length=128)


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=30)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    is_admin: bool = False
    email_verified: bool = False
    created_at: datetime | None = None
    last_login_at: datetime | None = None


class RegisterResponse(BaseModel):
    id: str
    message: str = "Account created. Please check your email to verify your address."


class LoginResponse(BaseModel):
    token: str
    user: UserResponse
    requires_verification: bool


class MessageResponse(BaseModel):
    message: str


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------
class AddressRequest(BaseModel):
    label: str | None = Field(default=None, max_length=50)
    name: str = Field(min_length=1, max_length=200)
    address_line1: str = Field(min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=20)
    country: str = Field(min_length=2, max_length=2)
    phone: str | None = Field(default=None, max_length=30)
    is_default: bool = False


class UpdateAddressRequest(BaseModel):
    label: str | None = Field(default=None, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=200)
    address_line1: str | None = Field(default=None, min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    postal_code: str | None = Field(default=None, min_length=1, max_length=20)
    country: str | None = Field(default=None, min_length=2, max_length=2)
    phone: str | None = Field(default=None, max_length=30)
    is_default: bool | None = None


class AddressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str | None = None
    name: str
    address_line1: str
    address_line2: str | None = None
    city: str
    postal_code: str
    country: str
    phone: str | None = None
    is_default: bool = False
    created_at: datetime | None = None


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
class SetAdminRoleRequest(BaseModel):
    is_admin: bool
