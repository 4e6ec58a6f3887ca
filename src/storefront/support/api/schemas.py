from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=254)
    subject: str | None = Field(default=None, max_length=200)
    message: str = Field(min_length=1, max_length=5000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Anna Svensson",
                    "email": "anna@example.com",
                    "subject": "Custom order",
                    "message": "Do you make larger serving bowls on request?",
                }
            ]
        }
    }


class ReplyRequest(BaseModel):
    reply_text: str = Field(min_length=1, max_length=5000)


class ReplyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    reply_text: str
    replied_by: str | None = None
    from_admin: bool = True
    created_at: datetime


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    subject: str | None = None
    message: str
    status: Literal["unread", "read", "replied", "archived"]
    replies: list[ReplyResponse] = []
    created_at: datetime


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
