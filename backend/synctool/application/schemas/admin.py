"""Pydantic DTOs for admin authentication."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class AdminSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    created_at: datetime = Field(alias="createdAt")


class AdminSessionResponse(BaseModel):
    success: bool = True
    admin: AdminSchema


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out"
