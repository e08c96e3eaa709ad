"""Pydantic DTOs for the client-facing sync endpoints.

Request fields are typed loosely on purpose: shape checks live in
SyncService so malformed bodies answer 400 rather than 422.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_CAMEL = ConfigDict(populate_by_name=True)


class SyncDataRequest(BaseModel):
    model_config = _CAMEL

    client_id: Any = Field(None, alias="clientId")
    access_token: Any = Field(None, alias="accessToken")
    data: Any = Field(
        None,
        examples=[[{"ID": "u1", "PASS": "p1"}, {"CODE": "C1", "NAME": "Acme"}]],
    )


class RowErrorSchema(BaseModel):
    row: dict[str, Any]
    error: str


class SyncDataResponse(BaseModel):
    model_config = _CAMEL

    success: bool
    message: str
    record_count: int = Field(alias="recordCount")
    skipped_count: int = Field(0, alias="skippedCount")
    errors: list[RowErrorSchema] | None = None


class SyncLogRequest(BaseModel):
    model_config = _CAMEL

    client_id: Any = Field(None, alias="clientId")
    access_token: Any = Field(None, alias="accessToken")
    status: Any = Field(None, examples=["SUCCESS"])
    record_count: Any = Field(None, alias="recordCount")
    message: Any = None


class SyncLogResponse(BaseModel):
    success: bool = True
