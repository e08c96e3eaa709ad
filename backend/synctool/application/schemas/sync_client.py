"""Pydantic DTOs (Data Transfer Objects) for the client registry."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

_CAMEL = ConfigDict(populate_by_name=True)


class SyncClientFields(BaseModel):
    """Body of add-users and update-users.

    Every field is required by the registry; they are optional here so that
    the service can report all missing fields at once with a 400.
    """

    model_config = _CAMEL

    db_name: str | None = Field(None, alias="dbName", examples=["ACC_2024"])
    db_user: str | None = Field(None, alias="dbUser")
    db_password: str | None = Field(None, alias="dbPassword")
    client_name: str | None = Field(None, alias="clientName", examples=["Acme Traders"])
    address: str | None = None
    phone_number: str | None = Field(None, alias="phoneNumber")
    username: str | None = None
    password: str | None = None


class SyncClientSummary(BaseModel):
    """Administrative view of a client — no db password, no access token."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    client_id: str = Field(alias="clientId")
    db_name: str = Field(alias="dbName")
    db_user: str = Field(alias="dbUser")
    client_name: str = Field(alias="clientName")
    address: str
    phone_number: str = Field(alias="phoneNumber")
    username: str
    password: str
    created_at: datetime = Field(alias="createdAt")


class SyncClientListResponse(BaseModel):
    success: bool = True
    users: list[SyncClientSummary]


class SyncClientCreatedResponse(BaseModel):
    model_config = _CAMEL

    success: bool = True
    message: str
    client_id: str = Field(alias="clientId")
    access_token: str = Field(alias="accessToken")


class SyncClientUpdatedResponse(BaseModel):
    model_config = _CAMEL

    success: bool = True
    message: str
    access_token: str = Field(alias="accessToken")


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ClientConfigSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    client_id: str = Field(alias="clientId")
    db_name: str = Field(alias="dbName")
    access_token: str = Field(alias="accessToken")
    api_url: str = Field(alias="apiUrl")


class ClientConfigResponse(BaseModel):
    success: bool = True
    config: ClientConfigSchema


class SyncLogSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    client_id: str = Field(alias="clientId")
    sync_date: datetime = Field(alias="syncDate")
    records_synced: int = Field(alias="recordsSynced")
    status: str
    message: str
    db_name: str | None = Field(None, alias="dbName")


class SyncLogListResponse(BaseModel):
    success: bool = True
    logs: list[SyncLogSchema]
