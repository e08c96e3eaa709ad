"""Client registry endpoints over HTTP."""

import re

import pytest

from synctool.application.services.sync_client_service import SyncClientService
from synctool.infrastructure.dependencies import get_sync_client_service
from synctool.main import app


@pytest.mark.asyncio
async def test_add_user_returns_credentials(admin_http, client_fields):
    response = await admin_http.post("/api/admin/add-users", json=client_fields)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert re.fullmatch(r"\d{10}", body["clientId"])
    assert re.fullmatch(r"[0-9a-f]{64}", body["accessToken"])


@pytest.mark.asyncio
async def test_add_user_with_missing_fields(admin_http, client_fields):
    del client_fields["dbName"]
    client_fields["username"] = "   "

    response = await admin_http.post("/api/admin/add-users", json=client_fields)

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: dbName, username"


@pytest.mark.asyncio
async def test_add_user_id_collision_is_409(admin_http, client_fields, uow_factory):
    async def _fixed_id_service():
        yield SyncClientService(
            uow_factory, api_url="https://sync.example.test", id_factory=lambda: "1111111111"
        )

    app.dependency_overrides[get_sync_client_service] = _fixed_id_service

    first = await admin_http.post("/api/admin/add-users", json=client_fields)
    second = await admin_http.post("/api/admin/add-users", json=client_fields)

    assert first.status_code == 201
    assert first.json()["clientId"] == "1111111111"
    assert second.status_code == 409
    assert second.json()["detail"] == "Client ID collision - please try again"
    assert len((await admin_http.get("/api/admin/list-users")).json()["users"]) == 1


@pytest.mark.asyncio
async def test_list_users_hides_secrets(admin_http, registered_client):
    response = await admin_http.get("/api/admin/list-users")

    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["clientId"] for u in users] == [registered_client["clientId"]]
    assert users[0]["clientName"] == "Acme Traders"
    assert "accessToken" not in users[0]
    assert "dbPassword" not in users[0]


@pytest.mark.asyncio
async def test_update_user_rotates_token(admin_http, registered_client, client_fields):
    client_id = registered_client["clientId"]
    client_fields["dbName"] = "ACC_2025"

    response = await admin_http.put(f"/api/admin/update-users/{client_id}", json=client_fields)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == f"User with client ID {client_id} updated successfully"
    assert body["accessToken"] != registered_client["accessToken"]

    config = (await admin_http.get(f"/api/admin/users/{client_id}/config")).json()["config"]
    assert config["dbName"] == "ACC_2025"
    assert config["accessToken"] == body["accessToken"]


@pytest.mark.asyncio
async def test_old_token_stops_working_after_update(
    admin_http, registered_client, client_fields
):
    client_id = registered_client["clientId"]
    await admin_http.put(f"/api/admin/update-users/{client_id}", json=client_fields)

    response = await admin_http.post("/api/sync/data", json={**registered_client, "data": []})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_config_bundle(admin_http, registered_client):
    client_id = registered_client["clientId"]

    response = await admin_http.get(f"/api/admin/users/{client_id}/config")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "config": {
            "clientId": client_id,
            "dbName": "ACC_2024",
            "accessToken": registered_client["accessToken"],
            "apiUrl": "https://sync.example.test",
        },
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/admin/users/0000000000/config"),
        ("DELETE", "/api/admin/delete-users/0000000000"),
    ],
)
async def test_unknown_client_is_404(admin_http, method, path):
    response = await admin_http.request(method, path)

    assert response.status_code == 404
    assert response.json()["detail"] == "No user found with client ID: 0000000000"


@pytest.mark.asyncio
async def test_update_unknown_client_is_404(admin_http, client_fields):
    response = await admin_http.put("/api/admin/update-users/0000000000", json=client_fields)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_cascades(admin_http, registered_client):
    client_id = registered_client["clientId"]
    await admin_http.post("/api/sync/data", json={**registered_client, "data": [{"CODE": "C1"}]})

    response = await admin_http.delete(f"/api/admin/delete-users/{client_id}")

    assert response.status_code == 200
    assert response.json()["message"] == f"User with client ID {client_id} deleted successfully"
    assert (await admin_http.get(f"/api/admin/users/{client_id}/config")).status_code == 404
    assert (await admin_http.get("/api/admin/logs")).json()["logs"] == []


@pytest.mark.asyncio
async def test_logs_include_db_name(admin_http, registered_client):
    await admin_http.post("/api/sync/data", json={**registered_client, "data": [{"CODE": "C1"}]})

    response = await admin_http.get("/api/admin/logs")

    assert response.status_code == 200
    (entry,) = response.json()["logs"]
    assert entry["clientId"] == registered_client["clientId"]
    assert entry["status"] == "SUCCESS"
    assert entry["recordsSynced"] == 1
    assert entry["dbName"] == "ACC_2024"
