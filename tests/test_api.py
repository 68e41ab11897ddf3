import json

import httpx
import pytest

from api.shared.exceptions import StoreUnavailableError
from core.settings import SETTINGS


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["message"] == "Graphify Backend API is running"
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_ready(client):
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_conversation_lifecycle(client):
    messages = [{"role": "user", "text": "hi"}]

    saved = await client.post(
        "/api/conversations", json={"sessionId": "s1", "messages": messages}
    )
    assert saved.status_code == 200
    assert saved.json() == {"success": True, "message": "Conversation saved"}

    loaded = await client.get("/api/conversations/s1")
    assert loaded.json() == {"success": True, "messages": messages}

    deleted = await client.delete("/api/conversations/s1")
    assert deleted.json() == {
        "success": True,
        "message": "Conversation deleted",
        "deleted": 1,
    }

    reloaded = await client.get("/api/conversations/s1")
    assert reloaded.json() == {"success": True, "messages": None}


@pytest.mark.asyncio
async def test_delete_unknown_conversation(client):
    response = await client.delete("/api/conversations/never-saved")
    assert response.status_code == 200
    assert response.json()["deleted"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"messages": []},
        {"sessionId": "s1"},
        {"sessionId": "", "messages": []},
        {"session_id": "s1", "messages": []},
        {},
    ],
)
async def test_save_conversation_requires_fields(client, app_store, body):
    response = await client.post("/api/conversations", json=body)

    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"] == "sessionId and messages are required"
    assert payload["errorCode"] == "INVALID_PAYLOAD"
    assert app_store.collections.get("conversations", []) == []


@pytest.mark.asyncio
async def test_malformed_json_is_a_bad_request(client):
    response = await client.post(
        "/api/conversations",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_store_failure_is_reported(client, app_store, monkeypatch):
    async def refuse(*args, **kwargs):
        raise StoreUnavailableError("connection refused")

    monkeypatch.setattr(app_store, "upsert", refuse)
    response = await client.post(
        "/api/conversations", json={"sessionId": "s1", "messages": []}
    )

    assert response.status_code == 500
    assert response.json()["error"] == "connection refused"
    assert response.json()["errorCode"] == "STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_unexpected_errors_do_not_leak_details(client, app_store, monkeypatch):
    async def explode(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(app_store, "find_one", explode)
    response = await client.get("/api/conversations/s1")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal server error",
        "errorCode": "INTERNAL_ERROR",
    }


@pytest.mark.asyncio
async def test_save_user(client, app_store):
    response = await client.post(
        "/api/users",
        json={"user": {"sub": "g-1", "email": "ada@example.com", "name": "Ada"}},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    stored = await app_store.find_one("users", {"key": "g-1"})
    assert stored["email"] == "ada@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"user": None},
        {"user": {"email": "", "name": "Ada"}},
        {"user": {"email": "ada@example.com"}},
        {"user": {"email": "ada@example.com", "name": "Ada", "emailVerified": "yes"}},
    ],
)
async def test_invalid_user_payload(client, body):
    response = await client.post("/api/users", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid user payload"


@pytest.mark.asyncio
async def test_google_client_id(client, monkeypatch):
    monkeypatch.setattr(SETTINGS.GOOGLE, "GOOGLE_CLIENT_ID", "1234.apps.googleusercontent.com")

    response = await client.get("/api/config/google-client-id")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "clientId": "1234.apps.googleusercontent.com",
    }


@pytest.mark.asyncio
async def test_google_client_id_unconfigured(client, monkeypatch):
    monkeypatch.setattr(SETTINGS.GOOGLE, "GOOGLE_CLIENT_ID", "")

    response = await client.get("/api/config/google-client-id")

    assert response.status_code == 503
    assert response.json()["error"] == "Google client ID not configured"


@pytest.mark.asyncio
async def test_groq_chat(client, install_groq, groq_factory, completion):
    install_groq(groq_factory(lambda request: httpx.Response(200, json=completion("Hi!"))))

    response = await client.post(
        "/api/groq/chat",
        json={"messages": [{"role": "user", "content": "hello"}], "maxTokens": 32},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "content": "Hi!"}


@pytest.mark.asyncio
async def test_groq_chat_requires_messages(client, install_groq, groq_factory):
    install_groq(groq_factory(lambda request: httpx.Response(200, json={})))

    response = await client.post("/api/groq/chat", json={"messages": []})

    assert response.status_code == 400
    assert response.json()["error"] == "messages array is required"


@pytest.mark.asyncio
async def test_groq_chat_unconfigured(client, install_groq, groq_factory):
    install_groq(groq_factory(lambda request: httpx.Response(200, json={}), api_key=""))

    response = await client.post(
        "/api/groq/chat", json={"messages": [{"role": "user", "content": "hello"}]}
    )

    assert response.status_code == 503
    assert response.json()["error"] == "Groq API key not configured on server"


@pytest.mark.asyncio
async def test_groq_chat_passes_upstream_status(client, install_groq, groq_factory):
    install_groq(
        groq_factory(
            lambda request: httpx.Response(401, json={"error": {"message": "Invalid API Key"}})
        )
    )

    response = await client.post(
        "/api/groq/chat", json={"messages": [{"role": "user", "content": "hello"}]}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid API Key"


@pytest.mark.asyncio
async def test_groq_chat_empty_content(client, install_groq, groq_factory, completion):
    install_groq(groq_factory(lambda request: httpx.Response(200, json=completion(None))))

    response = await client.post(
        "/api/groq/chat", json={"messages": [{"role": "user", "content": "hello"}]}
    )

    assert response.status_code == 500
    assert response.json()["error"] == "No content returned from Groq"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_cors_allows_frontend_origin(client):
    response = await client.options(
        "/api/conversations/s1",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "x-session-id",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


@pytest.mark.asyncio
async def test_save_user_ignores_snake_case_fields(client, app_store):
    response = await client.post(
        "/api/users",
        json={"user": {"email": "ada@example.com", "name": "Ada", "email_verified": "yes"}},
    )

    assert response.status_code == 200
    stored = await app_store.find_one("users", {"key": "ada@example.com"})
    assert stored["emailVerified"] is None
    assert "email_verified" not in stored


@pytest.mark.asyncio
async def test_groq_chat_reads_camel_case_overrides_only(
    client, install_groq, groq_factory, completion
):
    sent = []

    def handler(request):
        sent.append(json.loads(request.content))
        return httpx.Response(200, json=completion("Hi!"))

    install_groq(groq_factory(handler))

    response = await client.post(
        "/api/groq/chat",
        json={"messages": [{"role": "user", "content": "hello"}], "max_tokens": 5},
    )

    assert response.status_code == 200
    assert sent[0]["max_tokens"] == 512


@pytest.mark.asyncio
async def test_groq_chat_non_text_content(client, install_groq, groq_factory, completion):
    install_groq(groq_factory(lambda request: httpx.Response(200, json=completion(42))))

    response = await client.post(
        "/api/groq/chat", json={"messages": [{"role": "user", "content": "hello"}]}
    )

    assert response.status_code == 500
    assert response.json()["error"] == "No content returned from Groq"


@pytest.mark.asyncio
async def test_wrong_method_keeps_allow_header(client):
    response = await client.delete("/api/users")

    assert response.status_code == 405
    assert response.headers["allow"] == "POST"
    assert response.json()["errorCode"] == "HTTP_ERROR"
