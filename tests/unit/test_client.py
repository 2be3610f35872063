"""Unit tests for ContentApiClient envelope handling."""

import httpx
import pytest

from content_seeder.client import ContentApiClient
from content_seeder.errors import FailureKind
from content_seeder.schemas.auth import LoginRequest

BASE = "http://api.test/api/v1"


def _client(handler) -> ContentApiClient:
    return ContentApiClient(BASE, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_create_returns_resource_id():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v1/subjects"
        return httpx.Response(201, json={"success": True, "data": {"id": "sub-1", "name": "Medicine"}})

    async with _client(handler) as client:
        result = await client.create("/subjects", {"name": "Medicine"}, step="Create subject")

    assert result.ok
    assert result.resource_id == "sub-1"
    assert result.status_code == 201
    assert client.request_count == 1


@pytest.mark.asyncio
async def test_failure_envelope_is_api_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={
                "success": False,
                "error": {"message": "Validation failed", "details": {"fields": {"name": ["Required"]}}},
            },
        )

    async with _client(handler) as client:
        result = await client.create("/subjects", {}, step="Create subject")

    assert not result.ok
    assert result.failure.kind == FailureKind.API
    assert result.failure.step == "Create subject"
    assert result.failure.message == "Validation failed"
    assert result.failure.status_code == 400
    assert result.failure.details == {"fields": {"name": ["Required"]}}


@pytest.mark.asyncio
async def test_success_without_id_is_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": True, "data": {"name": "no id"}})

    async with _client(handler) as client:
        result = await client.create("/points", {}, step="Create point")

    assert not result.ok
    assert result.resource_id is None
    assert "id" in result.failure.message


@pytest.mark.asyncio
async def test_non_json_body_is_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    async with _client(handler) as client:
        result = await client.post("/auth/login", step="Login")

    assert result.failure.kind == FailureKind.TRANSPORT
    assert result.failure.status_code == 502
    assert "Bad Gateway" in result.failure.details["body"]


@pytest.mark.asyncio
async def test_connection_error_is_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with _client(handler) as client:
        result = await client.login(LoginRequest(email_or_username="u", password="p"))

    assert not result.ok
    assert result.failure.kind == FailureKind.TRANSPORT
    assert result.status_code is None
    assert "Connection refused" in result.failure.message


@pytest.mark.asyncio
async def test_bearer_header_after_authenticate():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("authorization"))
        return httpx.Response(200, json={"success": True, "data": {"id": "x"}})

    async with _client(handler) as client:
        await client.create("/subjects", {}, step="before")
        client.authenticate("tok-123")
        await client.create("/subjects", {}, step="after")

    assert seen == [None, "Bearer tok-123"]
    assert client.token == "tok-123"


@pytest.mark.asyncio
async def test_link_chapter_path():
    paths = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"success": True, "data": {}})

    async with _client(handler) as client:
        result = await client.link_chapter_to_subject("s1", "c1", step="Link")

    assert result.ok
    assert paths == ["/api/v1/subjects/s1/chapters/c1"]
