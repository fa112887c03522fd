"""OpenFront トランスポートのリクエスト組み立てとエラー伝播を検証する。"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from openfront_client.infra.openfront import (
    OpenFrontDecodeError,
    OpenFrontHTTPStatusError,
    OpenFrontTransport,
    build_query_string,
)

Handler = Callable[[httpx.Request], httpx.Response]


def _transport(handler: Handler, **kwargs) -> OpenFrontTransport:
    return OpenFrontTransport(http_transport=httpx.MockTransport(handler), **kwargs)


def test_build_query_string_drops_none_and_keeps_empty() -> None:
    query = build_query_string({"start": "2023-01-01", "type": None, "offset": "", "limit": 10})

    assert query == "?start=2023-01-01&offset=&limit=10"


def test_build_query_string_empty_mapping() -> None:
    assert build_query_string({}) == ""
    assert build_query_string({"type": None, "limit": None}) == ""


def test_build_query_string_stringifies_and_encodes() -> None:
    query = build_query_string(
        {"turns": False, "flag": True, "ratio": 0.5, "start": "2023-01-01T00:00:00Z"}
    )

    assert query == "?turns=false&flag=true&ratio=0.5&start=2023-01-01T00%3A00%3A00Z"


@pytest.mark.asyncio
async def test_get_sends_json_request_and_returns_body() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json=[{"game": "game123"}],
            headers={"Content-Range": "games 0-1/100"},
        )

    transport = _transport(handler, user_agent="test-agent/1.0")

    response = await transport.get("/public/games", {"start": "a", "end": "b", "limit": None})

    assert response.body == [{"game": "game123"}]
    assert response.headers["content-range"] == "games 0-1/100"

    request = requests[0]
    assert request.method == "GET"
    assert request.url.host == "api.openfront.io"
    assert request.url.scheme == "https"
    assert request.url.path == "/public/games"
    assert dict(request.url.params) == {"start": "a", "end": "b"}
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "test-agent/1.0"
    assert request.content == b""


@pytest.mark.asyncio
async def test_get_without_params_has_no_query() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={})

    await _transport(handler).get("/public/clans/leaderboard")

    assert requests[0].url.query == b""
    assert str(requests[0].url) == "https://api.openfront.io/public/clans/leaderboard"


@pytest.mark.asyncio
async def test_get_uses_configured_base_url() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={})

    await _transport(handler, base_url="http://localhost:8080").get("/public/player/abc")

    assert str(requests[0].url) == "http://localhost:8080/public/player/abc"


@pytest.mark.asyncio
async def test_non_2xx_raises_status_error_with_raw_body() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text='{"error":"Not Found"}')

    with pytest.raises(OpenFrontHTTPStatusError) as exc_info:
        await _transport(handler).get("/public/game/missing")

    error = exc_info.value
    assert error.status_code == 404
    assert error.message == "Not Found"
    assert error.body == '{"error":"Not Found"}'
    assert error.to_dict() == {
        "statusCode": 404,
        "message": "Not Found",
        "body": '{"error":"Not Found"}',
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [199, 300, 304, 500, 503])
async def test_status_outside_success_range_is_error(status: int) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text="nope")

    with pytest.raises(OpenFrontHTTPStatusError) as exc_info:
        await _transport(handler).get("/public/games")

    assert exc_info.value.status_code == status
    assert exc_info.value.body == "nope"


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(OpenFrontDecodeError) as exc_info:
        await _transport(handler).get("/public/games")

    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert exc_info.value.body == "<html>oops</html>"


@pytest.mark.asyncio
async def test_network_error_is_not_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadError("connection reset by peer", request=request)

    with pytest.raises(httpx.ReadError, match="connection reset by peer"):
        await _transport(handler).get("/public/games")


@pytest.mark.asyncio
async def test_each_call_is_independent() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"path": request.url.path})

    transport = _transport(handler)

    first = await transport.get("/public/player/one")
    second = await transport.get("/public/player/two")

    assert first.body == {"path": "/public/player/one"}
    assert second.body == {"path": "/public/player/two"}
    assert paths == ["/public/player/one", "/public/player/two"]
