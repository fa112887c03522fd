"""OpenFront API への単発 GET を担うトランスポート。"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import urlencode

import httpx

from openfront_client.shared.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from openfront_client.shared.exceptions import BaseAppError
from openfront_client.shared.logging import get_logger
from openfront_client.shared.types import JSONValue, QueryValue


class OpenFrontClientError(BaseAppError):
    """OpenFront クライアント共通の例外。"""

    default_message = "OpenFront API client error"


class OpenFrontValidationError(OpenFrontClientError):
    """必須パラメータ不足など、リクエスト前に検出した入力エラー。"""

    default_message = "Invalid request parameters"


class OpenFrontHTTPStatusError(OpenFrontClientError):
    """2xx 以外のステータスが返った際の例外。"""

    def __init__(self, status_code: int, *, message: str | None = None, body: str = "") -> None:
        super().__init__(f"OpenFront API request failed (status={status_code})")
        self.status_code = status_code
        self.message = message
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "message": self.message, "body": self.body}


class OpenFrontDecodeError(OpenFrontClientError):
    """成功ステータスだが本文が JSON として解釈できない場合の例外。"""

    default_message = "Failed to decode OpenFront API response"

    def __init__(self, message: str | None = None, *, body: str = "") -> None:
        super().__init__(message)
        self.body = body


@dataclass(slots=True, frozen=True)
class RawResponse:
    """デコード済み本文とレスポンスヘッダの組。"""

    body: JSONValue
    headers: httpx.Headers


class OpenFrontTransportProtocol(Protocol):
    """エンドポイント関数が依存するトランスポートのプロトコル。"""

    async def get(
        self,
        path: str,
        params: Mapping[str, QueryValue | None] | None = None,
    ) -> RawResponse:
        """パスとクエリから GET を 1 回発行する。"""


def _stringify(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: Mapping[str, QueryValue | None]) -> str:
    """None を除いたパラメータからクエリ文字列を組み立てる。

    空文字は値として保持する。残るパラメータが無ければ `?` も付けない。
    """

    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)


class OpenFrontTransport(OpenFrontTransportProtocol):
    """呼び出しごとに独立した接続で GET を実行する httpx ベースのトランスポート。"""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        logger=None,
    ) -> None:
        self._base_url = base_url
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._timeout = timeout
        self._http_transport = http_transport
        self._logger = logger or get_logger(__name__)

    async def get(
        self,
        path: str,
        params: Mapping[str, QueryValue | None] | None = None,
    ) -> RawResponse:
        target = path + build_query_string(params or {})
        self._logger.debug("openfront_request", method="GET", target=target)

        async with httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            transport=self._http_transport,
        ) as client:
            response = await client.get(target)

        self._logger.debug(
            "openfront_response",
            target=target,
            status_code=response.status_code,
        )
        return self._parse_response(response, target)

    def _parse_response(self, response: httpx.Response, target: str) -> RawResponse:
        text = response.text
        if not 200 <= response.status_code < 300:
            self._logger.warning(
                "openfront_request_failed",
                target=target,
                status_code=response.status_code,
                body=text.strip() or None,
            )
            raise OpenFrontHTTPStatusError(
                response.status_code,
                message=response.reason_phrase or None,
                body=text,
            )

        try:
            body = response.json()
        except ValueError as exc:
            self._logger.error("openfront_decode_failed", target=target, error=str(exc))
            raise OpenFrontDecodeError(body=text) from exc

        return RawResponse(body=body, headers=response.headers)


__all__ = [
    "OpenFrontClientError",
    "OpenFrontDecodeError",
    "OpenFrontHTTPStatusError",
    "OpenFrontTransport",
    "OpenFrontTransportProtocol",
    "OpenFrontValidationError",
    "RawResponse",
    "build_query_string",
]
