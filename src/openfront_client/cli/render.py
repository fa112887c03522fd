"""CLI コマンド間で共有する出力とエラー処理。"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from enum import Enum
from typing import Any, TypeVar

import httpx
import typer

from openfront_client.infra.openfront import (
    OpenFrontClientError,
    OpenFrontHTTPStatusError,
    OpenFrontValidationError,
)

T = TypeVar("T")


class OutputFormat(str, Enum):
    """出力形式。"""

    TABLE = "table"
    JSON = "json"


def echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def run_request(request: Coroutine[Any, Any, T], *, logger) -> T:
    """API 呼び出しを実行し、失敗を終了コード付きの CLI エラーへ変換する。"""

    try:
        return asyncio.run(request)
    except OpenFrontValidationError as exc:
        typer.echo(f"入力が不正です: {exc}")
        raise typer.Exit(code=2) from exc
    except OpenFrontHTTPStatusError as exc:
        logger.error("OpenFront API がエラーを返却", status_code=exc.status_code)
        typer.echo(f"OpenFront API リクエストに失敗しました (status={exc.status_code}): {exc.body}")
        raise typer.Exit(code=1) from exc
    except OpenFrontClientError as exc:
        logger.error("OpenFront API レスポンスの処理に失敗", error=str(exc))
        typer.echo(f"OpenFront API レスポンスの処理に失敗しました: {exc}")
        raise typer.Exit(code=1) from exc
    except httpx.TransportError as exc:
        logger.error("OpenFront API への通信に失敗", error=str(exc))
        typer.echo(f"OpenFront API への通信に失敗しました: {exc}")
        raise typer.Exit(code=1) from exc


__all__ = ["OutputFormat", "echo_json", "run_request"]
