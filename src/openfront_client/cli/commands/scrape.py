"""直近のゲーム一覧と各ゲーム詳細を JSON ファイルへ保存するコマンド。"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import timedelta
from pathlib import Path
from typing import Annotated, Any

import typer

from openfront_client.cli.render import run_request
from openfront_client.infra.openfront import OpenFrontClient, build_openfront_client
from openfront_client.shared.logging import get_logger
from openfront_client.shared.types import utc_now

app = typer.Typer(
    help="直近のゲーム一覧と詳細を JSON ファイルへ保存するコマンド",
    invoke_without_command=True,
)

DEFAULT_OUTPUT_DIR = Path("games-data-output")

_SEPARATOR_PATTERN = re.compile(r"[:.]")
_UNSAFE_PATTERN = re.compile(r"[^a-zA-Z0-9_-]")


def build_filename(endpoint_name: str, params: Mapping[str, Any]) -> str:
    """エンドポイント名とパラメータからファイルシステム安全なファイル名を作る。"""

    joined = "_".join(f"{key}-{value}" for key, value in params.items())
    safe = _UNSAFE_PATTERN.sub("", _SEPARATOR_PATTERN.sub("-", joined))
    return f"{endpoint_name}_{safe}.json" if safe else f"{endpoint_name}.json"


def save_response(
    output_dir: Path, endpoint_name: str, params: Mapping[str, Any], data: Any
) -> Path:
    path = output_dir / build_filename(endpoint_name, params)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


async def scrape_games(
    client: OpenFrontClient,
    *,
    output_dir: Path,
    hours: int,
    limit: int,
    include_turns: bool,
    logger,
) -> list[Path]:
    """一覧を取得して保存し、続けて各ゲームの詳細を順に保存する。"""

    now = utc_now()
    params = {
        "start": (now - timedelta(hours=hours)).isoformat(),
        "end": now.isoformat(),
        "limit": limit,
    }
    page = await client.list_games(start=params["start"], end=params["end"], limit=limit)
    saved = [save_response(output_dir, "00_games-list", params, page.to_dict())]
    logger.info("ゲーム一覧を保存", count=len(page.items), total=page.total)

    for item in page.items:
        game_id = item.get("game") if isinstance(item, dict) else None
        if not game_id:
            logger.warning("ゲーム ID の無い項目をスキップ", item=item)
            continue

        record = await client.get_game_info(game_id, include_turns=include_turns)
        saved.append(save_response(output_dir, "game-detail", {"id": game_id}, record))
        logger.debug("ゲーム詳細を保存", game_id=game_id)

    return saved


@app.callback()
def scrape(
    hours: Annotated[int, typer.Option("--hours", min=1, help="何時間前までを対象にするか")] = 24,
    limit: Annotated[int, typer.Option("--limit", "-l", min=1, help="取得するゲーム数")] = 10,
    output_dir: Annotated[
        Path, typer.Option("--output-dir", "-d", help="保存先ディレクトリ")
    ] = DEFAULT_OUTPUT_DIR,
    turns: Annotated[bool, typer.Option("--turns/--no-turns", help="ターン履歴を含める")] = True,
) -> None:
    """直近のゲーム一覧と詳細をディレクトリへ書き出す。"""

    logger = get_logger("cli.scrape", output_dir=str(output_dir))
    output_dir.mkdir(parents=True, exist_ok=True)
    client = build_openfront_client(logger=logger)

    saved = run_request(
        scrape_games(
            client,
            output_dir=output_dir,
            hours=hours,
            limit=limit,
            include_turns=turns,
            logger=logger,
        ),
        logger=logger,
    )
    for path in saved:
        typer.echo(f"[Saved] {path.name}")
    typer.echo(f"{len(saved)} 件のファイルを {output_dir} に保存しました。")


__all__ = ["build_filename", "save_response", "scrape_games"]
