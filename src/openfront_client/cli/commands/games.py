from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from openfront_client.cli.render import OutputFormat, echo_json, run_request
from openfront_client.infra.openfront import GameListItem, build_openfront_client
from openfront_client.shared.logging import get_logger

app = typer.Typer(help="ゲーム一覧・詳細の取得コマンド")


def _render_table(items: Iterable[GameListItem], *, total: int, start: int, end: int) -> None:
    console = Console(force_terminal=False, color_system=None)
    table = Table(title=f"OpenFront Games ({start}-{end} / {total})")
    table.add_column("Game", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Mode")
    table.add_column("Difficulty")
    table.add_column("Start")
    table.add_column("End")

    for item in items:
        table.add_row(
            str(item.get("game", "-")),
            str(item.get("type", "-")),
            str(item.get("mode", "-")),
            str(item.get("difficulty", "-")),
            str(item.get("start", "-")),
            str(item.get("end", "-")),
        )

    console.print(table)


@app.command("list")
def list_games(  # noqa: PLR0913 - CLI のため引数が多い
    start: Annotated[str, typer.Option("--start", "-s", help="期間の開始 (ISO 8601)")] = ...,
    end: Annotated[str, typer.Option("--end", "-e", help="期間の終了 (ISO 8601)")] = ...,
    game_type: Annotated[
        str | None, typer.Option("--type", "-t", help="Public/Private/Singleplayer")
    ] = None,
    limit: Annotated[int | None, typer.Option("--limit", "-l", min=1, help="取得する件数")] = None,
    offset: Annotated[int | None, typer.Option("--offset", "-o", min=0, help="取得開始位置")] = None,
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """指定期間に開始したゲームを一覧表示する。"""

    logger = get_logger("cli.games.list")
    client = build_openfront_client(logger=logger)
    page = run_request(
        client.list_games(
            start=start, end=end, game_type=game_type, limit=limit, offset=offset
        ),
        logger=logger,
    )
    logger.info("ゲーム一覧取得完了", results=len(page.items), total=page.total)

    if output is OutputFormat.JSON:
        echo_json(page.to_dict())
    else:
        _render_table(page.items, total=page.total, start=page.range.start, end=page.range.end)


@app.command("show")
def show_game(
    game_id: Annotated[str, typer.Argument(help="ゲーム ID")],
    turns: Annotated[bool, typer.Option("--turns/--no-turns", help="ターン履歴を含める")] = True,
    big_int: Annotated[bool, typer.Option("--big-int", help="数値文字列を整数へ変換")] = False,
) -> None:
    """ゲームの詳細を JSON で出力する。"""

    logger = get_logger("cli.games.show", game_id=game_id)
    client = build_openfront_client(logger=logger)
    record = run_request(
        client.get_game_info(game_id, include_turns=turns, use_big_int=big_int),
        logger=logger,
    )
    echo_json(record)
