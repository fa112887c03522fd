from __future__ import annotations

from typing import Annotated

import typer

from openfront_client.cli.render import echo_json, run_request
from openfront_client.infra.openfront import build_openfront_client
from openfront_client.shared.logging import get_logger

app = typer.Typer(help="クラン情報の取得コマンド")

StartOption = Annotated[str | None, typer.Option("--start", "-s", help="集計期間の開始")]
EndOption = Annotated[str | None, typer.Option("--end", "-e", help="集計期間の終了")]
LimitOption = Annotated[int | None, typer.Option("--limit", "-l", min=1, help="取得する件数")]


@app.command("leaderboard")
def leaderboard() -> None:
    """加重勝利数上位のクランを出力する。"""

    logger = get_logger("cli.clans.leaderboard")
    client = build_openfront_client(logger=logger)
    echo_json(run_request(client.get_clan_leaderboard(), logger=logger))


@app.command("stats")
def clan_stats(
    clan_tag: Annotated[str, typer.Argument(help="クランタグ")],
    start: StartOption = None,
    end: EndOption = None,
    limit: LimitOption = None,
) -> None:
    """クランの戦績統計を出力する。"""

    logger = get_logger("cli.clans.stats", clan_tag=clan_tag)
    client = build_openfront_client(logger=logger)
    stats = run_request(
        client.get_clan_stats(clan_tag, start=start, end=end, limit=limit), logger=logger
    )
    echo_json(stats)


@app.command("sessions")
def clan_sessions(
    clan_tag: Annotated[str, typer.Argument(help="クランタグ")],
    start: StartOption = None,
    end: EndOption = None,
    limit: LimitOption = None,
) -> None:
    """クランのセッション一覧を出力する。"""

    logger = get_logger("cli.clans.sessions", clan_tag=clan_tag)
    client = build_openfront_client(logger=logger)
    sessions = run_request(
        client.get_clan_sessions(clan_tag, start=start, end=end, limit=limit), logger=logger
    )
    echo_json(sessions)
