from __future__ import annotations

from typing import Annotated

import typer

from openfront_client.cli.render import echo_json, run_request
from openfront_client.infra.openfront import build_openfront_client
from openfront_client.shared.logging import get_logger

app = typer.Typer(help="プレイヤー情報の取得コマンド")

BigIntOption = Annotated[bool, typer.Option("--big-int", help="数値文字列を整数へ変換")]


@app.command("show")
def show_player(
    player_id: Annotated[str, typer.Argument(help="プレイヤー ID")],
    big_int: BigIntOption = False,
) -> None:
    """プレイヤーの情報と戦績を出力する。"""

    logger = get_logger("cli.players.show", player_id=player_id)
    client = build_openfront_client(logger=logger)
    echo_json(run_request(client.get_player_info(player_id, use_big_int=big_int), logger=logger))


@app.command("sessions")
def player_sessions(
    player_id: Annotated[str, typer.Argument(help="プレイヤー ID")],
    big_int: BigIntOption = False,
) -> None:
    """プレイヤーのセッション一覧を出力する。"""

    logger = get_logger("cli.players.sessions", player_id=player_id)
    client = build_openfront_client(logger=logger)
    sessions = run_request(
        client.get_player_sessions(player_id, use_big_int=big_int), logger=logger
    )
    echo_json(sessions)
