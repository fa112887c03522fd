"""OpenFront API の各リソースに対応するエンドポイント関数。

いずれもトランスポートを明示的に受け取る状態を持たないコルーチンで、
入力の検証、トランスポート呼び出し、結果の整形のみを行う。
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, cast

from .bigint import normalize_big_integers
from .dto import (
    ClanLeaderboardEntry,
    ClanLeaderboardResponse,
    ClanSession,
    ClanStats,
    GameListItem,
    GameRange,
    GameRecord,
    GameType,
    PaginatedGameList,
    PlayerProfile,
    PlayerSession,
    parse_content_range,
)
from .transport import OpenFrontTransportProtocol, OpenFrontValidationError

CONTENT_RANGE_HEADER = "content-range"

TimestampLike = str | datetime


def _format_timestamp(value: TimestampLike | None) -> str | None:
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _require(value: Any, name: str) -> None:
    if value is None or value == "":
        msg = f"`{name}` is required"
        raise OpenFrontValidationError(msg)


def _maybe_normalize(body: Any, use_big_int: bool) -> Any:
    return normalize_big_integers(body) if use_big_int else body


async def list_games(
    transport: OpenFrontTransportProtocol,
    *,
    start: TimestampLike | None,
    end: TimestampLike | None,
    game_type: GameType | str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> PaginatedGameList:
    """指定期間内に開始したゲームの ID と基本メタデータを取得する。

    Args:
        transport: リクエストを実行するトランスポート。
        start: 期間の開始 (ISO 8601 文字列または datetime)。必須。
        end: 期間の終了。必須。
        game_type: `Public` などのゲーム種別で絞り込む。
        limit: 取得件数。
        offset: 取得開始位置。

    Raises:
        OpenFrontValidationError: `start` か `end` が未指定の場合。通信前に送出する。
    """

    if not start or not end:
        msg = "Start and End timestamps are required."
        raise OpenFrontValidationError(msg)

    response = await transport.get(
        "/public/games",
        {
            "start": _format_timestamp(start),
            "end": _format_timestamp(end),
            "type": game_type,
            "limit": limit,
            "offset": offset,
        },
    )
    page = parse_content_range(response.headers.get(CONTENT_RANGE_HEADER))
    return PaginatedGameList(
        items=cast(list[GameListItem], response.body),
        total=page.total,
        range=GameRange(start=page.start, end=page.end),
    )


async def get_game_info(
    transport: OpenFrontTransportProtocol,
    game_id: str,
    *,
    include_turns: bool = True,
    use_big_int: bool = False,
) -> GameRecord:
    """ゲームの詳細を取得する。

    `include_turns=False` の場合のみ `turns=false` を付け、ターン履歴を省く。
    """

    _require(game_id, "game_id")
    params = {"turns": "false"} if include_turns is False else {}
    response = await transport.get(f"/public/game/{game_id}", params)
    return _maybe_normalize(response.body, use_big_int)


async def get_player_info(
    transport: OpenFrontTransportProtocol,
    player_id: str,
    *,
    use_big_int: bool = False,
) -> PlayerProfile:
    """プレイヤーの情報と戦績を取得する。"""

    _require(player_id, "player_id")
    response = await transport.get(f"/public/player/{player_id}")
    return _maybe_normalize(response.body, use_big_int)


async def get_player_sessions(
    transport: OpenFrontTransportProtocol,
    player_id: str,
    *,
    use_big_int: bool = False,
) -> list[PlayerSession]:
    """プレイヤーが参加したゲームとクライアント ID (セッション) の一覧を取得する。"""

    _require(player_id, "player_id")
    response = await transport.get(f"/public/player/{player_id}/sessions")
    return _maybe_normalize(response.body, use_big_int)


async def get_clan_leaderboard(
    transport: OpenFrontTransportProtocol,
) -> ClanLeaderboardResponse | list[ClanLeaderboardEntry]:
    """加重勝利数順の上位クランを取得する。並び順はサーバーが決める。"""

    response = await transport.get("/public/clans/leaderboard")
    return response.body


async def get_clan_stats(
    transport: OpenFrontTransportProtocol,
    clan_tag: str,
    *,
    start: TimestampLike | None = None,
    end: TimestampLike | None = None,
    limit: int | None = None,
) -> ClanStats:
    """クランの戦績統計を取得する。"""

    _require(clan_tag, "clan_tag")
    response = await transport.get(
        f"/public/clan/{clan_tag}",
        {"start": _format_timestamp(start), "end": _format_timestamp(end), "limit": limit},
    )
    return response.body


async def get_clan_sessions(
    transport: OpenFrontTransportProtocol,
    clan_tag: str,
    *,
    start: TimestampLike | None = None,
    end: TimestampLike | None = None,
    limit: int | None = None,
) -> list[ClanSession]:
    _require(clan_tag, "clan_tag")
    response = await transport.get(
        f"/public/clan/{clan_tag}/sessions",
        {"start": _format_timestamp(start), "end": _format_timestamp(end), "limit": limit},
    )
    return response.body


__all__ = [
    "CONTENT_RANGE_HEADER",
    "get_clan_leaderboard",
    "get_clan_sessions",
    "get_clan_stats",
    "get_game_info",
    "get_player_info",
    "get_player_sessions",
    "list_games",
]
