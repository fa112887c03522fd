"""トランスポートとエンドポイント関数を束ねた OpenFront API クライアント。"""

from __future__ import annotations

import httpx

from openfront_client.shared.config import AppSettings, get_settings

from . import endpoints
from .dto import (
    ClanLeaderboardEntry,
    ClanLeaderboardResponse,
    ClanSession,
    ClanStats,
    GameRecord,
    GameType,
    PaginatedGameList,
    PlayerProfile,
    PlayerSession,
)
from .endpoints import TimestampLike
from .transport import OpenFrontTransport, OpenFrontTransportProtocol


class OpenFrontClient:
    """OpenFront 公開 API の各エンドポイントをメソッドとして提供する。

    状態はトランスポートのみで、呼び出し同士は独立している。
    """

    def __init__(self, transport: OpenFrontTransportProtocol) -> None:
        self._transport = transport

    @property
    def transport(self) -> OpenFrontTransportProtocol:
        return self._transport

    async def list_games(
        self,
        *,
        start: TimestampLike | None,
        end: TimestampLike | None,
        game_type: GameType | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> PaginatedGameList:
        return await endpoints.list_games(
            self._transport,
            start=start,
            end=end,
            game_type=game_type,
            limit=limit,
            offset=offset,
        )

    async def get_game_info(
        self,
        game_id: str,
        *,
        include_turns: bool = True,
        use_big_int: bool = False,
    ) -> GameRecord:
        return await endpoints.get_game_info(
            self._transport,
            game_id,
            include_turns=include_turns,
            use_big_int=use_big_int,
        )

    async def get_player_info(self, player_id: str, *, use_big_int: bool = False) -> PlayerProfile:
        return await endpoints.get_player_info(
            self._transport, player_id, use_big_int=use_big_int
        )

    async def get_player_sessions(
        self, player_id: str, *, use_big_int: bool = False
    ) -> list[PlayerSession]:
        return await endpoints.get_player_sessions(
            self._transport, player_id, use_big_int=use_big_int
        )

    async def get_clan_leaderboard(
        self,
    ) -> ClanLeaderboardResponse | list[ClanLeaderboardEntry]:
        return await endpoints.get_clan_leaderboard(self._transport)

    async def get_clan_stats(
        self,
        clan_tag: str,
        *,
        start: TimestampLike | None = None,
        end: TimestampLike | None = None,
        limit: int | None = None,
    ) -> ClanStats:
        return await endpoints.get_clan_stats(
            self._transport, clan_tag, start=start, end=end, limit=limit
        )

    async def get_clan_sessions(
        self,
        clan_tag: str,
        *,
        start: TimestampLike | None = None,
        end: TimestampLike | None = None,
        limit: int | None = None,
    ) -> list[ClanSession]:
        return await endpoints.get_clan_sessions(
            self._transport, clan_tag, start=start, end=end, limit=limit
        )


def build_openfront_client(
    *,
    settings: AppSettings | None = None,
    logger=None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> OpenFrontClient:
    """共有設定から OpenFront クライアントを構築するファクトリ。"""

    app_settings = settings or get_settings()
    openfront_settings = app_settings.openfront
    transport = OpenFrontTransport(
        base_url=str(openfront_settings.base_url),
        user_agent=openfront_settings.user_agent,
        timeout=openfront_settings.timeout_seconds,
        http_transport=http_transport,
        logger=logger,
    )
    return OpenFrontClient(transport)


__all__ = ["OpenFrontClient", "build_openfront_client"]
