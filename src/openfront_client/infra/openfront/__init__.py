"""OpenFront 公開 API 向け infra 層パッケージ。"""

from .bigint import normalize_big_integers
from .client import OpenFrontClient, build_openfront_client
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
    PaginationRange,
    PlayerProfile,
    PlayerSession,
    parse_content_range,
)
from .endpoints import (
    get_clan_leaderboard,
    get_clan_sessions,
    get_clan_stats,
    get_game_info,
    get_player_info,
    get_player_sessions,
    list_games,
)
from .transport import (
    OpenFrontClientError,
    OpenFrontDecodeError,
    OpenFrontHTTPStatusError,
    OpenFrontTransport,
    OpenFrontTransportProtocol,
    OpenFrontValidationError,
    RawResponse,
    build_query_string,
)

__all__ = [
    "ClanLeaderboardEntry",
    "ClanLeaderboardResponse",
    "ClanSession",
    "ClanStats",
    "GameListItem",
    "GameRange",
    "GameRecord",
    "GameType",
    "OpenFrontClient",
    "OpenFrontClientError",
    "OpenFrontDecodeError",
    "OpenFrontHTTPStatusError",
    "OpenFrontTransport",
    "OpenFrontTransportProtocol",
    "OpenFrontValidationError",
    "PaginatedGameList",
    "PaginationRange",
    "PlayerProfile",
    "PlayerSession",
    "RawResponse",
    "build_openfront_client",
    "build_query_string",
    "get_clan_leaderboard",
    "get_clan_sessions",
    "get_clan_stats",
    "get_game_info",
    "get_player_info",
    "get_player_sessions",
    "list_games",
    "normalize_big_integers",
    "parse_content_range",
]
