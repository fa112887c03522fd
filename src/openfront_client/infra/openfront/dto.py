"""OpenFront API のレスポンス型とページング情報の DTO。"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

from openfront_client.shared.types import DTO

GameType = Literal["Private", "Public", "Singleplayer"]

_CONTENT_RANGE_PATTERN = re.compile(r"games (\d+)-(\d+)/(\d+)")


# -- ゲーム一覧 --


class GameListItem(TypedDict, total=False):
    game: str
    start: str
    end: str
    type: GameType
    mode: str
    difficulty: str


# -- ゲーム詳細 --


class GameConfig(TypedDict, total=False):
    gameMap: str
    difficulty: str
    donateGold: bool
    donateTroops: bool
    gameType: str
    gameMode: str
    gameMapSize: str
    disableNPCs: bool
    bots: int
    infiniteGold: bool
    infiniteTroops: bool
    instantBuild: bool
    disabledUnits: list[str]
    playerTeams: int
    randomSpawn: bool


class PlayerBoats(TypedDict, total=False):
    trade: list[str]
    trans: list[str]


class PlayerBombs(TypedDict, total=False):
    abomb: list[str]
    hbomb: list[str]


class PlayerUnits(TypedDict, total=False):
    city: list[str]
    port: list[str]
    saml: list[str]
    silo: list[str]
    fact: list[str]
    defp: list[str]
    wshp: list[str]


class PlayerStats(TypedDict, total=False):
    attacks: list[str]
    conquests: str
    boats: PlayerBoats
    bombs: PlayerBombs
    gold: list[str]
    units: PlayerUnits


class PlayerCosmetics(TypedDict, total=False):
    flag: str


class GamePlayer(TypedDict, total=False):
    clientID: str
    username: str
    cosmetics: PlayerCosmetics
    persistentID: str | None
    stats: PlayerStats


class GameMetadata(TypedDict, total=False):
    gameID: str
    config: GameConfig
    players: list[GamePlayer]
    lobbyCreatedAt: int
    start: int
    end: int
    duration: int
    num_turns: int
    winner: list[str]
    lobbyFillTime: int


class TurnIntent(TypedDict, total=False):
    """spawn/attack/boat/alliance/build_unit の各インテントを包含する形。"""

    clientID: str
    type: str
    tile: int
    targetID: str | None
    troops: int
    dst: int
    src: int | None
    recipient: str
    unit: str


class GameTurn(TypedDict, total=False):
    turnNumber: int
    intents: list[TurnIntent]
    hash: int


class GameRecord(TypedDict, total=False):
    version: str
    gitCommit: str
    domain: str
    subdomain: str
    info: GameMetadata
    turns: list[GameTurn]


# -- プレイヤー --


class PlayerElo(TypedDict, total=False):
    rating: int
    kFactor: int


class PlayerProfile(TypedDict, total=False):
    id: str
    name: str
    elo: PlayerElo
    createdAt: str
    games: list[dict[str, Any]]
    stats: dict[str, Any]


class PlayerSession(TypedDict, total=False):
    gameId: str
    clientId: str
    start: str
    end: str
    gameStart: str
    gameMode: str
    gameType: str
    clanTag: str | None
    hasWon: bool


# -- クラン --


class ClanLeaderboardEntry(TypedDict, total=False):
    clanTag: str
    games: int
    wins: int
    losses: int
    weightedWins: float
    weightedLosses: float
    weightedWLRatio: float


class ClanLeaderboardResponse(TypedDict, total=False):
    start: str
    end: str
    clans: list[ClanLeaderboardEntry]


class ClanStatsDetail(TypedDict, total=False):
    wins: int
    losses: int
    winRate: float
    winLossRatio: float
    weightedWinLossRatio: float


class ClanStatsBreakdown(TypedDict, total=False):
    teamType: dict[str, ClanStatsDetail]
    numTeams: dict[str, ClanStatsDetail]


class ClanStats(TypedDict, total=False):
    totalGames: int
    wins: int
    losses: int
    winRate: float
    breakdown: ClanStatsBreakdown


class ClanSession(TypedDict, total=False):
    gameId: str
    totalPlayerCount: int
    numTeams: int
    clanPlayerCount: int
    hasWon: bool
    timestamp: str


# -- ページング --


@dataclass(slots=True)
class PaginationRange(DTO):
    """`content-range` ヘッダから得る start/end/total。"""

    start: int = 0
    end: int = 0
    total: int = 0


@dataclass(slots=True)
class GameRange(DTO):
    start: int = 0
    end: int = 0


@dataclass(slots=True)
class PaginatedGameList(DTO):
    """ゲーム一覧とページング情報。`items` はレスポンス配列そのもの。"""

    items: list[GameListItem] = field(default_factory=list)
    total: int = 0
    range: GameRange = field(default_factory=GameRange)


def parse_content_range(value: str | None) -> PaginationRange:
    """`games <start>-<end>/<total>` 形式のヘッダ値を解釈する。

    ヘッダが無い、または形式が合わない場合は全て 0 の範囲を返す。
    """

    if not value:
        return PaginationRange()

    match = _CONTENT_RANGE_PATTERN.search(value)
    if match is None:
        return PaginationRange()

    start, end, total = (int(group) for group in match.groups())
    return PaginationRange(start=start, end=end, total=total)


__all__ = [
    "ClanLeaderboardEntry",
    "ClanLeaderboardResponse",
    "ClanSession",
    "ClanStats",
    "ClanStatsBreakdown",
    "ClanStatsDetail",
    "GameConfig",
    "GameListItem",
    "GameMetadata",
    "GamePlayer",
    "GameRange",
    "GameRecord",
    "GameTurn",
    "GameType",
    "PaginatedGameList",
    "PaginationRange",
    "PlayerBoats",
    "PlayerBombs",
    "PlayerCosmetics",
    "PlayerElo",
    "PlayerProfile",
    "PlayerSession",
    "PlayerStats",
    "PlayerUnits",
    "TurnIntent",
    "parse_content_range",
]
