"""アプリケーション全体で共有する設定ローダー。"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

EnvName = Literal["local", "test", "staging", "production"]

DEFAULT_BASE_URL = "https://api.openfront.io"
DEFAULT_USER_AGENT = "OpenFront-Python-Client/1.0"


class OpenFrontSettings(BaseModel):
    """OpenFront 公開 API への接続設定。"""

    base_url: AnyHttpUrl = Field(DEFAULT_BASE_URL, description="OpenFront API のベース URL")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent ヘッダに載せる識別子")
    timeout_seconds: float | None = Field(
        None,
        gt=0,
        description="リクエストのタイムアウト秒数。未指定ならタイムアウトしない",
    )


class AppSettings(BaseSettings):
    """共有設定。`.env` 読み込みと環境変数バリデーションを担う。"""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: EnvName = Field("local", description="実行環境識別子")
    log_level: str = Field("INFO", description="ルートロガーのログレベル")
    openfront: OpenFrontSettings = Field(default_factory=OpenFrontSettings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """設定をロードし、再利用する。

    LRU キャッシュによりプロセス内での重複読み込みを防ぎ、
    `pytest` などから `get_settings.cache_clear()` を呼び出すことで再読込できる。
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "EnvName",
    "OpenFrontSettings",
    "get_settings",
]
