from __future__ import annotations

import typer

from openfront_client.cli.commands import clans, games, players, scrape
from openfront_client.shared.config import get_settings
from openfront_client.shared.logging import configure_logging_from_settings

app = typer.Typer(help="OpenFront 公開 API クライアントの CLI")

app.add_typer(games.app, name="games", help="ゲーム一覧・詳細")
app.add_typer(players.app, name="players", help="プレイヤー情報・セッション")
app.add_typer(clans.app, name="clans", help="クランのリーダーボード・統計・セッション")
app.add_typer(scrape.app, name="scrape", help="ゲーム一覧と詳細のファイル保存")


def main() -> None:
    """エントリポイント。"""

    configure_logging_from_settings(get_settings())
    app()


if __name__ == "__main__":  # pragma: no cover - CLI エントリ
    main()
