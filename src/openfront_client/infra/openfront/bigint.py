"""数字のみの文字列を任意精度整数へ変換する正規化処理。

OpenFront API は 64bit を超え得る ID を数値文字列として返す。呼び出し側が
完全一致比較や演算を必要とする場合に限り、`normalize_big_integers` で
`int` へ引き上げる。
"""

from __future__ import annotations

import re
from typing import Any

_DIGITS_PATTERN = re.compile(r"[0-9]+")


def is_digit_string(value: Any) -> bool:
    """ASCII の 10 進数字のみで構成された文字列かどうか。"""

    return isinstance(value, str) and _DIGITS_PATTERN.fullmatch(value) is not None


def _to_int(value: str) -> int | str:
    try:
        return int(value)
    except ValueError:
        # sys.get_int_max_str_digits() を超える桁数では変換できない
        return value


def normalize_big_integers(value: Any) -> Any:
    """デコード済み JSON を再帰的に走査し、数字のみの文字列を `int` にする。

    配列は順序と長さを、オブジェクトはキーをすべて保持する。真偽値・数値・
    None・数字以外を含む文字列 (`"-5"`, `"12.3"` など) はそのまま返す。
    何度適用しても結果は変わらない。
    """

    if is_digit_string(value):
        return _to_int(value)
    if isinstance(value, list):
        return [normalize_big_integers(item) for item in value]
    if isinstance(value, dict):
        return {key: normalize_big_integers(item) for key, item in value.items()}
    return value


__all__ = ["is_digit_string", "normalize_big_integers"]
