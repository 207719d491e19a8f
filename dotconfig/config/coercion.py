"""環境変数文字列の型変換。"""

from __future__ import annotations

import json
import re
from typing import Any

_BOOL_LITERALS = {"true": True, "false": False}

_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_NUMBER_PATTERN = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity は JSON 標準ではないので受け付けない
    raise ValueError(f"unsupported JSON constant: {name}")


def _parse_number(raw: str) -> int | float | None:
    # 桁数上限（int の文字列変換制限）や float の桁あふれは次の規則へ回す
    try:
        if "." in raw:
            return float(raw)
        if _INT_PATTERN.fullmatch(raw):
            return int(raw)
        return int(float(raw))
    except (ValueError, OverflowError):
        return None


def coerce_value(raw: Any) -> Any:
    """環境変数の文字列を型付きの値に変換する

    変換順（最初に一致したものを採用）:
        1. 大文字小文字を区別しない "true" / "false" -> bool
        2. 数値リテラル: "." を含めば float、含まなければ int（"1e3" -> 1000）
        3. JSON リテラル（オブジェクト、配列、文字列、数値、真偽値、null）
        4. それ以外は元の文字列

    文字列以外はそのまま返す。例外は送出しない。

    Args:
        raw: 環境変数から得た値

    Returns:
        変換後の値
    """
    if not isinstance(raw, str):
        return raw

    lowered = raw.lower()
    if lowered in _BOOL_LITERALS:
        return _BOOL_LITERALS[lowered]

    if _NUMBER_PATTERN.fullmatch(raw):
        number = _parse_number(raw)
        if number is not None:
            return number

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return raw
