"""ドット区切りキーによる入れ子辞書のアクセス。"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dotconfig.config.schema import MISSING

logger = logging.getLogger(__name__)


def split_key(key: str) -> list[str] | None:
    """キーをセグメントに分割する

    空文字列や空セグメントを含むキー（"a..b", ".a", "a."）は不正として None を返す。

    Args:
        key: ドット区切りのキー（例: 'database.host'）

    Returns:
        セグメントのリスト、不正なキーの場合は None
    """
    if not isinstance(key, str) or not key:
        return None
    segments = key.split(".")
    if any(not segment for segment in segments):
        return None
    return segments


def _step(node: Any, segment: str) -> Any:
    """1セグメント分だけ降りる。見つからなければ MISSING。"""
    if isinstance(node, Mapping):
        return node.get(segment, MISSING)
    # 読み取り時のみ、数字セグメントでリストを参照できる
    if isinstance(node, list) and segment.isdigit() and segment.isascii():
        index = int(segment)
        if index < len(node):
            return node[index]
    return MISSING


def get_by_path(mapping: Mapping[str, Any], key: str, default: Any = MISSING) -> Any:
    """ドット記法で値を取得する

    Args:
        mapping: 探索対象の辞書
        key: 設定キー（ドット記法をサポート）
        default: キーが存在しない場合に返す値

    Returns:
        見つかった値、またはデフォルト値
    """
    segments = split_key(key)
    if segments is None:
        return default

    value: Any = mapping
    for segment in segments:
        value = _step(value, segment)
        if value is MISSING:
            return default
    return value


def has_path(mapping: Mapping[str, Any], key: str) -> bool:
    """キーが解決できるかを判定する。値が None でも存在すれば True。"""
    return get_by_path(mapping, key, MISSING) is not MISSING


def set_by_path(mapping: dict[str, Any], key: str, value: Any) -> bool:
    """ドット記法で値を設定する

    途中のセグメントが存在しない、または辞書でない場合は空の辞書で上書きしてから降りる。
    既存のスカラー値やリストは失われる。

    Args:
        mapping: 書き込み対象の辞書（その場で変更される）
        key: 設定キー（ドット記法をサポート）
        value: 設定する値

    Returns:
        値を設定した場合 True、キーが不正で何もしなかった場合 False
    """
    segments = split_key(key)
    if segments is None:
        logger.warning(f"不正な設定キーのため書き込みを無視しました: {key!r}")
        return False

    current = mapping
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child

    current[segments[-1]] = value
    return True
