"""入れ子辞書の再帰マージ。"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, incoming in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(incoming, Mapping):
            _merge_into(existing, incoming)
        else:
            # スカラー・リストは右側が丸ごと勝つ（リストは連結しない）
            target[key] = copy.deepcopy(incoming)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """辞書を再帰的にマージする

    両方の値が辞書の場合のみ再帰し、それ以外は override 側の値で置き換える。
    入力はどちらも変更しない。

    Args:
        base: ベースとなる辞書
        override: 上書きする辞書

    Returns:
        マージ済みの新しい辞書
    """
    return merge_all(base, override)


def merge_all(*mappings: Mapping[str, Any]) -> dict[str, Any]:
    """複数の辞書を左から順に deep_merge と同じ規則で畳み込む。"""
    merged: dict[str, Any] = {}
    for mapping in mappings:
        _merge_into(merged, mapping)
    return merged
