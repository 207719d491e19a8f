"""設定値の型定義。

ファイル形式や検証には関与せず、ストアが扱う値の形だけを定める。
"""

from __future__ import annotations

from typing import Union

ConfigScalar = Union[None, bool, int, float, str]
ConfigValue = Union[ConfigScalar, list["ConfigValue"], dict[str, "ConfigValue"]]
ConfigMapping = dict[str, ConfigValue]


class _Missing:
    """値が存在しないことを表す番兵。None（保存された null）とは区別する。"""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
