"""環境変数による上書きの解決。

キー 'database.host' は環境変数 DATABASE_HOST に対応する（'.' -> '_'、大文字化、接頭辞なし）。
異なるキーが同じ変数名になる場合（'a.b_c' と 'a_b.c' はどちらも A_B_C）、
その変数は両方のキーを上書きする。
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from dotconfig.config.coercion import coerce_value
from dotconfig.config.path_resolver import split_key
from dotconfig.config.schema import MISSING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# 環境変数が存在すれば、config / defaults / 呼び出し側のデフォルトより常に優先する
ENV_OVERRIDE_POLICY = "environment-always-wins"


def env_var_name(key: str) -> str:
    """設定キーから環境変数名を導出する。"""
    return key.replace(".", "_").upper()


def lookup_env_override(key: str, environ: Mapping[str, str] | None = None) -> Any:
    """キーに対応する環境変数を探し、型変換した値を返す

    Args:
        key: 設定キー（ドット記法）
        environ: 参照する環境変数（None の場合は os.environ）

    Returns:
        型変換済みの値、環境変数が存在しない場合は MISSING
    """
    if split_key(key) is None:
        return MISSING

    source = os.environ if environ is None else environ
    name = env_var_name(key)
    if name not in source:
        return MISSING

    value = coerce_value(source[name])
    logger.debug(f"環境変数 {name} で設定値を上書きします: {key} = {value!r}")
    return value
