"""設定ファイルの読み込み専用モジュール。

ConfigStore 自体はファイル形式を扱わないため、初期の辞書はここで作る。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import tomllib
from typing import Any

import yaml

from dotconfig.config.merger import merge_all

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json", ".toml")


def load_config_file(path: str | Path) -> dict[str, Any]:
    """YAML/JSON/TOML設定を辞書として読み込む。

    Args:
        path: 設定ファイルのパス

    Returns:
        読み込まれた設定データ（空のYAMLは空の辞書）

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 形式が未対応、解析に失敗、またはトップレベルが辞書でない場合
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"設定ファイルが見つかりません: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"サポートされない設定形式です: {suffix}")

    try:
        if suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        else:
            with config_path.open(encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
                    if data is None:
                        data = {}
    except yaml.YAMLError as e:
        raise ValueError(f"YAML解析エラー: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON解析エラー: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"TOML解析エラー: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"設定ファイルのトップレベルは辞書形式である必要があります: {config_path}")

    logger.info(f"設定ファイル '{config_path}' を読み込みました。")
    return data


def load_config_files(*paths: str | Path) -> dict[str, Any]:
    """複数の設定ファイルを読み込み、左から順に再帰マージする。"""
    return merge_all(*(load_config_file(path) for path in paths))
