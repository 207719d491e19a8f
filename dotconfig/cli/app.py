"""Command-line entry point: load files, build a ConfigStore, run a subcommand."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import yaml

from dotconfig.cli.arguments import parse_arguments
from dotconfig.config import ConfigStore, coerce_value, load_config_files
from dotconfig.utils import setup_logging

if TYPE_CHECKING:
    import argparse
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_store(args: argparse.Namespace) -> ConfigStore:
    """引数で指定されたファイルと上書き値から ConfigStore を構築する"""
    store = ConfigStore(load_config_files(*args.config), load_config_files(*args.defaults))
    for key, raw in args.overrides:
        store.set(key, coerce_value(raw))
    return store


def _cmd_get(store: ConfigStore, args: argparse.Namespace) -> int:
    default = None if args.default is None else coerce_value(args.default)
    value = store.get(args.key, default)
    print(json.dumps(value, ensure_ascii=False, default=str))
    return 0


def _cmd_has(store: ConfigStore, args: argparse.Namespace) -> int:
    return 0 if store.has(args.key) else 1


def _cmd_dump(store: ConfigStore, args: argparse.Namespace) -> int:
    data = store.all()
    if args.format == "json":
        print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
    else:
        print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False), end="")
    return 0


def _cmd_validate(store: ConfigStore, args: argparse.Namespace) -> int:
    missing = [key for key in args.require if not store.has(key)]
    for key in missing:
        logger.error(f"必須項目 '{key}' が設定に存在しません。")
    if missing:
        return 1
    logger.info("設定の検証が完了しました。")
    return 0


COMMANDS = {
    "get": _cmd_get,
    "has": _cmd_has,
    "dump": _cmd_dump,
    "validate": _cmd_validate,
}


def main(argv: Sequence[str] | None = None) -> int:
    """メイン処理"""
    args = parse_arguments(argv)
    setup_logging(args.debug)

    try:
        store = build_store(args)
        return COMMANDS[args.command](store, args)
    except FileNotFoundError as e:
        logger.error(f"ファイルが見つかりません: {e}")
        return 1
    except ValueError as e:
        logger.error(f"設定エラー: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("処理が中断されました")
        return 130
    except Exception as e:
        logger.error(f"予期しないエラーが発生しました: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
