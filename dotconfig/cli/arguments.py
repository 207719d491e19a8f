"""Command-line argument parsing."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"KEY=VALUE 形式で指定してください: {text!r}")
    return key, value


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（None の場合は sys.argv[1:]）

    Returns:
        パース済み引数
    """
    parser = argparse.ArgumentParser(
        prog="dotconfig",
        description="設定・デフォルト・環境変数を統合してドット記法のキーで参照する",
    )

    parser.add_argument(
        "--config",
        action="append",
        default=[],
        metavar="PATH",
        help="設定ファイルのパス（複数指定時は左から順にマージ）",
    )

    parser.add_argument(
        "--defaults",
        action="append",
        default=[],
        metavar="PATH",
        help="デフォルト設定ファイルのパス（複数指定可）",
    )

    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        type=_key_value,
        metavar="KEY=VALUE",
        help="設定値を上書き（値は環境変数と同じ規則で型変換される）",
    )

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="設定値をJSONで表示")
    get_parser.add_argument("key", help="設定キー（例: database.host）")
    get_parser.add_argument("--default", help="キーが存在しない場合の値（型変換される）")

    has_parser = subparsers.add_parser("has", help="キーの存在を終了コードで返す")
    has_parser.add_argument("key", help="設定キー")

    dump_parser = subparsers.add_parser("dump", help="統合後の設定全体を表示")
    dump_parser.add_argument("--format", choices=["yaml", "json"], default="yaml", help="出力形式（デフォルト: yaml）")

    validate_parser = subparsers.add_parser("validate", help="必須キーの存在を確認")
    validate_parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="KEY",
        help="存在すべき設定キー（複数指定可）",
    )

    return parser.parse_args(argv)
