"""Logging utilities for dotconfig."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "system.log"


def setup_logging(debug_mode: bool = False, output_dir: str | Path | None = None) -> None:
    """ロギングを設定する

    Args:
        debug_mode: デバッグモードの場合True
        output_dir: ログファイルの出力ディレクトリ（None の場合はコンソールのみ）
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO

    # 既存のハンドラをクリア
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    # コンソール出力（標準出力はコマンドの結果に使うため標準エラーへ）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # ファイル出力
    if output_dir is not None:
        log_dir = Path(output_dir)
        log_dir.mkdir(exist_ok=True, parents=True)

        file_handler = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)
