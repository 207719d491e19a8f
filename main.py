#!/usr/bin/env python
"""
dotconfig - メインエントリーポイント

設定ファイル・デフォルト設定・環境変数を統合し、
ドット記法のキーで設定値を参照します。
"""

import sys

from dotconfig.cli import main

if __name__ == "__main__":
    sys.exit(main())
