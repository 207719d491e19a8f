"""Configuration store reconciling explicit config, defaults and environment variables."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from dotconfig.config.merger import deep_merge
from dotconfig.config.path_resolver import get_by_path, has_path, set_by_path
from dotconfig.config.resolver import env_var_name, lookup_env_override
from dotconfig.config.schema import MISSING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class ConfigStore:
    """設定ストアクラス

    明示的な設定（config）、宣言されたデフォルト（defaults）、環境変数の3つを
    ドット記法のキー（例: 'database.host'）で統合して設定値を提供する。

    値の優先順位（get）:
        1. 環境変数（キーの '.' を '_' にして大文字化した名前）。存在すれば常に勝つ
        2. config
        3. defaults
        4. 呼び出し側のデフォルト値

    ファイルの読み込みや保存、スキーマ検証は行わない。内部でロックは取らないため、
    複数スレッドから共有する場合は呼び出し側で排他制御すること。

    Attributes:
        config: 明示的な設定データのコピー
        defaults: デフォルト設定のコピー
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        defaults: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """ConfigStoreを初期化する

        Args:
            config: 初期設定（コピーして保持する）
            defaults: デフォルト設定（コピーして保持する）
            environ: 参照する環境変数（None の場合は呼び出し時点の os.environ）
        """
        self._config: dict[str, Any] = copy.deepcopy(dict(config or {}))
        self._defaults: dict[str, Any] = copy.deepcopy(dict(defaults or {}))
        self.environ = environ

    @property
    def config(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)

    @property
    def defaults(self) -> dict[str, Any]:
        return copy.deepcopy(self._defaults)

    def get(self, key: str, default: Any = None) -> Any:
        """設定値を取得する

        config、defaults、default の順に解決したうえで、対応する環境変数が
        存在すればその型変換済みの値を返す。保存された None は値として扱い、
        defaults へはフォールバックしない。

        Args:
            key: 設定キー（ドット記法をサポート）
            default: キーが存在しない場合のデフォルト値

        Returns:
            設定値、またはデフォルト値
        """
        env_value = lookup_env_override(key, self.environ)
        if env_value is not MISSING:
            return env_value

        value = get_by_path(self._config, key)
        if value is MISSING:
            value = get_by_path(self._defaults, key)
        if value is MISSING:
            return default
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        """設定値を動的に変更する

        途中のキーが辞書でない場合は空の辞書で置き換える（既存の値は失われる）。

        Args:
            key: 設定キー（ドット記法をサポート）
            value: 設定する値
        """
        if set_by_path(self._config, key, copy.deepcopy(value)):
            logger.debug(f"設定値を変更しました: {key} = {value!r}")

    def has(self, key: str) -> bool:
        """config または defaults にキーが存在するかを判定する（環境変数は見ない）"""
        return has_path(self._config, key) or has_path(self._defaults, key)

    def all(self) -> dict[str, Any]:
        """defaults に config を再帰的に重ねた設定全体を返す（新しい辞書）"""
        return deep_merge(self._defaults, self._config)

    def merge(self, incoming: Mapping[str, Any]) -> None:
        """設定を config に再帰的にマージする

        Args:
            incoming: マージする設定（コピーして取り込む）
        """
        self._config = deep_merge(self._config, incoming)
        logger.debug(f"設定をマージしました: {list(incoming)}")

    @staticmethod
    def env_var_name(key: str) -> str:
        """キーを上書きする環境変数名を返す"""
        return env_var_name(key)

    def __repr__(self) -> str:
        return f"ConfigStore(config={self._config!r}, defaults={self._defaults!r})"
