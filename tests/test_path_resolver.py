"""Test cases for dot-path resolution."""

from __future__ import annotations

import logging

import pytest

from dotconfig.config.path_resolver import get_by_path, has_path, set_by_path, split_key
from dotconfig.config.schema import MISSING


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("a", ["a"]),
        ("database.host", ["database", "host"]),
        ("a.b.c", ["a", "b", "c"]),
        ("", None),
        ("a..b", None),
        (".a", None),
        ("a.", None),
        (".", None),
    ],
)
def test_split_key(key, expected):
    """キーの分割と不正キーの判定"""
    assert split_key(key) == expected


def test_get_nested_value(sample_config):
    """入れ子の値を取得できる"""
    assert get_by_path(sample_config, "database.host") == "db.internal"
    assert get_by_path(sample_config, "database.port") == 5432
    assert get_by_path(sample_config, "app") == {"name": "demo", "debug": False}


def test_get_missing_returns_default(sample_config):
    """途中のセグメントが欠けていればパス全体が見つからない"""
    assert get_by_path(sample_config, "database.missing") is MISSING
    assert get_by_path(sample_config, "nope.host", "fallback") == "fallback"
    # スカラーの下は辿れない
    assert get_by_path(sample_config, "database.host.name") is MISSING


def test_get_list_index(sample_config):
    """読み取り時は数字セグメントでリストを参照できる"""
    assert get_by_path(sample_config, "servers.1.host") == "b.example"
    assert get_by_path(sample_config, "database.replicas.0") == "r1"
    assert get_by_path(sample_config, "servers.5.host") is MISSING
    assert get_by_path(sample_config, "servers.-1") is MISSING


def test_get_does_not_mutate(sample_config):
    """読み取りで辞書が変更されない"""
    before = repr(sample_config)
    get_by_path(sample_config, "new.deep.key")
    has_path(sample_config, "other.key")
    assert repr(sample_config) == before


def test_has_path_with_none_value():
    """値が None でもキーが存在すれば True"""
    data = {"cache": {"ttl": None}}
    assert has_path(data, "cache.ttl") is True
    assert get_by_path(data, "cache.ttl") is None
    assert has_path(data, "cache.size") is False


@pytest.mark.parametrize("key", ["", "a..b", ".a", "a."])
def test_malformed_key_reads_absent(key):
    """不正なキーは常に存在しない扱い"""
    data = {"a": {"": 1, "b": 2}, "": 3}
    assert get_by_path(data, key) is MISSING
    assert has_path(data, key) is False


def test_set_creates_intermediate_mappings():
    """存在しない途中のキーは辞書として作成される"""
    data: dict = {}
    assert set_by_path(data, "a.b.c", 1) is True
    assert data == {"a": {"b": {"c": 1}}}


def test_set_overwrites_scalar_prefix():
    """途中のスカラー値は辞書で置き換えられる"""
    data = {"a": 5}
    set_by_path(data, "a.b", 7)
    assert data == {"a": {"b": 7}}


def test_set_overwrites_list_prefix():
    """書き込み時はリストも辞書で置き換えられる"""
    data = {"a": [1, 2]}
    set_by_path(data, "a.0", "x")
    assert data == {"a": {"0": "x"}}


def test_set_keeps_sibling_keys():
    """同じ階層の他のキーは保持される"""
    data = {"a": {"x": 1}}
    set_by_path(data, "a.y", 2)
    assert data == {"a": {"x": 1, "y": 2}}


@pytest.mark.parametrize("key", ["", "a..b", ".a", "a."])
def test_set_malformed_key_is_noop(key, caplog):
    """不正なキーへの書き込みは何もせず警告を出す"""
    data = {"a": 1}
    with caplog.at_level(logging.WARNING, logger="dotconfig.config.path_resolver"):
        assert set_by_path(data, key, 99) is False
    assert data == {"a": 1}
    assert "不正な設定キー" in caplog.text
