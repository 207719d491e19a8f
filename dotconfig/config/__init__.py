"""Configuration resolution: dot-path access, deep merge, environment overrides."""

from dotconfig.config.coercion import coerce_value
from dotconfig.config.loader import load_config_file, load_config_files
from dotconfig.config.merger import deep_merge, merge_all
from dotconfig.config.path_resolver import get_by_path, has_path, set_by_path, split_key
from dotconfig.config.resolver import ENV_OVERRIDE_POLICY, env_var_name, lookup_env_override
from dotconfig.config.schema import MISSING, ConfigMapping, ConfigValue
from dotconfig.config.store import ConfigStore

__all__ = [
    "ENV_OVERRIDE_POLICY",
    "MISSING",
    "ConfigMapping",
    "ConfigStore",
    "ConfigValue",
    "coerce_value",
    "deep_merge",
    "env_var_name",
    "get_by_path",
    "has_path",
    "load_config_file",
    "load_config_files",
    "lookup_env_override",
    "merge_all",
    "set_by_path",
    "split_key",
]
