"""dotconfig

Layered configuration store: explicit config, defaults and environment
variables addressed through dot-delimited keys.
"""

__version__ = "0.1.0"

from dotconfig.config import (
    ENV_OVERRIDE_POLICY,
    MISSING,
    ConfigStore,
    coerce_value,
    deep_merge,
    load_config_file,
    merge_all,
)

__all__ = [
    "ENV_OVERRIDE_POLICY",
    "MISSING",
    "ConfigStore",
    "coerce_value",
    "deep_merge",
    "load_config_file",
    "merge_all",
]
