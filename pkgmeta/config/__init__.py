"""Configuration handling for pkgmeta."""
from __future__ import annotations

from pkgmeta.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    DEFAULT_WORK_DIR,
    get_default_config,
)
from pkgmeta.config.loader import (
    find_config_file,
    format_validation_errors,
    load_config,
    load_config_file,
    resolve_rule_kind,
)
from pkgmeta.models.config import PkgMetaConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "DEFAULT_WORK_DIR",
    "PkgMetaConfig",
    "find_config_file",
    "format_validation_errors",
    "get_default_config",
    "load_config",
    "load_config_file",
    "resolve_rule_kind",
]
