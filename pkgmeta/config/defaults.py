"""Default configuration values for pkgmeta."""

from __future__ import annotations

from pkgmeta.models.config import PkgMetaConfig

# Searched for in this order
DEFAULT_CONFIG_NAMES = [".pkgmeta.yaml", ".pkgmeta.yml"]

# Work directory used when neither the command line nor the config sets one
DEFAULT_WORK_DIR = "output"


def get_default_config() -> PkgMetaConfig:
    """Get the default configuration (all fields None)."""
    return PkgMetaConfig()
