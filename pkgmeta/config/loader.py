"""Configuration file discovery and loading for pkgmeta."""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from pkgmeta.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pkgmeta.constants import RULE_ENV_VAR
from pkgmeta.exceptions import ConfigurationError
from pkgmeta.models.config import PkgMetaConfig
from pkgmeta.models.rules import RuleKind

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Look for a pkgmeta configuration file.

    `.pkgmeta.yaml` wins over `.pkgmeta.yml` when both exist.

    Args:
        start_dir: Directory to look in (default: the working directory).

    Returns:
        The first configuration file found, or None.
    """
    search_dir = start_dir or Path.cwd()
    candidates = (search_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def _read_yaml(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e


def load_config_file(path: Path) -> PkgMetaConfig:
    """Read a configuration file.

    Empty files, and files holding only comments, give the defaults.

    Raises:
        ConfigurationError: If the file is unreadable, is not a YAML
            mapping, or holds unknown keys or invalid values.
    """
    logger.debug("Loading configuration from '%s'", path)
    data = _read_yaml(path)
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return PkgMetaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {format_validation_errors(e)}"
        ) from e


def format_validation_errors(error: ValidationError) -> str:
    """Join pydantic errors as `location: message` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(config_path: str | None = None) -> PkgMetaConfig:
    """Load the explicit configuration file, the discovered one, or defaults.

    Raises:
        ConfigurationError: If the configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is None:
        return get_default_config()
    return load_config_file(discovered)


def resolve_rule_kind(
    option: Optional[str],
    config: PkgMetaConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> RuleKind:
    """Resolve the rule kind to validate against.

    The command line option wins, followed by the `PKGMETA_RULE` environment
    variable and the configuration file. Defaults to the core rules.

    Raises:
        ConfigurationError: If the option or environment value is not a
            known rule kind.
    """
    env = os.environ if environ is None else environ

    candidates = (
        ("option", option),
        (RULE_ENV_VAR, env.get(RULE_ENV_VAR)),
    )
    for source, value in candidates:
        if value:
            try:
                return RuleKind.parse(value)
            except ValueError as e:
                raise ConfigurationError(f"Invalid {source}: {e}") from e

    if config.rule is not None:
        return config.rule
    return RuleKind.default()
