"""Reading and writing package metadata files.

Package files are either TOML or YAML documents with a `metadata` section
holding the generic package metadata (including the optional `chocolatey`
table), and an optional `updater` section.
"""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pkgmeta.config.loader import format_validation_errors
from pkgmeta.exceptions import PackageFileError, PkgMetaError
from pkgmeta.models.package import PackageData

logger = logging.getLogger(__name__)

TOML_SUFFIXES = (".toml",)
YAML_SUFFIXES = (".yaml", ".yml")


def _load_toml(path: Path) -> Any:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PackageFileError(f"Invalid TOML syntax in '{path}': {e}") from e


def _load_yaml(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise PackageFileError(f"Invalid YAML syntax in '{path}': {e}") from e


def read_file(path: Path) -> PackageData:
    """Read package data from a TOML or YAML file.

    Args:
        path: Path to the package file.

    Returns:
        The validated package data.

    Raises:
        PackageFileError: If the file can not be read, has an unsupported
            extension, invalid syntax, or invalid content.
    """
    suffix = path.suffix.lower()
    logger.debug("Reading package file '%s'", path)

    try:
        if suffix in TOML_SUFFIXES:
            data = _load_toml(path)
        elif suffix in YAML_SUFFIXES:
            data = _load_yaml(path)
        else:
            raise PackageFileError(
                f"Unsupported package file '{path}': "
                f"expected one of {', '.join(TOML_SUFFIXES + YAML_SUFFIXES)}"
            )
    except OSError as e:
        raise PackageFileError(f"Cannot read package file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise PackageFileError(
            f"Invalid package file '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    if "metadata" not in data:
        raise PackageFileError(
            f"Invalid package file '{path}': missing 'metadata' section"
        )

    try:
        return PackageData.model_validate(data)
    except ValidationError as e:
        raise PackageFileError(
            f"Invalid package file '{path}': {format_validation_errors(e)}"
        ) from e
    except PkgMetaError as e:
        # Raised directly by value parsers inside validators
        raise PackageFileError(f"Invalid package file '{path}': {e}") from e


def dump_yaml(data: PackageData) -> str:
    """Render package data as YAML.

    Only values that were read from a file or explicitly set are written.
    Defaults resolved at runtime, such as the maintainer taken from the
    environment, are left out so they are resolved again on the next read.
    """
    content = data.model_dump(
        mode="json", by_alias=True, exclude_unset=True, exclude_none=True
    )
    return yaml.safe_dump(content, sort_keys=False, allow_unicode=True)


def write_file(data: PackageData, path: Path) -> None:
    """Write package data to a YAML file.

    Raises:
        PackageFileError: If the file can not be written.
    """
    logger.debug("Writing package file '%s'", path)
    try:
        path.write_text(dump_yaml(data), encoding="utf-8")
    except OSError as e:
        raise PackageFileError(f"Cannot write package file '{path}': {e}") from e
