"""Pydantic data models for pkgmeta."""

from pkgmeta.models.chocolatey import ChocolateyMetadata, generate_identifier
from pkgmeta.models.config import PkgMetaConfig
from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.package import PackageData
from pkgmeta.models.rules import (
    MessageType,
    RuleKind,
    RuleMessage,
    ValidationResult,
)
from pkgmeta.models.updater import (
    ChocolateyParseUrl,
    ChocolateyUpdaterData,
    ChocolateyUpdaterType,
    PackageUpdateData,
    ParseUrlWithRegex,
)
from pkgmeta.models.values import (
    Description,
    DescriptionLocation,
    License,
    LicenseKind,
    Version,
    description_text,
    parse_url,
    parse_version,
    to_choco,
)

__all__ = [
    "ChocolateyMetadata",
    "ChocolateyParseUrl",
    "ChocolateyUpdaterData",
    "ChocolateyUpdaterType",
    "Description",
    "DescriptionLocation",
    "License",
    "LicenseKind",
    "MessageType",
    "PackageData",
    "PackageMetadata",
    "PackageUpdateData",
    "ParseUrlWithRegex",
    "PkgMetaConfig",
    "RuleKind",
    "RuleMessage",
    "ValidationResult",
    "Version",
    "description_text",
    "generate_identifier",
    "parse_url",
    "parse_version",
    "to_choco",
]
