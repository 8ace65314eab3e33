"""Validation rules for package metadata."""
from pkgmeta.rules.base import MetadataRule
from pkgmeta.rules.chocolatey import CHOCOLATEY_RULES, IdIsLowercaseNote
from pkgmeta.rules.metadata import (
    METADATA_RULES,
    IdNotEmptyRequirement,
    MaintainersNotEmptyRequirement,
    ProjectUrlNotLocalPathRequirement,
)
from pkgmeta.rules.validation import RULE_SETS, run_rules, validate_metadata

__all__ = [
    "CHOCOLATEY_RULES",
    "IdIsLowercaseNote",
    "IdNotEmptyRequirement",
    "METADATA_RULES",
    "MaintainersNotEmptyRequirement",
    "MetadataRule",
    "ProjectUrlNotLocalPathRequirement",
    "RULE_SETS",
    "run_rules",
    "validate_metadata",
]
