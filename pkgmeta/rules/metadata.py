"""Rules that apply to the generic package metadata."""
from __future__ import annotations

from typing import Optional

from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.rules import MessageType, RuleKind, RuleMessage
from pkgmeta.models.values import is_local_url
from pkgmeta.rules.base import MetadataRule


class IdNotEmptyRequirement(MetadataRule):
    """The identifier must contain something other than whitespace."""

    name = "id-not-empty"

    def should_validate(self, rule_kind: RuleKind) -> bool:
        return True

    def validate(self, metadata: PackageMetadata) -> Optional[RuleMessage]:
        if metadata.id.strip():
            return None
        return RuleMessage(
            message_type=MessageType.REQUIREMENT,
            message="A identifier can not be empty!",
        )


class MaintainersNotEmptyRequirement(MetadataRule):
    """At least one non-empty maintainer must be specified."""

    name = "maintainers-not-empty"

    def should_validate(self, rule_kind: RuleKind) -> bool:
        return True

    def validate(self, metadata: PackageMetadata) -> Optional[RuleMessage]:
        if any(maintainer for maintainer in metadata.maintainers):
            return None
        return RuleMessage(
            message_type=MessageType.REQUIREMENT,
            message="At least 1 maintainer must be specified for the package!",
        )


class ProjectUrlNotLocalPathRequirement(MetadataRule):
    """The project url must be a remote location."""

    name = "project-url-not-local-path"

    def should_validate(self, rule_kind: RuleKind) -> bool:
        return True

    def validate(self, metadata: PackageMetadata) -> Optional[RuleMessage]:
        if not is_local_url(metadata.project_url):
            return None
        return RuleMessage(
            message_type=MessageType.REQUIREMENT,
            message="The project url can not be a local path!",
        )


# Run in this order
METADATA_RULES: tuple[MetadataRule, ...] = (
    IdNotEmptyRequirement(),
    MaintainersNotEmptyRequirement(),
    ProjectUrlNotLocalPathRequirement(),
)
