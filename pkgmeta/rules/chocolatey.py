"""Rules that only apply when creating Chocolatey packages."""
from __future__ import annotations

from typing import Optional

from pkgmeta.constants import CHOCOLATEY_LABEL
from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.rules import MessageType, RuleKind, RuleMessage
from pkgmeta.rules.base import MetadataRule


class IdIsLowercaseNote(MetadataRule):
    """New packages on the community repository use lowercase identifiers.

    Checks the explicit chocolatey identifier when one is set, otherwise
    the generic identifier.
    """

    name = "choco-id-is-lowercase"

    def should_validate(self, rule_kind: RuleKind) -> bool:
        return rule_kind == RuleKind.COMMUNITY

    def validate(self, metadata: PackageMetadata) -> Optional[RuleMessage]:
        identifier = metadata.id
        if metadata.chocolatey is not None and metadata.chocolatey.id:
            identifier = metadata.chocolatey.id

        if not any(ch.isupper() for ch in identifier):
            return None
        return RuleMessage(
            message_type=MessageType.NOTE,
            package_manager=CHOCOLATEY_LABEL,
            message="The identifier contains upper case characters. If this is a "
            "new package, it should only contain characters in lower case!",
        )


CHOCOLATEY_RULES: tuple[MetadataRule, ...] = (IdIsLowercaseNote(),)
