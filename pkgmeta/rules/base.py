"""Base rule interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.rules import RuleKind, RuleMessage


class MetadataRule(ABC):
    """Abstract base class for metadata validation rules.

    Rules are stateless, and must never modify the metadata they validate.
    """

    #: Short name of the rule, used in logs.
    name: str = ""

    @abstractmethod
    def should_validate(self, rule_kind: RuleKind) -> bool:
        """Check whether this rule runs for the rule kind.

        Args:
            rule_kind: The rule kind metadata is validated against.

        Returns:
            True if the rule applies to the rule kind.
        """

    @abstractmethod
    def validate(self, metadata: PackageMetadata) -> Optional[RuleMessage]:
        """Validate the package metadata.

        Args:
            metadata: The package metadata to validate.

        Returns:
            A rule message if the metadata violates the rule, otherwise None.
        """
