"""Running the validation rules against package metadata."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.rules import RuleKind, RuleMessage, ValidationResult
from pkgmeta.rules.base import MetadataRule
from pkgmeta.rules.chocolatey import CHOCOLATEY_RULES
from pkgmeta.rules.metadata import METADATA_RULES

logger = logging.getLogger(__name__)

# Generic rules always run before the package manager specific rules.
RULE_SETS: tuple[tuple[MetadataRule, ...], ...] = (METADATA_RULES, CHOCOLATEY_RULES)


def run_rules(
    rules: Iterable[MetadataRule],
    metadata: PackageMetadata,
    rule_kind: RuleKind,
) -> list[RuleMessage]:
    """Run every rule applying to the rule kind, in order.

    Args:
        rules: The rules to run.
        metadata: The package metadata to validate.
        rule_kind: The rule kind to validate against.

    Returns:
        The messages reported by the rules.
    """
    messages: list[RuleMessage] = []
    for rule in rules:
        if not rule.should_validate(rule_kind):
            continue
        message = rule.validate(metadata)
        if message is not None:
            logger.debug("Rule '%s' reported: %s", rule.name, message.message)
            messages.append(message)
    return messages


def validate_metadata(
    metadata: PackageMetadata,
    rule_kind: RuleKind = RuleKind.CORE,
) -> ValidationResult:
    """Validate package metadata against the rules of a rule kind.

    Args:
        metadata: The package metadata to validate.
        rule_kind: The rule kind to validate against (default: core).

    Returns:
        ValidationResult with the messages of all generic rules followed by
        the messages of the package manager rules.
    """
    messages: list[RuleMessage] = []
    for rules in RULE_SETS:
        messages.extend(run_rules(rules, metadata, rule_kind))
    return ValidationResult(rule_kind=rule_kind, messages=messages)
