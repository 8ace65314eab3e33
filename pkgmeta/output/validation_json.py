"""JSON output formatter for validation results."""
import json
from typing import Any

from pkgmeta import __version__
from pkgmeta.models.rules import ValidationResult


class ValidationJsonFormatter:
    """Format validation results as JSON output for CI/CD integration."""

    def format_validation_result(self, result: ValidationResult) -> str:
        """Format a validation result as JSON string.

        Args:
            result: The validation result to format.

        Returns:
            JSON string representation of the validation result.
        """
        return json.dumps(self._build_output(result), indent=2)

    def _build_output(self, result: ValidationResult) -> dict[str, Any]:
        grouped = result.by_message_type()
        return {
            "tool_version": __version__,
            "rule": str(result.rule_kind),
            "status": "pass" if result.passed else "issues_found",
            "summary": {
                message_type.value: len(messages)
                for message_type, messages in grouped.items()
            },
            "messages": [
                message.model_dump(mode="json") for message in result.messages
            ],
        }
