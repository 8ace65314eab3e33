"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from pkgmeta.models.rules import MessageType, RuleMessage, ValidationResult

# Heading and color of every message type, in display order
MESSAGE_TYPE_STYLES: dict[MessageType, tuple[str, str]] = {
    MessageType.REQUIREMENT: ("REQUIREMENTS", "red"),
    MessageType.GUIDELINE: ("GUIDELINES", "yellow"),
    MessageType.SUGGESTION: ("SUGGESTIONS", "cyan"),
    MessageType.NOTE: ("NOTES", "magenta"),
}


def format_message(message: RuleMessage) -> str:
    """Format a single rule message as a list item (plain text)."""
    if message.package_manager:
        return f"- {message.package_manager}: {message.message}"
    return f"- {message.message}"


class ValidationFormatter:
    """Format validation results for terminal display using Rich.

    Messages are grouped under a colored heading per message type.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_validation_result(self, result: ValidationResult) -> None:
        """Display the validation result.

        Args:
            result: The validation result to display.
        """
        if result.passed:
            self._console.print("[green]No issues was found during validation![/green]")
            return

        self._console.print(
            "[yellow]The following issues was found during validation "
            "of the package data![/yellow]"
        )
        for message_type, messages in result.by_message_type().items():
            heading, color = MESSAGE_TYPE_STYLES[message_type]
            self._console.print(f"\n[bold {color}]{heading}[/bold {color}]")
            for message in messages:
                self._console.print(escape(format_message(message)))
