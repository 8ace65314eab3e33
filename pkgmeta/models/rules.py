"""Rule validation Pydantic models."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class MessageType(Enum):
    """Severity of a rule message, in the order messages are displayed."""

    REQUIREMENT = "requirement"
    GUIDELINE = "guideline"
    SUGGESTION = "suggestion"
    NOTE = "note"


class RuleKind(Enum):
    """The strictness level metadata is validated against.

    CORE only validates what would prevent a package from being created,
    COMMUNITY additionally validates best practices for community
    repositories.
    """

    CORE = "core"
    COMMUNITY = "community"

    @classmethod
    def parse(cls, value: str) -> RuleKind:
        """Parse a rule kind (case-insensitive).

        Raises:
            ValueError: If the value is not a known rule kind.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"{value} is not a valid rule!") from None

    @classmethod
    def default(cls) -> RuleKind:
        return cls.CORE

    def __str__(self) -> str:
        return self.value


class RuleMessage(BaseModel):
    """A single finding reported by a rule."""

    model_config = {"extra": "forbid", "frozen": True}

    message_type: MessageType = Field(description="Severity of the message")
    package_manager: str = Field(
        default="",
        description="Package manager the message applies to (empty for all)",
    )
    message: str = Field(description="Human readable message")


class ValidationResult(BaseModel):
    """Result of validating package metadata against a rule kind."""

    model_config = {"extra": "forbid"}

    rule_kind: RuleKind = Field(
        default=RuleKind.CORE, description="Rule kind validated against"
    )
    messages: list[RuleMessage] = Field(
        default_factory=list,
        description="Messages in the order the rules were run",
    )

    @property
    def passed(self) -> bool:
        """True if no rule reported a message."""
        return len(self.messages) == 0

    @property
    def has_requirements(self) -> bool:
        """True if any requirement failed, which prevents packaging."""
        return any(
            msg.message_type == MessageType.REQUIREMENT for msg in self.messages
        )

    def by_message_type(self) -> dict[MessageType, list[RuleMessage]]:
        """Group the messages by their type.

        Returns:
            Dict with every message type in display order, mapped to its
            messages (types without messages are omitted).
        """
        grouped: dict[MessageType, list[RuleMessage]] = {}
        for message_type in MessageType:
            messages = [m for m in self.messages if m.message_type == message_type]
            if messages:
                grouped[message_type] = messages
        return grouped
