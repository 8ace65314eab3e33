"""Tests for the Chocolatey specific rules."""
import pytest

from pkgmeta.models.chocolatey import ChocolateyMetadata
from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.rules import MessageType, RuleKind
from pkgmeta.rules.chocolatey import CHOCOLATEY_RULES, IdIsLowercaseNote


class TestIdIsLowercaseNote:
    """Tests for IdIsLowercaseNote rule."""

    def test_only_community(self) -> None:
        """Test the rule only runs for the community rules."""
        rule = IdIsLowercaseNote()
        assert rule.should_validate(RuleKind.COMMUNITY) is True
        assert rule.should_validate(RuleKind.CORE) is False

    def test_registered(self) -> None:
        """Test the rule is part of the chocolatey rules."""
        assert any(isinstance(rule, IdIsLowercaseNote) for rule in CHOCOLATEY_RULES)

    @pytest.mark.parametrize("identifier", ["Test", "test-Package", "TEST"])
    def test_uppercase_identifier(self, identifier: str) -> None:
        """Test identifiers with uppercase characters are reported."""
        message = IdIsLowercaseNote().validate(PackageMetadata.new(identifier))

        assert message is not None
        assert message.message_type == MessageType.NOTE
        assert message.package_manager == "choco"
        assert message.message == (
            "The identifier contains upper case characters. If this is a new "
            "package, it should only contain characters in lower case!"
        )

    @pytest.mark.parametrize("identifier", ["test", "test-package", "7zip", ""])
    def test_lowercase_identifier(self, identifier: str) -> None:
        """Test lowercase identifiers pass."""
        assert IdIsLowercaseNote().validate(PackageMetadata(id=identifier)) is None

    def test_explicit_chocolatey_identifier_is_used(self) -> None:
        """Test the chocolatey identifier is checked when set."""
        metadata = PackageMetadata.new("Test")
        metadata.set_chocolatey(ChocolateyMetadata(id="test"))
        assert IdIsLowercaseNote().validate(metadata) is None

    def test_uppercase_chocolatey_identifier(self) -> None:
        """Test an uppercase chocolatey identifier is reported."""
        metadata = PackageMetadata.new("test")
        metadata.set_chocolatey(ChocolateyMetadata(id="Test"))
        assert IdIsLowercaseNote().validate(metadata) is not None

    def test_empty_chocolatey_identifier_falls_back(self) -> None:
        """Test the generic identifier is used when the chocolatey one is empty."""
        metadata = PackageMetadata.new("Test")
        metadata.set_chocolatey(ChocolateyMetadata())
        assert IdIsLowercaseNote().validate(metadata) is not None
