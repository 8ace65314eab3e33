"""Output formatters for pkgmeta."""

from pkgmeta.output.terminal import ValidationFormatter
from pkgmeta.output.validation_json import ValidationJsonFormatter

__all__ = ["ValidationFormatter", "ValidationJsonFormatter"]
