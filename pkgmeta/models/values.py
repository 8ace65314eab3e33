"""Small value types shared by the metadata records.

Provides url parsing, the license and description variants, and the
version type used by chocolatey packages.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional, Union

from packaging.version import InvalidVersion
from packaging.version import Version as PackagingVersion
from pydantic import (
    AnyUrl,
    BaseModel,
    BeforeValidator,
    Field,
    PlainSerializer,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from pkgmeta.exceptions import UrlParseError, VersionParseError

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def parse_url(value: Union[str, AnyUrl]) -> AnyUrl:
    """Parse a string into an absolute url.

    Args:
        value: The url to parse. Already parsed urls are returned as-is.

    Returns:
        The parsed url.

    Raises:
        UrlParseError: If the value is not a valid url.
    """
    if isinstance(value, AnyUrl):
        return value
    try:
        return _url_adapter.validate_python(value)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise UrlParseError(f"'{value}' is not a valid url: {messages}") from e


def is_local_url(url: AnyUrl) -> bool:
    """Check whether a url points to the local file system (or has no host)."""
    return not url.host or url.scheme.lower() == "file"


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------


def parse_version(value: Union[str, PackagingVersion]) -> PackagingVersion:
    """Parse a version string.

    Raises:
        VersionParseError: If the value is not a valid version.
    """
    if isinstance(value, PackagingVersion):
        return value
    try:
        return PackagingVersion(str(value).strip())
    except InvalidVersion as e:
        raise VersionParseError(f"'{value}' is not a valid version: {e}") from e


def _coerce_version(value: Any) -> Any:
    if isinstance(value, (str, int, float)):
        return parse_version(str(value))
    return value


Version = Annotated[
    PackagingVersion,
    BeforeValidator(_coerce_version),
    PlainSerializer(str, return_type=str),
]

_PRE_RELEASE_LABELS = {"a": "alpha", "b": "beta", "rc": "rc"}


def to_choco(version: PackagingVersion) -> str:
    """Render a version in the format accepted by Chocolatey.

    Chocolatey does not support dotted pre-release identifiers, so the
    pre-release number is zero padded instead (`5.2.1-alpha.66` becomes
    `5.2.1-alpha0066`). Local version labels are dropped.

    Args:
        version: The version to render.

    Returns:
        The Chocolatey version string.
    """
    release = list(version.release)
    if version.post is not None:
        release.append(version.post)

    result = ".".join(str(part) for part in release)

    if version.pre is not None:
        label, number = version.pre
        result += f"-{_PRE_RELEASE_LABELS[label]}{number:04d}"
    elif version.dev is not None:
        result += f"-dev{version.dev:04d}"

    return result


# ---------------------------------------------------------------------------
# Licenses
# ---------------------------------------------------------------------------


class LicenseKind(Enum):
    """The variants a license can take."""

    NONE = "none"
    EXPRESSION = "expression"
    URL = "url"
    BOTH = "both"


class License(BaseModel):
    """The license of a software.

    A license is either unset, a license expression (like `MIT`), the url
    to the license, or both an expression and an url. Setting both is
    recommended when creating packages for multiple package managers, as
    some package managers only accept one of them.
    """

    model_config = {"extra": "forbid", "frozen": True}

    expression: Optional[str] = Field(
        default=None, description="SPDX license expression"
    )
    location: Optional[AnyUrl] = Field(
        default=None, description="Public location of the license text"
    )

    @model_validator(mode="before")
    @classmethod
    def _parse_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls._from_text(data)
        return data

    @staticmethod
    def _from_text(value: str) -> dict[str, Any]:
        value = value.strip()
        if not value:
            return {}
        if value.lower().startswith(("http://", "https://")):
            return {"location": parse_url(value)}
        return {"expression": value}

    @classmethod
    def parse(cls, value: Optional[str]) -> License:
        """Create a license from a string.

        Strings starting with `http://` or `https://` are treated as the
        license location, anything else as a license expression.
        """
        if value is None:
            return cls()
        return cls.model_validate(value)

    @property
    def kind(self) -> LicenseKind:
        """The variant of this license."""
        if self.expression and self.location:
            return LicenseKind.BOTH
        if self.location:
            return LicenseKind.URL
        if self.expression:
            return LicenseKind.EXPRESSION
        return LicenseKind.NONE

    def license_url(self) -> Optional[AnyUrl]:
        """Return the url to the license text, if one is known.

        Returns:
            The explicit location for url licenses, the looked up location
            for recognized expressions, otherwise None.
        """
        # Lazy import to avoid circular dependency
        from pkgmeta.licenses import license_url

        if self.location is not None:
            return self.location
        found = license_url(self.expression)
        if found is None:
            return None
        return parse_url(found)


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


class DescriptionLocation(BaseModel):
    """Location of a file holding the description of a software."""

    model_config = {"extra": "forbid", "frozen": True}

    path: Path = Field(description="Path to the file holding the description")
    skip_start: int = Field(
        default=0, ge=0, le=65535, description="Lines to skip at the start"
    )
    skip_end: int = Field(
        default=0, ge=0, le=65535, description="Lines to ignore at the end"
    )

    def read_text(self, base_dir: Optional[Path] = None) -> str:
        """Read the description from the file.

        Args:
            base_dir: Directory relative paths are resolved against.

        Returns:
            The lines between `skip_start` and `skip_end` joined by newlines.
        """
        path = self.path
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        lines = path.read_text(encoding="utf-8").splitlines()
        return "\n".join(lines[self.skip_start : max(len(lines) - self.skip_end, 0)])


# None, the embedded text, or the location of the text.
Description = Optional[Union[str, DescriptionLocation]]


def description_text(description: Description) -> Optional[str]:
    """Return the inline text of a description, None for other variants."""
    if isinstance(description, str):
        return description
    return None
