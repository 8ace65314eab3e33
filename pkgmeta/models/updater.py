"""Data used when updating packages.

Only values that are specific to the updater of a package manager are
stored here, the package metadata lives in `pkgmeta.models.metadata`.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import AnyUrl, BaseModel, Field


class ChocolateyUpdaterType(Enum):
    """The type of chocolatey package that should be created.

    NONE requires a custom updater script, the other types use the
    matching package template.
    """

    NONE = "none"
    INSTALLER = "installer"
    ARCHIVE = "archive"


class ParseUrlWithRegex(BaseModel):
    """An url to parse together with the regex used to find the page
    the executable files are located at.
    """

    model_config = {"extra": "forbid", "frozen": True}

    url: AnyUrl = Field(description="The url to parse")
    regex: str = Field(description="Regex matching the actual download page")


# Either a plain url, or an url with a regex to follow.
ChocolateyParseUrl = Union[ParseUrlWithRegex, AnyUrl]


class ChocolateyUpdaterData(BaseModel):
    """Data needed to find the executables (and version) of a chocolatey package."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    embedded: bool = Field(
        default=False,
        description="Whether binaries are embedded in the package. "
        "Ignored when the updater type is NONE.",
    )
    updater_type: ChocolateyUpdaterType = Field(
        default=ChocolateyUpdaterType.NONE,
        alias="type",
        description="Type of package to create",
    )
    parse_url: Optional[ChocolateyParseUrl] = Field(
        default=None, description="Url (and optional regex) to parse for binaries"
    )
    regexes: dict[str, str] = Field(
        default_factory=dict,
        description="Named regexes used when parsing links. "
        "arch32 and arch64 select the binary files.",
    )

    def add_regex(self, name: str, value: str) -> None:
        self.regexes = {**self.regexes, name: value}

    def set_regexes(self, values: Union[dict[str, str], list[tuple[str, str]]]) -> None:
        """Replace all regexes with the specified ones."""
        items = values.items() if isinstance(values, dict) else values
        self.regexes = {}
        for name, value in items:
            self.add_regex(name, value)


class PackageUpdateData(BaseModel):
    """Updater data for the different package managers."""

    model_config = {"extra": "forbid"}

    chocolatey: Optional[ChocolateyUpdaterData] = Field(
        default=None, description="Chocolatey updater data"
    )

    def has_chocolatey(self) -> bool:
        return self.chocolatey is not None

    def chocolatey_or_default(self) -> ChocolateyUpdaterData:
        """Return the chocolatey updater data, or a new default instance."""
        if self.chocolatey is not None:
            return self.chocolatey
        return ChocolateyUpdaterData()

    def set_chocolatey(self, chocolatey: ChocolateyUpdaterData) -> None:
        self.chocolatey = chocolatey
