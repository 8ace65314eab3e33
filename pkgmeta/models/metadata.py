"""Generic package metadata shared by every package manager."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional, Union

from pydantic import AnyUrl, BaseModel, Field

from pkgmeta import defaults
from pkgmeta.models.chocolatey import ChocolateyMetadata
from pkgmeta.models.values import License, parse_url


class PackageMetadata(BaseModel):
    """Stores common values that are related to one or more package managers.

    The identifier is set once on construction and can not be changed
    afterwards. Every other value has a setter.
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    id: str = Field(default="", frozen=True, description="Package identifier")
    maintainers: list[str] = Field(
        default_factory=defaults.maintainer,
        description="People responsible for creating and maintaining the package",
    )
    summary: str = Field(default="", description="Short summary of the software")
    project_url: AnyUrl = Field(
        default_factory=defaults.url,
        description="Main endpoint (homepage) of the software",
    )
    project_source_url: Optional[AnyUrl] = Field(
        default=None,
        description="Location of the software source (repository or archives)",
    )
    package_source_url: Optional[AnyUrl] = Field(
        default=None,
        description="Location of the package source (the package data file)",
    )
    icon_url: Optional[AnyUrl] = Field(default=None, description="Package icon")
    license: License = Field(
        default_factory=License,
        description="License expression, license url, or both",
    )
    chocolatey: Optional[ChocolateyMetadata] = Field(
        default=None, description="Chocolatey specific metadata"
    )

    @classmethod
    def new(cls, identifier: str) -> PackageMetadata:
        """Create package metadata with the specified identifier."""
        return cls(id=identifier)

    def has_chocolatey(self) -> bool:
        """Return whether chocolatey metadata has been set."""
        return self.chocolatey is not None

    def chocolatey_or_default(self) -> ChocolateyMetadata:
        """Return the chocolatey metadata, or a new default instance."""
        if self.chocolatey is not None:
            return self.chocolatey
        return ChocolateyMetadata.new()

    def set_chocolatey(self, chocolatey: ChocolateyMetadata) -> None:
        self.chocolatey = chocolatey

    def set_maintainers(self, values: Iterable[Any]) -> None:
        """Set the maintainers, converting every value to a string."""
        self.maintainers = [str(value) for value in values]

    def set_project_url(self, url: Union[str, AnyUrl]) -> None:
        """Set the url to the project (usually the home page).

        Raises:
            UrlParseError: If the specified value is not a url.
        """
        self.project_url = parse_url(url)

    def set_project_source_url(self, url: Union[str, AnyUrl]) -> None:
        """Set the url to the source of the software.

        Raises:
            UrlParseError: If the specified value is not a url.
        """
        self.project_source_url = parse_url(url)

    def set_package_source_url(self, url: Union[str, AnyUrl]) -> None:
        """Set the url to the source of the package.

        Raises:
            UrlParseError: If the specified value is not a url.
        """
        self.package_source_url = parse_url(url)

    def set_icon_url(self, url: Union[str, AnyUrl]) -> None:
        """Set the url to the package icon.

        Raises:
            UrlParseError: If the specified value is not a url.
        """
        self.icon_url = parse_url(url)

    def set_license(self, license: Union[License, str, None]) -> None:
        """Set the license, either an expression, an url, or both."""
        if not isinstance(license, License):
            license = License.parse(license)
        self.license = license

    def project_source_url_or_default(self) -> AnyUrl:
        """Return the project source url, or the placeholder url if unset."""
        if self.project_source_url is not None:
            return self.project_source_url
        return defaults.url()

    def package_source_url_or_default(self) -> AnyUrl:
        """Return the package source url, or the placeholder url if unset."""
        if self.package_source_url is not None:
            return self.package_source_url
        return defaults.url()
