"""Metadata that is only specific to Chocolatey packages.

Values that are common between different package managers are stored in
the generic package metadata. Every common value has an optional
counterpart here, which is inherited from the generic metadata when it
is unset (see `ChocolateyMetadata.update_from`).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Optional

from pydantic import AnyUrl, BaseModel, Field

from pkgmeta.constants import DEFAULT_FILE_SOURCE, DEFAULT_FILE_TARGET
from pkgmeta.defaults import empty_version
from pkgmeta.exceptions import ConstructionError
from pkgmeta.models.values import Description, Version, parse_version

if TYPE_CHECKING:
    from pkgmeta.models.metadata import PackageMetadata

logger = logging.getLogger(__name__)


def generate_identifier(identifier: str, lowercase: bool) -> str:
    """Create the canonical identifier of a package.

    Args:
        identifier: The identifier to canonicalize.
        lowercase: Whether the identifier should be lowercased.

    Returns:
        The identifier with spaces replaced by dashes, lowercased if requested.
    """
    result = identifier.replace(" ", "-")
    if lowercase:
        result = result.lower()
    return result


def _normalize_file_source(source: str) -> str:
    return source.replace("\\", "/")


class ChocolateyMetadata(BaseModel):
    """Information regarding a package that is only specific to creating
    Chocolatey packages.

    Fields mirroring the generic metadata are optional; an unset value means
    the value is inherited from the generic metadata during `update_from`.
    """

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "arbitrary_types_allowed": True,
    }

    lowercase_id: bool = Field(
        default=True,
        description="Whether the identifier inherited from the generic "
        "metadata should be lowercased",
    )
    id: str = Field(default="", description="Identifier of the package")
    maintainers: list[str] = Field(
        default_factory=list,
        description="Maintainers of the package (owners in the nuspec)",
    )
    summary: Optional[str] = Field(default=None, description="Short summary")
    project_url: Optional[AnyUrl] = Field(
        default=None, description="Homepage of the software"
    )
    project_source_url: Optional[AnyUrl] = Field(
        default=None, description="Location of the software source code"
    )
    package_source_url: Optional[AnyUrl] = Field(
        default=None, description="Location of the package source"
    )
    icon_url: Optional[AnyUrl] = Field(default=None, description="Package icon")
    license_url: Optional[AnyUrl] = Field(
        default=None, description="Public location of the license"
    )
    title: Optional[str] = Field(default=None, description="Title of the software")
    copyright: Optional[str] = Field(default=None, description="Software copyright")
    version: Version = Field(
        default_factory=empty_version, description="Version of the package"
    )
    authors: list[str] = Field(
        default_factory=list, description="Authors/developers of the software"
    )
    description: Description = Field(
        default=None, description="Description text or location"
    )
    require_license_acceptance: bool = Field(
        default=True,
        description="Whether users must accept the license before installing",
    )
    documentation_url: Optional[AnyUrl] = Field(
        default=None, description="Documentation of the software"
    )
    issues_url: Optional[AnyUrl] = Field(
        default=None, description="Where bugs and features are reported"
    )
    mailing_list_url: Optional[AnyUrl] = Field(
        default=None, description="Mailing list or forum of the software"
    )
    tags: list[str] = Field(default_factory=list, description="Package tags")
    release_notes: Optional[str] = Field(
        default=None, description="Release notes, or a url to them"
    )
    dependencies: dict[str, Optional[Version]] = Field(
        default_factory=dict,
        description="Dependency identifiers mapped to their minimum version",
    )
    files: dict[str, str] = Field(
        default_factory=dict,
        description="Source paths (or globs) mapped to the target directory",
    )

    @classmethod
    def new(cls) -> ChocolateyMetadata:
        """Create Chocolatey metadata with only default values."""
        return cls()

    @classmethod
    def with_id(cls, identifier: str, lowercase: bool = True) -> ChocolateyMetadata:
        """Create Chocolatey metadata with the canonical form of an identifier.

        The tags are seeded with the lowercase identifier.
        """
        canonical = generate_identifier(identifier, lowercase)
        return cls(id=canonical, lowercase_id=lowercase, tags=[canonical.lower()])

    @classmethod
    def with_authors(cls, authors: Sequence[Any]) -> ChocolateyMetadata:
        """Create Chocolatey metadata with the authors of the software.

        Args:
            authors: The authors/developers, each converted to a string.

        Raises:
            ConstructionError: If no authors are specified.
        """
        if len(authors) == 0:
            raise ConstructionError("Invalid usage: Authors can not be empty!")
        return cls(authors=[str(author) for author in authors])

    def set_description(self, description: Description) -> None:
        self.description = description

    def set_description_str(self, description: str) -> None:
        self.set_description(description)

    def set_title(self, title: str) -> None:
        """Set the title that will be displayed to users."""
        self.title = title

    def set_copyright(self, copyright: str) -> None:
        self.copyright = copyright

    def set_release_notes(self, release_notes: str) -> None:
        """Set the release notes, or the url to the release notes."""
        self.release_notes = release_notes

    def add_dependency(self, identifier: str, version: Optional[str] = None) -> None:
        """Add a dependency with an optional minimum version.

        Raises:
            VersionParseError: If the version can not be parsed.
        """
        parsed = parse_version(version) if version is not None else None
        self.dependencies = {**self.dependencies, identifier: parsed}

    def set_dependencies(
        self, dependencies: Iterable[tuple[str, Optional[str]]]
    ) -> None:
        """Replace all dependencies with the specified ones."""
        self.dependencies = {}
        for identifier, version in dependencies:
            self.add_dependency(identifier, version)

    def add_file(self, source: str, target: str) -> None:
        """Add a file (or globbing pattern) and its target directory."""
        self.files = {**self.files, str(source): target}

    def set_files(self, files: Iterable[tuple[str, str]]) -> None:
        self.files = {}
        for source, target in files:
            self.add_file(source, target)

    def add_tag(self, tag: str) -> None:
        self.tags = [*self.tags, tag]

    def set_tags(self, tags: Iterable[str]) -> ChocolateyMetadata:
        """Replace all tags with the specified ones."""
        self.tags = []
        for tag in tags:
            self.add_tag(tag)
        return self

    def file_mappings(self) -> list[tuple[str, str]]:
        """Get the files to include in the package.

        The default `tools/**` mapping is always the first entry, and is
        never repeated even when it is explicitly specified.

        Returns:
            Ordered (source, target) pairs with `/` as directory separator.
        """
        result = [(DEFAULT_FILE_SOURCE, DEFAULT_FILE_TARGET)]
        for source, target in self.files.items():
            normalized = _normalize_file_source(source)
            if normalized != DEFAULT_FILE_SOURCE:
                result.append((normalized, target))
        return result

    def update_from(self, metadata: PackageMetadata) -> None:
        """Inherit every unset value from the generic package metadata.

        Values that are already set are never changed. Calling this multiple
        times with the same metadata gives the same result as calling it once.

        Args:
            metadata: The generic package metadata to inherit from.
        """
        if not self.id and metadata.id:
            self.id = generate_identifier(metadata.id, self.lowercase_id)
            logger.debug("Inherited identifier '%s'", self.id)

        if not self.maintainers:
            self.maintainers = list(metadata.maintainers)

        if self.summary is None and metadata.summary:
            self.summary = metadata.summary

        # Always set afterwards, the generic project url is never missing
        if self.project_url is None:
            self.project_url = metadata.project_url

        if self.project_source_url is None:
            self.project_source_url = metadata.project_source_url_or_default()

        if self.package_source_url is None:
            self.package_source_url = metadata.package_source_url_or_default()

        if self.icon_url is None and metadata.icon_url is not None:
            self.icon_url = metadata.icon_url

        if self.license_url is None:
            license_url = metadata.license.license_url()
            if license_url is not None:
                self.license_url = license_url
            else:
                logger.debug(
                    "No license url available for license '%s'",
                    metadata.license.expression,
                )

        if self.id:
            tag = self.id.lower()
            self.tags = [tag] + [existing for existing in self.tags if existing != tag]

    def reset_same(self, metadata: PackageMetadata) -> None:
        """Clear every value that is the same as the inherited value.

        This is the inverse of `update_from`, used to keep only the values
        that differ from the generic package metadata.

        Args:
            metadata: The generic package metadata to compare against.
        """
        derived_id = generate_identifier(metadata.id, self.lowercase_id)
        tag = (self.id or derived_id).lower()

        if self.id and self.id == derived_id:
            self.id = ""

        if self.maintainers and self.maintainers == metadata.maintainers:
            self.maintainers = []

        if metadata.summary and self.summary == metadata.summary:
            self.summary = None

        if self.project_url == metadata.project_url:
            self.project_url = None

        if self.project_source_url == metadata.project_source_url_or_default():
            self.project_source_url = None

        if self.package_source_url == metadata.package_source_url_or_default():
            self.package_source_url = None

        if metadata.icon_url is not None and self.icon_url == metadata.icon_url:
            self.icon_url = None

        license_url = metadata.license.license_url()
        if license_url is not None and self.license_url == license_url:
            self.license_url = None

        if tag:
            self.tags = [existing for existing in self.tags if existing != tag]
