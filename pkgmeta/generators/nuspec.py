"""Creating Chocolatey metadata files (nuspec).

Documents are built with ElementTree, which has no CDATA support. Text such
as the description is written as escaped character data instead, which XML
parsers (and Chocolatey) read back as the same text.
"""
from __future__ import annotations

import logging
import os
import shutil
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from pydantic import AnyUrl

from pkgmeta.constants import NUSPEC_NAMESPACE, NUSPEC_TEST_COMMENT
from pkgmeta.exceptions import GenerationError
from pkgmeta.generators.base import PackageGenerator
from pkgmeta.models.chocolatey import ChocolateyMetadata
from pkgmeta.models.values import description_text, to_choco

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


def _text(parent: ET.Element, name: str, value: str) -> ET.Element:
    element = ET.SubElement(parent, name)
    element.text = value.strip()
    return element


def _optional(parent: ET.Element, name: str, value: Optional[object]) -> None:
    if value is not None:
        _text(parent, name, str(value))


def _clean_directory(path: Path) -> None:
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


class NuspecGenerator(PackageGenerator):
    """Generates the nuspec file of a Chocolatey package.

    The metadata is expected to be reconciled with the generic package
    metadata before generating. A file directive for the local `tools`
    directory is always included.
    """

    def __init__(self, metadata: ChocolateyMetadata) -> None:
        self._metadata = metadata

    def generate(self, work_dir: Path) -> Path:
        """Write `<work_dir>/<id>/<id>.nuspec`.

        An existing package directory is emptied first.

        Raises:
            GenerationError: If the identifier is empty or the files can
                not be written.
        """
        identifier = self._metadata.id.strip()
        if not identifier:
            raise GenerationError("Can not generate a package without an identifier")

        package_dir = Path(work_dir) / identifier
        try:
            if package_dir.exists():
                logger.debug("Cleaning existing directory '%s'", package_dir)
                _clean_directory(package_dir)
            else:
                package_dir.mkdir(parents=True)

            nuspec_path = package_dir / f"{identifier}.nuspec"
            nuspec_path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise GenerationError(
                f"Cannot create package files in '{package_dir}': {e}"
            ) from e

        logger.debug("Created nuspec file '%s'", nuspec_path)
        return nuspec_path

    def render(self) -> str:
        """Render the nuspec document."""
        root = self._build()
        ET.indent(root, space="  ")
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    def _build(self) -> ET.Element:
        data = self._metadata
        package = ET.Element("package", {"xmlns": NUSPEC_NAMESPACE})
        package.append(ET.Comment(NUSPEC_TEST_COMMENT))

        metadata = ET.SubElement(package, "metadata")
        _text(metadata, "id", data.id)
        _text(metadata, "version", to_choco(data.version))
        _optional(metadata, "packageSourceUrl", data.package_source_url)
        _text(metadata, "owners", ",".join(data.maintainers))
        _optional(metadata, "title", data.title)
        _text(metadata, "authors", ",".join(data.authors))
        _optional(metadata, "projectUrl", data.project_url)
        _optional(metadata, "iconUrl", data.icon_url)
        _optional(metadata, "copyright", data.copyright)
        self._add_license(metadata, data.license_url)
        _optional(metadata, "projectSourceUrl", data.project_source_url)
        _optional(metadata, "docsUrl", data.documentation_url)
        _optional(metadata, "mailingListUrl", data.mailing_list_url)
        _optional(metadata, "bugTrackerUrl", data.issues_url)
        _text(metadata, "tags", " ".join(data.tags))
        _optional(metadata, "summary", data.summary)

        description = description_text(data.description)
        if description is not None:
            _text(metadata, "description", description)
        elif data.description is not None:
            logger.debug("Description is not inline text, leaving it out")

        _optional(metadata, "releaseNotes", data.release_notes)
        self._add_dependencies(metadata)

        files = ET.SubElement(package, "files")
        for source, target in data.file_mappings():
            ET.SubElement(
                files,
                "file",
                {"src": source.replace("/", os.sep).strip(), "target": target.strip()},
            )

        return package

    def _add_license(self, metadata: ET.Element, license_url: Optional[AnyUrl]) -> None:
        if license_url is None:
            return
        _text(metadata, "licenseUrl", str(license_url))
        _text(
            metadata,
            "requireLicenseAcceptance",
            str(self._metadata.require_license_acceptance).lower(),
        )

    def _add_dependencies(self, metadata: ET.Element) -> None:
        if not self._metadata.dependencies:
            return
        dependencies = ET.SubElement(metadata, "dependencies")
        for identifier in sorted(self._metadata.dependencies):
            attributes = {"id": identifier.strip()}
            version = self._metadata.dependencies[identifier]
            if version is not None:
                attributes["version"] = to_choco(version)
            ET.SubElement(dependencies, "dependency", attributes)
