"""The complete data of a package metadata file."""
from __future__ import annotations

from pydantic import BaseModel, Field

from pkgmeta.models.metadata import PackageMetadata
from pkgmeta.models.updater import PackageUpdateData


class PackageData(BaseModel):
    """Package metadata together with the data used to update the package."""

    model_config = {"extra": "forbid"}

    metadata: PackageMetadata = Field(description="Generic package metadata")
    updater: PackageUpdateData = Field(
        default_factory=PackageUpdateData, description="Updater data"
    )
