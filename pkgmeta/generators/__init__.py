"""Package file generators."""

from pkgmeta.generators.base import PackageGenerator
from pkgmeta.generators.nuspec import NuspecGenerator

__all__ = ["NuspecGenerator", "PackageGenerator"]
