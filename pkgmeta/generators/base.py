"""Base generator interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class PackageGenerator(ABC):
    """Abstract base class for package file generators.

    Every generator creates the files of a single package manager, in a
    sub directory of the work directory named after the package identifier.
    """

    @abstractmethod
    def generate(self, work_dir: Path) -> Path:
        """Generate the package files.

        Args:
            work_dir: Directory the package directory is created in.

        Returns:
            Path to the main generated file.

        Raises:
            GenerationError: If the package files could not be created.
        """
