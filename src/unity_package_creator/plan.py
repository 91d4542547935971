"""Build plans describing a package on disk."""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PlannedFile:
    """A file to write, relative to the plan's target root."""

    path: Path
    content: str


@dataclass(frozen=True)
class BuildPlan:
    """Ordered directories and files that make up a new package.

    All paths are relative to target_root. The package root directory
    is always the first entry in directories, and every directory is
    created before any file is written.

    Attributes:
        target_root: Directory the package is created in (e.g., Packages/)
        root: Package directory, relative to target_root
        directories: Directories to create, in order
        files: Files to write, in order
    """

    target_root: Path
    root: Path
    directories: tuple[Path, ...]
    files: tuple[PlannedFile, ...]

    @property
    def package_path(self) -> Path:
        """Absolute location of the package directory."""
        return self.target_root / self.root

    def steps(self) -> Iterator[tuple[str, Path, str | None]]:
        """Iterate over plan steps as (kind, path, content).

        Directory steps come first and carry no content.
        """
        for directory in self.directories:
            yield "directory", directory, None
        for planned in self.files:
            yield "file", planned.path, planned.content

    def to_dict(self) -> dict[str, Any]:
        """Describe the plan as a JSON-friendly dictionary."""
        return {
            "target_root": str(self.target_root),
            "root": self.root.as_posix(),
            "directories": [directory.as_posix() for directory in self.directories],
            "files": [
                {"path": planned.path.as_posix(), "content": planned.content}
                for planned in self.files
            ],
        }
