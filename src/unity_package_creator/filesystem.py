"""Filesystem access for package creation.

The assembler only needs to ask whether a path exists; the creation
pipeline creates directories and writes files. Both go through the
Filesystem interface so they can be replaced in tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import urlparse


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Check that a planned path resolves inside its base directory.

    Module names are typed by the user and end up in file names, so a
    name like "../Evil" would otherwise place an .asmdef outside the
    package. Symlinks and ".." are resolved before comparing.

    Raises:
        ValueError: If path resolves outside base_dir
    """
    if not path.resolve().is_relative_to(base_dir.resolve()):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def validate_url(url: str) -> None:
    """Check the author URL written into package.json.

    Empty values and scheme-less values (relative links such as
    "docs/index.html") are accepted; anything with a scheme must be
    http or https.

    Raises:
        ValueError: If the URL uses another scheme (javascript:, file:, ...)
    """
    scheme = urlparse(url).scheme
    if scheme not in ("http", "https", ""):
        raise ValueError(
            f"Invalid URL scheme: {scheme}. Only http and https are allowed."
        )


class Filesystem(ABC):
    """Abstract filesystem used by the assembler and pipeline."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if a file or directory exists at path."""
        pass

    @abstractmethod
    def create_directory(self, path: Path) -> None:
        """Create a directory, including missing parents.

        Raises:
            OSError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def write_file(self, path: Path, content: str) -> None:
        """Write text content to a file, replacing any existing content.

        Raises:
            OSError: If the file cannot be written
        """
        pass


class LocalFilesystem(Filesystem):
    """Filesystem backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_file(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
