"""Exceptions raised while creating packages."""

from pathlib import Path


class PackageCreatorError(Exception):
    """Base class for recoverable package creation errors."""


class MissingRequiredField(PackageCreatorError):
    """One or more required descriptor fields are empty.

    Attributes:
        fields: Names of the empty fields, in form order
    """

    def __init__(self, fields: tuple[str, ...]):
        self.fields = fields
        super().__init__(
            f"Required fields cannot be empty: {', '.join(fields)}"
        )


class PackageAlreadyExists(PackageCreatorError):
    """A package directory already exists at the target location.

    Attributes:
        path: The existing package directory
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Package already exists: {path}")


class ConfigError(PackageCreatorError):
    """The configuration file could not be read or is invalid."""
