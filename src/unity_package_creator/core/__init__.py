"""Core utilities for package creation.

This package contains version normalization, name sanitization,
error types, document type definitions and schema validation used
across the assembler, pipeline and CLI.
"""

from .errors import ConfigError, MissingRequiredField, PackageAlreadyExists, PackageCreatorError
from .naming import compose_package_id, hyphenate, sanitize
from .types import AssemblyDefinitionDocument, AuthorDocument, PackageDocument
from .validator import (
    validate_asmdef_document,
    validate_package_directory,
    validate_package_document,
)
from .version import format_version, normalize_version

__all__ = [
    "AssemblyDefinitionDocument",
    "AuthorDocument",
    "ConfigError",
    "MissingRequiredField",
    "PackageAlreadyExists",
    "PackageCreatorError",
    "PackageDocument",
    "compose_package_id",
    "format_version",
    "hyphenate",
    "normalize_version",
    "sanitize",
    "validate_asmdef_document",
    "validate_package_directory",
    "validate_package_document",
]
