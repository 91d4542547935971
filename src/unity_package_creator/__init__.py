"""Unity Package Creator.

This package scaffolds Unity Package Manager packages: it normalizes the
package version and name, assembles package.json and assembly definition
files into a build plan, writes the plan into a project's Packages/
directory and asks the package manager to re-resolve.
"""

# Core library interface
from .assembler import assemble
from .descriptors import ModuleDescriptor, PackageAuthor, PackageDescriptor
from .pipeline import PackageCreationPipeline
from .plan import BuildPlan, PlannedFile
from .session import PackageCreatorSession, SessionState

# Collaborators
from .config import CreatorConfig, load_config
from .filesystem import Filesystem, LocalFilesystem
from .resolvers import ResolverRegistry
from .serializer import JsonSerializer, Serializer

# Core utilities
from .core import (
    ConfigError,
    MissingRequiredField,
    PackageAlreadyExists,
    PackageCreatorError,
    compose_package_id,
    format_version,
    normalize_version,
    sanitize,
    validate_package_directory,
)

# CLI interface
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "assemble",
    "BuildPlan",
    "PlannedFile",
    "PackageCreationPipeline",
    "PackageCreatorSession",
    "SessionState",
    "PackageAuthor",
    "PackageDescriptor",
    "ModuleDescriptor",
    # Collaborators
    "CreatorConfig",
    "load_config",
    "Filesystem",
    "LocalFilesystem",
    "ResolverRegistry",
    "JsonSerializer",
    "Serializer",
    # Core utilities
    "ConfigError",
    "MissingRequiredField",
    "PackageAlreadyExists",
    "PackageCreatorError",
    "compose_package_id",
    "format_version",
    "normalize_version",
    "sanitize",
    "validate_package_directory",
    # CLI
    "main",
]
