"""Configuration for package creation.

Settings come from an optional JSON file in the Unity project root
(.unity-package-creator.json), validated against
schemas/config.schema.json, and are then overridden by environment
variables.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from jsonschema import ValidationError

from .core.errors import ConfigError
from .core.validator import CONFIG_SCHEMA, format_validation_error, validate_document
from .resolvers import ResolveHook, ResolverRegistry

CONFIG_FILENAME = ".unity-package-creator.json"

ENV_PACKAGES_DIR = "UNITY_PACKAGE_CREATOR_PACKAGES_DIR"
ENV_RESOLVER = "UNITY_PACKAGE_CREATOR_RESOLVER"


@dataclass
class CreatorConfig:
    """Settings for a package creation session.

    Attributes:
        project_root: Unity project root (contains Assets/ and Packages/)
        packages_dir: Directory, relative to project_root, packages go in
        resolver: Name of the resolve hook run after creation
        resolve_command: Command for the 'command' resolver
        indent: Indentation of generated JSON documents
    """

    project_root: Path = field(default_factory=Path.cwd)
    packages_dir: str = "Packages"
    resolver: str = "touch-manifest"
    resolve_command: list[str] = field(default_factory=list)
    indent: int = 4

    @property
    def packages_path(self) -> Path:
        """Absolute directory new packages are created in."""
        return self.project_root / self.packages_dir

    def create_resolve_hook(self) -> ResolveHook:
        """Create the configured resolve hook.

        Raises:
            ValueError: If the resolver is unknown or misconfigured
        """
        return ResolverRegistry.create_hook(
            self.resolver,
            project_root=self.project_root,
            command=self.resolve_command,
        )


def read_config_file(path: Path) -> dict:
    """Read and validate a configuration file.

    Raises:
        ConfigError: If the file is unreadable, not JSON or schema-invalid
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    try:
        validate_document(data, CONFIG_SCHEMA)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {format_validation_error(e)}") from e

    return data


def load_config(path: Path | None = None, project_root: Path | None = None) -> CreatorConfig:
    """Load configuration for a Unity project.

    Args:
        path: Explicit config file. Must exist if given.
        project_root: Unity project root (defaults to the current directory).
                      Its config file is used when path is not given.

    Returns:
        CreatorConfig with file values and environment overrides applied

    Raises:
        ConfigError: If the config file is missing (explicit path only) or invalid
    """
    project_root = (project_root or Path.cwd()).resolve()

    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = read_config_file(path)
    elif (project_root / CONFIG_FILENAME).exists():
        data = read_config_file(project_root / CONFIG_FILENAME)
    else:
        data = {}

    config = CreatorConfig(project_root=project_root, **data)

    # Environment overrides
    if os.environ.get(ENV_PACKAGES_DIR):
        config.packages_dir = os.environ[ENV_PACKAGES_DIR]
    if os.environ.get(ENV_RESOLVER):
        config.resolver = os.environ[ENV_RESOLVER]

    return config
