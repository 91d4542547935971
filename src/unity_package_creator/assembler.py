"""Package assembly.

Turns the three session descriptors into a BuildPlan: validates the
required fields, refuses to overwrite an existing package, canonicalizes
the package name and version, and lays out the files to write.
"""

from pathlib import Path

from .core.errors import MissingRequiredField, PackageAlreadyExists
from .core.naming import compose_package_id
from .core.version import format_version
from .descriptors import ModuleDescriptor, PackageDescriptor
from .filesystem import Filesystem
from .plan import BuildPlan, PlannedFile
from .serializer import JsonSerializer, Serializer

DOCUMENTATION_DIR = "Documentation~"
SAMPLES_DIR = "Samples~"
EDITOR_DIR = "Editor"
RUNTIME_DIR = "Runtime"

# Created in this order, directly under the package root
PACKAGE_SUBDIRECTORIES = (DOCUMENTATION_DIR, SAMPLES_DIR, EDITOR_DIR, RUNTIME_DIR)


def missing_required_fields(package: PackageDescriptor) -> tuple[str, ...]:
    """Return the names of required package fields that are empty."""
    required = (
        ("name", package.name),
        ("version", package.version),
        ("author.name", package.author.name),
    )
    return tuple(name for name, value in required if not value)


def assemble(
    package: PackageDescriptor,
    runtime: ModuleDescriptor,
    editor: ModuleDescriptor,
    target_root: Path,
    filesystem: Filesystem,
    serializer: Serializer | None = None,
) -> BuildPlan:
    """Validate descriptors and produce the build plan for a new package.

    On success the descriptors are updated in place: package.name becomes
    the canonical package id, package.version is normalized, and the
    editor module references the runtime module by name when both
    assemblies are emitted. Nothing is changed when an error is raised.

    Args:
        package: Package descriptor from the session
        runtime: Runtime assembly descriptor
        editor: Editor assembly descriptor
        target_root: Directory the package is created in
        filesystem: Used to check whether the package already exists
        serializer: Serializer for package.json and .asmdef files
            (defaults to JsonSerializer)

    Returns:
        BuildPlan with paths relative to target_root

    Raises:
        MissingRequiredField: If name, version or author name is empty
        PackageAlreadyExists: If the package directory already exists
    """
    missing = missing_required_fields(package)
    if missing:
        raise MissingRequiredField(missing)

    package_id = compose_package_id(package.name, package.author.name)
    root = Path(package_id)

    if filesystem.exists(target_root / root):
        raise PackageAlreadyExists(target_root / root)

    serializer = serializer or JsonSerializer()

    package.name = package_id
    package.version = format_version(package.version)

    directories = (root, *(root / name for name in PACKAGE_SUBDIRECTORIES))

    files = [
        PlannedFile(root / DOCUMENTATION_DIR / f"{package.name}.md", ""),
        PlannedFile(root / "CHANGELOG.md", ""),
        PlannedFile(root / "README.md", f"# {package.name}"),
        PlannedFile(root / "package.json", serializer.serialize(package)),
    ]

    if runtime.name:
        files.append(
            PlannedFile(
                root / RUNTIME_DIR / f"{runtime.name}.asmdef",
                serializer.serialize(runtime),
            )
        )
        # By name, not GUID; users convert it in the Unity inspector
        editor.add_reference(runtime.name)

    if editor.name:
        files.append(
            PlannedFile(
                root / EDITOR_DIR / f"{editor.name}.asmdef",
                serializer.serialize(editor),
            )
        )

    return BuildPlan(
        target_root=target_root,
        root=root,
        directories=directories,
        files=tuple(files),
    )
