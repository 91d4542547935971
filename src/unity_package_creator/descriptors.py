"""Descriptor records edited by the user.

A creation session owns one PackageDescriptor and two ModuleDescriptors
(runtime and editor). They hold raw, user-entered values; canonical
forms are produced by the assembler.
"""

from dataclasses import dataclass, field

# Platform list that restricts an assembly to the Unity editor
EDITOR_PLATFORMS = ("Editor",)


@dataclass
class PackageAuthor:
    """Author metadata embedded in the package descriptor."""

    name: str = ""
    email: str = ""
    url: str = ""


@dataclass
class PackageDescriptor:
    """Package identity, version and author metadata.

    Attributes:
        name: Package name before sanitization (becomes the package id)
        version: Raw version string, normalized at assembly time
        display_name: Human-readable name shown in the package manager
        unity_version: Minimum Unity version (e.g., "2021.3")
        unity_release: Minimum Unity release (e.g., "0f1")
        author: Author metadata
        description: Free-form description
    """

    name: str = ""
    version: str = "1.0.0"
    display_name: str = ""
    unity_version: str = ""
    unity_release: str = ""
    author: PackageAuthor = field(default_factory=PackageAuthor)
    description: str = ""


@dataclass
class ModuleDescriptor:
    """Assembly definition for a compiled code module.

    include_platforms and references behave as ordered sets: duplicates
    are ignored and first-insertion order is kept. An empty
    include_platforms means the assembly builds for all platforms.
    """

    name: str = ""
    root_namespace: str = ""
    include_platforms: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)

    @classmethod
    def runtime(cls) -> "ModuleDescriptor":
        """Create the runtime assembly descriptor (all platforms)."""
        return cls()

    @classmethod
    def editor(cls) -> "ModuleDescriptor":
        """Create the editor assembly descriptor (editor platform only)."""
        return cls(include_platforms=list(EDITOR_PLATFORMS))

    def add_reference(self, reference: str) -> None:
        """Add a reference unless it is already present."""
        if reference not in self.references:
            self.references.append(reference)

    def set_references(self, references: list[str]) -> None:
        """Replace the references, dropping blanks and duplicates."""
        self.references = []
        for reference in references:
            reference = reference.strip()
            if reference:
                self.add_reference(reference)
