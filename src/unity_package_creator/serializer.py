"""Structured serialization of descriptors.

Descriptors map onto the Unity document layouts (package.json and
.asmdef). The mapping lives here so the field layout can be checked
without touching the filesystem.
"""

import json
from typing import Any, Protocol, runtime_checkable

from .core.types import AssemblyDefinitionDocument, PackageDocument
from .descriptors import ModuleDescriptor, PackageAuthor, PackageDescriptor

# Unity writes its JSON documents with four-space indentation
DEFAULT_INDENT = 4


def package_to_document(package: PackageDescriptor) -> PackageDocument:
    """Map a package descriptor onto the package.json layout."""
    return {
        "name": package.name,
        "version": package.version,
        "displayName": package.display_name,
        "unity": package.unity_version,
        "unityRelease": package.unity_release,
        "author": {
            "name": package.author.name,
            "email": package.author.email,
            "url": package.author.url,
        },
        "description": package.description,
    }


def module_to_document(module: ModuleDescriptor) -> AssemblyDefinitionDocument:
    """Map a module descriptor onto the .asmdef layout."""
    return {
        "name": module.name,
        "rootNamespace": module.root_namespace,
        "includePlatforms": list(module.include_platforms),
        "references": list(module.references),
    }


def package_from_document(document: dict[str, Any]) -> PackageDescriptor:
    """Build a package descriptor from a parsed package.json document.

    Missing keys fall back to the descriptor defaults.
    """
    author = document.get("author") or {}
    return PackageDescriptor(
        name=document.get("name", ""),
        version=document.get("version", "1.0.0"),
        display_name=document.get("displayName", ""),
        unity_version=document.get("unity", ""),
        unity_release=document.get("unityRelease", ""),
        author=PackageAuthor(
            name=author.get("name", ""),
            email=author.get("email", ""),
            url=author.get("url", ""),
        ),
        description=document.get("description", ""),
    )


def module_from_document(document: dict[str, Any]) -> ModuleDescriptor:
    """Build a module descriptor from a parsed .asmdef document."""
    return ModuleDescriptor(
        name=document.get("name", ""),
        root_namespace=document.get("rootNamespace", ""),
        include_platforms=list(document.get("includePlatforms", [])),
        references=list(document.get("references", [])),
    )


@runtime_checkable
class Serializer(Protocol):
    """Protocol for turning descriptors into document text and back."""

    def serialize(self, record: PackageDescriptor | ModuleDescriptor) -> str:
        ...

    def deserialize_package(self, text: str) -> PackageDescriptor:
        ...

    def deserialize_module(self, text: str) -> ModuleDescriptor:
        ...


class JsonSerializer:
    """Pretty-printed JSON serializer for package documents.

    Example:
        >>> serializer = JsonSerializer()
        >>> text = serializer.serialize(PackageDescriptor(name="com.me.tool"))
        >>> serializer.deserialize_package(text).name
        'com.me.tool'
    """

    def __init__(self, indent: int = DEFAULT_INDENT):
        self.indent = indent

    def to_document(self, record: PackageDescriptor | ModuleDescriptor) -> dict[str, Any]:
        """Convert a descriptor to its document dictionary.

        Raises:
            TypeError: If the record is not a known descriptor type
        """
        if isinstance(record, PackageDescriptor):
            return dict(package_to_document(record))
        if isinstance(record, ModuleDescriptor):
            return dict(module_to_document(record))
        raise TypeError(f"Cannot serialize {type(record).__name__}")

    def serialize(self, record: PackageDescriptor | ModuleDescriptor) -> str:
        return json.dumps(self.to_document(record), indent=self.indent, ensure_ascii=False)

    def deserialize_package(self, text: str) -> PackageDescriptor:
        return package_from_document(json.loads(text))

    def deserialize_module(self, text: str) -> ModuleDescriptor:
        return module_from_document(json.loads(text))
