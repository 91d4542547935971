"""Type definitions for generated package documents.

This module defines TypedDict classes that mirror the JSON schemas in
schemas/package.schema.json and schemas/asmdef.schema.json.
"""

from typing import TypedDict


class AuthorDocument(TypedDict):
    """Author block of package.json."""

    name: str
    email: str
    url: str


# "displayName"-style keys are fixed by the Unity Package Manager format
PackageDocument = TypedDict(
    "PackageDocument",
    {
        "name": str,  # Canonical package id, e.g. com.jane-doe.my-tool
        "version": str,  # Three-segment version
        "displayName": str,
        "unity": str,  # Minimum Unity version, e.g. 2021.3
        "unityRelease": str,  # Minimum Unity release, e.g. 0f1
        "author": AuthorDocument,
        "description": str,
    },
)


AssemblyDefinitionDocument = TypedDict(
    "AssemblyDefinitionDocument",
    {
        "name": str,
        "rootNamespace": str,
        "includePlatforms": list[str],  # Empty means all platforms
        "references": list[str],  # Assembly names or GUID references
    },
)
