"""Tests for schema validation."""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from unity_package_creator.core.validator import (
    ASMDEF_SCHEMA,
    PACKAGE_SCHEMA,
    load_schema,
    validate_document_with_error_details,
    validate_package_directory,
    validate_package_document,
)

VALID_PACKAGE = {
    "name": "com.jane-doe.my-tool",
    "version": "1.0.0",
    "displayName": "My Tool",
    "unity": "2021.3",
    "unityRelease": "",
    "author": {"name": "Jane Doe", "email": "", "url": ""},
    "description": "",
}

VALID_ASMDEF = {
    "name": "JaneDoe.MyTool",
    "rootNamespace": "",
    "includePlatforms": [],
    "references": [],
}


class TestSchemas:
    """Test the bundled schemas."""

    def test_schemas_load(self) -> None:
        """Test that every bundled schema is valid JSON."""
        assert load_schema(PACKAGE_SCHEMA)["type"] == "object"
        assert load_schema(ASMDEF_SCHEMA)["type"] == "object"

    def test_missing_schema(self) -> None:
        """Test that unknown schema names raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_schema("missing.schema.json")

    def test_upper_case_package_id_rejected(self) -> None:
        """Test that package ids must be lower case."""
        with pytest.raises(ValidationError):
            validate_package_document({**VALID_PACKAGE, "name": "com.Jane.Tool"})

    def test_error_details(self) -> None:
        """Test the user-friendly error message."""
        document = {**VALID_PACKAGE, "author": {"name": "", "email": "", "url": ""}}

        is_valid, message = validate_document_with_error_details(document, PACKAGE_SCHEMA)

        assert not is_valid
        assert message is not None
        assert message.startswith("Validation error at author -> name")

    def test_valid_document(self) -> None:
        """Test that a valid document reports no error."""
        assert validate_document_with_error_details(VALID_ASMDEF, ASMDEF_SCHEMA) == (True, None)


class TestValidatePackageDirectory:
    """Test validating packages on disk."""

    def test_valid_package(self, tmp_path: Path) -> None:
        """Test that a well-formed package has no errors."""
        (tmp_path / "package.json").write_text(json.dumps(VALID_PACKAGE))
        (tmp_path / "Runtime").mkdir()
        (tmp_path / "Runtime" / "JaneDoe.MyTool.asmdef").write_text(json.dumps(VALID_ASMDEF))

        assert validate_package_directory(tmp_path) == []

    def test_missing_package_json(self, tmp_path: Path) -> None:
        """Test that a missing package.json is reported."""
        assert validate_package_directory(tmp_path) == ["package.json: file not found"]

    def test_reports_bad_asmdef(self, tmp_path: Path) -> None:
        """Test that broken assembly definitions are reported per file."""
        (tmp_path / "package.json").write_text(json.dumps(VALID_PACKAGE))
        (tmp_path / "Editor").mkdir()
        (tmp_path / "Editor" / "Broken.asmdef").write_text("{")
        (tmp_path / "Editor" / "Nameless.asmdef").write_text(json.dumps({**VALID_ASMDEF, "name": ""}))

        errors = validate_package_directory(tmp_path)

        assert len(errors) == 2
        assert errors[0].startswith(str(Path("Editor") / "Broken.asmdef") + ": invalid JSON")
        assert errors[1].startswith(str(Path("Editor") / "Nameless.asmdef") + ": Validation error")
