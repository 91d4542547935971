"""JSON Schema validation for generated package documents.

This module loads the bundled JSON Schemas and validates package.json,
.asmdef and configuration documents against them.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

# unity_package_creator/core/validator.py -> unity_package_creator/schemas/
SCHEMA_DIR = Path(__file__).parent.parent / "schemas"

PACKAGE_SCHEMA = "package.schema.json"
ASMDEF_SCHEMA = "asmdef.schema.json"
CONFIG_SCHEMA = "config.schema.json"


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema from disk.

    Args:
        name: Schema file name (e.g., "package.schema.json")

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    schema_path = SCHEMA_DIR / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_document(document: Any, schema_name: str) -> None:
    """Validate a document against a bundled schema.

    Raises:
        ValidationError: If the document doesn't conform to the schema
    """
    jsonschema.validate(instance=document, schema=load_schema(schema_name))


def validate_package_document(document: Any) -> None:
    """Validate a package.json document.

    Raises:
        ValidationError: If the document doesn't conform to the schema
    """
    validate_document(document, PACKAGE_SCHEMA)


def validate_asmdef_document(document: Any) -> None:
    """Validate an .asmdef document.

    Raises:
        ValidationError: If the document doesn't conform to the schema
    """
    validate_document(document, ASMDEF_SCHEMA)


def format_validation_error(error: ValidationError) -> str:
    """Build a user-friendly message for a schema validation error."""
    error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
    error_msg = f"Validation error at {error_path}: {error.message}"

    # Add context if available
    if error.instance:
        error_msg += f"\nInvalid value: {error.instance}"

    return error_msg


def validate_document_with_error_details(document: Any, schema_name: str) -> tuple[bool, str | None]:
    """Validate a document and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        document: The parsed document to validate
        schema_name: Bundled schema file name

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_document(document, schema_name)
        return True, None
    except ValidationError as e:
        return False, format_validation_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"


def validate_package_directory(package_path: Path) -> list[str]:
    """Validate package.json and every .asmdef file in a package directory.

    Args:
        package_path: Root directory of a package

    Returns:
        List of error messages, each prefixed with the offending file.
        An empty list means the package is valid.
    """
    errors: list[str] = []

    targets = [(package_path / "package.json", PACKAGE_SCHEMA)]
    targets += [(path, ASMDEF_SCHEMA) for path in sorted(package_path.rglob("*.asmdef"))]

    for path, schema_name in targets:
        relative = path.relative_to(package_path)
        if not path.exists():
            errors.append(f"{relative}: file not found")
            continue

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            errors.append(f"{relative}: invalid JSON: {e}")
            continue

        is_valid, error_msg = validate_document_with_error_details(document, schema_name)
        if not is_valid:
            errors.append(f"{relative}: {error_msg}")

    return errors
