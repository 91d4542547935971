"""Command-line interface for the Unity package creator.

This module provides the CLI entry point for scaffolding packages in a
Unity project's Packages/ directory.
"""

import argparse
import json
import sys
from pathlib import Path

from .config import load_config
from .core.errors import PackageCreatorError
from .core.validator import validate_package_directory
from .core.version import format_version
from .filesystem import validate_url
from .resolvers import ResolverRegistry
from .session import PackageCreatorSession

REFERENCE_NOTE = (
    "Note: The editor assembly definition references the runtime assembly by name. "
    "Enable \"Use GUIDs\" on the editor assembly in Unity if you intend to reference "
    "assemblies outside the package (existing references are converted automatically)."
)

# CLI option -> session form field
FORM_OPTIONS = {
    "name": "package.name",
    "version": "package.version",
    "display_name": "package.display_name",
    "unity": "package.unity_version",
    "unity_release": "package.unity_release",
    "author": "package.author.name",
    "email": "package.author.email",
    "url": "package.author.url",
    "description": "package.description",
    "runtime_assembly": "runtime.name",
    "runtime_namespace": "runtime.root_namespace",
    "editor_assembly": "editor.name",
    "editor_namespace": "editor.root_namespace",
    "references": "runtime.references",
    "editor_references": "editor.references",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="unity-package-creator",
        description="Scaffold Unity Package Manager packages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create com.jane-doe.my-tool in ./Packages
  unity-package-creator create --name "My Tool" --author "Jane Doe" \\
      --runtime-assembly JaneDoe.MyTool --editor-assembly JaneDoe.MyTool.Editor

  # Show the plan without writing anything
  unity-package-creator create --name "My Tool" --author "Jane Doe" --dry-run

  # Check an existing package
  unity-package-creator validate Packages/com.jane-doe.my-tool
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new package")
    create.add_argument("--name", required=True, help="Package name (spaces become hyphens)")
    create.add_argument("--version", default="1.0.0", help="Package version (default: 1.0.0)")
    create.add_argument("--author", required=True, help="Author name")
    create.add_argument("--display-name", default="", help="Name shown in the Package Manager")
    create.add_argument("--unity", default="", help="Minimum Unity version (e.g., 2021.3)")
    create.add_argument("--unity-release", default="", help="Minimum Unity release (e.g., 0f1)")
    create.add_argument("--email", default="", help="Author email")
    create.add_argument("--url", default="", help="Author URL")
    create.add_argument("--description", default="", help="Package description")
    create.add_argument("--runtime-assembly", default="", help="Runtime assembly name")
    create.add_argument("--runtime-namespace", default="", help="Runtime assembly root namespace")
    create.add_argument("--editor-assembly", default="", help="Editor assembly name")
    create.add_argument("--editor-namespace", default="", help="Editor assembly root namespace")
    create.add_argument(
        "--reference",
        dest="references",
        action="append",
        default=[],
        help="Assembly referenced by the runtime assembly (repeatable)",
    )
    create.add_argument(
        "--editor-reference",
        dest="editor_references",
        action="append",
        default=[],
        help="Additional assembly referenced by the editor assembly (repeatable); "
        "the runtime assembly is referenced automatically",
    )
    create.add_argument(
        "--project",
        default=".",
        help="Unity project root (default: current directory)",
    )
    create.add_argument("--config", help="Config file (default: <project>/.unity-package-creator.json)")
    create.add_argument(
        "--resolver",
        help=f"Resolve hook to run after creation ({', '.join(ResolverRegistry.list_resolvers())})",
    )
    create.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the build plan as JSON instead of writing it",
    )

    validate = subparsers.add_parser("validate", help="Validate an existing package")
    validate.add_argument("path", help="Package directory containing package.json")

    version = subparsers.add_parser("version", help="Print a normalized version string")
    version.add_argument("raw", help="Version as typed (e.g., 2. or 1.0.0-preview-3.1)")

    return parser


def run_create(args: argparse.Namespace) -> int:
    """Fill a session from CLI options and submit it."""
    validate_url(args.url)

    project = Path(args.project)
    if not project.is_dir():
        print(f"Error: Project directory does not exist: {project}", file=sys.stderr)
        return 1

    config = load_config(Path(args.config) if args.config else None, project_root=project)
    if args.resolver:
        config.resolver = args.resolver

    session = PackageCreatorSession(config)
    session.update_many({field: getattr(args, option) for option, field in FORM_OPTIONS.items()})

    if args.dry_run:
        plan = session.preview()
        json.dump(plan.to_dict(), sys.stdout, indent=2)
        print()  # Add newline at end
        return 0

    print(f"Creating package in: {config.packages_path}", file=sys.stderr)
    plan = session.submit()

    for _, path, _ in plan.steps():
        print(f"  {path.as_posix()}", file=sys.stderr)

    if args.runtime_assembly and args.editor_assembly:
        print(REFERENCE_NOTE, file=sys.stderr)

    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Validate a package directory against the bundled schemas."""
    path = Path(args.path)
    if not path.is_dir():
        print(f"Error: Path is not a directory: {path}", file=sys.stderr)
        return 1

    print(f"Validating package: {path}", file=sys.stderr)
    errors = validate_package_directory(path)

    if errors:
        print("Error: Package validation failed:", file=sys.stderr)
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    print("Validation successful!", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the package creator."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "create":
            exit_code = run_create(args)
        elif args.command == "validate":
            exit_code = run_validate(args)
        else:
            print(format_version(args.raw))
            exit_code = 0
    except (PackageCreatorError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
