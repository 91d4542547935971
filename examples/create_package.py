"""Basic package creation example.

This example demonstrates how to:
- Fill a creation session through its form fields
- Preview the build plan
- Create the package in a Unity project
"""

import sys
from pathlib import Path

from unity_package_creator import PackageCreatorSession, load_config


def main():
    # Point this at a Unity project (the folder containing Assets/ and Packages/)
    project_dir = Path.home() / "UnityProjects" / "Sandbox"

    if not (project_dir / "Packages").exists():
        print(f"Unity project not found: {project_dir}", file=sys.stderr)
        print("Please update the project_dir variable in this script", file=sys.stderr)
        return

    session = PackageCreatorSession(load_config(project_root=project_dir))
    session.update_many({
        "package.name": "Dialogue System",
        "package.version": "0.1",
        "package.display_name": "Dialogue System",
        "package.unity_version": "2021.3",
        "package.author.name": "Jane Doe",
        "package.author.email": "jane@example.com",
        "runtime.name": "JaneDoe.Dialogue",
        "runtime.root_namespace": "JaneDoe.Dialogue",
        "editor.name": "JaneDoe.Dialogue.Editor",
    })

    # Show what will be written
    plan = session.preview()
    print(f"Package: {plan.root}", file=sys.stderr)
    for kind, path, _ in plan.steps():
        print(f"  {kind:<9} {path.as_posix()}", file=sys.stderr)

    plan = session.submit()
    print(f"\n✓ Created {plan.package_path}", file=sys.stderr)


if __name__ == '__main__':
    main()
