"""Creation pipeline that realizes build plans on disk.

This module provides the interface that writes a BuildPlan through a
Filesystem and then notifies the package manager.
"""

import sys

from .filesystem import Filesystem, LocalFilesystem, validate_path_safety
from .plan import BuildPlan
from .resolvers import ResolveHook


class PackageCreationPipeline:
    """Writes build plans and triggers a package manager resolve.

    Partial failures are not rolled back: if a write fails, directories
    and files created before it are left in place and the error
    propagates.

    Example:
        >>> pipeline = PackageCreationPipeline(LocalFilesystem(), resolve_hook=lambda: None)
        >>> pipeline.realize(plan)
    """

    def __init__(self, filesystem: Filesystem | None = None, resolve_hook: ResolveHook | None = None):
        """Initialize the pipeline.

        Args:
            filesystem: Filesystem to write to (defaults to LocalFilesystem)
            resolve_hook: Called once after all files are written
        """
        self.filesystem = filesystem or LocalFilesystem()
        self.resolve_hook = resolve_hook

    def check_plan(self, plan: BuildPlan) -> None:
        """Ensure the package directory sits directly in the target root
        and every planned path stays inside the package directory.

        Raises:
            ValueError: If the package directory is nested or escapes the
                        target root, or a directory or file escapes the
                        package directory
        """
        if len(plan.root.parts) != 1:
            raise ValueError(f"Package directory {plan.root} must be a single path component")

        package_path = plan.package_path
        validate_path_safety(package_path, plan.target_root)
        for _, path, _ in plan.steps():
            validate_path_safety(plan.target_root / path, package_path)

    def realize(self, plan: BuildPlan) -> None:
        """Create the plan's directories and files, in order.

        Args:
            plan: The build plan to write

        Raises:
            ValueError: If the plan contains unsafe paths (nothing is written)
            OSError: If the filesystem fails mid-way
        """
        self.check_plan(plan)

        for kind, path, content in plan.steps():
            target = plan.target_root / path
            if kind == "directory":
                self.filesystem.create_directory(target)
            else:
                self.filesystem.write_file(target, content or "")

        print(f"Successfully created new package: {plan.root}", file=sys.stderr)

        if self.resolve_hook is not None:
            self.resolve_hook()
