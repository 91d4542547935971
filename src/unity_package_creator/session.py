"""Editing sessions.

A session owns the three descriptors behind the creation form and
drives them through the creation state machine:

    Empty -> Editing -> Validating -> Assembled | Rejected

A rejected submission returns to Editing on the next edit. A successful
one writes the package and resets the session to Empty.
"""

import copy
from enum import Enum
from typing import Any, Callable

from .assembler import assemble
from .config import CreatorConfig
from .core.errors import PackageCreatorError
from .core.naming import hyphenate
from .core.version import format_version
from .descriptors import ModuleDescriptor, PackageDescriptor
from .filesystem import Filesystem, LocalFilesystem
from .pipeline import PackageCreationPipeline
from .plan import BuildPlan
from .resolvers import ResolveHook
from .serializer import JsonSerializer


class SessionState(Enum):
    EMPTY = "empty"
    EDITING = "editing"
    VALIDATING = "validating"
    ASSEMBLED = "assembled"
    REJECTED = "rejected"


def _split_references(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        return value.split(",")
    return list(value)


class PackageCreatorSession:
    """Form-backed package creation session.

    Form surfaces edit descriptors through update() using dotted field
    names (see FIELDS) and call submit() when the user asks to create
    the package.

    Example:
        >>> session = PackageCreatorSession(load_config())
        >>> session.update("package.name", "My Tool")
        >>> session.update("package.author.name", "Jane Doe")
        >>> plan = session.submit()
        >>> plan.root
        PosixPath('com.jane-doe.my-tool')
    """

    # Editable form fields; editor.include_platforms is fixed to "Editor"
    FIELDS = (
        "package.name",
        "package.version",
        "package.display_name",
        "package.unity_version",
        "package.unity_release",
        "package.author.name",
        "package.author.email",
        "package.author.url",
        "package.description",
        "runtime.name",
        "runtime.root_namespace",
        "runtime.references",
        "editor.name",
        "editor.root_namespace",
        "editor.references",
    )

    def __init__(
        self,
        config: CreatorConfig | None = None,
        filesystem: Filesystem | None = None,
        resolve_hook: ResolveHook | None = None,
    ):
        """Initialize a blank session.

        Args:
            config: Creation settings (defaults to CreatorConfig())
            filesystem: Filesystem packages are written to
            resolve_hook: Hook run after creation (defaults to the
                          configured resolver)
        """
        self.config = config or CreatorConfig()
        self.filesystem = filesystem or LocalFilesystem()
        self.serializer = JsonSerializer(indent=self.config.indent)
        self.pipeline = PackageCreationPipeline(
            self.filesystem,
            resolve_hook if resolve_hook is not None else self.config.create_resolve_hook(),
        )
        self.last_error: Exception | None = None
        self.reset()

    def reset(self) -> None:
        """Discard the descriptors and start over with defaults."""
        self.package = PackageDescriptor()
        self.runtime = ModuleDescriptor.runtime()
        self.editor = ModuleDescriptor.editor()
        self.state = SessionState.EMPTY

    def _setters(self) -> dict[str, Callable[[Any], None]]:
        package, author = self.package, self.package.author
        return {
            "package.name": lambda v: setattr(package, "name", hyphenate(v)),
            "package.version": lambda v: setattr(package, "version", format_version(v)),
            "package.display_name": lambda v: setattr(package, "display_name", v),
            "package.unity_version": lambda v: setattr(package, "unity_version", v),
            "package.unity_release": lambda v: setattr(package, "unity_release", v),
            "package.author.name": lambda v: setattr(author, "name", v),
            "package.author.email": lambda v: setattr(author, "email", v),
            "package.author.url": lambda v: setattr(author, "url", v),
            "package.description": lambda v: setattr(package, "description", v),
            "runtime.name": lambda v: setattr(self.runtime, "name", v),
            "runtime.root_namespace": lambda v: setattr(self.runtime, "root_namespace", v),
            "runtime.references": lambda v: self.runtime.set_references(_split_references(v)),
            "editor.name": lambda v: setattr(self.editor, "name", v),
            "editor.root_namespace": lambda v: setattr(self.editor, "root_namespace", v),
            "editor.references": lambda v: self.editor.set_references(_split_references(v)),
        }

    def update(self, field: str, value: Any) -> None:
        """Apply a single form edit.

        The package name has spaces replaced with hyphens and the version
        is re-normalized on every edit.

        Raises:
            KeyError: If field is not an editable form field
        """
        setters = self._setters()
        if field not in setters:
            raise KeyError(f"Unknown or read-only field: '{field}'")

        setters[field](value)
        self.state = SessionState.EDITING

    def update_many(self, values: dict[str, Any]) -> None:
        """Apply several form edits in order."""
        for field, value in values.items():
            self.update(field, value)

    def fields(self) -> dict[str, Any]:
        """Return the current value of every form field."""
        package, author = self.package, self.package.author
        return {
            "package.name": package.name,
            "package.version": package.version,
            "package.display_name": package.display_name,
            "package.unity_version": package.unity_version,
            "package.unity_release": package.unity_release,
            "package.author.name": author.name,
            "package.author.email": author.email,
            "package.author.url": author.url,
            "package.description": package.description,
            "runtime.name": self.runtime.name,
            "runtime.root_namespace": self.runtime.root_namespace,
            "runtime.references": list(self.runtime.references),
            "editor.name": self.editor.name,
            "editor.root_namespace": self.editor.root_namespace,
            "editor.references": list(self.editor.references),
            "editor.include_platforms": list(self.editor.include_platforms),
        }

    def preview(self) -> BuildPlan:
        """Assemble the plan on copies of the descriptors.

        The session and its descriptors are left untouched.

        Raises:
            MissingRequiredField: If a required field is empty
            PackageAlreadyExists: If the package directory already exists
        """
        return assemble(
            copy.deepcopy(self.package),
            copy.deepcopy(self.runtime),
            copy.deepcopy(self.editor),
            self.config.packages_path,
            self.filesystem,
            self.serializer,
        )

    def submit(self) -> BuildPlan:
        """Create the package from the current descriptors.

        The plan is assembled from copies of the descriptors, so they only
        change when the package is written: on success the resolve hook
        runs and the session resets to Empty. On any failure the session
        moves to Rejected, keeps its descriptors as edited and stores the
        error in last_error before re-raising it.

        Returns:
            The plan that was written

        Raises:
            MissingRequiredField: If a required field is empty
            PackageAlreadyExists: If the package directory already exists
            ValueError: If a module name escapes the package directory
            OSError: If writing fails part-way (nothing is rolled back)
        """
        self.state = SessionState.VALIDATING
        self.last_error = None

        try:
            plan = self.preview()
            self.pipeline.realize(plan)
        except (PackageCreatorError, ValueError, OSError) as e:
            self.state = SessionState.REJECTED
            self.last_error = e
            raise

        self.state = SessionState.ASSEMBLED
        self.reset()
        return plan
