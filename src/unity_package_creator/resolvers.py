"""Package manager resolve hooks.

After a package is written, the host package manager has to re-scan
installed packages. A resolve hook is a no-argument callable that
triggers that re-scan. Hooks are created by name through
ResolverRegistry so the CLI and config can select one.
"""

import subprocess
from pathlib import Path
from typing import Callable

ResolveHook = Callable[[], None]

# Unity project manifest; changes to it make the editor re-resolve packages
PROJECT_MANIFEST = Path("Packages") / "manifest.json"


class ResolverRegistry:
    """Central registry for resolve hook factories.

    Example:
        >>> hook = ResolverRegistry.create_hook('touch-manifest', project_root=Path('.'))
        >>> hook()
    """

    _factories: dict[str, Callable[..., ResolveHook]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., ResolveHook]) -> None:
        """Register a factory function for creating resolve hooks.

        Args:
            name: Name of the hook (e.g., 'touch-manifest')
            factory: Callable accepting keyword arguments and returning a hook
        """
        cls._factories[name] = factory

    @classmethod
    def create_hook(cls, name: str, **kwargs) -> ResolveHook:
        """Create a resolve hook from a registered factory.

        Args:
            name: Name of the registered hook
            **kwargs: Arguments passed to the factory. Factories ignore
                      arguments they do not use.

        Raises:
            ValueError: If name is not registered
        """
        if name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown resolver: '{name}'. Available resolvers: {available}"
            )

        return cls._factories[name](**kwargs)

    @classmethod
    def list_resolvers(cls) -> list[str]:
        """List all registered resolver names."""
        return list(cls._factories.keys())


def _create_noop_hook(**kwargs) -> ResolveHook:
    def resolve() -> None:
        pass

    return resolve


def _create_touch_manifest_hook(project_root: Path, **kwargs) -> ResolveHook:
    """Touch the project manifest so the Unity editor re-resolves on focus."""
    manifest = project_root / PROJECT_MANIFEST

    def resolve() -> None:
        if manifest.exists():
            manifest.touch()

    return resolve


def _create_command_hook(command: list[str] | None = None, **kwargs) -> ResolveHook:
    """Run an external command, e.g. a script that asks Unity to resolve.

    Raises:
        ValueError: If no command is configured
    """
    if not command:
        raise ValueError("The 'command' resolver requires a resolve_command")

    def resolve() -> None:
        subprocess.run(command, check=True)

    return resolve


ResolverRegistry.register_factory('none', _create_noop_hook)
ResolverRegistry.register_factory('touch-manifest', _create_touch_manifest_hook)
ResolverRegistry.register_factory('command', _create_command_hook)
