"""Package name sanitization.

Package identifiers follow the reverse-domain convention used by the
Unity Package Manager: com.<author>.<name>, all lower case. The
identifier doubles as the package directory name, so it must stay a
single path component.
"""

PACKAGE_ID_PREFIX = "com"


def hyphenate(value: str) -> str:
    """Replace spaces with hyphens.

    Applied to the package name on every edit, not just at creation time.
    """
    return value.replace(" ", "-")


def strip_path_separators(value: str) -> str:
    """Remove forward and back slashes so a value cannot nest directories."""
    return value.replace("/", "").replace("\\", "")


def compose_package_id(name: str, author_name: str) -> str:
    """Build the canonical package identifier.

    Example:
        ("My Tool", "Jane Doe") -> "com.jane-doe.my-tool"
        ("tools/core", "a") -> "com.a.toolscore"

    Args:
        name: Package name as entered by the user
        author_name: Author name as entered by the user

    Returns:
        Lower-cased reverse-domain package identifier without path separators
    """
    author = strip_path_separators(hyphenate(author_name))
    package = strip_path_separators(hyphenate(name))
    return f"{PACKAGE_ID_PREFIX}.{author}.{package}".lower()


def sanitize(display_name: str, author_name: str) -> str:
    """Produce a filesystem- and identifier-safe package name."""
    return compose_package_id(display_name, author_name)
