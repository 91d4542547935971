"""Version string normalization.

Users type versions freely ("2", "2.", "1.0.0-preview-3.1"). Package
consumers expect exactly three dot-separated segments, so every version
is forced into that shape before it is stored or serialized.
"""

# Defaults for the major and minor segments when absent or empty
DEFAULT_SEGMENTS = ("1", "0")

# Value for the patch segment when the input has fewer than three segments
DEFAULT_PATCH = "0"


def normalize_version(raw: str) -> list[str]:
    """Split a raw version string into exactly three segments.

    Example:
        "1.0.0-preview-3.1" -> ["1", "0", "0-preview-3.1"]

    Args:
        raw: Version string as typed by the user

    Returns:
        List of three segments (major, minor, patch)
    """
    # str.split always yields at least one element, even for ""
    parts = raw.split(".")

    segments: list[str] = []
    for index, default in enumerate(DEFAULT_SEGMENTS):
        value = parts[index] if index < len(parts) else ""
        segments.append(value or default)

    if len(parts) > 2:
        # Keep pre-release/build suffixes verbatim
        segments.append(".".join(parts[2:]))
    else:
        segments.append(DEFAULT_PATCH)

    return segments


def format_version(raw: str) -> str:
    """Normalize a raw version string and join it for display and storage.

    Args:
        raw: Version string as typed by the user

    Returns:
        Canonical "major.minor.patch" string with spaces replaced by hyphens
    """
    return ".".join(normalize_version(raw)).replace(" ", "-")
