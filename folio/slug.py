"""Filesystem-safe slugs shared by the capturer and the gallery."""

import re

_SEPARATOR_RUN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Convert a display name to a lower-case, dash separated slug.

    Any run of characters outside ``[a-z0-9]`` collapses to one dash and
    leading/trailing dashes are stripped, so the result is idempotent.

    Args:
        name: Display name (or URL).

    Returns:
        Slug string, possibly empty.
    """
    return _SEPARATOR_RUN.sub("-", name.lower()).strip("-")


def image_filename(name: str, mobile: bool = False) -> str:
    """Return the PNG filename for a project name."""
    suffix = "-mobile" if mobile else ""
    return f"{slugify(name)}{suffix}.png"
