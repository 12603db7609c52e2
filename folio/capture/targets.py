"""Capture targets - loading name/url records from JSON, text files or lists."""

from enum import Enum
from pathlib import Path

from folio.config import CaptureSettings
from folio.records import ProjectRecord, load_records, read_text


class CaptureMode(str, Enum):
    """Where the capture targets come from."""

    JSON = "json"
    FILE = "file"
    URLS = "urls"


class CaptureTarget(ProjectRecord):
    """One site to capture.

    Categories and technologies are accepted so the gallery's project file
    can be fed straight in; the capturer ignores them.
    """


def load_json_targets(path: Path | str) -> list[CaptureTarget]:
    """Load targets from a JSON array of ``{name, url}`` records."""
    return load_records(path, CaptureTarget)


def targets_from_urls(urls: list[str] | tuple[str, ...]) -> list[CaptureTarget]:
    """Wrap bare URLs as targets named after the URL itself."""
    return [CaptureTarget(name=url, url=url) for url in (u.strip() for u in urls) if url]


def load_url_file(path: Path | str) -> list[CaptureTarget]:
    """Load targets from a newline-delimited file of URLs.

    Blank lines are skipped.
    """
    return targets_from_urls(read_text(path).splitlines())


def resolve_targets(
    mode: CaptureMode | str,
    settings: CaptureSettings,
    input_path: Path | None = None,
) -> list[CaptureTarget]:
    """Pick the loader for a capture mode.

    Args:
        mode: json (default), file or urls. Unknown modes fall back to urls.
        settings: Capture settings with the default input paths and url list.
        input_path: Overrides the default input file for json/file modes.

    Returns:
        Targets to capture.

    Raises:
        TargetLoadError: If the input cannot be loaded.
    """
    try:
        mode = CaptureMode(mode)
    except ValueError:
        mode = CaptureMode.URLS

    if mode is CaptureMode.JSON:
        return load_json_targets(input_path or settings.json_input)
    if mode is CaptureMode.FILE:
        return load_url_file(input_path or settings.file_input)
    return targets_from_urls(settings.urls)
