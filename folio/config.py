"""Configuration loading and management."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = [
    Path("configs/default.yaml"),
    Path("folio.yaml"),
    Path.home() / ".folio" / "config.yaml",
]


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from file.

    The file is merged over the defaults, so a partial file only needs the
    keys it changes.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches default locations.

    Returns:
        Configuration dictionary.
    """
    paths_to_try = [config_path] if config_path else DEFAULT_CONFIG_PATHS

    for path in paths_to_try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
                return merge_configs(get_default_config(), config or {})

    # Return default config if no file found
    return get_default_config()


def get_default_config() -> dict[str, Any]:
    """Return the default configuration."""
    return {
        "capture": {
            "output_dir": "public/images",
            "viewport": {"width": 1280, "height": 800},
            "mobile_viewport": {"width": 375, "height": 812},
            "mobile": False,
            "full_page": True,
            "timeout_ms": 60000,
            "wait_until": "networkidle",
            "headless": True,
            "inputs": {
                "json": "screenshots.json",
                "file": "urls.txt",
            },
            "urls": [
                "https://www.example.com",
                "https://www.google.com",
                "https://www.wikipedia.org",
            ],
        },
        "gallery": {
            "image_prefix": "/images",
            "tile_width": 300,
            "tile_height": 125,
            "depth_scale": 0.3,
            "dimmed_opacity": 0.5,
            "hover_scale": 1.1,
            "settle_delay": 0.5,
            "name_debounce": 0.3,
            "resize_debounce": 0.5,
            "drag_threshold": 5.0,
            "first_duration": 2.0,
            "fast_duration": 0.5,
            "offscreen_margin": 150,
            "title": "Selected Portfolio",
            "gallery_title": "Portfolio",
            "updated": "",
        },
    }


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two configuration dictionaries.

    Args:
        base: Base configuration.
        override: Override configuration (takes precedence).

    Returns:
        Merged configuration.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


@dataclass(frozen=True)
class CaptureSettings:
    """Settings for one capture batch."""

    output_dir: Path = Path("public/images")
    width: int = 1280
    height: int = 800
    mobile_width: int = 375
    mobile_height: int = 812
    mobile: bool = False
    full_page: bool = True
    timeout_ms: int = 60000
    wait_until: str = "networkidle"
    headless: bool = True
    json_input: Path = Path("screenshots.json")
    file_input: Path = Path("urls.txt")
    urls: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GallerySettings:
    """Tunables of the gallery view."""

    image_prefix: str = "/images"
    tile_width: int = 300
    tile_height: int = 125
    depth_scale: float = 0.3
    dimmed_opacity: float = 0.5
    hover_scale: float = 1.1
    settle_delay: float = 0.5
    name_debounce: float = 0.3
    resize_debounce: float = 0.5
    drag_threshold: float = 5.0
    first_duration: float = 2.0
    fast_duration: float = 0.5
    offscreen_margin: int = 150
    title: str = "Selected Portfolio"
    gallery_title: str = "Portfolio"
    updated: str = ""


def capture_settings(config: dict[str, Any], **overrides: Any) -> CaptureSettings:
    """Build CaptureSettings from the ``capture`` section.

    Args:
        config: Full configuration dictionary.
        **overrides: Field values that win over the file (CLI flags).
            ``None`` values are ignored.

    Returns:
        Frozen capture settings.
    """
    section = merge_configs(get_default_config()["capture"], config.get("capture", {}))
    viewport = section["viewport"]
    mobile_viewport = section["mobile_viewport"]
    inputs = section["inputs"]

    values = {
        "output_dir": Path(section["output_dir"]),
        "width": int(viewport["width"]),
        "height": int(viewport["height"]),
        "mobile_width": int(mobile_viewport["width"]),
        "mobile_height": int(mobile_viewport["height"]),
        "mobile": bool(section["mobile"]),
        "full_page": bool(section["full_page"]),
        "timeout_ms": int(section["timeout_ms"]),
        "wait_until": section["wait_until"],
        "headless": bool(section["headless"]),
        "json_input": Path(inputs["json"]),
        "file_input": Path(inputs["file"]),
        "urls": tuple(section["urls"] or ()),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CaptureSettings(**values)


def gallery_settings(config: dict[str, Any]) -> GallerySettings:
    """Build GallerySettings from the ``gallery`` section."""
    section = merge_configs(get_default_config()["gallery"], config.get("gallery", {}))
    known = GallerySettings.__dataclass_fields__
    return GallerySettings(**{k: v for k, v in section.items() if k in known})
