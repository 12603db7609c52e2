"""Gallery renderer - turn a GalleryView snapshot into a standalone HTML page."""

from pathlib import Path

from jinja2 import BaseLoader, Environment

from folio.gallery.models import Phase
from folio.gallery.view import GalleryView

GALLERY_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>
        * { box-sizing: border-box; }
        body {
            position: fixed;
            inset: 0;
            margin: 0;
            overflow: hidden;
            background: #000;
            color: #fff;
            font-family: Montserrat, sans-serif;
        }
        .intro {
            position: absolute;
            inset: 0;
            display: flex;
            flex-direction: column;
            justify-content: center;
            align-items: center;
            text-align: center;
        }
        .intro h1 { font-size: 4em; margin-bottom: 0; }
        .intro p { font-size: 0.8em; margin-top: 0; }
        button, select, input {
            background: #fff;
            color: #000;
            border: 1px solid #fff;
            height: 32px;
        }
        .progress {
            position: absolute;
            top: 50%;
            left: 50%;
            transform: translate(-50%, -50%);
            width: 300px;
            border: 1px solid #fff;
            border-radius: 8px;
            overflow: hidden;
        }
        .progress div { height: 20px; background: #fff; transition: width 0.2s; }
        .page-title {
            position: absolute;
            top: 20px;
            left: 20px;
            margin: 0;
            font-size: 28px;
            user-select: none;
            pointer-events: none;
            z-index: 10;
        }
        .filters {
            position: absolute;
            top: 20px;
            right: 20px;
            display: flex;
            gap: 10px;
            align-items: center;
            z-index: 10;
        }
        .tile {
            position: absolute;
            top: 0;
            left: 0;
            max-width: 200px;
            transition-property: transform, opacity;
            transition-timing-function: ease-in-out;
        }
        .tile:hover { transform: var(--pos) scale({{ hover_scale }}); }
        .tile img { width: 100%; height: auto; border-radius: 8px; pointer-events: none; }
    </style>
</head>
<body data-phase="{{ phase }}">
    {% if phase == "intro" %}
    <div class="intro">
        <h1>{{ title }}</h1>
        {% if updated %}<p>updated {{ updated }}</p>{% endif %}
        <button type="button" data-action="view">View</button>
    </div>
    {% elif phase == "loading" %}
    <div class="progress">
        <div style="width: {{ '%.1f'|format(progress) }}%"></div>
    </div>
    {% else %}
    <h1 class="page-title">{{ gallery_title }}</h1>
    <form class="filters">
        <select name="category">
            <option value="">All Categories</option>
            {% for option in category_options %}
            <option value="{{ option }}"{% if option == filters.category %} selected{% endif %}>{{ option }}</option>
            {% endfor %}
        </select>
        <select name="technology">
            <option value="">All Tech</option>
            {% for option in technology_options %}
            <option value="{{ option }}"{% if option == filters.technology %} selected{% endif %}>{{ option }}</option>
            {% endfor %}
        </select>
        <input type="text" name="name" value="{{ filters.name }}" placeholder="Project name">
        <button type="reset" data-action="reset">Reset</button>
    </form>
    <div class="canvas">
        {% for tile in tiles %}
        <a class="tile{% if not tile.matched %} dimmed{% endif %}"
           href="{{ tile.project.link }}"
           target="_blank"
           data-id="{{ tile.project.id }}"
           data-origin="{{ '%.1f'|format(tile.origin.x) }},{{ '%.1f'|format(tile.origin.y) }}"
           style="--pos: translate({{ '%.1f'|format(tile.position.x) }}px, {{ '%.1f'|format(tile.position.y) }}px); transform: var(--pos) scale({{ '%.3f'|format(tile.scale) }}); opacity: {{ tile.opacity }}; transition-duration: {{ tile.duration }}s;">
            <img src="{{ tile.project.src }}" alt="{{ tile.project.name }}">
        </a>
        {% endfor %}
    </div>
    {% endif %}
</body>
</html>"""


def render_gallery(
    view: GalleryView,
    output_path: Path | str | None = None,
    title: str | None = None,
) -> str:
    """Render the current view phase as HTML.

    Args:
        view: Mounted gallery view.
        output_path: Optional file to write the page to.
        title: Intro heading, the configured title by default.

    Returns:
        The rendered HTML.
    """
    settings = view.settings
    phase = view.phase or Phase.INTRO

    env = Environment(loader=BaseLoader(), autoescape=True)
    template = env.from_string(GALLERY_TEMPLATE)
    html = template.render(
        phase=phase.value,
        title=title or settings.title,
        gallery_title=settings.gallery_title,
        updated=settings.updated,
        hover_scale=settings.hover_scale,
        progress=view.progress,
        filters=view.filters,
        category_options=view.catalog.category_options,
        technology_options=view.catalog.technology_options,
        tiles=view.tiles() if phase is Phase.GALLERY else [],
    )

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)

    return html
