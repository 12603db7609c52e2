"""Folio CLI - Typer-based command line interface."""

import asyncio
import json
import random
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from folio import __version__
from folio.config import capture_settings, gallery_settings, load_config
from folio.errors import FolioError

app = typer.Typer(
    name="folio",
    help="Folio - portfolio screenshots and animated gallery",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def show_banner() -> None:
    """Display the Folio banner."""
    banner = "Portfolio screenshots and animated gallery"
    console.print(
        Panel(banner, title=f"[bold cyan]Folio v{__version__}[/]", border_style="cyan")
    )


@app.command()
def capture(
    mode: Annotated[
        str, typer.Option("--mode", "-m", help="Input mode: json, file or urls")
    ] = "json",
    input_path: Annotated[
        Path | None, typer.Option("--input", "-i", help="Input file (json or file mode)")
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output", "-o", help="Directory for PNG files")
    ] = None,
    mobile: Annotated[
        bool, typer.Option("--mobile", help="Also capture a mobile viewport")
    ] = False,
    viewport_only: Annotated[
        bool, typer.Option("--viewport-only", help="Capture the viewport, not the full page")
    ] = False,
    timeout: Annotated[
        int | None, typer.Option("--timeout", help="Navigation timeout in milliseconds")
    ] = None,
    config_file: Annotated[Path | None, typer.Option("--config", help="Custom config file")] = None,
) -> None:
    """
    📸 Capture a screenshot of every site in the input.

    Sites are visited one at a time. A failing site is reported on stderr and
    skipped; the command always finishes normally.
    """
    from folio.capture.screenshot import run_capture
    from folio.capture.targets import resolve_targets

    try:
        config = load_config(config_file)
        settings = capture_settings(
            config,
            output_dir=output_dir,
            mobile=True if mobile else None,
            full_page=False if viewport_only else None,
            timeout_ms=timeout,
        )
        targets = resolve_targets(mode, settings, input_path)
    except FolioError as e:
        err_console.print(f"[red]Error reading input:[/] {escape(str(e))}")
        return
    except Exception as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        return

    console.print(f"[bold]Targets:[/] {len(targets)}")
    console.print(f"[bold]Output:[/] {settings.output_dir}\n")

    try:
        results = asyncio.run(
            run_capture(targets, settings, console=console, error_console=err_console)
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Capture interrupted by user.[/]")
        return
    except Exception as e:
        err_console.print(f"[red]Capture failed:[/] {escape(str(e))}")
        return

    saved = sum(1 for r in results if r.ok)
    console.print(f"\n[bold]Done:[/] {saved} saved, {len(results) - saved} failed")


@app.command()
def render(
    projects: Annotated[Path | None, typer.Option("--projects", "-p", help="Project JSON file")] = None,
    output: Annotated[Path, typer.Option("--output", "-o", help="HTML file to write")] = Path(
        "gallery.html"
    ),
    width: Annotated[int, typer.Option("--width", help="Viewport width")] = 1280,
    height: Annotated[int, typer.Option("--height", help="Viewport height")] = 800,
    category: Annotated[str, typer.Option("--category", help="Category filter")] = "",
    technology: Annotated[str, typer.Option("--technology", help="Technology filter")] = "",
    name: Annotated[str, typer.Option("--name", help="Project name filter")] = "",
    seed: Annotated[int | None, typer.Option("--seed", help="Layout random seed")] = None,
    config_file: Annotated[Path | None, typer.Option("--config", help="Custom config file")] = None,
) -> None:
    """
    🖼️ Render the gallery phase of the portfolio view to an HTML file.

    Without --projects the built-in demo catalogue is used.
    """
    from folio.gallery.catalog import demo_catalog, load_projects
    from folio.gallery.models import Viewport
    from folio.gallery.render import render_gallery
    from folio.gallery.timers import ManualScheduler
    from folio.gallery.view import GalleryView

    try:
        settings = gallery_settings(load_config(config_file))
        catalog = load_projects(projects, settings.image_prefix) if projects else demo_catalog()
    except FolioError as e:
        err_console.print(f"[red]Error reading projects:[/] {escape(str(e))}")
        raise typer.Exit(1)

    scheduler = ManualScheduler()
    view = GalleryView(
        catalog,
        scheduler,
        Viewport(width, height),
        settings=settings,
        rng=random.Random(seed),
    )
    for project_id, _src in view.mount():
        view.image_loaded(project_id)
    view.view()

    view.set_category(category)
    view.set_technology(technology)
    view.type_name(name)
    scheduler.run_all()

    render_gallery(view, output)
    matched = sum(1 for tile in view.tiles() if tile.matched)
    console.print(f"[green]✓[/] Gallery written to {output}")
    console.print(f"  {matched}/{len(catalog)} projects matching")


@app.command("demo-projects")
def demo_projects(
    count: Annotated[int, typer.Option("--count", "-n", help="Number of projects")] = 50,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="JSON file to write")] = None,
) -> None:
    """Write the demo project catalogue as JSON."""
    from folio.gallery.catalog import catalog_records, demo_catalog

    text = json.dumps(catalog_records(demo_catalog(count)), indent=2)
    if output is None:
        typer.echo(text)
        return

    output.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]✓[/] {count} projects written to {output}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Folio v{__version__}")


@app.command()
def doctor() -> None:
    """Check system requirements and dependencies."""
    show_banner()
    console.print("\n[bold]Checking system requirements...[/]\n")

    checks = []

    py_version = sys.version_info
    py_ok = py_version >= (3, 11)
    checks.append(
        ("Python 3.11+", py_ok, f"{py_version.major}.{py_version.minor}.{py_version.micro}")
    )

    # Check Playwright and its Chromium build
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            chromium_path = p.chromium.executable_path
        chromium_ok = Path(chromium_path).exists()
        chromium_status = chromium_path if chromium_ok else "playwright install chromium"
        pw_ok = True
    except Exception as e:
        pw_ok = False
        chromium_ok = False
        chromium_status = f"Could not check ({e})"
    checks.append(("Playwright", pw_ok, "Installed" if pw_ok else "pip install playwright"))
    checks.append(("Chromium", chromium_ok, chromium_status))

    table = Table(title="System Check Results")
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for check_name, ok, details in checks:
        status = "[green]✓[/]" if ok else "[red]✗[/]"
        table.add_row(check_name, status, details)

    console.print(table)


if __name__ == "__main__":
    app()
