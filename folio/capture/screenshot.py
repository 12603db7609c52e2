"""Screenshot capture using Playwright."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from playwright.async_api import async_playwright
from rich.console import Console
from rich.markup import escape

from folio.capture.targets import CaptureTarget
from folio.config import CaptureSettings
from folio.errors import CaptureError
from folio.slug import image_filename


@dataclass
class CaptureResult:
    """Result of capturing one target."""

    name: str
    url: str
    file_path: str = ""
    mobile_path: str = ""
    status_code: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error and bool(self.file_path)


class BrowserSession:
    """One headless browser with the single page every target reuses."""

    def __init__(self, playwright: Any, browser: Any, page: Any):
        self._playwright = playwright
        self._browser = browser
        self.page = page

    async def close(self) -> None:
        await self._browser.close()
        await self._playwright.stop()


async def launch_chromium(settings: CaptureSettings) -> BrowserSession:
    """Start Playwright, launch headless Chromium and open one page."""
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(
            headless=settings.headless,
            args=[
                "--no-sandbox",
                "--disable-dev-shm-usage",
                "--disable-gpu",
            ],
        )
    except Exception:
        await playwright.stop()
        raise
    page = await browser.new_page()
    return BrowserSession(playwright, browser, page)


SessionFactory = Callable[[CaptureSettings], Awaitable[Any]]


class ScreenshotCapturer:
    """Capture full-page screenshots of capture targets, one at a time."""

    def __init__(
        self,
        settings: CaptureSettings,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        """Initialize the capturer.

        Args:
            settings: Output directory, viewports, timeout and wait condition.
            console: Console for progress lines.
            error_console: Console for failures, stderr by default.
            session_factory: Coroutine function returning an object with a
                ``page`` attribute and an async ``close()``. Defaults to a
                headless Chromium.
        """
        self.settings = settings
        self.output_dir = Path(settings.output_dir)
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self._session_factory = session_factory or launch_chromium
        self._session: Any = None

    async def __aenter__(self) -> "ScreenshotCapturer":
        """Create the output directory and launch the browser."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._session = await self._session_factory(self.settings)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the browser once, whatever happened to the targets."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def capture(self, target: CaptureTarget) -> CaptureResult:
        """Capture one target.

        Args:
            target: Name and URL to capture.

        Returns:
            CaptureResult with the written file paths.

        Raises:
            CaptureError: If navigation returned no response or a
                non-success HTTP status.
            RuntimeError: If used outside ``async with``.
        """
        if self._session is None:
            raise RuntimeError("Browser not initialized. Use 'async with' context.")

        page = self._session.page
        settings = self.settings

        # a previous mobile shot may have left the page at the mobile size
        await page.set_viewport_size({"width": settings.width, "height": settings.height})
        response = await page.goto(
            target.url,
            wait_until=settings.wait_until,
            timeout=settings.timeout_ms,
        )
        if response is None:
            raise CaptureError(target.url, "no response")
        if not response.ok:
            raise CaptureError(
                target.url, f"status code {response.status}", status_code=response.status
            )

        file_path = self.output_dir / image_filename(target.name)
        await page.screenshot(path=str(file_path), full_page=settings.full_page)
        self.console.print(f"[green]✓[/] Screenshot saved for {target.url} as {file_path}")

        result = CaptureResult(
            name=target.name,
            url=target.url,
            file_path=str(file_path),
            status_code=response.status,
        )

        if settings.mobile:
            mobile_path = self.output_dir / image_filename(target.name, mobile=True)
            await page.set_viewport_size(
                {"width": settings.mobile_width, "height": settings.mobile_height}
            )
            await page.screenshot(path=str(mobile_path), full_page=settings.full_page)
            self.console.print(
                f"[green]✓[/] Mobile screenshot saved for {target.url} as {mobile_path}"
            )
            result.mobile_path = str(mobile_path)

        return result

    async def capture_all(self, targets: list[CaptureTarget]) -> list[CaptureResult]:
        """Capture targets sequentially on the shared page.

        A failing target is logged with its URL and recorded; it never stops
        the batch.

        Args:
            targets: Targets in capture order.

        Returns:
            One result per target, in input order.
        """
        results = []

        for target in targets:
            try:
                results.append(await self.capture(target))
            except CaptureError as e:
                self.error_console.print(
                    f"[red]Error navigating to {escape(e.url)}:[/] {escape(e.reason)}"
                )
                results.append(
                    CaptureResult(
                        name=target.name,
                        url=target.url,
                        status_code=e.status_code,
                        error=e.reason,
                    )
                )
            except Exception as e:
                self.error_console.print(
                    f"[red]Error generating screenshot for {escape(target.url)}:[/] {escape(str(e))}"
                )
                results.append(CaptureResult(name=target.name, url=target.url, error=str(e)))

        return results


async def run_capture(
    targets: list[CaptureTarget],
    settings: CaptureSettings,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
    session_factory: Optional[SessionFactory] = None,
) -> list[CaptureResult]:
    """Capture a batch of targets with a fresh browser.

    Args:
        targets: Targets to capture.
        settings: Capture settings.
        console: Console for progress lines.
        error_console: Console for failures.
        session_factory: Browser session factory (see ScreenshotCapturer).

    Returns:
        List of results.
    """
    async with ScreenshotCapturer(
        settings,
        console=console,
        error_console=error_console,
        session_factory=session_factory,
    ) as capturer:
        return await capturer.capture_all(targets)
