"""Tests for the screenshot capturer."""

import asyncio
from pathlib import Path

import pytest

from folio.capture.screenshot import ScreenshotCapturer, launch_chromium, run_capture
from folio.capture.targets import CaptureTarget
from folio.config import CaptureSettings
from folio.errors import CaptureError


def run(coro):
    return asyncio.run(coro)


class TestCapture:
    """Tests for single-target capture."""

    def test_writes_slug_named_png(self, capture_settings, session_factory, fake_page, out_console):
        """Test the happy path: navigate, set viewport, full-page shot."""

        async def go():
            async with ScreenshotCapturer(
                capture_settings, console=out_console, session_factory=session_factory
            ) as capturer:
                return await capturer.capture(CaptureTarget(name="My Site!", url="https://a.example"))

        result = run(go())

        expected = capture_settings.output_dir / "my-site.png"
        assert result.ok
        assert result.file_path == str(expected)
        assert result.status_code == 200
        assert expected.exists()
        assert fake_page.viewports == [{"width": 1280, "height": 800}]
        assert fake_page.shots == [{"path": str(expected), "full_page": True}]
        assert "Screenshot saved for https://a.example" in out_console.file.getvalue()

    def test_mobile_capture(self, tmp_path, session_factory, fake_page, out_console):
        """Test that mobile capture adds a -mobile.png at the mobile viewport."""
        settings = CaptureSettings(output_dir=tmp_path, mobile=True)

        async def go():
            async with ScreenshotCapturer(
                settings, console=out_console, session_factory=session_factory
            ) as capturer:
                return await capturer.capture(CaptureTarget(name="Shop", url="https://shop.example"))

        result = run(go())

        assert result.mobile_path == str(tmp_path / "shop-mobile.png")
        assert (tmp_path / "shop-mobile.png").exists()
        assert fake_page.viewports[-1] == {"width": 375, "height": 812}

    def test_non_success_status_raises(self, capture_settings, session_factory, fake_page):
        fake_page.outcomes["https://gone.example"] = 404

        async def go():
            async with ScreenshotCapturer(capture_settings, session_factory=session_factory) as c:
                await c.capture(CaptureTarget(name="Gone", url="https://gone.example"))

        with pytest.raises(CaptureError) as exc_info:
            run(go())
        assert exc_info.value.status_code == 404
        assert fake_page.shots == []

    def test_redirect_status_is_success(self, capture_settings, session_factory, fake_page):
        fake_page.outcomes["https://moved.example"] = 302

        async def go():
            async with ScreenshotCapturer(capture_settings, session_factory=session_factory) as c:
                return await c.capture(CaptureTarget(name="Moved", url="https://moved.example"))

        assert run(go()).ok

    def test_requires_context(self, capture_settings):
        capturer = ScreenshotCapturer(capture_settings)
        with pytest.raises(RuntimeError):
            run(capturer.capture(CaptureTarget(name="x", url="https://x")))


class TestCaptureAll:
    """Tests for batch semantics."""

    def test_failures_do_not_stop_batch(
        self, capture_settings, session_factory, fake_page, fake_session, out_console, err_console
    ):
        """Test that every kind of failure is logged with its URL and skipped."""
        fake_page.outcomes.update(
            {
                "https://404.example": 404,
                "https://none.example": None,
                "https://down.example": TimeoutError("Timeout 60000ms exceeded"),
            }
        )
        targets = [
            CaptureTarget(name="Four", url="https://404.example"),
            CaptureTarget(name="None", url="https://none.example"),
            CaptureTarget(name="Down", url="https://down.example"),
            CaptureTarget(name="Good", url="https://good.example"),
        ]

        results = run(
            run_capture(
                targets,
                capture_settings,
                console=out_console,
                error_console=err_console,
                session_factory=session_factory,
            )
        )

        assert [r.ok for r in results] == [False, False, False, True]
        assert results[0].status_code == 404
        assert "Timeout" in results[2].error
        assert fake_page.visited == [t.url for t in targets]

        errors = err_console.file.getvalue()
        assert "https://404.example" in errors
        assert "https://none.example" in errors
        assert "https://down.example" in errors
        assert "https://good.example" not in errors

        written = sorted(p.name for p in Path(capture_settings.output_dir).iterdir())
        assert written == ["good.png"]
        assert fake_session.close_calls == 1

    def test_unreachable_host_end_to_end(
        self, capture_settings, session_factory, fake_page, fake_session, err_console
    ):
        """Test one unreachable target: no files, one logged failure, normal return."""
        fake_page.outcomes["https://example.invalid"] = RuntimeError(
            "net::ERR_NAME_NOT_RESOLVED at https://example.invalid"
        )

        results = run(
            run_capture(
                [CaptureTarget(name="My Site!", url="https://example.invalid")],
                capture_settings,
                error_console=err_console,
                session_factory=session_factory,
            )
        )

        assert len(results) == 1
        assert not results[0].ok
        assert list(Path(capture_settings.output_dir).iterdir()) == []
        assert err_console.file.getvalue().count("https://example.invalid") >= 1
        assert fake_session.close_calls == 1

    def test_creates_nested_output_dir(self, tmp_path, session_factory):
        settings = CaptureSettings(output_dir=tmp_path / "a" / "b")
        run(run_capture([], settings, session_factory=session_factory))
        assert (tmp_path / "a" / "b").is_dir()

    def test_browser_closed_when_batch_raises(self, capture_settings, fake_session):
        """Test that the browser closes even if the loop itself is interrupted."""

        async def factory(settings):
            return fake_session

        async def go():
            async with ScreenshotCapturer(capture_settings, session_factory=factory):
                raise KeyError("boom")

        with pytest.raises(KeyError):
            run(go())
        assert fake_session.close_calls == 1

    def test_next_target_navigates_at_desktop_size(self, tmp_path, session_factory, fake_page):
        """Test that a mobile shot does not leave the next navigation at the mobile size."""
        settings = CaptureSettings(output_dir=tmp_path, mobile=True)
        targets = [
            CaptureTarget(name="One", url="https://one.example"),
            CaptureTarget(name="Two", url="https://two.example"),
        ]

        run(run_capture(targets, settings, session_factory=session_factory))

        assert fake_page.goto_viewports == [
            {"width": 1280, "height": 800},
            {"width": 1280, "height": 800},
        ]


class TestLaunchChromium:
    """Tests for the default browser launcher."""

    def test_driver_stopped_when_launch_fails(self, monkeypatch):
        """Test that a failed Chromium launch still stops the Playwright driver."""

        class FakeChromium:
            async def launch(self, **kwargs):
                raise RuntimeError("Executable doesn't exist")

        class FakePlaywright:
            def __init__(self):
                self.chromium = FakeChromium()
                self.stop_calls = 0

            async def stop(self):
                self.stop_calls += 1

        driver = FakePlaywright()

        class FakeStarter:
            async def start(self):
                return driver

        monkeypatch.setattr("folio.capture.screenshot.async_playwright", FakeStarter)

        with pytest.raises(RuntimeError, match="Executable"):
            run(launch_chromium(CaptureSettings()))
        assert driver.stop_calls == 1
