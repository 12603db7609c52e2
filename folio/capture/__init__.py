"""Capture module - headless browser screenshots of portfolio sites."""

from folio.capture.targets import CaptureMode, CaptureTarget, resolve_targets
from folio.capture.screenshot import CaptureResult, ScreenshotCapturer, run_capture

__all__ = [
    "CaptureMode",
    "CaptureTarget",
    "CaptureResult",
    "ScreenshotCapturer",
    "resolve_targets",
    "run_capture",
]
