"""Exceptions raised across folio."""


class FolioError(Exception):
    """Base class for folio errors."""


class TargetLoadError(FolioError):
    """Input file could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class CaptureError(FolioError):
    """A single capture target failed."""

    def __init__(self, url: str, reason: str, status_code: int = 0):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{url}: {reason}")


class InvalidTransition(FolioError):
    """Gallery phase change not allowed from the current phase."""
