"""Errors raised by the scraping pipeline."""

from typing import Optional


class ScraperError(Exception):
    """Base exception for every pipeline failure."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class LaunchError(ScraperError):
    """Raised when the browser process cannot be started."""

    pass


class NavigationError(ScraperError):
    """Raised when the target is unreachable or the page never settles."""

    def __init__(self, message: str, url: Optional[str] = None, *args, **kwargs):
        self.url = url
        super().__init__(message, *args, **kwargs)


class ExtractionError(ScraperError):
    """Raised when the loaded document cannot be read or parsed."""

    pass


class WriteError(ScraperError):
    """Raised when an output file cannot be written."""

    def __init__(self, message: str, path: Optional[str] = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
