from typing import Optional


class SourceError(Exception):
    """Base exception for novel source errors."""
    pass

class FetchError(SourceError):
    """Raised when a page cannot be fetched or returns a non-success status."""

    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code or 0
        super().__init__(f"Failed to fetch {url} (status {self.status_code})")

class InvalidChapterIdError(SourceError):
    """Raised when a chapter id is not in the 'novelId/chapter-slug' format."""
    pass

class ExtractionError(SourceError):
    """Raised when the expected content cannot be extracted from a page."""
    pass

class ContentNotFoundError(ExtractionError):
    """Raised when no extraction stage located any chapter text."""
    pass

class ContentTooShortError(ExtractionError):
    """Raised when every extraction stage produced less text than required."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Extracted {length} characters, expected at least {minimum}")

class EpubGenerationError(SourceError):
    """Raised when the EPUB generation fails."""
    pass
