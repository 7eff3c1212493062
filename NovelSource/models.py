from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class NovelSummary:
    """A novel as it appears in a listing or search results page."""
    novel_id: str
    title: str
    cover_url: str = ""
    author: str = ""
    description: str = ""

@dataclass
class NovelDetail(NovelSummary):
    """Full metadata scraped from a novel's own page."""
    genres: List[str] = field(default_factory=list)
    status: str = "Unknown"
    rating: str = ""

@dataclass
class ChapterRef:
    """Represents a single entry of a novel's chapter list."""
    chapter_id: str
    title: str
    index: int

    @property
    def novel_id(self) -> str:
        return self.chapter_id.split('/', 1)[0]

    @property
    def slug(self) -> str:
        return self.chapter_id.split('/', 1)[-1]

@dataclass
class ChapterContent:
    """HTML body of a chapter, or a user-facing placeholder when extraction failed."""
    html: str
    stage: Optional[str] = None
    ok: bool = False

    def __str__(self) -> str:
        return self.html

@dataclass
class ListFilters:
    sort: Optional[str] = None
    genre: Optional[str] = None

@dataclass
class PageResponse:
    """Outcome of a single GET request."""
    ok: bool
    status_code: int
    text: str = ""
    url: str = ""
