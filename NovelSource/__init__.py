from .config import SourceConfig, load_config
from .models import ChapterContent, ChapterRef, ListFilters, NovelDetail, NovelSummary
from .source import FreeWebNovelSource

__all__ = [
    "SourceConfig",
    "load_config",
    "ChapterContent",
    "ChapterRef",
    "ListFilters",
    "NovelDetail",
    "NovelSummary",
    "FreeWebNovelSource",
]
