import os
from dataclasses import dataclass, replace
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'

@dataclass(frozen=True)
class SourceConfig:
    """Site-specific settings for the FreeWebNovel source. Never mutated after creation."""
    base_url: str = "https://freewebnovel.com"
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10

    popular_sort: str = "most-popular"
    search_path: str = "/search"
    search_param: str = "q"

    max_results: int = 50
    max_genres: int = 5
    min_content_length: int = 50
    min_line_length: int = 20
    marker_gap: int = 100

    list_container_selectors: Tuple[str, ...] = ("div.ul-list1", "div.ul-list2", "div.list-novel")
    list_row_selectors: Tuple[str, ...] = ("div.li-row", "div.row")
    primary_content_selectors: Tuple[str, ...] = ("div#article", "div.chapter-content", "div#chapter-content")
    secondary_content_selectors: Tuple[str, ...] = ("div.txt", "div.m-read", "div.read-content", "article")

    start_marker: str = "Previous Chapter"
    end_markers: Tuple[str, ...] = (
        "Prev Chapter",
        '<div class="m-b-15 text-center">',
        '<div class="comment">',
        "Use arrow keys",
        "Add to Library",
    )
    noise_phrases: Tuple[str, ...] = (
        "freewebnovel",
        "free web novel",
        "use arrow keys",
        "add to library",
        "report chapter",
        "tap the screen to use reading tools",
    )

    def absolute_url(self, path: str) -> str:
        if path.startswith('http'):
            return path
        if not path.startswith('/'):
            path = '/' + path
        return self.base_url.rstrip('/') + path

_ENV_OVERRIDES = {
    'NOVELSOURCE_BASE_URL': ('base_url', str),
    'NOVELSOURCE_USER_AGENT': ('user_agent', str),
    'NOVELSOURCE_TIMEOUT': ('timeout', float),
    'NOVELSOURCE_SEARCH_PARAM': ('search_param', str),
    'NOVELSOURCE_POPULAR_SORT': ('popular_sort', str),
    'NOVELSOURCE_MAX_RESULTS': ('max_results', int),
    'NOVELSOURCE_MIN_CONTENT_LENGTH': ('min_content_length', int),
}

def load_config(**overrides) -> SourceConfig:
    """
    Builds a SourceConfig from the defaults, a .env file and NOVELSOURCE_* environment
    variables. Keyword arguments win over the environment.
    """
    load_dotenv()
    values = {}
    for env_name, (attr, cast) in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == '':
            continue
        try:
            values[attr] = cast(raw.strip())
        except ValueError as e:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e
    values.update(overrides)
    return replace(SourceConfig(), **values)
