import logging
from typing import List, Optional
from urllib.parse import quote

from .config import SourceConfig, load_config
from .exceptions import ContentNotFoundError, ContentTooShortError, FetchError, InvalidChapterIdError
from .extractor import PageExtractor, parse_chapter_id
from .fetcher import Fetcher
from .models import ChapterContent, ChapterRef, ListFilters, NovelDetail, NovelSummary

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

INVALID_ID_HTML = "<p>Error: Unable to fetch chapter content. Invalid chapter ID format.</p>"
NOT_FOUND_HTML = "<p>Error: Could not locate chapter content.</p>"
FETCH_ERROR_HTML = "<p>Error loading chapter content. Status: {status}</p>"
TOO_SHORT_HTML = ("<p>Chapter content was found but appears to be too short. "
                  "This may be a parsing error.</p><p>URL: {url}</p>")


def page_number(page) -> int:
    """Listing and search pages are 1-based; anything else means the first page."""
    return page if isinstance(page, int) and page > 0 else 1


class FreeWebNovelSource:
    """
    Source plugin for freewebnovel.com.

    Every public method performs at most one request and never raises: failures are logged and
    turned into an empty list, None, or a placeholder ChapterContent.
    """

    def __init__(self, config: Optional[SourceConfig] = None, fetcher: Optional[Fetcher] = None):
        self.config = config or load_config()
        self.fetcher = fetcher or Fetcher(self.config)
        self.extractor = PageExtractor(self.config)
        self.logger = logging.getLogger(__name__)

    def _fetch_html(self, url: str, params: Optional[dict] = None) -> str:
        response = self.fetcher.get(url, params=params)
        if not response.ok:
            raise FetchError(url, response.status_code)
        return response.text

    # URL construction

    def listing_url(self, page: int = 1, filters: Optional[ListFilters] = None) -> str:
        page = page_number(page)
        filters = filters or ListFilters()
        if filters.genre:
            path = f"/genre/{quote(filters.genre.strip())}"
        else:
            path = f"/sort/{quote((filters.sort or self.config.popular_sort).strip())}"
        if page > 1:
            path += f"/{page}"
        return self.config.absolute_url(path)

    def novel_url(self, novel_id: str) -> str:
        return self.config.absolute_url(f"/novel/{novel_id}")

    def chapter_url(self, novel_id: str, slug: str) -> str:
        return self.config.absolute_url(f"/novel/{novel_id}/{slug}")

    # Operations

    def list_popular(self, page: int = 1, filters: Optional[ListFilters] = None) -> List[NovelSummary]:
        url = self.listing_url(page, filters)
        self.logger.info(f"Fetching popular novels, page {page}: {url}")
        try:
            html = self._fetch_html(url)
        except FetchError as e:
            self.logger.error(f"Error fetching popular novels: {e}")
            return []

        try:
            novels = self.extractor.parse_novel_list(html)
        except Exception as e:
            self.logger.error(f"Failed to parse popular novels from {url}: {e}", exc_info=True)
            return []
        self.logger.info(f"Found {len(novels)} novels on page {page}")
        return novels

    def search(self, query: str, page: int = 1) -> List[NovelSummary]:
        query = (query or '').strip()
        page = page_number(page)
        if not query:
            self.logger.warning("Empty search query, nothing to fetch.")
            return []

        url = self.config.absolute_url(self.config.search_path)
        params = {self.config.search_param: query}
        if page > 1:
            params['page'] = page
        self.logger.info(f"Searching for '{query}', page {page}")
        try:
            html = self._fetch_html(url, params=params)
        except FetchError as e:
            self.logger.error(f"Error searching novels: {e}")
            return []

        try:
            novels = self.extractor.parse_novel_list(html)
        except Exception as e:
            self.logger.error(f"Failed to parse search results for '{query}': {e}", exc_info=True)
            return []
        self.logger.info(f"Found {len(novels)} novels for query '{query}'")
        return novels

    def get_details(self, novel_id: str) -> Optional[NovelDetail]:
        novel_id = (novel_id or '').strip().strip('/')
        if not novel_id:
            self.logger.error("Cannot fetch details without a novel id.")
            return None

        try:
            html = self._fetch_html(self.novel_url(novel_id))
        except FetchError as e:
            self.logger.error(f"Error fetching novel details: {e}")
            return None

        try:
            detail = self.extractor.parse_novel_detail(html, novel_id)
        except Exception as e:
            self.logger.error(f"Failed to parse novel information for {novel_id}: {e}", exc_info=True)
            return None
        self.logger.info(f"Scraped details for '{detail.title}'")
        return detail

    def list_chapters(self, novel_id: str) -> List[ChapterRef]:
        novel_id = (novel_id or '').strip().strip('/')
        if not novel_id:
            self.logger.error("Cannot list chapters without a novel id.")
            return []

        self.logger.info(f"Getting chapters for novel: {novel_id}")
        try:
            html = self._fetch_html(self.novel_url(novel_id))
        except FetchError as e:
            self.logger.error(f"Error fetching chapter list: {e}")
            return []

        try:
            chapters = self.extractor.parse_chapter_list(html, novel_id)
        except Exception as e:
            self.logger.error(f"Failed to parse chapter list for {novel_id}: {e}", exc_info=True)
            return []
        if not chapters:
            self.logger.warning(f"No chapter links found for {novel_id}, falling back to the first chapter.")
            return [ChapterRef(chapter_id=f"{novel_id}/chapter-1", title="Chapter 1", index=0)]

        self.logger.info(f"Found {len(chapters)} chapters for {novel_id}")
        return chapters

    def get_chapter_content(self, chapter_id: str) -> ChapterContent:
        self.logger.info(f"Getting content for chapter: {chapter_id}")
        try:
            novel_id, slug = parse_chapter_id(chapter_id)
        except InvalidChapterIdError as e:
            self.logger.error(f"Error: {e}")
            return ChapterContent(html=INVALID_ID_HTML)

        url = self.chapter_url(novel_id, slug)
        try:
            html = self._fetch_html(url)
        except FetchError as e:
            self.logger.error(f"Error fetching chapter content: {e}")
            return ChapterContent(html=FETCH_ERROR_HTML.format(status=e.status_code))

        try:
            content = self.extractor.extract_chapter_body(html)
        except ContentTooShortError as e:
            self.logger.warning(f"Extracted content is too short for {chapter_id}: {e}")
            return ChapterContent(html=TOO_SHORT_HTML.format(url=url))
        except ContentNotFoundError:
            self.logger.error(f"Could not locate chapter content for {chapter_id}")
            return ChapterContent(html=NOT_FOUND_HTML)
        except Exception as e:
            self.logger.error(f"Failed to parse chapter {chapter_id}: {e}", exc_info=True)
            return ChapterContent(html=NOT_FOUND_HTML)

        self.logger.info(f"Extracted {len(content.html)} characters for {chapter_id} ({content.stage} stage)")
        return content
