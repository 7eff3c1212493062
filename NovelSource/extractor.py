import copy
import logging
import re
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from .cleaner import (clean_text, extract_paragraphs, paragraphs_to_html, remove_noise,
                      strip_chapter_prefix)
from .config import SourceConfig
from .exceptions import ContentNotFoundError, ContentTooShortError, InvalidChapterIdError
from .models import ChapterContent, ChapterRef, NovelDetail, NovelSummary

NOVEL_PATH_RE = re.compile(r'^/novel/([^/?#]+)/?$')
STATUS_RE = re.compile(r'\b(ongoing|completed?|finished|hiatus)\b', re.IGNORECASE)
DECIMAL_RE = re.compile(r'(\d+(?:\.\d+)?)')

STATUS_MAP = {
    'ongoing': 'Ongoing',
    'complete': 'Completed',
    'completed': 'Completed',
    'finished': 'Completed',
}


def parse_chapter_id(chapter_id: str) -> Tuple[str, str]:
    """
    Splits 'novelId/chapter-slug' into its two parts.
    Trailing slashes are ignored and anything after the slug segment is dropped.
    """
    parts = chapter_id.strip().rstrip('/').split('/') if chapter_id else []
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidChapterIdError(f"Chapter id must look like 'novelId/chapter-X', got {chapter_id!r}")
    return parts[0], parts[1]


def normalize_status(text: Optional[str]) -> str:
    if not text:
        return 'Unknown'
    match = STATUS_RE.search(text)
    if not match:
        return 'Unknown'
    return STATUS_MAP.get(match.group(1).lower(), 'Unknown')


def synthesize_description(rating: str, status: str, genres: Iterable[str]) -> str:
    parts = []
    if rating:
        parts.append(f"Rating: {rating}")
    if status and status != 'Unknown':
        parts.append(f"Status: {status}")
    genres = list(genres)
    if genres:
        parts.append(f"Genres: {', '.join(genres)}")
    return " | ".join(parts)


class PageExtractor:
    """Turns raw FreeWebNovel pages into records. Holds nothing but its configuration."""

    STATUS_SELECTORS = ('span.s1', 'span.status', "a[href*='/sort/completed']", "a[href*='/sort/ongoing']")

    def __init__(self, config: SourceConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)

    # Helpers

    def _select_first(self, root: Tag, selectors: Iterable[str]) -> Optional[Tag]:
        for sel in selectors:
            found = root.select_one(sel)
            if isinstance(found, Tag):
                return found
        return None

    def _absolute(self, url: Optional[str]) -> str:
        if not url:
            return ''
        return urljoin(self.config.base_url.rstrip('/') + '/', url.strip())

    def _image_url(self, img_tag: Optional[Tag]) -> str:
        if not isinstance(img_tag, Tag):
            return ''
        src = img_tag.get('data-src') or img_tag.get('src')
        return self._absolute(src) if isinstance(src, str) else ''

    def _meta(self, soup: BeautifulSoup, key: str) -> str:
        tag = soup.find('meta', attrs={'property': key}) or soup.find('meta', attrs={'name': key})
        if isinstance(tag, Tag):
            content = tag.get('content')
            if isinstance(content, str):
                return clean_text(content)
        return ''

    def _novel_id_from_href(self, href) -> Optional[str]:
        if not isinstance(href, str):
            return None
        match = NOVEL_PATH_RE.match(urlparse(href).path)
        return match.group(1) if match else None

    def _rating(self, root: Tag) -> str:
        score = self._select_first(root, ('p.vote', 'div.score', 'span.score', '.rating'))
        if isinstance(score, Tag):
            match = DECIMAL_RE.search(score.get_text(' ', strip=True))
            if match:
                return match.group(1)
        return ''

    def _genres(self, root: Tag) -> List[str]:
        genres: List[str] = []
        for a_tag in root.select("a[href*='/genre/']"):
            name = clean_text(a_tag.get_text(' ', strip=True))
            if name and name not in genres:
                genres.append(name)
        return genres

    # Listing and search results

    def parse_novel_list(self, html: str) -> List[NovelSummary]:
        """Extracts novel summaries from a listing or search results page, in document order."""
        soup = BeautifulSoup(html, 'html.parser')
        container = self._select_first(soup, self.config.list_container_selectors)
        if container is None:
            self.logger.warning("Could not find the novel list container.")
            return []

        rows: List[Tag] = []
        for sel in self.config.list_row_selectors:
            rows = [row for row in container.select(sel) if isinstance(row, Tag)]
            if rows:
                break

        novels: List[NovelSummary] = []
        seen = set()
        for row in rows:
            summary = self._parse_list_row(row)
            if summary is None or summary.novel_id in seen:
                continue
            seen.add(summary.novel_id)
            novels.append(summary)
            if len(novels) >= self.config.max_results:
                break

        if not novels:
            self.logger.warning("Found the novel list, but it contains no usable entries.")
        return novels

    def _parse_list_row(self, row: Tag) -> Optional[NovelSummary]:
        title_anchor = None
        heading = self._select_first(row, ('h3.tit a', 'h3 a', '.tit a', 'h2 a'))
        if isinstance(heading, Tag) and self._novel_id_from_href(heading.get('href')):
            title_anchor = heading
        else:
            for a_tag in row.find_all('a', href=True):
                if self._novel_id_from_href(a_tag.get('href')):
                    title_anchor = a_tag
                    break
        if title_anchor is None:
            return None

        novel_id = self._novel_id_from_href(title_anchor.get('href'))
        img_tag = row.find('img')

        title = clean_text(title_anchor.get('title') or '') or clean_text(title_anchor.get_text(' ', strip=True))
        if not title and isinstance(img_tag, Tag):
            title = clean_text(img_tag.get('alt') or '')
        if not novel_id or not title:
            return None

        author = ''
        author_tag = row.select_one("a[href*='/author/']")
        if isinstance(author_tag, Tag):
            author = clean_text(author_tag.get_text(' ', strip=True))

        genres = self._genres(row)[:self.config.max_genres]
        status_tag = self._select_first(row, self.STATUS_SELECTORS)
        status_source = status_tag if isinstance(status_tag, Tag) else row
        status = normalize_status(status_source.get_text(' ', strip=True))
        return NovelSummary(
            novel_id=novel_id,
            title=title,
            cover_url=self._image_url(img_tag),
            author=author,
            description=synthesize_description(self._rating(row), status, genres),
        )

    # Novel page

    def parse_novel_detail(self, html: str, novel_id: str) -> NovelDetail:
        soup = BeautifulSoup(html, 'html.parser')
        info = self._select_first(soup, ('div.m-imgtxt', 'div.m-book1', 'div.novel-info')) or soup

        title = ''
        title_tag = self._select_first(soup, ('h1.tit', 'h3.tit', 'h1'))
        if isinstance(title_tag, Tag):
            title = clean_text(title_tag.get_text(' ', strip=True))
        title = title or self._meta(soup, 'og:title') or novel_id

        cover_url = self._image_url(self._select_first(soup, ('div.m-imgtxt div.pic img', 'div.pic img', 'div.novel-cover img')))
        if not cover_url:
            cover_url = self._absolute(self._meta(soup, 'og:image'))

        authors = [clean_text(a.get_text(' ', strip=True)) for a in info.select("a[href*='/author/']")]
        author = ', '.join(a for a in authors if a) or self._meta(soup, 'og:novel:author')

        genres = self._genres(info)
        if not genres:
            meta_genres = self._meta(soup, 'og:novel:genre')
            genres = [g.strip() for g in meta_genres.split(',') if g.strip()]
        genres = genres[:self.config.max_genres]

        status = normalize_status(self._meta(soup, 'og:novel:status'))
        if status == 'Unknown':
            status = normalize_status(info.get_text(' ', strip=True))

        return NovelDetail(
            novel_id=novel_id,
            title=title,
            cover_url=cover_url,
            author=author,
            description=self._description(soup),
            genres=genres,
            status=status,
            rating=self._rating(soup),
        )

    def _description(self, soup: BeautifulSoup) -> str:
        container = self._select_first(soup, ('div.m-desc div.inner', 'div.m-desc div.txt', 'div.desc-text', 'div.summary'))
        if isinstance(container, Tag):
            paragraphs = extract_paragraphs(remove_noise(copy.copy(container)), (), min_line_length=0)
            if paragraphs:
                return "\n\n".join(paragraphs)
        return self._meta(soup, 'og:description') or self._meta(soup, 'description')

    # Chapter list

    def parse_chapter_list(self, html: str, novel_id: str) -> List[ChapterRef]:
        """Collects chapter links under /novel/<novel_id>/, first occurrence of each slug wins."""
        soup = BeautifulSoup(html, 'html.parser')
        chapter_re = re.compile(r'^/novel/' + re.escape(novel_id) + r'/([^/?#]+)/?$')

        chapters: List[ChapterRef] = []
        seen = set()
        for a_tag in soup.find_all('a', href=True):
            href = a_tag.get('href')
            if not isinstance(href, str):
                continue
            match = chapter_re.match(urlparse(href).path)
            if not match:
                continue
            slug = match.group(1)
            if slug in seen:
                continue
            seen.add(slug)

            raw_title = a_tag.get_text(' ', strip=True) or a_tag.get('title') or slug.replace('-', ' ').title()
            chapters.append(ChapterRef(
                chapter_id=f"{novel_id}/{slug}",
                title=strip_chapter_prefix(raw_title),
                index=len(chapters),
            ))
        return chapters

    # Chapter body

    def extract_chapter_body(self, html: str) -> ChapterContent:
        """
        Tries the primary content container, then the secondary one, then the text between the
        'Previous Chapter' marker and the earliest end marker. The first stage that yields at
        least min_content_length characters wins.
        """
        soup = BeautifulSoup(html, 'html.parser')
        stages = [
            ('primary', lambda: self._container_stage(soup, self.config.primary_content_selectors)),
            ('secondary', lambda: self._container_stage(soup, self.config.secondary_content_selectors)),
            ('markers', lambda: self._marker_stage(html)),
        ]

        longest = 0
        for name, stage in stages:
            paragraphs = stage()
            if not paragraphs:
                self.logger.debug(f"Extraction stage '{name}' found nothing.")
                continue
            length = sum(len(p) for p in paragraphs)
            if length >= self.config.min_content_length:
                return ChapterContent(html=paragraphs_to_html(paragraphs), stage=name, ok=True)
            self.logger.warning(f"Extraction stage '{name}' produced only {length} characters, trying the next one.")
            longest = max(longest, length)

        if longest:
            raise ContentTooShortError(longest, self.config.min_content_length)
        raise ContentNotFoundError("Could not locate chapter content.")

    def _container_stage(self, soup: BeautifulSoup, selectors: Iterable[str]) -> List[str]:
        best: List[str] = []
        for sel in selectors:
            node = soup.select_one(sel)
            if not isinstance(node, Tag):
                continue
            paragraphs = extract_paragraphs(
                remove_noise(copy.copy(node)), self.config.noise_phrases, self.config.min_line_length
            )
            if sum(len(p) for p in paragraphs) >= self.config.min_content_length:
                return paragraphs
            if sum(len(p) for p in paragraphs) > sum(len(p) for p in best):
                best = paragraphs
        return best

    def _marker_stage(self, html: str) -> List[str]:
        start = html.find(self.config.start_marker)
        if start == -1:
            return []

        end = -1
        for marker in self.config.end_markers:
            idx = html.find(marker, start + self.config.marker_gap)
            if idx > -1 and (end == -1 or idx < end):
                end = idx
        if end == -1:
            end = len(html)

        section = html[start:end]
        marker_re = r'\s+'.join(re.escape(word) for word in self.config.start_marker.split())
        section = re.sub(marker_re, '', section)

        fragment = BeautifulSoup(section, 'html.parser')
        return extract_paragraphs(remove_noise(fragment), self.config.noise_phrases, self.config.min_line_length)
