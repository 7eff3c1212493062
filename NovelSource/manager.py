import logging
from typing import List, Optional, Tuple

from .epub import EpubGenerator
from .exceptions import EpubGenerationError
from .models import ChapterContent, ChapterRef
from .source import FreeWebNovelSource

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

class NovelManager:
    """Downloads a range of chapters through the source and packages them as an EPUB."""

    def __init__(self, source: Optional[FreeWebNovelSource] = None, output_dir: str = 'novels',
                 epub_generator: Optional[EpubGenerator] = None):
        self.source = source or FreeWebNovelSource()
        self.output_dir = output_dir
        self.epub_generator = epub_generator or EpubGenerator()
        self.logger = logging.getLogger(__name__)

    def select_chapters(self, chapters: List[ChapterRef], start: int = 1, end: Optional[int] = None) -> List[ChapterRef]:
        """Returns the chapters numbered start..end (1-based, inclusive)."""
        start = max(start, 1)
        end = len(chapters) if end is None else min(end, len(chapters))
        if end < start:
            return []
        return chapters[start - 1:end]

    def download_chapters(self, chapters: List[ChapterRef]) -> List[Tuple[ChapterRef, ChapterContent]]:
        downloaded = []
        for ref in chapters:
            content = self.source.get_chapter_content(ref.chapter_id)
            if not content.ok:
                self.logger.error(f"Skipping chapter {ref.index + 1} ({ref.chapter_id}): no usable content.")
                continue
            downloaded.append((ref, content))
            self.logger.info(f"PROGRESS:{len(downloaded)}/{len(chapters)}: {ref.title}")
        return downloaded

    def process_novel(self, novel_id: str, start: int = 1, end: Optional[int] = None) -> Optional[str]:
        """Main method to process a novel from its id to an EPUB. Returns the EPUB path or None."""
        novel = self.source.get_details(novel_id)
        if novel is None:
            self.logger.error(f"Could not retrieve details for novel {novel_id}")
            return None

        chapters = self.select_chapters(self.source.list_chapters(novel.novel_id), start, end)
        if not chapters:
            self.logger.warning(f"No chapters in the requested range {start}-{end} for '{novel.title}'.")
            return None

        self.logger.info(f"Downloading {len(chapters)} chapters of '{novel.title}'.")
        downloaded = self.download_chapters(chapters)
        if not downloaded:
            self.logger.warning("Failed to download any chapters for the requested range. Aborting.")
            return None

        cover_image = self.source.fetcher.get_bytes(novel.cover_url) if novel.cover_url else None
        try:
            return self.epub_generator.create_epub(novel, downloaded, self.output_dir, cover_image)
        except EpubGenerationError as e:
            self.logger.error(f"Could not create EPUB: {e}")
            return None
