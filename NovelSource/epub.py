import html
import logging
import os
import re
from typing import List, Optional, Tuple

from ebooklib import epub

from .exceptions import EpubGenerationError
from .models import ChapterContent, ChapterRef, NovelDetail

CHAPTER_STYLE = """
<style>
    .chapter-header { text-align: center; margin-bottom: 30px; border-bottom: 1px solid #eee; padding-bottom: 15px; }
    .chapter-number { display: block; font-size: 1.2em; color: #888; font-weight: bold; text-transform: uppercase; }
    .chapter-title { display: block; font-size: 2em; font-weight: bold; margin-top: 5px; }
</style>
"""

TITLE_STYLE = """
<style>
    body { font-family: sans-serif; text-align: center; padding: 5%; }
    h1 { font-size: 2.5rem; margin: 0.5rem 0; word-wrap: break-word; }
    h2 { font-size: 1.5rem; font-style: italic; font-weight: normal; margin: 0.5rem 0; }
    img { max-width: 80%; height: auto; margin: 1rem 0; }
    p.description { text-align: left; }
</style>
"""

_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|]+')


def safe_filename(title: str) -> str:
    name = _UNSAFE_FILENAME_RE.sub('_', title).strip(' .')
    return name or 'novel'


class EpubGenerator:
    """Generates an EPUB file from a novel's details and its downloaded chapters."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def create_epub(self, novel: NovelDetail, chapters: List[Tuple[ChapterRef, ChapterContent]],
                    output_dir: str, cover_image: Optional[bytes] = None) -> str:
        """
        Creates an EPUB file for the given novel and returns its path.
        Raises EpubGenerationError when there is nothing to write or writing fails.
        """
        if not chapters:
            raise EpubGenerationError(f"No chapters to package for '{novel.title}'.")

        book = epub.EpubBook()
        book.set_identifier(f'urn:freewebnovel:{novel.novel_id}')
        book.set_title(novel.title)
        book.set_language('en')
        book.add_author(novel.author or 'Unknown')
        for genre in novel.genres:
            book.add_metadata('DC', 'subject', genre)
        if novel.description:
            book.add_metadata('DC', 'description', novel.description)

        cover_file_name = ''
        if cover_image:
            cover_file_name = 'cover.jpg'
            book.set_cover(cover_file_name, cover_image)

        title_page = self._create_title_page(novel, cover_file_name)
        book.add_item(title_page)

        epub_chapters = []
        for ref, content in sorted(chapters, key=lambda item: item[0].index):
            number = ref.index + 1
            epub_chapter = epub.EpubHtml(
                title=f"Chapter {number}: {ref.title}",
                file_name=f'chapter_{number}.xhtml',
                lang='en'
            )
            header_html = (
                '<div class="chapter-header">'
                f'<span class="chapter-number">Chapter {number}</span>'
                f'<h1 class="chapter-title">{html.escape(ref.title)}</h1>'
                '</div>'
            )
            epub_chapter.content = f'{CHAPTER_STYLE}{header_html}{content.html}'
            book.add_item(epub_chapter)
            epub_chapters.append(epub_chapter)

        book.toc = epub_chapters
        book.spine = (['cover'] if cover_file_name else []) + [title_page] + epub_chapters
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())

        os.makedirs(output_dir, exist_ok=True)
        output_path = os.path.join(output_dir, f"{safe_filename(novel.title)}.epub")
        try:
            epub.write_epub(output_path, book, {})
        except Exception as e:
            raise EpubGenerationError(f"Error writing EPUB file {output_path}: {e}") from e

        self.logger.info(f"Successfully created EPUB: {output_path}")
        return output_path

    def _create_title_page(self, novel: NovelDetail, cover_file_name: str) -> epub.EpubHtml:
        title_page = epub.EpubHtml(
            title='Title Page',
            file_name='title.xhtml',
            lang='en'
        )
        image_tag = f'<img src="{cover_file_name}" alt="Cover Image"/>' if cover_file_name else ''
        description = ''.join(
            f'<p class="description">{html.escape(p)}</p>' for p in novel.description.split('\n\n') if p.strip()
        )
        title_page.content = f"""
        <html>
        <head>
            <title>{html.escape(novel.title)}</title>
            {TITLE_STYLE}
        </head>
        <body>
            <h1>{html.escape(novel.title)}</h1>
            {image_tag}
            <h2>by {html.escape(novel.author or 'Unknown')}</h2>
            {description}
        </body>
        </html>
        """
        return title_page
