import html
import re
from typing import Iterable, List

from bs4 import Comment, Tag

NOISE_SELECTORS = [
    "script",
    "style",
    "noscript",
    "iframe",
    "nav",
    "button",
    "form",
    "ins",
    ".ads",
    ".ad",
    ".adsbygoogle",
    ".chapter-nav",
    ".nav-buttons",
    ".ul-list7",
    ".share-buttons",
    "a.btn",
    "a[class*='btn']",
]

CHAPTER_PREFIX_RE = re.compile(r'^\s*Chapter\s+\d+(?:\.\d+)?\s*[-–—:.]\s*', re.IGNORECASE)
_WHITESPACE_RE = re.compile(r'\s+')


def strip_chapter_prefix(title: str) -> str:
    """Drops one leading 'Chapter 12 - ' style prefix. Titles that would become empty are kept as is."""
    title = clean_text(title)
    stripped = CHAPTER_PREFIX_RE.sub('', title, count=1).strip()
    return stripped or title


def clean_text(text: str) -> str:
    """Decodes leftover entities and collapses every whitespace run (nbsp included) to one space."""
    if not text:
        return ''
    text = html.unescape(text).replace('\xa0', ' ')
    return _WHITESPACE_RE.sub(' ', text).strip()


def is_noise(text: str, noise_phrases: Iterable[str]) -> bool:
    text_lower = text.lower()
    return any(phrase.lower() in text_lower for phrase in noise_phrases)


def remove_noise(content_el: Tag) -> Tag:
    """Strips scripts, styles, comments and navigation widgets from a content node in place."""
    for sel in NOISE_SELECTORS:
        for tag in content_el.select(sel):
            tag.decompose()

    for comment in content_el.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    return content_el


def extract_paragraphs(content_el: Tag, noise_phrases: Iterable[str], min_line_length: int = 20) -> List[str]:
    """
    Returns the cleaned paragraph texts of a content node.
    Uses the node's <p> tags when it has any; otherwise falls back to its text lines,
    keeping only lines longer than min_line_length.
    """
    noise_phrases = tuple(noise_phrases)
    paragraphs = []

    for p_tag in content_el.find_all('p'):
        text = clean_text(p_tag.get_text(' ', strip=True))
        if text and not is_noise(text, noise_phrases):
            paragraphs.append(text)

    if paragraphs:
        return paragraphs

    for line in content_el.get_text('\n').split('\n'):
        text = clean_text(line)
        if len(text) > min_line_length and not is_noise(text, noise_phrases):
            paragraphs.append(text)
    return paragraphs


def paragraphs_to_html(paragraphs: Iterable[str]) -> str:
    return "\n".join(f"<p>{html.escape(p, quote=False)}</p>" for p in paragraphs)
