import unittest

from bs4 import BeautifulSoup

from NovelSource.cleaner import (clean_text, extract_paragraphs, paragraphs_to_html, remove_noise,
                                 strip_chapter_prefix)


class TestStripChapterPrefix(unittest.TestCase):
    def test_separators(self):
        cases = {
            'Chapter 1 - Asura': 'Asura',
            'Chapter 12: The Sect': 'The Sect',
            'chapter 3 – Dawn': 'Dawn',
            'Chapter 4 — Dusk': 'Dusk',
            'Chapter 5. Night': 'Night',
            'Chapter 10.5 - Side Story': 'Side Story',
        }
        for title, expected in cases.items():
            with self.subTest(title=title):
                self.assertEqual(strip_chapter_prefix(title), expected)

    def test_stripped_once(self):
        self.assertEqual(strip_chapter_prefix('Chapter 7 - Chapter 7 - Repeat'), 'Chapter 7 - Repeat')

    def test_without_separator_kept(self):
        self.assertEqual(strip_chapter_prefix('Chapter 9'), 'Chapter 9')
        self.assertEqual(strip_chapter_prefix('Prologue'), 'Prologue')

    def test_prefix_only_title_kept(self):
        self.assertEqual(strip_chapter_prefix('Chapter 2 -'), 'Chapter 2 -')


class TestCleanText(unittest.TestCase):
    def test_entities_and_whitespace(self):
        self.assertEqual(clean_text('  Tom&nbsp;&amp;\n\tJerry\xa0 '), 'Tom & Jerry')
        self.assertEqual(clean_text(''), '')


class TestNoiseRemoval(unittest.TestCase):
    def test_remove_noise(self):
        soup = BeautifulSoup(
            '<div><script>x()</script><style>p{}</style><!-- ad --><a class="btn btn-next">Next</a>'
            '<p>Body text</p></div>', 'html.parser'
        )
        cleaned = remove_noise(soup.div)
        self.assertEqual(str(cleaned), '<div><p>Body text</p></div>')

    def test_extract_paragraphs_skips_noise(self):
        soup = BeautifulSoup(
            '<div><p>Keep this one.</p><p>Visit FreeWebNovel for more</p><p> </p></div>', 'html.parser'
        )
        self.assertEqual(extract_paragraphs(soup.div, ('freewebnovel',)), ['Keep this one.'])

    def test_paragraphs_to_html_escapes(self):
        self.assertEqual(paragraphs_to_html(['a < b', 'c & d']), '<p>a &lt; b</p>\n<p>c &amp; d</p>')


if __name__ == '__main__':
    unittest.main()
