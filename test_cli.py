import io
import json
import unittest
from unittest.mock import patch

from NovelSource.__main__ import main
from NovelSource.models import ChapterContent, ChapterRef, ListFilters, NovelSummary


@patch('NovelSource.__main__.load_config')
@patch('NovelSource.__main__.FreeWebNovelSource')
class TestCli(unittest.TestCase):
    def run_cli(self, argv):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout, \
                patch('sys.stderr', new_callable=io.StringIO):
            code = main(argv)
        return code, stdout.getvalue()

    def test_popular_prints_json(self, mock_source_cls, mock_load_config):
        source = mock_source_cls.return_value
        source.list_popular.return_value = [NovelSummary(novel_id='shadow-slave', title='Shadow Slave')]

        code, output = self.run_cli(['popular', '--page', '2', '--genre', 'Fantasy'])

        self.assertEqual(code, 0)
        source.list_popular.assert_called_once_with(2, ListFilters(sort=None, genre='Fantasy'))
        self.assertEqual(json.loads(output)[0]['novel_id'], 'shadow-slave')

    def test_empty_result_exit_code(self, mock_source_cls, mock_load_config):
        mock_source_cls.return_value.search.return_value = []
        code, output = self.run_cli(['search', 'nothing'])
        self.assertEqual(code, 1)
        self.assertEqual(output, '')

    def test_chapters(self, mock_source_cls, mock_load_config):
        mock_source_cls.return_value.list_chapters.return_value = [
            ChapterRef(chapter_id='shadow-slave/chapter-1', title='Nightmare Begins', index=0)
        ]
        code, output = self.run_cli(['chapters', 'shadow-slave'])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output), [
            {'chapter_id': 'shadow-slave/chapter-1', 'title': 'Nightmare Begins', 'index': 0}
        ])

    def test_chapter_placeholder_exit_code(self, mock_source_cls, mock_load_config):
        mock_source_cls.return_value.get_chapter_content.return_value = ChapterContent(html='<p>Error</p>')
        code, output = self.run_cli(['chapter', 'bad-id'])
        self.assertEqual(code, 1)
        self.assertEqual(output.strip(), '<p>Error</p>')

    @patch('NovelSource.__main__.NovelManager')
    def test_export(self, mock_manager_cls, mock_source_cls, mock_load_config):
        mock_manager_cls.return_value.process_novel.return_value = 'out/Shadow Slave.epub'
        code, output = self.run_cli(['export', 'shadow-slave', '-s', '3', '-e', '5', '-o', 'out'])
        self.assertEqual(code, 0)
        mock_manager_cls.assert_called_once_with(mock_source_cls.return_value, output_dir='out')
        mock_manager_cls.return_value.process_novel.assert_called_once_with('shadow-slave', 3, 5)
        self.assertIn('EPUB_PATH:out/Shadow Slave.epub', output)


if __name__ == '__main__':
    unittest.main()
