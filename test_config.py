import dataclasses
import os
import unittest
from unittest.mock import patch

from NovelSource.config import SourceConfig, load_config


@patch('NovelSource.config.load_dotenv')
class TestLoadConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self, mock_load_dotenv):
        config = load_config()
        mock_load_dotenv.assert_called_once()
        self.assertEqual(config, SourceConfig())
        self.assertEqual(config.search_param, 'q')
        self.assertEqual(config.popular_sort, 'most-popular')

    @patch.dict(os.environ, {
        'NOVELSOURCE_BASE_URL': 'https://mirror.example.com',
        'NOVELSOURCE_SEARCH_PARAM': 'searchkey',
        'NOVELSOURCE_MAX_RESULTS': '20',
        'NOVELSOURCE_TIMEOUT': '2.5',
    }, clear=True)
    def test_environment_overrides(self, mock_load_dotenv):
        config = load_config()
        self.assertEqual(config.base_url, 'https://mirror.example.com')
        self.assertEqual(config.search_param, 'searchkey')
        self.assertEqual(config.max_results, 20)
        self.assertEqual(config.timeout, 2.5)

    @patch.dict(os.environ, {'NOVELSOURCE_MAX_RESULTS': '20'}, clear=True)
    def test_keyword_overrides_win(self, mock_load_dotenv):
        self.assertEqual(load_config(max_results=5).max_results, 5)

    @patch.dict(os.environ, {'NOVELSOURCE_MIN_CONTENT_LENGTH': 'lots'}, clear=True)
    def test_invalid_number(self, mock_load_dotenv):
        with self.assertRaises(ValueError) as ctx:
            load_config()
        self.assertIn('NOVELSOURCE_MIN_CONTENT_LENGTH', str(ctx.exception))


class TestSourceConfig(unittest.TestCase):
    def test_frozen(self):
        config = SourceConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.base_url = 'https://example.com'

    def test_absolute_url(self):
        config = SourceConfig(base_url='https://freewebnovel.com/')
        self.assertEqual(config.absolute_url('/novel/x'), 'https://freewebnovel.com/novel/x')
        self.assertEqual(config.absolute_url('novel/x'), 'https://freewebnovel.com/novel/x')
        self.assertEqual(config.absolute_url('https://cdn.example.com/a.jpg'), 'https://cdn.example.com/a.jpg')


if __name__ == '__main__':
    unittest.main()
