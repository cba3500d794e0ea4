"""
Tests for the config module.
"""
import unittest
import sys
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

# Add the parent directory to the path so we can import the application modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config, load_env_file


class TestConfig(unittest.TestCase):
    """Test cases for the Config class."""

    def test_defaults(self):
        """Defaults apply when nothing is loaded from the environment."""
        cfg = Config(load_from_env=False)
        self.assertEqual(cfg.API_KEY, "")
        self.assertEqual(cfg.SERVER_NAME, "youtube-mcp-server")
        self.assertEqual(cfg.DEFAULT_SEARCH_RESULTS, 5)
        self.assertEqual(cfg.MAX_SEARCH_RESULTS, 25)
        self.assertEqual(cfg.DEFAULT_COMMENT_RESULTS, 20)
        self.assertEqual(cfg.MAX_COMMENT_RESULTS, 100)
        self.assertEqual(cfg.COMMENT_ORDER, "relevance")
        self.assertEqual(cfg.COMMENT_TEXT_FORMAT, "plainText")
        self.assertEqual(cfg.DEFAULT_TRANSCRIPT_LANGUAGE, "en")
        self.assertEqual(cfg.ALLOWED_ORIGINS, ["*"])

    def test_instances_do_not_share_lists(self):
        first = Config(load_from_env=False)
        first.ALLOWED_ORIGINS.append("http://localhost")
        self.assertEqual(Config(load_from_env=False).ALLOWED_ORIGINS, ["*"])

    @patch.dict(os.environ, {"YOUTUBE_API_KEY": "AIzaTestKey"})
    def test_api_key_from_env(self):
        self.assertEqual(Config().API_KEY, "AIzaTestKey")

    @patch.dict(os.environ, {
        "ALLOWED_ORIGINS": "http://a.example, http://b.example,",
        "COMMENT_ORDER": "time",
        "MAX_SEARCH_RESULTS": "10",
    })
    def test_overrides_from_env(self):
        cfg = Config()
        self.assertEqual(cfg.ALLOWED_ORIGINS, ["http://a.example", "http://b.example"])
        self.assertEqual(cfg.COMMENT_ORDER, "time")
        self.assertEqual(cfg.MAX_SEARCH_RESULTS, 10)

    @patch.dict(os.environ, {"DEFAULT_COMMENT_RESULTS": "lots", "SERVER_NAME": "   "})
    def test_invalid_values_are_ignored(self):
        cfg = Config()
        self.assertEqual(cfg.DEFAULT_COMMENT_RESULTS, 20)
        self.assertEqual(cfg.SERVER_NAME, "youtube-mcp-server")

    @patch.dict(os.environ, {}, clear=False)
    def test_env_file_values_reach_new_config(self):
        """A .env file loaded before the singleton is built overrides defaults."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            env_path = Path(tmp_dir) / ".env"
            env_path.write_text("MAX_SEARCH_RESULTS=10\nSERVER_NAME=yt-tools\n", encoding="utf-8")

            self.assertTrue(load_env_file(env_path))

        cfg = Config()
        self.assertEqual(cfg.MAX_SEARCH_RESULTS, 10)
        self.assertEqual(cfg.SERVER_NAME, "yt-tools")

    def test_missing_env_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            self.assertFalse(load_env_file(Path(tmp_dir) / ".env"))


if __name__ == '__main__':
    unittest.main()
