import importlib
import os
import sys
import unittest
from unittest import mock

from pydantic import ValidationError

from config import ProviderConfig, load_config
from exceptions import ConfigurationError


class LoadConfigTests(unittest.TestCase):
    def test_missing_api_key_raises(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                load_config()

        self.assertEqual(ctx.exception.variable, "OPENAI_API_KEY")
        self.assertIn("OPENAI_API_KEY is not set", str(ctx.exception))

    def test_blank_api_key_raises(self):
        with mock.patch.dict(os.environ, {"OPENAI_API_KEY": "   "}, clear=True):
            with self.assertRaises(ConfigurationError):
                load_config()

    def test_defaults(self):
        with mock.patch.dict(os.environ, {"OPENAI_API_KEY": "sk-abc"}, clear=True):
            config = load_config()

        self.assertEqual(config.provider.api_key, "sk-abc")
        self.assertEqual(config.provider.base_url, "https://api.openai.com/v1")
        self.assertEqual(config.provider.model, "whisper-1")
        self.assertEqual(config.options.language, "en")
        self.assertEqual(config.options.response_format, "text")
        self.assertEqual(config.options.temperature, 0.0)
        self.assertEqual(config.upload.default_suffix, ".wav")
        self.assertIsNone(config.upload.temp_dir)

    def test_environment_overrides(self):
        env = {
            "OPENAI_API_KEY": "sk-abc",
            "OPENAI_BASE_URL": "http://proxy.local/v1",
            "TRANSCRIPTION_MODEL": "whisper-large",
            "TRANSCRIBE_TEMP_DIR": "/var/tmp",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config()

        self.assertEqual(config.provider.base_url, "http://proxy.local/v1")
        self.assertEqual(config.provider.model, "whisper-large")
        self.assertEqual(config.upload.temp_dir, "/var/tmp")

    def test_provider_config_rejects_empty_key(self):
        with self.assertRaises(ValidationError):
            ProviderConfig(api_key="")


class StartupTests(unittest.TestCase):
    def tearDown(self):
        sys.modules.pop("main", None)

    def test_entry_point_fails_without_api_key(self):
        sys.modules.pop("main", None)
        with mock.patch.dict(os.environ, {}, clear=True), mock.patch("ddtrace.patch_all"):
            with self.assertRaises(ConfigurationError):
                importlib.import_module("main")

        self.assertNotIn("main", sys.modules)


if __name__ == "__main__":
    unittest.main()
