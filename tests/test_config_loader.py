import os
import json
import shutil
import tempfile
import unittest
from unittest.mock import patch
from utilities.config_loader import ConfigLoader

CONFIG = {
    "defaultEnvironment": "sit",
    "environments": {
        "sit": {"baseUrl": "https://sit.example.com", "username": "sit.user", "password": "sit-pass"},
        "uat": {"baseUrl": "https://uat.example.com", "username": "uat.user", "password": "uat-pass"},
    },
    "locatorCheck": {"retries": 5},
    "browser": {"headless": True},
}


class TestConfigLoader(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.directory)
        self.config_path = os.path.join(self.directory, "config.json")
        with open(self.config_path, "w") as f:
            json.dump(CONFIG, f)

    def test_global_config_uses_default_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertLogs(level="INFO") as logs:
                config = ConfigLoader.load_global_config(self.config_path)
        self.assertEqual(config["username"], "sit.user")
        self.assertEqual(config["base_url"], "https://sit.example.com")
        self.assertIn("Using environment: sit", logs.output[0])

    def test_global_config_environment_override(self):
        with patch.dict(os.environ, {"TEST_ENV": "uat"}):
            config = ConfigLoader.load_global_config(self.config_path)
        self.assertEqual(config["password"], "uat-pass")

    def test_global_config_merges_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ConfigLoader.load_global_config(self.config_path)
        self.assertEqual(config["locator_check"], {"defaultTimeout": 3000, "retries": 5})
        self.assertTrue(config["browser"]["headless"])
        self.assertEqual(config["browser"]["windowSize"], "1280,720")
        self.assertEqual(config["browser"]["testTimeout"], 540000)

    def test_global_config_errors(self):
        missing = os.path.join(self.directory, "missing.json")
        with self.assertRaises(RuntimeError) as context:
            ConfigLoader.load_global_config(missing)
        self.assertIn("Global configuration file not found at path:", str(context.exception))

        with patch.dict(os.environ, {"TEST_ENV": "prod"}):
            with self.assertRaises(RuntimeError) as context:
                ConfigLoader.load_global_config(self.config_path)
        self.assertEqual(str(context.exception), "Environment 'prod' not found in global configuration.")

    def test_instance_accessors(self):
        loader = ConfigLoader(self.config_path)
        self.assertEqual(loader.get_url(), "https://sit.example.com")
        self.assertEqual(loader.get_username("uat"), "uat.user")
        self.assertEqual(loader.get_password("uat"), "uat-pass")
        self.assertEqual(loader.get_locator_check()["retries"], 5)
        self.assertTrue(loader.get_browser_settings()["incognito"])
        with self.assertRaises(ValueError):
            loader.get_credentials("prod")

    def test_shipped_config_is_valid(self):
        loader = ConfigLoader()
        self.assertIn(loader.config_data["defaultEnvironment"], loader.config_data["environments"])


if __name__ == "__main__":
    unittest.main()
