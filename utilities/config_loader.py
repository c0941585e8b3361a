import json
import os
import logging

DEFAULT_LOCATOR_CHECK = {"defaultTimeout": 3000, "retries": 3}
DEFAULT_BROWSER = {"headless": False, "incognito": True, "windowSize": "1280,720", "testTimeout": 540000}


class ConfigLoader:
    """
    A class to load the global configuration (config.json) of the suite
    """
    @staticmethod
    def default_config_path():
        root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return os.path.join(root_dir, "config.json")

    @staticmethod
    def load_global_config(config_path: str = None):
        """
        Resolve the active environment (TEST_ENV or defaultEnvironment) and return
        its credentials together with the locator check and browser settings
        """
        config_path = config_path or ConfigLoader.default_config_path()
        if not os.path.exists(config_path):
            raise RuntimeError(f"Global configuration file not found at path: {config_path}")

        with open(config_path, "r") as f:
            config = json.load(f)

        environment = os.environ.get("TEST_ENV") or config.get("defaultEnvironment")
        environments = config.get("environments", {})
        if environment not in environments:
            raise RuntimeError(f"Environment '{environment}' not found in global configuration.")

        logging.info(f"Using environment: {environment}")
        env_config = environments[environment]
        return {
            "username": env_config.get("username"),
            "password": env_config.get("password"),
            "base_url": env_config.get("baseUrl"),
            "locator_check": {**DEFAULT_LOCATOR_CHECK, **config.get("locatorCheck", {})},
            "browser": {**DEFAULT_BROWSER, **config.get("browser", {})},
        }

    def __init__(self, config_file=None):
        """
        Initialize the ConfigLoader with a config file path
        If no path is provided, it will use config.json at the project root
        """
        if config_file is None:
            config_file = ConfigLoader.default_config_path()

        self.config_file = config_file
        self.config_data = self._load_config()

    def _load_config(self):
        try:
            with open(self.config_file, 'r') as file:
                return json.load(file)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Error reading config.json at {self.config_file}: {str(e)}")

    def get_credentials(self, environment=None):
        """
        Get credentials for the specified environment
        """
        environment = environment or self.config_data.get("defaultEnvironment")
        environments = self.config_data.get("environments", {})
        if environment in environments:
            return environments[environment]
        else:
            raise ValueError(f"Environment '{environment}' not found in configuration")

    def get_url(self, environment=None):
        return self.get_credentials(environment)['baseUrl']

    def get_username(self, environment=None):
        return self.get_credentials(environment)['username']

    def get_password(self, environment=None):
        return self.get_credentials(environment)['password']

    def get_locator_check(self):
        """
        Default timeout (ms) and retry count used by locator presence checks
        """
        return {**DEFAULT_LOCATOR_CHECK, **self.config_data.get("locatorCheck", {})}

    def get_browser_settings(self):
        return {**DEFAULT_BROWSER, **self.config_data.get("browser", {})}
