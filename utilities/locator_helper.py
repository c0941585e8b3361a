import json
import os
import re
import logging
from selenium.webdriver.common.by import By

LOCATOR_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "pages", "browser")
LOCATOR_SUFFIX = "_Locators"
LOCATOR_KEY_PATTERN = re.compile(r"^(PG_\w+)\.(\w+)$")


class LocatorHelper:
    """
    Registry of page locators. Each pages/browser/PG_<Page>.json file holds a flat
    mapping of symbolic names to CSS or XPath selectors and is registered
    under the key "PG_<Page>_Locators".
    """
    locators = None

    @staticmethod
    def load_locators(directory: str = LOCATOR_DIR):
        combined = {}
        for file_name in sorted(os.listdir(directory)):
            if not file_name.endswith(".json"):
                continue
            file_path = os.path.join(directory, file_name)
            page_name = os.path.splitext(file_name)[0]
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    combined[f"{page_name}{LOCATOR_SUFFIX}"] = json.load(f)
            except (OSError, ValueError) as e:
                logging.error(f"Error loading locator file {file_path}: {e}")
                raise
        return combined

    @classmethod
    def get_locators(cls):
        if cls.locators is None:
            cls.locators = cls.load_locators()
        return cls.locators

    @classmethod
    def resolve_locator(cls, locator_key: str, locators: dict = None) -> str:
        """
        Resolve "PG_Page.name" (or "PG_Page_Locators.name") to its selector.
        Anything that is not a page key (no dot, or a raw CSS/XPath selector)
        is returned unchanged.
        """
        match = LOCATOR_KEY_PATTERN.match(locator_key)
        if not match:
            return locator_key

        locators = locators if locators is not None else cls.get_locators()
        page_name, element_name = match.groups()
        if not page_name.endswith(LOCATOR_SUFFIX):
            page_name = f"{page_name}{LOCATOR_SUFFIX}"

        page_locators = locators.get(page_name)
        if not page_locators or element_name not in page_locators:
            raise KeyError(f"Locator for {locator_key} not found.")
        return page_locators[element_name]

    @staticmethod
    def get_locator_with_dynamic_value(locator: str, placeholder: str, value) -> str:
        """Replace the first {placeholder} in a locator template."""
        return locator.replace(f"{{{placeholder}}}", str(value), 1)

    @staticmethod
    def to_by(selector: str):
        if selector.startswith("/") or selector.startswith("("):
            return (By.XPATH, selector)
        return (By.CSS_SELECTOR, selector)
