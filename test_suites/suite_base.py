import os
import json
import logging
import unittest
from selenium import webdriver
from utilities.config_loader import ConfigLoader
from utilities.data_helper import DataHelper
from utilities.reporter_helper import ROOT_DIR, failed_screenshot_dir, report_dir, capture_screenshot
from libraries.lib_common import LibCommon

WAIT_TIME = 8000
SHORT_WAIT_TIME = 3000
CONFIG_PATH = os.path.join(ROOT_DIR, "TestPlans", "testConfig.json")

os.makedirs(report_dir, exist_ok=True)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def load_test_cases(spec_file: str, test_name: str, config_path: str = CONFIG_PATH):
    """
    Return the executable test cases of testConfig.json for one suite and test name
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found at path: {config_path}")
    with open(config_path, "r") as f:
        config = json.load(f)
    return [
        test_case for test_case in config.get("testCases", [])
        if test_case.get("specFile") == spec_file
        and test_case.get("testName") == test_name
        and test_case.get("execute")
    ]


def generated_test_names(test_case: dict):
    """Yield "<testCaseID> - <testCaseName>" once per iteration, with {iteration} filled in."""
    for iteration in range(1, int(test_case.get("iterationCount", 1)) + 1):
        name = test_case["testCaseName"].replace("{iteration}", str(iteration))
        yield f"{test_case['testCaseID']} - {name}"


def load_rows(data_tables: list):
    return [DataHelper.load_data(table["name"])[table["pickIndex"]] for table in data_tables]


def create_driver(browser_settings: dict):
    chrome_options = webdriver.ChromeOptions()
    chrome_options.add_argument("--disable-popup-blocking")
    chrome_options.add_argument("--enable-javascript")
    if browser_settings.get("incognito"):
        chrome_options.add_argument("--incognito")
    if browser_settings.get("headless"):
        chrome_options.add_argument("--headless=new")
    chrome_options.add_argument(f"--window-size={browser_settings.get('windowSize', '1280,720')}")
    chrome_options.add_experimental_option("detach", True)
    chrome_options.add_experimental_option("excludeSwitches", ["disable-popup-blocking"])
    driver = webdriver.Chrome(options=chrome_options)
    driver.set_page_load_timeout(browser_settings.get("testTimeout", 540000) / 1000)
    driver.delete_all_cookies()
    return driver


class BrowserSuite(unittest.TestCase):
    """
    Base class of the browser suites. Test methods are generated from
    testConfig.json by add_test_cases; every test gets its own browser.
    """
    spec_file = None

    @classmethod
    def setUpClass(cls):
        cls.config = ConfigLoader.load_global_config()
        cls.username = cls.config["username"]
        cls.password = cls.config["password"]

    def setUp(self):
        self.driver = create_driver(self.config["browser"])

    def login(self, dt: dict):
        """
        Open the application and pass country login, Microsoft login and the welcome page.
        """
        LibCommon.bc_open_url(self.driver, dt['url'], dt['urlExpected'])
        LibCommon.bc_login(self.driver, dt['country'], WAIT_TIME)
        LibCommon.bc_microsoft_login(self.driver, self.username, self.password, WAIT_TIME)
        LibCommon.bc_proceed_welcome(
            self.driver, dt['welcomeMessage'], dt['urlWelcomeMY'], dt['country'], dt['hospital'],
            dt['department'], WAIT_TIME)

    def tearDown(self):
        self.driver.quit()

    def capture_failure(self, method_name: str):
        try:
            capture_screenshot(self.driver, method_name, failed_screenshot_dir)
        except Exception as e:
            logging.error(f"Error taking screenshot: {str(e)}")

    @classmethod
    def add_test_cases(cls, test_name: str, journey):
        """
        Attach one test method per test case iteration. journey(self, rows, data_tables)
        runs the user journey with the data table rows picked by the test case,
        read from disk when the test starts.
        """
        for test_case in load_test_cases(cls.spec_file, test_name):
            data_tables = test_case["dataTables"]
            for method_name in generated_test_names(test_case):
                setattr(cls, f"test_{method_name}", cls._make_test(method_name, journey, data_tables))

    @staticmethod
    def _make_test(method_name: str, journey, data_tables: list):
        def test(self):
            try:
                journey(self, load_rows(data_tables), data_tables)
            except Exception as e:
                logging.error(f"Test failed for: {method_name} with error: {str(e)}")
                self.capture_failure(method_name)
                raise
        test.__doc__ = method_name
        return test
