import os
import time
import random
import logging
from datetime import datetime
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support.ui import Select, WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException, NoSuchElementException
from utilities.config_loader import ConfigLoader
from utilities.data_helper import DataHelper
from utilities.locator_helper import LocatorHelper
from utilities.reporter_helper import capture_screenshot, failed_screenshot_dir

LOCATOR_CHECK = ConfigLoader().get_locator_check()
MAT_OPTION_TEXT = "mat-option span.mdc-list-item__primary-text"
SIGNATURE_POINTS = [
    (20, 30), (25, 32), (30, 34), (40, 35), (50, 40), (60, 45), (65, 42), (70, 38),
    (80, 30), (85, 28), (90, 32), (95, 36), (100, 40), (105, 44), (110, 38),
]


class BaseCommandCaller:
    """
    Wrapper around the WebDriver calls used by the page libraries.

    Every action resolves a locator key ("PG_Page.name") through the locator
    registry, brings the element into view, waits for it to be visible and then
    acts. Failures are logged, captured as a screenshot and re-raised. Timeouts
    are given in milliseconds.
    """

    # Internals

    @staticmethod
    def _by(locator_key: str):
        return LocatorHelper.to_by(LocatorHelper.resolve_locator(locator_key))

    @staticmethod
    def _wait(driver, timeout_ms: int):
        return WebDriverWait(driver, timeout_ms / 1000)

    @staticmethod
    def _screenshot(driver, name: str):
        try:
            capture_screenshot(driver, name)
        except Exception as e:
            logging.error(f"Failed to take screenshot {name}: {str(e)}")

    @staticmethod
    def _scroll_into_view(driver, element):
        driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)

    @staticmethod
    def _visible_element(driver, locator_key: str, timeout_ms: int = 5000):
        by = BaseCommandCaller._by(locator_key)
        element = BaseCommandCaller._wait(driver, timeout_ms).until(EC.visibility_of_element_located(by))
        BaseCommandCaller._scroll_into_view(driver, element)
        return element

    @staticmethod
    def _read_value(element):
        tag_name = (element.tag_name or "").lower()
        if tag_name in ("input", "textarea"):
            value = element.get_attribute("value")
        elif tag_name == "select":
            try:
                value = Select(element).first_selected_option.text
            except NoSuchElementException:
                value = None
        else:
            value = element.text
        value = value.strip() if value else ""
        return value or None

    @staticmethod
    def _perform(driver, action: str, locator_key: str, capture: bool, step):
        try:
            result = step()
            if capture:
                BaseCommandCaller._screenshot(driver, f"{action}_{locator_key}_success")
            return result
        except Exception as e:
            logging.error(f"Test failed with error: {str(e)}")
            BaseCommandCaller._screenshot(driver, f"{action}_{locator_key}_failure")
            raise

    # Actions

    @staticmethod
    def fill(driver, locator_key: str, value, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            element.clear()
            element.send_keys(str(value))
            logging.info(f"Filled {locator_key} with value: {value}")
        BaseCommandCaller._perform(driver, "fill", locator_key, capture, step)

    @staticmethod
    def click(driver, locator_key: str, capture: bool = False, wait: int = 5000):
        def step():
            by = BaseCommandCaller._by(locator_key)
            if not driver.find_elements(*by):
                raise NoSuchElementException(f'Element with locator "{locator_key}" not found on the page.')
            element = BaseCommandCaller._wait(driver, wait).until(EC.element_to_be_clickable(by))
            BaseCommandCaller._scroll_into_view(driver, element)
            element.click()
            logging.info(f"Clicked on {locator_key}")
        BaseCommandCaller._perform(driver, "click", locator_key, capture, step)

    @staticmethod
    def real_click(driver, locator_key: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            driver.execute_script("arguments[0].click();", element)
            logging.info(f"Force clicked on {locator_key}")
        BaseCommandCaller._perform(driver, "realClick", locator_key, capture, step)

    @staticmethod
    def recovery_click(driver, locator_key: str, capture: bool = False):
        """Click only when the element is currently visible; otherwise do nothing."""
        def step():
            elements = driver.find_elements(*BaseCommandCaller._by(locator_key))
            if elements and elements[0].is_displayed():
                elements[0].click()
                logging.info(f"Recovery click performed on {locator_key}")
                return True
            logging.info(f"{locator_key} not visible, recovery click skipped")
            return False
        return BaseCommandCaller._perform(driver, "recoveryClick", locator_key, capture, step)

    @staticmethod
    def clear_text_field(driver, locator_key: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            element.clear()
            logging.info(f"Cleared {locator_key}")
        BaseCommandCaller._perform(driver, "clearTextField", locator_key, capture, step)

    @staticmethod
    def press_key(driver, locator_key: str, key, key_name: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            element.send_keys(key)
            logging.info(f"Pressed {key_name} on {locator_key}")
        BaseCommandCaller._perform(driver, key_name.lower(), locator_key, capture, step)

    @staticmethod
    def enter(driver, locator_key: str, capture: bool = False):
        BaseCommandCaller.press_key(driver, locator_key, Keys.ENTER, "Enter", capture)

    @staticmethod
    def tab(driver, locator_key: str, capture: bool = False):
        BaseCommandCaller.press_key(driver, locator_key, Keys.TAB, "Tab", capture)

    @staticmethod
    def arrow_down(driver, locator_key: str, capture: bool = False):
        BaseCommandCaller.press_key(driver, locator_key, Keys.ARROW_DOWN, "ArrowDown", capture)

    @staticmethod
    def select_option(driver, locator_key: str, value: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            Select(element).select_by_visible_text(value)
            logging.info(f"Selected option {value} in {locator_key}")
        BaseCommandCaller._perform(driver, "selectOption", locator_key, capture, step)

    @staticmethod
    def upload_file(driver, locator_key: str, file_path: str, capture: bool = False):
        def step():
            absolute_path = os.path.abspath(file_path)
            by = BaseCommandCaller._by(locator_key)
            element = BaseCommandCaller._wait(driver, 5000).until(EC.presence_of_element_located(by))
            element.send_keys(absolute_path)
            logging.info(f"Uploaded file {absolute_path} through {locator_key}")
        BaseCommandCaller._perform(driver, "uploadFile", locator_key, capture, step)

    @staticmethod
    def draw_signature(driver, locator_key: str, capture: bool = False):
        """Draw a fixed scribble on a signature canvas."""
        def step():
            canvas = BaseCommandCaller._visible_element(driver, locator_key)
            width, height = canvas.size["width"], canvas.size["height"]
            start_x, start_y = SIGNATURE_POINTS[0]
            actions = ActionChains(driver)
            actions.move_to_element_with_offset(canvas, start_x - width / 2, start_y - height / 2)
            actions.click_and_hold()
            previous = SIGNATURE_POINTS[0]
            for point in SIGNATURE_POINTS[1:]:
                actions.move_by_offset(point[0] - previous[0], point[1] - previous[1])
                previous = point
            actions.release()
            actions.perform()
            logging.info(f"Signature drawn on {locator_key}")
        BaseCommandCaller._perform(driver, "drawSignature", locator_key, capture, step)

    # Angular material options

    @staticmethod
    def get_mat_options(driver, list_locator_key: str, wait: int = 10000):
        try:
            panel = BaseCommandCaller._wait(driver, wait).until(
                EC.visibility_of_element_located(BaseCommandCaller._by(list_locator_key)))
        except TimeoutException:
            logging.warning(f"No mat-option list visible for {list_locator_key}")
            return []
        return panel.find_elements(*LocatorHelper.to_by(MAT_OPTION_TEXT))

    @staticmethod
    def select_mat_option_by_text(driver, list_locator_key: str, value: str, capture: bool = False, wait: int = 10000):
        def step():
            options = BaseCommandCaller.get_mat_options(driver, list_locator_key, wait)
            if not options:
                raise NoSuchElementException(f"No options available in the mat-option list for locator: {list_locator_key}")
            texts = [option.text.strip() for option in options]
            for option, text in zip(options, texts):
                if text == str(value).strip():
                    option.click()
                    logging.info(f"Selected mat-option {value}")
                    return
            raise AssertionError(f'Value "{value}" not found in the mat-option list. Available values: {", ".join(texts)}')
        BaseCommandCaller._perform(driver, "selectMatOptionByText", list_locator_key, capture, step)

    @staticmethod
    def select_mat_option_containing_text(driver, list_locator_key: str, value: str, capture: bool = False, wait: int = 10000):
        def step():
            options = BaseCommandCaller.get_mat_options(driver, list_locator_key, wait)
            if not options:
                raise NoSuchElementException(f"No options available in the mat-option list for locator: {list_locator_key}")
            texts = [option.text.strip() for option in options]
            for option, text in zip(options, texts):
                if str(value).strip() in text:
                    option.click()
                    logging.info(f"Selected mat-option {text} containing {value}")
                    return
            raise AssertionError(f'Value "{value}" not found in the mat-option list. Available values: {", ".join(texts)}')
        BaseCommandCaller._perform(driver, "selectMatOptionContainingText", list_locator_key, capture, step)

    @staticmethod
    def select_first_mat_option(driver, list_locator_key: str, capture: bool = False, wait: int = 10000):
        def step():
            options = BaseCommandCaller.get_mat_options(driver, list_locator_key, wait)
            if not options:
                raise NoSuchElementException(f"No options available in the mat-option list for locator: {list_locator_key}")
            text = options[0].text.strip()
            options[0].click()
            logging.info(f"Selected first mat-option {text}")
            return text
        return BaseCommandCaller._perform(driver, "selectFirstMatOption", list_locator_key, capture, step)

    @staticmethod
    def iterate_and_select_option(driver, list_locator_key: str, first_check_key: str, second_check_key: str,
                                  clear_field_one: str, clear_field_two: str, click_field: str, wait: int = 5000):
        """
        Try each option of an autocomplete list in turn. Stop at the first one that
        shows first_check_key; when second_check_key appears instead, dismiss it,
        reset the fields and move on to the next option.
        """
        option_count = len(BaseCommandCaller.get_mat_options(driver, list_locator_key, wait))
        for position in range(option_count):
            options = BaseCommandCaller.get_mat_options(driver, list_locator_key, wait)
            if position >= len(options):
                break
            logging.info(f"Trying option {position + 1}/{option_count}: {options[position].text.strip()}")
            options[position].click()
            BaseCommandCaller.hard_pause(driver, wait)

            if BaseCommandCaller.is_locator_present(driver, first_check_key, wait, "soft", 1):
                return True
            if BaseCommandCaller.is_locator_present(driver, second_check_key, wait, "soft", 1):
                BaseCommandCaller.click(driver, second_check_key)
                BaseCommandCaller.clear_text_field(driver, clear_field_one)
                BaseCommandCaller.clear_text_field(driver, clear_field_two)
                BaseCommandCaller.click(driver, click_field)
        raise AssertionError("No valid options found in the list.")

    # Iframes

    @staticmethod
    def select_iframe(driver, iframe_key: str, wait: int = 5000):
        BaseCommandCaller._wait(driver, wait).until(
            EC.frame_to_be_available_and_switch_to_it(BaseCommandCaller._by(iframe_key)))
        logging.info(f"Switched to iframe {iframe_key}")

    @staticmethod
    def deselect_iframe(driver):
        driver.switch_to.default_content()
        logging.info("Switched back to the main document")

    @staticmethod
    def click_inside_iframe(driver, iframe_key: str, locator_key: str, capture: bool = False):
        BaseCommandCaller.select_iframe(driver, iframe_key)
        try:
            BaseCommandCaller.click(driver, locator_key, capture)
        finally:
            BaseCommandCaller.deselect_iframe(driver)

    # Reads

    @staticmethod
    def get_text_content(driver, locator_key: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            text = element.text.strip()
            return text or None
        return BaseCommandCaller._perform(driver, "getTextContent", locator_key, capture, step)

    @staticmethod
    def get_input_data(driver, locator_key: str, capture: bool = False):
        """Current value of an input, or None when it is empty or cannot be read."""
        try:
            element = driver.find_element(*BaseCommandCaller._by(locator_key))
            value = BaseCommandCaller._read_value(element)
            if capture:
                BaseCommandCaller._screenshot(driver, f"getInputData_{locator_key}")
            return value
        except Exception as e:
            logging.error(f"Failed to fetch input value for {locator_key}: {str(e)}")
            return None

    @staticmethod
    def get_checkbox_state(driver, locator_key: str) -> bool:
        element = driver.find_element(*BaseCommandCaller._by(locator_key))
        return element.is_selected()

    @staticmethod
    def get_radio_button_state(driver, locator_key: str) -> bool:
        element = driver.find_element(*BaseCommandCaller._by(locator_key))
        return element.is_selected()

    @staticmethod
    def get_all_indices(driver, locator_key: str):
        elements = driver.find_elements(*BaseCommandCaller._by(locator_key))
        if not elements:
            raise NoSuchElementException(f"No elements found for locator: {locator_key}")
        return list(range(len(elements)))

    # Assertions

    @staticmethod
    def handle_assertion_failure(driver, action: str, is_soft: bool):
        if is_soft:
            logging.warning(f"Soft Assertion Failed: {action}")
            BaseCommandCaller._screenshot(driver, f"soft_assertion_{action}")
            return False
        logging.error(f"Hard Assertion Failed: {action}")
        BaseCommandCaller.attach_screenshot_on_failure(driver, action)
        raise AssertionError(f"Hard Assertion Failed: {action}")

    @staticmethod
    def is_locator_present(driver, locator_key: str, timeout: int = 5000, mode: str = "hard",
                           retries: int = LOCATOR_CHECK["retries"]) -> bool:
        """
        Wait for a locator to become visible, retrying up to `retries` times.
        In hard mode a final failure raises; in soft mode it returns False.
        """
        try:
            by = BaseCommandCaller._by(locator_key)
        except KeyError:
            if mode == "soft":
                logging.warning(f"Locator not found for key {locator_key}")
                return False
            message = f"Test Case Failed: Locator not found for key {locator_key}"
            logging.error(message)
            BaseCommandCaller.attach_screenshot_on_failure(driver, f"isLocatorPresent_{locator_key}")
            raise AssertionError(message)

        for attempt in range(1, retries + 1):
            try:
                BaseCommandCaller._wait(driver, timeout).until(EC.visibility_of_element_located(by))
                logging.info(f"Locator {locator_key} is visible")
                return True
            except TimeoutException:
                logging.warning(f"Attempt {attempt}/{retries}: {locator_key} not visible within {timeout}ms")

        if mode == "soft":
            logging.warning(f'Locator "{locator_key}" is not visible after {retries} retries.')
            return False
        message = f'Test Case Failed: Locator "{locator_key}" is not visible after {retries} retries.'
        logging.error(message)
        BaseCommandCaller.attach_screenshot_on_failure(driver, f"isLocatorPresent_{locator_key}")
        raise AssertionError(message)

    @staticmethod
    def is_text_present(driver, text: str, timeout: int = 5000, mode: str = "hard") -> bool:
        xpath = f"//*[text()[contains(normalize-space(.), \"{text}\")]]"
        try:
            BaseCommandCaller._wait(driver, timeout).until(EC.visibility_of_element_located(LocatorHelper.to_by(xpath)))
            logging.info(f'Text "{text}" is visible')
            return True
        except TimeoutException:
            return BaseCommandCaller.handle_assertion_failure(driver, f'Text "{text}" is not visible', mode == "soft")

    @staticmethod
    def assert_button_visibility(driver, locator_key: str, wait: int = 5000, capture: bool = False):
        def step():
            BaseCommandCaller._wait(driver, wait).until(
                EC.visibility_of_element_located(BaseCommandCaller._by(locator_key)))
        BaseCommandCaller._perform(driver, "assertButtonVisibility", locator_key, capture, step)

    @staticmethod
    def assert_text_match(driver, locator_key: str, expected_text: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            actual = (element.text or "").strip()
            expected = str(expected_text).strip()
            if actual != expected:
                raise AssertionError(f'Text mismatch. Expected: "{expected}", Actual: "{actual}"')
        BaseCommandCaller._perform(driver, "assertTextMatch", locator_key, capture, step)

    @staticmethod
    def normalize_value(value) -> str:
        if value is None or value == "":
            return "null"
        return str(value).strip()

    @staticmethod
    def get_input_data_and_assert(driver, locator_key: str, expected_value, capture: bool = False,
                                  retries: int = 3, retry_interval: int = 3000):
        """
        Read an input, textarea, select or text element (up to `retries` times) and
        compare it with the expected value. Empty values compare as "null".
        """
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            fetched = None
            for _ in range(retries):
                fetched = BaseCommandCaller._read_value(element)
                if fetched is not None:
                    break
                time.sleep(retry_interval / 1000)
            if fetched is None:
                logging.error(f"Failed to fetch value for {locator_key} after {retries} attempts.")

            expected = BaseCommandCaller.normalize_value(expected_value)
            actual = BaseCommandCaller.normalize_value(fetched)
            if actual != expected:
                raise AssertionError(f'Assertion failed. Expected: "{expected}", Received: "{actual}".')
            logging.info(f"{locator_key} has expected value {expected}")
        BaseCommandCaller._perform(driver, "getInputDataAndAssert", locator_key, capture, step)

    @staticmethod
    def assert_checkbox_state(driver, locator_key: str, expected_state: bool, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            is_checked = element.is_selected()
            if is_checked != expected_state:
                raise AssertionError(
                    f"Expected checkbox '{locator_key}' to be {'checked' if expected_state else 'unchecked'}, "
                    f"but it was {'checked' if is_checked else 'unchecked'}.")
        BaseCommandCaller._perform(driver, "assertCheckboxState", locator_key, capture, step)

    @staticmethod
    def assert_radio_button_state(driver, locator_key: str, expected_state: bool, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            if element.is_selected() != expected_state:
                state = "selected" if expected_state else "unselected"
                raise AssertionError(f'Expected radio button "{locator_key}" to be {state}.')
        BaseCommandCaller._perform(driver, "assertRadioButtonState", locator_key, capture, step)

    @staticmethod
    def assert_selected_option(driver, locator_key: str, expected_value: str, capture: bool = False):
        def step():
            element = BaseCommandCaller._visible_element(driver, locator_key)
            selected = Select(element).all_selected_options
            if not selected:
                raise AssertionError(f"No option is selected in {locator_key}.")
            actual = selected[0].text.strip()
            if actual != str(expected_value).strip():
                raise AssertionError(
                    f'Selected option mismatch in {locator_key}. Expected: "{expected_value}", Actual: "{actual}"')
        BaseCommandCaller._perform(driver, "assertSelectedOption", locator_key, capture, step)

    # Waits

    @staticmethod
    def wait_until_locator_invisible(driver, locator: str, timeout: int = 5000, capture: bool = False):
        by = BaseCommandCaller._by(locator)
        try:
            BaseCommandCaller._wait(driver, timeout).until(EC.invisibility_of_element_located(by))
        except TimeoutException:
            logging.error(f'Locator "{locator}" is still visible after {timeout}ms.')
            if capture:
                BaseCommandCaller._screenshot(driver, f"waitUntilLocatorInvisible_{locator}")
            raise AssertionError(f'Locator "{locator}" did not become invisible within {timeout}ms.')

    @staticmethod
    def wait_for_all_instances_to_disappear(driver, locator: str, timeout: int = 5000, retries: int = 3):
        by = BaseCommandCaller._by(locator)
        for attempt in range(1, retries + 1):
            try:
                BaseCommandCaller._wait(driver, timeout).until(
                    lambda d: not any(element.is_displayed() for element in d.find_elements(*by)))
                logging.info(f"All instances of {locator} disappeared")
                return
            except TimeoutException:
                logging.warning(f"Attempt {attempt}/{retries}: {locator} still visible")
                time.sleep(1)
        raise AssertionError(f'Not all instances of "{locator}" disappeared after {retries} retries.')

    @staticmethod
    def hard_pause(driver, duration: int, capture: bool = False, description: str = "Hard pause"):
        if duration is None or duration <= 0:
            raise ValueError(f"Invalid duration: {duration}ms. Duration must be greater than 0.")
        logging.info(f"{description}: {duration}ms")
        time.sleep(duration / 1000)
        if capture:
            BaseCommandCaller._screenshot(driver, description)

    # Data table persistence

    @staticmethod
    def update_json_file(file_name: str, key: str, value, index: int, retries: int = 3):
        for attempt in range(1, retries + 1):
            try:
                DataHelper.update_json_file(file_name, key, value, index)
                return
            except (FileNotFoundError, IndexError):
                raise
            except (OSError, ValueError) as e:
                logging.warning(f"Attempt {attempt}/{retries} to update {file_name} failed: {str(e)}")
                if attempt == retries:
                    raise
                time.sleep(1)

    @staticmethod
    def get_input_data_and_store_in_json(driver, locator_key: str, file_name: str, key: str, index: int,
                                         capture: bool = False, retries: int = 3, pause: int = 2000):
        """
        Store the value shown by a locator in the data table. Empty reads are
        retried; after the last attempt None is stored and returned.
        """
        for attempt in range(1, retries + 1):
            try:
                element = BaseCommandCaller._visible_element(driver, locator_key)
                value = BaseCommandCaller._read_value(element)
            except (TimeoutException, NoSuchElementException) as e:
                logging.error(f"Attempt {attempt}/{retries} failed for locator {locator_key}: {str(e)}")
                value = None

            if value:
                DataHelper.update_data(file_name, key, value, index)
                if capture:
                    BaseCommandCaller._screenshot(driver, f"storeInJson_{locator_key}")
                return value

            logging.warning(f"Fetched value is null for locator {locator_key}")
            DataHelper.update_data(file_name, key, None, index)
            if attempt < retries:
                time.sleep(pause / 1000)
        return None

    @staticmethod
    def store_data_from_locator_to_json(driver, locator_key: str, file_name: str, key: str, index: int, retries: int = 3):
        value = BaseCommandCaller.get_input_data(driver, locator_key) or "null"
        BaseCommandCaller.update_json_file(file_name, key, value, index, retries)
        return value

    @staticmethod
    def get_selected_option_text_and_store_in_json(driver, locator_key: str, file_name: str, key: str, index: int):
        element = BaseCommandCaller._visible_element(driver, locator_key)
        selected = Select(element).all_selected_options
        value = selected[0].text.strip() if selected else "null"
        BaseCommandCaller.update_json_file(file_name, key, value, index)
        return value

    # Screenshots

    @staticmethod
    def capture_screenshot_with_title(driver, title: str):
        try:
            return capture_screenshot(driver, title)
        except Exception as e:
            logging.error(f"Error capturing screenshot with title: {title}. {str(e)}")
            raise

    @staticmethod
    def attach_screenshot_on_failure(driver, action: str):
        try:
            return capture_screenshot(driver, f"{action}_fail", failed_screenshot_dir)
        except Exception as e:
            logging.error(f"Failed to take screenshot for {action}: {str(e)}")
            return None

    # Generated values

    @staticmethod
    def generate_random_number() -> str:
        return str(random.randint(100, 9999))

    @staticmethod
    def generate_formatted_date() -> str:
        return datetime.now().strftime("%d/%m/%Y %H:%M")

    @staticmethod
    def generate_appointment_number() -> str:
        return "14" + "".join(str(random.randint(0, 9)) for _ in range(5))
