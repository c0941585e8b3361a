import unittest
from unittest.mock import MagicMock, patch
from selenium.common.exceptions import TimeoutException, NoSuchElementException
from utilities.base_commands import BaseCommandCaller
from tests.test_data_helper import DataTableTestCase


def make_element(tag_name="input", value=None, text="", displayed=True):
    element = MagicMock()
    element.tag_name = tag_name
    element.get_attribute.return_value = value
    element.text = text
    element.is_displayed.return_value = displayed
    return element


def make_driver(element=None):
    driver = MagicMock()
    element = element if element is not None else make_element()
    driver.find_element.return_value = element
    driver.find_elements.return_value = [element]
    return driver


def timing_out_wait():
    wait = MagicMock()
    wait.until.side_effect = TimeoutException("timed out")
    return wait


class BaseCommandsTestCase(unittest.TestCase):
    def setUp(self):
        for target in ["utilities.base_commands.capture_screenshot", "utilities.base_commands.time.sleep"]:
            patcher = patch(target)
            self.addCleanup(patcher.stop)
            mock = patcher.start()
            if target.endswith("capture_screenshot"):
                self.mock_screenshot = mock
            else:
                self.mock_sleep = mock


class TestActions(BaseCommandsTestCase):
    def test_fill_clears_and_types(self):
        element = make_element()
        driver = make_driver(element)

        BaseCommandCaller.fill(driver, "#patientName", "Auto Bakilot Femuraz")

        element.clear.assert_called_once()
        element.send_keys.assert_called_once_with("Auto Bakilot Femuraz")
        driver.execute_script.assert_called()
        self.mock_screenshot.assert_not_called()

    def test_fill_with_capture_takes_success_screenshot(self):
        driver = make_driver()
        BaseCommandCaller.fill(driver, "#email", "a@example.com", True)
        self.mock_screenshot.assert_called_once_with(driver, "fill_#email_success")

    def test_click(self):
        element = make_element(tag_name="button")
        driver = make_driver(element)
        BaseCommandCaller.click(driver, "#btn_register")
        element.click.assert_called_once()

    def test_click_missing_element_fails_with_screenshot(self):
        driver = make_driver()
        driver.find_elements.return_value = []

        with self.assertLogs(level="ERROR") as logs:
            with self.assertRaises(NoSuchElementException) as context:
                BaseCommandCaller.click(driver, "#btn_save")

        self.assertIn('Element with locator "#btn_save" not found on the page.', str(context.exception))
        self.assertIn("Test failed with error:", logs.output[0])
        self.mock_screenshot.assert_called_once_with(driver, "click_#btn_save_failure")

    def test_unknown_page_key_fails_before_touching_the_driver(self):
        driver = make_driver()
        with self.assertRaises(KeyError):
            BaseCommandCaller.fill(driver, "PG_PatientRegistration.input_doesnotexist", "x")
        driver.find_element.assert_not_called()

    def test_recovery_click_skips_hidden_element(self):
        hidden = make_element(displayed=False)
        driver = make_driver(hidden)
        self.assertFalse(BaseCommandCaller.recovery_click(driver, "#btn_skiptour"))
        hidden.click.assert_not_called()

        visible = make_element()
        self.assertTrue(BaseCommandCaller.recovery_click(make_driver(visible), "#btn_skiptour"))
        visible.click.assert_called_once()

    @patch("utilities.base_commands.ActionChains")
    def test_draw_signature(self, mock_chains):
        canvas = make_element(tag_name="canvas")
        canvas.size = {"width": 300, "height": 100}
        BaseCommandCaller.draw_signature(make_driver(canvas), "canvas#patientsignature")

        actions = mock_chains.return_value
        actions.click_and_hold.assert_called_once()
        self.assertEqual(actions.move_by_offset.call_count, 14)
        actions.release.assert_called_once()
        actions.perform.assert_called_once()


class TestReads(BaseCommandsTestCase):
    def test_get_input_data(self):
        driver = make_driver(make_element(value="  MRN1001 "))
        self.assertEqual(BaseCommandCaller.get_input_data(driver, "#mrn"), "MRN1001")

    def test_get_input_data_returns_none_on_failure(self):
        driver = make_driver()
        driver.find_element.side_effect = NoSuchElementException("gone")
        with self.assertLogs(level="ERROR"):
            self.assertIsNone(BaseCommandCaller.get_input_data(driver, "#mrn"))

    def test_text_elements_are_read_from_text(self):
        driver = make_driver(make_element(tag_name="td", text="Single Bed"))
        self.assertEqual(BaseCommandCaller.get_input_data(driver, "td.bedtype"), "Single Bed")

    def test_get_all_indices(self):
        driver = make_driver()
        driver.find_elements.return_value = [make_element(), make_element(), make_element()]
        self.assertEqual(BaseCommandCaller.get_all_indices(driver, "//table/tbody/tr"), [0, 1, 2])

        driver.find_elements.return_value = []
        with self.assertRaises(NoSuchElementException) as context:
            BaseCommandCaller.get_all_indices(driver, "//table/tbody/tr")
        self.assertIn("No elements found for locator: //table/tbody/tr", str(context.exception))


class TestAssertions(BaseCommandsTestCase):
    def test_locator_present(self):
        self.assertTrue(BaseCommandCaller.is_locator_present(make_driver(), "#lbl_chargetype", 3000, "hard"))

    def test_soft_locator_check_returns_false(self):
        driver = make_driver()
        with patch.object(BaseCommandCaller, "_wait", return_value=timing_out_wait()) as mock_wait:
            self.assertFalse(BaseCommandCaller.is_locator_present(driver, "#panel_guardian", 3000, "soft"))
        self.assertEqual(mock_wait.return_value.until.call_count, 3)
        self.mock_screenshot.assert_not_called()

    def test_hard_locator_check_raises(self):
        driver = make_driver()
        with patch.object(BaseCommandCaller, "_wait", return_value=timing_out_wait()):
            with self.assertRaises(AssertionError) as context:
                BaseCommandCaller.is_locator_present(driver, "#btn_register", 3000, "hard", 2)
        self.assertEqual(str(context.exception),
                         'Test Case Failed: Locator "#btn_register" is not visible after 2 retries.')
        self.mock_screenshot.assert_called_once()

    def test_soft_locator_check_with_unknown_key_returns_false(self):
        driver = make_driver()
        self.assertFalse(BaseCommandCaller.is_locator_present(driver, "PG_PatientRegistration.input_unknown",
                                                              3000, "soft"))
        driver.find_element.assert_not_called()
        self.mock_screenshot.assert_not_called()

    def test_hard_locator_check_with_unknown_key_raises(self):
        driver = make_driver()
        with self.assertRaises(AssertionError) as context:
            BaseCommandCaller.is_locator_present(driver, "PG_PatientRegistration.input_unknown", 3000, "hard")
        self.assertEqual(str(context.exception),
                         "Test Case Failed: Locator not found for key PG_PatientRegistration.input_unknown")
        driver.find_element.assert_not_called()
        self.mock_screenshot.assert_called_once()

    def test_handle_assertion_failure(self):
        driver = make_driver()
        self.assertFalse(BaseCommandCaller.handle_assertion_failure(driver, "bed vacant", True))
        with self.assertRaises(AssertionError):
            BaseCommandCaller.handle_assertion_failure(driver, "bed vacant", False)

    def test_soft_text_check(self):
        with patch.object(BaseCommandCaller, "_wait", return_value=timing_out_wait()):
            self.assertFalse(BaseCommandCaller.is_text_present(make_driver(), "Registered", 1000, "soft"))
            with self.assertRaises(AssertionError):
                BaseCommandCaller.is_text_present(make_driver(), "Registered", 1000, "hard")

    def test_assert_text_match_trims(self):
        driver = make_driver(make_element(tag_name="h4", text="  Patient Registration "))
        BaseCommandCaller.assert_text_match(driver, "#lbl_title", "Patient Registration")

        with self.assertRaises(AssertionError) as context:
            BaseCommandCaller.assert_text_match(driver, "#lbl_title", "Request For Admission")
        self.assertEqual(str(context.exception),
                         'Text mismatch. Expected: "Request For Admission", Actual: "Patient Registration"')

    def test_get_input_data_and_assert(self):
        driver = make_driver(make_element(value="Malaysia"))
        BaseCommandCaller.get_input_data_and_assert(driver, "#countryofissue", "Malaysia")

        with self.assertRaises(AssertionError) as context:
            BaseCommandCaller.get_input_data_and_assert(driver, "#countryofissue", "Singapore")
        self.assertEqual(str(context.exception), 'Assertion failed. Expected: "Singapore", Received: "Malaysia".')

    def test_empty_values_compare_as_null(self):
        driver = make_driver(make_element(value=""))
        BaseCommandCaller.get_input_data_and_assert(driver, "#passport", None)
        BaseCommandCaller.get_input_data_and_assert(driver, "#passport", "null")
        self.assertEqual(self.mock_sleep.call_count, 6)

    def test_normalize_value(self):
        self.assertEqual(BaseCommandCaller.normalize_value(None), "null")
        self.assertEqual(BaseCommandCaller.normalize_value(""), "null")
        self.assertEqual(BaseCommandCaller.normalize_value(" 47300 "), "47300")
        self.assertEqual(BaseCommandCaller.normalize_value(3), "3")

    def test_assert_checkbox_state(self):
        checkbox = make_element()
        checkbox.is_selected.return_value = True
        driver = make_driver(checkbox)
        BaseCommandCaller.assert_checkbox_state(driver, "#twinpatient", True)
        with self.assertRaises(AssertionError):
            BaseCommandCaller.assert_checkbox_state(driver, "#twinpatient", False)

    def test_assert_selected_option(self):
        option = MagicMock()
        option.text = "OutPatient"
        option.is_selected.return_value = True
        select = make_element(tag_name="select")
        select.get_dom_attribute.return_value = None
        select.find_elements.return_value = [option]
        driver = make_driver(select)

        BaseCommandCaller.assert_selected_option(driver, "#chargetype", "OutPatient")
        with self.assertRaises(AssertionError):
            BaseCommandCaller.assert_selected_option(driver, "#chargetype", "InPatient")


class TestWaits(BaseCommandsTestCase):
    def test_hard_pause(self):
        BaseCommandCaller.hard_pause(make_driver(), 3000)
        self.mock_sleep.assert_called_once_with(3.0)

    def test_hard_pause_rejects_non_positive_duration(self):
        with self.assertRaises(ValueError):
            BaseCommandCaller.hard_pause(make_driver(), 0)
        with self.assertRaises(ValueError):
            BaseCommandCaller.hard_pause(make_driver(), -5)

    def test_wait_until_locator_invisible(self):
        with patch.object(BaseCommandCaller, "_wait", return_value=timing_out_wait()):
            with self.assertRaises(AssertionError) as context:
                BaseCommandCaller.wait_until_locator_invisible(make_driver(), "div.ngx-spinner-overlay", 2000)
        self.assertEqual(str(context.exception),
                         'Locator "div.ngx-spinner-overlay" did not become invisible within 2000ms.')

    def test_wait_for_all_instances_to_disappear(self):
        driver = make_driver()
        driver.find_elements.return_value = [make_element(displayed=False), make_element(displayed=False)]
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, "div.ngx-spinner-overlay", 1000)


class TestPersistence(DataTableTestCase):
    def setUp(self):
        super().setUp()
        for target in ["utilities.base_commands.capture_screenshot", "utilities.base_commands.time.sleep"]:
            patcher = patch(target)
            self.addCleanup(patcher.stop)
            patcher.start()

    def test_store_value_from_locator(self):
        driver = make_driver(make_element(value="MRN1001"))
        value = BaseCommandCaller.get_input_data_and_store_in_json(driver, "#mrn", "dt_test", "mrnNo", 0)
        self.assertEqual(value, "MRN1001")
        self.assertEqual(self.read_table()[0]["mrnNo"], "MRN1001")

    def test_empty_value_stores_none_after_retries(self):
        driver = make_driver(make_element(value=""))
        with self.assertLogs(level="WARNING"):
            value = BaseCommandCaller.get_input_data_and_store_in_json(driver, "#visitno", "dt_test", "visitNo", 1)
        self.assertIsNone(value)
        self.assertIsNone(self.read_table()[1]["visitNo"])

    def test_store_data_from_locator_stores_null_sentinel(self):
        driver = make_driver()
        driver.find_element.side_effect = NoSuchElementException("gone")
        self.assertEqual(BaseCommandCaller.store_data_from_locator_to_json(driver, "#doctor", "dt_test", "doctor", 0), "null")
        self.assertEqual(self.read_table()[0]["doctor"], "null")

    def test_update_json_file_does_not_retry_bad_index(self):
        with self.assertRaises(IndexError):
            BaseCommandCaller.update_json_file("dt_test", "mrnNo", "MRN1", 9)


class TestGeneratedValues(unittest.TestCase):
    def test_formats(self):
        self.assertRegex(BaseCommandCaller.generate_appointment_number(), r"^14\d{5}$")
        self.assertTrue(100 <= int(BaseCommandCaller.generate_random_number()) <= 9999)
        self.assertRegex(BaseCommandCaller.generate_formatted_date(), r"^\d{2}/\d{2}/\d{4} \d{2}:\d{2}$")


if __name__ == "__main__":
    unittest.main()
