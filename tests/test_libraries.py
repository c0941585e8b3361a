import unittest
from unittest.mock import MagicMock, patch, call
from utilities.base_commands import BaseCommandCaller
from libraries import form_steps
from libraries.lib_advance_search import LibAdvanceSearch
from libraries.lib_appointment import LibAppointment
from libraries.lib_common import LibCommon
from libraries.lib_request_for_admission import ensure_checked


class TestFormSteps(unittest.TestCase):
    def test_is_blank(self):
        for value in (None, "", "null", "undefined"):
            self.assertTrue(form_steps.is_blank(value))
        for value in ("Malaysia", 0, False):
            self.assertFalse(form_steps.is_blank(value))

    def test_replace_field_clears_before_typing(self):
        driver = MagicMock()
        with patch.object(BaseCommandCaller, "clear_text_field") as mock_clear, \
                patch.object(BaseCommandCaller, "fill") as mock_fill:
            manager = MagicMock()
            manager.attach_mock(mock_clear, "clear")
            manager.attach_mock(mock_fill, "fill")
            form_steps.replace_field(driver, "PG_PatientRegistration.input_email", "a@example.com")

        self.assertEqual(manager.mock_calls, [
            call.clear(driver, "PG_PatientRegistration.input_email"),
            call.fill(driver, "PG_PatientRegistration.input_email", "a@example.com", False),
        ])

    def test_choose_mat_option_picks_from_overlay(self):
        driver = MagicMock()
        with patch.object(BaseCommandCaller, "clear_text_field"), \
                patch.object(BaseCommandCaller, "click") as mock_click, \
                patch.object(BaseCommandCaller, "select_mat_option_by_text") as mock_select:
            form_steps.choose_mat_option(driver, "PG_PatientRegistration.input_race", "Malay")

        mock_click.assert_called_once_with(driver, "PG_PatientRegistration.input_race")
        mock_select.assert_called_once_with(driver, "PG_Common.list_matoptions", "Malay")

    def test_assert_fields_checks_each_locator(self):
        driver = MagicMock()
        with patch.object(BaseCommandCaller, "get_input_data_and_assert") as mock_assert:
            form_steps.assert_fields(driver, {"#name": "Auto", "#postcode": "47300"})
        mock_assert.assert_has_calls([call(driver, "#name", "Auto"), call(driver, "#postcode", "47300")])

    def test_ensure_checked_leaves_ticked_box_alone(self):
        driver = MagicMock()
        with patch.object(BaseCommandCaller, "get_checkbox_state", return_value=True), \
                patch.object(BaseCommandCaller, "click") as mock_click:
            ensure_checked(driver, "#isdaycare")
        mock_click.assert_not_called()

        with patch.object(BaseCommandCaller, "get_checkbox_state", return_value=False), \
                patch.object(BaseCommandCaller, "click") as mock_click, \
                patch.object(BaseCommandCaller, "assert_checkbox_state") as mock_state:
            ensure_checked(driver, "#isdaycare")
        mock_click.assert_called_once_with(driver, "#isdaycare")
        mock_state.assert_called_once_with(driver, "#isdaycare", True)


class TestLibCommon(unittest.TestCase):
    def test_resolve_navigation_link(self):
        self.assertEqual(LibCommon.resolve_navigation_link("Patient Registration"),
                         "//nav//a[normalize-space()='Patient Registration']")


class TestLibAdvanceSearch(unittest.TestCase):
    def test_search_by_ic_no_returns_result_rows(self):
        driver = MagicMock()
        with patch.object(BaseCommandCaller, "is_locator_present"), \
                patch.object(BaseCommandCaller, "clear_text_field"), \
                patch.object(BaseCommandCaller, "fill") as mock_fill, \
                patch.object(BaseCommandCaller, "click"), \
                patch.object(BaseCommandCaller, "get_all_indices", return_value=[0, 1]):
            self.assertEqual(LibAdvanceSearch.bc_search_by_ic_no(driver, "900101-14-5001", 3000), [0, 1])
        mock_fill.assert_called_once_with(driver, "PG_MrnSearch.input_icno", "900101-14-5001")


class TestLibAppointment(unittest.TestCase):
    def test_build_appointment_body(self):
        body = LibAppointment.build_appointment_body(
            "1412345", "Auto Bakilot", "900101-14-5001", "01/01/1990", "123456789", "a@example.com",
            "DR001", "2026-10-20T10:00:00", "2026-10-20T10:15:00", "15")

        self.assertEqual(body["acknowledgementId"], "JC_Appointment_BRIM_1412345_XX")
        self.assertEqual(body["firstName"], "Auto Bakilot")
        self.assertEqual(body["icNo"], "900101-14-5001")
        self.assertEqual(body["duration"], "15")
        self.assertEqual(body["regionCode"], "MYS")
        self.assertFalse(body["isDeleted"])

    @patch("libraries.lib_appointment.ApiUtils.send_request")
    @patch("libraries.lib_appointment.NameGenerator.generate_and_update_json", return_value="Auto Bakilot")
    @patch("libraries.lib_appointment.generate_appointment_datetime_for_malaysia")
    @patch("libraries.lib_appointment.MobileNumberGenerator.generate_and_update_json", return_value="123456789")
    @patch("libraries.lib_appointment.BaseCommandCaller.update_json_file")
    @patch("libraries.lib_appointment.get_formatted_age", return_value="36Y 9M 18D")
    @patch("libraries.lib_appointment.get_dob_from_nic", return_value="01/01/1990")
    @patch("libraries.lib_appointment.generate_and_update_nic", return_value="900101-14-5001")
    @patch("libraries.lib_appointment.BrowserTokenHelper.extract_token", return_value="token-123")
    def test_add_appointment_api(self, mock_token, mock_nic, mock_dob, mock_age, mock_update, mock_mobile,
                                 mock_slot, mock_name, mock_send):
        mock_slot.return_value = {"appointmentStartDateTime": "2026-10-20T10:00:00",
                                  "appointmentEndDateTime": "2026-10-20T10:15:00"}

        result = LibAppointment.bc_add_appointment_api(
            MagicMock(), "Male", "MyKAD", "patientNic", "dob", "age", "patientMobileNo", "10:00", "15",
            "patientName", "DR001", "a@example.com", "dt_outPatientRegistrationNew", 0, "https://example.com/api")

        self.assertEqual(result["icNo"], "900101-14-5001")
        self.assertEqual(result["age"], "36Y 9M 18D")
        self.assertRegex(result["appointmentId"], r"^14\d{5}$")
        mock_update.assert_has_calls([
            call("dt_outPatientRegistrationNew", "dob", "01/01/1990", 0),
            call("dt_outPatientRegistrationNew", "age", "36Y 9M 18D", 0),
        ])
        mock_slot.assert_called_once_with("10:00", 15)

        method, url, headers, body = mock_send.call_args[0]
        self.assertEqual((method, url), ("POST", "https://example.com/api"))
        self.assertEqual(headers["Authorization"], "Bearer token-123")
        self.assertEqual(body["appointmentStartDateTime"], "2026-10-20T10:00:00")
        self.assertEqual(mock_send.call_args[1]["expected_status_code"], 200)


if __name__ == "__main__":
    unittest.main()
