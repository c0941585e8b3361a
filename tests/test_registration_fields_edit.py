from unittest.mock import patch, call
from utilities.base_commands import BaseCommandCaller
from libraries import lib_common_registration_fields_edit as fields_edit
from libraries.lib_common_registration_fields_edit import LibCommonRegistrationFieldsEdit, is_unselected
from tests.test_data_helper import DataTableTestCase

EXISTING_ROWS = [
    {"patientName": "null", "patientNic": None, "race": "Malay", "genders": "Male", "email": "",
     "patientType": "Select Patient Type", "privateCategory": "Walk In", "doctor": "null",
     "street1Relation": "null", "street2Relation": "Taman SEA", "street3Relation": "Seksyen 2",
     "street4Relation": "Petaling Jaya", "countryRelation": "Malaysia", "stateRelation": None,
     "townRelation": "Petaling Jaya", "postcodeRelation": "47300", "relationMobileNumber": "123456789",
     "patientMobileNo": "111111111", "privilegeRemark": "null"},
    {"patientName": "Auto Bakilot Femuraz", "patientNic": "900101-14-5001", "race": "Malay",
     "genders": "Female", "email": "a@example.com", "patientType": "Private", "privateCategory": "Walk In",
     "doctor": "Dr Tan", "relationMobileNumber": "null", "privilegeRemark": "Staff privilege"},
]
BASE_COMMANDS = ["is_locator_present", "clear_text_field", "fill", "click", "select_mat_option_by_text",
                 "select_option", "get_selected_option_text_and_store_in_json", "store_data_from_locator_to_json",
                 "get_checkbox_state", "get_input_data", "assert_checkbox_state"]


class FieldsEditTestCase(DataTableTestCase):
    def setUp(self):
        super().setUp()
        self.write_table("dt_existing", EXISTING_ROWS)
        self.base = {}
        for name in BASE_COMMANDS:
            patcher = patch.object(BaseCommandCaller, name)
            self.base[name] = patcher.start()
            self.addCleanup(patcher.stop)

    def filled(self):
        return {c[0][1]: c[0][2] for c in self.base["fill"].call_args_list}


class TestIsUnselected(FieldsEditTestCase):
    def test_placeholders_and_blanks(self):
        self.assertTrue(is_unselected("Select Patient Type"))
        self.assertTrue(is_unselected("null"))
        self.assertTrue(is_unselected(None))
        self.assertFalse(is_unselected("Private"))


class TestPatientInfoEdits(FieldsEditTestCase):
    def test_blank_name_is_generated_and_stored(self):
        LibCommonRegistrationFieldsEdit.bc_edit_patient_name("driver", "dt_existing", 0)
        name = self.read_table("dt_existing")[0]["patientName"]
        self.assertRegex(name, r"^Auto [A-Z][a-z]{6} [A-Z][a-z]{6}$")
        self.base["fill"].assert_called_once_with("driver", "PG_PatientRegistration.input_patientname", name, True)

    def test_recorded_name_is_kept(self):
        LibCommonRegistrationFieldsEdit.bc_edit_patient_name("driver", "dt_existing", 1)
        self.base["fill"].assert_not_called()
        self.assertEqual(self.read_table("dt_existing")[1]["patientName"], "Auto Bakilot Femuraz")

    def test_blank_ic_no_gets_a_nic_for_the_gender(self):
        LibCommonRegistrationFieldsEdit.bc_edit_patient_ic_no("driver", "Male", "mykad", "dt_existing", 0)
        nic = self.read_table("dt_existing")[0]["patientNic"]
        self.assertRegex(nic, r"^\d{6}-\d{2}-\d{3}[1379]$")
        self.assertEqual(self.filled(), {"PG_PatientRegistration.input_ic_no": nic})

    def test_empty_email_is_filled(self):
        LibCommonRegistrationFieldsEdit.bc_edit_patient_email("driver", "automation@example.com", "dt_existing", 0)
        LibCommonRegistrationFieldsEdit.bc_edit_patient_email("driver", "automation@example.com", "dt_existing", 1)
        self.assertEqual(self.filled(), {"PG_PatientRegistration.input_email": "automation@example.com"})

    def test_mobile_is_always_regenerated(self):
        LibCommonRegistrationFieldsEdit.bc_edit_patient_mobile_no("driver", "dt_existing", 0)
        mobile = self.read_table("dt_existing")[0]["patientMobileNo"]
        self.assertNotEqual(mobile, "111111111")
        self.assertEqual(self.filled(), {"PG_PatientRegistration.input_mobileno": mobile})


class TestVisitAdmissionEdits(FieldsEditTestCase):
    def test_placeholder_patient_type_is_selected_and_stored(self):
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_patient_type("driver", "Private", "dt_existing", 0)
        self.base["select_option"].assert_called_once_with("driver", "PG_PatientRegistration.select_patienttype", "Private")
        self.base["get_selected_option_text_and_store_in_json"].assert_called_once_with(
            "driver", "PG_PatientRegistration.select_patienttype", "dt_existing", "patientType", 0)

    def test_chosen_private_category_is_kept(self):
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_private_category("driver", "Walk In", "dt_existing", 0)
        self.base["select_option"].assert_not_called()

    def test_unticked_privilege_remark_is_ticked_and_filled(self):
        self.base["get_checkbox_state"].return_value = False
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_privilege_remark("driver", "Staff", "dt_existing", 1)
        self.base["click"].assert_called_once_with("driver", "PG_PatientRegistration.check_isaddremarkchecked")
        self.assertEqual(self.filled(), {"PG_PatientRegistration.textarea_addremark": "Staff"})

    def test_ticked_privilege_remark_is_filled_only_when_blank(self):
        self.base["get_checkbox_state"].return_value = True
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_privilege_remark("driver", "Staff", "dt_existing", 1)
        self.base["fill"].assert_not_called()
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_privilege_remark("driver", "Staff", "dt_existing", 0)
        self.assertEqual(self.filled(), {"PG_PatientRegistration.textarea_addremark": "Staff"})

    @patch.object(fields_edit, "LibPatientRegistration")
    def test_missing_doctor_is_selected_and_ticked(self, mock_registration):
        self.base["get_checkbox_state"].return_value = False
        LibCommonRegistrationFieldsEdit.bc_edit_visit_admission_details_add_new_doctor("driver", "dt_existing", 0)
        mock_registration.bc_handle_select_doctor.assert_called_once_with("driver")
        self.base["click"].assert_called_once_with("driver", "PG_PatientRegistration.check_isdoctorchecked")

    @patch.object(fields_edit, "LibPatientRegistration")
    def test_corporate_visit_without_doctor_field_adds_a_doctor(self, mock_registration):
        self.base["is_locator_present"].return_value = False
        self.base["get_checkbox_state"].return_value = True
        self.base["get_input_data"].return_value = "Dr Tan"
        LibCommonRegistrationFieldsEdit.bc_handle_edit_existing_visit_admission_details(
            "driver", "Corporate", "Walk In", False, "Staff", "Staff privilege", "ACME", "1000", "500", "200",
            "null", False, "null", "dt_existing", 1, 3000)

        mock_registration.bc_handle_corporate_details.assert_called_once_with(
            "driver", "ACME", "1000", "500", "200", "null", "dt_existing", 1, 3000)
        self.assertIn(call("driver", "PG_PatientRegistration.button_savecorporate"), self.base["click"].call_args_list)
        self.assertIn(call("driver", "PG_PatientRegistration.button_addnewdoctor"), self.base["click"].call_args_list)
        mock_registration.bc_handle_select_doctor.assert_not_called()
        mock_registration.bc_handle_refer_by_external_clinic.assert_not_called()
        self.base["assert_checkbox_state"].assert_called_once_with(
            "driver", "PG_PatientRegistration.check_isdoctorchecked", True)


class TestEmergencyContactEdits(FieldsEditTestCase):
    def test_only_empty_address_parts_are_filled(self):
        LibCommonRegistrationFieldsEdit.bc_edit_emergency_contact_details_address(
            "driver", "12 Jalan SS 2/24", "Taman SEA", "Seksyen 2", "Petaling Jaya", "Malaysia", "Selangor",
            "Petaling Jaya", "47300", "dt_existing", 0)

        self.assertEqual(self.filled(), {"PG_PatientRegistration.input_street1_relationtype": "12 Jalan SS 2/24"})
        self.base["select_mat_option_by_text"].assert_called_once_with(
            "driver", "PG_Common.list_matoptions", "Selangor")
        self.assertEqual(self.base["store_data_from_locator_to_json"].call_args_list, [
            call("driver", "PG_PatientRegistration.input_street1_relationtype", "dt_existing", "street1Relation", 0),
            call("driver", "PG_PatientRegistration.input_state_relationtype", "dt_existing", "stateRelation", 0),
        ])

    def test_blank_contact_mobile_is_generated(self):
        LibCommonRegistrationFieldsEdit.bc_edit_emergency_contact_details_mobile_no("driver", "dt_existing", 0)
        self.base["fill"].assert_not_called()
        LibCommonRegistrationFieldsEdit.bc_edit_emergency_contact_details_mobile_no("driver", "dt_existing", 1)
        mobile = self.read_table("dt_existing")[1]["relationMobileNumber"]
        self.assertEqual(self.filled(), {"PG_PatientRegistration.input_mobileno_relationtype": mobile})


class TestExistingPatientInfo(FieldsEditTestCase):
    def edited_steps(self, identification_type):
        steps = ["bc_edit_patient_name", "bc_edit_patient_identification_type", "bc_edit_patient_ic_no",
                 "bc_edit_patient_old_ic_or_passport", "bc_edit_patient_passport_expiry_date",
                 "bc_edit_patient_country_of_issue", "bc_edit_patient_nationality", "bc_edit_patient_dob",
                 "bc_edit_patient_age", "bc_edit_patient_race", "bc_edit_patient_gender", "bc_edit_patient_email",
                 "bc_edit_patient_mobile_no"]
        mocks = {}
        for step in steps:
            patcher = patch.object(LibCommonRegistrationFieldsEdit, step)
            mocks[step] = patcher.start()
            self.addCleanup(patcher.stop)
        LibCommonRegistrationFieldsEdit.bc_handle_existing_patient_info_mandatory_fields(
            "driver", identification_type, "Male", "mykad", "Malaysia", "Malaysian", "Malay", "a@example.com",
            "dt_existing", 0)
        return [step for step in steps if mocks[step].called]

    def test_mykad_edits_the_ic_number(self):
        self.assertEqual(self.edited_steps("MyKAD"), [
            "bc_edit_patient_name", "bc_edit_patient_identification_type", "bc_edit_patient_ic_no",
            "bc_edit_patient_race", "bc_edit_patient_gender", "bc_edit_patient_email", "bc_edit_patient_mobile_no"])

    def test_passport_edits_the_travel_document(self):
        edited = self.edited_steps("Passport (Others)")
        self.assertNotIn("bc_edit_patient_ic_no", edited)
        for step in ["bc_edit_patient_old_ic_or_passport", "bc_edit_patient_passport_expiry_date",
                     "bc_edit_patient_country_of_issue", "bc_edit_patient_nationality", "bc_edit_patient_dob",
                     "bc_edit_patient_age"]:
            self.assertIn(step, edited)

    def test_guardian_mykad_edits_old_ic_and_birth_date(self):
        edited = self.edited_steps("MyKAD (Mother)")
        self.assertIn("bc_edit_patient_old_ic_or_passport", edited)
        self.assertIn("bc_edit_patient_dob", edited)
        self.assertNotIn("bc_edit_patient_passport_expiry_date", edited)
        self.assertNotIn("bc_edit_patient_ic_no", edited)
