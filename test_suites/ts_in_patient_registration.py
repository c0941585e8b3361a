import unittest
import xmlrunner
from utilities.reporter_helper import report_dir
from libraries.lib_common import LibCommon
from libraries.lib_patient_registration import LibPatientRegistration
from libraries.lib_helper_patient_registration import (
    handle_patient_registration,
    handle_register_inpatients,
    handle_existing_patient_mrn_extract,
    handle_existing_out_patient_registration,
)
from libraries.lib_helper_request_admission import (
    bed_enquiry_and_get_vacant_bed,
    handle_request_for_admission_new_part_one,
    handle_request_for_admission_existing_part_one,
    handle_request_for_admission_part_two,
)
from test_suites.suite_base import BrowserSuite, SHORT_WAIT_TIME


class InPatientRegistration(BrowserSuite):
    spec_file = "ts_in_patient_registration.py"

    def open_registration(self, dt: dict):
        self.login(dt)
        LibCommon.bc_handle_main_navigation_link_click(self.driver, dt['mainnavgationname'], SHORT_WAIT_TIME)
        LibCommon.bc_handle_sub_navigation_link_click(self.driver, dt['subnavgationname'], SHORT_WAIT_TIME)

    def admit(self, dt_request_for_admission: dict, dt_in_patient_registration: dict, data_tables: list):
        handle_request_for_admission_part_two(self.driver, dt_request_for_admission, data_tables)
        handle_register_inpatients(self.driver, dt_request_for_admission, dt_in_patient_registration, data_tables)
        LibCommon.bc_log_out(self.driver)

    def registration_inpatients(self, rows: list, data_tables: list):
        """New out-patient, RFA part one and two, then in-patient admission."""
        dt_request_for_admission, dt_out_patient_registration, dt_in_patient_registration = rows[0], rows[1], rows[2]
        self.open_registration(dt_out_patient_registration)
        handle_patient_registration(self.driver, dt_out_patient_registration, data_tables)
        if dt_request_for_admission.get('isPartTwo'):
            bed_enquiry_and_get_vacant_bed(self.driver, dt_request_for_admission, data_tables)
        handle_request_for_admission_new_part_one(
            self.driver, dt_request_for_admission, dt_out_patient_registration, data_tables)
        self.admit(dt_request_for_admission, dt_in_patient_registration, data_tables)

    def registration_inpatients_existing(self, rows: list, data_tables: list):
        """Existing patient gets a new out-patient visit, then RFA part one and two and in-patient admission."""
        dt_request_for_admission, dt_out_patient_registration, dt_in_patient_registration = rows[0], rows[1], rows[2]
        self.open_registration(dt_out_patient_registration)
        handle_existing_out_patient_registration(self.driver, dt_out_patient_registration, data_tables)
        if dt_request_for_admission.get('isPartTwo'):
            bed_enquiry_and_get_vacant_bed(self.driver, dt_request_for_admission, data_tables)
        handle_request_for_admission_existing_part_one(
            self.driver, dt_request_for_admission, dt_out_patient_registration, data_tables)
        self.admit(dt_request_for_admission, dt_in_patient_registration, data_tables)

    def registration_inpatients_direct_admission_existing(self, rows: list, data_tables: list):
        """Existing patient picked by MRN, RFA part one and two, then in-patient admission."""
        dt_request_for_admission, dt_out_patient_registration, dt_in_patient_registration = rows[0], rows[1], rows[2]
        self.open_registration(dt_out_patient_registration)
        handle_existing_patient_mrn_extract(self.driver, dt_out_patient_registration, data_tables)
        if dt_request_for_admission.get('isPartTwo'):
            bed_enquiry_and_get_vacant_bed(self.driver, dt_request_for_admission, data_tables)
        handle_request_for_admission_existing_part_one(
            self.driver, dt_request_for_admission, dt_out_patient_registration, data_tables)
        self.admit(dt_request_for_admission, dt_in_patient_registration, data_tables)

    def cancel_admission(self, rows: list, data_tables: list):
        """Cancel the admission of the registered patient; the charge type goes back to out-patient."""
        dt_in_patient_registration, dt_out_patient_registration = rows[0], rows[1]
        self.open_registration(dt_out_patient_registration)
        LibPatientRegistration.bc_handle_mrn_search_without_visit_number(
            self.driver, dt_in_patient_registration['mrnInputManually'], dt_out_patient_registration['mrnNo'], 'MyKAD')
        LibPatientRegistration.bc_handle_admission_expand_section(self.driver, SHORT_WAIT_TIME)
        LibPatientRegistration.bc_cancel_admission(self.driver, dt_in_patient_registration['cancelationReason'])
        LibPatientRegistration.bc_verify_charge_type_is_out_patient(self.driver)
        LibCommon.bc_log_out(self.driver)


InPatientRegistration.add_test_cases('Registration - Inpatients', InPatientRegistration.registration_inpatients)
InPatientRegistration.add_test_cases('Registration - Inpatients Existing', InPatientRegistration.registration_inpatients_existing)
InPatientRegistration.add_test_cases(
    'Registration - Inpatients Direct Admision Existing',
    InPatientRegistration.registration_inpatients_direct_admission_existing)
InPatientRegistration.add_test_cases('Cancel - Admission', InPatientRegistration.cancel_admission)


if __name__ == "__main__":
    unittest.main(
        testRunner=xmlrunner.XMLTestRunner(output=report_dir, verbosity=2),
        failfast=False, buffer=False, catchbreak=False
    )
