import logging
import unittest
import xmlrunner
from utilities.reporter_helper import report_dir
from libraries.lib_common import LibCommon
from libraries.lib_helper_patient_registration import handle_patient_registration
from libraries.lib_helper_request_admission import (
    bed_enquiry_and_get_vacant_bed,
    handle_request_for_admission_new_part_one,
    handle_request_for_admission_part_two,
)
from test_suites.suite_base import BrowserSuite, WAIT_TIME, SHORT_WAIT_TIME


class CreateRequestForAdmission(BrowserSuite):
    spec_file = "ts_create_request_for_admission.py"

    def create_request_for_admission(self, rows: list, data_tables: list):
        """
        Register a new out-patient, raise an RFA for them and, when requested,
        complete part two with the first vacant bed of the ward.
        """
        dt_request_for_admission, dt_out_patient_registration = rows[0], rows[1]
        self.login(dt_out_patient_registration)

        LibCommon.bc_handle_main_navigation_link_click(
            self.driver, dt_out_patient_registration['mainnavgationname'], SHORT_WAIT_TIME)
        LibCommon.bc_handle_sub_navigation_link_click(
            self.driver, dt_out_patient_registration['subnavgationname'], WAIT_TIME)
        handle_patient_registration(self.driver, dt_out_patient_registration, data_tables)

        if dt_request_for_admission.get('isPartTwo'):
            bed_enquiry_and_get_vacant_bed(self.driver, dt_request_for_admission, data_tables)
        handle_request_for_admission_new_part_one(
            self.driver, dt_request_for_admission, dt_out_patient_registration, data_tables)
        handle_request_for_admission_part_two(self.driver, dt_request_for_admission, data_tables)
        LibCommon.bc_log_out(self.driver)
        logging.info("Request for admission created")


CreateRequestForAdmission.add_test_cases(
    'Create Request For Admission', CreateRequestForAdmission.create_request_for_admission)


if __name__ == "__main__":
    unittest.main(
        testRunner=xmlrunner.XMLTestRunner(output=report_dir, verbosity=2),
        failfast=False, buffer=False, catchbreak=False
    )
