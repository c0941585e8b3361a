import unittest
import xmlrunner
from utilities.reporter_helper import report_dir
from libraries.lib_common import LibCommon
from libraries.lib_helper_patient_registration import handle_out_patient_registration
from test_suites.suite_base import BrowserSuite


class OutPatientRegistration(BrowserSuite):
    spec_file = "ts_out_patient_registration.py"

    def outpatient_registration_new(self, rows: list, data_tables: list):
        dt_out_patient_registration = rows[0]
        self.login(dt_out_patient_registration)
        handle_out_patient_registration(self.driver, dt_out_patient_registration, data_tables)
        LibCommon.bc_log_out(self.driver)


OutPatientRegistration.add_test_cases('Outpatient Registration New', OutPatientRegistration.outpatient_registration_new)
OutPatientRegistration.add_test_cases(
    'Outpatient Registration New Twin Patient', OutPatientRegistration.outpatient_registration_new)


if __name__ == "__main__":
    unittest.main(
        testRunner=xmlrunner.XMLTestRunner(output=report_dir, verbosity=2),
        failfast=False, buffer=False, catchbreak=False
    )
