import logging
from utilities.base_commands import BaseCommandCaller
from utilities.data_helper import DataHelper
from utilities.date_generator import generate_date
from utilities.dob_generator import generate_and_update_dob
from utilities.locator_helper import LocatorHelper
from utilities.mobile_number_generator import MobileNumberGenerator
from utilities.name_generator import NameGenerator
from utilities.nic_generator import generate_and_update_nic, generate_twin_nic
from utilities.passport_expiry_generator import generate_and_update_expiry_date
from utilities.passport_number_generator import generate_and_update_passport_number
from libraries.form_steps import MAT_OPTIONS, is_blank, replace_field, choose_mat_option, expand_section, assert_fields

PASSPORT_TYPES = ['Passport', 'Passport (Father)', 'Passport (Mother)', 'Passport (Others)']
GUARDIAN_MYKAD_TYPES = ['MyKAD (Father)', 'MyKAD (Mother)', 'MyKAD (Other)']
OUTPATIENT_CARE_TYPES = ['mlc', 'walkin', 'newborn', 'daycare', 'er']
VISIT_TYPES_WITHOUT_OPEN_VISIT = ["V", "A", "OTC"]
SPINNER = 'PG_Common.spiner_loading'


class LibPatientRegistration:
    """
    Steps of the patient registration page: patient info, additional details,
    visit and admission, emergency contact, medico-legal case, guardian and
    in-patient admission.
    """

    # Page and header

    @staticmethod
    def bc_verify_page_navigation(driver, header_label: str, expected_url: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.header_lable_patientregistration', wait, 'hard')
        if expected_url not in driver.current_url:
            raise AssertionError(f"Expected URL to contain {expected_url}, got {driver.current_url}")
        BaseCommandCaller.assert_text_match(driver, 'PG_PatientRegistration.header_lable_patientregistration', header_label, True)

    @staticmethod
    def bc_handle_charge_type(driver, charge_type_label: str, charge_type: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.label_chargetype', wait, 'soft')
        BaseCommandCaller.assert_text_match(driver, 'PG_PatientRegistration.label_chargetype', charge_type_label)
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_chargetype', charge_type, True)

    @staticmethod
    def bc_handle_out_patient_registration_type(driver, care_types: str, wait: int):
        """
        Tick the out-patient care types given as a "|" separated list, e.g. "walkin|mlc".
        """
        for care_type in OUTPATIENT_CARE_TYPES:
            BaseCommandCaller.is_locator_present(driver, f'PG_PatientRegistration.check_outpatient_{care_type}', wait, 'soft')

        for care_type in (care_types or '').split('|'):
            care_type = care_type.strip().lower()
            if not care_type:
                continue
            locator_key = f'PG_PatientRegistration.check_outpatient_{care_type}'
            try:
                BaseCommandCaller.click(driver, locator_key)
                BaseCommandCaller.assert_checkbox_state(driver, locator_key, True)
            except Exception as e:
                logging.error(f"Could not select care type {care_type}: {str(e)}")
                raise

    @staticmethod
    def bc_verify_registration_patient_field(driver, wait: int):
        for locator_key in ['input_disabled_uidno', 'input_disabled_visitno', 'input_mrn_basicregistrationinfo',
                            'input_patientname', 'input_disabled_caisno', 'input_disabled_rfano']:
            BaseCommandCaller.is_locator_present(driver, f'PG_PatientRegistration.{locator_key}', wait, 'soft')

    @staticmethod
    def bc_handle_input_name(driver, is_appointment: bool, file_name: str, index: int, wait: int):
        if is_appointment:
            return
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_patientname', wait, 'soft')
        patient_name = NameGenerator.generate_and_update_json('patientName', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_patientname', patient_name, True)

    @staticmethod
    def bc_handle_existing_appointment(driver, appointment_id: str, wait: int):
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.label_appoitnmentpopup', wait, 'soft')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_ok', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_ok')
        replace_field(driver, 'PG_PatientRegistration.input_appointmentreference', appointment_id)
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_appointmentgo')
        BaseCommandCaller.hard_pause(driver, wait)

        result = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_PatientRegistration.check_appoitnmentresult'), 'apptRefNo', appointment_id)
        BaseCommandCaller.is_locator_present(driver, result, wait, 'soft')
        BaseCommandCaller.click(driver, result)
        BaseCommandCaller.assert_checkbox_state(driver, result, True)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_appointmentselect')

    # Patient info

    @staticmethod
    def bc_handle_mykad(driver, is_appointment: bool, patient_name: str, appointment_nic: str, appointment_id: str,
                        appointment_age: str, gender: str, country_of_issue: str, nationality: str,
                        is_twin_first: bool, is_twin_second: bool, col_nic: str, col_dob: str,
                        file_name: str, index: int, nic_type: str, wait: int):
        """
        Fill the MyKAD number. A new NIC is generated unless the patient is the
        second twin (derived from the first twin's NIC) or comes from an appointment.
        """
        for locator_key in ['input_disabled_oldic_passport', 'input_disabled_passportexpiery', 'input_disabled_nationality',
                            'input_disabled_race', 'select_disabled_gender', 'input_disabled_age',
                            'input_disabled_countrycode', 'input_disabled_mobileno',
                            'textarea_disabled_addpatientremark', 'input_ic_no']:
            BaseCommandCaller.is_locator_present(driver, f'PG_PatientRegistration.{locator_key}', wait, 'soft')
        BaseCommandCaller.clear_text_field(driver, 'PG_PatientRegistration.input_ic_no')

        if is_appointment:
            BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_ic_no', appointment_nic)
            BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_ic_no')
            LibPatientRegistration.bc_handle_existing_appointment(driver, appointment_id, wait)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_age', appointment_age)
            BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_patientname', wait, 'soft')
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_patientname', patient_name)
        else:
            if is_twin_second:
                first_twin_nic = DataHelper.get_data(file_name, index, col_nic)
                patient_nic = generate_twin_nic(first_twin_nic)
                DataHelper.update_data(file_name, col_nic, patient_nic, index)
            else:
                patient_nic = generate_and_update_nic(gender, 'patientNic', file_name, index, nic_type)
            BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_ic_no', patient_nic)
            BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_ic_no')
            BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_age', file_name, 'age', index)

        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_countryofissue', country_of_issue)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_nationality', nationality)
        if is_twin_second:
            first_twin_dob = DataHelper.get_data(file_name, index, col_dob)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_dob', first_twin_dob)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_dob', file_name, 'DOB', index)

    @staticmethod
    def fill_dob_and_age(driver, file_name: str, index: int, is_newborn: bool = False):
        generated = generate_and_update_dob('DOB', 'age', file_name, index, is_newborn)
        replace_field(driver, 'PG_PatientRegistration.input_dob', generated["dob"])
        replace_field(driver, 'PG_PatientRegistration.input_age', generated["age"])

    @staticmethod
    def bc_handle_mykad_others(driver, gender: str, country_of_issue: str, nationality: str, nic_type: str,
                               is_newborn: bool, file_name: str, index: int, wait: int):
        """Register a patient identified through a parent's or guardian's MyKAD."""
        for locator_key in ['input_disabled_ic_no', 'input_disabled_passportexpiery', 'input_disabled_nationality',
                            'input_disabled_race', 'select_disabled_gender', 'input_disabled_age',
                            'input_disabled_countrycode', 'input_disabled_mobileno',
                            'textarea_disabled_addpatientremark', 'input_oldic_passport']:
            BaseCommandCaller.is_locator_present(driver, f'PG_PatientRegistration.{locator_key}', wait, 'soft')

        guardian_nic = generate_and_update_nic(gender, 'patientGurdianNic', file_name, index, nic_type)
        replace_field(driver, 'PG_PatientRegistration.input_oldic_passport', guardian_nic)
        BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_oldic_passport')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_countryofissue', country_of_issue)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_nationality', nationality)
        LibPatientRegistration.fill_dob_and_age(driver, file_name, index, is_newborn)

    @staticmethod
    def bc_handle_passport(driver, country_of_issue: str, nationality: str, non_mykad_information: str,
                           file_name: str, index: int, wait: int):
        for locator_key in ['input_disabled_ic_no', 'input_disabled_race', 'select_disabled_gender',
                            'input_disabled_age', 'input_disabled_countrycode', 'input_disabled_mobileno',
                            'textarea_disabled_addpatientremark', 'input_oldic_passport']:
            BaseCommandCaller.is_locator_present(driver, f'PG_PatientRegistration.{locator_key}', wait, 'soft')

        passport_number = generate_and_update_passport_number('passportNumber', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_oldic_passport', passport_number)
        BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_oldic_passport')

        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_passportexpiery', wait, 'soft')
        expiry_date = generate_and_update_expiry_date('expieryDate', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_passportexpiery', expiry_date)

        choose_mat_option(driver, 'PG_PatientRegistration.input_countryofissue', country_of_issue)
        choose_mat_option(driver, 'PG_PatientRegistration.input_nationality', nationality)
        LibPatientRegistration.fill_dob_and_age(driver, file_name, index)

        if nationality != 'MALAYSIA':
            BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_nonmykadinfo', non_mykad_information)

    @staticmethod
    def bc_handle_fill_patient_info(driver, identification_type: str, gender: str, country_of_issue: str,
                                    nationality: str, race: str, genders: str, country_code: str,
                                    non_mykad_information: str, email: str, nic_type: str, is_newborn: bool,
                                    need_patient_remark: bool, add_patient_remark: str, is_appointment: bool,
                                    appointment_nic: str, appointment_id: str, appointment_age: str,
                                    appointment_mobile_no: str, appointment_email: str, patient_name: str,
                                    is_twin_first: bool, is_twin_second: bool, col_nic: str, col_dob: str,
                                    col_mobile: str, file_name: str, index: int, wait: int = 3000,
                                    country_code_need_select: bool = False):
        """
        Fill the patient information card. The identification type decides which
        identity fields are filled (MyKAD, passport or guardian MyKAD).
        """
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_identificationtype', wait, 'soft')
        choose_mat_option(driver, 'PG_PatientRegistration.input_identificationtype', identification_type)

        if is_twin_first or is_twin_second:
            BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.check_ischecked_twinpatient', wait, 'soft')
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_ischecked_twinpatient')
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_PatientRegistration.check_ischecked_twinpatient', True)

        if identification_type == 'MyKAD':
            LibPatientRegistration.bc_handle_mykad(
                driver, is_appointment, patient_name, appointment_nic, appointment_id, appointment_age, gender,
                country_of_issue, nationality, is_twin_first, is_twin_second, col_nic, col_dob, file_name, index,
                nic_type, wait)
        elif identification_type in PASSPORT_TYPES:
            LibPatientRegistration.bc_handle_passport(
                driver, country_of_issue, nationality, non_mykad_information, file_name, index, wait)
        elif identification_type in GUARDIAN_MYKAD_TYPES:
            LibPatientRegistration.bc_handle_mykad_others(
                driver, gender, country_of_issue, nationality, nic_type, is_newborn, file_name, index, wait)

        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_race', wait, 'soft')
        choose_mat_option(driver, 'PG_PatientRegistration.input_race', race)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.select_gender', wait, 'soft')
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_gender', genders)
        BaseCommandCaller.hard_pause(driver, 3000)

        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_countrycode', wait, 'soft')
        if country_code_need_select:
            choose_mat_option(driver, 'PG_PatientRegistration.input_countrycode', country_code)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_countrycode', country_code)

        if is_appointment:
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_mobileno', appointment_mobile_no)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_email', appointment_email)
        else:
            if is_twin_second:
                mobile_no = DataHelper.get_data(file_name, index, col_mobile)
            else:
                mobile_no = MobileNumberGenerator.generate_and_update_json('patientMobileNo', file_name, index)
            replace_field(driver, 'PG_PatientRegistration.input_mobileno', mobile_no)
            replace_field(driver, 'PG_PatientRegistration.input_email', email)

        if need_patient_remark:
            LibPatientRegistration.bc_handle_add_patient_remark(driver, add_patient_remark)

    @staticmethod
    def bc_handle_add_patient_remark(driver, add_patient_remark: str, wait: int = 3000):
        if not BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_isaddpatientremark'):
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_isaddpatientremark')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.textarea_addpatientremark', wait, 'soft')
        replace_field(driver, 'PG_PatientRegistration.textarea_addpatientremark', add_patient_remark)

    # Additional details

    @staticmethod
    def bc_handle_additional_patient_details(driver, religion: str, marital_status: str, occupation: str,
                                             country_code: str, street1: str, street2: str, street3: str,
                                             street4: str, country: str, state: str, town: str, postcode: str,
                                             file_name: str, index: int, wait: int = 3000,
                                             country_code_need_select: bool = False):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_additionaldetails', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.card_additionaldetails')
        choose_mat_option(driver, 'PG_PatientRegistration.input_religion', religion)
        choose_mat_option(driver, 'PG_PatientRegistration.input_maritalstatus', marital_status)
        replace_field(driver, 'PG_PatientRegistration.input_occupation', occupation)

        for code_key, number_key, column in [('input_addhousenocode', 'input_addhouseno', 'addHouseNo'),
                                             ('input_addofficenocode', 'input_addofficeno', 'addOfficeNo')]:
            if country_code_need_select:
                choose_mat_option(driver, f'PG_PatientRegistration.{code_key}', country_code)
            BaseCommandCaller.get_input_data_and_assert(driver, f'PG_PatientRegistration.{code_key}', country_code)
            number = MobileNumberGenerator.generate_and_update_json(column, file_name, index)
            replace_field(driver, f'PG_PatientRegistration.{number_key}', number)

        replace_field(driver, 'PG_PatientRegistration.input_street1', street1)
        replace_field(driver, 'PG_PatientRegistration.input_street2', street2)
        replace_field(driver, 'PG_PatientRegistration.input_street3', street3)
        replace_field(driver, 'PG_PatientRegistration.input_street4', street4)

        BaseCommandCaller.clear_text_field(driver, 'PG_PatientRegistration.input_country')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.input_country')
        BaseCommandCaller.hard_pause(driver, 1000)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_country', country)
        BaseCommandCaller.arrow_down(driver, 'PG_PatientRegistration.input_country')
        BaseCommandCaller.enter(driver, 'PG_PatientRegistration.input_country')
        BaseCommandCaller.hard_pause(driver, 1000)
        choose_mat_option(driver, 'PG_PatientRegistration.input_states', state)
        BaseCommandCaller.hard_pause(driver, 1000)
        choose_mat_option(driver, 'PG_PatientRegistration.input_town', town)
        replace_field(driver, 'PG_PatientRegistration.input_additionalpatientdetails_postcode', postcode)

    # Visit and admission details

    @staticmethod
    def bc_handle_visit_admission_details(driver, is_appointment: bool, patient_type: str, private_category: str,
                                          is_privilege: bool, privilege_type: str, privilege_remark: str,
                                          corporate_name: str, credit_limit_exceed: str, credit_balance_limit: str,
                                          corporate_amount: str, co_guarantor: str, is_referred_by_clinic: bool,
                                          clinic_name: str, file_name: str, index: int, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_admissiondetails', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.card_admissiondetails')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.select_patienttype', wait, 'soft')
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_patienttype', patient_type)

        if patient_type == 'Corporate':
            LibPatientRegistration.bc_handle_corporate_details(
                driver, corporate_name, credit_limit_exceed, credit_balance_limit, corporate_amount, co_guarantor,
                file_name, index, wait)
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_savecorporate')
            displayed = BaseCommandCaller.get_input_data(driver, 'PG_PatientRegistration.input_disabled_displaycorporatename')
            logging.info(f"Corporate shown on the visit: {displayed}")

        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_privatcategory', private_category)
        if not is_appointment:
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_addnewdoctor')
            LibPatientRegistration.bc_handle_select_doctor(driver, wait)

        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_doctorspecialist', file_name, 'doctorSpeciality', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_doctor', file_name, 'doctor', index)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_isdoctorchecked')
        BaseCommandCaller.assert_checkbox_state(driver, 'PG_PatientRegistration.check_isdoctorchecked', True)

        if is_privilege is True:
            LibPatientRegistration.bc_handle_privilege(driver, privilege_type, wait)
            LibPatientRegistration.bc_handle_privilege_remark(driver, privilege_remark, file_name, index)
        if is_referred_by_clinic is True:
            doctor = DataHelper.get_data(file_name, index, 'doctor')
            LibPatientRegistration.bc_handle_refer_by_external_clinic(driver, clinic_name, doctor, file_name, index)

    @staticmethod
    def bc_handle_privilege(driver, privilege_type: str, wait: int = 3000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.select_previleage', wait, 'hard')
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_previleage', privilege_type)

    @staticmethod
    def bc_handle_privilege_remark(driver, privilege_remark: str, file_name: str, index: int):
        """Tick "add remark" for the privilege and fill it when it is not already stored."""
        if not BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_isaddremarkchecked'):
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_isaddremarkchecked')
            replace_field(driver, 'PG_PatientRegistration.textarea_addremark', privilege_remark)
        elif is_blank(DataHelper.get_data(file_name, index, 'privilegeRemark')):
            replace_field(driver, 'PG_PatientRegistration.textarea_addremark', privilege_remark)

    @staticmethod
    def bc_handle_select_doctor(driver, wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.check_isdoctorchecked', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.input_doctor')
        BaseCommandCaller.is_locator_present(driver, MAT_OPTIONS)
        BaseCommandCaller.iterate_and_select_option(
            driver, MAT_OPTIONS, 'PG_PatientRegistration.label_doctoravailable',
            'PG_PatientRegistration.button_doctorunavailableok', 'PG_PatientRegistration.input_doctorspecialist',
            'PG_PatientRegistration.input_doctor', 'PG_PatientRegistration.input_doctor', wait)

    @staticmethod
    def bc_handle_corporate_details(driver, corporate_name: str, credit_limit_exceed: str, credit_balance_limit: str,
                                    corporate_amount: str, co_guarantor: str, file_name: str, index: int,
                                    wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_corporatename', wait, 'hard')
        replace_field(driver, 'PG_PatientRegistration.input_corporatename', ' ')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.input_corporatename')
        BaseCommandCaller.select_mat_option_by_text(driver, MAT_OPTIONS, corporate_name)

        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_corporatecode', wait, 'hard')
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_corporatecode', file_name, 'corporateCode', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.textarea_corporateaddress', file_name, 'corporateAddress', index)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_creditlimitexceed', credit_limit_exceed)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_creditbalancelimit', credit_balance_limit)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_corporateammount', corporate_amount)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_corporaterefstaffno', BaseCommandCaller.generate_random_number())
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_corporaterefstaffno', file_name, 'refStafNo', index)

        if not is_blank(co_guarantor):
            choose_mat_option(driver, 'PG_PatientRegistration.input_corguarantor', co_guarantor)

        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_addrowguaranteeletter')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_glno', wait, 'hard')
        replace_field(driver, 'PG_PatientRegistration.input_glno', BaseCommandCaller.generate_random_number())
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_glapply')

    @staticmethod
    def bc_handle_refer_by_external_clinic(driver, clinic_name: str, clinic_refer_to: str, file_name: str, index: int,
                                           wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.link_referdbyexternaldoctor', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.link_referdbyexternaldoctor')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_cliniccode', wait, 'hard')
        replace_field(driver, 'PG_PatientRegistration.input_clinicname', clinic_name)
        BaseCommandCaller.select_mat_option_by_text(driver, MAT_OPTIONS, clinic_name)

        for locator_key, column in [('input_cliniccode', 'clinicCode'), ('input_clinicStreet', 'clinicStreet'),
                                    ('input_cliniccountry', 'clinicCountry'), ('input_clinicstatecode', 'clinicState'),
                                    ('input_cliniccitycode', 'clinicCity'), ('input_clinicpostcode', 'clinicPostCode'),
                                    ('input_clinicofficeno', 'clinicOfficeNo')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)
        refer_by = BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_referby', file_name, 'clinicReferBy', index)

        replace_field(driver, 'PG_PatientRegistration.input_referto', clinic_refer_to)
        BaseCommandCaller.select_mat_option_by_text(driver, MAT_OPTIONS, clinic_refer_to)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_clinicsave')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_referbyexternaldoctor', refer_by or '', True)

    # Emergency contact

    @staticmethod
    def bc_handle_emergency_contact_details(driver, gender_emergency_contact: str, relation_type: str,
                                            is_same_patient_address: bool, street1_relation: str,
                                            street2_relation: str, street3_relation: str, street4_relation: str,
                                            country_relation: str, state_relation: str, town_relation: str,
                                            postcode_relation: str, relation_country_code: str, file_name: str,
                                            index: int, wait: int = 3000, country_code_need_select: bool = False):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_emergencycontactdetails', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.card_emergencycontactdetails')
        contact_name = NameGenerator.generate_and_update_json('contactPersonName', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_contactpersonname', contact_name)
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_gender_emergencycontactdetails', gender_emergency_contact)
        choose_mat_option(driver, 'PG_PatientRegistration.input_relationtype', relation_type)

        if is_same_patient_address is True:
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_sameaspatientaddress')
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_PatientRegistration.check_sameaspatientaddress', True)
        else:
            replace_field(driver, 'PG_PatientRegistration.input_street1_relationtype', street1_relation)
            replace_field(driver, 'PG_PatientRegistration.input_street2_relationtype', street2_relation)
            replace_field(driver, 'PG_PatientRegistration.input_street3_relationtype', street3_relation)
            replace_field(driver, 'PG_PatientRegistration.input_street4_relationtype', street4_relation)
            choose_mat_option(driver, 'PG_PatientRegistration.input_country_relationtype', country_relation)
            choose_mat_option(driver, 'PG_PatientRegistration.input_state_relationtype', state_relation)
            choose_mat_option(driver, 'PG_PatientRegistration.input_city_relationtype', town_relation)
            replace_field(driver, 'PG_PatientRegistration.input_postcode_relationtype', postcode_relation)

        if country_code_need_select:
            choose_mat_option(driver, 'PG_PatientRegistration.input_countrycodemobile_relationtype', relation_country_code)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_addofficenocode', relation_country_code)
        relation_mobile = MobileNumberGenerator.generate_and_update_json('relationMobileNumber', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_mobileno_relationtype', relation_mobile)

    # Medico-legal case

    @staticmethod
    def bc_handle_medico_legal_case(driver, mlc_no: str, mlc_type: str, mode_of_arrival: str, mlc_mrn: str,
                                    mlc_country_code: str, mlc_remark: str, file_name: str, index: int,
                                    wait: int = 10000, country_code_need_select: bool = False):
        """
        Fill the medico-legal case card. The informant is either an existing
        MRN or a new name and contact number.
        """
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_mlc', wait, 'hard')
        if BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_collapsemlc', wait, 'soft'):
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.card_mlc')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_expandmlc', wait, 'hard')

        replace_field(driver, 'PG_PatientRegistration.input_mlcno', mlc_no)
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_mlctype', mlc_type)
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_modofarival', mode_of_arrival)

        if not is_blank(mlc_mrn):
            replace_field(driver, 'PG_PatientRegistration.input_mrninmlc', mlc_mrn)
        else:
            mlc_name = NameGenerator.generate_and_update_json('mlcName', file_name, index)
            replace_field(driver, 'PG_PatientRegistration.input_mlcname', mlc_name, True)
            if country_code_need_select:
                choose_mat_option(driver, 'PG_PatientRegistration.input_mlccountrycode', mlc_country_code)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_addofficenocode', mlc_country_code)
            mlc_contact_no = MobileNumberGenerator.generate_and_update_json('mlcContactNo', file_name, index)
            replace_field(driver, 'PG_PatientRegistration.input_mlccontactno', mlc_contact_no, True)

        replace_field(driver, 'PG_PatientRegistration.textarea_mlcremark', mlc_remark, True)

    # Guardian and contacts

    @staticmethod
    def bc_handle_guardian_details_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapseguardian', wait)

    @staticmethod
    def bc_handle_store_existing_guardian_details(driver, file_name: str, index: int):
        for locator_key, column in [('input_guardianname', 'guardianName'), ('input_guardiantinnumber', 'guardianTin'),
                                    ('input_guardianicno', 'guardianIcNo'), ('input_guardianoldicnoorpassport', 'guardianPassport'),
                                    ('input_guardiannationality', 'guardianNationality'), ('input_guardianemail', 'guardianEmail'),
                                    ('input_guardianstreet1', 'guardianStreet1'), ('input_guardianstreet2', 'guardianStreet2'),
                                    ('input_guardianstreet3', 'guardianStreet3'), ('input_guardianstreet4', 'guardianStreet4'),
                                    ('input_guardiancountry', 'guardianCountry'), ('input_guardianstate', 'guardianState'),
                                    ('input_guardiancity', 'guardianCity'), ('input_guardianpostcode', 'guardianPostCode'),
                                    ('input_guardiancountrycode', 'guardianCountryCode'), ('input_guardianmobileno', 'guardianMobileNo')]:
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)

    @staticmethod
    def bc_handle_guardian_mandatory_fields(driver, guardian_country_code: str, guardian_street1: str,
                                            guardian_country: str, guardian_state: str, guardian_city: str,
                                            file_name: str, index: int):
        """Fill only the mandatory guardian fields that are still empty."""
        def is_empty(locator_key):
            return is_blank(BaseCommandCaller.get_input_data(driver, f'PG_PatientRegistration.{locator_key}'))

        if is_empty('input_guardianname'):
            guardian_name = NameGenerator.generate_and_update_json('guardianName', file_name, index)
            replace_field(driver, 'PG_PatientRegistration.input_guardianname', guardian_name)
        if is_empty('input_guardianicno'):
            guardian_nic = generate_and_update_nic('male', 'guardianNic', file_name, index, 'MyKAD')
            replace_field(driver, 'PG_PatientRegistration.input_guardianicno', guardian_nic)
            BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_guardianicno')
        if is_empty('input_guardianstreet1'):
            replace_field(driver, 'PG_PatientRegistration.input_guardianstreet1', guardian_street1)
        if is_empty('input_guardiancountry'):
            choose_mat_option(driver, 'PG_PatientRegistration.input_guardiancountry', guardian_country)
        if is_empty('input_guardianstate'):
            choose_mat_option(driver, 'PG_PatientRegistration.input_guardianstate', guardian_state)
        if is_empty('input_guardiancity'):
            choose_mat_option(driver, 'PG_PatientRegistration.input_guardiancity', guardian_city)
        if is_empty('input_guardiancountrycode'):
            choose_mat_option(driver, 'PG_PatientRegistration.input_guardiancountrycode', guardian_country_code)
        if is_empty('input_guardianmobileno'):
            guardian_mobile = MobileNumberGenerator.generate_and_update_json('guardianMobileNo', file_name, index)
            replace_field(driver, 'PG_PatientRegistration.input_guardianmobileno', guardian_mobile)

    @staticmethod
    def bc_handle_guardian_details(driver, is_guardian_mrn: bool, guardian_mrn: str, is_same_as_emergency_details: bool,
                                   street1_relation: str, street2_relation: str, street3_relation: str,
                                   street4_relation: str, country_relation: str, state_relation: str,
                                   town_relation: str, postcode_relation: str, relation_country_code: str,
                                   relation_mobile_number: str, guardian_country_code: str, guardian_street1: str,
                                   guardian_country: str, guardian_state: str, guardian_city: str,
                                   file_name: str, index: int, wait: int):
        mandatory = (guardian_country_code, guardian_street1, guardian_country, guardian_state, guardian_city,
                     file_name, index)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.check_sameasemergencydetails', wait, 'soft')
        LibPatientRegistration.bc_handle_guardian_mandatory_fields(driver, *mandatory)

        if is_guardian_mrn:
            BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_guardianmrn', wait, 'hard')
            replace_field(driver, 'PG_PatientRegistration.input_guardianmrn', guardian_mrn)
            BaseCommandCaller.tab(driver, 'PG_PatientRegistration.input_guardianmrn')
            LibPatientRegistration.bc_handle_store_existing_guardian_details(driver, file_name, index)

        if is_same_as_emergency_details:
            assert_fields(driver, {
                'PG_PatientRegistration.input_guardianstreet1': street1_relation,
                'PG_PatientRegistration.input_guardianstreet2': street2_relation,
                'PG_PatientRegistration.input_guardianstreet3': street3_relation,
                'PG_PatientRegistration.input_guardianstreet4': street4_relation,
                'PG_PatientRegistration.input_guardiancountry': country_relation,
                'PG_PatientRegistration.input_guardianstate': state_relation,
                'PG_PatientRegistration.input_guardiancity': town_relation,
                'PG_PatientRegistration.input_guardianpostcode': postcode_relation,
                'PG_PatientRegistration.input_guardiancountrycode': relation_country_code,
                'PG_PatientRegistration.input_guardianmobileno': relation_mobile_number,
            })
        LibPatientRegistration.bc_handle_guardian_mandatory_fields(driver, *mandatory)

    @staticmethod
    def bc_handle_add_new_contact_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapseaddnewcontact', wait)

    @staticmethod
    def bc_handle_add_new_contact(driver, gender: str, relationship_type: str, nic_type: str, street1_relation: str,
                                  street2_relation: str, street3_relation: str, street4_relation: str,
                                  country_relation: str, state_relation: str, town_relation: str,
                                  postcode_relation: str, country_code: str, file_name: str, index: int):
        contact_name = NameGenerator.generate_and_update_json('addNewContactName', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_name_addnewcontact', contact_name)
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_gender_addnewcontact', gender)
        replace_field(driver, 'PG_PatientRegistration.input_relationship_addnewcontact', relationship_type)
        BaseCommandCaller.select_mat_option_by_text(driver, MAT_OPTIONS, relationship_type)

        contact_nic = generate_and_update_nic(gender, 'addNewContactNIC', file_name, index, nic_type)
        BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_icno_addnewcontact', contact_nic)
        replace_field(driver, 'PG_PatientRegistration.input_street1_addnewcontact', street1_relation)
        replace_field(driver, 'PG_PatientRegistration.input_street2_addnewcontact', street2_relation)
        replace_field(driver, 'PG_PatientRegistration.input_street3_addnewcontact', street3_relation)
        replace_field(driver, 'PG_PatientRegistration.input_street4_addnewcontact', street4_relation)
        choose_mat_option(driver, 'PG_PatientRegistration.input_country_addnewcontact', country_relation)
        choose_mat_option(driver, 'PG_PatientRegistration.input_states_addnewcontact', state_relation)
        choose_mat_option(driver, 'PG_PatientRegistration.input_town_addnewcontact', town_relation)
        replace_field(driver, 'PG_PatientRegistration.input_postcode_addnewcontact', postcode_relation)

        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_countrycodemobile_addnewcontact', country_code)
        contact_mobile = MobileNumberGenerator.generate_and_update_json('addNewContactMobileNo', file_name, index)
        replace_field(driver, 'PG_PatientRegistration.input_mobileno_addnewcontact', contact_mobile)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_add')

    # Death and blacklisting

    @staticmethod
    def bc_handle_death_details(driver, cause_of_death: str, file_name: str, index: int, wait: int = 3000):
        is_checked = BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_isPatientdeceased')
        if not is_checked:
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_isPatientdeceased')
            BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_datetimeofdeath', BaseCommandCaller.generate_formatted_date())
            BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_causeofdeath', cause_of_death)
            return
        death_date_time = BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_PatientRegistration.input_datetimeofdeath', file_name, 'deathDateTime', index)
        if is_blank(death_date_time):
            BaseCommandCaller.fill(driver, 'PG_PatientRegistration.input_datetimeofdeath', BaseCommandCaller.generate_formatted_date())
            replace_field(driver, 'PG_PatientRegistration.input_causeofdeath', cause_of_death)

    @staticmethod
    def bc_handle_black_listing(driver, blacklist_reason: str, file_name: str, index: int, wait: int = 3000):
        is_checked = BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_ischeckedblacklisted')
        if not is_checked:
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_ischeckedblacklisted')
            replace_field(driver, 'PG_PatientRegistration.input_blacklistreason', blacklist_reason)
            return
        stored_reason = BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_PatientRegistration.input_blacklistreason', file_name, 'blacklistReason', index)
        if is_blank(stored_reason):
            replace_field(driver, 'PG_PatientRegistration.input_blacklistreason', blacklist_reason)

    # Register

    @staticmethod
    def bc_handle_click_on_register_button(driver, is_newborn: bool, wait: int = 3000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_register', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_register')
        BaseCommandCaller.hard_pause(driver, wait)
        if is_newborn:
            BaseCommandCaller.hard_pause(driver, wait, True, 'Unstable in SIT')
            BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_nodatechangenewborn', wait, 'hard')
            BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_nodatechangenewborn')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_ok', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_ok')

    @staticmethod
    def bc_handle_store_mrn_and_visit_no(driver, file_name: str, index: int, wait: int = 10000):
        BaseCommandCaller.hard_pause(driver, wait, True, 'Unstable in SIT')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_mrn_basicregistrationinfo', wait, 'hard')
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_mrn_basicregistrationinfo', file_name, 'mrnNo', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_disabled_visitno', file_name, 'visitNo', index)
        patient_name = DataHelper.get_data(file_name, index, 'patientName')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.input_patientname', patient_name)

    # Verification after registration

    @staticmethod
    def bc_verify_registration_details_in_patient_info(driver, file_name: str, index: int, wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.input_patientname', wait, 'hard')
        row = DataHelper.get_row(file_name, index)
        identification_type = row.get('identificationType')

        expected = {
            'PG_PatientRegistration.input_patientname': row.get('patientName'),
            'PG_PatientRegistration.input_identificationtype': identification_type,
        }
        if identification_type == 'MyKAD':
            expected['PG_PatientRegistration.input_ic_no'] = row.get('patientNic')
        elif identification_type in PASSPORT_TYPES:
            expected['PG_PatientRegistration.input_oldic_passport'] = row.get('passportNumber')
            expected['PG_PatientRegistration.input_passportexpiery'] = row.get('expieryDate')
            expected['PG_PatientRegistration.input_dob'] = row.get('DOB')
            expected['PG_PatientRegistration.input_age'] = row.get('age')
        elif identification_type in GUARDIAN_MYKAD_TYPES:
            expected['PG_PatientRegistration.input_oldic_passport'] = row.get('patientGurdianNic')
            expected['PG_PatientRegistration.input_dob'] = row.get('DOB')
            expected['PG_PatientRegistration.input_age'] = row.get('age')
        expected['PG_PatientRegistration.input_race'] = row.get('race')
        assert_fields(driver, expected)

        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_gender', row.get('genders'))
        assert_fields(driver, {
            'PG_PatientRegistration.input_mobileno': row.get('patientMobileNo'),
            'PG_PatientRegistration.input_email': row.get('email'),
        })

    @staticmethod
    def bc_verify_registration_details_in_additional_patient_details(driver, need_patient_remark: bool,
                                                                     add_patient_remark: str, file_name: str,
                                                                     index: int, wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_additionaldetails', wait, 'hard')
        row = DataHelper.get_row(file_name, index)
        assert_fields(driver, {
            'PG_PatientRegistration.input_religion': row.get('religion'),
            'PG_PatientRegistration.input_maritalstatus': row.get('maritalstatus'),
            'PG_PatientRegistration.input_occupation': row.get('occupation'),
            'PG_PatientRegistration.input_addhouseno': row.get('addHouseNo'),
            'PG_PatientRegistration.input_addofficeno': row.get('addOfficeNo'),
            'PG_PatientRegistration.input_street1': row.get('street1'),
            'PG_PatientRegistration.input_street2': row.get('street2'),
            'PG_PatientRegistration.input_street3': row.get('street3'),
            'PG_PatientRegistration.input_street4': row.get('street4'),
            'PG_PatientRegistration.input_country': row.get('countryAditionalInfo'),
            'PG_PatientRegistration.input_states': row.get('state'),
            'PG_PatientRegistration.input_town': row.get('town'),
            'PG_PatientRegistration.input_additionalpatientdetails_postcode': row.get('postalCode'),
        })
        if need_patient_remark:
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_PatientRegistration.check_isaddpatientremark', True)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.textarea_addpatientremark', add_patient_remark)

    @staticmethod
    def bc_verify_registration_details_in_visit_admission(driver, is_privilege: bool, privilege_type: str,
                                                          privilege_remark: str, file_name: str, index: int,
                                                          wait: int = 10000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_admissiondetails', wait, 'hard')
        row = DataHelper.get_row(file_name, index)
        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_patienttype', row.get('patientType'))
        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_privatcategory', row.get('privateCategory'))
        assert_fields(driver, {
            'PG_PatientRegistration.input_doctorspecialist': row.get('doctorSpeciality'),
            'PG_PatientRegistration.input_doctor': row.get('doctor'),
        })
        if is_privilege:
            BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_previleage', privilege_type)
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_PatientRegistration.check_isaddremarkchecked', True)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_PatientRegistration.textarea_addremark', privilege_remark)

    @staticmethod
    def bc_verify_registration_details_in_emergency_contact(driver, is_same_patient_address: bool, file_name: str,
                                                            index: int, wait: int = 10000):
        data = DataHelper.reload_data(file_name)
        if not data or index >= len(data) or not data[index]:
            raise IndexError(f"Invalid or missing data at index {index} in table {file_name}")
        row = data[index]

        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_admissiondetails', wait, 'hard')
        BaseCommandCaller.hard_pause(driver, 10000)
        assert_fields(driver, {
            'PG_PatientRegistration.input_contactpersonname': row.get('contactPersonName'),
            'PG_PatientRegistration.input_relationtype': row.get('relationType'),
        })
        BaseCommandCaller.assert_selected_option(
            driver, 'PG_PatientRegistration.select_gender_emergencycontactdetails', row.get('genderEmergencyContact'))

        if is_same_patient_address:
            assert_fields(driver, {
                'PG_PatientRegistration.input_street1': row.get('street1'),
                'PG_PatientRegistration.input_street2': row.get('street2'),
                'PG_PatientRegistration.input_street3': row.get('street3'),
                'PG_PatientRegistration.input_street4': row.get('street4'),
                'PG_PatientRegistration.input_country': row.get('countryAditionalInfo'),
                'PG_PatientRegistration.input_states': row.get('state'),
                'PG_PatientRegistration.input_town': row.get('town'),
                'PG_PatientRegistration.input_additionalpatientdetails_postcode': row.get('postalCode'),
            })
        else:
            assert_fields(driver, {
                'PG_PatientRegistration.input_street1_relationtype': row.get('street1Relation'),
                'PG_PatientRegistration.input_street2_relationtype': row.get('street2Relation'),
                'PG_PatientRegistration.input_street3_relationtype': row.get('street3Relation'),
                'PG_PatientRegistration.input_street4_relationtype': row.get('street4Relation'),
                'PG_PatientRegistration.input_country_relationtype': row.get('countryRelation'),
                'PG_PatientRegistration.input_state_relationtype': row.get('stateRelation'),
                'PG_PatientRegistration.input_city_relationtype': row.get('townRelation'),
                'PG_PatientRegistration.input_postcode_relationtype': row.get('postcodeRelation'),
            })
        assert_fields(driver, {
            'PG_PatientRegistration.input_countrycodemobile_relationtype': row.get('relationCountryCode'),
            'PG_PatientRegistration.input_mobileno_relationtype': row.get('relationMobileNumber'),
        })

    # Existing patients

    @staticmethod
    def bc_hand_clear_data_nav(driver, wait: int = 3000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_clearTopNav', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_clearTopNav')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_okclear', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_okclear')

    @staticmethod
    def bc_handle_mrn_search_without_visit_number(driver, mrn_input_manually: bool, patient_mrn: str,
                                                  input_identification_type: str, wait: int = 8000):
        """
        Load an existing patient by MRN. Without a manual MRN, random MRNs are tried
        until one belongs to a patient with no open visit, or whose only visits are
        of type V, A or OTC and whose identification type matches.
        """
        mrn_field = 'PG_PatientRegistration.input_mrn_basicregistrationinfo'
        if mrn_input_manually:
            BaseCommandCaller.is_locator_present(driver, mrn_field, wait, 'soft')
            replace_field(driver, mrn_field, patient_mrn)
            BaseCommandCaller.tab(driver, mrn_field)
            return

        while True:
            BaseCommandCaller.is_locator_present(driver, mrn_field, wait, 'soft')
            replace_field(driver, mrn_field, BaseCommandCaller.generate_random_number())
            BaseCommandCaller.tab(driver, mrn_field)
            BaseCommandCaller.hard_pause(driver, wait, True, 'Unstable in SIT')

            visit_no = BaseCommandCaller.get_input_data(driver, 'PG_PatientRegistration.input_disabled_visitno')
            identification_type = BaseCommandCaller.get_input_data(driver, 'PG_PatientRegistration.input_identificationtype')
            if visit_no is None or any(part in VISIT_TYPES_WITHOUT_OPEN_VISIT for part in visit_no.split('/')):
                if identification_type == input_identification_type:
                    break
            else:
                break
            LibPatientRegistration.bc_hand_clear_data_nav(driver, wait)
            BaseCommandCaller.hard_pause(driver, 1000)

    @staticmethod
    def bc_handle_store_existing_patient_info(driver, file_name: str, index: int):
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_mrn_basicregistrationinfo', file_name, 'patientMrn', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_patientname', file_name, 'patientName', index)
        for locator_key, column in [('input_identificationtype', 'identificationType'), ('input_ic_no', 'patientNic'),
                                    ('input_oldic_passport', 'patientPassport'), ('input_passportexpiery', 'passportExpiery')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_countryofissue', file_name, 'countryofIssue', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, 'PG_PatientRegistration.input_nationality', file_name, 'nationality', index)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_race', file_name, 'race', index)
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, 'PG_PatientRegistration.select_gender', file_name, 'genders', index)
        for locator_key, column in [('input_dob', 'dob'), ('input_age', 'age'), ('input_email', 'email'),
                                    ('input_countrycode', 'countryCode'), ('input_mobileno', 'patientMobileNo')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)
        if BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_isaddpatientremark'):
            BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.textarea_addpatientremark', file_name, 'addPatientRemark', index)

    @staticmethod
    def bc_handle_additional_patient_details_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapseaditionaldetails', wait)

    @staticmethod
    def bc_handle_visit_admission_details_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapsevisitadmissiondetails', wait)

    @staticmethod
    def bc_handle_emergency_contact_details_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapseemergencycontact', wait)

    @staticmethod
    def store_or_pick_first(driver, locator_key: str, file_name: str, column: str, index: int):
        """Store an autocomplete value; an empty one gets the first option offered."""
        value = BaseCommandCaller.get_input_data_and_store_in_json(driver, locator_key, file_name, column, index)
        if not value:
            BaseCommandCaller.click(driver, locator_key)
            BaseCommandCaller.select_first_mat_option(driver, MAT_OPTIONS)
            value = BaseCommandCaller.get_input_data_and_store_in_json(driver, locator_key, file_name, column, index)
        return value

    @staticmethod
    def bc_handle_store_existing_additional_patient_details(driver, file_name: str, index: int):
        for locator_key, column in [('input_religion', 'religion'), ('input_maritalstatus', 'maritalstatus'),
                                    ('input_occupation', 'occupation'), ('input_addhouseno', 'addHouseNo'),
                                    ('input_addofficeno', 'addOfficeNo'), ('input_street1', 'street1'),
                                    ('input_street2', 'street2'), ('input_street3', 'street3'),
                                    ('input_street4', 'street4'), ('input_country', 'countryAditionalInfo')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)
        LibPatientRegistration.store_or_pick_first(driver, 'PG_PatientRegistration.input_states', file_name, 'state', index)
        LibPatientRegistration.store_or_pick_first(driver, 'PG_PatientRegistration.input_town', file_name, 'town', index)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_additionalpatientdetails_postcode', file_name, 'postalCode', index)

    @staticmethod
    def bc_handle_store_existing_visit_admission_details(driver, file_name: str, index: int):
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, 'PG_PatientRegistration.select_patienttype', file_name, 'patientType', index)
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, 'PG_PatientRegistration.select_privatcategory', file_name, 'privateCategory', index)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_doctor', file_name, 'doctor', index)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_doctorspecialist', file_name, 'doctorSpeciality', index)
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_visittype', file_name, 'visitType', index)
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, 'PG_PatientRegistration.select_previleage', file_name, 'privilageType', index)

    @staticmethod
    def bc_handle_store_existing_emergency_contact_details(driver, file_name: str, index: int):
        BaseCommandCaller.get_input_data_and_store_in_json(driver, 'PG_PatientRegistration.input_contactpersonname', file_name, 'contactPersonName', index)
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, 'PG_PatientRegistration.select_gender_emergencycontactdetails', file_name, 'genderEmergencyContact', index)
        for locator_key, column in [('input_relationtype', 'relationType'), ('input_icno_relationtype', 'emergencyDetailsIcNo'),
                                    ('input_street1_relationtype', 'street1Relation'), ('input_street2_relationtype', 'street2Relation'),
                                    ('input_street3_relationtype', 'street3Relation'), ('input_street4_relationtype', 'street4Relation'),
                                    ('input_country_relationtype', 'countryRelation')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)
        LibPatientRegistration.store_or_pick_first(driver, 'PG_PatientRegistration.input_state_relationtype', file_name, 'stateRelation', index)
        LibPatientRegistration.store_or_pick_first(driver, 'PG_PatientRegistration.input_city_relationtype', file_name, 'townRelation', index)
        for locator_key, column in [('input_postcode_relationtype', 'postcodeRelation'),
                                    ('input_countrycodemobile_relationtype', 'relationCountryCode'),
                                    ('input_mobileno_relationtype', 'relationMobileNumber'),
                                    ('input_houseno_relationtype', 'relationHouseNo'),
                                    ('input_officeno_relationtype', 'relationOfficeNo')]:
            BaseCommandCaller.get_input_data_and_store_in_json(driver, f'PG_PatientRegistration.{locator_key}', file_name, column, index)

    @staticmethod
    def bc_verify_existing_patient_registration_details_in_emergency_contact(driver, file_name: str, index: int,
                                                                             wait: int = 10000):
        """
        Check the emergency contact against the stored record. When the contact
        shares the patient's address the contact fields must show the patient address.
        """
        row = DataHelper.get_row(file_name, index)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_admissiondetails', wait, 'hard')
        BaseCommandCaller.hard_pause(driver, wait, True, 'Unstable in SIT')
        assert_fields(driver, {
            'PG_PatientRegistration.input_contactpersonname': row.get('contactPersonName'),
            'PG_PatientRegistration.input_relationtype': row.get('relationType'),
        })
        BaseCommandCaller.assert_selected_option(
            driver, 'PG_PatientRegistration.select_gender_emergencycontactdetails', row.get('genderEmergencyContact'))

        if BaseCommandCaller.get_checkbox_state(driver, 'PG_PatientRegistration.check_sameaspatientaddress'):
            columns = ['street1', 'street2', 'street3', 'street4', 'countryAditionalInfo', 'state', 'town', 'postalCode']
        else:
            columns = ['street1Relation', 'street2Relation', 'street3Relation', 'street4Relation', 'countryRelation',
                       'stateRelation', 'townRelation', 'postcodeRelation']
        locators = ['input_street1_relationtype', 'input_street2_relationtype', 'input_street3_relationtype',
                    'input_street4_relationtype', 'input_country_relationtype', 'input_state_relationtype',
                    'input_city_relationtype', 'input_postcode_relationtype']
        assert_fields(driver, {f'PG_PatientRegistration.{locator}': row.get(column)
                               for locator, column in zip(locators, columns)})
        assert_fields(driver, {
            'PG_PatientRegistration.input_countrycodemobile_relationtype': row.get('relationCountryCode'),
            'PG_PatientRegistration.input_mobileno_relationtype': row.get('relationMobileNumber'),
        })

    # In-patient admission

    @staticmethod
    def bc_handle_click_on_request_for_admission_button(driver, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_requestforadmission', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_requestforadmission')
        BaseCommandCaller.wait_until_locator_invisible(driver, SPINNER, wait)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.label_requestforadmission', wait, 'hard')

    @staticmethod
    def bc_handle_search_rfa_in_patient_registration(driver, from_date: str, to_date: str, rfa_id: str, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.label_requestforadmission', wait, 'hard')
        today = generate_date('today')
        if not is_blank(from_date) and from_date != today:
            replace_field(driver, 'PG_PatientRegistration.input_scheduleadmissionfromdate', from_date)
        if not is_blank(to_date) and to_date != today:
            replace_field(driver, 'PG_PatientRegistration.input_scheduleadmissiontodate', to_date)
        replace_field(driver, 'PG_PatientRegistration.input_admittingrfaid', rfa_id)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_go')

        result = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_PatientRegistration.chek_resultrfa'), 'rfaID', rfa_id)
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.click(driver, result)
        BaseCommandCaller.assert_checkbox_state(driver, result, True)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_admissionselect')
        BaseCommandCaller.wait_until_locator_invisible(driver, SPINNER, wait)
        BaseCommandCaller.hard_pause(driver, wait)

    @staticmethod
    def bc_handle_admission_expand_section(driver, wait: int = 5000):
        expand_section(driver, 'PG_PatientRegistration.card_collapseadmission', wait)

    @staticmethod
    def bc_handle_admission(driver, ward: str, bed_type: str, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.radio_transferpatient', wait, 'hard')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.check_wardandbed', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.check_wardandbed')
        logging.info(f"Admission confirmed for ward {ward}, bed type {bed_type}")

    @staticmethod
    def bc_handle_click_on_nav_edit(driver, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_navigationedit', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_navigationedit')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.popup_labelafterclickedit', wait, 'hard')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_ok', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_ok')
        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_chargetype', 'InPatient')

    @staticmethod
    def bc_verify_charge_type_is_in_patient(driver, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.select_chargetype', wait, 'hard')
        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_chargetype', 'InPatient')

    @staticmethod
    def bc_verify_charge_type_is_out_patient(driver, wait: int = 5000):
        BaseCommandCaller.hard_pause(driver, wait, True, 'Waiting for change the Status')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.select_chargetype', wait, 'hard')
        BaseCommandCaller.assert_selected_option(driver, 'PG_PatientRegistration.select_chargetype', 'OutPatient')

    @staticmethod
    def bc_cancel_admission(driver, cancelation_reason: str, wait: int = 5000):
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_canceladmission', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_canceladmission')
        BaseCommandCaller.hard_pause(driver, wait, True, 'Unstable in SIT')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.button_ok')
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_ok')
        BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.header_popupcancelreason')
        BaseCommandCaller.select_option(driver, 'PG_PatientRegistration.select_admissioncancelationreason', cancelation_reason)
        BaseCommandCaller.click(driver, 'PG_PatientRegistration.button_admissioncancelsave')
