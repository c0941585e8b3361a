import logging
from utilities.base_commands import BaseCommandCaller
from utilities.data_helper import DataHelper
from utilities.dob_generator import generate_and_update_dob
from utilities.mobile_number_generator import MobileNumberGenerator
from utilities.name_generator import NameGenerator
from utilities.nic_generator import generate_and_update_nic
from utilities.passport_expiry_generator import generate_and_update_expiry_date
from utilities.passport_number_generator import generate_and_update_passport_number
from libraries.form_steps import is_blank, replace_field, choose_mat_option
from libraries.lib_patient_registration import LibPatientRegistration, PASSPORT_TYPES, GUARDIAN_MYKAD_TYPES

PAGE = 'PG_PatientRegistration'


def is_unselected(value) -> bool:
    # Native selects report their placeholder, e.g. "Select Patient Type"
    return is_blank(value) or str(value).startswith('Select ')


class LibCommonRegistrationFieldsEdit:
    """
    Complete the fields an existing patient record left empty. The values shown on
    the page are stored in the data table first; a field is only edited when its
    stored column is blank, so recorded patient details are never overwritten.
    """

    @staticmethod
    def stored(file_name: str, index: int, column: str):
        return DataHelper.get_data(file_name, index, column)

    @staticmethod
    def needs_edit(file_name: str, index: int, column: str) -> bool:
        if is_blank(LibCommonRegistrationFieldsEdit.stored(file_name, index, column)):
            logging.info(f"{column} is empty on the existing record, editing it")
            return True
        return False

    @staticmethod
    def edit_text(driver, locator: str, column: str, value, file_name: str, index: int, wait: int = 3000,
                  mode: str = 'soft'):
        if not LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, column):
            return False
        BaseCommandCaller.is_locator_present(driver, f'{PAGE}.{locator}', wait, mode)
        replace_field(driver, f'{PAGE}.{locator}', value)
        return True

    @staticmethod
    def edit_mat_option(driver, locator: str, column: str, value: str, file_name: str, index: int,
                        wait: int = 3000, mode: str = 'soft'):
        if not LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, column):
            return False
        BaseCommandCaller.is_locator_present(driver, f'{PAGE}.{locator}', wait, mode)
        choose_mat_option(driver, f'{PAGE}.{locator}', value)
        return True

    @staticmethod
    def edit_select(driver, locator: str, column: str, value: str, file_name: str, index: int, wait: int = 3000):
        if not is_unselected(LibCommonRegistrationFieldsEdit.stored(file_name, index, column)):
            return False
        BaseCommandCaller.is_locator_present(driver, f'{PAGE}.{locator}', wait, 'soft')
        BaseCommandCaller.select_option(driver, f'{PAGE}.{locator}', value)
        BaseCommandCaller.get_selected_option_text_and_store_in_json(driver, f'{PAGE}.{locator}', file_name, column, index)
        return True

    # Patient info

    @staticmethod
    def bc_edit_patient_name(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'patientName'):
            BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_patientname', wait, 'hard')
            patient_name = NameGenerator.generate_and_update_json('patientName', file_name, index)
            BaseCommandCaller.clear_text_field(driver, f'{PAGE}.input_patientname')
            BaseCommandCaller.fill(driver, f'{PAGE}.input_patientname', patient_name, True)

    @staticmethod
    def bc_edit_patient_identification_type(driver, identification_type: str, file_name: str, index: int,
                                            wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.edit_mat_option(driver, 'input_identificationtype', 'identificationType',
                                                           identification_type, file_name, index, wait, 'hard'):
            DataHelper.update_data(file_name, 'identificationType', identification_type, index)

    @staticmethod
    def bc_edit_patient_ic_no(driver, gender: str, nic_type: str, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'patientNic'):
            BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_ic_no', wait, 'hard')
            nic = generate_and_update_nic(gender, 'patientNic', file_name, index, nic_type)
            replace_field(driver, f'{PAGE}.input_ic_no', nic)

    @staticmethod
    def bc_edit_patient_old_ic_or_passport(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'patientPassport'):
            BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_oldic_passport', wait, 'soft')
            passport_number = generate_and_update_passport_number('patientPassport', file_name, index)
            replace_field(driver, f'{PAGE}.input_oldic_passport', passport_number)

    @staticmethod
    def bc_edit_patient_passport_expiry_date(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'passportExpiery'):
            BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_passportexpiery', wait, 'soft')
            expiry_date = generate_and_update_expiry_date('passportExpiery', file_name, index)
            replace_field(driver, f'{PAGE}.input_passportexpiery', expiry_date)

    @staticmethod
    def bc_edit_patient_country_of_issue(driver, country_of_issue: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_mat_option(driver, 'input_countryofissue', 'countryofIssue',
                                                        country_of_issue, file_name, index, wait, 'hard')

    @staticmethod
    def bc_edit_patient_nationality(driver, nationality: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_text(driver, 'input_nationality', 'nationality', nationality,
                                                  file_name, index, wait, 'hard')

    @staticmethod
    def bc_edit_patient_dob(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'dob'):
            generated = generate_and_update_dob('expectedDob', 'expectedAge', file_name, index)
            replace_field(driver, f'{PAGE}.input_dob', generated["dob"])

    @staticmethod
    def bc_edit_patient_age(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'age'):
            age = LibCommonRegistrationFieldsEdit.stored(file_name, index, 'expectedAge')
            if is_blank(age):
                age = generate_and_update_dob('expectedDob', 'expectedAge', file_name, index)["age"]
            replace_field(driver, f'{PAGE}.input_age', age)

    @staticmethod
    def bc_edit_patient_race(driver, race: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_mat_option(driver, 'input_race', 'race', race, file_name, index,
                                                        wait, 'hard')

    @staticmethod
    def bc_edit_patient_gender(driver, gender: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_select(driver, 'select_gender', 'genders', gender, file_name, index, wait)

    @staticmethod
    def bc_edit_patient_email(driver, email: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_text(driver, 'input_email', 'email', email, file_name, index, wait, 'hard')

    @staticmethod
    def bc_edit_patient_mobile_no(driver, file_name: str, index: int, wait: int = 3000):
        """Always regenerated, whatever the record holds."""
        BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_mobileno', wait, 'soft')
        mobile_no = MobileNumberGenerator.generate_and_update_json('patientMobileNo', file_name, index)
        replace_field(driver, f'{PAGE}.input_mobileno', mobile_no)

    # Additional patient details

    @staticmethod
    def bc_edit_additional_patient_details(driver, religion: str, marital_status: str, occupation: str,
                                           street1: str, street2: str, street3: str, street4: str, country: str,
                                           state: str, town: str, postcode: str, file_name: str, index: int,
                                           wait: int = 3000):
        edit = LibCommonRegistrationFieldsEdit
        edit.edit_mat_option(driver, 'input_religion', 'religion', religion, file_name, index, wait)
        edit.edit_mat_option(driver, 'input_maritalstatus', 'maritalstatus', marital_status, file_name, index, wait)
        edit.edit_text(driver, 'input_occupation', 'occupation', occupation, file_name, index, wait)

        for locator, column in [('input_addhouseno', 'addHouseNo'), ('input_addofficeno', 'addOfficeNo')]:
            if edit.needs_edit(file_name, index, column):
                number = MobileNumberGenerator.generate_and_update_json(column, file_name, index)
                replace_field(driver, f'{PAGE}.{locator}', number)

        for locator, column, value in [('input_street1', 'street1', street1), ('input_street2', 'street2', street2),
                                       ('input_street3', 'street3', street3), ('input_street4', 'street4', street4)]:
            edit.edit_text(driver, locator, column, value, file_name, index, wait)
        edit.edit_mat_option(driver, 'input_country', 'countryAditionalInfo', country, file_name, index, wait)
        edit.edit_mat_option(driver, 'input_states', 'state', state, file_name, index, wait)
        edit.edit_mat_option(driver, 'input_town', 'town', town, file_name, index, wait)
        edit.edit_text(driver, 'input_additionalpatientdetails_postcode', 'postalCode', postcode, file_name, index, wait)

    # Visit and admission details

    @staticmethod
    def bc_edit_visit_admission_details_patient_type(driver, patient_type: str, file_name: str, index: int,
                                                     wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_select(driver, 'select_patienttype', 'patientType', patient_type,
                                                    file_name, index, wait)

    @staticmethod
    def bc_edit_visit_admission_details_private_category(driver, private_category: str, file_name: str, index: int,
                                                         wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_select(driver, 'select_privatcategory', 'privateCategory',
                                                    private_category, file_name, index, wait)

    @staticmethod
    def bc_edit_visit_admission_details_add_new_doctor(driver, file_name: str, index: int, wait: int = 3000):
        """Pick an available doctor when none is stored and make sure the doctor is ticked."""
        BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_doctor', wait, 'soft')
        is_doctor_checked = BaseCommandCaller.get_checkbox_state(driver, f'{PAGE}.check_isdoctorchecked')
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'doctor'):
            LibPatientRegistration.bc_handle_select_doctor(driver)
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_doctorspecialist', file_name, 'doctorSpeciality', index)
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_doctor', file_name, 'doctor', index)
            if not is_doctor_checked:
                BaseCommandCaller.click(driver, f'{PAGE}.check_isdoctorchecked')

    @staticmethod
    def bc_edit_visit_admission_details_visit_type(driver, visit_type: str, file_name: str, index: int,
                                                   wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_mat_option(driver, 'input_visittype', 'visitType', visit_type,
                                                        file_name, index, wait)

    @staticmethod
    def bc_edit_visit_admission_details_privilege(driver, privilege_type: str, file_name: str, index: int,
                                                  wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_select(driver, 'select_previleage', 'privilageType', privilege_type,
                                                    file_name, index, wait)

    @staticmethod
    def bc_edit_visit_admission_details_privilege_remark(driver, privilege_remark: str, file_name: str, index: int):
        if not BaseCommandCaller.get_checkbox_state(driver, f'{PAGE}.check_isaddremarkchecked'):
            BaseCommandCaller.click(driver, f'{PAGE}.check_isaddremarkchecked')
            replace_field(driver, f'{PAGE}.textarea_addremark', privilege_remark)
        else:
            LibCommonRegistrationFieldsEdit.edit_text(driver, 'textarea_addremark', 'privilegeRemark',
                                                      privilege_remark, file_name, index)

    # Emergency contact

    @staticmethod
    def bc_edit_emergency_contact_details_contact_name(driver, file_name: str, index: int, wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'contactPersonName'):
            BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_contactpersonname', wait, 'soft')
            contact_name = NameGenerator.generate_and_update_json('contactPersonName', file_name, index)
            replace_field(driver, f'{PAGE}.input_contactpersonname', contact_name)

    @staticmethod
    def bc_edit_emergency_contact_details_gender(driver, gender: str, file_name: str, index: int, wait: int = 3000):
        LibCommonRegistrationFieldsEdit.edit_select(driver, 'select_gender_emergencycontactdetails',
                                                    'genderEmergencyContact', gender, file_name, index, wait)

    @staticmethod
    def bc_edit_emergency_contact_details_relationship_type(driver, relation_type: str, file_name: str, index: int,
                                                            wait: int = 3000):
        if LibCommonRegistrationFieldsEdit.edit_mat_option(driver, 'input_relationtype', 'relationType',
                                                           relation_type, file_name, index, wait):
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_relationtype', file_name, 'relationType', index)

    @staticmethod
    def bc_edit_emergency_contact_details_ic_no(driver, gender: str, nic_type: str, file_name: str, index: int):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'emergencyDetailsIcNo'):
            nic = generate_and_update_nic(gender, 'emergencyDetailsIcNo', file_name, index, nic_type)
            replace_field(driver, f'{PAGE}.input_icno_relationtype', nic)

    @staticmethod
    def bc_edit_emergency_contact_details_address(driver, street1: str, street2: str, street3: str, street4: str,
                                                  country: str, state: str, town: str, postcode: str,
                                                  file_name: str, index: int, wait: int = 3000):
        """Fill the empty parts of the contact's address and store what the page then shows."""
        edit = LibCommonRegistrationFieldsEdit
        for locator, column, value in [('input_street1_relationtype', 'street1Relation', street1),
                                       ('input_street2_relationtype', 'street2Relation', street2),
                                       ('input_street3_relationtype', 'street3Relation', street3),
                                       ('input_street4_relationtype', 'street4Relation', street4)]:
            if edit.edit_text(driver, locator, column, value, file_name, index, wait):
                BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.{locator}', file_name, column, index)

        for locator, column, value in [('input_country_relationtype', 'countryRelation', country),
                                       ('input_state_relationtype', 'stateRelation', state),
                                       ('input_city_relationtype', 'townRelation', town)]:
            if edit.edit_mat_option(driver, locator, column, value, file_name, index, wait):
                BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.{locator}', file_name, column, index)

        if edit.edit_text(driver, 'input_postcode_relationtype', 'postcodeRelation', postcode, file_name, index, wait):
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_postcode_relationtype', file_name, 'postcodeRelation', index)

    @staticmethod
    def bc_edit_emergency_contact_details_mobile_no(driver, file_name: str, index: int):
        if LibCommonRegistrationFieldsEdit.needs_edit(file_name, index, 'relationMobileNumber'):
            mobile_no = MobileNumberGenerator.generate_and_update_json('relationMobileNumber', file_name, index)
            replace_field(driver, f'{PAGE}.input_mobileno_relationtype', mobile_no)

    # Existing patient sections

    @staticmethod
    def bc_handle_existing_patient_info_mandatory_fields(driver, identification_type: str, gender: str, nic_type: str,
                                                         country_of_issue: str, nationality: str, race: str,
                                                         email: str, file_name: str, index: int, wait: int = 10000):
        """
        Complete the mandatory patient info of an existing record. The identity
        fields edited depend on the identification type.
        """
        edit = LibCommonRegistrationFieldsEdit
        edit.bc_edit_patient_name(driver, file_name, index, wait)
        if identification_type == 'MyKAD':
            edit.bc_edit_patient_identification_type(driver, identification_type, file_name, index, wait)
            edit.bc_edit_patient_ic_no(driver, gender, nic_type, file_name, index, wait)
        elif identification_type in PASSPORT_TYPES:
            edit.bc_edit_patient_identification_type(driver, identification_type, file_name, index, wait)
            edit.bc_edit_patient_old_ic_or_passport(driver, file_name, index, wait)
            edit.bc_edit_patient_passport_expiry_date(driver, file_name, index, wait)
            edit.bc_edit_patient_country_of_issue(driver, country_of_issue, file_name, index, wait)
            edit.bc_edit_patient_nationality(driver, nationality, file_name, index, wait)
            edit.bc_edit_patient_dob(driver, file_name, index, wait)
            edit.bc_edit_patient_age(driver, file_name, index, wait)
        elif identification_type in GUARDIAN_MYKAD_TYPES:
            edit.bc_edit_patient_identification_type(driver, identification_type, file_name, index, wait)
            edit.bc_edit_patient_old_ic_or_passport(driver, file_name, index, wait)
            edit.bc_edit_patient_dob(driver, file_name, index, wait)
            edit.bc_edit_patient_age(driver, file_name, index, wait)
        edit.bc_edit_patient_race(driver, race, file_name, index, wait)
        edit.bc_edit_patient_gender(driver, gender, file_name, index, wait)
        edit.bc_edit_patient_email(driver, email, file_name, index, wait)
        edit.bc_edit_patient_mobile_no(driver, file_name, index, wait)

    @staticmethod
    def bc_handle_edit_existing_visit_admission_details(driver, patient_type: str, private_category: str,
                                                        is_privilege: bool, privilege_type: str, privilege_remark: str,
                                                        corporate_name: str, credit_limit_exceed: str,
                                                        credit_balance_limit: str, corporate_amount: str,
                                                        co_guarantor: str, is_referred_by_clinic: bool,
                                                        clinic_name: str, file_name: str, index: int,
                                                        wait: int = 3000):
        edit = LibCommonRegistrationFieldsEdit
        edit.bc_edit_visit_admission_details_patient_type(driver, patient_type, file_name, index, wait)
        if patient_type == 'Corporate':
            LibPatientRegistration.bc_handle_corporate_details(
                driver, corporate_name, credit_limit_exceed, credit_balance_limit, corporate_amount, co_guarantor,
                file_name, index, wait)
            BaseCommandCaller.click(driver, f'{PAGE}.button_savecorporate')
            displayed = BaseCommandCaller.get_input_data(driver, f'{PAGE}.input_disabled_displaycorporatename')
            logging.info(f"Corporate shown on the visit: {displayed}")
        edit.bc_edit_visit_admission_details_private_category(driver, private_category, file_name, index, wait)

        if not BaseCommandCaller.is_locator_present(driver, f'{PAGE}.input_doctor', wait, 'soft'):
            BaseCommandCaller.click(driver, f'{PAGE}.button_addnewdoctor')
        edit.bc_edit_visit_admission_details_add_new_doctor(driver, file_name, index, wait)
        BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_doctorspecialist', file_name, 'doctorSpeciality', index)
        BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_doctor', file_name, 'doctor', index)
        if is_blank(BaseCommandCaller.get_input_data(driver, f'{PAGE}.input_doctor')):
            LibPatientRegistration.bc_handle_select_doctor(driver)
            BaseCommandCaller.store_data_from_locator_to_json(driver, f'{PAGE}.input_doctor', file_name, 'doctor', index)
        if not BaseCommandCaller.get_checkbox_state(driver, f'{PAGE}.check_isdoctorchecked'):
            BaseCommandCaller.click(driver, f'{PAGE}.check_isdoctorchecked')
        BaseCommandCaller.assert_checkbox_state(driver, f'{PAGE}.check_isdoctorchecked', True)

        if is_privilege is True:
            edit.bc_edit_visit_admission_details_privilege(driver, privilege_type, file_name, index, wait)
            edit.bc_edit_visit_admission_details_privilege_remark(driver, privilege_remark, file_name, index)
        if is_referred_by_clinic is True:
            doctor = DataHelper.get_data(file_name, index, 'doctor')
            LibPatientRegistration.bc_handle_refer_by_external_clinic(driver, clinic_name, doctor, file_name, index)

    @staticmethod
    def bc_handle_existing_emergency_contact_details_mandatory_fields(driver, gender: str, relation_type: str,
                                                                      nic_type: str, street1: str, street2: str,
                                                                      street3: str, street4: str, country: str,
                                                                      state: str, town: str, postcode: str,
                                                                      file_name: str, index: int):
        edit = LibCommonRegistrationFieldsEdit
        edit.bc_edit_emergency_contact_details_contact_name(driver, file_name, index)
        edit.bc_edit_emergency_contact_details_gender(driver, gender, file_name, index)
        edit.bc_edit_emergency_contact_details_relationship_type(driver, relation_type, file_name, index)
        edit.bc_edit_emergency_contact_details_ic_no(driver, gender, nic_type, file_name, index)
        edit.bc_edit_emergency_contact_details_address(driver, street1, street2, street3, street4, country, state,
                                                       town, postcode, file_name, index)
        edit.bc_edit_emergency_contact_details_mobile_no(driver, file_name, index)
