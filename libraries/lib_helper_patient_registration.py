import logging
from utilities.base_commands import BaseCommandCaller
from utilities.data_helper import DataHelper
from libraries.lib_appointment import LibAppointment
from libraries.lib_common import LibCommon
from libraries.lib_common_registration_fields_edit import LibCommonRegistrationFieldsEdit
from libraries.lib_patient_registration import LibPatientRegistration

WAIT_TIME = 8000
SHORT_WAIT_TIME = 3000
APPOINTMENT_API_ENDPOINT = "https://sitmcare21.columbiaasia.com/api/appointmentapi/AppointmentAPI/AddAppointmentSchedule"


def guardian_section_enabled(driver, wait) -> bool:
    return BaseCommandCaller.is_locator_present(driver, 'PG_PatientRegistration.card_collapseguardian', wait, 'soft')


def book_appointment(driver, dt: dict, file_name: str, index: int) -> dict:
    return LibAppointment.bc_add_appointment_api(
        driver, dt['genders'], dt['nicType'], 'patientNic', 'dob', 'age', 'patientMobileNo',
        dt['appointmentTime'], dt['appointmentSlot'], 'patientName', dt['doctorCode'], dt['email'],
        file_name, index, dt.get('appointmentApiEndpoint') or APPOINTMENT_API_ENDPOINT)


def add_new_contact(driver, dt: dict, address: dict, file_name: str, index: int):
    LibPatientRegistration.bc_handle_add_new_contact_expand_section(driver)
    LibPatientRegistration.bc_handle_add_new_contact(
        driver, dt['genderEmergencyContact'], dt['relationType'], dt['nicType'], address['street1'],
        address['street2'], address['street3'], address['street4'], address['country'], address['state'],
        address['town'], address['postcode'], dt['relationCountryCode'], file_name, index)


def relation_address(dt: dict) -> dict:
    return {
        'street1': dt['street1Relation'], 'street2': dt['street2Relation'], 'street3': dt['street3Relation'],
        'street4': dt['street4Relation'], 'country': dt['countryRelation'], 'state': dt['stateRelation'],
        'town': dt['townRelation'], 'postcode': dt['postcodeRelation'],
    }


def patient_address(dt: dict) -> dict:
    return {
        'street1': dt['street1'], 'street2': dt['street2'], 'street3': dt['street3'], 'street4': dt['street4'],
        'country': dt['countryAditionalInfo'], 'state': dt['state'], 'town': dt['town'],
        'postcode': dt['postalCode'],
    }


def handle_patient_registration(driver, dt: dict, data_tables: list, patient_position: int = 1,
                                is_twin_first=None, is_twin_second=None):
    """
    Register a new out-patient end to end: page checks, optional appointment
    booked through the API, patient info, additional details, visit, emergency
    contact, optional new contact, medico-legal case, guardian, register and verify.

    dt is the out-patient registration row and data_tables the test case's
    [{name, pickIndex}] list; generated values go to data_tables[patient_position].
    The twin flags default to the row's isTwinFirst and isTwinSecond.
    """
    file_name = data_tables[patient_position]["name"]
    index = data_tables[patient_position]["pickIndex"]
    if is_twin_first is None:
        is_twin_first = dt['isTwinFirst']
    if is_twin_second is None:
        is_twin_second = dt['isTwinSecond']

    LibPatientRegistration.bc_verify_page_navigation(driver, dt['registrationheader'], dt['registration_url'], WAIT_TIME)
    LibPatientRegistration.bc_handle_charge_type(driver, dt['chargeTypeLabel'], dt['chargeType'], SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_out_patient_registration_type(driver, dt['careTypes'], SHORT_WAIT_TIME)
    LibPatientRegistration.bc_verify_registration_patient_field(driver, SHORT_WAIT_TIME)

    is_appointment = bool(dt.get('isAppoitnment'))
    appointment = book_appointment(driver, dt, file_name, index) if is_appointment else {}

    LibPatientRegistration.bc_handle_input_name(driver, is_appointment, file_name, index, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_fill_patient_info(
        driver, dt['identificationType'], dt['genders'], dt['countryofIssue'], dt['nationality'], dt['race'],
        dt['genders'], dt['countryCode'], dt['nonMyKadInformation'], dt['email'], dt['nicType'], dt['isNewBorn'],
        dt['needPatientRemark'], dt['addPatientRemark'], is_appointment, appointment.get('icNo'),
        appointment.get('appointmentId'), appointment.get('age'), appointment.get('mobileNumber'), dt['email'],
        appointment.get('patientName'), is_twin_first, is_twin_second, 'patientNic', 'DOB',
        'patientMobileNo', file_name, index, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_additional_patient_details(
        driver, dt['religion'], dt['maritalstatus'], dt['occupation'], dt['countryCode'], dt['street1'],
        dt['street2'], dt['street3'], dt['street4'], dt['countryAditionalInfo'], dt['state'], dt['town'],
        dt['postalCode'], file_name, index, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_visit_admission_details(
        driver, is_appointment, dt['patientType'], dt['privateCategory'], dt['isPrivilege'], dt['privilageType'],
        dt['privilageRemark'], dt['corporateName'], dt['creditLimitExceeded'], dt['creditBalanceLimit'],
        dt['amount'], dt['coGarantor'], dt['isReferredByClinic'], dt['clinicName'], file_name, index,
        SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_emergency_contact_details(
        driver, dt['genderEmergencyContact'], dt['relationType'], dt['isSamePatientAddress'], dt['street1Relation'],
        dt['street2Relation'], dt['street3Relation'], dt['street4Relation'], dt['countryRelation'],
        dt['stateRelation'], dt['townRelation'], dt['postcodeRelation'], dt['relationCountryCode'], file_name,
        index, SHORT_WAIT_TIME)

    if dt.get('isAddNewContact'):
        add_new_contact(driver, dt, relation_address(dt), file_name, index)

    if 'mlc' in dt['careTypes'].split('|'):
        LibPatientRegistration.bc_handle_medico_legal_case(
            driver, dt['mlcNo'], dt['mlcType'], dt['modeofArival'], dt['mlcMrn'], dt['mlcCountryCode'],
            dt['mlcRemark'], file_name, index)

    if guardian_section_enabled(driver, dt['wait']):
        LibPatientRegistration.bc_handle_guardian_details_expand_section(driver)
        LibPatientRegistration.bc_handle_guardian_details(
            driver, dt['isGuardianMrn'], dt['guardianMrn'], dt['isSameAsEmergencyDetails'], dt['street1Relation'],
            dt['street2Relation'], dt['street3Relation'], dt['street4Relation'], dt['countryRelation'],
            dt['stateRelation'], dt['townRelation'], dt['postcodeRelation'], dt['relationCountryCode'],
            dt['relationMobileNumber'], dt['relationRetrievCountryCode'], dt['guardianStreet1'],
            dt['guardianCountry'], dt['guardianState'], dt['guardianCity'], file_name, index, dt['wait'])

    LibPatientRegistration.bc_handle_click_on_register_button(driver, dt['isNewBorn'])
    LibPatientRegistration.bc_handle_store_mrn_and_visit_no(driver, file_name, index)
    if dt.get('isEdit'):
        add_new_contact(driver, dt, patient_address(dt), file_name, index)
    LibPatientRegistration.bc_verify_registration_details_in_patient_info(driver, file_name, index)
    LibPatientRegistration.bc_verify_registration_details_in_additional_patient_details(
        driver, dt['needPatientRemark'], dt['addPatientRemark'], file_name, index)
    LibPatientRegistration.bc_verify_registration_details_in_visit_admission(
        driver, dt['isPrivilege'], dt['privilageType'], dt['privilageRemark'], file_name, index)
    LibPatientRegistration.bc_verify_registration_details_in_emergency_contact(
        driver, dt['isSamePatientAddress'], file_name, index)
    logging.info(f"Registered out-patient {DataHelper.get_data(file_name, index, 'mrnNo')}")


def handle_out_patient_registration(driver, dt: dict, data_tables: list, patient_position: int = 0):
    """
    Navigate to registration and register the patient. A row with both twin
    flags registers the first twin and then the second, clearing the page in between.
    """
    is_twins = bool(dt['isTwinFirst'] and dt['isTwinSecond'])
    iterations = 2 if is_twins else 1
    for iteration in range(iterations):
        logging.info(f"Iteration {iteration + 1} started.")
        LibCommon.bc_handle_main_navigation_link_click(driver, dt['mainnavgationname'], SHORT_WAIT_TIME)
        LibCommon.bc_handle_sub_navigation_link_click(driver, dt['subnavgationname'], WAIT_TIME)
        if is_twins:
            handle_patient_registration(driver, dt, data_tables, patient_position,
                                        is_twin_first=iteration == 0, is_twin_second=iteration == 1)
            LibPatientRegistration.bc_hand_clear_data_nav(driver, SHORT_WAIT_TIME)
        else:
            handle_patient_registration(driver, dt, data_tables, patient_position)
        logging.info(f"Iteration {iteration + 1} completed.")


def handle_register_inpatients(driver, dt_rfa: dict, dt_inpatient: dict, data_tables: list):
    """Admit the patient of the stored RFA as an in-patient."""
    LibCommon.bc_handle_click_on_menu(driver, dt_inpatient['mainnavgationname'], SHORT_WAIT_TIME)
    LibCommon.bc_handle_sub_navigation_link_click(driver, dt_inpatient['subnavgationname'], SHORT_WAIT_TIME)
    if guardian_section_enabled(driver, SHORT_WAIT_TIME):
        LibPatientRegistration.bc_handle_guardian_details_expand_section(driver)

    LibPatientRegistration.bc_handle_click_on_request_for_admission_button(driver, SHORT_WAIT_TIME)
    rfa_id = DataHelper.get_data(data_tables[0]["name"], data_tables[0]["pickIndex"], 'rfaId')
    LibPatientRegistration.bc_handle_search_rfa_in_patient_registration(
        driver, dt_inpatient['fromDate'], dt_inpatient['toDate'], rfa_id, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_admission_expand_section(driver, SHORT_WAIT_TIME)
    bed_type = DataHelper.get_data(data_tables[0]["name"], data_tables[0]["pickIndex"], 'bedType')
    LibPatientRegistration.bc_handle_admission(driver, dt_rfa['ward'], bed_type, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_click_on_nav_edit(driver, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_verify_charge_type_is_in_patient(driver, SHORT_WAIT_TIME)


def handle_existing_patient_mrn_extract(driver, dt: dict, data_tables: list):
    """Pick an existing MyKAD patient without an open visit and store their details."""
    LibPatientRegistration.bc_verify_registration_patient_field(driver, SHORT_WAIT_TIME)
    LibPatientRegistration.bc_handle_mrn_search_without_visit_number(
        driver, dt['mrnInputManually'], dt['patientMrn'], 'MyKAD')
    LibPatientRegistration.bc_handle_store_existing_patient_info(
        driver, data_tables[1]["name"], data_tables[1]["pickIndex"])


def handle_existing_out_patient_registration(driver, dt: dict, data_tables: list):
    """
    Open a visit for an existing patient: load the record by MRN (skipped for a
    direct admission, where the patient is already on the page), store what it
    holds, complete the empty mandatory fields, register and verify.
    """
    file_name = data_tables[1]["name"]
    index = data_tables[1]["pickIndex"]

    if not dt.get('isDirect'):
        LibPatientRegistration.bc_verify_page_navigation(driver, dt['registrationheader'], dt['registration_url'], WAIT_TIME)
    LibPatientRegistration.bc_handle_out_patient_registration_type(driver, dt['careTypes'], SHORT_WAIT_TIME)
    if not dt.get('isDirect'):
        handle_existing_patient_mrn_extract(driver, dt, data_tables)

    LibPatientRegistration.bc_handle_additional_patient_details_expand_section(driver)
    LibPatientRegistration.bc_handle_store_existing_additional_patient_details(driver, file_name, index)
    LibPatientRegistration.bc_handle_visit_admission_details_expand_section(driver)
    LibPatientRegistration.bc_handle_store_existing_visit_admission_details(driver, file_name, index)
    LibPatientRegistration.bc_handle_emergency_contact_details_expand_section(driver)
    LibPatientRegistration.bc_handle_store_existing_emergency_contact_details(driver, file_name, index)

    LibCommonRegistrationFieldsEdit.bc_handle_existing_patient_info_mandatory_fields(
        driver, dt['expectedIdentificationType'], dt['gender'], dt['nicType'], dt['expectedCountryofIssue'],
        dt['expectedNationality'], dt['expectedRace'], dt['expectedEmail'], file_name, index)
    LibCommonRegistrationFieldsEdit.bc_edit_additional_patient_details(
        driver, dt['expectedReligion'], dt['expectedMaritalStatus'], dt['expectedOccupation'], dt['street1'],
        dt['street2'], dt['street3'], dt['street4'], dt['countryAditionalInfo'], dt['state'], dt['town'],
        dt['postalCode'], file_name, index)
    LibCommonRegistrationFieldsEdit.bc_handle_edit_existing_visit_admission_details(
        driver, dt['expectedPatientType'], dt['expectedPrivateCategory'], dt['isPrivilege'], dt['expectedPrivilege'],
        dt['privilageRemark'], dt['corporateName'], dt['creditLimitExceeded'], dt['creditBalanceLimit'],
        dt['amount'], dt['coGarantor'], dt['isReferredByClinic'], dt['clinicName'], file_name, index, SHORT_WAIT_TIME)
    LibCommonRegistrationFieldsEdit.bc_handle_existing_emergency_contact_details_mandatory_fields(
        driver, dt['expectedGenderEmergencyContact'], dt['expectedRelationType'], dt['nicType'],
        dt['emergencyExpectedStreet1'], dt['emergencyExpectedStreet2'], dt['emergencyExpectedStreet3'],
        dt['emergencyExpectedStreet4'], dt['emergencyExpectedCountry'], dt['emergencyExpectedState'],
        dt['emergencyExpectedTown'], dt['emergencyExpectedPostalCode'], file_name, index)

    if guardian_section_enabled(driver, dt['wait']):
        row = DataHelper.get_row(file_name, index)
        LibPatientRegistration.bc_handle_guardian_details_expand_section(driver)
        LibPatientRegistration.bc_handle_guardian_details(
            driver, dt['isGuardianMrn'], dt['guardianMrn'], dt['isSameAsEmergencyDetails'], row.get('street1Relation'),
            row.get('street2Relation'), row.get('street3Relation'), row.get('street4Relation'),
            row.get('countryRelation'), row.get('stateRelation'), row.get('townRelation'),
            row.get('postcodeRelation'), row.get('relationCountryCode'), row.get('relationMobileNumber'),
            row.get('relationRetrievCountryCode'), dt['guardianStreet1'], dt['guardianCountry'],
            dt['guardianState'], dt['guardianCity'], file_name, index, dt['wait'])

    LibPatientRegistration.bc_handle_click_on_register_button(driver, dt['isNewBorn'])
    LibPatientRegistration.bc_handle_store_mrn_and_visit_no(driver, file_name, index)
    LibPatientRegistration.bc_verify_registration_details_in_visit_admission(
        driver, dt['isPrivilege'], dt['expectedPrivilege'], dt['expectedPrivilageRemark'], file_name, index)
    LibPatientRegistration.bc_verify_existing_patient_registration_details_in_emergency_contact(driver, file_name, index)
    logging.info(f"Opened a visit for existing patient {DataHelper.get_data(file_name, index, 'mrnNo')}")
