import logging
from utilities.base_commands import BaseCommandCaller
from utilities.data_helper import DataHelper
from libraries.lib_bed_enquiry import LibBedEnquiry
from libraries.lib_common import LibCommon
from libraries.lib_request_for_admission import LibRequestForAdmission

SHORT_WAIT_TIME = 3000


def street_columns(row: dict, column_template: str) -> dict:
    """Pick street1..street4 from a row, e.g. column_template "street{n}Relation"."""
    return {f"street{n}": row.get(column_template.format(n=n)) for n in range(1, 5)}


def patient_guarantor(patient_row: dict) -> dict:
    contact = street_columns(patient_row, 'street{n}')
    contact.update({
        "name": patient_row.get('patientName'),
        "icNo": patient_row.get('patientNic'),
        "passportOrOldIcNo": patient_row.get('passportNumber'),
        "countryCode": patient_row.get('countryCode'),
        "mobileNo": patient_row.get('patientMobileNo'),
        "country": patient_row.get('countryAditionalInfo'),
        "state": patient_row.get('state'),
        "city": patient_row.get('town'),
        "postcode": patient_row.get('postalCode'),
    })
    return contact


def emergency_guarantor(patient_row: dict) -> dict:
    contact = street_columns(patient_row, 'street{n}Relation')
    contact.update({
        "name": patient_row.get('contactPersonName'),
        "relationType": patient_row.get('relationType'),
        "countryCode": patient_row.get('relationCountryCode'),
        "mobileNo": patient_row.get('relationMobileNumber'),
        "country": patient_row.get('countryRelation'),
        "state": patient_row.get('stateRelation'),
        "city": patient_row.get('townRelation'),
        "postcode": patient_row.get('postcodeRelation'),
    })
    return contact


def new_guarantor(dt_rfa: dict) -> dict:
    contact = street_columns(dt_rfa, 'guarantorStreet{n}')
    contact.update({
        "relationType": dt_rfa.get('guarantorRelationType'),
        "countryCode": dt_rfa.get('guarantorCountryCode'),
        "country": dt_rfa.get('guarantorCountry'),
        "state": dt_rfa.get('guarantorState'),
        "city": dt_rfa.get('guarantorTown'),
        "postcode": dt_rfa.get('guarantorPostcode'),
    })
    return contact


def search_rfa(driver, dt_rfa: dict, admission_state: str, rfa_id: str):
    LibRequestForAdmission.bc_handle_click_on_clear_button(driver, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_handle_click_on_clear_popup_ok_button(driver, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_search_rfa_id(
        driver, dt_rfa['fromDate'], dt_rfa['toDate'], admission_state, rfa_id, SHORT_WAIT_TIME)


def request_for_admission_part_one(driver, dt_rfa: dict, dt_patient: dict, data_tables: list):
    """
    Create the RFA for the registered patient, save it, store the RFA ID and
    reopen it through the search. Returns the stored RFA row.
    """
    rfa_table, rfa_index = data_tables[0]["name"], data_tables[0]["pickIndex"]
    patient_table, patient_index = data_tables[1]["name"], data_tables[1]["pickIndex"]

    LibCommon.bc_handle_click_on_menu(driver, dt_rfa['mainnavgationname'], SHORT_WAIT_TIME)
    LibCommon.bc_handle_sub_navigation_link_click(driver, dt_rfa['subnavgationname'], SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_handle_rfa_patient_info(
        driver, dt_patient.get('patientNic'), dt_patient.get('passportNumber'), dt_patient.get('isDirect'),
        dt_patient.get('isNewBorn'), patient_table, patient_index, SHORT_WAIT_TIME)

    patient_row = DataHelper.get_row(patient_table, patient_index)
    LibRequestForAdmission.bc_handle_part_one_doctor_section_expand(driver)
    LibRequestForAdmission.bc_part_one_doctor(
        driver, dt_rfa['isElectiveAdmission'], dt_rfa['isDayCare'], dt_rfa['isNewBorn'], dt_rfa['dateType'],
        dt_rfa['howManyDaysFutureOrPast'], dt_rfa['estimatedLegnthofStay'], dt_rfa['estimatedCost'],
        dt_rfa['otherRemark'], dt_rfa['isCashPayment'], dt_rfa['isCorporate'], patient_row.get('doctor'),
        dt_rfa['uploadFilePath'], rfa_table, rfa_index, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_handle_click_on_save_button(driver, SHORT_WAIT_TIME)

    rfa_id = LibRequestForAdmission.bc_store_rfa_id(driver, rfa_table, rfa_index, SHORT_WAIT_TIME)
    if rfa_id is None:
        logging.error("RFA ID is null. Cannot proceed with search.")
        raise AssertionError("RFA ID is null. Test case marked as failed.")

    BaseCommandCaller.hard_pause(driver, SHORT_WAIT_TIME)
    search_rfa(driver, dt_rfa, dt_rfa['admissionState'], rfa_id)

    rfa_row = DataHelper.get_row(rfa_table, rfa_index)
    LibRequestForAdmission.bc_verify_rfa_patient_info(
        driver, patient_row.get('isNewBorn'), patient_row.get('mrnNo'), patient_row.get('patientName'),
        patient_row.get('patientNic'), patient_row.get('passportNumber'), patient_row.get('patientGurdianNic'),
        patient_row.get('genders'), patient_row.get('patientMrn'), patient_row.get('age'), rfa_row.get('rfaId'),
        patient_row.get('isDirect'), SHORT_WAIT_TIME)

    if dt_rfa.get('isCancel'):
        LibCommon.bc_handle_click_on_navigation_cancel_button(driver, SHORT_WAIT_TIME)
        LibRequestForAdmission.bc_cancel_rfa(driver, dt_rfa['cancelationReason'], SHORT_WAIT_TIME)
        search_rfa(driver, dt_rfa, 'Cancel', rfa_id)

    LibRequestForAdmission.bc_verify_part_one_doctor(
        driver, dt_rfa['isElectiveAdmission'], dt_rfa['isDayCare'], dt_rfa['isNewBorn'],
        rfa_row.get('scheduleAdmissionDate'), dt_rfa['estimatedLegnthofStay'], dt_rfa['estimatedCost'],
        dt_rfa['isCashPayment'], dt_rfa['isCorporate'], patient_row.get('doctor'), SHORT_WAIT_TIME)
    return rfa_row


def handle_request_for_admission_new_part_one(driver, dt_rfa: dict, dt_patient: dict, data_tables: list):
    """Part 1 of an RFA for a newly registered patient, with the optional deposit edit."""
    request_for_admission_part_one(driver, dt_rfa, dt_patient, data_tables)
    LibRequestForAdmission.bc_verify_part_one_fields_disabled(driver, SHORT_WAIT_TIME)

    if dt_rfa.get('isPartOneEdit'):
        LibCommon.bc_handle_click_on_nav_edit_button(driver, SHORT_WAIT_TIME)
        LibRequestForAdmission.bc_handle_click_on_edit_button(driver, SHORT_WAIT_TIME)
        LibRequestForAdmission.bc_edit_part_one_deposit_to_be_collected(
            driver, dt_rfa['editDepositToBeCollect'], SHORT_WAIT_TIME)
        LibCommon.bc_handle_click_on_nav_save_button(driver, SHORT_WAIT_TIME)
        LibRequestForAdmission.bc_verify_edit_part_one_deposit_to_be_collected(
            driver, dt_rfa['editDepositToBeCollect'], SHORT_WAIT_TIME)


def handle_request_for_admission_existing_part_one(driver, dt_rfa: dict, dt_patient: dict, data_tables: list):
    """Part 1 of an RFA for an existing patient loaded by MRN."""
    request_for_admission_part_one(driver, dt_rfa, dt_patient, data_tables)


def handle_request_for_admission_part_two(driver, dt_rfa: dict, data_tables: list):
    """
    Part 2 of the RFA: room and board, admission acknowledgement, guarantor,
    staff and signed acknowledgements, then draft and save. Skipped unless the
    row sets isPartTwo.
    """
    if dt_rfa.get('isPartTwo') is not True:
        logging.info("Part two not requested, skipping")
        return

    rfa_table, rfa_index = data_tables[0]["name"], data_tables[0]["pickIndex"]
    rfa_row = DataHelper.get_row(rfa_table, rfa_index)
    patient_row = DataHelper.get_row(data_tables[1]["name"], data_tables[1]["pickIndex"])

    BaseCommandCaller.hard_pause(driver, SHORT_WAIT_TIME, False, 'Stablize the page')
    LibRequestForAdmission.bc_handle_part_two_patient_section_expand(driver)
    LibRequestForAdmission.bc_part_two_patient_room_and_board_information(
        driver, dt_rfa['ward'], rfa_row.get('bedType'), SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_part_two_patient_admission_acknowledgement(
        driver, dt_rfa['isCashPaymentPartOne'], dt_rfa['isCorporatePartTwo'], dt_rfa['debetorCode'],
        dt_rfa['insurancePercentage'], dt_rfa['insuranceAmount'], dt_rfa['roomBoardLimit'],
        dt_rfa['roomEntitlement'], dt_rfa['specialRequest'], dt_rfa['remark'], SHORT_WAIT_TIME)

    patient = patient_guarantor(patient_row)
    patient["relationType"] = dt_rfa.get('relationType')
    LibRequestForAdmission.bc_part_two_patient_guarantor_information(
        driver, dt_rfa['isSameAsPatientInfo'], patient, dt_rfa['isSameAsEmergency'],
        emergency_guarantor(patient_row), dt_rfa['nicType'], new_guarantor(dt_rfa), rfa_table, rfa_index,
        SHORT_WAIT_TIME)

    LibRequestForAdmission.bc_hospital_staff_acknowledgement(driver, dt_rfa['nicType'], rfa_table, rfa_index, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_patient_acknowledgement(driver, rfa_table, rfa_index, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_guarantor_acknowledgement(driver, rfa_table, rfa_index, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_click_on_draft_button(driver, SHORT_WAIT_TIME)
    BaseCommandCaller.hard_pause(driver, SHORT_WAIT_TIME)
    LibRequestForAdmission.bc_handle_click_on_save_button(driver, SHORT_WAIT_TIME)
    BaseCommandCaller.hard_pause(driver, 30000)


def bed_enquiry_and_get_vacant_bed(driver, dt_rfa: dict, data_tables: list):
    LibCommon.bc_handle_click_on_menu(driver, dt_rfa['mainnavgationname'], SHORT_WAIT_TIME)
    LibCommon.bc_handle_sub_navigation_link_click(driver, dt_rfa['subnavgationBedEnquiery'], SHORT_WAIT_TIME)
    return LibBedEnquiry.bc_get_vacant_beds(
        driver, dt_rfa['ward'], data_tables[0]["name"], data_tables[0]["pickIndex"], SHORT_WAIT_TIME)
