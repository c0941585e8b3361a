import os
import logging
from utilities.base_commands import BaseCommandCaller
from utilities.data_helper import DataHelper
from utilities.date_generator import generate_date
from utilities.locator_helper import LocatorHelper
from utilities.mobile_number_generator import MobileNumberGenerator
from utilities.name_generator import NameGenerator
from utilities.nic_generator import generate_and_update_nic
from utilities.reporter_helper import ROOT_DIR
from libraries.form_steps import is_blank, replace_field, choose_mat_option, expand_section, assert_fields

SPINNER = 'PG_RequestForAdmission.spiner_loading'

PART_ONE_DISABLED_FIELDS = [
    'radio_electiveadmissiondisabled', 'radio_nonelectiveadmissiondisabled', 'check_isdaycaredisabled',
    'check_isnewborndisabled', 'input_scheduleadmissiondatedisabled', 'input_estimatedlegnthofstaydisabled',
    'input_estimatedcostdisabled', 'input_estimatedcostrangedisabled', 'radio_iscashpatientdisabled',
    'radio_iscoporatepatientdisabled', 'input_deposittobecollecteddisabled', 'select_operationrequireddisabled',
    'input_operationdatedisabled', 'input_admitdiagnosisdisabled', 'input_secondarydiagnosisdisabled',
    'input_admittingdoctordisabled', 'input_acknowledgedatedisabled', 'check_ismedicalofficerdisabled',
    'select_specialistdoctorcodedisabled', 'input_uploadfiledisabled',
]


def ensure_checked(driver, locator_key: str):
    if not BaseCommandCaller.get_checkbox_state(driver, locator_key):
        BaseCommandCaller.click(driver, locator_key)
        BaseCommandCaller.assert_checkbox_state(driver, locator_key, True)


def ensure_radio_selected(driver, locator_key: str):
    if not BaseCommandCaller.get_radio_button_state(driver, locator_key):
        BaseCommandCaller.click(driver, locator_key)
        BaseCommandCaller.assert_radio_button_state(driver, locator_key, True)


class LibRequestForAdmission:
    """
    Steps of the Request For Admission (RFA) page.
    """

    @staticmethod
    def bc_handle_rfa_patient_info(driver, patient_nic_no: str, passport_no: str, is_direct: bool, is_newborn: bool,
                                   file_name: str, index: int, wait: int):
        """
        Load the patient into the RFA form by MRN and check the identity fields
        against the registration row. Direct requests use the MRN of an existing
        patient, otherwise the MRN stored at registration.
        """
        row = DataHelper.get_row(file_name, index)
        mrn = row.get('patientMrn') if is_direct else row.get('mrnNo')

        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_mrn', wait, 'soft')
        replace_field(driver, 'PG_RequestForAdmission.input_mrn', mrn)
        BaseCommandCaller.tab(driver, 'PG_RequestForAdmission.input_mrn')
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_disabledsave', wait, 'soft')
        BaseCommandCaller.wait_until_locator_invisible(driver, 'PG_RequestForAdmission.button_disabledsave', wait)

        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_mrn', mrn)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_patientname', row.get('patientName'))
        if is_newborn is True:
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_oldicorpassport', row.get('patientGurdianNic'))
        else:
            if is_blank(patient_nic_no) or patient_nic_no == row.get('patientNic'):
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_oldicorpassport', row.get('passportNumber'))
            if is_blank(passport_no) or passport_no == row.get('passportNumber'):
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_nicno', row.get('patientNic'))

        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_gender', row.get('genders'))
        dob = row.get('DOB') if row.get('DOB') else row.get('dob')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_dob', dob)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_age', row.get('age'))

    @staticmethod
    def bc_handle_part_one_doctor_section_expand(driver, wait: int = 5000):
        expand_section(driver, 'PG_RequestForAdmission.card_part1doctor', wait)

    @staticmethod
    def bc_handle_part_two_patient_section_expand(driver, wait: int = 5000):
        expand_section(driver, 'PG_RequestForAdmission.card_part2patient', wait)

    @staticmethod
    def bc_part_one_doctor(driver, is_elective_admission: bool, is_day_care: bool, is_newborn: bool, date_type: str,
                           days_future_or_past: int, estimated_length_of_stay: str, estimated_cost: str,
                           other_remark: str, is_cash_payment: bool, is_corporate: bool, doctor_name: str,
                           upload_file_path: str, file_name: str, index: int, wait: int):
        """
        Fill Part 1 (doctor): admission type, schedule date, estimated stay and
        cost, payment type, admitting doctor and the supporting document.
        """
        if is_elective_admission is True:
            BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.radio_electiveadmission', wait, 'soft')
            BaseCommandCaller.click(driver, 'PG_RequestForAdmission.radio_electiveadmission')
        else:
            BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.radio_nonelectiveadmission', wait, 'soft')
            BaseCommandCaller.click(driver, 'PG_RequestForAdmission.radio_nonelectiveadmission')

        if is_day_care is True:
            BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.check_isdaycare', wait, 'soft')
            ensure_checked(driver, 'PG_RequestForAdmission.check_isdaycare')
        if is_newborn is True:
            BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.check_isnewborn', wait, 'soft')
            ensure_checked(driver, 'PG_RequestForAdmission.check_isnewborn')

        schedule_date = generate_date(date_type, int(days_future_or_past))
        replace_field(driver, 'PG_RequestForAdmission.input_scheduleadmissiondate', schedule_date)
        BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_RequestForAdmission.input_scheduleadmissiondate', file_name, 'scheduleAdmissionDate', index)
        replace_field(driver, 'PG_RequestForAdmission.input_estimatedlegnthofstay', estimated_length_of_stay)
        choose_mat_option(driver, 'PG_RequestForAdmission.input_estimatedcost', estimated_cost)

        if estimated_cost == 'Other Case':
            BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.textarea_othercasesremark', wait, 'hard')
            replace_field(driver, 'PG_RequestForAdmission.textarea_othercasesremark', other_remark)
            BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_saveothercases')

        if is_cash_payment:
            ensure_radio_selected(driver, 'PG_RequestForAdmission.radio_iscashpatient')
        if is_corporate:
            ensure_radio_selected(driver, 'PG_RequestForAdmission.radio_iscoporatepatient')

        if estimated_cost == 'Other Case':
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_estimatedcostrange', '0.00')
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_deposittobecollected', '0.00')

        choose_mat_option(driver, 'PG_RequestForAdmission.input_admittingdoctor', doctor_name)
        BaseCommandCaller.upload_file(driver, 'PG_RequestForAdmission.input_uploadfile', os.path.join(ROOT_DIR, upload_file_path))

    @staticmethod
    def bc_part_two_patient_room_and_board_information(driver, ward: str, bed_type: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_ward', wait, 'soft')
        choose_mat_option(driver, 'PG_RequestForAdmission.input_ward', ward)
        BaseCommandCaller.clear_text_field(driver, 'PG_RequestForAdmission.input_bedtype')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.input_bedtype')
        BaseCommandCaller.select_mat_option_containing_text(driver, 'PG_Common.list_matoptions', bed_type)

    @staticmethod
    def bc_part_two_patient_admission_acknowledgement(driver, is_cash_payment: bool, is_corporate: bool,
                                                      debtor_code: str, insurance_percentage: str,
                                                      insurance_amount: str, room_board_limit: str,
                                                      room_entitlement: str, special_request: str, remark: str,
                                                      wait: int):
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, SPINNER, wait)
        if is_cash_payment:
            ensure_radio_selected(driver, 'PG_RequestForAdmission.radio_cashpatient')
        if is_corporate:
            ensure_radio_selected(driver, 'PG_RequestForAdmission.radio_coporatepatient')
            BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_insuaranceadvancesearch')
            replace_field(driver, 'PG_RequestForAdmission.input_debetorcode', debtor_code)
            debtor_name = BaseCommandCaller.get_text_content(driver, 'PG_RequestForAdmission.label_debetorname')
            debtor_link = LocatorHelper.get_locator_with_dynamic_value(
                LocatorHelper.resolve_locator('PG_RequestForAdmission.link_coporatesearchresults'), 'parameter', debtor_code)
            BaseCommandCaller.click(driver, debtor_link)
            BaseCommandCaller.hard_pause(driver, wait)
            if debtor_name is not None:
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_insuarencecode', debtor_name)
            BaseCommandCaller.hard_pause(driver, wait)
            BaseCommandCaller.click(driver, 'PG_RequestForAdmission.select_insuranceterm')
            BaseCommandCaller.arrow_down(driver, 'PG_RequestForAdmission.select_insuranceterm')
            BaseCommandCaller.enter(driver, 'PG_RequestForAdmission.select_insuranceterm')
            replace_field(driver, 'PG_RequestForAdmission.input_insurancepercentage', insurance_percentage)
            replace_field(driver, 'PG_RequestForAdmission.input_insuranceamount', insurance_amount)

        replace_field(driver, 'PG_RequestForAdmission.input_roomboardlimit', room_board_limit)
        replace_field(driver, 'PG_RequestForAdmission.input_roomentitlement', room_entitlement)
        replace_field(driver, 'PG_RequestForAdmission.input_specialrequest', special_request)
        replace_field(driver, 'PG_RequestForAdmission.input_remark', remark)

    @staticmethod
    def bc_part_two_patient_guarantor_information(driver, is_same_as_patient_info: bool, patient: dict,
                                                  is_same_as_emergency: bool, emergency: dict, nic_type: str,
                                                  guarantor: dict, file_name: str, index: int, wait: int):
        """
        Fill the guarantor. It is copied from the patient or from the emergency
        contact and then checked, or a new guarantor is generated.

        patient, emergency and guarantor hold the keys name, relationType,
        countryCode, mobileNo, street1..street4, country, state, city, postcode;
        patient also carries icNo and passportOrOldIcNo.
        """
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.check_sameaspatientinfo', wait, 'soft')
        if is_same_as_patient_info:
            ensure_checked(driver, 'PG_RequestForAdmission.check_sameaspatientinfo')
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_guarantorname', patient.get('name'))
            choose_mat_option(driver, 'PG_RequestForAdmission.input_relationshipcode', patient.get('relationType'))
            ic_no = BaseCommandCaller.get_input_data(driver, 'PG_RequestForAdmission.input_guarantoricno')
            if is_blank(ic_no):
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_guarantoroldicno', patient.get('passportOrOldIcNo'))
            else:
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_guarantoricno', patient.get('icNo'))
            LibRequestForAdmission.assert_guarantor_contact(driver, patient)
        elif is_same_as_emergency:
            if not BaseCommandCaller.get_checkbox_state(driver, 'PG_RequestForAdmission.check_sameasemergencycontactdetails'):
                BaseCommandCaller.click(driver, 'PG_RequestForAdmission.check_sameasemergencycontactdetails')
                BaseCommandCaller.assert_checkbox_state(driver, 'PG_RequestForAdmission.check_sameasemergencycontactdetails', True)
                BaseCommandCaller.hard_pause(driver, wait)
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_guarantorname', emergency.get('name'))
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_relationshipcode', emergency.get('relationType'))
            ic_no = BaseCommandCaller.get_input_data(driver, 'PG_RequestForAdmission.input_guarantoricno')
            old_ic_no = BaseCommandCaller.get_input_data(driver, 'PG_RequestForAdmission.input_guarantoroldicno')
            if is_blank(ic_no) and is_blank(old_ic_no):
                guarantor_nic = generate_and_update_nic('male', 'guarantorNic', file_name, index, nic_type)
                replace_field(driver, 'PG_RequestForAdmission.input_guarantoricno', guarantor_nic)
                BaseCommandCaller.tab(driver, 'PG_RequestForAdmission.input_guarantoricno')
            BaseCommandCaller.hard_pause(driver, wait)
            LibRequestForAdmission.assert_guarantor_contact(driver, emergency)
        else:
            guarantor_name = NameGenerator.generate_and_update_json('guarantorName', file_name, index)
            replace_field(driver, 'PG_RequestForAdmission.input_guarantorname', guarantor_name)
            choose_mat_option(driver, 'PG_RequestForAdmission.input_relationshipcode', guarantor.get('relationType'))
            guarantor_nic = generate_and_update_nic('male', 'guarantorNic', file_name, index, nic_type)
            replace_field(driver, 'PG_RequestForAdmission.input_guarantoricno', guarantor_nic)
            BaseCommandCaller.tab(driver, 'PG_RequestForAdmission.input_guarantoricno')
            choose_mat_option(driver, 'PG_RequestForAdmission.input_primerycountrycode', guarantor.get('countryCode'))
            guarantor_mobile = MobileNumberGenerator.generate_and_update_json('guarantorMobileNo', file_name, index)
            replace_field(driver, 'PG_RequestForAdmission.input_primerymobileno', guarantor_mobile)
            replace_field(driver, 'PG_RequestForAdmission.input_street1', guarantor.get('street1'))
            replace_field(driver, 'PG_RequestForAdmission.input_street2', guarantor.get('street2'))
            replace_field(driver, 'PG_RequestForAdmission.input_street3', guarantor.get('street3'))
            replace_field(driver, 'PG_RequestForAdmission.input_street4', guarantor.get('street4'))
            choose_mat_option(driver, 'PG_RequestForAdmission.input_country', guarantor.get('country'))
            choose_mat_option(driver, 'PG_RequestForAdmission.input_state', guarantor.get('state'))
            choose_mat_option(driver, 'PG_RequestForAdmission.input_city', guarantor.get('city'))
            replace_field(driver, 'PG_RequestForAdmission.input_postcode', guarantor.get('postcode'))

    @staticmethod
    def assert_guarantor_contact(driver, contact: dict):
        assert_fields(driver, {
            'PG_RequestForAdmission.input_primerycountrycode': contact.get('countryCode'),
            'PG_RequestForAdmission.input_primerymobileno': contact.get('mobileNo'),
            'PG_RequestForAdmission.input_street1': contact.get('street1'),
            'PG_RequestForAdmission.input_street2': contact.get('street2'),
            'PG_RequestForAdmission.input_street3': contact.get('street3'),
            'PG_RequestForAdmission.input_street4': contact.get('street4'),
            'PG_RequestForAdmission.input_country': contact.get('country'),
            'PG_RequestForAdmission.input_state': contact.get('state'),
            'PG_RequestForAdmission.input_city': contact.get('city'),
            'PG_RequestForAdmission.input_postcode': contact.get('postcode'),
        })

    # Acknowledgements

    @staticmethod
    def bc_hospital_staff_acknowledgement(driver, nic_type: str, file_name: str, index: int, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_staficno', wait, 'soft')
        staff_nic = generate_and_update_nic('male', 'staffNic', file_name, index, nic_type)
        replace_field(driver, 'PG_RequestForAdmission.input_staficno', staff_nic)
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_staffaxknowledgement')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_okacknowledge')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_RequestForAdmission.input_staffacknowledgedatetime', file_name, 'staffAcknowledgementTime', index)

    @staticmethod
    def bc_hospital_witness_acknowledgement(driver, nic_type: str, file_name: str, index: int, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_witnessicno', wait, 'soft')
        witness_nic = generate_and_update_nic('male', 'staffWitnessNic', file_name, index, nic_type)
        replace_field(driver, 'PG_RequestForAdmission.input_witnessicno', witness_nic)
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_witnessacknowledge')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_okacknowledge')
        BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_RequestForAdmission.input_witnessacknowledgedatetime', file_name, 'staffWitnessAcknowledgementTime', index)

    @staticmethod
    def signed_acknowledgement(driver, who: str, column: str, file_name: str, index: int, wait: int):
        """Open the acknowledgement popup for `who`, sign on the canvas and store the time."""
        BaseCommandCaller.click(driver, f'PG_RequestForAdmission.button_{who}acknowledge')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.draw_signature(driver, f'PG_RequestForAdmission.canvas_{who}signature')
        BaseCommandCaller.click(driver, f'PG_RequestForAdmission.button_ok{who}acknowledge')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.get_input_data_and_store_in_json(
            driver, f'PG_RequestForAdmission.input_{who}acknowledgedatetime', file_name, column, index)

    @staticmethod
    def bc_patient_acknowledgement(driver, file_name: str, index: int, wait: int):
        LibRequestForAdmission.signed_acknowledgement(driver, 'patient', 'patientAcknowledgementTime', file_name, index, wait)

    @staticmethod
    def bc_guarantor_acknowledgement(driver, file_name: str, index: int, wait: int):
        LibRequestForAdmission.signed_acknowledgement(driver, 'guarantor', 'garantorAcknowledgementTime', file_name, index, wait)

    # Save, draft and search

    @staticmethod
    def bc_click_on_draft_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_draft', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_draft')

    @staticmethod
    def bc_handle_click_on_save_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_save', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_save')

    @staticmethod
    def bc_handle_click_on_clear_button(driver, wait: int):
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_clearnav', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_clearnav')

    @staticmethod
    def bc_handle_click_on_clear_popup_ok_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_clearpopupok', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_clearpopupok')

    @staticmethod
    def bc_store_rfa_id(driver, file_name: str, index: int, wait: int):
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, SPINNER, wait)
        BaseCommandCaller.hard_pause(driver, wait)
        rfa_id = BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_RequestForAdmission.input_rfaid', file_name, 'rfaId', index, True)
        logging.info(f"Stored RFA ID {rfa_id}")
        return rfa_id

    @staticmethod
    def bc_search_rfa_id(driver, from_date: str, to_date: str, admission_state: str, rfa_id: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_rfaidadvancedsearch', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_rfaidadvancedsearch')
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, SPINNER, wait)
        BaseCommandCaller.hard_pause(driver, wait)

        today = generate_date('today')
        if not is_blank(from_date) and from_date != today:
            replace_field(driver, 'PG_RequestForAdmission.input_scheduleadmissiondatefrom', from_date)
        if not is_blank(to_date) and to_date != today:
            replace_field(driver, 'PG_RequestForAdmission.input_scheduleadmissiondateto', to_date)

        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_admissionstate', wait, 'soft')
        replace_field(driver, 'PG_RequestForAdmission.input_admissionstate', admission_state)
        BaseCommandCaller.select_mat_option_by_text(driver, 'PG_Common.list_matoptions', admission_state)
        replace_field(driver, 'PG_RequestForAdmission.input_searchrfaid', rfa_id)
        BaseCommandCaller.tab(driver, 'PG_RequestForAdmission.input_searchrfaid')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_searchrfapopup')
        BaseCommandCaller.hard_pause(driver, wait)

        result_link = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_RequestForAdmission.link_rfaidresults'), 'parameter', rfa_id)
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, SPINNER, wait)
        BaseCommandCaller.click(driver, result_link, True)

    @staticmethod
    def bc_cancel_rfa(driver, cancelation_reason: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.label_cancelationheader', wait, 'soft')
        BaseCommandCaller.select_option(driver, 'PG_RequestForAdmission.select_cancelationreason', cancelation_reason)
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_savecancelation', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_savecancelation')

    # Verification

    @staticmethod
    def bc_verify_rfa_patient_info(driver, is_newborn: bool, mrn: str, patient_name: str, nic_no: str, passport: str,
                                   patient_guardian_nic: str, patient_gender: str, patient_mrn: str,
                                   patient_age: str, rfa_id: str, is_direct: bool, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_mrn', wait, 'soft')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_mrn', patient_mrn if is_direct else mrn)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_patientname', patient_name)

        if is_newborn is True:
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_oldicorpassport', patient_guardian_nic)
        else:
            if is_blank(BaseCommandCaller.get_input_data(driver, 'PG_RequestForAdmission.input_nicno')):
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_oldicorpassport', passport)
            if is_blank(BaseCommandCaller.get_input_data(driver, 'PG_RequestForAdmission.input_oldicorpassport')):
                BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_nicno', nic_no)

        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_gender', patient_gender)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_age', patient_age)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_rfaid', rfa_id)

    @staticmethod
    def bc_verify_part_one_doctor(driver, is_elective_admission: bool, is_day_care: bool, is_newborn: bool,
                                  schedule_date: str, estimated_length_of_stay: str, estimated_cost: str,
                                  is_cash_payment: bool, is_corporate: bool, doctor_name: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.radio_electiveadmission', wait, 'soft')
        if is_elective_admission is True:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_electiveadmission', True)
        else:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_nonelectiveadmission', True)
        if is_day_care is True:
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_RequestForAdmission.check_isdaycare', True)
        if is_newborn is True:
            BaseCommandCaller.assert_checkbox_state(driver, 'PG_RequestForAdmission.check_isnewborn', True)

        assert_fields(driver, {
            'PG_RequestForAdmission.input_scheduleadmissiondate': schedule_date,
            'PG_RequestForAdmission.input_estimatedlegnthofstay': estimated_length_of_stay,
            'PG_RequestForAdmission.input_estimatedcost': estimated_cost,
        })
        if is_cash_payment:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_iscashpatient', True)
        if is_corporate:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_iscoporatepatient', True)
        if estimated_cost == 'Other Case':
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_estimatedcostrange', '0.00')
            BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_deposittobecollected', '0.00')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_admittingdoctor', doctor_name)

    @staticmethod
    def bc_verify_part_two_patient_room_and_board_information(driver, ward: str, bed_type: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_ward', wait, 'soft')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_ward', ward)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_bedtype', bed_type)

    @staticmethod
    def bc_verify_part_two_patient_admission_acknowledgement(driver, is_cash_payment: bool, is_corporate: bool,
                                                             debtor_code: str, insurance_term: str,
                                                             insurance_percentage: str, insurance_amount: str,
                                                             deposit_amount: str, room_board_limit: str,
                                                             room_entitlement: str, special_request: str,
                                                             remark: str, wait: int):
        BaseCommandCaller.wait_for_all_instances_to_disappear(driver, SPINNER, wait)
        if is_cash_payment:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_cashpatient', True)
        if is_corporate:
            BaseCommandCaller.assert_radio_button_state(driver, 'PG_RequestForAdmission.radio_coporatepatient', True)
            assert_fields(driver, {
                'PG_RequestForAdmission.input_debetorcode': debtor_code,
                'PG_RequestForAdmission.select_insuranceterm': insurance_term,
                'PG_RequestForAdmission.input_insurancepercentage': insurance_percentage,
                'PG_RequestForAdmission.input_insuranceamount': insurance_amount,
            })
        assert_fields(driver, {
            'PG_RequestForAdmission.input_depositamount': deposit_amount,
            'PG_RequestForAdmission.input_roomboardlimit': room_board_limit,
            'PG_RequestForAdmission.input_roomentitlement': room_entitlement,
            'PG_RequestForAdmission.input_specialrequest': special_request,
            'PG_RequestForAdmission.input_remark': remark,
        })

    @staticmethod
    def bc_verify_part_one_fields_disabled(driver, wait: int):
        for locator_key in PART_ONE_DISABLED_FIELDS:
            BaseCommandCaller.is_locator_present(driver, f'PG_RequestForAdmission.{locator_key}', wait, 'hard')

    # Edit

    @staticmethod
    def bc_handle_click_on_edit_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_edit', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_edit')
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.button_editdisabled', wait, 'hard')

    @staticmethod
    def bc_edit_part_one_deposit_to_be_collected(driver, deposit_to_be_collected: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_deposittobecollected', wait, 'soft')
        replace_field(driver, 'PG_RequestForAdmission.input_deposittobecollected', deposit_to_be_collected)
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_deposittobecollected', deposit_to_be_collected)

    @staticmethod
    def bc_verify_edit_part_one_deposit_to_be_collected(driver, deposit_to_be_collected: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.input_deposittobecollecteddisabled', wait, 'hard')
        BaseCommandCaller.get_input_data_and_assert(driver, 'PG_RequestForAdmission.input_deposittobecollected', deposit_to_be_collected)
