import logging
from utilities.api_utils import ApiUtils
from utilities.base_commands import BaseCommandCaller
from utilities.browser_token_helper import BrowserTokenHelper
from utilities.date_generator import generate_appointment_datetime_for_malaysia
from utilities.mobile_number_generator import MobileNumberGenerator
from utilities.name_generator import NameGenerator
from utilities.nic_generator import generate_and_update_nic, get_dob_from_nic, get_formatted_age

APPOINTMENT_TOKEN_KEY = "appointmentToken"
FACILITY_CODE = "BRIM"
REGION_CODE = "MYS"


class LibAppointment:
    @staticmethod
    def bc_get_bearer_token(driver):
        token = BrowserTokenHelper.extract_token(driver, APPOINTMENT_TOKEN_KEY)
        if not token:
            logging.error("Appointment token not found in the browser session")
        return token

    @staticmethod
    def build_appointment_body(appointment_id, patient_name, ic_no, birth_date, mobile_number, email,
                               doctor_code, start_date_time, end_date_time, duration):
        return {
            "title": "AppointmentScheduling",
            "acknowledgementId": f"JC_Appointment_{FACILITY_CODE}_{appointment_id}_XX",
            "createdBy": "Pepadmin",
            "facilityCode": FACILITY_CODE,
            "appointmentId": appointment_id,
            "patientMRN": "",
            "firstName": patient_name,
            "firstNameVn": "",
            "middleName": "",
            "middleNameVn": "",
            "familyName": "",
            "icNo": ic_no,
            "oldIcNo": "",
            "raceCode": "BH",
            "dob": birth_date,
            "street1": "Tets Street 1",
            "street2": "Tets Street 12",
            "cityCode": "KL",
            "phone": mobile_number,
            "emailId": email,
            "doctorCode": doctor_code,
            "genderCode": "L",
            "appointmentStartDateTime": start_date_time,
            "appointmentEndDateTime": end_date_time,
            "duration": duration,
            "visitTypeDesc": "Consultation",
            "chargeTypeCode": "CTC1",
            "remarks": "APPOINTMENT REMARKS Automation SIT Test",
            "cancellationReasonCode": "",
            "uhid": "",
            "passportExpiryDate": None,
            "passportIssuedCountryCode": REGION_CODE,
            "nationalityCode": REGION_CODE,
            "phoneCountryCode": REGION_CODE,
            "idppidentifierType": "IT001",
            "statusCode": "OPE",
            "minervaStatus": "booked",
            "isDeleted": False,
            "regionCode": REGION_CODE,
        }

    @staticmethod
    def bc_add_appointment_api(driver, gender: str, nic_type: str, col_nic: str, col_dob: str, col_age: str,
                               col_mobile: str, appointment_time: str, appointment_duration, col_name: str,
                               doctor_code: str, email: str, file_name: str, index: int, api_endpoint: str):
        """
        Book an appointment through the appointment API for a freshly generated
        patient. The generated NIC, DOB, age, mobile and name are stored in the
        data table row so the registration steps can pick the appointment up.
        """
        bearer_token = LibAppointment.bc_get_bearer_token(driver)
        ic_no = generate_and_update_nic(gender, col_nic, file_name, index, nic_type)
        birth_date = get_dob_from_nic(ic_no)
        age = get_formatted_age(birth_date)
        BaseCommandCaller.update_json_file(file_name, col_dob, birth_date, index)
        BaseCommandCaller.update_json_file(file_name, col_age, age, index)
        mobile_number = MobileNumberGenerator.generate_and_update_json(col_mobile, file_name, index)
        slot = generate_appointment_datetime_for_malaysia(appointment_time, int(appointment_duration))
        patient_name = NameGenerator.generate_and_update_json(col_name, file_name, index)
        appointment_id = BaseCommandCaller.generate_appointment_number()

        headers = {
            "Authorization": f"Bearer {bearer_token}",
            "Content-Type": "application/json",
            "Regioncode": REGION_CODE,
            "Facilitycode": FACILITY_CODE,
        }
        body = LibAppointment.build_appointment_body(
            appointment_id, patient_name, ic_no, birth_date, mobile_number, email, doctor_code,
            slot["appointmentStartDateTime"], slot["appointmentEndDateTime"], str(appointment_duration))
        ApiUtils.send_request(
            "POST", api_endpoint, headers, body,
            expected_status_code=200,
            expected_response_keys={"message": "Data Added Successfully.", "statusCode": "200", "isSuccess": True},
        )
        logging.info(f"Appointment {appointment_id} booked for {patient_name} ({ic_no})")
        return {
            "icNo": ic_no,
            "appointmentId": appointment_id,
            "patientName": patient_name,
            "birthDate": birth_date,
            "mobileNumber": mobile_number,
            "age": age,
        }
