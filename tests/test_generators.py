import re
import unittest
from datetime import date, datetime, timedelta
from unittest.mock import patch
from utilities import nic_generator, dob_generator, date_generator
from utilities.mobile_number_generator import MobileNumberGenerator
from utilities.name_generator import NameGenerator
from utilities.passport_number_generator import generate_passport_number, generate_and_update_passport_number
from utilities.passport_expiry_generator import generate_expiry_date, generate_and_update_expiry_date, add_months
from tests.test_data_helper import DataTableTestCase


class TestNicGenerator(unittest.TestCase):
    def test_format_and_gender_parity(self):
        for _ in range(50):
            male_nic = nic_generator.generate_random_nic("Male", "mykad")
            female_nic = nic_generator.generate_random_nic("Female", "MyKID")
            self.assertRegex(male_nic, r"^\d{6}-\d{2}-\d{4}$")
            self.assertIn(int(male_nic[-1]), [1, 3, 7, 9])
            self.assertIn(int(female_nic[-1]), [2, 4, 6, 8])
            self.assertGreaterEqual(int(male_nic[7:9]), 10)

    def test_mykad_holder_is_adult(self):
        latest = nic_generator.subtract_years(date.today(), 18)
        for _ in range(50):
            nic = nic_generator.generate_random_nic("Male", "mykad")
            birth_date = datetime.strptime(nic[:6], "%y%m%d").date()
            if birth_date > date.today():
                birth_date = birth_date.replace(year=birth_date.year - 100)
            self.assertLessEqual(birth_date, latest)

    def test_mykad_holder_age_at_least_18(self):
        for _ in range(200):
            nic = nic_generator.generate_random_nic("Female", "mykad")
            birth_date = datetime.strptime(nic_generator.get_dob_from_nic(nic)[:10], "%Y-%m-%d").date()
            self.assertGreaterEqual(nic_generator.calculate_age_parts(birth_date)[0], 18, nic)
            self.assertGreaterEqual(birth_date, date(1940, 1, 1))

    def test_mykid_holder_is_under_12(self):
        today = date.today()
        for _ in range(200):
            nic = nic_generator.generate_random_nic("Female", "mykid")
            birth_date = datetime.strptime(nic_generator.get_dob_from_nic(nic)[:10], "%Y-%m-%d").date()
            self.assertLessEqual(birth_date, today)
            self.assertLess(nic_generator.calculate_age_parts(birth_date)[0], 12, nic)

    def test_gender_and_type_ignore_whitespace(self):
        for _ in range(50):
            male_nic = nic_generator.generate_random_nic(" Male ", " MyKAD ")
            female_nic = nic_generator.generate_random_nic("Female\n", "\tmykid ")
            self.assertIn(int(male_nic[-1]), [1, 3, 7, 9])
            self.assertIn(int(female_nic[-1]), [2, 4, 6, 8])

    def test_invalid_nic_type(self):
        with self.assertRaises(ValueError) as context:
            nic_generator.generate_random_nic("Male", "passport")
        self.assertEqual(str(context.exception), "Invalid NIC type: passport")

    def test_dob_from_nic_century(self):
        self.assertEqual(nic_generator.get_dob_from_nic("850412-14-5671"), "1985-04-12T16:00:00.000Z")
        self.assertEqual(nic_generator.get_dob_from_nic("050412-14-5672"), "2005-04-12T16:00:00.000Z")

    def test_formatted_age_borrows_days_and_months(self):
        today = date(2024, 3, 10)
        self.assertEqual(nic_generator.get_formatted_age(date(2000, 1, 10), today), "24Y 2M 0D")
        self.assertEqual(nic_generator.get_formatted_age("2000-05-20T16:00:00.000Z", today), "23Y 9M 19D")

    def test_twin_nic_keeps_birth_date(self):
        twin = nic_generator.generate_twin_nic("850412-14-5671")
        self.assertTrue(twin.startswith("850412-"))
        self.assertRegex(twin, r"^\d{6}-\d{2}-\d{4}$")

    def test_twin_nic_rejects_bad_format(self):
        with self.assertRaises(ValueError) as context:
            nic_generator.generate_twin_nic("8504121456")
        self.assertEqual(str(context.exception), "Invalid NIC format. Expected format: YYMMDD-XX-XXXX")


class TestDobGenerator(unittest.TestCase):
    def test_calculate_age_borrows_previous_month(self):
        # 29 days borrowed from February 2024
        self.assertEqual(dob_generator.calculate_age("15/01/1990", date(2024, 3, 10)), "34Y 1M 24D")
        self.assertEqual(dob_generator.calculate_age("10/03/2000", date(2024, 3, 10)), "24Y 0M 0D")

    def test_random_dob_range(self):
        today = date.today()
        for _ in range(50):
            birth_date = dob_generator.generate_random_dob()
            self.assertLessEqual(birth_date, nic_generator.subtract_years(today, 18))
            self.assertGreaterEqual(birth_date, nic_generator.subtract_years(today, 65))
        self.assertEqual(dob_generator.generate_random_dob(is_newborn=True), today)


class TestPassportGenerators(unittest.TestCase):
    def test_passport_number_format(self):
        self.assertRegex(generate_passport_number(), r"^[A-Z]\d{7}$")

    def test_expiry_between_six_months_and_ten_years(self):
        today = date(2024, 8, 31)
        for _ in range(20):
            expiry = datetime.strptime(generate_expiry_date(today), "%d/%m/%Y").date()
            self.assertGreaterEqual(expiry, date(2025, 2, 28))
            self.assertLessEqual(expiry, date(2034, 8, 31))

    def test_add_months_clamps_day(self):
        self.assertEqual(add_months(date(2024, 1, 31), 1), date(2024, 2, 29))
        self.assertEqual(add_months(date(2024, 11, 15), 3), date(2025, 2, 15))


class TestMobileAndNameGenerators(unittest.TestCase):
    def test_mobile_numbers_are_unique(self):
        numbers = {MobileNumberGenerator.generate() for _ in range(200)}
        self.assertEqual(len(numbers), 200)
        for number in numbers:
            self.assertRegex(number, r"^07\d{8}$")

    def test_repeated_mobile_number_is_skipped(self):
        with patch.object(MobileNumberGenerator, "generated_numbers", set()), \
                patch("utilities.mobile_number_generator.random.randint", side_effect=[1] * 8 + [1] * 8 + [2] * 8):
            first = MobileNumberGenerator.generate()
            second = MobileNumberGenerator.generate()
        self.assertNotEqual(first, second)

    def test_name_format(self):
        name = NameGenerator.generate()
        self.assertRegex(name, r"^Auto [A-Z][a-z]{6} [A-Z][a-z]{6}$")
        first, last = name.split(" ")[1:]
        self.assertIn(first[1], "aeiou")
        self.assertNotIn(first[2], "aeiou")


class TestDateGenerator(unittest.TestCase):
    def test_generate_date(self):
        today = date.today()
        self.assertEqual(date_generator.generate_date("today"), today.strftime("%d/%m/%Y"))
        self.assertEqual(date_generator.generate_date("future", 3), (today + timedelta(days=3)).strftime("%d/%m/%Y"))
        self.assertEqual(date_generator.generate_date("past", 2), (today - timedelta(days=2)).strftime("%d/%m/%Y"))

    def test_invalid_date_type(self):
        with self.assertRaises(ValueError) as context:
            date_generator.generate_date("yesterday")
        self.assertEqual(str(context.exception), "Invalid type. Use 'today', 'future', or 'past'.")

    def test_appointment_slot_in_utc(self):
        slot = date_generator.generate_appointment_datetime_for_malaysia("10:30", 15)
        day = date.today().strftime("%Y-%m-%d")
        self.assertEqual(slot["appointmentStartDateTime"], f"{day}T02:30:00.000Z")
        self.assertEqual(slot["appointmentEndDateTime"], f"{day}T02:45:00.000Z")


class TestGeneratorsPersistence(DataTableTestCase):
    def test_generate_and_update_nic(self):
        nic = nic_generator.generate_and_update_nic("Female", "patientNic", "dt_test", 1, "mykad")
        rows = self.read_table()
        self.assertEqual(rows[1]["patientNic"], nic)
        self.assertEqual(rows[1]["genders"], "Female")
        self.assertNotIn("patientNic", rows[0])

    def test_generate_and_update_nic_errors(self):
        with self.assertRaises(FileNotFoundError):
            nic_generator.generate_and_update_nic("Male", "patientNic", "dt_missing", 0, "mykad")
        with self.assertRaises(IndexError) as context:
            nic_generator.generate_and_update_nic("Male", "patientNic", "dt_test", 2, "mykad")
        self.assertEqual(str(context.exception), "Invalid index: 2. Must be between 0 and 1")

    def test_generate_and_update_dob(self):
        generated = dob_generator.generate_and_update_dob("DOB", "age", "dt_test", 0)
        row = self.read_table()[0]
        self.assertEqual(row["DOB"], generated["dob"])
        self.assertEqual(row["age"], generated["age"])
        self.assertRegex(generated["age"], r"^\d+Y \d+M \d+D$")

    def test_generate_and_update_passport_values(self):
        number = generate_and_update_passport_number("passportNumber", "dt_test", 0)
        expiry = generate_and_update_expiry_date("expieryDate", "dt_test", 0)
        row = self.read_table()[0]
        self.assertEqual(row["passportNumber"], number)
        self.assertEqual(row["expieryDate"], expiry)

    def test_generate_and_update_mobile_and_name(self):
        mobile = MobileNumberGenerator.generate_and_update_json("patientMobileNo", "dt_test", 1)
        name = NameGenerator.generate_and_update_json("patientName", "dt_test", 1)
        row = self.read_table()[1]
        self.assertEqual(row["patientMobileNo"], mobile)
        self.assertEqual(row["patientName"], name)
        with self.assertRaises(FileNotFoundError):
            MobileNumberGenerator.generate_and_update_json("patientMobileNo", "dt_missing", 0)


if __name__ == "__main__":
    unittest.main()
