import logging
from datetime import date, datetime
from utilities.data_helper import DataHelper
from utilities.nic_generator import subtract_years, random_date_between, calculate_age_parts

MIN_ADULT_AGE = 18
MAX_ADULT_AGE = 65


def calculate_age(dob, today: date = None) -> str:
    """Age of a dd/mm/yyyy (or date) birth date as "<y>Y <m>M <d>D"."""
    if isinstance(dob, str):
        dob = datetime.strptime(dob, "%d/%m/%Y").date()
    years, months, days = calculate_age_parts(dob, today)
    return f"{years}Y {months}M {days}D"


def generate_random_dob(is_newborn: bool = False) -> date:
    today = date.today()
    if is_newborn:
        return today
    return random_date_between(subtract_years(today, MAX_ADULT_AGE), subtract_years(today, MIN_ADULT_AGE))


def generate_and_update_dob(dob_key: str, age_key: str, file_name: str, index: int, is_newborn: bool = False):
    data = DataHelper.load_table_for_index(file_name, index)
    birth_date = generate_random_dob(is_newborn)
    dob = birth_date.strftime("%d/%m/%Y")
    age = calculate_age(birth_date)

    data[index][dob_key] = dob
    data[index][age_key] = age
    DataHelper.save_data(file_name, data)
    logging.info(f"Generated DOB {dob} (age {age}) stored in {file_name}[{index}]")
    return {"dob": dob, "age": age}
