import random
import string
import logging
from utilities.data_helper import DataHelper


def generate_passport_number() -> str:
    letter = random.choice(string.ascii_uppercase)
    digits = "".join(random.choice(string.digits) for _ in range(7))
    return f"{letter}{digits}"


def generate_and_update_passport_number(key: str, file_name: str, index: int) -> str:
    data = DataHelper.load_table_for_index(file_name, index)
    passport_number = generate_passport_number()
    data[index][key] = passport_number
    DataHelper.save_data(file_name, data)
    logging.info(f"Generated passport number {passport_number} stored as {key}")
    return passport_number
