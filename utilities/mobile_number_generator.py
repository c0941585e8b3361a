import os
import random
import logging
from utilities.data_helper import DataHelper

MOBILE_PREFIX = "07"


class MobileNumberGenerator:
    """
    Mobile numbers are "07" followed by eight random digits and are never
    repeated within one process.
    """
    generated_numbers = set()

    @classmethod
    def generate(cls) -> str:
        while True:
            number = MOBILE_PREFIX + "".join(str(random.randint(0, 9)) for _ in range(8))
            if number not in cls.generated_numbers:
                cls.generated_numbers.add(number)
                return number

    @classmethod
    def generate_and_update_json(cls, key: str, file_name: str, index: int) -> str:
        file_path = DataHelper.get_file_path(file_name)
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"JSON file not found at path: {file_path}")
        data = DataHelper.load_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid iteration index: {index}")
        mobile_number = cls.generate()
        data[index][key] = mobile_number
        DataHelper.save_data(file_name, data)
        logging.info(f"Generated mobile number {mobile_number} stored as {key} in {file_path}")
        return mobile_number
