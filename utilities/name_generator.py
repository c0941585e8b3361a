import random
import logging
from utilities.data_helper import DataHelper

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"
NAME_PREFIX = "Auto"
PART_LENGTH = 7


class NameGenerator:
    """
    Readable synthetic patient names such as "Auto Bakilot Femuraz".
    """
    generated_names = set()

    @staticmethod
    def generate_syllabic_name(length: int = PART_LENGTH) -> str:
        letters = [
            random.choice(CONSONANTS) if i % 2 == 0 else random.choice(VOWELS)
            for i in range(length)
        ]
        return "".join(letters).capitalize()

    @classmethod
    def generate(cls) -> str:
        while True:
            name = f"{NAME_PREFIX} {cls.generate_syllabic_name()} {cls.generate_syllabic_name()}"
            if name not in cls.generated_names:
                cls.generated_names.add(name)
                return name

    @classmethod
    def generate_and_update_json(cls, key: str, file_name: str, index: int) -> str:
        data = DataHelper.reload_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid iteration index: {index}")
        name = cls.generate()
        data[index][key] = name
        DataHelper.save_data(file_name, data)
        logging.info(f"Generated name {name} stored as {key}")
        return name
