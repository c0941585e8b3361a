import json
import os
import logging

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "DataTables", "StaticDataTables")


class DataHelper:
    """
    Read and write the JSON data tables that thread generated values between test steps.
    A table is a list of rows; rows are never added or removed here.
    """
    data_dir = DATA_DIR

    @classmethod
    def get_file_path(cls, file_name: str) -> str:
        file_name = os.path.basename(file_name)
        if not file_name.endswith(".json"):
            file_name = f"{file_name}.json"
        return os.path.join(cls.data_dir, file_name)

    @classmethod
    def load_data(cls, file_name: str):
        file_path = cls.get_file_path(file_name)
        try:
            if not os.path.exists(file_path):
                raise FileNotFoundError(f"File not found: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logging.error(f"Error loading data from {file_path}: {e}")
            raise

    @classmethod
    def reload_data(cls, file_name: str):
        logging.info(f"Reloading data for file: {file_name}")
        return cls.load_data(file_name)

    @classmethod
    def save_data(cls, file_name: str, data):
        file_path = cls.get_file_path(file_name)
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logging.error(f"Error saving data to {file_path}: {e}")
            raise

    @classmethod
    def update_data(cls, file_name: str, key: str, value, index: int):
        data = cls.load_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid index: {index}")
        data[index][key] = value
        cls.save_data(file_name, data)
        logging.info(f"Updated {key} at index {index} in {file_name}")

    @classmethod
    def get_data(cls, file_name: str, index: int, key: str):
        data = cls.reload_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid index: {index}")
        return data[index].get(key)

    @classmethod
    def get_row(cls, file_name: str, index: int) -> dict:
        data = cls.reload_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid index: {index}")
        return data[index]

    @classmethod
    def update_json_file(cls, file_name: str, key: str, value, index: int):
        """
        Same as update_data but with the stricter errors used by the generators
        """
        file_path = cls.get_file_path(file_name)
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"JSON file not found at path: {file_path}")
        data = cls.load_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid iteration index: {index}. Must be within JSON data length.")
        data[index][key] = value
        cls.save_data(file_name, data)
        logging.info(f"Stored {key}={value} in {file_name}[{index}]")

    @classmethod
    def load_table_for_index(cls, file_name: str, index: int):
        """
        Load a table for a generator write, validating the row index
        """
        file_path = cls.get_file_path(file_name)
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"JSON file not found at path: {file_path}")
        data = cls.load_data(file_name)
        if index < 0 or index >= len(data):
            raise IndexError(f"Invalid index: {index}. Must be between 0 and {len(data) - 1}")
        return data
