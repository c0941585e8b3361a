import os
import json
import shutil
import tempfile
import unittest
from unittest.mock import patch
from utilities.data_helper import DataHelper

ROWS = [
    {"patientName": "Auto Bakilot Femuraz", "genders": "Male", "mrnNo": "null"},
    {"patientName": "null", "genders": "Female", "mrnNo": "null"},
]


class DataTableTestCase(unittest.TestCase):
    """Points DataHelper at a temporary DataTables directory seeded with dt_test."""
    def setUp(self):
        self.directory = tempfile.mkdtemp()
        patcher = patch.object(DataHelper, "data_dir", self.directory)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(shutil.rmtree, self.directory)
        self.write_table("dt_test", ROWS)

    def write_table(self, name, rows):
        with open(os.path.join(self.directory, f"{name}.json"), "w", encoding="utf-8") as f:
            json.dump(rows, f)

    def read_table(self, name="dt_test"):
        with open(os.path.join(self.directory, f"{name}.json"), "r", encoding="utf-8") as f:
            return json.load(f)


class TestDataHelper(DataTableTestCase):
    def test_load_data(self):
        self.assertEqual(DataHelper.load_data("dt_test"), ROWS)
        self.assertEqual(DataHelper.load_data("dt_test.json"), ROWS)

    def test_load_missing_table(self):
        with self.assertRaises(FileNotFoundError) as context:
            DataHelper.load_data("dt_missing")
        self.assertIn("File not found:", str(context.exception))

    def test_reload_logs(self):
        with self.assertLogs(level="INFO") as logs:
            DataHelper.reload_data("dt_test")
        self.assertIn("Reloading data for file: dt_test", logs.output[0])

    def test_update_keeps_other_keys(self):
        DataHelper.update_data("dt_test", "mrnNo", "MRN1001", 0)

        rows = self.read_table()
        self.assertEqual(rows[0], {"patientName": "Auto Bakilot Femuraz", "genders": "Male", "mrnNo": "MRN1001"})
        self.assertEqual(rows[1], ROWS[1])

    def test_update_writes_indented_json(self):
        DataHelper.update_data("dt_test", "mrnNo", "MRN1001", 1)
        with open(os.path.join(self.directory, "dt_test.json"), "r", encoding="utf-8") as f:
            self.assertTrue(f.read().startswith("[\n  {"))

    def test_update_invalid_index(self):
        with self.assertRaises(IndexError) as context:
            DataHelper.update_data("dt_test", "mrnNo", "MRN1001", 5)
        self.assertEqual(str(context.exception), "Invalid index: 5")

    def test_get_data_reads_latest_value(self):
        self.write_table("dt_test", [{"mrnNo": "MRN2002"}])
        self.assertEqual(DataHelper.get_data("dt_test", 0, "mrnNo"), "MRN2002")
        self.assertIsNone(DataHelper.get_data("dt_test", 0, "visitNo"))
        with self.assertRaises(IndexError):
            DataHelper.get_data("dt_test", -1, "mrnNo")

    def test_get_row(self):
        self.assertEqual(DataHelper.get_row("dt_test", 1)["genders"], "Female")

    def test_update_json_file_errors(self):
        with self.assertRaises(FileNotFoundError) as context:
            DataHelper.update_json_file("dt_missing", "mrnNo", "MRN1", 0)
        self.assertIn("JSON file not found at path:", str(context.exception))

        with self.assertRaises(IndexError) as context:
            DataHelper.update_json_file("dt_test", "mrnNo", "MRN1", 2)
        self.assertEqual(str(context.exception), "Invalid iteration index: 2. Must be within JSON data length.")

    def test_load_table_for_index_error(self):
        with self.assertRaises(IndexError) as context:
            DataHelper.load_table_for_index("dt_test", 3)
        self.assertEqual(str(context.exception), "Invalid index: 3. Must be between 0 and 1")


if __name__ == "__main__":
    unittest.main()
