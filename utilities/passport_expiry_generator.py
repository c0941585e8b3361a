import calendar
import logging
from datetime import date
from utilities.data_helper import DataHelper
from utilities.nic_generator import random_date_between


def add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    return day.replace(year=year, month=month, day=min(day.day, calendar.monthrange(year, month)[1]))


def generate_expiry_date(today: date = None) -> str:
    """A passport expiry between six months and ten years from today, dd/mm/yyyy."""
    today = today or date.today()
    expiry = random_date_between(add_months(today, 6), add_months(today, 120))
    return expiry.strftime("%d/%m/%Y")


def generate_and_update_expiry_date(key: str, file_name: str, index: int) -> str:
    data = DataHelper.load_table_for_index(file_name, index)
    expiry_date = generate_expiry_date()
    data[index][key] = expiry_date
    DataHelper.save_data(file_name, data)
    logging.info(f"Generated passport expiry {expiry_date} stored as {key}")
    return expiry_date
