import re
import random
import calendar
import logging
from datetime import date, datetime, timedelta
from utilities.data_helper import DataHelper

NIC_MIN_DATE = date(1940, 1, 1)
MYKAD_MIN_AGE = 18
MYKID_MAX_AGE = 12
MALE_LAST_DIGITS = [1, 3, 7, 9]
FEMALE_LAST_DIGITS = [2, 4, 6, 8]
NIC_PATTERN = re.compile(r"^\d{6}-\d{2}-\d{4}$")


def subtract_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 Feb in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def random_date_between(start: date, end: date) -> date:
    return date.fromordinal(random.randint(start.toordinal(), end.toordinal()))


def generate_random_nic(gender: str, nic_type: str) -> str:
    """
    Build a YYMMDD-XX-ZZZZ identity number. MyKAD holders are at least 18 and born
    no earlier than 1940, MyKID holders are under 12. The last digit is odd for male,
    even otherwise. Gender and NIC type ignore case and surrounding spaces.
    """
    today = date.today()
    kind = str(nic_type).strip().lower()
    if kind == "mykad":
        birth_date = random_date_between(NIC_MIN_DATE, subtract_years(today, MYKAD_MIN_AGE))
    elif kind == "mykid":
        birth_date = random_date_between(subtract_years(today, MYKID_MAX_AGE) + timedelta(days=1), today)
    else:
        raise ValueError(f"Invalid NIC type: {nic_type}")

    place_code = random.randint(10, 99)
    serial = f"{random.randint(0, 999):03d}"
    digits = MALE_LAST_DIGITS if str(gender).strip().lower() == "male" else FEMALE_LAST_DIGITS
    last_digit = random.choice(digits)
    return f"{birth_date.strftime('%y%m%d')}-{place_code}-{serial}{last_digit}"


def generate_and_update_nic(gender: str, key: str, file_name: str, index: int, nic_type: str) -> str:
    data = DataHelper.load_table_for_index(file_name, index)
    nic = generate_random_nic(gender, nic_type)
    data[index][key] = nic
    DataHelper.save_data(file_name, data)
    logging.info(f"Generated NIC {nic} stored as {key} in {file_name}[{index}]")
    return nic


def get_dob_from_nic(nic: str) -> str:
    yy, mm, dd = int(nic[0:2]), nic[2:4], nic[4:6]
    year = 1900 + yy if yy > 30 else 2000 + yy
    return f"{year}-{mm}-{dd}T16:00:00.000Z"


def calculate_age_parts(birth_date: date, today: date = None):
    today = today or date.today()
    years = today.year - birth_date.year
    months = today.month - birth_date.month
    days = today.day - birth_date.day

    if days < 0:
        months -= 1
        previous_month = today.month - 1 or 12
        previous_year = today.year if today.month > 1 else today.year - 1
        days += calendar.monthrange(previous_year, previous_month)[1]
    if months < 0:
        years -= 1
        months += 12
    return years, months, days


def get_formatted_age(dob, today: date = None) -> str:
    """
    Age as "<y>Y <m>M <d>D". Accepts a date or an ISO string such as the
    value returned by get_dob_from_nic.
    """
    if isinstance(dob, str):
        dob = datetime.strptime(dob[:10], "%Y-%m-%d").date()
    years, months, days = calculate_age_parts(dob, today)
    return f"{years}Y {months}M {days}D"


def generate_twin_nic(nic: str) -> str:
    if not NIC_PATTERN.match(nic or ""):
        raise ValueError("Invalid NIC format. Expected format: YYMMDD-XX-XXXX")
    return f"{nic[:6]}-{random.randint(10, 99)}-{random.randint(1000, 9999)}"
