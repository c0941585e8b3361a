from datetime import date, datetime, timedelta

MALAYSIA_UTC_OFFSET_HOURS = 8


def generate_date(date_type: str = "future", days: int = 1) -> str:
    """Today, or a date `days` ahead or behind, formatted dd/mm/yyyy."""
    days = int(days or 0)
    if date_type == "today":
        target = date.today()
    elif date_type == "future":
        target = date.today() + timedelta(days=days)
    elif date_type == "past":
        target = date.today() - timedelta(days=days)
    else:
        raise ValueError("Invalid type. Use 'today', 'future', or 'past'.")
    return target.strftime("%d/%m/%Y")


def to_iso_utc(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + ".000Z"


def generate_appointment_datetime_for_malaysia(local_time: str, slot_minutes: int, days_from_today: int = 0):
    """
    Convert a Malaysia wall-clock slot (HH:MM) on today + days_from_today into the
    UTC start and end timestamps the appointment API expects.
    """
    hours, minutes = (int(part) for part in local_time.split(":"))
    local_day = date.today() + timedelta(days=int(days_from_today))
    local_start = datetime(local_day.year, local_day.month, local_day.day, hours, minutes)
    utc_start = local_start - timedelta(hours=MALAYSIA_UTC_OFFSET_HOURS)
    utc_end = utc_start + timedelta(minutes=int(slot_minutes))
    return {
        "appointmentStartDateTime": to_iso_utc(utc_start),
        "appointmentEndDateTime": to_iso_utc(utc_end),
    }
