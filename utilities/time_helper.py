from datetime import datetime


def get_current_timestamp() -> str:
    """Local date and time, e.g. "19/10/2026 14:05:11"."""
    return datetime.now().strftime("%d/%m/%Y %H:%M:%S")
