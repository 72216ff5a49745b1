from datetime import datetime

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def time_of_day(ts: datetime) -> str:
    """12-hour clock without a leading zero, e.g. ``9:05 PM``."""
    hour = ts.hour % 12 or 12
    suffix = "AM" if ts.hour < 12 else "PM"
    return f"{hour}:{ts.minute:02d} {suffix}"


def day_label(ts: datetime) -> str:
    """Long date, e.g. ``Monday, January 27, 2025``."""
    return f"{WEEKDAYS[ts.weekday()]}, {MONTHS[ts.month - 1]} {ts.day}, {ts.year}"


def ounces(amount: float) -> str:
    return f"{amount:.1f} oz"
