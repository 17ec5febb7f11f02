from datetime import datetime, date, time, timedelta

from resthub.utils.constants import DEFAULT_TIME_FORMAT


def seconds_since_midnight(moment):
    """
    Converts the hour and minute of a time of day into seconds since midnight.

    Only the hour and minute components are used; seconds, microseconds,
    the date and any timezone information are ignored.

    Args:
        moment (datetime/time): The wake time.

    Returns:
        int: hour * 3600 + minute * 60
    """
    return moment.hour * 3600 + moment.minute * 60


def parse_wake_time(value, on_date=None):
    """
    Parses a wake time given as 'HH:MM', a time or a datetime into a datetime.

    Times without a date are placed on `on_date` (today by default).
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, time):
        return datetime.combine(on_date or date.today(), value)
    if isinstance(value, str):
        parsed = datetime.strptime(value.strip(), '%H:%M').time()
        return datetime.combine(on_date or date.today(), parsed)
    raise ValueError(f"Unsupported wake time value: {value!r}")


def subtract_seconds(moment, seconds):
    """Returns `moment` moved back by `seconds`, with no day-boundary handling"""
    return moment - timedelta(seconds=seconds)


def format_time_of_day(moment, time_format=DEFAULT_TIME_FORMAT):
    """Formats a datetime as a time-only string, omitting the date"""
    return moment.strftime(time_format)


def format_hours(hours):
    """Formats an hour amount the way the form labels show it, e.g. 8 or 8.25"""
    return f"{hours:g}"
