# resthub/core/state/bedtime_form.py
import math
from datetime import datetime, date, time

from resthub.utils.constants import (
    sleep_amount_range, coffee_amount_range, default_values, section_titles
)
from resthub.utils.time_conversions import format_hours


class Stepper:
    """
    A bounded numeric value adjusted in fixed increments.

    The value never leaves [minimum, maximum]: increments and decrements clamp,
    and assigned values are clamped and snapped to the step grid.
    """

    def __init__(self, value, minimum, maximum, step):
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self._value = self._normalize(value)

    def _normalize(self, value):
        if not math.isfinite(value):
            raise ValueError(f"Stepper value must be a finite number, not {value!r}")
        clamped = min(max(value, self.minimum), self.maximum)
        steps = round((clamped - self.minimum) / self.step)
        snapped = self.minimum + steps * self.step
        # Snapping can overshoot when the range is not a whole number of steps
        snapped = min(snapped, self.maximum)
        return type(self.minimum)(snapped)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, new_value):
        self._value = self._normalize(new_value)

    def increment(self):
        self.value = self._value + self.step
        return self._value

    def decrement(self):
        self.value = self._value - self.step
        return self._value

    @property
    def range(self):
        return {'min': self.minimum, 'max': self.maximum, 'step': self.step}


def default_wake_time(on_date=None):
    """07:00 on the given date (today by default)"""
    return datetime.combine(
        on_date or date.today(),
        time(default_values['wake_hour'], default_values['wake_minute'])
    )


class BedtimeForm:
    """Holds the bedtime form inputs and the alert shown after a calculation"""

    def __init__(self, wake_up=None, sleep_amount=None, coffee_amount=None):
        self.wake_up = wake_up if wake_up is not None else default_wake_time()
        self._sleep_amount = Stepper(
            default_values['sleep_amount'] if sleep_amount is None else float(sleep_amount),
            sleep_amount_range['min'],
            sleep_amount_range['max'],
            sleep_amount_range['step'],
        )
        self._coffee_amount = Stepper(
            default_values['coffee_amount'] if coffee_amount is None else int(coffee_amount),
            coffee_amount_range['min'],
            coffee_amount_range['max'],
            coffee_amount_range['step'],
        )

        self.alert_title = ""
        self.alert_message = ""
        self.showing_alert = False

    @property
    def sleep_amount(self):
        return self._sleep_amount.value

    @sleep_amount.setter
    def sleep_amount(self, value):
        self._sleep_amount.value = float(value)

    @property
    def coffee_amount(self):
        return self._coffee_amount.value

    @coffee_amount.setter
    def coffee_amount(self, value):
        self._coffee_amount.value = int(value)

    def increment_sleep(self):
        return self._sleep_amount.increment()

    def decrement_sleep(self):
        return self._sleep_amount.decrement()

    def increment_coffee(self):
        return self._coffee_amount.increment()

    def decrement_coffee(self):
        return self._coffee_amount.decrement()

    def show_alert(self, title, message):
        self.alert_title = title
        self.alert_message = message
        self.showing_alert = True

    def dismiss_alert(self):
        """Acknowledge the alert ("OK")"""
        self.showing_alert = False

    @property
    def sleep_label(self):
        return f"{format_hours(self.sleep_amount)} hours"

    @property
    def coffee_label(self):
        return "1 cup" if self.coffee_amount == 1 else f"{self.coffee_amount} cups"

    def sections(self):
        """Form sections with their current labels, in display order"""
        return [
            (section_titles['wake_time'], self.wake_up.strftime('%H:%M')),
            (section_titles['sleep_amount'], self.sleep_label),
            (section_titles['coffee_amount'], self.coffee_label),
        ]

    @property
    def ranges(self):
        return {
            'sleep_amount': self._sleep_amount.range,
            'coffee_amount': self._coffee_amount.range,
        }
