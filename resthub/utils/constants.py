"""
Constants used throughout the RestHub app.
This includes input ranges, default values and the user-facing alert text.
"""

# Inclusive ranges and step sizes for the form steppers
sleep_amount_range = {
    'min': 4.0,
    'max': 12.0,
    'step': 0.25,
}

coffee_amount_range = {
    'min': 1,
    'max': 20,
    'step': 1,
}

# Default values applied when the form is created
default_values = {
    'wake_hour': 7,
    'wake_minute': 0,
    'sleep_amount': 8.0,
    'coffee_amount': 1,
}

# Feature columns expected by the sleep calculator model, in order
feature_columns = ['wake', 'estimated_sleep', 'coffee']
target_column = 'actual_sleep'

# Alert text shown to the user
alert_titles = {
    'success': 'Your ideal bedtime is:',
    'error': 'Error',
}

alert_messages = {
    'error': 'Sorry, there was a problem calculating your bedtime.',
}

# Form section headings
section_titles = {
    'wake_time': 'When do you want to wake up?',
    'sleep_amount': 'Desired amount of sleep:',
    'coffee_amount': 'Daily Coffee Intake',
}

DEFAULT_TIME_FORMAT = '%H:%M'
