from resthub.core.state.bedtime_form import BedtimeForm, Stepper

__all__ = ['BedtimeForm', 'Stepper']
