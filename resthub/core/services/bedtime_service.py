# resthub/core/services/bedtime_service.py
import logging

from resthub.core.exceptions import PredictionError, ModelLoadError, InferenceError
from resthub.core.models.data_models import BedtimeAlert
from resthub.utils.constants import alert_titles, alert_messages, DEFAULT_TIME_FORMAT
from resthub.utils.time_conversions import (
    seconds_since_midnight, subtract_seconds, format_time_of_day
)

logger = logging.getLogger(__name__)


class BedtimePredictor:
    """
    Turns the bedtime form inputs into an ideal bedtime.

    `model_loader` is a zero-argument callable returning an object with
    `predict(wake, estimated_sleep, coffee)`. It is called on every
    calculation so the model is never reused between requests.
    """

    def __init__(self, model_loader, time_format=DEFAULT_TIME_FORMAT):
        self.model_loader = model_loader
        self.time_format = time_format

    def predict_bedtime(self, wake_up, sleep_amount, coffee_amount):
        """
        Predict the bedtime as a datetime.

        Raises:
            ModelLoadError: the model could not be loaded or configured
            InferenceError: the model failed to produce a prediction
        """
        try:
            model = self.model_loader()
        except ModelLoadError:
            raise
        except Exception as e:
            raise ModelLoadError(f"Could not configure sleep calculator model: {e}") from e

        try:
            wake = float(seconds_since_midnight(wake_up))
            actual_sleep = float(model.predict(wake, float(sleep_amount), float(coffee_amount)))
            return subtract_seconds(wake_up, actual_sleep)
        except InferenceError:
            raise
        except Exception as e:
            raise InferenceError(f"Sleep calculator prediction failed: {e}") from e

    def calculate_bedtime(self, form):
        """Run a calculation for the form and raise its alert with the result"""
        try:
            bedtime = self.predict_bedtime(form.wake_up, form.sleep_amount, form.coffee_amount)
            title = alert_titles['success']
            message = format_time_of_day(bedtime, self.time_format)
        except PredictionError as e:
            logger.error(f"{type(e).__name__}: {e}")
            title = alert_titles['error']
            message = alert_messages['error']

        form.show_alert(title, message)
        return BedtimeAlert(title=form.alert_title, message=form.alert_message, is_showing=form.showing_alert)
