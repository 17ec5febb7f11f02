"""Tests for the bedtime form state"""
import random
import pytest
from datetime import datetime, date

from resthub.core.state.bedtime_form import BedtimeForm, Stepper, default_wake_time


class TestDefaults:
    """Test values applied at construction"""

    def test_default_values(self):
        form = BedtimeForm()
        assert form.wake_up.hour == 7
        assert form.wake_up.minute == 0
        assert form.wake_up.date() == date.today()
        assert form.sleep_amount == 8.0
        assert form.coffee_amount == 1

    def test_alert_starts_hidden(self):
        form = BedtimeForm()
        assert form.alert_title == ""
        assert form.alert_message == ""
        assert form.showing_alert is False

    def test_default_wake_time_on_date(self):
        assert default_wake_time(date(2024, 3, 8)) == datetime(2024, 3, 8, 7, 0)


class TestSleepAmountStepper:
    """Test sleep amount stays within [4, 12] in steps of 0.25"""

    def test_increment_and_decrement(self):
        form = BedtimeForm()
        assert form.increment_sleep() == 8.25
        assert form.decrement_sleep() == 8.0
        assert form.decrement_sleep() == 7.75

    def test_clamps_at_bounds(self):
        form = BedtimeForm(sleep_amount=12.0)
        assert form.increment_sleep() == 12.0
        form.sleep_amount = 4.0
        assert form.decrement_sleep() == 4.0

    def test_random_step_sequences_stay_in_range(self):
        """Test any sequence of steps keeps the value on the grid within range"""
        rng = random.Random(1234)
        for _ in range(50):
            form = BedtimeForm()
            for _ in range(200):
                if rng.random() < 0.5:
                    form.increment_sleep()
                else:
                    form.decrement_sleep()
                assert 4.0 <= form.sleep_amount <= 12.0
                assert (form.sleep_amount * 4) == int(form.sleep_amount * 4)

    def test_assignment_is_clamped_and_snapped(self):
        form = BedtimeForm()
        form.sleep_amount = 20
        assert form.sleep_amount == 12.0
        form.sleep_amount = 1
        assert form.sleep_amount == 4.0
        form.sleep_amount = 6.3
        assert form.sleep_amount == 6.25

    def test_label(self):
        form = BedtimeForm(sleep_amount=8.25)
        assert form.sleep_label == "8.25 hours"


class TestCoffeeStepper:
    """Test coffee intake stays within [1, 20]"""

    def test_random_step_sequences_stay_in_range(self):
        rng = random.Random(99)
        for _ in range(50):
            form = BedtimeForm()
            for _ in range(200):
                if rng.random() < 0.5:
                    form.increment_coffee()
                else:
                    form.decrement_coffee()
                assert 1 <= form.coffee_amount <= 20
                assert isinstance(form.coffee_amount, int)

    def test_clamps_at_bounds(self):
        form = BedtimeForm(coffee_amount=20)
        assert form.increment_coffee() == 20
        form.coffee_amount = 0
        assert form.coffee_amount == 1
        assert form.decrement_coffee() == 1

    def test_labels(self):
        form = BedtimeForm()
        assert form.coffee_label == "1 cup"
        form.increment_coffee()
        assert form.coffee_label == "2 cups"


class TestStepper:
    """Test the generic stepper"""

    def test_range(self):
        stepper = Stepper(5, 1, 20, 1)
        assert stepper.range == {'min': 1, 'max': 20, 'step': 1}

    def test_initial_value_clamped(self):
        assert Stepper(50, 1, 20, 1).value == 20
        assert Stepper(0.5, 4.0, 12.0, 0.25).value == 4.0


class TestAlert:
    """Test alert show and dismiss"""

    def test_show_then_dismiss(self):
        form = BedtimeForm()
        form.show_alert("Your ideal bedtime is:", "23:00")
        assert form.showing_alert is True
        assert form.alert_message == "23:00"
        form.dismiss_alert()
        assert form.showing_alert is False

    def test_sections(self):
        form = BedtimeForm(wake_up=datetime(2024, 3, 8, 6, 30))
        assert form.sections() == [
            ("When do you want to wake up?", "06:30"),
            ("Desired amount of sleep:", "8 hours"),
            ("Daily Coffee Intake", "1 cup"),
        ]


class TestNonFiniteInput:
    """Test NaN and infinity are rejected instead of breaking the range"""

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
    def test_constructor_rejects(self, value):
        with pytest.raises(ValueError, match="finite"):
            BedtimeForm(sleep_amount=value)

    @pytest.mark.parametrize("value", [float('nan'), float('inf')])
    def test_assignment_rejected_and_value_kept(self, value):
        form = BedtimeForm(sleep_amount=6.5)
        with pytest.raises(ValueError, match="finite"):
            form.sleep_amount = value
        assert form.sleep_amount == 6.5
