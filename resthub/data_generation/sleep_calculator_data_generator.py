import logging

import numpy as np
import pandas as pd

from resthub.data_generation.base_generator import BaseDataGenerator
from resthub.utils.constants import sleep_amount_range, coffee_amount_range, feature_columns, target_column

logger = logging.getLogger(__name__)

# Wake times are drawn between 04:00 and 12:00, on whole minutes
EARLIEST_WAKE_SECONDS = 4 * 3600
LATEST_WAKE_SECONDS = 12 * 3600
REFERENCE_WAKE_SECONDS = 7 * 3600
MINIMUM_ACTUAL_SLEEP = 3600.0


class SleepCalculatorDataGenerator(BaseDataGenerator):
    """
    Generates synthetic training rows for the sleep calculator model.

    Each row holds a wake time (seconds since midnight), a desired amount of
    sleep (hours), a daily coffee count and the actual sleep in seconds a
    person needs to spend to get that rest. Caffeine adds time on top of the
    desired sleep, and waking later than 07:00 adds a little more.
    """

    def __init__(self, config_path=None, seed=None):
        super().__init__(config_path, seed)
        self.coffee_penalty = self.config.get('coffee_penalty_seconds', 540)
        self.noise_scale = self.config.get('noise_seconds', 900)
        self.wake_factor = self.config.get('wake_factor', 0.05)

    def generate(self, num_samples=None):
        """Generate a DataFrame with wake, estimated_sleep, coffee and actual_sleep columns"""
        num_samples = num_samples or self.config.get('num_samples', 10000)
        logger.info(f"Generating {num_samples} sleep calculator samples")

        wake = self.sample_grid(EARLIEST_WAKE_SECONDS, LATEST_WAKE_SECONDS, 60, num_samples).astype(float)
        estimated_sleep = self.sample_grid(
            sleep_amount_range['min'], sleep_amount_range['max'], sleep_amount_range['step'], num_samples
        )
        coffee = self.sample_grid(
            coffee_amount_range['min'], coffee_amount_range['max'], coffee_amount_range['step'], num_samples
        ).astype(float)

        actual_sleep = (
            estimated_sleep * 3600
            + (coffee - 1) * self.coffee_penalty
            + (wake - REFERENCE_WAKE_SECONDS) * self.wake_factor
            + self.generate_noise(self.noise_scale, num_samples)
        )
        actual_sleep = np.clip(actual_sleep, MINIMUM_ACTUAL_SLEEP, None)

        data = pd.DataFrame({
            'wake': wake,
            'estimated_sleep': estimated_sleep,
            'coffee': coffee,
            target_column: np.round(actual_sleep),
        })
        return data[feature_columns + [target_column]]
