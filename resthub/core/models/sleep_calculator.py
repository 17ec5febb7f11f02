# resthub/core/models/sleep_calculator.py
import os
import json
import math
import pickle
import logging
from datetime import datetime

import numpy as np
import pandas as pd
from pydantic import ValidationError
from sklearn.ensemble import GradientBoostingRegressor
from sklearn.metrics import mean_absolute_error, r2_score
from sklearn.model_selection import train_test_split

from resthub.config import get_config
from resthub.core.exceptions import InferenceError, ModelLoadError
from resthub.core.models.base_model import BasePredictiveModel
from resthub.core.models.data_models import ModelInput, ModelOutput
from resthub.utils.constants import feature_columns, target_column

logger = logging.getLogger(__name__)

DEFAULT_HYPERPARAMETERS = {
    'n_estimators': 200,
    'max_depth': 3,
    'learning_rate': 0.1,
}


class SleepCalculatorModel(BasePredictiveModel):
    """
    Regression model predicting how many seconds of sleep a person actually gets.

    Features are the wake time in seconds since midnight, the desired amount
    of sleep in hours and the number of cups of coffee per day. The target is
    the actual sleep in seconds.
    """

    def __init__(self, config=None):
        """Initialize the sleep calculator model"""
        if config is None:
            config = get_config().get('model', {}) or {}
        super().__init__(config)

        self.hyperparameters = {**DEFAULT_HYPERPARAMETERS, **(self.config.get('hyperparameters') or {})}
        self.test_size = self.config.get('test_size', 0.2)
        self.random_state = self.config.get('random_state', 42)

        self.model = None
        self.feature_columns = list(feature_columns)
        self.metrics = {}

    def train(self, data):
        """
        Train the regressor on a frame with wake, estimated_sleep, coffee and actual_sleep columns.

        Returns:
            dict: mean absolute error (seconds) and R² on the held-out split
        """
        missing_columns = [col for col in self.feature_columns + [target_column] if col not in data.columns]
        if missing_columns:
            raise KeyError(f"Missing required columns: {missing_columns}")

        clean = data.dropna(subset=self.feature_columns + [target_column])
        logger.info(f"Training sleep calculator on {len(clean)} rows")

        X = clean[self.feature_columns].astype(float)
        y = clean[target_column].astype(float)

        X_train, X_test, y_train, y_test = train_test_split(
            X, y, test_size=self.test_size, random_state=self.random_state
        )

        self.model = GradientBoostingRegressor(random_state=self.random_state, **self.hyperparameters)
        self.model.fit(X_train, y_train)

        predictions = self.model.predict(X_test)
        self.metrics = {
            'mae_seconds': float(mean_absolute_error(y_test, predictions)),
            'r2': float(r2_score(y_test, predictions)),
            'train_rows': int(len(X_train)),
            'test_rows': int(len(X_test)),
        }
        logger.info(f"Sleep calculator trained: MAE {self.metrics['mae_seconds']:.1f}s, R² {self.metrics['r2']:.3f}")
        return self.metrics

    def predict(self, wake, estimated_sleep, coffee):
        """Predict actual sleep in seconds for one set of inputs"""
        if self.model is None:
            raise InferenceError("No trained model available for prediction")

        try:
            model_input = ModelInput(wake=wake, estimated_sleep=estimated_sleep, coffee=coffee)
        except ValidationError as e:
            raise InferenceError(f"Invalid model input: {e}") from e

        features = pd.DataFrame([model_input.model_dump()], columns=self.feature_columns)

        try:
            raw = self.model.predict(features)
        except Exception as e:
            raise InferenceError(f"Model prediction failed: {e}") from e

        value = float(np.asarray(raw).ravel()[0])
        if not math.isfinite(value):
            raise InferenceError(f"Model returned a non-finite prediction: {value}")

        return ModelOutput(actual_sleep=value).actual_sleep

    def save(self, filepath):
        """Save the trained model and metadata"""
        if self.model is None:
            raise ValueError("No trained model to save")

        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(f"{filepath}.pkl", 'wb') as f:
            pickle.dump(self.model, f)

        metadata = {
            'feature_columns': self.feature_columns,
            'target_column': target_column,
            'hyperparameters': self.hyperparameters,
            'metrics': self.metrics,
            'creation_date': datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        }

        with open(f"{filepath}_metadata.json", 'w') as f:
            json.dump(metadata, f, indent=2)

        logger.info(f"Model saved to {filepath}")

    def load(self, filepath):
        """Load a trained model and metadata"""
        try:
            with open(f"{filepath}_metadata.json", 'r') as f:
                metadata = json.load(f)

            with open(f"{filepath}.pkl", 'rb') as f:
                model = pickle.load(f)
        except (OSError, ValueError, ImportError, AttributeError, pickle.UnpicklingError, EOFError) as e:
            raise ModelLoadError(f"Could not load sleep calculator model from {filepath}: {e}") from e

        if metadata.get('feature_columns') != list(feature_columns):
            raise ModelLoadError(
                f"Model at {filepath} expects features {metadata.get('feature_columns')}, "
                f"not {list(feature_columns)}"
            )

        self.model = model
        self.feature_columns = metadata['feature_columns']
        self.hyperparameters = metadata.get('hyperparameters', self.hyperparameters)
        self.metrics = metadata.get('metrics', {})

        logger.debug(f"Model loaded from {filepath}")
        return self


def load_sleep_calculator(filepath, config=None):
    """Create a SleepCalculatorModel and load the trained artifact at `filepath`"""
    return SleepCalculatorModel(config=config or {}).load(filepath)
