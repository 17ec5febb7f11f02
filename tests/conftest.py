"""Global test fixtures and utilities for RestHub tests"""
import pytest
from datetime import datetime
from unittest.mock import Mock

from resthub.core.models.sleep_calculator import SleepCalculatorModel
from resthub.data_generation.sleep_calculator_data_generator import SleepCalculatorDataGenerator


# ============================================================================
# Model Fixtures
# ============================================================================

class StubSleepModel:
    """Sleep calculator stand-in returning a fixed actual sleep"""

    def __init__(self, actual_sleep=8 * 3600):
        self.actual_sleep = actual_sleep
        self.calls = []

    def predict(self, wake, estimated_sleep, coffee):
        self.calls.append((wake, estimated_sleep, coffee))
        return self.actual_sleep


@pytest.fixture
def stub_model():
    """Model returning 8 hours of actual sleep"""
    return StubSleepModel()


@pytest.fixture
def stub_loader(stub_model):
    """Loader returning the stub model, recording each load"""
    return Mock(return_value=stub_model)


@pytest.fixture
def failing_model():
    """Model whose prediction always fails"""
    model = Mock()
    model.predict.side_effect = RuntimeError("inference exploded")
    return model


@pytest.fixture
def wake_seven():
    """07:00 on a fixed date"""
    return datetime(2024, 3, 8, 7, 0)


# ============================================================================
# Trained Model Fixtures
# ============================================================================

@pytest.fixture
def training_data():
    """Small reproducible synthetic training set"""
    return SleepCalculatorDataGenerator(config_path='missing-config.yaml', seed=7).generate(400)


@pytest.fixture
def trained_model_path(tmp_path, training_data):
    """Path prefix of a small trained and saved sleep calculator"""
    model = SleepCalculatorModel(config={
        'hyperparameters': {'n_estimators': 30, 'max_depth': 2},
        'random_state': 7,
    })
    model.train(training_data)
    path = str(tmp_path / "models" / "sleep_calculator")
    model.save(path)
    return path
