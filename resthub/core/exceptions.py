class PredictionError(Exception):
    """Base exception for any failure while calculating a bedtime."""
    pass


class ModelLoadError(PredictionError):
    """Exception raised when the sleep calculator model cannot be loaded or configured."""
    pass


class InferenceError(PredictionError):
    """Exception raised when the sleep calculator model fails to produce a prediction."""
    pass
