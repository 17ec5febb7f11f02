class BasePredictiveModel:
    """Base class for models that turn wake time, desired sleep and coffee into actual sleep"""
    
    def __init__(self, config=None):
        self.config = config or {}
    
    def predict(self, wake, estimated_sleep, coffee):
        """Predict actual sleep in seconds"""
        raise NotImplementedError
    
    def save(self, path):
        """Save model to path"""
        raise NotImplementedError
        
    def load(self, path):
        """Load model from path"""
        raise NotImplementedError
