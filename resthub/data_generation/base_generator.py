# resthub/data_generation/base_generator.py

import numpy as np

from resthub.config import ConfigManager


class BaseDataGenerator:
    """Base class for all data generators with common functionality"""
    
    def __init__(self, config_path=None, seed=None):
        """Initialize the base generator with configuration"""
        self.config_manager = ConfigManager(config_path)
        self.config = self.config_manager.get('data_generation', {}) or {}
        self.seed = seed if seed is not None else self.config.get('seed')
        self.rng = np.random.default_rng(self.seed)
    
    def generate_noise(self, scale, size):
        """Generate zero-mean Gaussian noise"""
        return self.rng.normal(0, scale, size)
    
    def sample_grid(self, minimum, maximum, step, size):
        """Sample values uniformly from the inclusive grid minimum, minimum + step, ..., maximum"""
        steps = int(round((maximum - minimum) / step))
        return minimum + self.rng.integers(0, steps + 1, size) * step
