#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Script to train the sleep calculator model for the RestHub app.
This generates synthetic training data, trains the regressor and saves it.
"""

import os
import sys
import argparse
import logging
import pandas as pd
from pathlib import Path

# Add the project root to the path so we can import our modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from resthub.config import ConfigManager
from resthub.core.models.sleep_calculator import SleepCalculatorModel
from resthub.data_generation.sleep_calculator_data_generator import SleepCalculatorDataGenerator

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler('train_model.log')
    ]
)

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Train the sleep calculator model for RestHub')
    
    parser.add_argument(
        '--config', 
        type=str, 
        default='config/config.yaml',
        help='Path to configuration file'
    )
    
    parser.add_argument(
        '--data-file', 
        type=str, 
        default=None,
        help='CSV with wake, estimated_sleep, coffee and actual_sleep columns (generated if omitted)'
    )
    
    parser.add_argument(
        '--num-samples', 
        type=int, 
        default=None,
        help='Number of synthetic samples to generate'
    )
    
    parser.add_argument(
        '--output', 
        type=str, 
        default=None,
        help='Path prefix for the saved model (defaults to model.path in the config)'
    )
    
    parser.add_argument(
        '--seed', 
        type=int, 
        default=None,
        help='Random seed for reproducibility'
    )
    
    return parser.parse_args(argv)

def load_training_data(args):
    """Load training data from CSV, or generate it."""
    if args.data_file:
        data = pd.read_csv(args.data_file)
        logger.info(f"Loaded {len(data)} training rows from {args.data_file}")
        return data
    
    generator = SleepCalculatorDataGenerator(args.config, seed=args.seed)
    data = generator.generate(args.num_samples)
    
    Path('data').mkdir(parents=True, exist_ok=True)
    data.to_csv('data/sleep_calculator_training.csv', index=False)
    logger.info(f"Saved {len(data)} generated rows to data/sleep_calculator_training.csv")
    return data

def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)
    
    model_config = config.get('model', {}) or {}
    if args.seed is not None:
        model_config = {**model_config, 'random_state': args.seed}
    output = args.output or config.get('model.path', 'models/sleep_calculator')
    
    try:
        data = load_training_data(args)
        model = SleepCalculatorModel(config=model_config)
        metrics = model.train(data)
        model.save(output)
    except Exception as e:
        logger.error(f"Training failed: {str(e)}")
        return 1
    
    logger.info(f"Training complete: {metrics}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
