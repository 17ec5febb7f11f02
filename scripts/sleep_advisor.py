#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Script to calculate an ideal bedtime from the command line.

Example:
    python scripts/sleep_advisor.py --wake-time 07:00 --sleep-amount 8 --coffee 1
"""

import os
import sys
import argparse
import logging
from functools import partial

# Add the project root to the path so we can import our modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from resthub.config import ConfigManager
from resthub.core.models.sleep_calculator import load_sleep_calculator
from resthub.core.services.bedtime_service import BedtimePredictor
from resthub.core.state.bedtime_form import BedtimeForm
from resthub.utils.constants import DEFAULT_TIME_FORMAT, alert_titles
from resthub.utils.time_conversions import parse_wake_time

# Set up logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Calculate your ideal bedtime')
    
    parser.add_argument(
        '--config', 
        type=str, 
        default='config/config.yaml',
        help='Path to configuration file'
    )
    
    parser.add_argument(
        '--wake-time', 
        type=str, 
        default=None,
        help='When do you want to wake up? (HH:MM, default 07:00)'
    )
    
    parser.add_argument(
        '--sleep-amount', 
        type=float, 
        default=None,
        help='Desired amount of sleep in hours (4-12, steps of 0.25)'
    )
    
    parser.add_argument(
        '--coffee', 
        type=int, 
        default=None,
        help='Daily coffee intake in cups (1-20)'
    )
    
    parser.add_argument(
        '--model-path', 
        type=str, 
        default=None,
        help='Path prefix of the trained model (defaults to model.path in the config)'
    )
    
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager(args.config)
    
    try:
        wake_up = parse_wake_time(args.wake_time) if args.wake_time else None
        form = BedtimeForm(wake_up=wake_up, sleep_amount=args.sleep_amount, coffee_amount=args.coffee)
    except ValueError as e:
        logger.error(f"Invalid input: {str(e)}")
        return 2
    
    model_path = args.model_path or config.get('model.path', 'models/sleep_calculator')
    predictor = BedtimePredictor(
        partial(load_sleep_calculator, model_path),
        time_format=config.get('display.time_format', DEFAULT_TIME_FORMAT)
    )
    
    for title, label in form.sections():
        print(f"{title} {label}")
    
    alert = predictor.calculate_bedtime(form)
    print()
    print(alert.title)
    print(alert.message)
    form.dismiss_alert()
    
    return 1 if alert.title == alert_titles['error'] else 0

if __name__ == "__main__":
    sys.exit(main())
