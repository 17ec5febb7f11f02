#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
RestHub Setup Script

This script prepares RestHub for development by:
1. Installing the project and its dependencies
2. Training the sleep calculator model
3. Calculating a sample bedtime with the trained model

Usage:
    python setup_repo.py [--skip-install] [--skip-training] [--start-api]

Options:
    --skip-install      Skip installing dependencies
    --skip-training     Skip the model training step (use if you already have a model)
    --start-api         Start the API server after setup
"""

import sys
import argparse
import subprocess
import logging
from pathlib import Path

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)

# ANSI color codes for better readability
class Colors:
    GREEN = '\033[0;32m'
    BLUE = '\033[0;34m'
    YELLOW = '\033[0;33m'
    RED = '\033[0;31m'
    NC = '\033[0m'  # No Color

def print_color(color, text):
    """Print colored text"""
    print(f"{color}{text}{Colors.NC}")

def run_command(command, description, exit_on_error=True):
    """Run a command with error handling"""
    print_color(Colors.YELLOW, f"\n{description}...")
    try:
        result = subprocess.run(command, check=True, text=True, capture_output=True)
        print_color(Colors.GREEN, f"✓ {description} completed successfully")
        return result.stdout
    except subprocess.CalledProcessError as e:
        print_color(Colors.RED, f"✗ {description} failed with code {e.returncode}")
        print(f"STDOUT: {e.stdout}")
        print(f"STDERR: {e.stderr}")
        if exit_on_error:
            sys.exit(1)
        return None

def create_directories():
    """Create necessary directories"""
    print_color(Colors.YELLOW, "Creating required directories...")
    for directory in ["data", "models"]:
        Path(directory).mkdir(parents=True, exist_ok=True)
    print_color(Colors.GREEN, "✓ Directories created")

def install_dependencies():
    """Install the project with its dependencies"""
    if Path("pyproject.toml").exists():
        run_command(["uv", "pip", "install", "-e", ".[test]"], "Installing dependencies")
    else:
        print_color(Colors.RED, "pyproject.toml not found. Please ensure all dependencies are installed.")

def train_model():
    """Step 1: Train the sleep calculator model"""
    print_color(Colors.BLUE, "\n=== Step 1: Training Sleep Calculator Model ===")
    run_command(["uv", "run", "scripts/train_model.py"], "Model training")

def calculate_sample_bedtime():
    """Step 2: Calculate a bedtime with the default inputs"""
    print_color(Colors.BLUE, "\n=== Step 2: Calculating a Sample Bedtime ===")
    output = run_command(["uv", "run", "scripts/sleep_advisor.py"], "Sample bedtime", exit_on_error=False)
    if output:
        print(output)

def start_api_server():
    """Start the API server"""
    print_color(Colors.BLUE, "\n=== Starting API Server ===")
    print_color(Colors.YELLOW, "API will be available at http://localhost:8000")
    print_color(Colors.YELLOW, "To stop the server, press Ctrl+C")
    subprocess.run(["uv", "run", "uvicorn", "resthub.api.main:app", "--reload", "--host", "0.0.0.0", "--port", "8000"])

def main():
    """Main function"""
    parser = argparse.ArgumentParser(description='RestHub Setup Script')
    parser.add_argument('--skip-install', action='store_true', help='Skip installing dependencies')
    parser.add_argument('--skip-training', action='store_true', help='Skip the model training step')
    parser.add_argument('--start-api', action='store_true', help='Start the API server after setup')
    args = parser.parse_args()

    # Header
    print_color(Colors.BLUE, "================================================")
    print_color(Colors.BLUE, "RestHub - Development Setup Script")
    print_color(Colors.BLUE, "================================================")

    create_directories()
    if not args.skip_install:
        install_dependencies()
    
    if not args.skip_training:
        train_model()
    else:
        print_color(Colors.YELLOW, "\nSkipping model training as requested")
    
    calculate_sample_bedtime()
    
    print_color(Colors.GREEN, "\n================================================")
    print_color(Colors.GREEN, "Setup completed successfully!")
    print_color(Colors.GREEN, "================================================")
    print("\nThe following resources have been created:")
    print("  - Training data: data/sleep_calculator_training.csv")
    print("  - Trained model: models/sleep_calculator.pkl")
    
    if args.start_api:
        start_api_server()
    else:
        print("\nTo start the API server, run:")
        print("  uv run uvicorn resthub.api.main:app --reload --host 0.0.0.0 --port 8000")

if __name__ == "__main__":
    main()
