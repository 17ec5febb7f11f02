"""
Core modules for the RestHub bedtime calculator.

This package contains the functionality for:
- Holding the bedtime form inputs
- Calling the sleep calculator model
- Generating training data and training the model
- Serving the calculator over HTTP
"""
