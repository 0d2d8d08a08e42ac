"""
tilequery CLI - Command-line interface for within expressions.

Usage:
    tilequery-cli check expression.json features.yaml --tile 3/4/2
    tilequery-cli serialize expression.json
"""

__version__ = "1.0.0"
