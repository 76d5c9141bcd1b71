"""
Augure - AI-assisted crypto wallet profit/loss analysis service.
"""

__version__ = "0.1.0"
