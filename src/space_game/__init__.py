"""
Space Game 101: a single-screen arcade shooter.
"""

__version__ = "0.1.0"
