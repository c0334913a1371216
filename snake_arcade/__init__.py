"""
Snake Arcade: a wrap-around Snake game with timed power-ups.
"""

__version__ = "0.1.0"
