"""
User interface components for Herald.
"""

from .cli import HeraldCLI
from .display import DisplayManager

__all__ = [
    'HeraldCLI',
    'DisplayManager'
]
