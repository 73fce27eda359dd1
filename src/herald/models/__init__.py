"""
Data models for Herald.
"""

from .releases import ReleaseImage, RawRelease, OutputRecord

__all__ = [
    'ReleaseImage',
    'RawRelease',
    'OutputRecord'
]
