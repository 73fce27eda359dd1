"""
Client modules for external APIs.
"""

from .spotify import SpotifyClient

__all__ = [
    'SpotifyClient'
]
