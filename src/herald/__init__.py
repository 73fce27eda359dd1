"""
Herald - keeps a website's featured release in sync with Spotify.
"""

__version__ = "1.0.0"
