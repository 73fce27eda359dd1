"""
Core services for Herald.
"""

from .release_selector import ReleaseSelector, get_largest_image
from .release_merger import ReleaseMerger
from .release_store import ReleaseStore
from .release_service import ReleaseService, RefreshResult
from .featured_release import FeaturedReleaseLoader, DismissState

__all__ = [
    'ReleaseSelector',
    'get_largest_image',
    'ReleaseMerger',
    'ReleaseStore',
    'ReleaseService',
    'RefreshResult',
    'FeaturedReleaseLoader',
    'DismissState'
]
