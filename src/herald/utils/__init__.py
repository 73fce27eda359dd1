"""
Utility modules for Herald.
"""

from .date_utils import normalize_release_date, format_release_date, utc_timestamp
from .expiring_cache import ExpiringCache, JsonFileStore
from .colors import Colors, print_header, print_success, print_error, print_warning

__all__ = [
    'normalize_release_date',
    'format_release_date',
    'utc_timestamp',
    'ExpiringCache',
    'JsonFileStore',
    'Colors',
    'print_header',
    'print_success',
    'print_error',
    'print_warning'
]
