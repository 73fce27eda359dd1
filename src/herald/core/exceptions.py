"""
Custom exceptions for Herald.
"""


class HeraldError(Exception):
    """Base exception for Herald."""
    pass


class ConfigurationError(HeraldError):
    """Exception raised when configuration is invalid."""
    pass


class UpstreamError(HeraldError):
    """Exception raised when a Spotify API call fails."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyInputError(HeraldError):
    """Exception raised when the catalog returns no releases."""
    pass


class PriorDataReadError(HeraldError):
    """Exception raised when the previous output file cannot be read."""
    pass


class InvalidReleaseDataError(HeraldError):
    """Exception raised when a release record is missing required fields."""
    pass
