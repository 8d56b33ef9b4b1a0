"""
Exception types raised by the ledmovie package.
"""


class LedMovieError(Exception):
    """Base class for all ledmovie errors."""


class InvalidFrame(LedMovieError, ValueError):
    """A frame (or a movie's set of frames) cannot be encoded consistently."""


class InvalidParameter(LedMovieError, ValueError):
    """An argument is outside the range the operation supports."""


class DeviceError(LedMovieError):
    """A device collaborator refused or failed an operation."""
