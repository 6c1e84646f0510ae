"""
Exceptions for RAWS data access and processing.
"""


class RAWSError(Exception):
    """Base exception for RAWS-related errors."""

    pass


class RAWSParameterError(RAWSError, ValueError):
    """Missing or malformed caller input."""

    pass


class RAWSConnectionError(RAWSError):
    """Error connecting to a RAWS data service."""

    pass


class RAWSQueryError(RAWSError):
    """Requested station, timezone or data could not be found."""

    pass
