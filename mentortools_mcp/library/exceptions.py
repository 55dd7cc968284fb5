"""
Exceptions raised by the Mentortools library layer.
"""

from typing import Optional


class MentortoolsError(Exception):
    """Base class for all Mentortools adapter errors."""


class ConfigurationError(MentortoolsError):
    """Raised at startup when required configuration is missing or invalid."""


class ClientNotInitializedError(MentortoolsError):
    """Raised when a network call is attempted before the client has an API key."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "API client not initialized. Please set MENTORTOOLS_API_KEY environment variable."
        )


class MentortoolsAPIError(MentortoolsError):
    """
    The remote API answered, but the response envelope reported a failure
    (``done: false``) or could not be read as an envelope at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
