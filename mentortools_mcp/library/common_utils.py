# library/common_utils.py

import os
import json
import logging
from typing import Any, Optional

import dotenv
import requests

from .constants import API_BASE_URL, CHARACTER_LIMIT, REQUEST_TIMEOUT
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http")


class MentortoolsContext:
    """
    Central configuration carrier for the Mentortools API key, base URL and
    transport settings.

    Values passed to the constructor win; anything left out falls back to the
    environment (a local .env file is loaded by ``from_env``). The context is
    read once at startup and never mutated afterwards.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
    ):
        self.api_key = api_key or os.getenv("MENTORTOOLS_API_KEY")
        self.base_url = (base_url or os.getenv("MENTORTOOLS_BASE_URL") or API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.transport = (transport or os.getenv("TRANSPORT") or "stdio").lower()
        self.host = host or os.getenv("HOST") or "0.0.0.0"
        self.port = port or _int_from_env("PORT", 3000)
        self.log_level = (log_level or os.getenv("LOG_LEVEL") or "INFO").upper()

    @classmethod
    def from_env(cls, **overrides: Any) -> "MentortoolsContext":
        """Load .env (if present) and build a context from the environment."""
        dotenv.load_dotenv()
        return cls(**overrides)

    def validate(self) -> None:
        """
        Check the settings required to start the server.

        Raises:
            ConfigurationError: If the API key is missing or the transport is unknown.
        """
        if not self.api_key:
            raise ConfigurationError("MENTORTOOLS_API_KEY environment variable is required")
        if self.transport not in TRANSPORTS:
            raise ConfigurationError(
                f"Unknown TRANSPORT '{self.transport}'. Expected one of: {', '.join(TRANSPORTS)}"
            )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got: {raw}")


def _envelope_error_text(response: requests.Response) -> Optional[str]:
    """Pull the ``error`` string out of a failed response envelope, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return None


def handle_api_error(error: Any) -> str:
    """
    Convert any failure raised while talking to Mentortools into a single
    user-facing message.

    Every input maps to exactly one message; this function never raises.
    """
    if isinstance(error, requests.HTTPError) and error.response is not None:
        status = error.response.status_code
        error_message = _envelope_error_text(error.response) or str(error)

        if status == 400:
            return f"Error: Bad request - {error_message}. Please check your input parameters."
        if status == 401:
            return "Error: Unauthorized. Please check your API key."
        if status == 403:
            return "Error: Forbidden. You don't have permission to access this resource."
        if status == 404:
            return "Error: Resource not found. Please verify the ID is correct."
        if status == 422:
            return f"Error: Validation error - {error_message}. Please check the required fields."
        if status == 429:
            return "Error: Rate limit exceeded. Please wait before making more requests."
        if status == 500:
            return f"Error: Internal server error - {error_message}. Please try again later."
        return f"Error: API request failed with status {status} - {error_message}"

    # ConnectTimeout is both a Timeout and a ConnectionError; report it as a timeout.
    if isinstance(error, requests.Timeout):
        return "Error: Request timed out. Please try again."
    if isinstance(error, requests.ConnectionError):
        return "Error: Could not connect to Mentortools API. Please check your internet connection."

    if isinstance(error, BaseException):
        message = str(error)
        if message:
            return f"Error: {message}"
        return f"Error: Unexpected error occurred: {type(error).__name__}"

    return f"Error: Unexpected error occurred: {error}"


def format_json(result: Any) -> str:
    """
    Render an API result as pretty JSON for the tool response, truncated to
    CHARACTER_LIMIT characters.
    """
    text = json.dumps(result, indent=2, ensure_ascii=False, default=str)
    return truncate_text(text)


def truncate_text(text: str, limit: int = CHARACTER_LIMIT) -> str:
    if len(text) <= limit:
        return text
    logger.info(f"Truncating tool response from {len(text)} to {limit} characters")
    return (
        text[:limit]
        + f"\n\n[Response truncated at {limit} characters. "
        "Use a smaller 'limit' or a larger 'offset' to page through the results.]"
    )
