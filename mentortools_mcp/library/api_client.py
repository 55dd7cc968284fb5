"""
Mentortools public API client.

Every Mentortools endpoint answers with the same envelope:

    {"done": true,  "result": <payload>}
    {"done": false, "error": "<reason>"}

``MentortoolsClient`` performs one HTTP round trip per call, unwraps that
envelope and hands back ``result`` untouched. Failures surface as
``requests`` exceptions (transport / HTTP status) or ``MentortoolsAPIError``
(``done`` is false); ``handle_api_error`` in ``common_utils`` turns either
into the message shown to the user.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from .constants import API_BASE_URL, REQUEST_TIMEOUT, UPLOAD_ENDPOINT
from .exceptions import ClientNotInitializedError, ConfigurationError, MentortoolsAPIError

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class ResponseEnvelope(BaseModel):
    """Wire wrapper around every Mentortools response."""

    model_config = ConfigDict(extra="ignore")

    done: bool
    result: Any = None
    error: Optional[str] = None


class MentortoolsClient:
    """
    Thin wrapper around a ``requests.Session`` configured for the Mentortools API.

    The session is created by ``initialize`` (or by passing ``api_key`` to the
    constructor) and is read-only afterwards, so one client can be shared by
    concurrent tool invocations.

    Attributes:
        base_url (str): API root, e.g. ``https://app.mentortools.com/public_api``
        timeout (float): Per-request timeout in seconds
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[requests.Session] = None
        if api_key:
            self.initialize(api_key)

    def initialize(self, api_key: str) -> None:
        """
        Create the HTTP session with bearer authentication.

        No Content-Type is fixed on the session: JSON requests get it from
        ``json=`` and multipart uploads need requests to set the boundary.
        """
        if not api_key:
            raise ConfigurationError("Cannot initialize API client without an API key.")
        session = requests.Session()
        session.headers.update({
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
        })
        self._session = session
        logger.info(f"Mentortools API client initialized for {self.base_url}")

    @property
    def is_initialized(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            raise ClientNotInitializedError()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def execute(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Call one Mentortools endpoint and return the envelope's ``result``.

        Args:
            endpoint (str): Path below the API root, e.g. ``/courses/v1/42``
            method (str): GET, POST, PUT, PATCH or DELETE
            body: JSON-serialisable request body (omitted when None)
            query (dict): URL parameters; None values are dropped

        Returns:
            The ``result`` payload, shape depending on the endpoint (list, dict,
            bool or int).

        Raises:
            ClientNotInitializedError: If ``initialize`` has not been called.
            requests.HTTPError: For non-2xx responses.
            requests.Timeout / requests.ConnectionError: Transport failures.
            MentortoolsAPIError: If the envelope reports ``done: false``.
        """
        session = self.session
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        request_url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {endpoint}")

        response = session.request(
            method,
            request_url,
            json=body,
            params=encode_query(query),
            timeout=self.timeout,
        )
        logger.info(f"{method} {endpoint} -> {response.status_code}")
        response.raise_for_status()

        return unwrap_envelope(response, "API request failed")

    def upload_file(
        self,
        content: bytes,
        filename: str,
        parent_folder_id: Optional[int] = None,
    ) -> Any:
        """
        Upload a file to media storage as multipart/form-data.

        Args:
            content (bytes): Raw file content
            filename (str): Name to store the file under (with extension)
            parent_folder_id (int, optional): Target folder; falsy values (None, 0)
                upload to the root folder and are not sent.

        Returns:
            The uploaded file's metadata from the envelope ``result``.
        """
        session = self.session
        files = {"file": (filename, content)}
        data = {}
        if parent_folder_id:
            data["parent_folder_id"] = str(parent_folder_id)

        logger.debug(f"POST {UPLOAD_ENDPOINT} ({len(content)} bytes)")
        response = session.post(
            f"{self.base_url}{UPLOAD_ENDPOINT}",
            files=files,
            data=data or None,
            timeout=self.timeout,
        )
        logger.info(f"POST {UPLOAD_ENDPOINT} -> {response.status_code}")
        response.raise_for_status()

        return unwrap_envelope(response, "File upload failed")


def encode_query(query: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Drop unset parameters and spell booleans the way the API expects
    (``true``/``false`` rather than Python's ``True``/``False``).
    """
    if not query:
        return None
    encoded = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded[key] = value
    return encoded or None


def unwrap_envelope(response: requests.Response, fallback_error: str) -> Any:
    """
    Parse a response body as a ``ResponseEnvelope`` and return its result.

    Raises:
        MentortoolsAPIError: If the body is not an envelope or ``done`` is false.
    """
    try:
        payload = response.json()
    except ValueError:
        raise MentortoolsAPIError(
            "Mentortools API returned a response that is not valid JSON",
            status_code=response.status_code,
        )

    try:
        envelope = ResponseEnvelope.model_validate(payload)
    except ValidationError:
        raise MentortoolsAPIError(
            "Mentortools API returned an unexpected response format",
            status_code=response.status_code,
        )

    if not envelope.done:
        raise MentortoolsAPIError(envelope.error or fallback_error, status_code=response.status_code)

    return envelope.result
