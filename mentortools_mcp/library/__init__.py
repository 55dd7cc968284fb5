"""
Mentortools API client and per-resource wrappers.
"""

from .api_client import MentortoolsClient, ResponseEnvelope
from .common_utils import MentortoolsContext, format_json, handle_api_error
from .courses import MentortoolsCourses
from .exceptions import (
    ClientNotInitializedError,
    ConfigurationError,
    MentortoolsAPIError,
    MentortoolsError,
)
from .lessons import MentortoolsLessons
from .media import MentortoolsFiles, MentortoolsFolders
from .modules import MentortoolsModules
from .orders import MentortoolsOrders
from .submodules import MentortoolsSubmodules
