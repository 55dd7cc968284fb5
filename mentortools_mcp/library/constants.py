"""
Mentortools API constants and the closed value sets used by the input contracts.
"""

from typing import Literal, get_args

API_BASE_URL = "https://app.mentortools.com/public_api"
REQUEST_TIMEOUT = 30  # seconds
CHARACTER_LIMIT = 25000
DEFAULT_LIMIT = 15
DEFAULT_MEDIA_LIMIT = 100
DEFAULT_OFFSET = 0
MAX_LIMIT = 100

UPLOAD_ENDPOINT = "/mediastorage/v1/files/upload"

ContentBlockType = Literal[
    "text",
    "html",
    "btn",
    "video",
    "audio",
    "pdf",
    "quiz_text",
    "quiz_video",
    "quiz_audio",
    "certificate",
]
ModuleViewType = Literal["list", "grid"]
PaymentType = Literal["paid", "free"]
AccessType = Literal["subscription", "one_time", "number_of_days_access"]
LessonType = Literal["lesson", "quiz"]
ButtonPosition = Literal["left", "center", "right"]
ButtonSize = Literal["small", "medium", "large"]
ButtonTarget = Literal["_self", "_blank"]

CONTENT_BLOCK_TYPES = get_args(ContentBlockType)
MODULE_VIEW_TYPES = get_args(ModuleViewType)
PAYMENT_TYPES = get_args(PaymentType)
ACCESS_TYPES = get_args(AccessType)
LESSON_TYPES = get_args(LessonType)
BUTTON_POSITIONS = get_args(ButtonPosition)
BUTTON_SIZES = get_args(ButtonSize)
BUTTON_TARGETS = get_args(ButtonTarget)
