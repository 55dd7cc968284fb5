"""
Input contracts for courses, modules, lessons and submodules.
"""

from typing import List

from pydantic import Field

from ..library.constants import (
    AccessType,
    ButtonPosition,
    ButtonSize,
    ButtonTarget,
    ContentBlockType,
    LessonType,
    ModuleViewType,
    PaymentType,
)
from .base import (
    Contract,
    PaginationInput,
    PositiveId,
    StrictBoolean,
    StrictInteger,
    Timestamp,
    Title,
    extend,
    merge,
    pick,
)

# ---------------------------------------------------------------------- #
# Courses
# ---------------------------------------------------------------------- #

ListCoursesInput = extend(
    PaginationInput,
    "ListCoursesInput",
    doc="List courses with pagination.",
    archived=(bool, Field(default=False, strict=True, description="Include archived courses")),
)

CountCoursesInput = pick(ListCoursesInput, "CountCoursesInput", "archived", doc="Count courses.")


class CourseIdInput(Contract):
    course_id: PositiveId = Field(..., description="Course ID")


class CourseCreateInput(Contract):
    """Fields of a new course."""

    title: Title = Field(..., description="Title of the course")
    description: str = Field(default=None, description="Description of the course")
    image_id: str = Field(default=None, description="ID of the course image from media storage")
    url: str = Field(default=None, description="URL of the sales page")
    payload: str = Field(default=None, description="Additional content (text or HTML)")
    module_view_type: ModuleViewType = Field(
        default=None, description="How modules are displayed: 'list' or 'grid'"
    )
    payment_type: PaymentType = Field(default=None, description="Payment type: 'paid' or 'free'")
    course_access_type: AccessType = Field(
        default=None,
        description="Access type: 'subscription', 'one_time', or 'number_of_days_access'",
    )
    number_days_access: int = Field(
        default=None, strict=True, ge=0,
        description="Number of days access (if access type is 'number_of_days_access')",
    )
    is_active: StrictBoolean = Field(..., description="Whether the course is active")
    is_secret: StrictBoolean = Field(..., description="Whether the course is hidden from public listing")
    is_archived: StrictBoolean = Field(..., description="Whether the course is archived")
    is_displayed_in_app: StrictBoolean = Field(..., description="Whether shown in mobile app")
    is_offline_downloadable: StrictBoolean = Field(..., description="Whether downloadable for offline access")
    available_at: Timestamp = Field(default=None, description="Availability timestamp in milliseconds")
    launch_date_enabled: StrictBoolean = Field(default=None, description="Enable launch date")
    launch_date: Timestamp = Field(default=None, description="Launch date timestamp in milliseconds")
    order: StrictInteger = Field(default=None, description="Order position in the list")


# A full update must state the position explicitly.
CourseUpdateInput = extend(
    CourseCreateInput,
    "CourseUpdateInput",
    doc="All fields of a course, replacing the stored ones.",
    order=(int, Field(..., strict=True, description="Order position in the list (required for update)")),
)


class CoursePatchInput(Contract):
    """Course fields to change; anything left out stays as it is."""

    title: Title = Field(default=None, description="Title of the course")
    description: str = Field(default=None, description="Description of the course")
    image_id: str = Field(default=None, description="ID of the course image")
    url: str = Field(default=None, description="URL of the sales page")
    payload: str = Field(default=None, description="Additional content")
    module_view_type: ModuleViewType = Field(default=None, description="Module view type")
    payment_type: PaymentType = Field(default=None, description="Payment type")
    course_access_type: AccessType = Field(default=None, description="Access type")
    number_days_access: int = Field(default=None, strict=True, ge=0, description="Days access")
    is_active: StrictBoolean = Field(default=None, description="Is active")
    is_secret: StrictBoolean = Field(default=None, description="Is secret")
    is_archived: StrictBoolean = Field(default=None, description="Is archived")
    is_displayed_in_app: StrictBoolean = Field(default=None, description="Displayed in app")
    is_offline_downloadable: StrictBoolean = Field(default=None, description="Offline downloadable")
    available_at: Timestamp = Field(default=None, description="Availability timestamp")
    launch_date_enabled: StrictBoolean = Field(default=None, description="Launch date enabled")
    launch_date: Timestamp = Field(default=None, description="Launch date timestamp")
    order: StrictInteger = Field(default=None, description="Order position")


PatchCourseParams = merge("PatchCourseParams", CourseIdInput, CoursePatchInput)
ReplaceCourseParams = merge("ReplaceCourseParams", CourseIdInput, CourseUpdateInput)

# ---------------------------------------------------------------------- #
# Modules
# ---------------------------------------------------------------------- #


class ModuleIdInput(Contract):
    module_id: PositiveId = Field(..., description="Module ID")


ListModulesInput = merge("ListModulesInput", CourseIdInput, PaginationInput)


class ModuleCreateInput(Contract):
    """Fields of a new module."""

    title: Title = Field(..., description="Module title")
    mandatory: StrictBoolean = Field(default=False, description="Is mandatory")
    is_published: StrictBoolean = Field(default=False, description="Is published")
    is_active: StrictBoolean = Field(default=False, description="Is active")
    public_description: str = Field(default=None, description="Public description")
    short_description: str = Field(default=None, description="Short description")
    image_id: str = Field(default=None, description="Image ID from media storage")
    available_at: Timestamp = Field(default=None, description="Availability timestamp in ms")
    order: StrictInteger = Field(default=None, description="Order position")


ModuleUpdateInput = extend(
    ModuleCreateInput,
    "ModuleUpdateInput",
    doc="All fields of a module, replacing the stored ones.",
    order=(int, Field(..., strict=True, description="Order position (required for update)")),
)


class ModulePatchInput(Contract):
    title: Title = Field(default=None, description="Module title")
    mandatory: StrictBoolean = Field(default=None, description="Is mandatory")
    is_published: StrictBoolean = Field(default=None, description="Is published")
    is_active: StrictBoolean = Field(default=None, description="Is active")
    public_description: str = Field(default=None, description="Public description")
    short_description: str = Field(default=None, description="Short description")
    image_id: str = Field(default=None, description="Image ID")
    available_at: Timestamp = Field(default=None, description="Availability timestamp")
    order: StrictInteger = Field(default=None, description="Order position")


CreateModuleParams = merge("CreateModuleParams", CourseIdInput, ModuleCreateInput)
PatchModuleParams = merge("PatchModuleParams", ModuleIdInput, ModulePatchInput)
ReplaceModuleParams = merge("ReplaceModuleParams", ModuleIdInput, ModuleUpdateInput)

# ---------------------------------------------------------------------- #
# Lessons
# ---------------------------------------------------------------------- #


class LessonIdInput(Contract):
    lesson_id: PositiveId = Field(..., description="Lesson ID")


ListLessonsInput = merge("ListLessonsInput", ModuleIdInput, PaginationInput)


class ContentInput(Contract):
    """
    Payload of a content block. Which fields matter depends on the block
    type (``link`` for video, ``btn_*`` for buttons, ``pdf_id`` for pdf...),
    but any combination is accepted here and left to the API to judge.
    """

    link: str = Field(default=None, description="Link (e.g. YouTube URL)")
    file_id: str = Field(default=None, description="File ID from media storage")
    payload: str = Field(default=None, description="Raw content (HTML or text)")
    btn_url: str = Field(default=None, description="Button URL")
    btn_font: str = Field(default=None, description="Button font")
    btn_size: ButtonSize = Field(default=None, description="Button size")
    btn_text: str = Field(default=None, description="Button text")
    btn_color: str = Field(default=None, description="Button color (hex)")
    btn_target: ButtonTarget = Field(default=None, description="Button target")
    btn_position: ButtonPosition = Field(default=None, description="Button position")
    btn_text_color: str = Field(default=None, description="Button text color (hex)")
    pdf_id: str = Field(default=None, description="PDF file ID")


class ContentBlockCreateInput(Contract):
    block_type: ContentBlockType = Field(..., description="Type of content block")
    order: StrictInteger = Field(..., description="Order in the lesson")
    is_expanded: StrictBoolean = Field(default=True, description="Expanded by default")
    content: ContentInput = Field(default=None, description="Content of the block")


class AttachedFileInput(Contract):
    order: StrictInteger = Field(..., description="File order")
    file_id: StrictInteger = Field(..., description="File ID from media storage")


class LessonCreateInput(Contract):
    """Fields of a new lesson, optionally with its content blocks and attachments."""

    title: Title = Field(..., description="Lesson title")
    lesson_type: LessonType = Field(..., description="Type: 'lesson' or 'quiz'")
    is_active: StrictBoolean = Field(..., description="Is active")
    is_published: StrictBoolean = Field(..., description="Is published")
    mandatory: StrictBoolean = Field(..., description="Is mandatory")
    submodule_id: StrictInteger = Field(default=None, description="Submodule ID if part of submodule")
    thread_id: StrictInteger = Field(default=None, description="Community thread ID")
    image_id: str = Field(default=None, description="Image ID")
    payload: str = Field(default=None, description="Description or summary")
    order: StrictInteger = Field(default=None, description="Order in module")
    content_blocks: List[ContentBlockCreateInput] = Field(default=None, description="Content blocks")
    attached_files: List[AttachedFileInput] = Field(default=None, description="Attached files")


class LessonPatchInput(Contract):
    title: Title = Field(default=None, description="Lesson title")
    submodule_id: StrictInteger = Field(default=None, description="Submodule ID")
    thread_id: StrictInteger = Field(default=None, description="Thread ID")
    image_id: str = Field(default=None, description="Image ID")
    order: StrictInteger = Field(default=None, description="Order")
    payload: str = Field(default=None, description="Description")
    is_active: StrictBoolean = Field(default=None, description="Is active")
    is_published: StrictBoolean = Field(default=None, description="Is published")
    mandatory: StrictBoolean = Field(default=None, description="Is mandatory")


CreateLessonParams = merge("CreateLessonParams", ModuleIdInput, LessonCreateInput)
PatchLessonParams = merge("PatchLessonParams", LessonIdInput, LessonPatchInput)

# ---------------------------------------------------------------------- #
# Submodules
# ---------------------------------------------------------------------- #


class SubmoduleIdInput(Contract):
    submodule_id: PositiveId = Field(..., description="Submodule ID")


ListSubmodulesInput = merge("ListSubmodulesInput", ModuleIdInput, PaginationInput)


class SubmoduleCreateInput(Contract):
    title: Title = Field(..., description="Submodule title")
    order: StrictInteger = Field(..., description="Order position")
    is_published: StrictBoolean = Field(default=False, description="Is published")


class SubmodulePatchInput(Contract):
    title: Title = Field(default=None, description="Submodule title")
    order: StrictInteger = Field(default=None, description="Order position")
    is_published: StrictBoolean = Field(default=None, description="Is published")


CreateSubmoduleParams = merge("CreateSubmoduleParams", ModuleIdInput, SubmoduleCreateInput)
PatchSubmoduleParams = merge("PatchSubmoduleParams", SubmoduleIdInput, SubmodulePatchInput)
