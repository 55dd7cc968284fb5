"""
MCP tools that expose Mentortools course APIs.
"""

from ...library.api_client import MentortoolsClient
from ...library.common_utils import format_json
from ...library.courses import MentortoolsCourses
from ...schemas import (
    CountCoursesInput,
    CourseCreateInput,
    CourseIdInput,
    ListCoursesInput,
    PatchCourseParams,
    ReplaceCourseParams,
)
from ..mcp_registry import CREATE, DELETE, READ_ONLY, UPDATE, ToolRegistry


def register_course_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    courses = MentortoolsCourses(client)

    @registry.tool("mentortools_list_courses", ListCoursesInput, title="List Courses", hints=READ_ONLY)
    def mentortools_list_courses(params) -> str:
        """
        List all courses in Mentortools with pagination support.

        Returns a list of courses with basic information. Use mentortools_get_course_info for detailed course data.

        Args:
          - limit (number): Maximum results (1-100, default: 15)
          - offset (number): Skip results for pagination (default: 0)
          - archived (boolean): Include archived courses (default: false)

        Returns: Array of courses with id, title, description, is_active, is_secret, etc.
        """
        return format_json(courses.list_courses(params.limit, params.offset, params.archived))

    @registry.tool("mentortools_count_courses", CountCoursesInput, title="Count Courses", hints=READ_ONLY)
    def mentortools_count_courses(params) -> str:
        """
        Get the total count of courses.

        Args:
          - archived (boolean): Count archived courses (default: false)

        Returns: Total number of courses
        """
        return f"Total courses: {courses.count_courses(params.archived)}"

    @registry.tool("mentortools_get_course", CourseIdInput, title="Get Course", hints=READ_ONLY)
    def mentortools_get_course(params) -> str:
        """
        Get simplified course information by ID.

        Args:
          - course_id (number): Course ID

        Returns: Course basic information
        """
        return format_json(courses.get_course(params.course_id))

    @registry.tool("mentortools_get_course_info", CourseIdInput, title="Get Course Info (Detailed)", hints=READ_ONLY)
    def mentortools_get_course_info(params) -> str:
        """
        Get detailed course information including modules, lessons, and content blocks.

        Args:
          - course_id (number): Course ID

        Returns: Full course data with nested modules, submodules, lessons, and content blocks
        """
        return format_json(courses.get_course_info(params.course_id))

    @registry.tool("mentortools_create_course", CourseCreateInput, title="Create Course", hints=CREATE)
    def mentortools_create_course(params) -> str:
        """
        Create a new course in Mentortools.

        Args:
          - title (string, required): Course title
          - is_active (boolean, required): Whether active
          - is_secret (boolean, required): Whether hidden
          - is_archived (boolean, required): Whether archived
          - is_displayed_in_app (boolean, required): Show in mobile app
          - is_offline_downloadable (boolean, required): Allow offline download
          - description (string, optional): Course description
          - image_id (string, optional): Image ID from media storage
          - payment_type (string, optional): 'paid' or 'free'
          - module_view_type (string, optional): 'list' or 'grid'
          - course_access_type (string, optional): 'subscription', 'one_time', or 'number_of_days_access'
          - order (number, optional): Position in the course list

        Returns: ID of the newly created course
        """
        course_id = courses.create_course(params.to_payload())
        return f"Course created successfully. ID: {course_id}"

    @registry.tool("mentortools_update_course", PatchCourseParams, title="Update Course (Patch)", hints=UPDATE)
    def mentortools_update_course(params) -> str:
        """
        Update course information. Only provided fields will be updated.

        Args:
          - course_id (number, required): Course ID to update
          - title, description, is_active, etc. (optional): Fields to update

        Returns: Success status
        """
        updated = courses.patch_course(params.course_id, params.to_payload("course_id"))
        return "Course updated successfully" if updated else "Course update failed"

    @registry.tool("mentortools_replace_course", ReplaceCourseParams, title="Replace Course (Full Update)", hints=UPDATE)
    def mentortools_replace_course(params) -> str:
        """
        Replace all fields of a course. Fields left out are reset by the server,
        so send the complete course (including 'order').

        Args:
          - course_id (number, required): Course ID to update
          - title, is_active, is_secret, is_archived, is_displayed_in_app,
            is_offline_downloadable, order (required)
          - description, image_id, payment_type, etc. (optional)

        Returns: Success status
        """
        updated = courses.update_course(params.course_id, params.to_payload("course_id"))
        return "Course updated successfully" if updated else "Course update failed"

    @registry.tool("mentortools_delete_course", CourseIdInput, title="Delete Course", hints=DELETE)
    def mentortools_delete_course(params) -> str:
        """
        Delete a course by ID. This action cannot be undone.

        Args:
          - course_id (number): Course ID to delete

        Returns: Success status
        """
        deleted = courses.delete_course(params.course_id)
        return "Course deleted successfully" if deleted else "Course deletion failed"
