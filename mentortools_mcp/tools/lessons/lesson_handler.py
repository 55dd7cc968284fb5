"""
MCP tools that expose Mentortools lesson APIs.
"""

from ...library.api_client import MentortoolsClient
from ...library.common_utils import format_json
from ...library.lessons import MentortoolsLessons
from ...schemas import CreateLessonParams, LessonIdInput, ListLessonsInput, PatchLessonParams
from ..mcp_registry import CREATE, DELETE, READ_ONLY, UPDATE, ToolRegistry


def register_lesson_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    lessons = MentortoolsLessons(client)

    @registry.tool("mentortools_list_lessons", ListLessonsInput, title="List Module Lessons", hints=READ_ONLY)
    def mentortools_list_lessons(params) -> str:
        """
        List all lessons in a module.

        Args:
          - module_id (number, required): Module ID
          - limit, offset (optional): Pagination

        Returns: Array of lessons
        """
        return format_json(lessons.list_lessons(params.module_id, params.limit, params.offset))

    @registry.tool("mentortools_get_lesson", LessonIdInput, title="Get Lesson", hints=READ_ONLY)
    def mentortools_get_lesson(params) -> str:
        """
        Get lesson information by ID.

        Args:
          - lesson_id (number): Lesson ID

        Returns: Lesson information
        """
        return format_json(lessons.get_lesson(params.lesson_id))

    @registry.tool("mentortools_get_lesson_info", LessonIdInput, title="Get Lesson Info (Detailed)", hints=READ_ONLY)
    def mentortools_get_lesson_info(params) -> str:
        """
        Get detailed lesson information with content blocks and attached files.

        Args:
          - lesson_id (number): Lesson ID

        Returns: Full lesson data
        """
        return format_json(lessons.get_lesson_info(params.lesson_id))

    @registry.tool(
        "mentortools_get_lesson_content_blocks", LessonIdInput,
        title="Get Lesson Content Blocks", hints=READ_ONLY,
    )
    def mentortools_get_lesson_content_blocks(params) -> str:
        """
        Get all content blocks for a lesson.

        Args:
          - lesson_id (number): Lesson ID

        Returns: Array of content blocks
        """
        return format_json(lessons.get_content_blocks(params.lesson_id))

    @registry.tool("mentortools_create_lesson", CreateLessonParams, title="Create Lesson", hints=CREATE)
    def mentortools_create_lesson(params) -> str:
        """
        Create a new lesson in a module.

        Args:
          - module_id (number, required): Module ID
          - title (string, required): Lesson title
          - lesson_type (string, required): 'lesson' or 'quiz'
          - is_active, is_published, mandatory (required): Status flags
          - submodule_id, thread_id, image_id, payload, order (optional)
          - content_blocks (optional): Array of content blocks, each with
            block_type (text, html, btn, video, audio, pdf, quiz_text,
            quiz_video, quiz_audio, certificate), order, is_expanded
            (default true) and content (link, file_id, payload, btn_* styling, pdf_id)
          - attached_files (optional): Array of {order, file_id}

        Returns: ID of the newly created lesson
        """
        lesson_id = lessons.create_lesson(params.module_id, params.to_payload("module_id"))
        return f"Lesson created successfully. ID: {lesson_id}"

    @registry.tool("mentortools_update_lesson", PatchLessonParams, title="Update Lesson (Patch)", hints=UPDATE)
    def mentortools_update_lesson(params) -> str:
        """
        Update lesson information. Only provided fields will be updated.

        Args:
          - lesson_id (number, required): Lesson ID
          - title, is_active, order, etc. (optional): Fields to update

        Returns: Success status
        """
        updated = lessons.patch_lesson(params.lesson_id, params.to_payload("lesson_id"))
        return "Lesson updated successfully" if updated else "Lesson update failed"

    @registry.tool("mentortools_delete_lesson", LessonIdInput, title="Delete Lesson", hints=DELETE)
    def mentortools_delete_lesson(params) -> str:
        """
        Delete a lesson by ID.

        Args:
          - lesson_id (number): Lesson ID

        Returns: Success status
        """
        deleted = lessons.delete_lesson(params.lesson_id)
        return "Lesson deleted successfully" if deleted else "Lesson deletion failed"
