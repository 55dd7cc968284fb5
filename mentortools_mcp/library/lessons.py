"""
Mentortools Lessons API wrapper

Lessons live inside a module (optionally inside one of its submodules) and
carry an ordered list of content blocks: text, html, buttons, video, audio,
pdf, quiz variants and certificates, plus attached media storage files.
"""

from typing import Any, Dict, List

from .api_client import MentortoolsClient


class MentortoolsLessons:
    """
    Handles lesson operations in Mentortools courses.

    Attributes:
        client (MentortoolsClient): Initialized API client
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_lessons(self, module_id: int, limit: int, offset: int) -> List[Dict[str, Any]]:
        """
        List the lessons of a module.

        API Endpoint:
            GET /courses/v1/modules/{module_id}/lessons?limit=..&offset=..
        """
        return self.client.execute(
            f"/courses/v1/modules/{module_id}/lessons", "GET",
            query={"limit": limit, "offset": offset},
        )

    def get_lesson(self, lesson_id: int) -> Dict[str, Any]:
        """
        API Endpoint:
            GET /courses/v1/lessons/{lesson_id}
        """
        return self.client.execute(f"/courses/v1/lessons/{lesson_id}", "GET")

    def get_lesson_info(self, lesson_id: int) -> Dict[str, Any]:
        """
        Lesson with content blocks and attached files.

        API Endpoint:
            GET /courses/v1/lessons/{lesson_id}/info
        """
        return self.client.execute(f"/courses/v1/lessons/{lesson_id}/info", "GET")

    def get_content_blocks(self, lesson_id: int) -> List[Dict[str, Any]]:
        """
        API Endpoint:
            GET /courses/v1/lessons/{lesson_id}/content_blocks
        """
        return self.client.execute(f"/courses/v1/lessons/{lesson_id}/content_blocks", "GET")

    def create_lesson(self, module_id: int, lesson_data: Dict[str, Any]) -> int:
        """
        Create a lesson, including its content blocks and attachments, in one call.

        Args:
            module_id (int): Parent module
            lesson_data (dict): Lesson fields, e.g.
                {
                    "title": "Introduction",
                    "lesson_type": "lesson",
                    "is_active": true,
                    "is_published": true,
                    "mandatory": false,
                    "content_blocks": [
                        {"block_type": "video", "order": 1, "is_expanded": true,
                         "content": {"link": "https://youtu.be/..."}}
                    ],
                    "attached_files": [{"order": 1, "file_id": 77}]
                }

        Returns:
            int: ID of the created lesson.

        API Endpoint:
            POST /courses/v1/modules/{module_id}/lessons
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}/lessons", "POST", body=lesson_data)

    def patch_lesson(self, lesson_id: int, updates: Dict[str, Any]) -> bool:
        """
        API Endpoint:
            PATCH /courses/v1/lessons/{lesson_id}
        """
        return self.client.execute(f"/courses/v1/lessons/{lesson_id}", "PATCH", body=updates)

    def delete_lesson(self, lesson_id: int) -> bool:
        """
        API Endpoint:
            DELETE /courses/v1/lessons/{lesson_id}
        """
        return self.client.execute(f"/courses/v1/lessons/{lesson_id}", "DELETE")
