"""
Mentortools Course Modules API wrapper.

Modules are the top-level sections of a course. Each module holds lessons
and, optionally, submodules that group those lessons.
"""

from typing import Any, Dict, List

from .api_client import MentortoolsClient


class MentortoolsModules:
    """
    Handles module operations in Mentortools courses.

    Attributes:
        client (MentortoolsClient): Initialized API client
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_modules(self, course_id: int, limit: int, offset: int) -> List[Dict[str, Any]]:
        """
        List the modules of a course.

        API Endpoint:
            GET /courses/v1/{course_id}/modules?limit=..&offset=..
        """
        return self.client.execute(
            f"/courses/v1/{course_id}/modules", "GET",
            query={"limit": limit, "offset": offset},
        )

    def get_module(self, module_id: int) -> Dict[str, Any]:
        """
        API Endpoint:
            GET /courses/v1/modules/{module_id}
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}", "GET")

    def get_module_info(self, module_id: int) -> Dict[str, Any]:
        """
        Module with its submodules and lessons.

        API Endpoint:
            GET /courses/v1/modules/{module_id}/info
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}/info", "GET")

    def create_module(self, course_id: int, module_data: Dict[str, Any]) -> int:
        """
        Create a module inside a course.

        Args:
            course_id (int): Parent course
            module_data (dict): title (required), mandatory, is_published,
                is_active, public_description, short_description, image_id,
                available_at, order

        Returns:
            int: ID of the created module.

        API Endpoint:
            POST /courses/v1/{course_id}/modules
        """
        return self.client.execute(f"/courses/v1/{course_id}/modules", "POST", body=module_data)

    def update_module(self, module_id: int, module_data: Dict[str, Any]) -> bool:
        """
        API Endpoint:
            PUT /courses/v1/modules/{module_id}
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}", "PUT", body=module_data)

    def patch_module(self, module_id: int, updates: Dict[str, Any]) -> bool:
        """
        API Endpoint:
            PATCH /courses/v1/modules/{module_id}
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}", "PATCH", body=updates)

    def delete_module(self, module_id: int) -> bool:
        """
        Delete a module together with its lessons.

        API Endpoint:
            DELETE /courses/v1/modules/{module_id}
        """
        return self.client.execute(f"/courses/v1/modules/{module_id}", "DELETE")
