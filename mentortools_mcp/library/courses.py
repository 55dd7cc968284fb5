"""
Mentortools Course Management API Wrapper.
"""

from typing import Any, Dict, List

from .api_client import MentortoolsClient


class MentortoolsCourses:
    """
    Provides helper functions to interact with Mentortools' course APIs.
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_courses(self, limit: int, offset: int, archived: bool = False) -> List[Dict[str, Any]]:
        """
        List courses (paginated).

        API (List Courses) details:
        - Method: GET
        - Endpoint: /courses/v1/
        - Query Params:
            * limit
            * offset
            * archived

        Returns:
            list: Courses with id, title, description, is_active, is_secret, etc.
        """
        return self.client.execute(
            "/courses/v1/", "GET",
            query={"limit": limit, "offset": offset, "archived": archived},
        )

    def count_courses(self, archived: bool = False) -> int:
        """
        Count courses.

        API (Count Courses) details:
        - Method: GET
        - Endpoint: /courses/v1/count
        - Query Params: archived
        """
        return self.client.execute("/courses/v1/count", "GET", query={"archived": archived})

    def get_course(self, course_id: int) -> Dict[str, Any]:
        """
        Fetch simplified course information.

        API (Get Course) details:
        - Method: GET
        - Endpoint: /courses/v1/{course_id}
        """
        return self.client.execute(f"/courses/v1/{course_id}", "GET")

    def get_course_info(self, course_id: int) -> Dict[str, Any]:
        """
        Fetch the full course tree: modules, submodules, lessons and content blocks.

        API (Get Course Info) details:
        - Method: GET
        - Endpoint: /courses/v1/{course_id}/info
        """
        return self.client.execute(f"/courses/v1/{course_id}/info", "GET")

    def create_course(self, course_data: Dict[str, Any]) -> int:
        """
        Create a new course.

        API (Create Course) details:
        - Method: POST
        - Endpoint: /courses/v1/

        Body format:
        {
            "title": "<Course Title>",
            "is_active": true,
            "is_secret": false,
            "is_archived": false,
            "is_displayed_in_app": true,
            "is_offline_downloadable": false,
            "payment_type": "paid",
            ...
        }

        Returns:
            int: ID of the created course.
        """
        return self.client.execute("/courses/v1/", "POST", body=course_data)

    def update_course(self, course_id: int, course_data: Dict[str, Any]) -> bool:
        """
        Replace every field of a course (``order`` included).

        API (Update Course) details:
        - Method: PUT
        - Endpoint: /courses/v1/{course_id}
        """
        return self.client.execute(f"/courses/v1/{course_id}", "PUT", body=course_data)

    def patch_course(self, course_id: int, updates: Dict[str, Any]) -> bool:
        """
        Change only the supplied course fields.

        API (Patch Course) details:
        - Method: PATCH
        - Endpoint: /courses/v1/{course_id}
        """
        return self.client.execute(f"/courses/v1/{course_id}", "PATCH", body=updates)

    def delete_course(self, course_id: int) -> bool:
        """
        Permanently delete a course.

        API (Delete Course) details:
        - Method: DELETE
        - Endpoint: /courses/v1/{course_id}
        """
        return self.client.execute(f"/courses/v1/{course_id}", "DELETE")
