"""
Mentortools Submodules API wrapper.
"""

from typing import Any, Dict, List

from .api_client import MentortoolsClient


class MentortoolsSubmodules:
    """
    Submodules group the lessons of a module.
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_submodules(self, module_id: int, limit: int, offset: int) -> List[Dict[str, Any]]:
        return self.client.execute(
            f"/courses/v1/modules/{module_id}/submodules", "GET",
            query={"limit": limit, "offset": offset},
        )

    def get_submodule(self, submodule_id: int) -> Dict[str, Any]:
        return self.client.execute(f"/courses/v1/submodules/{submodule_id}", "GET")

    def create_submodule(self, module_id: int, submodule_data: Dict[str, Any]) -> int:
        return self.client.execute(
            f"/courses/v1/modules/{module_id}/submodules", "POST", body=submodule_data
        )

    def patch_submodule(self, submodule_id: int, updates: Dict[str, Any]) -> bool:
        return self.client.execute(f"/courses/v1/submodules/{submodule_id}", "PATCH", body=updates)

    def delete_submodule(self, submodule_id: int) -> bool:
        return self.client.execute(f"/courses/v1/submodules/{submodule_id}", "DELETE")
