"""
MCP tools that expose Mentortools submodule APIs.
"""

from ...library.api_client import MentortoolsClient
from ...library.common_utils import format_json
from ...library.submodules import MentortoolsSubmodules
from ...schemas import CreateSubmoduleParams, ListSubmodulesInput, PatchSubmoduleParams, SubmoduleIdInput
from ..mcp_registry import CREATE, DELETE, READ_ONLY, UPDATE, ToolRegistry


def register_submodule_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    submodules = MentortoolsSubmodules(client)

    @registry.tool("mentortools_list_submodules", ListSubmodulesInput, title="List Submodules", hints=READ_ONLY)
    def mentortools_list_submodules(params) -> str:
        """
        List all submodules in a module.

        Args:
          - module_id (number, required): Module ID
          - limit, offset (optional): Pagination

        Returns: Array of submodules
        """
        return format_json(submodules.list_submodules(params.module_id, params.limit, params.offset))

    @registry.tool("mentortools_get_submodule", SubmoduleIdInput, title="Get Submodule", hints=READ_ONLY)
    def mentortools_get_submodule(params) -> str:
        """
        Get submodule by ID.

        Args:
          - submodule_id (number): Submodule ID

        Returns: Submodule information
        """
        return format_json(submodules.get_submodule(params.submodule_id))

    @registry.tool("mentortools_create_submodule", CreateSubmoduleParams, title="Create Submodule", hints=CREATE)
    def mentortools_create_submodule(params) -> str:
        """
        Create a new submodule in a module.

        Args:
          - module_id (number, required): Module ID
          - title (string, required): Submodule title
          - order (number, required): Position
          - is_published (boolean, optional): Published status (default false)

        Returns: ID of the newly created submodule
        """
        submodule_id = submodules.create_submodule(params.module_id, params.to_payload("module_id"))
        return f"Submodule created successfully. ID: {submodule_id}"

    @registry.tool("mentortools_update_submodule", PatchSubmoduleParams, title="Update Submodule (Patch)", hints=UPDATE)
    def mentortools_update_submodule(params) -> str:
        """
        Update submodule. Only provided fields will be updated.

        Args:
          - submodule_id (number, required): Submodule ID
          - title, order, is_published (optional): Fields to update

        Returns: Success status
        """
        updated = submodules.patch_submodule(params.submodule_id, params.to_payload("submodule_id"))
        return "Submodule updated successfully" if updated else "Submodule update failed"

    @registry.tool("mentortools_delete_submodule", SubmoduleIdInput, title="Delete Submodule", hints=DELETE)
    def mentortools_delete_submodule(params) -> str:
        """
        Delete a submodule by ID.

        Args:
          - submodule_id (number): Submodule ID

        Returns: Success status
        """
        deleted = submodules.delete_submodule(params.submodule_id)
        return "Submodule deleted successfully" if deleted else "Submodule deletion failed"
