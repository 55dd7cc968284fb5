"""
MCP tools that expose Mentortools course module APIs.
"""

from ...library.api_client import MentortoolsClient
from ...library.common_utils import format_json
from ...library.modules import MentortoolsModules
from ...schemas import (
    CreateModuleParams,
    ListModulesInput,
    ModuleIdInput,
    PatchModuleParams,
    ReplaceModuleParams,
)
from ..mcp_registry import CREATE, DELETE, READ_ONLY, UPDATE, ToolRegistry


def register_module_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    modules = MentortoolsModules(client)

    @registry.tool("mentortools_list_modules", ListModulesInput, title="List Course Modules", hints=READ_ONLY)
    def mentortools_list_modules(params) -> str:
        """
        List all modules in a course with pagination.

        Args:
          - course_id (number, required): Course ID
          - limit (number, optional): Max results (default: 15)
          - offset (number, optional): Pagination offset

        Returns: Array of modules with id, title, order, is_active, etc.
        """
        return format_json(modules.list_modules(params.course_id, params.limit, params.offset))

    @registry.tool("mentortools_get_module", ModuleIdInput, title="Get Module", hints=READ_ONLY)
    def mentortools_get_module(params) -> str:
        """
        Get module information by ID.

        Args:
          - module_id (number): Module ID

        Returns: Module information
        """
        return format_json(modules.get_module(params.module_id))

    @registry.tool("mentortools_get_module_info", ModuleIdInput, title="Get Module Info (Detailed)", hints=READ_ONLY)
    def mentortools_get_module_info(params) -> str:
        """
        Get detailed module information including submodules and lessons.

        Args:
          - module_id (number): Module ID

        Returns: Full module data with nested content
        """
        return format_json(modules.get_module_info(params.module_id))

    @registry.tool("mentortools_create_module", CreateModuleParams, title="Create Module", hints=CREATE)
    def mentortools_create_module(params) -> str:
        """
        Create a new module in a course.

        Args:
          - course_id (number, required): Course ID
          - title (string, required): Module title
          - is_active, is_published, mandatory (optional, default false): Status flags
          - public_description, short_description (optional): Descriptions
          - image_id (optional): Image from media storage
          - order (optional): Position in course

        Returns: ID of the newly created module
        """
        module_id = modules.create_module(params.course_id, params.to_payload("course_id"))
        return f"Module created successfully. ID: {module_id}"

    @registry.tool("mentortools_update_module", PatchModuleParams, title="Update Module (Patch)", hints=UPDATE)
    def mentortools_update_module(params) -> str:
        """
        Update module information. Only provided fields will be updated.

        Args:
          - module_id (number, required): Module ID
          - title, is_active, order, etc. (optional): Fields to update

        Returns: Success status
        """
        updated = modules.patch_module(params.module_id, params.to_payload("module_id"))
        return "Module updated successfully" if updated else "Module update failed"

    @registry.tool("mentortools_replace_module", ReplaceModuleParams, title="Replace Module (Full Update)", hints=UPDATE)
    def mentortools_replace_module(params) -> str:
        """
        Replace all fields of a module. Status flags that are left out are sent
        as false, so pass the complete module.

        Args:
          - module_id (number, required): Module ID
          - title (string, required): Module title
          - order (number, required): Position in course
          - is_active, is_published, mandatory (optional, default false)
          - public_description, short_description, image_id, available_at (optional)

        Returns: Success status
        """
        updated = modules.update_module(params.module_id, params.to_payload("module_id"))
        return "Module updated successfully" if updated else "Module update failed"

    @registry.tool("mentortools_delete_module", ModuleIdInput, title="Delete Module", hints=DELETE)
    def mentortools_delete_module(params) -> str:
        """
        Delete a module by ID. This will also delete all lessons in the module.

        Args:
          - module_id (number): Module ID

        Returns: Success status
        """
        deleted = modules.delete_module(params.module_id)
        return "Module deleted successfully" if deleted else "Module deletion failed"
