"""
Tests for the tool registry and the tool handlers.

Handlers run against a mocked MentortoolsClient; the end-to-end cases use a
real client with its HTTP session patched.
"""

import base64
from unittest.mock import call, patch

import pytest
import requests
from fastmcp import Client
from fastmcp.exceptions import ToolError

from mentortools_mcp.library.constants import CHARACTER_LIMIT
from mentortools_mcp.library.exceptions import ClientNotInitializedError
from mentortools_mcp.library.api_client import MentortoolsClient
from mentortools_mcp.tools.mcp_registry import ContractTool, ToolRegistry, build_registry, create_mcp
from mentortools_mcp.schemas import CourseIdInput

from .conftest import envelope, make_response

EXPECTED_TOOLS = {
    "mentortools_list_courses",
    "mentortools_count_courses",
    "mentortools_get_course",
    "mentortools_get_course_info",
    "mentortools_create_course",
    "mentortools_update_course",
    "mentortools_replace_course",
    "mentortools_delete_course",
    "mentortools_list_modules",
    "mentortools_get_module",
    "mentortools_get_module_info",
    "mentortools_create_module",
    "mentortools_update_module",
    "mentortools_replace_module",
    "mentortools_delete_module",
    "mentortools_list_lessons",
    "mentortools_get_lesson",
    "mentortools_get_lesson_info",
    "mentortools_get_lesson_content_blocks",
    "mentortools_create_lesson",
    "mentortools_update_lesson",
    "mentortools_delete_lesson",
    "mentortools_list_submodules",
    "mentortools_get_submodule",
    "mentortools_create_submodule",
    "mentortools_update_submodule",
    "mentortools_delete_submodule",
    "mentortools_list_files",
    "mentortools_list_all_files",
    "mentortools_count_files",
    "mentortools_count_all_files",
    "mentortools_get_file",
    "mentortools_upload_file",
    "mentortools_update_file",
    "mentortools_delete_file",
    "mentortools_list_folders",
    "mentortools_list_all_folders",
    "mentortools_count_folders",
    "mentortools_count_all_folders",
    "mentortools_get_folder",
    "mentortools_create_folder",
    "mentortools_update_folder",
    "mentortools_delete_folder",
    "mentortools_create_order",
}


@pytest.fixture
def registry(mock_client):
    return build_registry(mock_client)


async def run_tool(registry, name, arguments=None):
    result = await registry.get(name).run(arguments or {})
    assert len(result.content) == 1
    return result.content[0].text


class TestRegistry:
    def test_all_tools_registered(self, registry):
        assert set(registry.names()) == EXPECTED_TOOLS
        assert len(registry) == len(EXPECTED_TOOLS)

    def test_duplicate_name_rejected(self):
        registry = ToolRegistry()
        registry.tool("x", CourseIdInput, title="X", hints={})(lambda params: "")
        with pytest.raises(ValueError):
            registry.tool("x", CourseIdInput, title="X", hints={})(lambda params: "")

    def test_schema_and_annotations(self, registry):
        tool = registry.get("mentortools_delete_course")
        assert isinstance(tool, ContractTool)
        assert tool.parameters["required"] == ["course_id"]
        assert tool.parameters["additionalProperties"] is False
        assert tool.annotations.title == "Delete Course"
        assert tool.annotations.destructiveHint is True
        assert tool.description.startswith("Delete a course by ID.")

    def test_read_only_hints(self, registry):
        for name in ("mentortools_list_courses", "mentortools_get_file", "mentortools_count_all_folders"):
            annotations = registry.get(name).annotations
            assert annotations.readOnlyHint is True
            assert annotations.openWorldHint is True

    async def test_create_mcp_exposes_tools(self, mock_client):
        mcp = create_mcp(mock_client)
        tools = await mcp.get_tools()
        assert set(tools) == EXPECTED_TOOLS


class TestCourseTools:
    async def test_count_courses_defaults_to_not_archived(self, registry, mock_client):
        mock_client.execute.return_value = 12
        assert await run_tool(registry, "mentortools_count_courses") == "Total courses: 12"
        assert mock_client.execute.call_args == call("/courses/v1/count", "GET", query={"archived": False})

    async def test_list_courses_json(self, registry, mock_client):
        mock_client.execute.return_value = [{"id": 1, "title": "Intro"}]
        text = await run_tool(registry, "mentortools_list_courses", {"limit": 5})
        assert '"title": "Intro"' in text
        assert mock_client.execute.call_args == call(
            "/courses/v1/", "GET", query={"limit": 5, "offset": 0, "archived": False}
        )

    async def test_create_course(self, registry, mock_client):
        mock_client.execute.return_value = 77
        text = await run_tool(registry, "mentortools_create_course", {
            "title": "Intro",
            "is_active": True,
            "is_secret": False,
            "is_archived": False,
            "is_displayed_in_app": True,
            "is_offline_downloadable": False,
        })
        assert text == "Course created successfully. ID: 77"
        body = mock_client.execute.call_args.kwargs["body"]
        assert body["title"] == "Intro"
        assert "description" not in body

    async def test_update_course_sends_patch_without_id(self, registry, mock_client):
        mock_client.execute.return_value = True
        text = await run_tool(registry, "mentortools_update_course", {"course_id": 4, "title": "New"})
        assert text == "Course updated successfully"
        assert mock_client.execute.call_args == call("/courses/v1/4", "PATCH", body={"title": "New"})

    async def test_update_course_reports_failure(self, registry, mock_client):
        mock_client.execute.return_value = False
        assert await run_tool(registry, "mentortools_update_course", {"course_id": 4}) == "Course update failed"

    async def test_replace_course_uses_put(self, registry, mock_client):
        mock_client.execute.return_value = True
        await run_tool(registry, "mentortools_replace_course", {
            "course_id": 4,
            "title": "Intro",
            "order": 1,
            "is_active": True,
            "is_secret": False,
            "is_archived": False,
            "is_displayed_in_app": True,
            "is_offline_downloadable": False,
        })
        assert mock_client.execute.call_args.args == ("/courses/v1/4", "PUT")

    async def test_delete_course(self, registry, mock_client):
        mock_client.execute.return_value = True
        assert await run_tool(registry, "mentortools_delete_course", {"course_id": 4}) == "Course deleted successfully"
        mock_client.execute.return_value = False
        assert await run_tool(registry, "mentortools_delete_course", {"course_id": 4}) == "Course deletion failed"


class TestModuleLessonSubmoduleTools:
    async def test_create_module(self, registry, mock_client):
        mock_client.execute.return_value = 8
        text = await run_tool(registry, "mentortools_create_module", {"course_id": 2, "title": "Week 1"})
        assert text == "Module created successfully. ID: 8"
        assert mock_client.execute.call_args == call(
            "/courses/v1/2/modules", "POST",
            body={"title": "Week 1", "mandatory": False, "is_published": False, "is_active": False},
        )

    async def test_get_lesson_content_blocks(self, registry, mock_client):
        mock_client.execute.return_value = [{"block_type": "text"}]
        await run_tool(registry, "mentortools_get_lesson_content_blocks", {"lesson_id": 3})
        assert mock_client.execute.call_args == call("/courses/v1/lessons/3/content_blocks", "GET")

    async def test_create_submodule(self, registry, mock_client):
        mock_client.execute.return_value = 11
        text = await run_tool(registry, "mentortools_create_submodule", {"module_id": 5, "title": "Part A", "order": 1})
        assert text == "Submodule created successfully. ID: 11"
        assert mock_client.execute.call_args.args == ("/courses/v1/modules/5/submodules", "POST")

    async def test_delete_lesson_failure_text(self, registry, mock_client):
        mock_client.execute.return_value = False
        assert await run_tool(registry, "mentortools_delete_lesson", {"lesson_id": 3}) == "Lesson deletion failed"


class TestMediaTools:
    async def test_count_files_in_root(self, registry, mock_client):
        mock_client.execute.return_value = 4
        assert await run_tool(registry, "mentortools_count_files") == "File count: 4"
        assert mock_client.execute.call_args == call("/mediastorage/v1/files/count", "GET", query={})

    async def test_count_all_folders(self, registry, mock_client):
        mock_client.execute.return_value = 9
        assert await run_tool(registry, "mentortools_count_all_folders") == "Total folders: 9"

    async def test_list_files_with_filter(self, registry, mock_client):
        mock_client.execute.return_value = []
        await run_tool(registry, "mentortools_list_files", {"parent_folder_id": 3, "filename": "intro"})
        assert mock_client.execute.call_args.kwargs["query"] == {
            "limit": 100, "offset": 0, "parent_folder_id": 3, "filename": "intro",
        }

    async def test_create_folder(self, registry, mock_client):
        mock_client.execute.return_value = 21
        text = await run_tool(registry, "mentortools_create_folder", {"name": "Videos"})
        assert text == "Folder created successfully. ID: 21"
        assert mock_client.execute.call_args.kwargs["body"] == {"name": "Videos"}

    async def test_upload_base64_to_root(self, registry, mock_client):
        mock_client.upload_file.return_value = {"id": 5, "name": "hello.txt"}
        text = await run_tool(registry, "mentortools_upload_file", {
            "content_base64": base64.b64encode(b"hello").decode(),
            "filename": "hello.txt",
            "parent_folder_id": 0,
        })
        assert text.startswith("File uploaded successfully.\n\n")
        assert '"name": "hello.txt"' in text
        assert mock_client.upload_file.call_args == call(b"hello", "hello.txt", 0)

    async def test_upload_missing_path_is_reported(self, registry, tmp_path):
        text = await run_tool(registry, "mentortools_upload_file", {"file_path": str(tmp_path / "missing.pdf")})
        assert text.startswith("Error: ")


class TestOrderTools:
    async def test_create_order(self, registry, mock_client):
        mock_client.execute.return_value = {"external_order_id": "p1-order-1", "external_transaction_id": "p1-txn-1"}
        text = await run_tool(registry, "mentortools_create_order", {
            "marketplace_buyer": {"email": "buyer@example.com"},
            "course_ids": [12],
            "id": "order-1",
        })
        assert text == (
            "Order created successfully!\n\n"
            "External Order ID: p1-order-1\n"
            "External Transaction ID: p1-txn-1"
        )
        assert mock_client.execute.call_args == call(
            "/orders/v1/ipn/payment", "POST",
            body={"marketplace_buyer": {"email": "buyer@example.com"}, "course_ids": [12], "id": "order-1"},
        )

    async def test_create_order_without_result(self, registry, mock_client):
        mock_client.execute.return_value = None
        text = await run_tool(registry, "mentortools_create_order", {
            "marketplace_buyer": {"email": "buyer@example.com"},
            "course_ids": [12],
        })
        assert text == (
            "Order created successfully!\n\n"
            "External Order ID: None\n"
            "External Transaction ID: None"
        )

    async def test_order_email_sent_as_given(self, registry, mock_client):
        mock_client.execute.return_value = {"external_order_id": "o", "external_transaction_id": "t"}
        await run_tool(registry, "mentortools_create_order", {
            "marketplace_buyer": {"email": "Buyer@Example.COM"},
            "course_ids": [12],
        })
        assert mock_client.execute.call_args.kwargs["body"]["marketplace_buyer"]["email"] == "Buyer@Example.COM"


class TestErrorBoundary:
    async def test_invalid_input_raises_tool_error_before_any_call(self, registry, mock_client):
        with pytest.raises(ToolError):
            await registry.get("mentortools_list_courses").run({"limit": 0})
        with pytest.raises(ToolError):
            await registry.get("mentortools_get_course").run({"course_id": 1, "unexpected": True})
        mock_client.execute.assert_not_called()

    async def test_handler_exception_becomes_text(self, registry, mock_client):
        mock_client.execute.side_effect = RuntimeError("boom")
        assert await run_tool(registry, "mentortools_get_course", {"course_id": 1}) == "Error: boom"

    async def test_http_404_becomes_text(self, registry, mock_client):
        response = make_response(404, envelope(done=False, error="missing"))
        mock_client.execute.side_effect = requests.HTTPError("404", response=response)
        assert await run_tool(registry, "mentortools_get_course", {"course_id": 1}) == (
            "Error: Resource not found. Please verify the ID is correct."
        )

    async def test_uninitialized_client(self, registry, mock_client):
        mock_client.execute.side_effect = ClientNotInitializedError()
        assert await run_tool(registry, "mentortools_count_all_files") == (
            "Error: API client not initialized. Please set MENTORTOOLS_API_KEY environment variable."
        )

    async def test_large_result_truncated(self, registry, mock_client):
        mock_client.execute.return_value = [{"id": i, "title": "x" * 200} for i in range(200)]
        text = await run_tool(registry, "mentortools_list_courses")
        assert f"[Response truncated at {CHARACTER_LIMIT} characters." in text


class TestEndToEnd:
    async def test_count_courses_over_http_session(self, client):
        registry = build_registry(client)
        with patch.object(client.session, "request", return_value=make_response(200, envelope(3))) as request:
            text = await run_tool(registry, "mentortools_count_courses")
        assert text == "Total courses: 3"
        assert request.call_args.kwargs["params"] == {"archived": "false"}

    async def test_done_false_without_error(self, client):
        registry = build_registry(client)
        with patch.object(client.session, "request", return_value=make_response(200, {"done": False})):
            text = await run_tool(registry, "mentortools_delete_folder", {"folder_id": 2})
        assert text == "Error: API request failed"

    async def test_call_through_mcp_client(self, mock_client):
        mock_client.execute.return_value = 6
        async with Client(create_mcp(mock_client)) as mcp_client:
            result = await mcp_client.call_tool("mentortools_count_all_files", {})
        assert result.content[0].text == "Total files: 6"

    async def test_unconfigured_client(self):
        registry = build_registry(MentortoolsClient())
        text = await run_tool(registry, "mentortools_list_courses")
        assert text.startswith("Error: API client not initialized.")
