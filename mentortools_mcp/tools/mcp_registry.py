"""
FastMCP server construction and tool registration.

Every tool pairs a closed input contract (a pydantic model from
``mentortools_mcp.schemas``) with a synchronous handler that calls the
Mentortools API and returns text. ``ContractTool`` is the boundary between the
two: it validates the raw arguments, runs the handler in a worker thread and
turns any failure into the message from ``handle_api_error``.
"""

import asyncio
import inspect
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Type

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import BaseModel, ValidationError

from ..library.api_client import MentortoolsClient
from ..library.common_utils import handle_api_error

logger = logging.getLogger(__name__)

SERVER_NAME = "mentortools-mcp-server"

Handler = Callable[[Any], str]

# Behavioral hints shared by each kind of tool.
READ_ONLY = {"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True, "openWorldHint": True}
CREATE = {"readOnlyHint": False, "destructiveHint": False, "idempotentHint": False, "openWorldHint": True}
UPDATE = {"readOnlyHint": False, "destructiveHint": False, "idempotentHint": True, "openWorldHint": True}
DELETE = {"readOnlyHint": False, "destructiveHint": True, "idempotentHint": False, "openWorldHint": True}


class ContractTool(Tool):
    """
    An MCP tool whose input schema is a pydantic contract.

    ``run`` never lets a handler failure escape: validation problems become a
    ``ToolError`` (reported by the host as an invalid call) and everything
    raised by the handler becomes an ``Error: ...`` text result.
    """

    contract: Type[BaseModel]
    handler: Handler

    @classmethod
    def from_contract(
        cls,
        handler: Handler,
        contract: Type[BaseModel],
        name: str,
        title: str,
        hints: Dict[str, bool],
        description: Optional[str] = None,
    ) -> "ContractTool":
        return cls(
            name=name,
            description=description or inspect.cleandoc(handler.__doc__ or ""),
            parameters=contract.model_json_schema(),
            annotations=ToolAnnotations(title=title, **hints),
            contract=contract,
            handler=handler,
        )

    def validate_arguments(self, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        try:
            return self.contract.model_validate(arguments or {})
        except ValidationError as e:
            logger.info(f"Rejected arguments for {self.name}: {e.error_count()} error(s)")
            raise ToolError(f"Invalid input for {self.name}: {e}")

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        params = self.validate_arguments(arguments)
        try:
            text = await asyncio.to_thread(self.handler, params)
        except Exception as e:
            logger.error(f"Tool {self.name} failed: {type(e).__name__}: {e}")
            text = handle_api_error(e)
        else:
            logger.info(f"Tool {self.name} executed successfully")
        return ToolResult(content=[TextContent(type="text", text=text)])


class ToolRegistry:
    """
    Ordered collection of ``ContractTool`` objects, filled by the
    ``register_*_tools`` functions and installed on a FastMCP server.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, ContractTool] = {}

    def tool(self, name: str, contract: Type[BaseModel], title: str, hints: Dict[str, bool]):
        """
        Decorator registering ``fn`` as tool ``name``; the docstring becomes
        the tool description.
        """
        def decorator(fn: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = ContractTool.from_contract(fn, contract, name=name, title=title, hints=hints)
            return fn
        return decorator

    def get(self, name: str) -> ContractTool:
        return self._tools[name]

    def names(self) -> List[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[ContractTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def install(self, mcp: FastMCP) -> None:
        for tool in self:
            mcp.add_tool(tool)


def build_registry(client: MentortoolsClient) -> ToolRegistry:
    """Register every Mentortools tool against ``client``."""
    from .courses.course_handler import register_course_tools
    from .lessons.lesson_handler import register_lesson_tools
    from .media.media_handler import register_media_tools
    from .modules.module_handler import register_module_tools
    from .orders.order_handler import register_order_tools
    from .submodules.submodule_handler import register_submodule_tools

    registry = ToolRegistry()
    register_course_tools(registry, client)
    register_module_tools(registry, client)
    register_lesson_tools(registry, client)
    register_submodule_tools(registry, client)
    register_media_tools(registry, client)
    register_order_tools(registry, client)
    return registry


def create_mcp(client: MentortoolsClient) -> FastMCP:
    """
    Return a FastMCP server with all tools registered, every handler bound to
    ``client``.
    """
    mcp = FastMCP(SERVER_NAME)
    registry = build_registry(client)
    registry.install(mcp)
    logger.info(f"Registered {len(registry)} Mentortools tools")
    return mcp
