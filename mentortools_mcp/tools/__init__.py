from .mcp_registry import SERVER_NAME, ContractTool, ToolRegistry, build_registry, create_mcp
