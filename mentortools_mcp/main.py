"""
Main entry point for the Mentortools MCP server.

The server talks MCP over stdio by default, which is what desktop MCP clients
launch. With TRANSPORT=http it serves the same tools over HTTP (FastAPI +
uvicorn) at /mcp.
"""

import logging
import sys

from .library.api_client import MentortoolsClient
from .library.common_utils import MentortoolsContext
from .library.exceptions import ConfigurationError
from .tools.mcp_registry import create_mcp

logger = logging.getLogger(__name__)

USAGE = """\
Usage:
  export MENTORTOOLS_API_KEY=your_api_key
  mentortools-mcp

Optional settings:
  TRANSPORT=stdio|http   (default: stdio)
  HOST, PORT             HTTP bind address (default: 0.0.0.0:3000)
  MENTORTOOLS_BASE_URL   API root override
  LOG_LEVEL              (default: INFO)

Or configure in your MCP client settings."""


def configure_logging(level: str) -> None:
    # stdout carries the stdio transport, so logs always go to stderr.
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_context() -> MentortoolsContext:
    """
    Read and validate the process configuration, exiting with status 1 and a
    usage message when it is unusable.
    """
    try:
        ctx = MentortoolsContext.from_env()
        ctx.validate()
    except ConfigurationError as e:
        print(f"ERROR: {e}\n\n{USAGE}", file=sys.stderr)
        sys.exit(1)
    return ctx


def run_http(mcp, ctx: MentortoolsContext) -> None:
    import uvicorn
    from .server import create_app

    app = create_app(mcp)
    logger.info(f"Mentortools MCP server running on http://{ctx.host}:{ctx.port}/mcp")
    uvicorn.run(app, host=ctx.host, port=ctx.port, log_level=ctx.log_level.lower())


def main():
    ctx = load_context()
    configure_logging(ctx.log_level)

    client = MentortoolsClient(ctx.api_key, base_url=ctx.base_url, timeout=ctx.timeout)
    mcp = create_mcp(client)

    try:
        if ctx.transport == "http":
            run_http(mcp, ctx)
        else:
            logger.info("Mentortools MCP server running via stdio")
            mcp.run()
    finally:
        client.close()


if __name__ == "__main__":
    main()
