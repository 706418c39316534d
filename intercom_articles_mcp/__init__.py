"""intercom_articles_mcp - an MCP server for Intercom Help Center articles and collections."""

__version__ = "0.4.0"

from .dispatcher import ToolResult, invoke
from .tools import TOOLS, ToolSpec, get_tool, list_tools

__all__ = ["TOOLS", "ToolResult", "ToolSpec", "get_tool", "invoke", "list_tools"]
