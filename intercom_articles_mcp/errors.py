"""Errors raised while handling a tool call.

Every error here is caught by the dispatcher and rendered as ``Error: <message>``,
so ``str(error)`` is what the caller sees.
"""

from typing import Optional


class ToolError(Exception):
    """Base class for failures surfaced to the MCP caller."""


class ValidationError(ToolError):
    """Missing or invalid tool arguments. Raised before any network call."""


class EmptyUpdateError(ValidationError):
    """An update request carried no field to change."""

    def __init__(self, message: str = "At least one field must be provided for update") -> None:
        super().__init__(message)


class UnknownToolError(ToolError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class UpstreamAPIError(ToolError):
    """Intercom answered with a non-2xx status."""

    def __init__(self, status_code: int, response_text: str = "") -> None:
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(f"Intercom API error: {status_code} - {response_text}")


class TransportError(ToolError):
    """The request never got a response (connection, DNS, TLS, timeout)."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        self.cause = cause
        super().__init__(message)
