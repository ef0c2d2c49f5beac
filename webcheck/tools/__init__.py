"""MCP tools for webcheck."""

from webcheck.tools.webcheck import host_resource, webcheck

__all__ = ["host_resource", "webcheck"]
