"""Shared FastMCP instance that tool modules register against."""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

mcp = FastMCP("training-load")
