"""Transport selection and startup for the MCP server."""

import logging

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from training_load_mcp_server.config import SUPPORTED_TRANSPORTS, get_config

logger = logging.getLogger("training_load_mcp_server")


def setup_transport(transport: str | None = None) -> str:
    """Resolve the transport to run the server with.

    The configured MCP_TRANSPORT is already checked by the settings model;
    an explicit override is checked here.

    Args:
        transport: Explicit transport (default: MCP_TRANSPORT from config)

    Returns:
        One of "stdio", "sse" or "streamable-http"

    Raises:
        ValueError: If the explicit transport is not supported
    """
    if transport is None:
        return get_config().mcp_transport

    selected = transport.strip().lower()
    if selected not in SUPPORTED_TRANSPORTS:
        logger.error("Unsupported MCP transport: %s", selected)
        raise ValueError(
            f"Unsupported transport '{selected}'. "
            f"Use one of: {', '.join(SUPPORTED_TRANSPORTS)}"
        )
    return selected


def start_server(mcp: FastMCP, transport: str) -> None:
    """Run the server on the selected transport."""
    logger.info("Starting training load MCP server (transport: %s)", transport)
    mcp.run(transport=transport)
