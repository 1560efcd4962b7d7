"""
MCP tools registry for Training Load MCP Server.

Importing this package registers every tool with the shared FastMCP instance.
"""

# Note: Tools register themselves via @mcp.tool() decorators when imported
from training_load_mcp_server.tools.load import get_acwr  # noqa: F401
from training_load_mcp_server.tools.recovery import (  # noqa: F401
    get_recovery_score,
    get_run_day_status,
)
from training_load_mcp_server.tools.calendar import (  # noqa: F401
    get_calendar_recommendations,
    get_daily_recommendation,
)
from training_load_mcp_server.tools.analysis import (  # noqa: F401
    get_training_load_analysis,
)


__all__ = [
    "get_acwr",
    "get_recovery_score",
    "get_run_day_status",
    "get_daily_recommendation",
    "get_calendar_recommendations",
    "get_training_load_analysis",
]
