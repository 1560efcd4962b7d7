"""
Training Load MCP Server

This module implements a Model Context Protocol (MCP) server that analyses
training load and recovery from daily running records. Callers supply daily
records (date, distance, sleep score, readiness score) already fetched from
their fitness services; the server derives the metrics a training dashboard
shows.

Main Features:
    - Acute:Chronic Workload Ratio with injury risk bands
    - Recovery score from sleep and readiness
    - Optimal run day check
    - Daily training recommendations and recommendation calendars
    - Combined analysis as JSON
    - Configurable "today" for reproducible results

Usage:
    The server loads configuration from environment variables (optionally via
    a .env file) and runs over stdio by default.

    To run the server:
        $ training-load-mcp-server

    MCP tools provided:
        Load:
            - get_acwr

        Recovery:
            - get_recovery_score
            - get_run_day_status

        Recommendations:
            - get_daily_recommendation
            - get_calendar_recommendations

        Analysis:
            - get_training_load_analysis
"""

import logging

from training_load_mcp_server.config import get_config
from training_load_mcp_server.mcp_instance import mcp
from training_load_mcp_server.server_setup import setup_transport, start_server
from training_load_mcp_server.tools import (
    get_acwr,
    get_calendar_recommendations,
    get_daily_recommendation,
    get_recovery_score,
    get_run_day_status,
    get_training_load_analysis,
)

# Get configuration instance
config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("training_load_mcp_server")

__all__ = [
    "mcp",
    "main",
    "get_acwr",
    "get_recovery_score",
    "get_run_day_status",
    "get_daily_recommendation",
    "get_calendar_recommendations",
    "get_training_load_analysis",
]


def main() -> None:
    """Select the transport and run the server."""
    selected_transport = setup_transport()
    start_server(mcp, selected_transport)


# Run the server
if __name__ == "__main__":
    main()
