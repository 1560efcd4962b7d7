"""Training load and recovery analysis served over the Model Context Protocol."""

from training_load_mcp_server.analytics.analyzer import FullAnalysis, WorkloadAnalyzer
from training_load_mcp_server.utils.records import DailyRecord, parse_records

__version__ = "0.1.0"

__all__ = [
    "DailyRecord",
    "FullAnalysis",
    "WorkloadAnalyzer",
    "parse_records",
]
