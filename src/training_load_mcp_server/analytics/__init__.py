"""
Analytics modules for training load and recovery calculations.

This package contains modules for:
- Acute:Chronic Workload Ratio and injury risk bands
- Recovery scores, recovery levels and optimal run day checks
- Daily recommendation tables
- The WorkloadAnalyzer combining them for dashboard views
"""

__all__ = [
    "thresholds",
    "workload",
    "recovery",
    "recommendations",
    "analyzer",
]
