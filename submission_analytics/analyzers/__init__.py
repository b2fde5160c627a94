"""
Analyzers package for the submission analytics system.

Each module builds one family of metrics from assignment records; the
AnalyticsEngine assembles them into a snapshot and the AnalyzerManager
adds caching and persistence around it.
"""

from .analytics_engine import AnalyticsEngine
from .analyzer_manager import AnalyzerManager

__all__ = ["AnalyticsEngine", "AnalyzerManager"]
