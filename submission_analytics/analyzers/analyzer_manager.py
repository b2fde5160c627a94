"""
Analyzer Manager for the submission analytics system.

This module coordinates an analysis run for callers: it supplies the
reference time, memoizes snapshots by input content, and saves snapshots
and their tables through the FileManager.
"""

import hashlib
import json
import logging
from collections import OrderedDict
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Optional, Any

from submission_analytics.analyzers.analytics_engine import AnalyticsEngine
from submission_analytics.data.data_repository import DataRepository
from submission_analytics.data.models import (
    AnalyticsSnapshot,
    AssignmentRecord,
    SemesterRange,
)
from submission_analytics.utils.export_utils import snapshot_to_frames
from submission_analytics.utils.file_manager import FileManager


class AnalyzerManager:
    """
    Manages analysis runs over the loaded assignment data.

    Snapshots are cached by a hash of the records, the semester range and
    the reference time, so recomputing an unchanged input returns the
    same snapshot object. The cache is bounded and evicts the least
    recently used entry.
    """

    def __init__(
        self,
        data_repository: DataRepository,
        cache_enabled: bool = True,
        cache_max_size: int = 32,
        engine: Optional[AnalyticsEngine] = None,
    ):
        """
        Initialize the analyzer manager.

        Args:
            data_repository: Data repository holding the assignments
            cache_enabled: Whether snapshots should be cached
            cache_max_size: Maximum number of cached snapshots
            engine: Analytics engine to use (a default one if None)
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._data_repo = data_repository
        self._engine = engine or AnalyticsEngine()

        # Cache for analysis results
        self._result_cache: "OrderedDict[str, AnalyticsSnapshot]" = OrderedDict()
        self._cache_enabled = cache_enabled
        self._cache_max_size = max(1, cache_max_size)

    def enable_cache(self, enabled: bool = True) -> None:
        """
        Enable or disable caching of analysis results.

        Args:
            enabled: Whether caching should be enabled
        """
        self._cache_enabled = enabled
        self._logger.info(
            f"Analysis result caching {'enabled' if enabled else 'disabled'}"
        )

        if not enabled:
            self.clear_cache()

    def clear_cache(self) -> None:
        """Clear the analysis result cache."""
        self._result_cache.clear()
        self._logger.debug("Analysis result cache cleared")

    @property
    def cache_size(self) -> int:
        """Number of cached snapshots."""
        return len(self._result_cache)

    def _get_cache_key(
        self,
        records: Iterable[AssignmentRecord],
        now: datetime,
        semester: Optional[SemesterRange],
    ) -> str:
        """
        Generate a content hash for an analysis request.

        Args:
            records: Assignment records
            now: Reference time
            semester: Optional semester range

        Returns:
            str: Cache key
        """
        params = {
            "records": [r.model_dump(mode="json") for r in records],
            "now": now.isoformat(),
            "semester": semester.model_dump(mode="json") if semester else None,
        }
        # Convert params to a stable string representation
        param_str = json.dumps(params, sort_keys=True, default=str)
        return hashlib.sha256(param_str.encode("utf-8")).hexdigest()

    def _cache_result(self, key: str, result: AnalyticsSnapshot) -> None:
        """Cache a snapshot, evicting the least recently used one when full."""
        if not self._cache_enabled:
            return

        self._result_cache[key] = result
        self._result_cache.move_to_end(key)
        while len(self._result_cache) > self._cache_max_size:
            self._result_cache.popitem(last=False)

    def _get_cached_result(self, key: str) -> Optional[AnalyticsSnapshot]:
        """Get a cached snapshot if available."""
        if not self._cache_enabled:
            return None

        result = self._result_cache.get(key)
        if result is not None:
            self._result_cache.move_to_end(key)
            self._logger.debug("Using cached snapshot")
        return result

    def analyze(
        self,
        records: Optional[Iterable[AssignmentRecord]] = None,
        now: Optional[datetime] = None,
        semester: Optional[SemesterRange] = None,
    ) -> AnalyticsSnapshot:
        """
        Compute (or fetch from cache) the snapshot for a record set.

        Args:
            records: Records to analyze; the repository's assignments if None
            now: Reference time; the current time if None
            semester: Semester range; the repository's selection if None

        Returns:
            AnalyticsSnapshot: The snapshot
        """
        records = tuple(self._data_repo.assignments.get_all() if records is None else records)
        now = now or datetime.now()
        semester = semester or self._data_repo.semester

        key = self._get_cache_key(records, now, semester)
        cached_result = self._get_cached_result(key)
        if cached_result is not None:
            return cached_result

        self._logger.info(f"Analyzing {len(records)} assignments...")
        result = self._engine.analyze(records, now=now, semester=semester)
        self._cache_result(key, result)
        return result

    def save_snapshot(
        self,
        snapshot: AnalyticsSnapshot,
        output_dir: str,
        name: str = "submission_analytics",
        include_tables: bool = True,
    ) -> Dict[str, Path]:
        """
        Save a snapshot as JSON and, optionally, its tables as CSV.

        Args:
            snapshot: Snapshot to save
            output_dir: Base output directory
            name: Base filename
            include_tables: Whether to export CSV tables

        Returns:
            Dict[str, Path]: Saved file paths keyed by content
        """
        file_manager = FileManager(output_dir)
        saved = {
            "snapshot": file_manager.save_file(snapshot, name, category="analysis")
        }

        if include_tables:
            for table_name, frame in snapshot_to_frames(snapshot).items():
                saved[table_name] = file_manager.save_file(
                    frame,
                    f"{name}_{table_name}",
                    category="data",
                    subcategory="exported",
                )

        self._logger.info(f"Saved {len(saved)} files to {file_manager.base_dir}")
        return saved

    def run_analysis(
        self,
        output_dir: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Analyze the loaded assignments and optionally save the results.

        Args:
            output_dir: Directory to save results; nothing is saved if None
            now: Reference time; the current time if None

        Returns:
            Dict with the snapshot and, when saved, the output files
        """
        snapshot = self.analyze(now=now)
        result: Dict[str, Any] = {"snapshot": snapshot}
        if output_dir:
            result["output_files"] = self.save_snapshot(snapshot, output_dir)
        return result

    def get_data_summary(self) -> Dict[str, Any]:
        """
        Get a summary of all data in the repository.

        Returns:
            Dict with data summary
        """
        return self._data_repo.get_data_summary()
