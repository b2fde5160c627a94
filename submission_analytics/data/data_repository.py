"""
Main data repository for the submission analytics system.

This module provides the DataRepository class that serves as the primary
entry point for loading assignment exports and resolving the semester
range that accompanies them.
"""

import logging
import json
from pathlib import Path
from typing import Any, Dict, Optional

from submission_analytics.config.settings import Settings
from submission_analytics.data.models import SemesterRange
from submission_analytics.data.repositories import AssignmentRepository


class DataRepository:
    """
    Facade over the assignment repository and semester configuration.

    The semester range is taken, in order of preference, from an explicit
    selection, from a ``semester`` object stored in the loaded export, or
    left unset.
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize the data repository.

        Args:
            config: Optional settings configuration
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._config = config or Settings(create_dirs=False)
        self._timezone = self._config.get_timezone()

        self._assignment_repo = AssignmentRepository()
        self._assignment_repo.set_validation_context({"tz": self._timezone})

        self._semester: Optional[SemesterRange] = None
        self._data_loaded = False

    def connect(self) -> None:
        """
        Load the configured assignment export if nothing is loaded yet.
        """
        if self._data_loaded:
            return

        self.load_data_from_file(str(self._config.ASSIGNMENT_DATA_PATH))

    @property
    def assignments(self) -> AssignmentRepository:
        """Get the assignment repository."""
        self._ensure_connected()
        return self._assignment_repo

    @property
    def semester(self) -> Optional[SemesterRange]:
        """Get the selected semester range, if any."""
        return self._semester

    def _ensure_connected(self) -> None:
        """Ensure data has been loaded."""
        if not self._data_loaded:
            self.connect()

    def load_data_from_file(self, file_path: str) -> int:
        """
        Load assignments (and an embedded semester range) from an export.

        Args:
            file_path: Path to a JSON or CSV export

        Returns:
            int: Number of assignments loaded
        """
        count = self._assignment_repo.load_data_from_file(file_path)
        self._data_loaded = True
        self._logger.info(f"Loaded {count} assignments from {file_path}")

        if Path(file_path).suffix.lower() == ".json" and self._semester is None:
            self._semester = self._read_embedded_semester(file_path)

        return count

    def load_documents(self, documents: list) -> int:
        """
        Load assignments from already-parsed documents.

        Args:
            documents: Raw assignment documents

        Returns:
            int: Number of assignments loaded
        """
        count = self._assignment_repo.load_documents(documents)
        self._data_loaded = True
        return count

    def _read_embedded_semester(self, file_path: str) -> Optional[SemesterRange]:
        """Read a top-level ``semester`` object from a JSON export."""
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict) and isinstance(data.get("semester"), dict):
            semester = SemesterRange.model_validate(
                data["semester"], context={"tz": self._timezone}
            )
            self._logger.info(
                f"Using semester range from export: {semester.start_date} - {semester.end_date}"
            )
            return semester
        return None

    def set_semester(self, start: Any = None, end: Any = None) -> SemesterRange:
        """
        Select a semester range explicitly.

        Args:
            start: Start date (any timestamp format the models accept)
            end: End date

        Returns:
            SemesterRange: The selected range
        """
        self._semester = SemesterRange.model_validate(
            {"start_date": start, "end_date": end}, context={"tz": self._timezone}
        )
        return self._semester

    def select_named_semester(self, name: str) -> Optional[SemesterRange]:
        """
        Select one of the semesters defined in SEMESTER_RANGES.

        Args:
            name: Semester name, e.g. "Fall 2024"

        Returns:
            Optional[SemesterRange]: The selected range, or None if unknown
        """
        ranges = self._config.SEMESTER_RANGES or {}
        if name not in ranges:
            self._logger.warning(f"Unknown semester: {name}")
            return None
        bounds = ranges[name]
        return self.set_semester(bounds.get("start"), bounds.get("end"))

    def get_data_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the loaded data.

        Returns:
            Dict[str, Any]: Counts, course ids and date ranges
        """
        repo = self.assignments
        deadline_min, deadline_max = repo.get_date_range("deadline")
        submit_min, submit_max = repo.get_date_range("submit_time")

        return {
            "assignments": {
                "count": repo.count(),
                "submitted": len(repo.find_submitted()),
                "pending_with_deadline": len(repo.find_pending()),
                "courses": repo.get_course_ids(),
            },
            "date_ranges": {
                "deadline": [deadline_min, deadline_max],
                "submit_time": [submit_min, submit_max],
            },
            "semester": (
                [self._semester.start_date, self._semester.end_date]
                if self._semester
                else None
            ),
        }
