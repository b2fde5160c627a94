"""
Assignment repository for the submission analytics system.

This module provides the AssignmentRepository class that loads assignment
records from JSON or CSV exports and offers simple query helpers over them.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from submission_analytics.data.models import AssignmentRecord
from submission_analytics.data.repositories.base_repository import BaseRepository

# Keys under which exports nest the assignment list
LIST_KEYS = ("assignments", "homeworks", "records")

# Keys under which exports nest an id -> assignment mapping
MAP_KEYS = ("homeworkMap", "assignmentMap")

# Top-level export metadata that is never an assignment
METADATA_KEYS = ("semester",)


class AssignmentRepository(BaseRepository[AssignmentRecord]):
    """
    Repository for assignment records.

    Accepted JSON shapes: a list of assignments, an object holding such a
    list under "assignments"/"homeworks"/"records", or an object mapping
    assignment ids to assignments (optionally under "homeworkMap").
    CSV files are read with pandas, one assignment per row.
    """

    def __init__(self):
        """Initialize the assignment repository."""
        super().__init__("assignments", AssignmentRecord)

    def extract_documents(self, data: Any) -> List[Dict[str, Any]]:
        """
        Pull assignment documents out of parsed JSON content.

        Args:
            data: Parsed JSON content

        Returns:
            List[Dict[str, Any]]: Raw assignment documents
        """
        if isinstance(data, list):
            return data

        if not isinstance(data, dict):
            self._logger.warning(f"Unsupported assignment export: {type(data).__name__}")
            return []

        for key in LIST_KEYS:
            if isinstance(data.get(key), list):
                return data[key]

        mapping = data
        for key in MAP_KEYS:
            if isinstance(data.get(key), dict):
                mapping = data[key]
                break

        # id -> assignment mapping; the key fills in a missing id
        documents = []
        for key, value in mapping.items():
            if mapping is data and key in METADATA_KEYS:
                continue
            if isinstance(value, dict):
                documents.append({"id": key, **value})
        return documents

    def load_data_from_file(self, filepath: str) -> int:
        """
        Load assignments from a JSON or CSV file.

        Args:
            filepath: Path to the export

        Returns:
            int: Number of assignments loaded
        """
        if self.file_format(filepath) != "csv":
            return super().load_data_from_file(filepath)

        try:
            frame = pd.read_csv(filepath, dtype={"id": str, "courseId": str})
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            self._logger.error(f"Error loading data from file {filepath}: {e}")
            raise

        return self.load_documents(self._frame_to_documents(frame))

    @staticmethod
    def _frame_to_documents(frame: pd.DataFrame) -> List[Dict[str, Any]]:
        """
        Convert CSV rows to assignment documents.

        Empty cells become missing values, and ``attachment_size`` /
        ``attachment_name`` columns are folded into an attachment object.
        """
        frame = frame.astype(object).where(pd.notna(frame), None)
        documents = []
        for row in frame.to_dict(orient="records"):
            size = row.pop("attachment_size", None)
            name = row.pop("attachment_name", None)
            if size is not None or name is not None:
                row["attachment"] = {"name": name, "size": size}
            documents.append(row)
        return documents

    @BaseRepository._cache_result
    def find_by_course(self, course_id: str) -> List[AssignmentRecord]:
        """
        Find assignments belonging to a course.

        Args:
            course_id: Course identifier

        Returns:
            List[AssignmentRecord]: Matching assignments
        """
        return self.find_many(lambda r: r.course_id == course_id)

    def find_submitted(self) -> List[AssignmentRecord]:
        """Find submitted assignments."""
        return self.find_many(lambda r: r.submitted)

    def find_pending(self) -> List[AssignmentRecord]:
        """Find unsubmitted assignments that have a deadline."""
        return self.find_many(lambda r: not r.submitted and r.deadline is not None)

    def get_course_ids(self) -> List[str]:
        """
        Get the distinct course ids, in first-seen order.

        Returns:
            List[str]: Course identifiers
        """
        return list(dict.fromkeys(r.course_id for r in self._documents))

    def get_date_range(
        self, date_field: str
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        """
        Get the range of dates for a date field.

        Args:
            date_field: "deadline" or "submit_time"

        Returns:
            Tuple[Optional[datetime], Optional[datetime]]: Min and max dates
        """
        dates = [
            getattr(r, date_field, None)
            for r in self._documents
            if isinstance(getattr(r, date_field, None), datetime)
        ]
        if not dates:
            return None, None
        return min(dates), max(dates)
