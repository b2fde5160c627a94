"""
Test configuration and fixtures for the submission analytics tests.
"""
import itertools
import logging
from datetime import datetime, timedelta

import pytest

from submission_analytics.data.models import AssignmentRecord

# Wednesday noon; every test reads "now" from here instead of the clock
NOW = datetime(2025, 3, 12, 12, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return NOW


@pytest.fixture
def make_record():
    """Factory for validated assignment records with sensible defaults."""
    counter = itertools.count(1)

    def _make(**fields) -> AssignmentRecord:
        data = {"id": f"hw-{next(counter)}", "course_id": "c1", "title": "Homework"}
        data.update(fields)
        return AssignmentRecord.model_validate(data)

    return _make


@pytest.fixture
def make_submission(make_record):
    """Factory for submitted records; ``lead`` is hours before the deadline."""

    def _make(submit_time: datetime, lead=None, **fields) -> AssignmentRecord:
        if lead is not None:
            fields.setdefault("deadline", submit_time + timedelta(hours=lead))
        return make_record(submitted=True, submit_time=submit_time, **fields)

    return _make


@pytest.fixture
def sample_records(make_record, make_submission):
    """A small semester of mixed submitted and pending assignments."""
    return [
        # Saturday night, half an hour early
        make_submission(datetime(2025, 3, 8, 23, 30), lead=0.5, course_id="c1"),
        # Monday, one hour late
        make_submission(datetime(2025, 3, 10, 10, 0), lead=-1, course_id="c2"),
        # Tuesday, no deadline
        make_submission(
            datetime(2025, 3, 11, 14, 0),
            course_id="c2",
            attachment={"name": "report.pdf", "size": "3.2MB"},
        ),
        # Wednesday early morning, a day ahead
        make_submission(datetime(2025, 3, 5, 5, 59), lead=24, course_id="c1"),
        # Pending, due in two hours
        make_record(deadline=NOW + timedelta(hours=2), course_id="c1"),
        # Pending, already overdue
        make_record(deadline=NOW - timedelta(hours=5), course_id="c3"),
    ]


@pytest.fixture
def restore_root_logging():
    """Remove handlers the CLI attaches to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
