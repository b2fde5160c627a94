"""
Repositories package for the submission analytics system.

This package contains the repository classes used for loading
assignment exports into validated records.
"""

from .base_repository import BaseRepository
from .assignment_repository import AssignmentRepository

__all__ = [
    "BaseRepository",
    "AssignmentRepository",
]
