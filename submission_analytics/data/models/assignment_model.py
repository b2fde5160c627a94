"""
Assignment models for the submission analytics system.

This module defines the input data models: one assignment record per
homework instance, its optional submitted attachment, and the optional
semester range used as a hint for trend windows.
"""

from typing import Optional, Union, Any
from datetime import datetime, tzinfo
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from submission_analytics.utils.safe_ops import safe_parse_datetime, safe_str


def _context_timezone(info: ValidationInfo) -> Optional[tzinfo]:
    """Display timezone passed as validation context (``{"tz": ...}``), if any."""
    if isinstance(info.context, dict):
        return info.context.get("tz")
    return None


class Attachment(BaseModel):
    """Submitted attachment. ``size`` is bytes or free-form text such as "3.2MB"."""

    name: Optional[str] = None
    size: Optional[Union[float, int, str]] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("size", mode="before")
    @classmethod
    def validate_size(cls, v):
        """Keep numbers and text as is; anything else counts as missing."""
        if isinstance(v, bool):
            return None
        if isinstance(v, (int, float, str)):
            return v
        return None


class AssignmentRecord(BaseModel):
    """
    One assignment instance from the user's homework list.

    Timestamps are coerced from datetimes, ISO strings, epoch milliseconds
    or ``{"$date": ...}`` documents; unparseable values become None so a
    single bad field never rejects the record.
    """

    id: str
    course_id: str = Field(default="", alias="courseId")
    title: str = ""
    deadline: Optional[datetime] = None
    submitted: bool = False
    submit_time: Optional[datetime] = Field(default=None, alias="submitTime")
    attachment: Optional[Attachment] = Field(
        default=None,
        validation_alias=AliasChoices(
            "attachment", "submittedAttachment", "submitted_attachment"
        ),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("id", "course_id", "title", mode="before")
    @classmethod
    def validate_text(cls, v):
        """Coerce identifiers and titles to strings."""
        return safe_str(v)

    @field_validator("deadline", "submit_time", mode="before")
    @classmethod
    def validate_timestamp(cls, v, info: ValidationInfo):
        """Parse the timestamp, treating unrecognized values as absent."""
        return safe_parse_datetime(v, _context_timezone(info))

    @field_validator("submitted", mode="before")
    @classmethod
    def validate_submitted(cls, v):
        """Treat missing flags as not submitted."""
        if v is None:
            return False
        return v

    @field_validator("attachment", mode="before")
    @classmethod
    def validate_attachment(cls, v):
        """Drop attachment values that are not objects."""
        if isinstance(v, (dict, Attachment)):
            return v
        return None

    @property
    def has_submit_time(self) -> bool:
        """Check whether the record is submitted and carries a submit timestamp."""
        return self.submitted and self.submit_time is not None

    def lead_hours(self) -> Optional[float]:
        """
        Hours between submission and deadline.

        Returns:
            Optional[float]: deadline - submit_time in hours (negative when
                late), or None if either timestamp is missing
        """
        if not self.has_submit_time or self.deadline is None:
            return None
        return (self.deadline - self.submit_time).total_seconds() / 3600

    def is_late(self) -> bool:
        """Check whether the record was submitted after its deadline."""
        if not self.has_submit_time or self.deadline is None:
            return False
        return self.submit_time > self.deadline


class SemesterRange(BaseModel):
    """Optional start/end of the academic term, used as a trend-window hint."""

    start_date: Optional[datetime] = Field(default=None, alias="startDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_date(cls, v: Any, info: ValidationInfo):
        """Parse the boundary, treating unrecognized values as absent."""
        return safe_parse_datetime(v, _context_timezone(info))

    def is_complete(self) -> bool:
        """Check whether both endpoints are present."""
        return self.start_date is not None and self.end_date is not None
