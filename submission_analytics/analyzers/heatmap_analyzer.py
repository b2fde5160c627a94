"""
Heatmap grids of submission activity.

Both grids have a fixed shape: 7 weekdays x 24 hours, and 16 Sunday-first
weeks x 7 days ending with the week of the most recent submission. Counts
are accumulated into fixed numpy arrays indexed by offset.
"""

from collections import Counter
from datetime import timedelta
from typing import List, Sequence, Tuple

import numpy as np

from submission_analytics.data.models import (
    AssignmentRecord,
    CalendarHeatmap,
    HeatCell,
    Weekday,
    WeeklyHourHeatmap,
)
from submission_analytics.utils.date_utils import start_of_week, to_day, weekday_of

CALENDAR_WEEKS = 16
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def weekly_hour_heatmap(submissions: Sequence[AssignmentRecord]) -> WeeklyHourHeatmap:
    """
    Count submissions per (weekday, hour).

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        WeeklyHourHeatmap: 7 rows of 24 cells (Sunday first) and the grid
            maximum; no rows when there are no submissions
    """
    if not submissions:
        return WeeklyHourHeatmap()

    grid = np.zeros((DAYS_PER_WEEK, HOURS_PER_DAY), dtype=np.int64)
    for record in submissions:
        grid[weekday_of(record.submit_time).value, record.submit_time.hour] += 1

    rows = tuple(
        tuple(
            HeatCell(label=f"{day.label} {hour:02d}:00", value=int(grid[day.value, hour]))
            for hour in range(HOURS_PER_DAY)
        )
        for day in Weekday
    )
    return WeeklyHourHeatmap(rows=rows, max=int(grid.max()))


def calendar_heatmap(submissions: Sequence[AssignmentRecord]) -> CalendarHeatmap:
    """
    Count submissions per day over the last 16 weeks of activity.

    The window ends with the Sunday-start week containing the most recent
    submission. The first week, and every week starting in a different
    month than the previous one, is labeled with that month.

    Args:
        submissions: Submitted records with a submit timestamp

    Returns:
        CalendarHeatmap: 16 weeks of 7 cells, the grid maximum and 16 week
            labels; empty when there are no submissions
    """
    if not submissions:
        return CalendarHeatmap()

    latest = max(r.submit_time for r in submissions)
    first_day = start_of_week(latest) - timedelta(weeks=CALENDAR_WEEKS - 1)
    day_counts = Counter(to_day(r.submit_time) for r in submissions)

    grid = np.zeros((CALENDAR_WEEKS, DAYS_PER_WEEK), dtype=np.int64)
    labels: List[str] = []
    weeks: List[Tuple[HeatCell, ...]] = []
    last_month = None
    for week in range(CALENDAR_WEEKS):
        week_start = first_day + timedelta(weeks=week)
        if week_start.month != last_month:
            labels.append(MONTH_LABELS[week_start.month - 1])
            last_month = week_start.month
        else:
            labels.append("")

        cells = []
        for offset in range(DAYS_PER_WEEK):
            day = week_start + timedelta(days=offset)
            grid[week, offset] = day_counts.get(day, 0)
            cells.append(HeatCell(label=day.isoformat(), value=int(grid[week, offset])))
        weeks.append(tuple(cells))

    return CalendarHeatmap(
        weeks=tuple(weeks), max=int(grid.max()), week_labels=tuple(labels)
    )
