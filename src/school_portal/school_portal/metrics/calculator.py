"""Derived metrics shown to students.

Both metrics use the same empty-input convention: no records means 0, never
NaN and never an error.
"""

from __future__ import annotations

from typing import Iterable

from ..core.constants import METRIC_PRECISION
from ..core.enums import AttendanceStatus


def attendance_percentage(records: Iterable) -> float:
    """100 * present / total, rounded; 0.0 when there are no records."""

    total = 0
    present = 0
    for r in records:
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
    if total == 0:
        return 0.0
    return round(present / total * 100, METRIC_PRECISION)


def average_mark(records: Iterable) -> float:
    """Mean of all marks, rounded; 0.0 when there are no records."""

    marks = [float(r.mark) for r in records]
    if not marks:
        return 0.0
    return round(sum(marks) / len(marks), METRIC_PRECISION)
