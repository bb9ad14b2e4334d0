# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Dashboard statistics, derived on demand from the full employee set."""
import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from employee_directory.models.domain import Employee
from employee_directory.schemas import DashboardStats

RECENT_HIRE_WINDOW = timedelta(days=30)


def compute_dashboard_stats(employees: Iterable[Employee],
                            now: Optional[datetime] = None) -> DashboardStats:
    """Single pass over ``employees``; keeps no state between calls.

    A hire is recent when its start date is on or after the calendar day
    30 days before ``now``.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = (now - RECENT_HIRE_WINDOW).date()

    total = 0
    active = 0
    salary_sum = 0
    recent = 0
    breakdown: Counter = Counter()

    for emp in employees:
        total += 1
        salary_sum += emp.salary or 0
        breakdown[emp.department] += 1
        if emp.status == "active":
            active += 1
        if emp.start_date >= cutoff:
            recent += 1

    # Half-up rounding; salaries are never negative.
    average = math.floor(salary_sum / total + 0.5) if total else 0

    return DashboardStats(
        total_employees=total,
        active_employees=active,
        departments=len(breakdown),
        average_salary=average,
        department_breakdown=dict(breakdown),
        recent_hires=recent,
    )
