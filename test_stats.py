# type: ignore
"""
Dashboard statistics — pure aggregation tests.
Run:  pytest test_stats.py -v
"""
from datetime import date, datetime, timedelta, timezone

from employee_directory.models.domain import Employee
from employee_directory.services.stats import compute_dashboard_stats

NOW = datetime(2026, 3, 31, 15, 30, tzinfo=timezone.utc)


def _emp(i, **overrides):
    base = dict(
        id=f"e{i}", name=f"Emp {i}", position="Eng", email=f"e{i}@x.com",
        department="General", start_date=date(2020, 1, 1), salary=0,
        status="active", created_at=NOW,
    )
    base.update(overrides)
    return Employee(**base)


class TestComputeDashboardStats:
    def test_empty_input(self):
        stats = compute_dashboard_stats([], now=NOW)
        assert stats.total_employees == 0
        assert stats.active_employees == 0
        assert stats.departments == 0
        assert stats.average_salary == 0
        assert stats.department_breakdown == {}
        assert stats.recent_hires == 0

    def test_average_salary(self):
        stats = compute_dashboard_stats([_emp(1, salary=100), _emp(2, salary=200)], now=NOW)
        assert stats.average_salary == 150

    def test_average_salary_rounds_half_up(self):
        stats = compute_dashboard_stats([_emp(1, salary=1), _emp(2, salary=2)], now=NOW)
        assert stats.average_salary == 2

    def test_breakdown_sums_to_total(self):
        employees = [
            _emp(1, department="Eng"), _emp(2, department="Eng"),
            _emp(3, department="Ops"), _emp(4, department="Sales"),
        ]
        stats = compute_dashboard_stats(employees, now=NOW)
        assert stats.department_breakdown == {"Eng": 2, "Ops": 1, "Sales": 1}
        assert stats.departments == 3
        assert sum(stats.department_breakdown.values()) == stats.total_employees

    def test_active_count(self):
        employees = [_emp(1), _emp(2, status="inactive"), _emp(3)]
        assert compute_dashboard_stats(employees, now=NOW).active_employees == 2

    def test_recent_hires_window(self):
        today = NOW.date()
        employees = [
            _emp(1, start_date=today),
            _emp(2, start_date=today - timedelta(days=30)),
            _emp(3, start_date=today - timedelta(days=31)),
            _emp(4, start_date=today + timedelta(days=7)),
        ]
        assert compute_dashboard_stats(employees, now=NOW).recent_hires == 3

    def test_serialises_camel_case(self):
        body = compute_dashboard_stats([_emp(1, salary=10)], now=NOW).model_dump(by_alias=True)
        assert set(body) == {
            "totalEmployees", "activeEmployees", "departments",
            "averageSalary", "departmentBreakdown", "recentHires",
        }

    def test_accepts_generator(self):
        stats = compute_dashboard_stats((_emp(i) for i in range(5)), now=NOW)
        assert stats.total_employees == 5
