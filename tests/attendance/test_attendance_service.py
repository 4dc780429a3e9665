from __future__ import annotations

from src.hr_management.hr_management.attendance.service import (
    AttendanceService,
    absence_trend,
    attendance_rate,
    filter_attendance,
    percent,
)


def test_rate_of_empty_input_is_all_zeros():
    assert attendance_rate([]) == {"present": 0, "late": 0, "absent": 0}


def test_rate_is_rounded_share_per_status():
    records = [
        {"employeeId": "1", "date": "2024-05-01", "status": "Present"},
        {"employeeId": "1", "date": "2024-05-02", "status": "Present"},
        {"employeeId": "1", "date": "2024-05-03", "status": "Late"},
        {"employeeId": "1", "date": "2024-05-04", "status": "Absent"},
    ]

    assert attendance_rate(records) == {"present": 50, "late": 25, "absent": 25}


def test_percent_rounds_halves_up():
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(1, 8) == 13
    assert percent(5, 0) == 0


def test_absence_trend_counts_absences_per_date():
    records = [
        {"employeeId": "1", "date": "2024-05-03", "status": "Absent"},
        {"employeeId": "2", "date": "2024-05-01", "status": "Absent"},
        {"employeeId": "3", "date": "2024-05-03", "status": "Absent"},
        {"employeeId": "3", "date": "2024-05-02", "status": "Present"},
    ]

    assert absence_trend(records) == [
        {"date": "2024-05-01", "count": 1},
        {"date": "2024-05-03", "count": 2},
    ]


def test_filter_by_date_and_status():
    records = [
        {"id": "1", "date": "2024-05-01", "status": "Present"},
        {"id": "2", "date": "2024-05-01", "status": "Late"},
        {"id": "3", "date": "2024-05-02", "status": "Late"},
    ]

    assert [r["id"] for r in filter_attendance(records, {"date": "2024-05-01"})] == ["1", "2"]
    assert [r["id"] for r in filter_attendance(records, {"status": "Late"})] == ["2", "3"]


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records

    def list_all(self):
        return list(self._records)

    def list_by_employee(self, employee_id):
        return [r for r in self._records if str(r.get("employeeId")) == str(employee_id)]


def test_service_rate_for_one_employee():
    service = AttendanceService(
        FakeAttendanceRepo(
            [
                {"employeeId": "1", "date": "2024-05-01", "status": "Absent"},
                {"employeeId": 2, "date": "2024-05-01", "status": "Present"},
            ]
        )
    )

    assert service.get_rate(employee_id="2") == {"present": 100, "late": 0, "absent": 0}
    assert service.get_rate() == {"present": 50, "late": 0, "absent": 50}
    assert service.get_absence_trend(employee_id="1") == [{"date": "2024-05-01", "count": 1}]


def test_rate_ignores_non_text_status_values():
    records = [
        {"employeeId": "1", "date": "2024-05-01", "status": ["Absent"]},
        {"employeeId": "1", "date": "2024-05-02", "status": "Absent"},
    ]

    assert attendance_rate(records) == {"present": 0, "late": 0, "absent": 50}


def test_absence_trend_with_numeric_and_text_dates():
    records = [
        {"employeeId": "1", "date": 20240501, "status": "Absent"},
        {"employeeId": "2", "date": "2024-05-01", "status": "Absent"},
    ]

    assert absence_trend(records) == [
        {"date": "2024-05-01", "count": 1},
        {"date": "20240501", "count": 1},
    ]
