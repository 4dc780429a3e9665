from __future__ import annotations

import json


def test_root_describes_service(client):
    resp = client.get("/")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["status"] == "running"
    assert body["endpoints"]["employees"] == "/api/employees"


def test_department_lifecycle(client, tmp_path):
    created = client.post("/api/departments", json={"name": "Engineering", "manager": "Ada"})
    assert created.status_code == 201
    assert created.get_json() == {"id": "1", "name": "Engineering", "manager": "Ada"}

    listed = client.get("/api/departments").get_json()
    assert listed == [{"id": "1", "name": "Engineering", "manager": "Ada"}]

    updated = client.put("/api/departments/1", json={"manager": "Grace"})
    assert updated.get_json() == {"id": "1", "name": "Engineering", "manager": "Grace"}

    on_disk = json.loads((tmp_path / "departments.json").read_text(encoding="utf-8"))
    assert on_disk == [{"id": "1", "name": "Engineering", "manager": "Grace"}]

    deleted = client.delete("/api/departments/1")
    assert deleted.get_json() == {"success": True, "message": "Department deleted successfully"}

    missing = client.get("/api/departments/1")
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Department not found"}


def test_delete_of_unknown_id_still_succeeds(client):
    resp = client.delete("/api/employees/77")

    assert resp.status_code == 200
    assert resp.get_json()["success"] is True


def test_update_of_unknown_id_is_404(client):
    resp = client.put("/api/salaries/5", json={"bonus": 1})

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Salary not found"}


def test_list_filters_use_query_args(client):
    client.post("/api/employees", json={"firstName": "Alan", "lastName": "Turing", "departmentId": "1"})
    client.post("/api/employees", json={"firstName": "Ada", "lastName": "Byron", "departmentId": 2})

    resp = client.get("/api/employees?departmentId=2")

    assert [e["firstName"] for e in resp.get_json()] == ["Ada"]


def test_records_by_employee(client):
    client.post("/api/attendance", json={"employeeId": 1, "date": "2024-05-01", "status": "Late"})
    client.post("/api/attendance", json={"employeeId": "2", "date": "2024-05-01", "status": "Present"})

    resp = client.get("/api/attendance/employee/1")

    assert [r["status"] for r in resp.get_json()] == ["Late"]


def test_attendance_rate_route_is_not_shadowed_by_id_route(client):
    client.post("/api/attendance", json={"employeeId": "1", "date": "2024-05-01", "status": "Absent"})

    assert client.get("/api/attendance/rate").get_json() == {"present": 0, "late": 0, "absent": 100}
    assert client.get("/api/attendance/absence-trend").get_json() == [{"date": "2024-05-01", "count": 1}]


def test_leave_approval_flow(client):
    leave = client.post(
        "/api/leaves",
        json={"employeeId": "1", "startDate": "2024-01-01", "endDate": "2024-01-03", "type": "Sick", "status": "Pending"},
    ).get_json()

    rejected = client.put(f"/api/leaves/{leave['id']}/reject")
    approved = client.put(f"/api/leaves/{leave['id']}/approve")

    assert rejected.get_json()["status"] == "Rejected"
    assert approved.get_json()["status"] == "Approved"
    assert client.put("/api/leaves/999/approve").status_code == 404


def test_employee_details(client):
    client.post("/api/departments", json={"name": "Engineering"})
    client.post("/api/employees", json={"firstName": "Alan", "lastName": "Turing", "departmentId": 1})

    details = client.get("/api/employees/1/details")
    missing = client.get("/api/employees/9/details")

    assert details.get_json()["departmentName"] == "Engineering"
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Employee not found"}


def test_dashboard_and_distribution(client):
    client.post("/api/salaries", json={"employeeId": "1", "baseSalary": 3000, "bonus": 0})

    dashboard = client.get("/api/dashboard").get_json()
    distribution = client.get("/api/salaries/distribution").get_json()

    assert dashboard["salaryDistribution"] == distribution
    assert {"label": "3000-5000", "count": 1} in distribution


def test_login(client):
    ok = client.post("/api/auth/login", json={"username": "admin", "password": "admin"})
    bad = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    empty = client.post("/api/auth/login", json={})

    assert ok.status_code == 200
    assert ok.get_json() == {"username": "admin", "name": "Administrator", "role": "admin"}
    assert bad.status_code == 401
    assert bad.get_json() == {"error": "Invalid username or password"}
    assert empty.status_code == 401


def test_unknown_route_lists_endpoints(client):
    resp = client.get("/api/unknown")

    body = resp.get_json()
    assert resp.status_code == 404
    assert body["error"] == "Not Found"
    assert body["message"] == "Route GET /api/unknown not found"
    assert body["availableEndpoints"]["root"] == "/"


def test_non_object_body_creates_empty_record(client):
    resp = client.post("/api/departments", data="[1, 2]", content_type="application/json")

    assert resp.status_code == 201
    assert resp.get_json() == {"id": "1"}


def test_aggregates_survive_malformed_attendance(client):
    client.post("/api/attendance", json={"employeeId": "1", "date": 20240501, "status": "Absent"})
    client.post("/api/attendance", json={"employeeId": "1", "date": "2024-05-01", "status": "Absent"})
    client.post("/api/attendance", json={"employeeId": "1", "date": "2024-05-02", "status": ["Absent"]})

    trend = client.get("/api/attendance/absence-trend")
    rate = client.get("/api/attendance/rate")
    dashboard = client.get("/api/dashboard")

    assert trend.status_code == 200
    assert len(trend.get_json()) == 2
    assert rate.status_code == 200
    assert rate.get_json() == {"present": 0, "late": 0, "absent": 67}
    assert dashboard.status_code == 200


def test_login_without_username(client):
    resp = client.post("/api/auth/login", json={"password": "admin"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Username is required"}
