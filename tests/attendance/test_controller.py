from __future__ import annotations

import pytest
from flask import Flask

from src.student_attendance.student_attendance.attendance.controller import register
from src.student_attendance.student_attendance.attendance.memory_source import InMemoryAttendanceSource
from src.student_attendance.student_attendance.container import Container, build_container
from src.student_attendance.student_attendance.core.exceptions import ValidationError


@pytest.fixture
def client(interleaved):
    container = build_container()
    container.attendance_source.put("stu1", interleaved)

    app = Flask(__name__)
    app.config["TESTING"] = True
    register(app, container)
    return app.test_client()


def test_get_attendance(client):
    resp = client.get("/api/students/stu1/attendance")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["overall_percentage"] == 60
    assert [s["subject_id"] for s in body["data"]["subjects"]] == ["S1", "S2"]


def test_get_chart(client):
    body = client.get("/api/students/stu1/attendance/chart").get_json()

    assert body["data"][0] == {
        "subject": "Maths",
        "attendancePercentage": 66.67,
        "totalClasses": 3,
        "attendedClasses": 2,
    }


def test_get_overview(client):
    body = client.get("/api/students/stu1/attendance/overview").get_json()

    assert [d["value"] for d in body["data"]] == [60, 40]


def test_get_subject(client):
    resp = client.get("/api/students/stu1/attendance/subjects/S2")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["percentage"] == 50


def test_unknown_student_is_404(client):
    resp = client.get("/api/students/ghost/attendance")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unknown_subject_is_404(client):
    resp = client.get("/api/students/stu1/attendance/subjects/S9")

    assert resp.status_code == 404


class RejectingService:
    def get_attendance_view(self, student_id: str):
        raise ValidationError(f"Attendance entry for {student_id} must be an object")


def test_domain_error_is_400():
    container = Container(attendance_source=InMemoryAttendanceSource(), attendance_service=RejectingService())
    app = Flask(__name__)
    register(app, container)

    resp = app.test_client().get("/api/students/stu1/attendance")

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert "must be an object" in body["message"]
