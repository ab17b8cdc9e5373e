import json

import pytest

from src.student_attendance.student_attendance.attendance.memory_source import InMemoryAttendanceSource
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.core.exceptions import ValidationError


def test_put_replaces_snapshot(make_record):
    source = InMemoryAttendanceSource()
    source.put("stu1", [make_record("S1")])
    source.put("stu1", [make_record("S2"), make_record("S3")])

    assert [r.subject_id for r in source.get_for_student("stu1")] == ["S2", "S3"]
    assert source.get_for_student("missing") is None
    assert source.student_ids() == ["stu1"]


def test_snapshot_is_not_shared_with_caller(make_record):
    records = [make_record("S1")]
    source = InMemoryAttendanceSource()
    source.put("stu1", records)
    records.append(make_record("S2"))

    assert len(source.get_for_student("stu1")) == 1


def test_from_json_file(tmp_path):
    path = tmp_path / "attendance.json"
    path.write_text(
        json.dumps(
            {
                "students": [
                    {
                        "_id": "stu1",
                        "attendance": [
                            {"date": "2024-03-01", "status": "Present", "subName": {"_id": "S1", "subName": "Maths"}},
                            {"date": "2024-03-02", "status": "Late", "subName": {"_id": "S1", "subName": "Maths"}},
                        ],
                    },
                    {"_id": "stu2"},
                ]
            }
        ),
        encoding="utf-8",
    )

    source = InMemoryAttendanceSource.from_json_file(path)

    records = source.get_for_student("stu1")
    assert [r.status for r in records] == [AttendanceStatus.PRESENT, AttendanceStatus.UNKNOWN]
    assert source.get_for_student("stu2") == ()


@pytest.mark.parametrize("content", ['{"students": {}}', "[]", '{"students": [{"attendance": []}]}'])
def test_from_json_file_rejects_bad_layout(tmp_path, content):
    path = tmp_path / "attendance.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValidationError):
        InMemoryAttendanceSource.from_json_file(path)


def test_from_json_file_rejects_invalid_json(tmp_path):
    path = tmp_path / "attendance.json"
    path.write_text('{"students": [', encoding="utf-8")

    with pytest.raises(ValidationError):
        InMemoryAttendanceSource.from_json_file(path)
