"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; attendance figures come from the service and aggregator.
"""

from pathlib import Path

from src.student_attendance.student_attendance.container import build_container


def main():
    seed = Path(__file__).resolve().parents[1] / "data" / "sample_attendance.json"
    container = build_container(seed_file=str(seed))
    student_id = container.attendance_source.student_ids()[0]

    view = container.attendance_service.get_attendance_view(student_id)
    print(f"Overall attendance: {view.overall_percentage:.1f}% ({view.overall_band})")
    for row in view.subjects:
        print(f"  {row['subject']}: {row['present']}/{row['sessions']} = {row['percentage']}%")


if __name__ == "__main__":
    main()
