"""Tests for loading assignment exports."""
import json
from datetime import datetime

import pytest

from submission_analytics.data.data_repository import DataRepository
from submission_analytics.data.repositories import AssignmentRepository

DOCUMENTS = [
    {
        "id": "a",
        "courseId": "c1",
        "title": "HW1",
        "deadline": "2025-03-10T12:00:00",
        "submitted": True,
        "submitTime": "2025-03-10T10:00:00",
    },
    {"id": "b", "courseId": "c2", "title": "HW2", "deadline": "2025-03-20T12:00:00"},
    {"id": "c", "courseId": "c1", "title": "HW3"},
]


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.parametrize(
    "payload",
    [
        DOCUMENTS,
        {"assignments": DOCUMENTS},
        {"homeworks": DOCUMENTS},
        {"records": DOCUMENTS},
    ],
)
def test_load_list_shapes(tmp_path, payload):
    repo = AssignmentRepository()
    assert repo.load_data_from_file(_write_json(tmp_path / "data.json", payload)) == 3
    assert [r.id for r in repo.get_all()] == ["a", "b", "c"]


def test_load_id_mapping(tmp_path):
    mapping = {doc["id"]: {k: v for k, v in doc.items() if k != "id"} for doc in DOCUMENTS}
    repo = AssignmentRepository()

    assert repo.load_data_from_file(_write_json(tmp_path / "m.json", {"homeworkMap": mapping})) == 3
    assert sorted(r.id for r in repo.get_all()) == ["a", "b", "c"]

    assert repo.load_data_from_file(_write_json(tmp_path / "plain.json", mapping)) == 3


def test_id_mapping_with_embedded_semester(tmp_path):
    payload = {
        "hw1": {"courseId": "c1", "submitted": True, "submitTime": "2025-03-10T10:00:00"},
        "hw2": {"courseId": "c1", "deadline": "2025-03-20T12:00:00"},
        "semester": {"startDate": "2025-02-01", "endDate": "2025-05-31"},
    }
    path = _write_json(tmp_path / "data.json", payload)

    repo = AssignmentRepository()
    assert repo.load_data_from_file(path) == 2
    assert sorted(r.id for r in repo.get_all()) == ["hw1", "hw2"]
    assert repo.get_course_ids() == ["c1"]

    data_repo = DataRepository()
    assert data_repo.load_data_from_file(path) == 2
    assert data_repo.semester.start_date == datetime(2025, 2, 1)


def test_semester_id_inside_homework_map_is_an_assignment(tmp_path):
    payload = {"homeworkMap": {"semester": {"courseId": "c9"}}}
    repo = AssignmentRepository()

    assert repo.load_data_from_file(_write_json(tmp_path / "data.json", payload)) == 1
    assert repo.get_all()[0].course_id == "c9"


def test_invalid_documents_are_skipped(tmp_path):
    payload = DOCUMENTS + [{"title": "no id"}, "junk", 42]
    repo = AssignmentRepository()

    assert repo.load_data_from_file(_write_json(tmp_path / "data.json", payload)) == 3
    assert repo.count() == 3


def test_unsupported_json_shape(tmp_path):
    repo = AssignmentRepository()
    assert repo.load_data_from_file(_write_json(tmp_path / "data.json", "text")) == 0


def test_file_errors_are_raised(tmp_path):
    repo = AssignmentRepository()
    with pytest.raises(FileNotFoundError):
        repo.load_data_from_file(str(tmp_path / "missing.json"))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        repo.load_data_from_file(str(bad))


def test_load_csv(tmp_path):
    csv_path = tmp_path / "data.csv"
    csv_path.write_text(
        "id,courseId,title,deadline,submitted,submitTime,attachment_size,attachment_name\n"
        "1,101,HW1,2025-03-10T12:00:00,True,2025-03-10T10:00:00,3.2MB,a.pdf\n"
        "2,101,HW2,2025-03-20T12:00:00,False,,,\n"
        "3,102,HW3,,False,,,\n",
        encoding="utf-8",
    )
    repo = AssignmentRepository()

    assert repo.load_data_from_file(str(csv_path)) == 3
    first = repo.get_all()[0]
    assert first.id == "1"
    assert first.course_id == "101"
    assert first.submitted is True
    assert first.submit_time == datetime(2025, 3, 10, 10, 0)
    assert first.attachment.size == "3.2MB"
    assert first.attachment.name == "a.pdf"
    assert repo.get_all()[1].attachment is None
    assert repo.get_all()[2].deadline is None


def test_queries(tmp_path):
    repo = AssignmentRepository()
    repo.load_documents(DOCUMENTS)

    assert [r.id for r in repo.find_by_course("c1")] == ["a", "c"]
    assert [r.id for r in repo.find_submitted()] == ["a"]
    assert [r.id for r in repo.find_pending()] == ["b"]
    assert repo.get_course_ids() == ["c1", "c2"]
    assert repo.get_date_range("deadline") == (
        datetime(2025, 3, 10, 12, 0),
        datetime(2025, 3, 20, 12, 0),
    )


def test_reload_clears_query_cache():
    repo = AssignmentRepository()
    repo.load_documents(DOCUMENTS)
    assert len(repo.find_by_course("c1")) == 2

    repo.load_documents(DOCUMENTS[:1])
    assert len(repo.find_by_course("c1")) == 1


def test_empty_date_range():
    assert AssignmentRepository().get_date_range("submit_time") == (None, None)


def test_data_repository_reads_embedded_semester(tmp_path):
    payload = {
        "semester": {"startDate": "2025-02-01", "endDate": "2025-05-31"},
        "assignments": DOCUMENTS,
    }
    data_repo = DataRepository()

    assert data_repo.load_data_from_file(_write_json(tmp_path / "data.json", payload)) == 3
    assert data_repo.semester.start_date == datetime(2025, 2, 1)
    assert data_repo.semester.end_date == datetime(2025, 5, 31)


def test_data_repository_semester_selection():
    data_repo = DataRepository()
    data_repo.load_documents(DOCUMENTS)

    assert data_repo.semester is None
    semester = data_repo.select_named_semester("Fall 2024")
    assert semester.start_date == datetime(2024, 9, 1)
    assert data_repo.semester == semester

    assert data_repo.select_named_semester("Winter 1999") is None
    assert data_repo.semester == semester

    data_repo.set_semester("2025-01-01", "2025-01-31")
    assert data_repo.semester.end_date == datetime(2025, 1, 31)


def test_data_summary():
    data_repo = DataRepository()
    data_repo.load_documents(DOCUMENTS)
    summary = data_repo.get_data_summary()

    assert summary["assignments"] == {
        "count": 3,
        "submitted": 1,
        "pending_with_deadline": 1,
        "courses": ["c1", "c2"],
    }
    assert summary["date_ranges"]["submit_time"] == [
        datetime(2025, 3, 10, 10, 0),
        datetime(2025, 3, 10, 10, 0),
    ]
    assert summary["semester"] is None
