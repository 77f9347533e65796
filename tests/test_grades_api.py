"""
Tests for grade upsert / query endpoints
"""
from datetime import datetime

from database.repositories import SqlAlchemyGradingRepository
from models.grades import Grade as GradeModel
from services import grade_service, student_service

FULL = dict(performance=5, knowledge=4, implementation=3, strategy=2, attitude=1)


def test_first_save_creates_grade(client, make_student, save_grade):
    student = make_student()
    response = save_grade(student["id"], "FSD", 1, comment="good work", **FULL)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["subject"] == "FSD"
    assert data["experiment_number"] == 1
    assert data["total"] == 15
    assert data["comment"] == "good work"


def test_second_save_updates_same_record(client, make_student, save_grade):
    student = make_student()
    first = save_grade(student["id"], "IPCV", 2, **FULL).json()["data"]
    response = save_grade(student["id"], "IPCV", 2, performance=0, knowledge=0,
                          implementation=0, strategy=0, attitude=1)

    assert response.status_code == 200
    second = response.json()["data"]
    assert second["id"] == first["id"]
    assert second["total"] == 1
    assert datetime.fromisoformat(second["updated_at"]) >= datetime.fromisoformat(first["updated_at"])

    rows = client.get("/v1/grades/", params={"student_id": student["id"]}).json()["data"]
    assert len(rows) == 1


def test_rubric_out_of_range_is_rejected(client, make_student, save_grade):
    student = make_student()
    assert save_grade(student["id"], performance=6).status_code == 400
    assert save_grade(student["id"], attitude=-1).status_code == 400


def test_experiment_number_out_of_range_is_rejected(client, make_student, save_grade):
    student = make_student()
    assert save_grade(student["id"], "FSD", 6, performance=1).status_code == 400


def test_unknown_student_or_subject(client, make_student, save_grade):
    response = save_grade(999, performance=1)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "STUDENT_NOT_FOUND"

    student = make_student()
    response = save_grade(student["id"], "XYZ", 1, performance=1)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "EXPERIMENT_NOT_FOUND"


def test_missing_rubric_is_stored_as_null(client, make_student, save_grade):
    student = make_student()
    data = save_grade(student["id"], performance=4).json()["data"]

    assert data["knowledge"] is None
    assert data["total"] == 4


def test_list_without_filters_is_empty(client, make_student, save_grade):
    student = make_student()
    save_grade(student["id"], performance=4)

    body = client.get("/v1/grades/").json()
    assert body["success"] is True
    assert body["data"] == []


def test_filter_by_subject_and_experiment(client, make_student, save_grade):
    asha = make_student(name="Asha", sap_id="1")
    ravi = make_student(name="Ravi", sap_id="2")
    save_grade(asha["id"], "FSD", 1, performance=1)
    save_grade(ravi["id"], "FSD", 1, performance=2)
    save_grade(ravi["id"], "FSD", 2, performance=3)
    save_grade(ravi["id"], "SE", 1, performance=4)

    sheet = client.get("/v1/grades/", params={"subject": "FSD", "experiment_number": 1}).json()["data"]
    assert sorted(g["student_id"] for g in sheet) == sorted([asha["id"], ravi["id"]])

    ravi_fsd = client.get("/v1/grades/", params={"student_id": ravi["id"], "subject": "FSD"}).json()["data"]
    assert [g["experiment_number"] for g in ravi_fsd] == [1, 2]


def test_patch_recomputes_total(client, make_student, save_grade):
    student = make_student()
    grade = save_grade(student["id"], **FULL).json()["data"]

    response = client.patch(f"/v1/grades/{grade['id']}", json={"attitude": 5, "comment": "improved"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["attitude"] == 5
    assert data["total"] == 19
    assert data["comment"] == "improved"
    assert data["performance"] == 5


def test_patch_rejects_out_of_range(client, make_student, save_grade):
    student = make_student()
    grade = save_grade(student["id"], **FULL).json()["data"]
    assert client.patch(f"/v1/grades/{grade['id']}", json={"strategy": 9}).status_code == 400


def test_read_and_delete_grade(client, make_student, save_grade):
    student = make_student()
    grade = save_grade(student["id"], **FULL).json()["data"]

    assert client.get(f"/v1/grades/{grade['id']}").json()["data"]["total"] == 15
    assert client.delete(f"/v1/grades/{grade['id']}").status_code == 200
    assert client.get(f"/v1/grades/{grade['id']}").status_code == 404
    assert client.patch(f"/v1/grades/{grade['id']}", json={"attitude": 1}).status_code == 404


def test_grading_progress(client, make_student, save_grade):
    asha = make_student(name="Asha", sap_id="1", class_name="IT1")
    make_student(name="Ravi", sap_id="2", class_name="IT1")
    other = make_student(name="Meera", sap_id="3", class_name="IT2")
    save_grade(asha["id"], "FSD", 1, performance=3)
    save_grade(other["id"], "FSD", 1, performance=3)

    rows = client.get("/v1/grades/progress", params={"class_name": "IT1"}).json()["data"]
    assert len(rows) == 25
    fsd1 = next(r for r in rows if r["subject"] == "FSD" and r["experiment_number"] == 1)
    assert fsd1 == {"subject": "FSD", "experiment_number": 1, "graded": 1, "total_students": 2}

    assert client.get("/v1/grades/progress", params={"class_name": "IT9"}).status_code == 404


def test_subject_only_and_number_only_filters(client, make_student, save_grade):
    student = make_student()
    save_grade(student["id"], "FSD", 1, performance=1)
    save_grade(student["id"], "FSD", 2, performance=2)
    save_grade(student["id"], "SE", 2, performance=3)

    fsd = client.get("/v1/grades/", params={"subject": "FSD"}).json()["data"]
    assert [(g["subject"], g["experiment_number"]) for g in fsd] == [("FSD", 1), ("FSD", 2)]

    second = client.get("/v1/grades/", params={"experiment_number": 2}).json()["data"]
    assert [(g["subject"], g["experiment_number"]) for g in second] == [("FSD", 2), ("SE", 2)]


def test_concurrent_first_save_becomes_update(db, monkeypatch):
    student = student_service.create_student(db, {"name": "Asha", "sap_id": "1", "class_name": "IT1"})
    payload = {"student_id": student.id, "subject": "FSD", "experiment_number": 1, **FULL}
    existing, created = grade_service.upsert_grade(db, payload)
    assert created is True

    # 다른 요청이 먼저 저장한 상황: 첫 조회에서는 기록이 보이지 않음
    original = SqlAlchemyGradingRepository.get_grade_for_pair
    calls = []

    def stale_lookup(self, student_id, experiment_id):
        calls.append((student_id, experiment_id))
        if len(calls) == 1:
            return None
        return original(self, student_id, experiment_id)

    monkeypatch.setattr(SqlAlchemyGradingRepository, "get_grade_for_pair", stale_lookup)

    grade, created = grade_service.upsert_grade(db, {**payload, "attitude": 5})

    assert created is False
    assert grade.id == existing.id
    assert grade.total == 19
    assert len(calls) == 2
    assert db.query(GradeModel).count() == 1
