"""
Tests for report endpoints (student report, class summary)
"""


def test_student_report_end_to_end(client, make_student, save_grade):
    student = make_student()
    save_grade(student["id"], "FSD", 1, performance=5, knowledge=4, implementation=3, strategy=2, attitude=1)

    response = client.get(f"/v1/reports/student/{student['id']}")
    assert response.status_code == 200
    report = response.json()["data"]

    assert report["student"]["sap_id"] == "60004200001"
    assert list(report["subjects"]) == ["FSD", "IPCV", "ISIG", "BDA", "SE"]
    assert report["subjects"]["FSD"]["total_marks"] == 15
    assert report["subjects"]["FSD"]["max_marks"] == 25
    assert report["subjects"]["FSD"]["subject_name"] == "Full Stack Development"
    assert report["subjects"]["FSD"]["experiments"][0]["experiment_title"] == "Experiment 1: Full Stack Development"
    for code in ("IPCV", "ISIG", "BDA", "SE"):
        assert report["subjects"][code] == {
            "subject_name": report["subjects"][code]["subject_name"],
            "experiments": [],
            "total_marks": 0,
            "max_marks": 0,
        }
    assert report["overall"] == {"total_marks": 15, "max_marks": 25, "percentage": 60.0, "grade": "C"}
    assert report["metrics"]["performance"] == 5.0


def test_student_without_grades(client, make_student):
    student = make_student()
    report = client.get(f"/v1/reports/student/{student['id']}").json()["data"]

    assert report["overall"] == {"total_marks": 0, "max_marks": 0, "percentage": 0.0, "grade": "F"}
    assert set(report["metrics"].values()) == {0.0}


def test_report_is_stable_between_calls(client, make_student, save_grade):
    student = make_student()
    save_grade(student["id"], "BDA", 3, performance=2, knowledge=5)

    first = client.get(f"/v1/reports/student/{student['id']}")
    second = client.get(f"/v1/reports/student/{student['id']}")
    assert first.content == second.content


def test_unknown_student_report_is_not_found(client):
    response = client.get("/v1/reports/student/999")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "STUDENT_NOT_FOUND"
    assert "data" not in body


def test_class_summary(client, make_student, save_grade):
    asha = make_student(name="Asha", sap_id="1", class_name="IT2")
    ravi = make_student(name="Ravi", sap_id="2", class_name="IT2")
    make_student(name="Meera", sap_id="3", class_name="IT3")
    full = dict(performance=5, knowledge=5, implementation=5, strategy=5, attitude=5)
    save_grade(asha["id"], "FSD", 1, **full)
    save_grade(ravi["id"], "FSD", 1, performance=5, knowledge=4, implementation=3, strategy=2, attitude=1)

    response = client.get("/v1/reports/class/IT2/summary")
    assert response.status_code == 200
    summary = response.json()["data"]

    assert summary["student_count"] == 2
    assert summary["subject_averages"]["FSD"] == 20.0
    assert summary["subject_averages"]["SE"] == 0.0
    grades = {row["name"]: row["grade"] for row in summary["students"]}
    assert grades == {"Asha": "A+", "Ravi": "C"}


def test_class_summary_unknown_class(client):
    assert client.get("/v1/reports/class/IT9/summary").status_code == 404
