"""
Tests for subject / experiment reference data
"""
from database.seed import seed_reference_data
from models.experiments import Experiment as ExperimentModel
from models.subjects import Subject as SubjectModel


def test_subjects_in_reference_order(client):
    data = client.get("/v1/subjects/").json()["data"]
    assert [s["code"] for s in data] == ["FSD", "IPCV", "ISIG", "BDA", "SE"]


def test_subject_experiments(client):
    data = client.get("/v1/subjects/SE/experiments").json()["data"]
    assert [e["number"] for e in data] == [1, 2, 3, 4, 5]
    assert data[0]["title"] == "Experiment 1: Software Engineering"
    assert data[0]["subject_code"] == "SE"


def test_unknown_subject(client):
    assert client.get("/v1/subjects/XYZ").status_code == 404
    assert client.get("/v1/subjects/XYZ/experiments").status_code == 404


def test_seeding_is_idempotent(db):
    seed_reference_data(db)
    seed_reference_data(db)

    assert db.query(SubjectModel).count() == 5
    assert db.query(ExperimentModel).count() == 25


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert "X-Latency-Ms" in response.headers
