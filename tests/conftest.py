"""
Pytest configuration and fixtures

- SQLite 인메모리 DB(StaticPool)를 테스트마다 새로 만들고 기준 데이터를 넣습니다.
- 앱의 get_db 의존성을 테스트 세션으로 교체합니다.
"""
import os

# 앱 임포트 전에 설정 (시작 시 실제 DB 파일 생성 방지)
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import get_db
from database.seed import init_db, seed_reference_data
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_reference_data(session)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_student(client):
    """API로 학생을 만들고 data를 반환"""
    def _make(name="Asha Rao", sap_id="60004200001", class_name="IT1"):
        response = client.post("/v1/students/", json={"name": name, "sap_id": sap_id, "class_name": class_name})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def save_grade(client):
    """API로 채점을 저장하고 응답을 반환"""
    def _save(student_id, subject="FSD", experiment_number=1, **scores):
        payload = {"student_id": student_id, "subject": subject, "experiment_number": experiment_number}
        payload.update(scores)
        return client.post("/v1/grades/", json=payload)
    return _save
