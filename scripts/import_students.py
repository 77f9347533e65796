import csv
import sys
from sqlalchemy.orm import Session
from database.db import SessionLocal
from services import student_service
from services.errors import ClassNotFoundError, DuplicateSapIdError

CSV_PATH = "data/students.csv"  # ✅ 기본 파일 경로 (열: name, sap_id, class)


def import_students(db: Session, rows):
    """명부 행을 순서대로 추가. 중복 SAP ID / 없는 반은 건너뜀"""
    created, skipped = 0, []
    for row in rows:
        try:
            student_service.create_student(db, {
                "name": row["name"].strip(),             # 학생 이름
                "sap_id": row["sap_id"].strip(),         # 학번 (SAP ID)
                "class_name": row["class"].strip(),      # 반 이름 (IT1/IT2/IT3)
            })
            created += 1
        except (DuplicateSapIdError, ClassNotFoundError) as e:
            skipped.append((row.get("sap_id"), e.message))
    return created, skipped


def migrate_students(path: str = CSV_PATH):
    db: Session = SessionLocal()
    try:
        with open(path, newline="", encoding="utf-8-sig") as csvfile:
            created, skipped = import_students(db, csv.DictReader(csvfile))
    finally:
        db.close()

    print(f"✅ 학생 명부 CSV → DB 완료: {created}명 추가, {len(skipped)}명 건너뜀")
    for sap_id, reason in skipped:
        print(f"   - {sap_id}: {reason}")


if __name__ == "__main__":
    migrate_students(sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
