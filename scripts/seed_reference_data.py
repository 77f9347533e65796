from database.db import SessionLocal
from database.seed import init_db, seed_reference_data


def main():
    init_db()
    db = SessionLocal()
    try:
        seed_reference_data(db)
    finally:
        db.close()
    print("✅ 반/과목/실험 기준 데이터 준비 완료")


if __name__ == "__main__":
    main()
