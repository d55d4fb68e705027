from community.core.config import settings
from community.db.session import build_engine, build_session_factory
from community.services import reference


def main():
    db = build_session_factory(build_engine(settings))()
    try:
        added = reference.seed(db)
        db.commit()
        summary = ", ".join(f"{k}={v}" for k, v in added.items())
        print(f"ok: reference data seeded ({summary})")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
