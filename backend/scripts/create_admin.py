import argparse

from community.core.config import settings
from community.db.session import build_engine, build_session_factory
from community.schemas.common import normalize_email, normalize_phone
from community.services import registration


def main():
    parser = argparse.ArgumentParser(description="Create or promote the bootstrap admin account.")
    parser.add_argument("--email", default=settings.ADMIN_EMAIL)
    parser.add_argument("--phone", default=settings.ADMIN_PHONE)
    parser.add_argument("--password", default=settings.ADMIN_PASSWORD)
    args = parser.parse_args()

    if not args.password:
        raise SystemExit("ADMIN_PASSWORD (or --password) is required")

    db = build_session_factory(build_engine(settings))()
    try:
        admin, created = registration.bootstrap_admin(
            db,
            email=normalize_email(args.email),
            phone=normalize_phone(args.phone),
            password=args.password,
        )
        db.commit()
        action = "created" if created else "promoted"
        print(f"ok: admin {action} (id={admin.id}, email={admin.email})")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
