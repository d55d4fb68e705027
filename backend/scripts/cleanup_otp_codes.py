from community.core.config import settings
from community.db.session import build_engine, build_session_factory
from community.services.otp import OtpService


def main():
    db = build_session_factory(build_engine(settings))()
    try:
        deleted = OtpService(settings).purge(db, settings.OTP_RETENTION_DAYS)
        db.commit()
        print(f"ok: cleanup done (otp_verifications={deleted}, retention_days={settings.OTP_RETENTION_DAYS})")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
