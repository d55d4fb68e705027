from __future__ import annotations

from datetime import timedelta

import pytest
import sqlalchemy as sa

from community.models.otp import OtpVerification
from community.services import registration
from community.services.otp import OtpService


@pytest.fixture
def otp(cfg, clock) -> OtpService:
    return OtpService(cfg, clock=clock)


@pytest.fixture
def user(db):
    u = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    db.commit()
    return u


def test_issue_generates_six_digit_code_with_ten_minute_window(db, otp, user, clock):
    issued = otp.issue(db, user.id, user.email, "email")

    assert len(issued.code) == 6
    assert 100000 <= int(issued.code) <= 999999
    assert issued.expires_at - clock() == timedelta(seconds=600)


def test_code_is_stored_hashed(db, otp, user):
    issued = otp.issue(db, user.id, user.email, "email")
    stored = db.execute(sa.select(OtpVerification.code_hash)).scalar_one()
    assert stored != issued.code
    assert issued.code not in stored


def test_verify_consumes_code_once(db, otp, user):
    issued = otp.issue(db, user.id, user.email, "email")

    assert otp.verify(db, user.id, issued.code, "email") is True
    assert otp.verify(db, user.id, issued.code, "email") is False


def test_new_code_invalidates_previous_unconsumed_code(db, otp, user):
    first = otp.issue(db, user.id, user.email, "email")
    second = otp.issue(db, user.id, user.email, "email")
    if first.code == second.code:
        pytest.skip("random collision")

    assert otp.verify(db, user.id, first.code, "email") is False
    assert otp.verify(db, user.id, second.code, "email") is True
    live = db.execute(
        sa.select(sa.func.count()).select_from(OtpVerification).where(OtpVerification.user_id == user.id)
    ).scalar_one()
    assert live == 1


def test_code_valid_until_expiry_inclusive(db, otp, user, clock):
    issued = otp.issue(db, user.id, user.email, "email")
    clock.advance(600)
    assert otp.verify(db, user.id, issued.code, "email") is True


def test_expired_code_fails(db, otp, user, clock):
    issued = otp.issue(db, user.id, user.email, "email")
    clock.advance(601)
    assert otp.verify(db, user.id, issued.code, "email") is False


def test_wrong_code_fails_without_consuming(db, otp, user):
    issued = otp.issue(db, user.id, user.email, "email")
    wrong = "100000" if issued.code != "100000" else "100001"

    assert otp.verify(db, user.id, wrong, "email") is False
    assert otp.verify(db, user.id, issued.code, "email") is True


def test_purposes_are_independent(db, otp, user):
    phone_code = otp.issue(db, user.id, user.phone, "phone")
    email_code = otp.issue(db, user.id, user.email, "email")

    assert otp.verify(db, user.id, phone_code.code, "email") is (phone_code.code == email_code.code)
    assert otp.verify(db, user.id, phone_code.code, "phone") is True


def test_verify_without_any_code_fails(db, otp, user):
    assert otp.verify(db, user.id, "123456", "phone") is False


def test_issue_dispatches_after_persisting(db, otp, user):
    calls = []
    issued = otp.issue(db, user.id, user.phone, "phone", dispatch=lambda *args: calls.append(args))
    assert calls == [("phone", user.phone, issued.code)]


def test_issue_rejects_unknown_purpose(db, otp, user):
    with pytest.raises(ValueError):
        otp.issue(db, user.id, user.email, "sms")


def test_purge_removes_only_stale_rows(db, otp, user, clock):
    used = otp.issue(db, user.id, user.email, "email")
    assert otp.verify(db, user.id, used.code, "email") is True
    otp.issue(db, user.id, user.phone, "phone")
    db.commit()

    clock.advance(int(timedelta(days=31).total_seconds()))
    fresh = otp.issue(db, user.id, user.email, "email")
    db.commit()

    deleted = otp.purge(db, retention_days=30)
    db.commit()

    assert deleted == 2
    remaining = db.execute(sa.select(OtpVerification.id)).scalars().all()
    assert remaining == [fresh.id]


def test_claimed_code_redeems_once(db, otp, user):
    issued = otp.issue(db, user.id, user.email, "email")
    otp_id = otp.claim(db, user.id, issued.code, "email")

    assert otp_id == issued.id
    assert otp.redeem(db, user.id + 1, otp_id) is False
    assert otp.redeem(db, user.id, otp_id) is True
    assert otp.redeem(db, user.id, otp_id) is False


def test_unconsumed_code_cannot_be_redeemed(db, otp, user):
    issued = otp.issue(db, user.id, user.email, "email")
    assert otp.redeem(db, user.id, issued.id) is False
