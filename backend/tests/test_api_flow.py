from __future__ import annotations

import pytest

from tests.testkit import (
    ApiError,
    add_villages,
    approve,
    create_admin,
    job_payload,
    login,
    register_member,
    signup_verified,
    student_payload,
)


def test_health_and_security_headers(api):
    resp = api.raw("GET", "/health")
    assert resp.json() == {"ok": True}
    assert resp.headers["X-Frame-Options"] == "DENY"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


def test_signup_issues_email_code(api, identity_factory, notifier):
    phone, email = identity_factory.next_phone(), identity_factory.next_email()
    out = api.call("POST", "/auth/signup", body={"phone": phone, "email": email, "password": "p@ss1x"})

    assert out["requires_verification"] is True
    assert len(out["dev_code"]) == 6
    assert notifier.email.sent[-1].to == email
    assert out["dev_code"] in notifier.email.sent[-1].text


def test_verify_twice_fails_generically(api, identity_factory):
    out = api.call(
        "POST",
        "/auth/signup",
        body={"phone": identity_factory.next_phone(), "email": identity_factory.next_email(), "password": "p@ss1x"},
    )
    body = {"user_id": out["user_id"], "code": out["dev_code"], "purpose": "email"}

    first = api.call("POST", "/auth/verify-otp", body=body)
    assert first["verification_token"]

    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/verify-otp", body=body)
    assert err.value.status_code == 400
    assert err.value.payload["detail"] == "Invalid or expired OTP"


def test_expired_code_fails_with_same_message(api, identity_factory, clock):
    out = api.call(
        "POST",
        "/auth/signup",
        body={"phone": identity_factory.next_phone(), "email": identity_factory.next_email(), "password": "p@ss1x"},
    )
    clock.advance(601)
    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/verify-otp", body={"user_id": out["user_id"], "code": out["dev_code"], "purpose": "email"})
    assert err.value.payload["detail"] == "Invalid or expired OTP"


def test_verify_by_contact(api, identity_factory):
    email = identity_factory.next_email()
    out = api.call(
        "POST",
        "/auth/signup",
        body={"phone": identity_factory.next_phone(), "email": email, "password": "p@ss1x"},
    )
    verified = api.call("POST", "/auth/verify-otp", body={"contact": email.upper(), "code": out["dev_code"], "purpose": "email"})
    assert verified["user_id"] == out["user_id"]


def test_phone_code_goes_through_sms_with_country_code(api, identity_factory, notifier):
    identity = signup_verified(api, identity_factory)
    out = api.call("POST", "/auth/resend-otp", body={"user_id": identity["id"], "purpose": "phone"})

    to, body = notifier.sms.sent[-1]
    assert to == f"+91{identity['phone']}"
    assert out["dev_code"] in body

    api.call("POST", "/auth/verify-otp", body={"user_id": identity["id"], "code": out["dev_code"], "purpose": "phone"})
    token = login(api, identity["email"], identity["password"])
    session = api.call("GET", "/auth/session", token=token)
    assert session["user"]["phone_verified"] is True
    assert session["user"]["email_verified"] is True


def test_login_always_requires_otp(api, identity_factory):
    identity = signup_verified(api, identity_factory)
    out = api.call("POST", "/auth/login", body={"identifier": identity["phone"], "password": identity["password"]})

    assert out["requires_verification"] is True
    assert "access_token" not in out
    assert out["email"] != identity["email"]

    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/login-after-verify", body={"user_id": out["user_id"], "verification_token": "not-a-real-token"})
    assert err.value.status_code == 401


def test_verification_token_is_bound_to_user(api, identity_factory):
    a = signup_verified(api, identity_factory)
    b = signup_verified(api, identity_factory)

    out = api.call("POST", "/auth/login", body={"identifier": a["email"], "password": a["password"]})
    verified = api.call("POST", "/auth/verify-otp", body={"user_id": a["id"], "code": out["dev_code"], "purpose": "email"})

    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/login-after-verify", body={"user_id": b["id"], "verification_token": verified["verification_token"]})
    assert err.value.status_code == 401


def test_bad_password(api, identity_factory):
    identity = signup_verified(api, identity_factory)
    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/login", body={"identifier": identity["email"], "password": "wrong-pass"})
    assert err.value.status_code == 401


def test_session_without_token(api):
    assert api.call("GET", "/auth/session") == {"logged_in": False, "user": None}


def test_signup_rejects_malformed_contacts(api):
    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/signup", body={"phone": "12ab", "email": "nope", "password": "p@ss1x"})
    assert err.value.status_code == 422


def test_registered_account_cannot_sign_up_again(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    member = register_member(api, identity_factory, village_id=village_id)

    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/signup", body={"phone": member["phone"], "email": member["email"], "password": "x1y2z3"})
    assert err.value.status_code == 409


def test_register_requires_verified_contact(cfg, api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    identity = signup_verified(api, identity_factory)
    token = login(api, identity["email"], identity["password"])
    cfg.PROFILE_REQUIRED_VERIFICATIONS = "both"

    body = {
        "first_name": "Neha",
        "last_name": "Desai",
        "gender": "Female",
        "village_id": village_id,
        "current_address": "Lathi",
        "occupation": student_payload(),
    }
    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/register", token=token, body=body)
    assert err.value.status_code == 403


def test_register_rejects_mismatched_occupation(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    identity = signup_verified(api, identity_factory)
    token = login(api, identity["email"], identity["password"])

    with pytest.raises(ApiError) as err:
        api.call(
            "POST",
            "/auth/register",
            token=token,
            body={
                "first_name": "Neha",
                "last_name": "Desai",
                "gender": "Female",
                "village_id": village_id,
                "current_address": "Lathi",
                "occupation_type": "business",
                "occupation": student_payload(),
            },
        )
    assert err.value.status_code == 422


def test_forgot_and_reset_password(api, identity_factory):
    identity = signup_verified(api, identity_factory)

    unknown = api.call("POST", "/auth/forgot-password", body={"email": "nobody@example.com"})
    assert unknown["dev_code"] is None

    out = api.call("POST", "/auth/forgot-password", body={"email": identity["email"]})
    assert unknown["message"] == out["message"]

    api.call(
        "POST",
        "/auth/reset-password",
        body={"email": identity["email"], "code": out["dev_code"], "new_password": "N3w-secret"},
    )
    assert login(api, identity["email"], "N3w-secret")

    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/login", body={"identifier": identity["email"], "password": identity["password"]})
    assert err.value.status_code == 401


def test_profile_update_and_change_password(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    member = register_member(api, identity_factory, village_id=village_id, occupation=job_payload())

    profile = api.call(
        "PUT",
        "/users/profile",
        token=member["token"],
        body={"current_address": "Near Bus Stand", "occupation": {"kind": "job", "designation": "Tech Lead"}},
    )
    assert profile["current_address"] == "Near Bus Stand"
    assert profile["occupation_details"]["designation"] == "Tech Lead"
    assert profile["occupation_details"]["company_name"] == "Tata Consultancy Services"

    with pytest.raises(ApiError) as err:
        api.call("PUT", "/users/profile", token=member["token"], body={"occupation": {"kind": "student", "college_name": "X"}})
    assert err.value.status_code == 400

    with pytest.raises(ApiError) as err:
        api.call(
            "PUT",
            "/users/change-password",
            token=member["token"],
            body={"current_password": "wrong", "new_password": "N3w-secret"},
        )
    assert err.value.status_code == 400
    api.call(
        "PUT",
        "/users/change-password",
        token=member["token"],
        body={"current_password": member["password"], "new_password": "N3w-secret"},
    )


def test_change_occupation_endpoint(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    member = register_member(api, identity_factory, village_id=village_id)

    profile = api.call(
        "PUT",
        "/users/change-occupation",
        token=member["token"],
        body={"new_occupation_type": "job", "occupation": job_payload(company_name="Infosys")},
    )
    assert profile["occupation_type"] == "job"
    assert profile["occupation_details"]["kind"] == "job"
    assert profile["occupation_details"]["company_name"] == "Infosys"


def test_end_to_end_signup_to_directory(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("વરસડા (Varsada)", "Amreli", "Amreli"))
    admin = create_admin(api, session_factory)

    member = register_member(api, identity_factory, village_id=village_id, first_name="Vivek")
    session = api.call("GET", "/auth/session", token=member["token"])
    assert session["user"]["registration_state"] == "pending_approval"
    assert session["user"]["village_name"] == "વરસડા (Varsada)"

    with pytest.raises(ApiError):
        api.call("GET", f"/users/{member['id']}", token=member["token"])

    approve(api, admin["token"], member["id"])

    session = api.call("GET", "/auth/session", token=member["token"])
    assert session["user"]["registration_state"] == "approved"

    found = api.call("GET", "/users/search", token=member["token"], params={"name": "vivek"})
    assert [u["id"] for u in found["users"]] == [member["id"]]
    assert api.call("GET", "/data/public-stats")["total_members"] == 1


def test_profile_update_cannot_clear_required_fields(api, identity_factory, session_factory):
    [village_id] = add_villages(session_factory, ("લાઠી (Lathi)", "Lathi", "Amreli"))
    member = register_member(api, identity_factory, village_id=village_id, occupation=job_payload(), last_name="Desai")

    with pytest.raises(ApiError) as err:
        api.call("PUT", "/users/profile", token=member["token"], body={"last_name": None, "current_address": None})
    assert err.value.status_code == 422

    with pytest.raises(ApiError) as err:
        api.call("PUT", "/users/profile", token=member["token"], body={"occupation": {"kind": "job", "company_name": None}})
    assert err.value.status_code == 422

    profile = api.call("GET", "/users/profile", token=member["token"])
    assert profile["last_name"] == "Desai"
    assert profile["current_address"] == "12 Station Road, Amreli"
    assert profile["registration_state"] == "pending_approval"
    assert profile["occupation_details"]["company_name"] == "Tata Consultancy Services"

    # Optional fields can still be cleared.
    profile = api.call(
        "PUT",
        "/users/profile",
        token=member["token"],
        body={"middle_name": None, "occupation": {"kind": "job", "designation": None}},
    )
    assert profile["middle_name"] is None
    assert profile["occupation_details"]["designation"] is None


def test_verification_token_is_single_use(api, identity_factory):
    identity = signup_verified(api, identity_factory)
    out = api.call("POST", "/auth/login", body={"identifier": identity["email"], "password": identity["password"]})
    verified = api.call("POST", "/auth/verify-otp", body={"user_id": out["user_id"], "code": out["dev_code"], "purpose": "email"})
    body = {"user_id": out["user_id"], "verification_token": verified["verification_token"]}

    assert api.call("POST", "/auth/login-after-verify", body=body)["access_token"]
    with pytest.raises(ApiError) as err:
        api.call("POST", "/auth/login-after-verify", body=body)
    assert err.value.status_code == 401
