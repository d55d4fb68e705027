from __future__ import annotations

import pytest

from community.services import registration

from tests.testkit import (
    ApiError,
    add_villages,
    approve,
    business_payload,
    create_admin,
    job_payload,
    login,
    register_member,
    signup_verified,
    student_payload,
)


@pytest.fixture
def directory(api, identity_factory, session_factory):
    amreli, babra = add_villages(
        session_factory,
        ("અમરેલી (Amreli)", "Amreli", "Amreli"),
        ("બાબરા (Babra)", "Babra", "Amreli"),
    )
    admin = create_admin(api, session_factory)
    members = {
        "raj": register_member(api, identity_factory, village_id=amreli, first_name="Raj", occupation=student_payload()),
        "priya": register_member(
            api,
            identity_factory,
            village_id=amreli,
            first_name="Priya",
            gender="Female",
            occupation=job_payload(company_name="Acme Infotech", field="IT Consulting"),
        ),
        "kiran": register_member(
            api,
            identity_factory,
            village_id=babra,
            first_name="Kiran",
            occupation=job_payload(company_name="ACME Steel", field="Manufacturing"),
        ),
        "bharat": register_member(api, identity_factory, village_id=babra, first_name="Bharat", occupation=business_payload()),
        "pending": register_member(api, identity_factory, village_id=babra, first_name="Mukesh", occupation=job_payload()),
    }
    for key in ("raj", "priya", "kiran", "bharat"):
        approve(api, admin["token"], members[key]["id"])
    return {"admin": admin, "members": members, "viewer": members["raj"]["token"]}


def _search(api, token, **params):
    return api.call("GET", "/users/search", token=token, params=params)


def test_only_approved_members_are_listed(api, directory):
    out = _search(api, directory["viewer"])
    names = {u["first_name"] for u in out["users"]}
    assert names == {"Raj", "Priya", "Kiran", "Bharat"}
    assert out["pagination"]["total"] == 4


def test_village_occupation_company_filters_combine(api, directory):
    out = _search(api, directory["viewer"], village="amreli", occupation="job", company="acme")
    assert [u["first_name"] for u in out["users"]] == ["Priya"]
    assert out["users"][0]["occupation_details"]["kind"] == "job"
    assert out["users"][0]["occupation_details"]["company_name"] == "Acme Infotech"


def test_company_filter_is_case_insensitive_substring(api, directory):
    out = _search(api, directory["viewer"], company="ACME")
    assert {u["first_name"] for u in out["users"]} == {"Priya", "Kiran"}


def test_variant_filter_implies_variant(api, directory):
    out = _search(api, directory["viewer"], college="nirma")
    assert [u["first_name"] for u in out["users"]] == ["Raj"]

    out = _search(api, directory["viewer"], business_type="retail")
    assert [u["first_name"] for u in out["users"]] == ["Bharat"]


def test_field_matches_any_variant_exactly(api, directory):
    out = _search(api, directory["viewer"], field="Manufacturing")
    assert [u["first_name"] for u in out["users"]] == ["Kiran"]

    out = _search(api, directory["viewer"], field="Textiles & Fabrics")
    assert [u["first_name"] for u in out["users"]] == ["Bharat"]


def test_name_filter(api, directory):
    out = _search(api, directory["viewer"], name="PRI")
    assert [u["first_name"] for u in out["users"]] == ["Priya"]


def test_pagination_totals_are_exact(api, directory):
    page1 = _search(api, directory["viewer"], limit=3, page=1)
    page2 = _search(api, directory["viewer"], limit=3, page=2)

    assert page1["pagination"] == {"total": 4, "page": 1, "limit": 3, "total_pages": 2}
    assert len(page1["users"]) == 3
    assert len(page2["users"]) == 1
    ids = [u["id"] for u in page1["users"] + page2["users"]]
    assert len(set(ids)) == 4


def test_female_members_never_expose_contact(api, directory):
    out = _search(api, directory["viewer"])
    for row in out["users"]:
        if row["gender"].lower() == "female":
            assert "phone" not in row
            assert "email" not in row
            assert row["contact_hidden"] is True
        else:
            assert row["phone"]
            assert row["email"]


def test_single_member_lookup_is_redacted(api, directory):
    priya = directory["members"]["priya"]
    row = api.call("GET", f"/users/{priya['id']}", token=directory["viewer"])
    assert "phone" not in row and "email" not in row

    raj = directory["members"]["raj"]
    row = api.call("GET", f"/users/{raj['id']}", token=directory["members"]["kiran"]["token"])
    assert row["email"] == raj["email"]


def test_own_profile_is_not_redacted(api, directory):
    priya = directory["members"]["priya"]
    profile = api.call("GET", "/users/profile", token=priya["token"])
    assert profile["email"] == priya["email"]
    assert profile["phone"] == priya["phone"]


def test_unapproved_member_lookup_is_not_found(api, directory):
    pending = directory["members"]["pending"]
    with pytest.raises(ApiError) as err:
        api.call("GET", f"/users/{pending['id']}", token=directory["viewer"])
    assert err.value.status_code == 404


def test_search_requires_registered_member(api, directory, identity_factory):
    identity = signup_verified(api, identity_factory)
    token = login(api, identity["email"], identity["password"])
    with pytest.raises(ApiError) as err:
        _search(api, token)
    assert err.value.status_code == 403


def test_promoted_admin_leaves_the_directory(api, directory, session_factory):
    kiran = directory["members"]["kiran"]
    db = session_factory()
    try:
        registration.bootstrap_admin(db, email=kiran["email"], phone=kiran["phone"], password=kiran["password"])
        db.commit()
    finally:
        db.close()

    out = _search(api, directory["viewer"])
    assert "Kiran" not in {u["first_name"] for u in out["users"]}
    assert out["pagination"]["total"] == 3

    with pytest.raises(ApiError) as err:
        api.call("GET", f"/users/{kiran['id']}", token=directory["viewer"])
    assert err.value.status_code == 404
