from __future__ import annotations

import pytest

from community.db import seed_data
from community.services import reference


@pytest.fixture
def seeded(session_factory):
    db = session_factory()
    try:
        added = reference.seed(db)
        db.commit()
    finally:
        db.close()
    return added


def test_seed_is_idempotent(seeded, session_factory):
    assert seeded["villages"] == len(seed_data.VILLAGES)
    assert seeded["cities"] == len(seed_data.CITIES)
    assert seeded["colleges"] == len(seed_data.COLLEGES)

    db = session_factory()
    try:
        again = reference.seed(db)
        db.commit()
    finally:
        db.close()
    assert set(again.values()) == {0}


def test_villages_flat_and_grouped(api, seeded):
    flat = api.call("GET", "/data/villages")
    assert len(flat) == len(seed_data.VILLAGES)
    assert {"id", "name", "taluka", "district"} <= set(flat[0])

    grouped = api.call("GET", "/data/villages", params={"grouped": "true"})
    assert "Amreli - Babra" in grouped
    assert all(v["taluka"] == "Babra" for v in grouped["Amreli - Babra"])


def test_colleges_filter_by_city_and_course(api, seeded):
    colleges = api.call("GET", "/data/colleges", params={"city": "chandigarh", "course": "B.Pharm"})
    names = {c["name"] for c in colleges}
    assert names == {"Chandigarh University", "Chitkara University"}
    assert all("B.Pharm" in c["courses"] for c in colleges)
    assert all(c["city"] == "Chandigarh" for c in colleges)


def test_college_courses(api, seeded):
    colleges = api.call("GET", "/data/colleges", params={"city": "Gandhinagar"})
    childrens = next(c for c in colleges if c["name"] == "Children's University")

    assert api.call("GET", "/data/college-courses", params={"college_id": childrens["id"]}) == ["B.Ed", "BA"]
    assert api.call("GET", "/data/college-courses") == []


def test_sub_departments_by_department_name(api, seeded):
    subs = api.call("GET", "/data/sub-departments", params={"department": "BDS"})
    assert sorted(s["name"] for s in subs) == sorted(
        ["Oral Surgery", "Orthodontics", "Periodontics", "Prosthodontics", "Pedodontics"]
    )
    assert {s["department_name"] for s in subs} == {"BDS"}


def test_static_lists(api):
    assert "Retail" in api.call("GET", "/data/business-types")
    assert "Jewellery & Gems" in api.call("GET", "/data/business-fields")
    assert "Software Development" in api.call("GET", "/data/job-fields")


def test_years_span():
    years = reference.years(2026)
    assert years[0] == "2031"
    assert years[-1] == "1996"
    assert len(years) == 36


def test_public_stats_counts_only_approved(api, seeded):
    stats = api.call("GET", "/data/public-stats")
    assert stats == {
        "total_members": 0,
        "students": 0,
        "jobs": 0,
        "businesses": 0,
        "villages": len(seed_data.VILLAGES),
    }
