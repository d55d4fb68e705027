from __future__ import annotations

import csv
import io
from datetime import datetime, timezone

from community.schemas.occupation import BusinessDetailsOut, StudentDetailsOut
from community.services import reports
from tests.testkit import add_villages, business_payload, create_admin, register_member


def _row(**overrides) -> dict:
    row = {
        "id": 7,
        "first_name": "Hiral",
        "middle_name": None,
        "last_name": "Shah",
        "gender": "Female",
        "phone": "9876543231",
        "email": "hiral@example.com",
        "village_name": "અમરેલી (Amreli)",
        "taluka": "Amreli",
        "district": "Amreli",
        "current_address": 'Shop 4, "Gold Plaza"',
        "occupation_type": "business",
        "is_approved": True,
        "created_at": datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc),
        "occupation_details": BusinessDetailsOut(
            business_name="Shah Jewellers",
            business_type="Retail",
            business_field="Jewellery & Gems",
            business_city="Ahmedabad",
        ),
    }
    row.update(overrides)
    return row


def test_csv_starts_with_bom_and_headers():
    out = reports.build_csv([])
    assert out.startswith("\ufeff")
    assert out[1:].splitlines()[0] == ",".join(reports.REPORT_HEADERS)


def test_csv_row_layout():
    out = reports.build_csv([_row()])
    rows = list(csv.reader(io.StringIO(out[1:])))

    assert len(rows) == 2
    line = dict(zip(rows[0], rows[1]))
    assert line["Village"] == "અમરેલી (Amreli)"
    assert line["Current Address"] == 'Shop 4, "Gold Plaza"'
    assert line["Approved"] == "Yes"
    assert [line[f"Detail {i}"] for i in range(1, 5)] == ["Shah Jewellers", "Retail", "Jewellery & Gems", "Ahmedabad"]
    assert line["Middle Name"] == ""


def test_detail_cells_per_variant():
    student = StudentDetailsOut(department="MBA", sub_department="Finance", college_name="GLS University", college_city="Ahmedabad")
    assert reports.detail_cells(student) == ["MBA", "Finance", "GLS University", "Ahmedabad"]
    assert reports.detail_cells(None) == ["", "", "", ""]


def test_report_filename():
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    assert reports.report_filename("job", None, now).startswith("community_report_job_")
    assert reports.report_filename(None, 12, now).startswith("community_report_village_12_")


def test_download_report_endpoint(api, identity_factory, session_factory):
    amreli, babra = add_villages(
        session_factory,
        ("અમરેલી (Amreli)", "Amreli", "Amreli"),
        ("બાબરા (Babra)", "Babra", "Amreli"),
    )
    admin = create_admin(api, session_factory)
    register_member(api, identity_factory, village_id=amreli)
    biz = register_member(api, identity_factory, village_id=babra, occupation=business_payload())

    resp = api.raw("GET", "/admin/download-report", token=admin["token"], params={"format": "csv"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "attachment; filename=community_report_all_" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"\xef\xbb\xbf")
    assert len(resp.content.decode("utf-8-sig").strip().splitlines()) == 3

    only_babra = api.call(
        "GET",
        "/admin/download-report",
        token=admin["token"],
        params={"format": "json", "village": babra},
    )
    assert [r["id"] for r in only_babra] == [biz["id"]]
    assert only_babra[0]["occupation_details"]["kind"] == "business"

    students = api.call("GET", "/admin/download-report", token=admin["token"], params={"format": "json", "type": "student"})
    assert {r["occupation_type"] for r in students} == {"student"}
