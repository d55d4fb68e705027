import csv
import io
from datetime import datetime

REPORT_HEADERS = [
    "ID", "First Name", "Middle Name", "Last Name", "Gender",
    "Phone", "Email", "Village", "Taluka", "District",
    "Current Address", "Occupation Type", "Approved",
    "Detail 1", "Detail 2", "Detail 3", "Detail 4", "Created At",
]

# Excel needs the BOM to render Gujarati text as UTF-8.
BOM = "\ufeff"

_DETAIL_COLUMNS = {
    "student": ("department", "sub_department", "college_name", "college_city"),
    "job": ("company_name", "designation", "field", "working_city"),
    "business": ("business_name", "business_type", "business_field", "business_city"),
}


def detail_cells(details) -> list[str]:
    if details is None:
        return ["", "", "", ""]
    return [getattr(details, name) or "" for name in _DETAIL_COLUMNS[details.kind]]


def build_csv(rows: list[dict]) -> str:
    buf = io.StringIO()
    buf.write(BOM)
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(REPORT_HEADERS)
    for r in rows:
        created = r["created_at"]
        writer.writerow([
            r["id"],
            r["first_name"] or "",
            r["middle_name"] or "",
            r["last_name"] or "",
            r["gender"] or "",
            r["phone"] or "",
            r["email"] or "",
            r["village_name"] or "",
            r["taluka"] or "",
            r["district"] or "",
            r["current_address"] or "",
            r["occupation_type"] or "",
            "Yes" if r["is_approved"] else "No",
            *detail_cells(r["occupation_details"]),
            created.isoformat() if isinstance(created, datetime) else (created or ""),
        ])
    return buf.getvalue()


def report_filename(occupation_type: str | None, village_id: int | None, now: datetime) -> str:
    stamp = int(now.timestamp() * 1000)
    if village_id is not None:
        return f"community_report_village_{village_id}_{stamp}.csv"
    return f"community_report_{occupation_type or 'all'}_{stamp}.csv"
