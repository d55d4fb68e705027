from dataclasses import dataclass, fields

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.services import occupations
from community.services.errors import NotFound


@dataclass(frozen=True)
class DirectoryFilters:
    village: str | None = None
    occupation: str | None = None
    name: str | None = None
    college: str | None = None
    course: str | None = None
    specialization: str | None = None
    company: str | None = None
    job_field: str | None = None
    business_type: str | None = None
    department: str | None = None
    field: str | None = None


# Substring filters are bound as lower-cased LIKE patterns; `occupation`,
# `department` and `field` match exactly.
_EXACT = {"occupation", "department", "field"}

_WHERE = """
    FROM users u
    LEFT JOIN villages v ON v.id = u.village_id
    WHERE u.is_approved = true
      AND u.is_admin = false
      AND (:village IS NULL OR lower(v.name) LIKE :village)
      AND (:occupation IS NULL OR u.occupation_type = :occupation)
      AND (:name IS NULL OR (
            lower(u.first_name) LIKE :name
            OR lower(u.middle_name) LIKE :name
            OR lower(u.last_name) LIKE :name))
      AND (:college IS NULL OR EXISTS (
            SELECT 1 FROM student_details sd
            WHERE sd.user_id = u.id AND u.occupation_type = 'student'
              AND lower(sd.college_name) LIKE :college))
      AND (:course IS NULL OR EXISTS (
            SELECT 1 FROM student_details sd
            WHERE sd.user_id = u.id AND u.occupation_type = 'student'
              AND lower(sd.department) LIKE :course))
      AND (:specialization IS NULL OR EXISTS (
            SELECT 1 FROM student_details sd
            WHERE sd.user_id = u.id AND u.occupation_type = 'student'
              AND lower(sd.sub_department) LIKE :specialization))
      AND (:department IS NULL OR EXISTS (
            SELECT 1 FROM student_details sd
            WHERE sd.user_id = u.id AND u.occupation_type = 'student'
              AND sd.department = :department))
      AND (:company IS NULL OR EXISTS (
            SELECT 1 FROM job_details jd
            WHERE jd.user_id = u.id AND u.occupation_type = 'job'
              AND lower(jd.company_name) LIKE :company))
      AND (:job_field IS NULL OR EXISTS (
            SELECT 1 FROM job_details jd
            WHERE jd.user_id = u.id AND u.occupation_type = 'job'
              AND lower(jd.field) LIKE :job_field))
      AND (:business_type IS NULL OR EXISTS (
            SELECT 1 FROM business_details bd
            WHERE bd.user_id = u.id AND u.occupation_type = 'business'
              AND lower(bd.business_type) LIKE :business_type))
      AND (:field IS NULL
           OR EXISTS (SELECT 1 FROM student_details sd WHERE sd.user_id = u.id AND sd.sub_department = :field)
           OR EXISTS (SELECT 1 FROM job_details jd WHERE jd.user_id = u.id AND jd.field = :field)
           OR EXISTS (SELECT 1 FROM business_details bd WHERE bd.user_id = u.id AND bd.business_field = :field))
"""

_COLUMNS = """
    SELECT u.id, u.first_name, u.middle_name, u.last_name, u.gender,
           u.phone, u.email, u.current_address, u.occupation_type,
           u.created_at, v.name AS village_name
"""


def _bind_params(filters: DirectoryFilters) -> dict:
    params = {}
    for f in fields(filters):
        raw = getattr(filters, f.name)
        value = raw.strip() if isinstance(raw, str) else None
        if not value:
            params[f.name] = None
        elif f.name in _EXACT:
            params[f.name] = value
        else:
            params[f.name] = f"%{value.lower()}%"
    return params


def _typed(stmt):
    # Postgres cannot infer the type of a bare NULL in `:x IS NULL`.
    return stmt.bindparams(*(sa.bindparam(f.name, type_=sa.String()) for f in fields(DirectoryFilters)))


def is_contact_hidden(gender: str | None) -> bool:
    return (gender or "").strip().lower() == "female"


def to_member(row, details) -> dict:
    """Public projection of one approved member.

    Female members never carry phone or email, whoever is asking.
    """
    member = {
        "id": row["id"],
        "first_name": row["first_name"],
        "middle_name": row["middle_name"],
        "last_name": row["last_name"],
        "gender": row["gender"],
        "village_name": row["village_name"],
        "current_address": row["current_address"],
        "occupation_type": row["occupation_type"],
        "created_at": row["created_at"],
        "occupation_details": details,
        "contact_hidden": is_contact_hidden(row["gender"]),
    }
    if not member["contact_hidden"]:
        member["phone"] = row["phone"]
        member["email"] = row["email"]
    return member


def search(db: Session, filters: DirectoryFilters, page: int, limit: int) -> tuple[list[dict], int]:
    params = _bind_params(filters)
    total = db.execute(_typed(sa.text("SELECT COUNT(*) " + _WHERE)), params).scalar_one()
    rows = db.execute(
        _typed(sa.text(_COLUMNS + _WHERE + """
            ORDER BY u.created_at DESC, u.id DESC
            LIMIT :limit OFFSET :offset
        """)).columns(created_at=sa.DateTime(timezone=True)),
        {**params, "limit": limit, "offset": (page - 1) * limit},
    ).mappings().all()

    details = occupations.load_details(db, [(r["id"], r["occupation_type"]) for r in rows])
    return [to_member(r, details.get(r["id"])) for r in rows], int(total)


def get_member(db: Session, user_id: int) -> dict:
    row = db.execute(
        _typed(sa.text(_COLUMNS + _WHERE + " AND u.id = :user_id")).columns(created_at=sa.DateTime(timezone=True)),
        {**_bind_params(DirectoryFilters()), "user_id": user_id},
    ).mappings().first()
    if row is None:
        raise NotFound("User not found")
    details = occupations.load_details(db, [(row["id"], row["occupation_type"])])
    return to_member(row, details.get(row["id"]))
