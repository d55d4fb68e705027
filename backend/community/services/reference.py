from collections import defaultdict

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.db import seed_data
from community.models.reference import City, College, CollegeCourse, Department, SubDepartment, Village

BUSINESS_TYPES = [
    "Retail", "Manufacturing", "Construction", "Agriculture",
    "Services", "IT & Technology", "Healthcare", "Education",
    "Transport & Logistics", "Food & Hospitality",
    "Textile & Garments", "Real Estate", "Financial Services",
    "Media & Entertainment", "Consulting", "Other",
]

BUSINESS_FIELDS = [
    "Grocery & FMCG", "Clothing & Fashion", "Electronics & Hardware",
    "Construction & Building Materials", "Auto Parts & Accessories",
    "Pharmaceutical & Medical", "Jewellery & Gems", "Furniture & Interiors",
    "Stationery & Office Supplies", "Chemicals & Industrial",
    "Agriculture & Seeds", "Textiles & Fabrics", "Dairy & Food Processing",
    "Printing & Packaging", "Oil & Petroleum", "Handicrafts & Art",
    "Import / Export", "Scrap & Recycling", "Travel & Tourism",
    "Event Management", "Beauty & Wellness", "Photography & Videography",
    "Catering & Food Services", "Transportation & Logistics",
    "Interior Design", "Digital Marketing & IT Services",
    "Coaching & Training", "Property & Real Estate", "Other",
]

JOB_FIELDS = [
    "Software Development", "IT Consulting", "Data Science & Analytics",
    "IT Support & Helpdesk", "Cybersecurity", "Cloud Computing",
    "Banking", "Insurance", "Accounting & Finance",
    "Oil & Gas", "Infrastructure", "Manufacturing",
    "Healthcare", "Pharmaceuticals", "Education & Training",
    "Government / Public Sector", "Defence",
    "Marketing & Advertising", "Sales", "HR & Recruitment",
    "Law & Legal", "Media & Journalism",
    "Real Estate", "Agriculture", "Textile & Fashion",
    "Automobile", "Telecom", "E-commerce",
    "Hospitality & Tourism", "NGO / Social Work", "Other",
]


def years(current_year: int) -> list[str]:
    """Graduation-year choices, newest first: five ahead, thirty back."""
    return [str(y) for y in range(current_year + 5, current_year - 31, -1)]


def list_villages(db: Session) -> list[dict]:
    rows = db.execute(
        sa.select(Village.id, Village.name, Village.taluka, Village.district).order_by(Village.name)
    ).mappings().all()
    return [dict(r) for r in rows]


def group_villages(villages: list[dict]) -> dict[str, list[dict]]:
    grouped: dict[str, list[dict]] = {}
    for v in villages:
        grouped.setdefault(f"{v['district']} - {v['taluka']}", []).append(v)
    return grouped


def list_cities(db: Session) -> list[dict]:
    rows = db.execute(sa.select(City.id, City.name, City.state).order_by(City.name)).mappings().all()
    return [dict(r) for r in rows]


def list_colleges(db: Session, city: str | None = None, city_id: int | None = None, course: str | None = None) -> list[dict]:
    stmt = (
        sa.select(College.id, College.name, College.type, City.name.label("city"), City.state)
        .join(City, City.id == College.city_id)
        .order_by(College.name)
    )
    if city_id is not None:
        stmt = stmt.where(College.city_id == city_id)
    if city:
        stmt = stmt.where(sa.func.lower(City.name).like(f"%{city.strip().lower()}%"))
    if course:
        stmt = stmt.where(
            sa.exists().where(CollegeCourse.college_id == College.id, CollegeCourse.course_name == course)
        )
    colleges = [dict(r) for r in db.execute(stmt).mappings().all()]
    if not colleges:
        return []

    courses: dict[int, list[str]] = defaultdict(list)
    rows = db.execute(
        sa.select(CollegeCourse.college_id, CollegeCourse.course_name)
        .where(CollegeCourse.college_id.in_([c["id"] for c in colleges]))
        .order_by(CollegeCourse.course_name)
    ).all()
    for college_id, name in rows:
        courses[college_id].append(name)
    for c in colleges:
        c["courses"] = courses.get(c["id"], [])
    return colleges


def list_college_courses(db: Session, college_id: int | None) -> list[str]:
    if college_id is None:
        return []
    return list(db.execute(
        sa.select(CollegeCourse.course_name)
        .where(CollegeCourse.college_id == college_id)
        .order_by(CollegeCourse.course_name)
    ).scalars())


def list_departments(db: Session) -> list[dict]:
    rows = db.execute(
        sa.select(Department.id, Department.name, Department.category).order_by(Department.name)
    ).mappings().all()
    return [dict(r) for r in rows]


def list_sub_departments(db: Session, department_id: int | None = None, department: str | None = None) -> list[dict]:
    stmt = (
        sa.select(SubDepartment.id, SubDepartment.name, SubDepartment.department_id, Department.name.label("department_name"))
        .join(Department, Department.id == SubDepartment.department_id)
        .order_by(SubDepartment.name)
    )
    if department_id is not None:
        stmt = stmt.where(SubDepartment.department_id == department_id)
    if department:
        stmt = stmt.where(Department.name == department)
    return [dict(r) for r in db.execute(stmt).mappings().all()]


def public_stats(db: Session) -> dict:
    row = db.execute(sa.text("""
        SELECT
          COUNT(*) AS total_members,
          COALESCE(SUM(CASE WHEN occupation_type = 'student' THEN 1 ELSE 0 END), 0) AS students,
          COALESCE(SUM(CASE WHEN occupation_type = 'job' THEN 1 ELSE 0 END), 0) AS jobs,
          COALESCE(SUM(CASE WHEN occupation_type = 'business' THEN 1 ELSE 0 END), 0) AS businesses
        FROM users
        WHERE registration_completed = true AND is_approved = true AND is_admin = false
    """)).mappings().one()
    villages = db.execute(sa.select(sa.func.count()).select_from(Village)).scalar_one()
    out = {k: int(v) for k, v in row.items()}
    out["villages"] = int(villages)
    return out


def seed(db: Session) -> dict[str, int]:
    """Inserts missing reference rows; existing rows are left untouched."""
    added = {"villages": 0, "cities": 0, "departments": 0, "sub_departments": 0, "colleges": 0, "college_courses": 0}

    existing = set(db.execute(sa.select(Village.name)).scalars())
    for name, taluka, district in seed_data.VILLAGES:
        if name not in existing:
            db.add(Village(name=name, taluka=taluka, district=district))
            added["villages"] += 1

    city_ids = dict(db.execute(sa.select(City.name, City.id)).all())
    for name, state in seed_data.CITIES:
        if name not in city_ids:
            city = City(name=name, state=state)
            db.add(city)
            db.flush()
            city_ids[name] = city.id
            added["cities"] += 1

    dept_ids = dict(db.execute(sa.select(Department.name, Department.id)).all())
    subs = set(db.execute(sa.select(SubDepartment.department_id, SubDepartment.name)).all())
    for name, category, sub_names in seed_data.DEPARTMENTS:
        if name not in dept_ids:
            dept = Department(name=name, category=category)
            db.add(dept)
            db.flush()
            dept_ids[name] = dept.id
            added["departments"] += 1
        for sub in sub_names:
            if (dept_ids[name], sub) not in subs:
                db.add(SubDepartment(name=sub, department_id=dept_ids[name]))
                subs.add((dept_ids[name], sub))
                added["sub_departments"] += 1

    college_ids = {(n, c): i for i, n, c in db.execute(sa.select(College.id, College.name, College.city_id)).all()}
    courses = set(db.execute(sa.select(CollegeCourse.college_id, CollegeCourse.course_name)).all())
    for name, city, course_names in seed_data.COLLEGES:
        city_id = city_ids.get(city)
        if city_id is None:
            continue
        key = (name, city_id)
        if key not in college_ids:
            college = College(name=name, city_id=city_id)
            db.add(college)
            db.flush()
            college_ids[key] = college.id
            added["colleges"] += 1
        for course in course_names:
            if (college_ids[key], course) not in courses:
                db.add(CollegeCourse(college_id=college_ids[key], course_name=course))
                courses.add((college_ids[key], course))
                added["college_courses"] += 1

    db.flush()
    return added
