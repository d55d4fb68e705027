from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from community.core.security import now_utc
from community.db.session import get_db
from community.schemas.reference import CityOut, CollegeOut, DepartmentOut, PublicStatsOut, SubDepartmentOut, VillageOut
from community.services import reference

router = APIRouter()


@router.get("/villages", response_model=list[VillageOut] | dict[str, list[VillageOut]])
def villages(grouped: bool = False, db: Session = Depends(get_db)):
    rows = reference.list_villages(db)
    if grouped:
        return reference.group_villages(rows)
    return rows


@router.get("/cities", response_model=list[CityOut])
def cities(db: Session = Depends(get_db)):
    return reference.list_cities(db)


@router.get("/colleges", response_model=list[CollegeOut])
def colleges(
    city: str | None = None,
    city_id: int | None = None,
    course: str | None = None,
    db: Session = Depends(get_db),
):
    return reference.list_colleges(db, city=city, city_id=city_id, course=course)


@router.get("/college-courses", response_model=list[str])
def college_courses(college_id: int | None = None, db: Session = Depends(get_db)):
    return reference.list_college_courses(db, college_id)


@router.get("/departments", response_model=list[DepartmentOut])
def departments(db: Session = Depends(get_db)):
    return reference.list_departments(db)


@router.get("/sub-departments", response_model=list[SubDepartmentOut])
def sub_departments(
    department_id: int | None = None,
    department: str | None = None,
    db: Session = Depends(get_db),
):
    return reference.list_sub_departments(db, department_id=department_id, department=department)


@router.get("/business-types", response_model=list[str])
def business_types():
    return reference.BUSINESS_TYPES


@router.get("/business-fields", response_model=list[str])
def business_fields():
    return reference.BUSINESS_FIELDS


@router.get("/job-fields", response_model=list[str])
def job_fields():
    return reference.JOB_FIELDS


@router.get("/years", response_model=list[str])
def years():
    return reference.years(now_utc().year)


@router.get("/public-stats", response_model=PublicStatsOut)
def public_stats(db: Session = Depends(get_db)):
    return reference.public_stats(db)
