from pydantic import BaseModel


class VillageOut(BaseModel):
    id: int
    name: str
    taluka: str | None = None
    district: str | None = None


class CityOut(BaseModel):
    id: int
    name: str
    state: str | None = None


class CollegeOut(BaseModel):
    id: int
    name: str
    type: str | None = None
    city: str
    state: str | None = None
    courses: list[str] = []


class DepartmentOut(BaseModel):
    id: int
    name: str
    category: str | None = None


class SubDepartmentOut(BaseModel):
    id: int
    name: str
    department_id: int
    department_name: str


class PublicStatsOut(BaseModel):
    total_members: int
    students: int
    jobs: int
    businesses: int
    villages: int
