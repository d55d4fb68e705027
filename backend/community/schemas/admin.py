from datetime import datetime

from pydantic import BaseModel

from community.schemas.common import PaginationOut
from community.schemas.occupation import OccupationDetailsOut


class AdminUserOut(BaseModel):
    id: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    phone: str
    email: str
    current_address: str | None = None
    occupation_type: str | None = None
    phone_verified: bool
    email_verified: bool
    registration_completed: bool
    is_approved: bool
    can_view_sensitive_data: bool
    created_at: datetime
    village_id: int | None = None
    village_name: str = "-"
    taluka: str | None = None
    district: str | None = None
    occupation_details: OccupationDetailsOut | None = None


class AdminUserPageOut(BaseModel):
    users: list[AdminUserOut]
    pagination: PaginationOut


class AdminActionOut(BaseModel):
    ok: bool = True
    message: str


class ToggleSensitiveOut(BaseModel):
    ok: bool = True
    message: str
    can_view_sensitive_data: bool


class VillageCountOut(BaseModel):
    name: str
    count: int


class AdminStatsOut(BaseModel):
    total_users: int
    approved_users: int
    pending_users: int
    students: int
    jobs: int
    businesses: int
    village_stats: list[VillageCountOut]


class ReportRowOut(BaseModel):
    id: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    phone: str
    email: str
    village_name: str | None = None
    taluka: str | None = None
    district: str | None = None
    current_address: str | None = None
    occupation_type: str | None = None
    is_approved: bool
    created_at: datetime
    occupation_details: OccupationDetailsOut | None = None
