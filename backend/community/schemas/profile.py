from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from community.schemas.common import reject_cleared
from community.schemas.occupation import OccupationDetailsOut, OccupationIn, OccupationPatch

Gender = Literal["Male", "Female", "Other"]


class RegisterIn(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=80)
    middle_name: str | None = Field(default=None, max_length=80)
    last_name: str = Field(..., min_length=1, max_length=80)
    gender: Gender
    village_id: int = Field(..., ge=1)
    current_address: str = Field(..., min_length=1, max_length=500)
    occupation_type: Literal["student", "job", "business"] | None = None
    occupation: OccupationIn

    @model_validator(mode="after")
    def validate_occupation(self):
        if self.occupation_type is None:
            self.occupation_type = self.occupation.kind
        elif self.occupation_type != self.occupation.kind:
            raise ValueError("Occupation details do not match occupation_type")
        return self


class RegisterOut(BaseModel):
    ok: bool = True
    message: str
    registration_state: str


class ProfileUpdateIn(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=80)
    middle_name: str | None = Field(default=None, max_length=80)
    last_name: str | None = Field(default=None, min_length=1, max_length=80)
    current_address: str | None = Field(default=None, min_length=1, max_length=500)
    occupation: OccupationPatch | None = None

    @model_validator(mode="after")
    def validate_required(self):
        return reject_cleared(self, ("first_name", "last_name", "current_address"))


class ChangeOccupationIn(BaseModel):
    new_occupation_type: Literal["student", "job", "business"] | None = None
    occupation: OccupationIn

    @model_validator(mode="after")
    def validate_occupation(self):
        if self.new_occupation_type is not None and self.new_occupation_type != self.occupation.kind:
            raise ValueError("Occupation details do not match new_occupation_type")
        return self


class ChangePasswordIn(BaseModel):
    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=6, max_length=128)


class ProfileOut(BaseModel):
    id: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    village_id: int | None = None
    village_name: str | None = None
    taluka: str | None = None
    district: str | None = None
    current_address: str | None = None
    phone: str
    email: str
    occupation_type: str | None = None
    phone_verified: bool
    email_verified: bool
    registration_completed: bool
    is_approved: bool
    is_admin: bool
    can_view_sensitive_data: bool
    registration_state: str
    created_at: datetime
    occupation_details: OccupationDetailsOut | None = None
