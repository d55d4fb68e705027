from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from community.schemas.common import reject_cleared


class StudentDetailsIn(BaseModel):
    kind: Literal["student"]
    department: str = Field(..., min_length=1, max_length=120)
    sub_department: str | None = None
    college_city: str = Field(..., min_length=1, max_length=120)
    college_name: str = Field(..., min_length=1, max_length=200)
    year_of_study: str | None = None
    expected_graduation: str | None = None
    additional_info: str | None = Field(default=None, max_length=2000)


class JobDetailsIn(BaseModel):
    kind: Literal["job"]
    company_name: str = Field(..., min_length=1, max_length=200)
    working_city: str = Field(..., min_length=1, max_length=120)
    field: str = Field(..., min_length=1, max_length=120)
    designation: str | None = None
    experience_years: int | None = Field(default=None, ge=0, le=80)
    graduation_year: str | None = None
    college_city: str | None = None
    college_name: str | None = None
    department: str | None = None
    graduation_branch: str | None = None
    additional_info: str | None = Field(default=None, max_length=2000)


class BusinessDetailsIn(BaseModel):
    kind: Literal["business"]
    business_name: str = Field(..., min_length=1, max_length=200)
    business_type: str = Field(..., min_length=1, max_length=120)
    business_field: str = Field(..., min_length=1, max_length=120)
    business_city: str = Field(..., min_length=1, max_length=120)
    business_address: str = Field(..., min_length=1, max_length=500)
    years_in_business: int | None = Field(default=None, ge=0, le=150)
    employees_count: int | None = Field(default=None, ge=0)
    website: str | None = None
    additional_info: str | None = Field(default=None, max_length=2000)


OccupationIn = Annotated[
    Union[StudentDetailsIn, JobDetailsIn, BusinessDetailsIn],
    Field(discriminator="kind"),
]


# Partial updates of the variant a member already has.
class StudentDetailsPatch(BaseModel):
    kind: Literal["student"]
    department: str | None = Field(default=None, min_length=1)
    sub_department: str | None = None
    college_city: str | None = Field(default=None, min_length=1)
    college_name: str | None = Field(default=None, min_length=1)
    year_of_study: str | None = None
    expected_graduation: str | None = None
    additional_info: str | None = None

    @model_validator(mode="after")
    def validate_required(self):
        return reject_cleared(self, ("department", "college_city", "college_name"))


class JobDetailsPatch(BaseModel):
    kind: Literal["job"]
    company_name: str | None = Field(default=None, min_length=1)
    working_city: str | None = Field(default=None, min_length=1)
    field: str | None = Field(default=None, min_length=1)
    designation: str | None = None
    experience_years: int | None = Field(default=None, ge=0, le=80)
    graduation_year: str | None = None
    college_city: str | None = None
    college_name: str | None = None
    department: str | None = None
    graduation_branch: str | None = None
    additional_info: str | None = None

    @model_validator(mode="after")
    def validate_required(self):
        return reject_cleared(self, ("company_name", "working_city", "field"))


class BusinessDetailsPatch(BaseModel):
    kind: Literal["business"]
    business_name: str | None = Field(default=None, min_length=1)
    business_type: str | None = Field(default=None, min_length=1)
    business_field: str | None = Field(default=None, min_length=1)
    business_city: str | None = Field(default=None, min_length=1)
    business_address: str | None = Field(default=None, min_length=1)
    years_in_business: int | None = Field(default=None, ge=0, le=150)
    employees_count: int | None = Field(default=None, ge=0)
    website: str | None = None
    additional_info: str | None = None

    @model_validator(mode="after")
    def validate_required(self):
        return reject_cleared(
            self, ("business_name", "business_type", "business_field", "business_city", "business_address")
        )


OccupationPatch = Annotated[
    Union[StudentDetailsPatch, JobDetailsPatch, BusinessDetailsPatch],
    Field(discriminator="kind"),
]


class StudentDetailsOut(BaseModel):
    kind: Literal["student"] = "student"
    department: str | None = None
    sub_department: str | None = None
    college_city: str | None = None
    college_name: str | None = None
    year_of_study: str | None = None
    expected_graduation: str | None = None
    additional_info: str | None = None


class JobDetailsOut(BaseModel):
    kind: Literal["job"] = "job"
    company_name: str | None = None
    designation: str | None = None
    field: str | None = None
    working_city: str | None = None
    experience_years: int | None = None
    graduation_year: str | None = None
    college_city: str | None = None
    college_name: str | None = None
    department: str | None = None
    graduation_branch: str | None = None
    additional_info: str | None = None


class BusinessDetailsOut(BaseModel):
    kind: Literal["business"] = "business"
    business_name: str | None = None
    business_type: str | None = None
    business_field: str | None = None
    business_city: str | None = None
    business_address: str | None = None
    years_in_business: int | None = None
    employees_count: int | None = None
    website: str | None = None
    additional_info: str | None = None


OccupationDetailsOut = Annotated[
    Union[StudentDetailsOut, JobDetailsOut, BusinessDetailsOut],
    Field(discriminator="kind"),
]
