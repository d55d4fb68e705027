from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from community.schemas.common import normalize_contact, normalize_email, normalize_phone

Purpose = Literal["phone", "email"]


class SignupIn(BaseModel):
    phone: str = Field(..., min_length=10, max_length=20, examples=["9876543210"])
    email: str = Field(..., min_length=3, max_length=160, examples=["user@example.com"])
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        return normalize_phone(v)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return normalize_email(v)


class SignupOut(BaseModel):
    ok: bool = True
    message: str
    user_id: int
    requires_verification: bool = True
    dev_code: str | None = None


class VerifyOtpIn(BaseModel):
    user_id: int | None = None
    contact: str | None = Field(default=None, max_length=160)
    code: str = Field(..., pattern=r"^\d{6}$")
    purpose: Purpose = "email"

    @model_validator(mode="after")
    def validate_subject(self):
        if self.user_id is None and not self.contact:
            raise ValueError("Provide user_id or contact")
        if self.contact:
            self.contact = normalize_contact(self.contact)
        return self


class VerifyOtpOut(BaseModel):
    ok: bool = True
    message: str
    user_id: int
    verification_token: str


class LoginIn(BaseModel):
    identifier: str = Field(..., min_length=3, max_length=160)
    password: str = Field(..., min_length=1, max_length=128)


class LoginOut(BaseModel):
    ok: bool = True
    requires_verification: bool = True
    user_id: int
    email: str
    message: str
    dev_code: str | None = None


class LoginAfterVerifyIn(BaseModel):
    user_id: int
    verification_token: str = Field(..., min_length=10)


class SessionUserOut(BaseModel):
    id: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    email: str
    phone: str
    occupation_type: str | None = None
    phone_verified: bool
    email_verified: bool
    registration_completed: bool
    is_approved: bool
    is_admin: bool
    can_view_sensitive_data: bool
    registration_state: str
    village_id: int | None = None
    village_name: str | None = None
    taluka: str | None = None
    district: str | None = None


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUserOut


class SessionOut(BaseModel):
    logged_in: bool
    user: SessionUserOut | None = None


class ResendOtpIn(BaseModel):
    user_id: int
    purpose: Purpose = "email"


class OTPRequestOut(BaseModel):
    ok: bool = True
    purpose: Purpose
    message: str
    dev_code: str | None = None


class ForgotPasswordIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=160)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return normalize_email(v)


class ForgotPasswordOut(BaseModel):
    ok: bool = True
    message: str
    dev_code: str | None = None


class ResetPasswordIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=160)
    code: str = Field(..., pattern=r"^\d{6}$")
    new_password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return normalize_email(v)
