import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from community.db.base import Base

class StudentDetail(Base):
    __tablename__ = "student_details"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    department: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    sub_department: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    college_city: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    college_name: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    year_of_study: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    expected_graduation: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    additional_info: Mapped[str | None] = mapped_column(sa.Text, nullable=True)


class JobDetail(Base):
    __tablename__ = "job_details"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    graduation_year: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    college_city: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    college_name: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    department: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    graduation_branch: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    working_city: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    company_name: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    designation: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    field: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    experience_years: Mapped[int | None] = mapped_column(sa.Integer, nullable=True)
    additional_info: Mapped[str | None] = mapped_column(sa.Text, nullable=True)


class BusinessDetail(Base):
    __tablename__ = "business_details"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    business_name: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    business_type: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    business_field: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    business_city: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    business_address: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="")
    years_in_business: Mapped[int | None] = mapped_column(sa.Integer, nullable=True)
    employees_count: Mapped[int | None] = mapped_column(sa.Integer, nullable=True)
    website: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    additional_info: Mapped[str | None] = mapped_column(sa.Text, nullable=True)


DETAIL_MODELS = {
    "student": StudentDetail,
    "job": JobDetail,
    "business": BusinessDetail,
}
