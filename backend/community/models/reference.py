from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from community.db.base import Base

class Village(Base):
    __tablename__ = "villages"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, unique=True, nullable=False)
    taluka: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    district: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, unique=True, nullable=False)
    state: Mapped[str | None] = mapped_column(sa.Text, nullable=True)


class College(Base):
    __tablename__ = "colleges"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    city_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("cities.id"), nullable=False)
    type: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    __table_args__ = (sa.UniqueConstraint("name", "city_id", name="uq_colleges_name_city"),)


class CollegeCourse(Base):
    __tablename__ = "college_courses"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    college_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("colleges.id", ondelete="CASCADE"), nullable=False)
    course_name: Mapped[str] = mapped_column(sa.Text, nullable=False)

    __table_args__ = (sa.UniqueConstraint("college_id", "course_name", name="uq_college_courses"),)


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, unique=True, nullable=False)
    category: Mapped[str | None] = mapped_column(sa.Text, nullable=True)


class SubDepartment(Base):
    __tablename__ = "sub_departments"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    department_id: Mapped[int] = mapped_column(sa.Integer, sa.ForeignKey("departments.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (sa.UniqueConstraint("name", "department_id", name="uq_sub_departments"),)
