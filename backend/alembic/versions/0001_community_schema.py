"""community directory schema

Revision ID: 0001_community_schema
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_community_schema"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    # reference data
    op.create_table(
        "villages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("taluka", sa.Text, nullable=True),
        sa.Column("district", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("state", sa.Text, nullable=True),
    )
    op.create_table(
        "colleges",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("city_id", sa.Integer, sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("type", sa.Text, nullable=True),
        sa.UniqueConstraint("name", "city_id", name="uq_colleges_name_city"),
    )
    op.create_table(
        "college_courses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("college_id", sa.Integer, sa.ForeignKey("colleges.id", ondelete="CASCADE"), nullable=False),
        sa.Column("course_name", sa.Text, nullable=False),
        sa.UniqueConstraint("college_id", "course_name", name="uq_college_courses"),
    )
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("category", sa.Text, nullable=True),
    )
    op.create_table(
        "sub_departments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("department_id", sa.Integer, sa.ForeignKey("departments.id", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint("name", "department_id", name="uq_sub_departments"),
    )

    # users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.Text, nullable=True),
        sa.Column("middle_name", sa.Text, nullable=True),
        sa.Column("last_name", sa.Text, nullable=True),
        sa.Column("gender", sa.Text, nullable=True),
        sa.Column("village_id", sa.Integer, sa.ForeignKey("villages.id"), nullable=True),
        sa.Column("current_address", sa.Text, nullable=True),
        sa.Column("phone", sa.Text, nullable=False, unique=True),
        sa.Column("email", sa.Text, nullable=False, unique=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("occupation_type", sa.Text, nullable=True),
        sa.Column("phone_verified", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("email_verified", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("registration_completed", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_approved", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_admin", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("can_view_sensitive_data", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint(
            "occupation_type IS NULL OR occupation_type IN ('student','job','business')",
            name="ck_users_occupation_type",
        ),
        sa.CheckConstraint("NOT is_approved OR registration_completed", name="ck_users_approved_requires_profile"),
    )
    op.create_index("ix_users_queue", "users", ["registration_completed", "is_approved", "is_admin"])
    op.create_index("ix_users_village", "users", ["village_id"])

    # occupation variants, one row per user at most
    op.create_table(
        "student_details",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("department", sa.Text, nullable=False, server_default=""),
        sa.Column("sub_department", sa.Text, nullable=True),
        sa.Column("college_city", sa.Text, nullable=False, server_default=""),
        sa.Column("college_name", sa.Text, nullable=False, server_default=""),
        sa.Column("year_of_study", sa.Text, nullable=True),
        sa.Column("expected_graduation", sa.Text, nullable=True),
        sa.Column("additional_info", sa.Text, nullable=True),
    )
    op.create_table(
        "job_details",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("graduation_year", sa.Text, nullable=True),
        sa.Column("college_city", sa.Text, nullable=True),
        sa.Column("college_name", sa.Text, nullable=True),
        sa.Column("department", sa.Text, nullable=True),
        sa.Column("graduation_branch", sa.Text, nullable=True),
        sa.Column("working_city", sa.Text, nullable=False, server_default=""),
        sa.Column("company_name", sa.Text, nullable=False, server_default=""),
        sa.Column("designation", sa.Text, nullable=True),
        sa.Column("field", sa.Text, nullable=False, server_default=""),
        sa.Column("experience_years", sa.Integer, nullable=True),
        sa.Column("additional_info", sa.Text, nullable=True),
    )
    op.create_table(
        "business_details",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("business_name", sa.Text, nullable=False, server_default=""),
        sa.Column("business_type", sa.Text, nullable=False, server_default=""),
        sa.Column("business_field", sa.Text, nullable=False, server_default=""),
        sa.Column("business_city", sa.Text, nullable=False, server_default=""),
        sa.Column("business_address", sa.Text, nullable=False, server_default=""),
        sa.Column("years_in_business", sa.Integer, nullable=True),
        sa.Column("employees_count", sa.Integer, nullable=True),
        sa.Column("website", sa.Text, nullable=True),
        sa.Column("additional_info", sa.Text, nullable=True),
    )

    # one-time codes (hash only)
    op.create_table(
        "otp_verifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
        sa.Column("phone", sa.Text, nullable=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("code_hash", sa.Text, nullable=False),
        sa.Column("purpose", sa.Text, nullable=False),
        sa.Column("is_used", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("purpose in ('phone','email')", name="ck_otp_purpose"),
    )
    op.create_index("ix_otp_user_purpose_created", "otp_verifications", ["user_id", "purpose", "created_at"])


def downgrade():
    op.drop_index("ix_otp_user_purpose_created", table_name="otp_verifications")
    op.drop_table("otp_verifications")
    op.drop_table("business_details")
    op.drop_table("job_details")
    op.drop_table("student_details")
    op.drop_index("ix_users_village", table_name="users")
    op.drop_index("ix_users_queue", table_name="users")
    op.drop_table("users")
    op.drop_table("sub_departments")
    op.drop_table("departments")
    op.drop_table("college_courses")
    op.drop_table("colleges")
    op.drop_table("cities")
    op.drop_table("villages")
