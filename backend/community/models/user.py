from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from community.db.base import Base

OCCUPATION_TYPES = ("student", "job", "business")

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    middle_name: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    village_id: Mapped[int | None] = mapped_column(sa.Integer, sa.ForeignKey("villages.id"), nullable=True)
    current_address: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    phone: Mapped[str] = mapped_column(sa.Text, unique=True, nullable=False)
    email: Mapped[str] = mapped_column(sa.Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(sa.Text, nullable=False)

    occupation_type: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    phone_verified: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())
    email_verified: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())
    registration_completed: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())
    is_approved: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())
    is_admin: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())
    can_view_sensitive_data: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.false())

    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())

    __table_args__ = (
        sa.CheckConstraint(
            "occupation_type IS NULL OR occupation_type IN ('student','job','business')",
            name="ck_users_occupation_type",
        ),
        sa.CheckConstraint("NOT is_approved OR registration_completed", name="ck_users_approved_requires_profile"),
        sa.Index("ix_users_queue", "registration_completed", "is_approved", "is_admin"),
        sa.Index("ix_users_village", "village_id"),
    )

