import logging
from dataclasses import dataclass

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.core.security import now_utc
from community.models.occupation import DETAIL_MODELS
from community.models.otp import OtpVerification
from community.models.reference import Village
from community.models.user import User
from community.services import occupations
from community.services.errors import InvalidTransition, NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recipient:
    """Contact captured for a best-effort notification."""

    email: str
    name: str | None


_LIST_COLUMNS = (
    User.id,
    User.first_name,
    User.middle_name,
    User.last_name,
    User.gender,
    User.phone,
    User.email,
    User.current_address,
    User.occupation_type,
    User.phone_verified,
    User.email_verified,
    User.registration_completed,
    User.is_approved,
    User.can_view_sensitive_data,
    User.created_at,
    User.village_id,
    Village.name.label("village_name"),
    Village.taluka,
    Village.district,
)


def _with_details(db: Session, rows) -> list[dict]:
    items = [dict(r) for r in rows]
    details = occupations.load_details(db, [(r["id"], r["occupation_type"]) for r in items])
    for item in items:
        item["village_name"] = item["village_name"] or "-"
        item["occupation_details"] = details.get(item["id"])
    return items


def _page(db: Session, where, page: int, limit: int) -> tuple[list[dict], int]:
    total = db.execute(sa.select(sa.func.count()).select_from(User).where(*where)).scalar_one()
    rows = db.execute(
        sa.select(*_LIST_COLUMNS)
        .select_from(User)
        .outerjoin(Village, Village.id == User.village_id)
        .where(*where)
        .order_by(User.created_at.desc(), User.id.desc())
        .limit(limit)
        .offset((page - 1) * limit)
    ).mappings().all()
    return _with_details(db, rows), int(total)


def list_pending(db: Session, page: int = 1, limit: int = 20) -> tuple[list[dict], int]:
    """Approval queue: completed, unapproved, non-admin identities, newest first."""
    where = (
        User.registration_completed == sa.true(),
        User.is_approved == sa.false(),
        User.is_admin == sa.false(),
    )
    return _page(db, where, page, limit)


def list_users(
    db: Session,
    page: int = 1,
    limit: int = 20,
    search: str | None = None,
    occupation_type: str | None = None,
    approved: bool | None = None,
) -> tuple[list[dict], int]:
    where = [User.registration_completed == sa.true(), User.is_admin == sa.false()]
    if search:
        pat = f"%{search.strip().lower()}%"
        where.append(
            sa.or_(
                sa.func.lower(User.first_name).like(pat),
                sa.func.lower(User.middle_name).like(pat),
                sa.func.lower(User.last_name).like(pat),
                sa.func.lower(User.email).like(pat),
                User.phone.like(pat),
            )
        )
    if occupation_type:
        where.append(User.occupation_type == occupation_type)
    if approved is not None:
        where.append(User.is_approved == (sa.true() if approved else sa.false()))
    return _page(db, tuple(where), page, limit)


def _require(db: Session, user_id: int):
    row = db.execute(
        sa.select(User.email, User.first_name, User.registration_completed, User.is_approved, User.is_admin).where(User.id == user_id)
    ).first()
    if row is None:
        raise NotFound("User not found")
    return row


def approve(db: Session, user_id: int) -> Recipient | None:
    """Moves a ProfileComplete identity to Approved.

    Returns the recipient to notify, or None when the identity was
    already approved (repeat calls are no-ops and notify nobody).
    """
    res = db.execute(
        sa.update(User)
        .where(
            User.id == user_id,
            User.registration_completed == sa.true(),
            User.is_admin == sa.false(),
            User.is_approved == sa.false(),
        )
        .values(is_approved=True, updated_at=now_utc())
        .execution_options(synchronize_session=False)
    )
    row = _require(db, user_id)
    if res.rowcount == 1:
        logger.info("admin approved user_id=%s", user_id)
        return Recipient(email=row.email, name=row.first_name)
    if row.is_admin:
        raise InvalidTransition("Admin accounts are not part of the approval queue")
    if row.is_approved:
        return None
    raise InvalidTransition("User has not completed registration")


def reject(db: Session, user_id: int) -> Recipient | None:
    """Deletes the identity with its occupation and OTP rows.

    Children go first so referential integrity holds without relying on
    ON DELETE CASCADE. Unknown ids are a no-op returning None. The caller
    commits, so the whole removal is one transaction.
    """
    row = db.execute(
        sa.select(User.email, User.first_name, User.is_admin).where(User.id == user_id)
    ).first()
    if row is None:
        return None
    if row.is_admin:
        raise InvalidTransition("Admin accounts cannot be rejected")

    for model in DETAIL_MODELS.values():
        db.execute(sa.delete(model).where(model.user_id == user_id).execution_options(synchronize_session=False))
    db.execute(
        sa.delete(OtpVerification).where(OtpVerification.user_id == user_id).execution_options(synchronize_session=False)
    )
    db.execute(sa.delete(User).where(User.id == user_id).execution_options(synchronize_session=False))
    logger.info("admin rejected user_id=%s", user_id)
    return Recipient(email=row.email, name=row.first_name)


def toggle_sensitive_access(db: Session, user_id: int) -> bool:
    res = db.execute(
        sa.update(User)
        .where(User.id == user_id)
        .values(can_view_sensitive_data=sa.not_(User.can_view_sensitive_data), updated_at=now_utc())
        .execution_options(synchronize_session=False)
    )
    if res.rowcount == 0:
        raise NotFound("User not found")
    value = bool(db.execute(sa.select(User.can_view_sensitive_data).where(User.id == user_id)).scalar_one())
    logger.info("admin toggled sensitive access user_id=%s value=%s", user_id, value)
    return value


def stats(db: Session, top_villages: int = 15) -> dict:
    counts = db.execute(sa.text("""
        SELECT
          COUNT(*) AS total_users,
          COALESCE(SUM(CASE WHEN is_approved THEN 1 ELSE 0 END), 0) AS approved_users,
          COALESCE(SUM(CASE WHEN NOT is_approved THEN 1 ELSE 0 END), 0) AS pending_users,
          COALESCE(SUM(CASE WHEN occupation_type = 'student' THEN 1 ELSE 0 END), 0) AS students,
          COALESCE(SUM(CASE WHEN occupation_type = 'job' THEN 1 ELSE 0 END), 0) AS jobs,
          COALESCE(SUM(CASE WHEN occupation_type = 'business' THEN 1 ELSE 0 END), 0) AS businesses
        FROM users
        WHERE registration_completed = true AND is_admin = false
    """)).mappings().one()

    villages = db.execute(sa.text("""
        SELECT COALESCE(v.name, 'Unknown') AS name, COUNT(*) AS members
        FROM users u
        LEFT JOIN villages v ON v.id = u.village_id
        WHERE u.registration_completed = true AND u.is_admin = false
        GROUP BY COALESCE(v.name, 'Unknown')
        ORDER BY members DESC, name ASC
        LIMIT :n
    """), {"n": top_villages}).mappings().all()

    out = {k: int(v) for k, v in counts.items()}
    out["village_stats"] = [{"name": r["name"], "count": int(r["members"])} for r in villages]
    return out


def report_rows(db: Session, occupation_type: str | None = None, village_id: int | None = None) -> list[dict]:
    where = [User.registration_completed == sa.true(), User.is_admin == sa.false()]
    if occupation_type:
        where.append(User.occupation_type == occupation_type)
    if village_id is not None:
        where.append(User.village_id == village_id)
    rows = db.execute(
        sa.select(
            User.id,
            User.first_name,
            User.middle_name,
            User.last_name,
            User.gender,
            User.phone,
            User.email,
            User.current_address,
            User.occupation_type,
            User.is_approved,
            User.created_at,
            Village.name.label("village_name"),
            Village.taluka,
            Village.district,
        )
        .select_from(User)
        .outerjoin(Village, Village.id == User.village_id)
        .where(*where)
        .order_by(User.created_at.desc(), User.id.desc())
    ).mappings().all()
    items = [dict(r) for r in rows]
    details = occupations.load_details(db, [(r["id"], r["occupation_type"]) for r in items])
    for item in items:
        item["occupation_details"] = details.get(item["id"])
    return items
