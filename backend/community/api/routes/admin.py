import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from community.api.deps import get_current_admin, get_notifier, get_settings
from community.core.config import Settings
from community.core.security import now_utc
from community.db.session import get_db
from community.models.user import User
from community.schemas.admin import (
    AdminActionOut,
    AdminStatsOut,
    AdminUserOut,
    AdminUserPageOut,
    ReportRowOut,
    ToggleSensitiveOut,
)
from community.schemas.common import PaginationOut, total_pages
from community.services import admin_gate, reports
from community.services.errors import InvalidTransition, NotFound
from community.services.notifications import Notifier

logger = logging.getLogger(__name__)

router = APIRouter()

OccupationFilter = Query(default=None, pattern="^(student|job|business)$")


def _page_out(items: list[dict], total: int, page: int, limit: int) -> AdminUserPageOut:
    return AdminUserPageOut(
        users=[AdminUserOut(**i) for i in items],
        pagination=PaginationOut(total=total, page=page, limit=limit, total_pages=total_pages(total, limit)),
    )


@router.get("/pending", response_model=AdminUserPageOut)
def pending(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    _: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    items, total = admin_gate.list_pending(db, page, limit)
    return _page_out(items, total, page, limit)


@router.get("/users", response_model=AdminUserPageOut)
def users(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: str | None = None,
    occupation_type: str | None = OccupationFilter,
    approved: bool | None = None,
    _: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    items, total = admin_gate.list_users(db, page, limit, search, occupation_type, approved)
    return _page_out(items, total, page, limit)


@router.post("/approve/{user_id}", response_model=AdminActionOut)
def approve(
    user_id: int,
    background: BackgroundTasks,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        recipient = admin_gate.approve(db, user_id)
        db.commit()
    except NotFound as exc:
        db.rollback()
        raise HTTPException(404, str(exc))
    except InvalidTransition as exc:
        db.rollback()
        raise HTTPException(409, str(exc))

    if recipient is None:
        return AdminActionOut(message="User already approved")
    background.add_task(notifier.send_approval, recipient.email, recipient.name)
    logger.info("approval by admin_id=%s user_id=%s", admin.id, user_id)
    return AdminActionOut(message="User approved successfully")


@router.api_route("/reject/{user_id}", methods=["POST", "DELETE"], response_model=AdminActionOut)
def reject(
    user_id: int,
    background: BackgroundTasks,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        recipient = admin_gate.reject(db, user_id)
        db.commit()
    except InvalidTransition as exc:
        db.rollback()
        raise HTTPException(409, str(exc))

    if recipient is None:
        return AdminActionOut(message="User not found or already removed")
    background.add_task(notifier.send_rejection, recipient.email, recipient.name)
    logger.info("rejection by admin_id=%s user_id=%s", admin.id, user_id)
    return AdminActionOut(message="User rejected and removed")


@router.post("/toggle-sensitive-access/{user_id}", response_model=ToggleSensitiveOut)
def toggle_sensitive_access(
    user_id: int,
    _: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    try:
        value = admin_gate.toggle_sensitive_access(db, user_id)
        db.commit()
    except NotFound as exc:
        db.rollback()
        raise HTTPException(404, str(exc))
    state = "granted" if value else "revoked"
    return ToggleSensitiveOut(message=f"Sensitive data access {state}", can_view_sensitive_data=value)


@router.get("/stats", response_model=AdminStatsOut)
def stats(
    _: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    return AdminStatsOut(**admin_gate.stats(db, cfg.ADMIN_TOP_VILLAGES))


@router.get("/download-report", response_model=list[ReportRowOut])
def download_report(
    type: str = Query(default="all", pattern="^(all|student|job|business)$"),
    format: str = Query(default="csv", pattern="^(csv|json)$"),
    village: int | None = None,
    _: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    occupation_type = None if type == "all" else type
    rows = admin_gate.report_rows(db, occupation_type, village)
    if format == "json":
        return [ReportRowOut(**r) for r in rows]

    filename = reports.report_filename(occupation_type, village, now_utc())
    return Response(
        content=reports.build_csv(rows),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
