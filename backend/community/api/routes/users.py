from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from community.api.deps import get_current_user, get_registered_user, get_settings
from community.core.config import Settings
from community.db.session import get_db
from community.models.user import User
from community.schemas.common import PaginationOut, SimpleOKOut, total_pages
from community.schemas.directory import DirectoryMemberOut, DirectorySearchOut
from community.schemas.profile import ChangeOccupationIn, ChangePasswordIn, ProfileOut, ProfileUpdateIn
from community.services import directory, registration
from community.services.errors import InvalidCredentials, InvalidTransition, NotFound

router = APIRouter()


@router.get("/profile", response_model=ProfileOut)
def get_profile(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    # Own view: never redacted.
    return ProfileOut(**registration.own_profile(db, user))


@router.put("/profile", response_model=ProfileOut)
def update_profile(
    payload: ProfileUpdateIn,
    user: User = Depends(get_registered_user),
    db: Session = Depends(get_db),
):
    try:
        registration.update_profile(db, user, payload)
        db.commit()
    except ValueError as exc:
        db.rollback()
        raise HTTPException(400, str(exc))
    return ProfileOut(**registration.own_profile(db, user))


@router.put("/change-occupation", response_model=ProfileOut)
def change_occupation(
    payload: ChangeOccupationIn,
    user: User = Depends(get_registered_user),
    db: Session = Depends(get_db),
):
    try:
        registration.change_occupation(db, user, payload.occupation)
        db.commit()
    except InvalidTransition as exc:
        db.rollback()
        raise HTTPException(409, str(exc))
    return ProfileOut(**registration.own_profile(db, user))


@router.put("/change-password", response_model=SimpleOKOut)
def change_password(
    payload: ChangePasswordIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        registration.change_password(db, user, payload.current_password, payload.new_password)
        db.commit()
    except InvalidCredentials as exc:
        db.rollback()
        raise HTTPException(400, str(exc))
    return SimpleOKOut(message="Password changed")


@router.get("/search", response_model=DirectorySearchOut)
def search(
    village: str | None = None,
    occupation: str | None = Query(default=None, pattern="^(student|job|business)$"),
    name: str | None = None,
    college: str | None = None,
    course: str | None = None,
    specialization: str | None = None,
    company: str | None = None,
    job_field: str | None = None,
    business_type: str | None = None,
    department: str | None = None,
    field: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    _: User = Depends(get_registered_user),
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    limit = min(limit or cfg.SEARCH_DEFAULT_PAGE_SIZE, cfg.SEARCH_MAX_PAGE_SIZE)
    filters = directory.DirectoryFilters(
        village=village,
        occupation=occupation,
        name=name,
        college=college,
        course=course,
        specialization=specialization,
        company=company,
        job_field=job_field,
        business_type=business_type,
        department=department,
        field=field,
    )
    members, total = directory.search(db, filters, page, limit)
    return DirectorySearchOut(
        users=[DirectoryMemberOut(**m) for m in members],
        pagination=PaginationOut(total=total, page=page, limit=limit, total_pages=total_pages(total, limit)),
    )


@router.get("/{user_id}", response_model=DirectoryMemberOut)
def get_member(user_id: int, _: User = Depends(get_registered_user), db: Session = Depends(get_db)):
    try:
        return DirectoryMemberOut(**directory.get_member(db, user_id))
    except NotFound as exc:
        raise HTTPException(404, str(exc))
