from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from community.core.config import Settings
from community.core.security import decode_token
from community.db.session import get_db
from community.models.user import User
from community.services.notifications import Notifier
from community.services.otp import OtpService

bearer = HTTPBearer()
optional_bearer = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_otp_service(request: Request) -> OtpService:
    return request.app.state.otp_service


def _get_user_from_access_token(creds: HTTPAuthorizationCredentials, db: Session, cfg: Settings) -> User:
    try:
        payload = decode_token(creds.credentials, cfg)
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid token")
    if payload.get("type") != "access":
        raise HTTPException(status_code=401, detail="Invalid token type")
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def get_current_user(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
) -> User:
    return _get_user_from_access_token(creds, db, cfg)


def get_optional_user(
    creds: HTTPAuthorizationCredentials | None = Depends(optional_bearer),
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
) -> User | None:
    if creds is None:
        return None
    try:
        return _get_user_from_access_token(creds, db, cfg)
    except HTTPException:
        return None


def get_registered_user(user: User = Depends(get_current_user)) -> User:
    if not user.registration_completed:
        raise HTTPException(status_code=403, detail="Complete registration first")
    return user


def get_current_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
