import logging
from functools import partial

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from community.api.deps import get_current_user, get_notifier, get_optional_user, get_otp_service, get_settings
from community.core.config import Settings
from community.core.security import create_access_token, create_verification_token, decode_token, mask_email
from community.db.session import get_db
from community.models.user import User
from community.schemas.auth import (
    ForgotPasswordIn,
    ForgotPasswordOut,
    LoginAfterVerifyIn,
    LoginIn,
    LoginOut,
    OTPRequestOut,
    ResendOtpIn,
    ResetPasswordIn,
    SessionOut,
    SessionUserOut,
    SignupIn,
    SignupOut,
    TokenOut,
    VerifyOtpIn,
    VerifyOtpOut,
)
from community.schemas.common import SimpleOKOut
from community.schemas.profile import RegisterIn, RegisterOut
from community.services import registration
from community.services.errors import (
    AccountExists,
    InvalidCredentials,
    InvalidOrExpiredCode,
    InvalidTransition,
    NotFound,
    VerificationRequired,
)
from community.services.notifications import Notifier
from community.services.otp import OtpService

logger = logging.getLogger(__name__)

router = APIRouter()


def _dispatcher(background: BackgroundTasks, notifier: Notifier):
    # Delivery runs after the response, i.e. after the OTP row is committed.
    return partial(background.add_task, notifier.send_otp)


def _dev_code(cfg: Settings, code: str) -> str | None:
    return code if cfg.ENV == "dev" else None


@router.post("/signup", response_model=SignupOut)
def signup(
    payload: SignupIn,
    background: BackgroundTasks,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
    otp: OtpService = Depends(get_otp_service),
):
    try:
        user = registration.signup(db, payload.phone, payload.email, payload.password)
        issued = otp.issue(db, user.id, user.email, "email", dispatch=_dispatcher(background, notifier))
        db.commit()
    except AccountExists as exc:
        db.rollback()
        raise HTTPException(409, str(exc))
    except IntegrityError:
        db.rollback()
        raise HTTPException(409, str(AccountExists()))

    return SignupOut(
        message="Account created. Check your email for the verification code.",
        user_id=user.id,
        dev_code=_dev_code(cfg, issued.code),
    )


@router.post("/verify-otp", response_model=VerifyOtpOut)
def verify_otp(
    payload: VerifyOtpIn,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    otp: OtpService = Depends(get_otp_service),
):
    user_id = payload.user_id
    if user_id is None:
        user = registration.find_by_contact(db, payload.contact or "")
        user_id = user.id if user else None

    otp_id = otp.claim(db, user_id, payload.code, payload.purpose) if user_id is not None else None
    if otp_id is None:
        db.rollback()
        raise HTTPException(400, str(InvalidOrExpiredCode()))

    registration.mark_contact_verified(db, user_id, payload.purpose)
    db.commit()
    return VerifyOtpOut(
        message="Verification successful",
        user_id=user_id,
        verification_token=create_verification_token(str(user_id), otp_id, cfg),
    )


@router.post("/login", response_model=LoginOut)
def login(
    payload: LoginIn,
    background: BackgroundTasks,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
    otp: OtpService = Depends(get_otp_service),
):
    try:
        user = registration.authenticate(db, payload.identifier, payload.password)
    except InvalidCredentials as exc:
        raise HTTPException(401, str(exc))

    issued = otp.issue(db, user.id, user.email, "email", dispatch=_dispatcher(background, notifier))
    db.commit()
    return LoginOut(
        user_id=user.id,
        email=mask_email(user.email),
        message="Verification code sent to your email",
        dev_code=_dev_code(cfg, issued.code),
    )


@router.post("/login-after-verify", response_model=TokenOut)
def login_after_verify(
    payload: LoginAfterVerifyIn,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    otp: OtpService = Depends(get_otp_service),
):
    try:
        claims = decode_token(payload.verification_token, cfg)
    except Exception:
        raise HTTPException(401, "Invalid verification token")
    if claims.get("type") != "otp_verified" or claims.get("sub") != str(payload.user_id):
        raise HTTPException(401, "Invalid verification token")
    try:
        otp_id = int(claims.get("jti"))
    except (TypeError, ValueError):
        raise HTTPException(401, "Invalid verification token")

    user = db.get(User, payload.user_id)
    if not user:
        raise HTTPException(404, "User not found")
    # Single use: the consumed OTP row is spent with the token.
    if not otp.redeem(db, user.id, otp_id):
        db.rollback()
        raise HTTPException(401, "Invalid verification token")
    db.commit()

    logger.info("session started user_id=%s", user.id)
    return TokenOut(
        access_token=create_access_token(str(user.id), cfg),
        user=SessionUserOut(**registration.session_summary(db, user)),
    )


@router.post("/resend-otp", response_model=OTPRequestOut)
def resend_otp(
    payload: ResendOtpIn,
    background: BackgroundTasks,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
    otp: OtpService = Depends(get_otp_service),
):
    user = db.get(User, payload.user_id)
    if not user:
        raise HTTPException(404, "User not found")

    contact = user.phone if payload.purpose == "phone" else user.email
    issued = otp.issue(db, user.id, contact, payload.purpose, dispatch=_dispatcher(background, notifier))
    db.commit()
    return OTPRequestOut(
        purpose=payload.purpose,
        message=f"Verification code sent to your {payload.purpose}",
        dev_code=_dev_code(cfg, issued.code),
    )


@router.get("/session", response_model=SessionOut)
def session(user: User | None = Depends(get_optional_user), db: Session = Depends(get_db)):
    if user is None:
        return SessionOut(logged_in=False)
    return SessionOut(logged_in=True, user=SessionUserOut(**registration.session_summary(db, user)))


@router.post("/logout", response_model=SimpleOKOut)
def logout():
    # Tokens are stateless; the client drops its copy.
    return SimpleOKOut(message="Logged out")


@router.post("/forgot-password", response_model=ForgotPasswordOut)
def forgot_password(
    payload: ForgotPasswordIn,
    background: BackgroundTasks,
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
    otp: OtpService = Depends(get_otp_service),
):
    out = ForgotPasswordOut(message="If the email is registered, a reset code has been sent")
    user = registration.find_by_contact(db, payload.email)
    if user is None:
        return out

    issued = otp.issue(db, user.id, user.email, "email", dispatch=_dispatcher(background, notifier))
    db.commit()
    out.dev_code = _dev_code(cfg, issued.code)
    return out


@router.post("/reset-password", response_model=SimpleOKOut)
def reset_password(
    payload: ResetPasswordIn,
    db: Session = Depends(get_db),
    otp: OtpService = Depends(get_otp_service),
):
    user = registration.find_by_contact(db, payload.email)
    if user is None or not otp.verify(db, user.id, payload.code, "email"):
        db.rollback()
        raise HTTPException(400, str(InvalidOrExpiredCode()))

    registration.set_password(db, user, payload.new_password)
    db.commit()
    logger.info("password reset user_id=%s", user.id)
    return SimpleOKOut(message="Password updated")


@router.post("/register", response_model=RegisterOut)
def register(
    payload: RegisterIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    try:
        state = registration.complete_profile(db, user, payload, cfg.PROFILE_REQUIRED_VERIFICATIONS)
        db.commit()
    except VerificationRequired as exc:
        db.rollback()
        raise HTTPException(403, str(exc))
    except InvalidTransition as exc:
        db.rollback()
        raise HTTPException(409, str(exc))
    except NotFound as exc:
        db.rollback()
        raise HTTPException(400, str(exc))

    return RegisterOut(
        message="Registration completed. Your profile is awaiting admin approval.",
        registration_state=state.value,
    )
