import enum
import logging

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.core.security import hash_password, now_utc, verify_password
from community.models.reference import Village
from community.models.user import User
from community.schemas.common import normalize_contact
from community.services import occupations
from community.services.errors import (
    AccountExists,
    InvalidCredentials,
    InvalidTransition,
    NotFound,
    VerificationRequired,
)

logger = logging.getLogger(__name__)

VERIFICATION_REQUIREMENTS = ("none", "any", "email", "phone", "both")


class RegistrationState(str, enum.Enum):
    UNVERIFIED = "unverified"
    CONTACT_VERIFIED = "contact_verified"
    PROFILE_COMPLETE = "profile_complete"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"


def registration_state(user: User) -> RegistrationState:
    # Rejected identities are deleted, so there is no stored terminal state for them.
    if user.is_approved:
        return RegistrationState.APPROVED
    if user.registration_completed:
        if user.is_admin:
            return RegistrationState.PROFILE_COMPLETE
        return RegistrationState.PENDING_APPROVAL
    if user.phone_verified or user.email_verified:
        return RegistrationState.CONTACT_VERIFIED
    return RegistrationState.UNVERIFIED


def verification_requirement_met(user: User, requirement: str) -> bool:
    req = (requirement or "any").strip().lower()
    if req == "none":
        return True
    if req == "email":
        return bool(user.email_verified)
    if req == "phone":
        return bool(user.phone_verified)
    if req == "both":
        return bool(user.email_verified and user.phone_verified)
    if req == "any":
        return bool(user.email_verified or user.phone_verified)
    raise ValueError(f"Unknown verification requirement: {requirement}")


def find_by_contact(db: Session, contact: str) -> User | None:
    try:
        value = normalize_contact(contact)
    except ValueError:
        return None
    col = User.email if "@" in value else User.phone
    return db.execute(sa.select(User).where(col == value)).scalar_one_or_none()


def signup(db: Session, phone: str, email: str, password: str) -> User:
    """Creates an unverified identity, or restarts an abandoned signup.

    An identity that has not completed registration and owns the phone or
    the email is reused: contacts and password are replaced and any
    verification on a changed contact is dropped. A completed identity,
    or contacts split across two identities, raise AccountExists.
    """
    owners = db.execute(
        sa.select(User).where(sa.or_(User.email == email, User.phone == phone))
    ).scalars().all()

    if len(owners) > 1 or any(u.registration_completed or u.is_admin for u in owners):
        raise AccountExists()

    now = now_utc()
    if owners:
        user = owners[0]
        if user.email != email:
            user.email = email
            user.email_verified = False
        if user.phone != phone:
            user.phone = phone
            user.phone_verified = False
        user.password_hash = hash_password(password)
        user.updated_at = now
        db.flush()
        logger.info("signup restarted user_id=%s", user.id)
        return user

    user = User(
        phone=phone,
        email=email,
        password_hash=hash_password(password),
        phone_verified=False,
        email_verified=False,
        registration_completed=False,
        is_approved=False,
        is_admin=False,
        can_view_sensitive_data=False,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    db.flush()
    logger.info("signup user_id=%s", user.id)
    return user


def authenticate(db: Session, identifier: str, password: str) -> User:
    user = find_by_contact(db, identifier)
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user


def mark_contact_verified(db: Session, user_id: int, purpose: str) -> None:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    if purpose == "phone":
        user.phone_verified = True
    else:
        user.email_verified = True
    user.updated_at = now_utc()
    db.flush()


def complete_profile(db: Session, user: User, payload, requirement: str) -> RegistrationState:
    """ContactVerified -> ProfileComplete."""
    if user.registration_completed:
        raise InvalidTransition("Registration already completed")
    if not verification_requirement_met(user, requirement):
        raise VerificationRequired(f"Contact verification required ({requirement}) before completing registration")
    if db.get(Village, payload.village_id) is None:
        raise NotFound("Village not found")

    user.first_name = payload.first_name.strip()
    user.middle_name = (payload.middle_name or "").strip() or None
    user.last_name = payload.last_name.strip()
    user.gender = payload.gender
    user.village_id = payload.village_id
    user.current_address = payload.current_address.strip()
    user.occupation_type = payload.occupation.kind
    user.updated_at = now_utc()
    db.flush()

    occupations.replace_details(db, user.id, payload.occupation)

    user.registration_completed = True
    db.flush()
    logger.info("registration completed user_id=%s occupation=%s", user.id, user.occupation_type)
    return registration_state(user)


def update_profile(db: Session, user: User, payload) -> None:
    for field in ("first_name", "middle_name", "last_name", "current_address"):
        if field in payload.model_fields_set:
            value = getattr(payload, field)
            setattr(user, field, value.strip() if isinstance(value, str) else value)
    if payload.occupation is not None:
        occupations.patch_details(db, user.id, user.occupation_type, payload.occupation)
    user.updated_at = now_utc()
    db.flush()


def change_occupation(db: Session, user: User, occupation) -> None:
    if not user.registration_completed:
        raise InvalidTransition("Complete registration first")
    previous = user.occupation_type
    occupations.replace_details(db, user.id, occupation)
    user.occupation_type = occupation.kind
    user.updated_at = now_utc()
    db.flush()
    logger.info("occupation changed user_id=%s %s->%s", user.id, previous, occupation.kind)


def change_password(db: Session, user: User, current_password: str, new_password: str) -> None:
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentials("Current password is incorrect")
    set_password(db, user, new_password)


def set_password(db: Session, user: User, new_password: str) -> None:
    user.password_hash = hash_password(new_password)
    user.updated_at = now_utc()
    db.flush()


def bootstrap_admin(db: Session, email: str, phone: str, password: str) -> tuple[User, bool]:
    """The only path that creates is_admin identities."""
    existing = db.execute(sa.select(User).where(User.email == email)).scalar_one_or_none()
    now = now_utc()
    if existing is not None:
        existing.is_admin = True
        existing.registration_completed = True
        existing.email_verified = True
        existing.phone_verified = True
        existing.password_hash = hash_password(password)
        existing.updated_at = now
        db.flush()
        return existing, False

    admin = User(
        first_name="Admin",
        last_name="User",
        phone=phone,
        email=email,
        password_hash=hash_password(password),
        phone_verified=True,
        email_verified=True,
        registration_completed=True,
        is_approved=False,
        is_admin=True,
        can_view_sensitive_data=True,
        created_at=now,
        updated_at=now,
    )
    db.add(admin)
    db.flush()
    return admin, True


def session_summary(db: Session, user: User) -> dict:
    village = db.get(Village, user.village_id) if user.village_id else None
    return {
        "id": user.id,
        "first_name": user.first_name,
        "middle_name": user.middle_name,
        "last_name": user.last_name,
        "email": user.email,
        "phone": user.phone,
        "occupation_type": user.occupation_type,
        "phone_verified": user.phone_verified,
        "email_verified": user.email_verified,
        "registration_completed": user.registration_completed,
        "is_approved": user.is_approved,
        "is_admin": user.is_admin,
        "can_view_sensitive_data": user.can_view_sensitive_data,
        "registration_state": registration_state(user).value,
        "village_id": user.village_id,
        "village_name": village.name if village else None,
        "taluka": village.taluka if village else None,
        "district": village.district if village else None,
    }


def own_profile(db: Session, user: User) -> dict:
    out = session_summary(db, user)
    details = occupations.load_details(db, [(user.id, user.occupation_type)])
    out.update(
        gender=user.gender,
        current_address=user.current_address,
        created_at=user.created_at,
        occupation_details=details.get(user.id),
    )
    return out
