from __future__ import annotations

import pytest
import sqlalchemy as sa

from community.models.occupation import BusinessDetail, JobDetail, StudentDetail
from community.models.reference import Village
from community.models.user import User
from community.schemas.occupation import BusinessDetailsIn
from community.schemas.profile import RegisterIn
from community.services import registration
from community.services.errors import AccountExists, InvalidTransition, NotFound, VerificationRequired
from community.services.registration import RegistrationState
from tests.testkit import business_payload, student_payload


@pytest.fixture
def village(db) -> Village:
    v = Village(name="અમરેલી (Amreli)", taluka="Amreli", district="Amreli")
    db.add(v)
    db.commit()
    return v


def _register_in(village_id: int, occupation: dict | None = None) -> RegisterIn:
    return RegisterIn(
        first_name="Priya",
        last_name="Patel",
        gender="Female",
        village_id=village_id,
        current_address="Station Road",
        occupation=occupation or student_payload(),
    )


def _count(db, model) -> int:
    return db.execute(sa.select(sa.func.count()).select_from(model)).scalar_one()


def test_state_progression(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    assert registration.registration_state(user) is RegistrationState.UNVERIFIED

    registration.mark_contact_verified(db, user.id, "email")
    assert registration.registration_state(user) is RegistrationState.CONTACT_VERIFIED

    state = registration.complete_profile(db, user, _register_in(village.id), "any")
    assert state is RegistrationState.PENDING_APPROVAL
    assert user.registration_completed is True

    user.is_approved = True
    assert registration.registration_state(user) is RegistrationState.APPROVED


@pytest.mark.parametrize(
    "requirement, email_verified, phone_verified, expected",
    [
        ("none", False, False, True),
        ("any", False, False, False),
        ("any", True, False, True),
        ("any", False, True, True),
        ("email", False, True, False),
        ("email", True, False, True),
        ("phone", True, False, False),
        ("both", True, False, False),
        ("both", True, True, True),
    ],
)
def test_verification_requirement(requirement, email_verified, phone_verified, expected):
    user = User(email_verified=email_verified, phone_verified=phone_verified)
    assert registration.verification_requirement_met(user, requirement) is expected


def test_unknown_requirement_is_rejected():
    with pytest.raises(ValueError):
        registration.verification_requirement_met(User(), "sometimes")


def test_complete_profile_respects_requirement(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.mark_contact_verified(db, user.id, "email")

    with pytest.raises(VerificationRequired):
        registration.complete_profile(db, user, _register_in(village.id), "both")
    assert user.registration_completed is False


def test_complete_profile_twice_is_invalid(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.complete_profile(db, user, _register_in(village.id), "none")
    with pytest.raises(InvalidTransition):
        registration.complete_profile(db, user, _register_in(village.id), "none")


def test_complete_profile_unknown_village(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    with pytest.raises(NotFound):
        registration.complete_profile(db, user, _register_in(village.id + 100), "none")


def test_signup_restart_reuses_incomplete_identity(db):
    first = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.mark_contact_verified(db, first.id, "phone")
    registration.mark_contact_verified(db, first.id, "email")

    again = registration.signup(db, "9876500000", "a@x.com", "n3w-pass")

    assert again.id == first.id
    assert again.phone == "9876500000"
    assert again.phone_verified is False
    assert again.email_verified is True
    assert _count(db, User) == 1


def test_signup_conflicts_with_completed_identity(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.complete_profile(db, user, _register_in(village.id), "none")

    with pytest.raises(AccountExists):
        registration.signup(db, "9876543210", "other@x.com", "p@ss1x")


def test_signup_conflicts_when_contacts_belong_to_two_identities(db):
    registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.signup(db, "9876543211", "b@x.com", "p@ss1x")

    with pytest.raises(AccountExists):
        registration.signup(db, "9876543210", "b@x.com", "p@ss1x")


def test_change_occupation_replaces_variant(db, village):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    registration.complete_profile(db, user, _register_in(village.id), "none")
    assert _count(db, StudentDetail) == 1

    registration.change_occupation(db, user, BusinessDetailsIn(**business_payload()))
    db.commit()

    assert user.occupation_type == "business"
    assert _count(db, StudentDetail) == 0
    assert _count(db, JobDetail) == 0
    rows = db.execute(sa.select(BusinessDetail).where(BusinessDetail.user_id == user.id)).scalars().all()
    assert len(rows) == 1
    assert rows[0].business_name == "Patel Textiles"


def test_change_occupation_requires_completed_profile(db):
    user = registration.signup(db, "9876543210", "a@x.com", "p@ss1x")
    with pytest.raises(InvalidTransition):
        registration.change_occupation(db, user, BusinessDetailsIn(**business_payload()))


def test_authenticate_by_email_or_phone(db):
    registration.signup(db, "9876543210", "a@x.com", "p@ss1x")

    assert registration.authenticate(db, "A@X.com", "p@ss1x").email == "a@x.com"
    assert registration.authenticate(db, "98765 43210", "p@ss1x").phone == "9876543210"


def test_bootstrap_admin_is_outside_the_queue(db):
    admin, created = registration.bootstrap_admin(db, "admin@x.com", "9999999999", "Admin#123")
    assert created is True
    assert admin.is_admin is True
    assert registration.registration_state(admin) is RegistrationState.PROFILE_COMPLETE

    again, created = registration.bootstrap_admin(db, "admin@x.com", "9999999999", "Other#123")
    assert created is False
    assert again.id == admin.id
