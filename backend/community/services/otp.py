import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.core.config import Settings
from community.core.security import mask_email, mask_phone, now_utc, otp_hash, otp_matches, random_otp_code
from community.models.otp import OtpVerification

logger = logging.getLogger(__name__)

PURPOSES = ("phone", "email")

# (purpose, contact, code) -> None
Dispatch = Callable[[str, str, str], object]


@dataclass(frozen=True)
class IssuedCode:
    id: int
    code: str
    purpose: str
    expires_at: datetime


class OtpService:
    """Issues and consumes one-time codes.

    Codes are six digits with a fixed validity window (OTP_TTL_SECONDS).
    Only a peppered hash is stored. Issuing a new code for a
    (user, purpose) pair deletes every unconsumed code for that pair, so
    at most one live code exists per pair.
    """

    def __init__(self, cfg: Settings, clock: Callable[[], datetime] = now_utc):
        self.cfg = cfg
        self.clock = clock

    def issue(
        self,
        db: Session,
        user_id: int | None,
        contact: str,
        purpose: str,
        *,
        dispatch: Dispatch | None = None,
    ) -> IssuedCode:
        if purpose not in PURPOSES:
            raise ValueError("purpose must be phone or email")

        now = self.clock()
        stale = sa.delete(OtpVerification).where(
            OtpVerification.purpose == purpose,
            OtpVerification.is_used == sa.false(),
        )
        if user_id is not None:
            stale = stale.where(OtpVerification.user_id == user_id)
        else:
            contact_col = OtpVerification.phone if purpose == "phone" else OtpVerification.email
            stale = stale.where(OtpVerification.user_id.is_(None), contact_col == contact)
        db.execute(stale.execution_options(synchronize_session=False))

        code = random_otp_code()
        row = OtpVerification(
            user_id=user_id,
            phone=contact if purpose == "phone" else None,
            email=contact if purpose == "email" else None,
            code_hash=otp_hash(code, self.cfg.OTP_PEPPER),
            purpose=purpose,
            is_used=False,
            created_at=now,
            expires_at=now + timedelta(seconds=self.cfg.OTP_TTL_SECONDS),
        )
        db.add(row)
        db.flush()

        masked = mask_phone(contact) if purpose == "phone" else mask_email(contact)
        if self.cfg.ENV == "dev":
            logger.info("otp issued purpose=%s to=%s code=%s", purpose, masked, code)
        else:
            logger.info("otp issued purpose=%s to=%s", purpose, masked)

        if dispatch is not None:
            dispatch(purpose, contact, code)
        return IssuedCode(id=row.id, code=code, purpose=purpose, expires_at=row.expires_at)

    def verify(self, db: Session, user_id: int, code: str, purpose: str) -> bool:
        """True iff `code` matches the newest unused code for (user, purpose)
        and that code is unexpired. The code is consumed in the same step.

        Every failure mode returns False; callers cannot tell them apart.
        """
        return self.claim(db, user_id, code, purpose) is not None

    def claim(self, db: Session, user_id: int, code: str, purpose: str) -> int | None:
        """Like verify, but returns the id of the consumed row."""
        row = db.execute(
            sa.select(OtpVerification.id, OtpVerification.code_hash)
            .where(
                OtpVerification.user_id == user_id,
                OtpVerification.purpose == purpose,
                OtpVerification.is_used == sa.false(),
            )
            .order_by(OtpVerification.created_at.desc(), OtpVerification.id.desc())
            .limit(1)
        ).first()
        if row is None or not otp_matches(code, row.code_hash, self.cfg.OTP_PEPPER):
            return None

        # Claim and expiry check in one statement; a concurrent verify of the
        # same code sees rowcount 0.
        res = db.execute(
            sa.update(OtpVerification)
            .where(
                OtpVerification.id == row.id,
                OtpVerification.is_used == sa.false(),
                OtpVerification.expires_at >= self.clock(),
            )
            .values(is_used=True)
            .execution_options(synchronize_session=False)
        )
        return row.id if res.rowcount == 1 else None

    def redeem(self, db: Session, user_id: int, otp_id: int) -> bool:
        """Spends a consumed code exactly once by deleting its row.

        Backs the single-use verification token: a second redeem of the
        same id changes nothing and returns False.
        """
        res = db.execute(
            sa.delete(OtpVerification)
            .where(
                OtpVerification.id == otp_id,
                OtpVerification.user_id == user_id,
                OtpVerification.is_used == sa.true(),
            )
            .execution_options(synchronize_session=False)
        )
        return res.rowcount == 1

    def purge(self, db: Session, retention_days: int) -> int:
        """Deletes used codes created, and any codes expired, more than
        `retention_days` ago. Only ever run from the maintenance script."""
        cutoff = self.clock() - timedelta(days=retention_days)
        res = db.execute(
            sa.delete(OtpVerification)
            .where(
                sa.or_(
                    sa.and_(OtpVerification.is_used == sa.true(), OtpVerification.created_at < cutoff),
                    OtpVerification.expires_at < cutoff,
                )
            )
            .execution_options(synchronize_session=False)
        )
        return res.rowcount or 0
