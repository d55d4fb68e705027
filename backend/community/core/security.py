import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt

from community.core.config import Settings, settings as default_settings

ALGO = "HS256"

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def otp_hash(code: str, pepper: str | None = None) -> str:
    # Stable hash for OTP verification (peppered)
    raw = ((pepper if pepper is not None else default_settings.OTP_PEPPER) + ":" + code).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()

def otp_matches(code: str, code_hash: str, pepper: str | None = None) -> bool:
    return hmac.compare_digest(otp_hash(code, pepper), code_hash)

def random_otp_code() -> str:
    # 6 digits, never a leading zero: [100000, 999999]
    return str(100_000 + secrets.randbelow(900_000))

def _encode(cfg: Settings, sub: str, token_type: str, lifetime: timedelta, **claims) -> str:
    payload = {"sub": sub, "type": token_type, "exp": now_utc() + lifetime, **claims}
    return jwt.encode(payload, cfg.JWT_SECRET, algorithm=ALGO)

def create_access_token(sub: str, cfg: Settings | None = None) -> str:
    cfg = cfg or default_settings
    return _encode(cfg, sub, "access", timedelta(minutes=cfg.JWT_ACCESS_MINUTES))

def create_verification_token(sub: str, otp_id: int, cfg: Settings | None = None) -> str:
    # Proof that OTP row `otp_id` was consumed for `sub`; exchanged once for an access token.
    cfg = cfg or default_settings
    return _encode(cfg, sub, "otp_verified", timedelta(minutes=cfg.VERIFICATION_TOKEN_MINUTES), jti=str(otp_id))

def decode_token(token: str, cfg: Settings | None = None) -> dict:
    cfg = cfg or default_settings
    return jwt.decode(token, cfg.JWT_SECRET, algorithms=[ALGO])

def hash_password(password: str) -> str:
    raw = password.encode("utf-8")
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except Exception:
        return False

def mask_email(email: str | None) -> str:
    email = (email or "").strip()
    if "@" not in email:
        return "***"
    local, domain = email.split("@", 1)
    if len(local) <= 2:
        return f"{local[:1]}*@{domain}"
    return f"{local[0]}{'*' * (len(local) - 2)}{local[-1]}@{domain}"

def mask_phone(phone: str | None) -> str:
    raw = (phone or "").strip()
    if len(raw) <= 4:
        return "*" * len(raw)
    return f"{'*' * (len(raw) - 4)}{raw[-4:]}"
