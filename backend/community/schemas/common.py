import re

from pydantic import BaseModel

_PHONE_RE = re.compile(r"^\+?\d{10,15}$")


def looks_like_email(value: str) -> bool:
    v = value.strip()
    return "@" in v and "." in v.split("@")[-1] and " " not in v


def normalize_email(value: str) -> str:
    v = value.strip().lower()
    if not looks_like_email(v):
        raise ValueError("Invalid email")
    return v


def normalize_phone(value: str) -> str:
    raw = value.strip()
    cleaned = ("+" if raw.startswith("+") else "") + "".join(ch for ch in raw if ch.isdigit())
    if not _PHONE_RE.match(cleaned):
        raise ValueError("Invalid phone number")
    return cleaned


def reject_cleared(model, fields: tuple[str, ...]):
    """Partial updates may omit a required field but never set it to null."""
    cleared = [f for f in fields if f in model.model_fields_set and getattr(model, f) is None]
    if cleared:
        raise ValueError(f"Cannot clear required field(s): {', '.join(cleared)}")
    return model


def normalize_contact(value: str) -> str:
    """Normalizes an identifier that may be either an e-mail or a phone."""
    v = value.strip()
    if "@" in v:
        return normalize_email(v)
    return normalize_phone(v)


class SimpleOKOut(BaseModel):
    ok: bool = True
    message: str | None = None


class PaginationOut(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


def total_pages(total: int, limit: int) -> int:
    return (total + limit - 1) // limit if limit > 0 else 0
