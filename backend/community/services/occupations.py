from collections import defaultdict

import sqlalchemy as sa
from sqlalchemy.orm import Session

from community.models.occupation import DETAIL_MODELS
from community.schemas.occupation import (
    BusinessDetailsOut,
    JobDetailsOut,
    StudentDetailsOut,
)

_OUT_MODELS = {
    "student": StudentDetailsOut,
    "job": JobDetailsOut,
    "business": BusinessDetailsOut,
}


def load_details(db: Session, members) -> dict[int, object]:
    """Fetches the occupation variant of each (user_id, occupation_type) pair.

    One query per variant table, regardless of page size.
    """
    ids_by_kind: dict[str, list[int]] = defaultdict(list)
    for user_id, kind in members:
        if kind in DETAIL_MODELS:
            ids_by_kind[kind].append(user_id)

    out: dict[int, object] = {}
    for kind, ids in ids_by_kind.items():
        model = DETAIL_MODELS[kind]
        rows = db.execute(sa.select(model).where(model.user_id.in_(ids))).scalars().all()
        for row in rows:
            out[row.user_id] = _OUT_MODELS[kind].model_validate(row, from_attributes=True)
    return out


def replace_details(db: Session, user_id: int, payload) -> None:
    """Destructive switch: drops every variant row for the user, inserts the new one."""
    for model in DETAIL_MODELS.values():
        db.execute(
            sa.delete(model).where(model.user_id == user_id).execution_options(synchronize_session=False)
        )
    model = DETAIL_MODELS[payload.kind]
    db.add(model(user_id=user_id, **payload.model_dump(exclude={"kind"})))
    db.flush()


def patch_details(db: Session, user_id: int, current_kind: str | None, patch) -> None:
    if patch.kind != current_kind:
        raise ValueError("Use change-occupation to switch occupation type")
    values = patch.model_dump(exclude={"kind"}, exclude_unset=True)
    if not values:
        return
    model = DETAIL_MODELS[patch.kind]
    res = db.execute(
        sa.update(model).where(model.user_id == user_id).values(**values).execution_options(synchronize_session=False)
    )
    if res.rowcount == 0:
        raise ValueError("No occupation details on file; use change-occupation")
