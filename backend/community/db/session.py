from collections.abc import Iterator

import sqlalchemy as sa
from fastapi import Request
from sqlalchemy.orm import Session, sessionmaker

from community.core.config import Settings


def build_engine(cfg: Settings) -> sa.Engine:
    if cfg.DATABASE_URL.startswith("sqlite"):
        return sa.create_engine(cfg.DATABASE_URL, connect_args={"check_same_thread": False})
    return sa.create_engine(
        cfg.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=cfg.DB_POOL_SIZE,
        max_overflow=cfg.DB_MAX_OVERFLOW,
        pool_timeout=cfg.DB_POOL_TIMEOUT_SECONDS,
        pool_recycle=cfg.DB_POOL_RECYCLE_SECONDS,
    )


def build_session_factory(engine: sa.Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
