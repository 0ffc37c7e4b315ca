# tasks/storage/db.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from storage.config import load_config
from storage import migrations

# Ensure SQLModel metadata is populated
import models  # noqa: F401


_engine: Optional[Engine] = None


def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    """Build an engine whose sessions may be used from worker threads."""

    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_db_engine(load_config().resolved_database_url())
    return _engine


def init_db(engine: Optional[Engine] = None) -> Engine:
    actual_engine = engine or get_engine()
    SQLModel.metadata.create_all(actual_engine)
    migrations.run_all(actual_engine)
    return actual_engine


def get_session() -> Session:
    return Session(get_engine())


__all__ = ["create_db_engine", "get_engine", "get_session", "init_db"]
