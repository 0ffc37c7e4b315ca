import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep logs and default paths out of the real user data dir.
os.environ.setdefault("TASKS_DATA_DIR", tempfile.mkdtemp(prefix="tasks-tests-"))

import pytest
from sqlmodel import Session

from storage.db import create_db_engine, init_db


@pytest.fixture()
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{(tmp_path / 'tasks.db').as_posix()}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    def factory():
        return Session(engine)

    return factory
