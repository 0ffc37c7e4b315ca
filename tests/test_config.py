import json

from sqlalchemy import inspect, text
from sqlmodel import create_engine

from storage import migrations
from storage.config import AppConfig, default_database_url, load_config, save_config, update_config


def test_missing_config_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "config.json")
    assert cfg.database_url is None
    assert cfg.log_level == "INFO"
    assert cfg.resolved_database_url() == default_database_url()


def test_corrupt_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == AppConfig()


def test_save_and_update_roundtrip(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_config(AppConfig(database_url="sqlite:///x.db", log_level="debug"), path)
    assert json.loads(path.read_text(encoding="utf-8"))["database_url"] == "sqlite:///x.db"
    assert load_config(path).log_level == "DEBUG"

    cfg = update_config(path, log_level="WARNING", unknown="ignored")
    assert cfg.log_level == "WARNING"
    assert cfg.database_url == "sqlite:///x.db"
    assert not path.with_suffix(".tmp").exists()


def test_migrations_patch_legacy_task_table(tmp_path):
    engine = create_engine(f"sqlite:///{(tmp_path / 'legacy.db').as_posix()}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE tasks_tasks (id TEXT PRIMARY KEY, user_id TEXT, title TEXT NOT NULL, "
                "due_date INTEGER)"
            )
        )
        for table in ("tasks_projects", "tasks_areas", "tasks_daily_log"):
            conn.execute(text(f"CREATE TABLE {table} (id TEXT PRIMARY KEY, user_id TEXT, log_date INTEGER)"))

    migrations.run_all(engine)
    migrations.run_all(engine)

    inspector = inspect(engine)
    columns = {col["name"] for col in inspector.get_columns("tasks_tasks")}
    assert {"do_date", "effort", "context"} <= columns
    index_names = {idx["name"] for idx in inspector.get_indexes("tasks_daily_log")}
    assert "ix_tasks_daily_log_user_date" in index_names


def test_loggers_share_rotating_file_handler():
    from logging.handlers import RotatingFileHandler

    from core.log import get_logger
    from core.settings import LOGGING

    logger = get_logger("tasks")
    assert logger.name == "tasks.tasks"
    handlers = logger.parent.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)
    assert handlers[0].baseFilename == str(LOGGING.path)

    get_logger("search")
    assert len(logger.parent.handlers) == 1
