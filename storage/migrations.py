"""Ad-hoc database migrations for the tasks tables."""

from __future__ import annotations

from sqlalchemy import text


def _column_exists(conn, table: str, column: str) -> bool:
    result = conn.execute(text(f"PRAGMA table_info('{table}')"))
    return any(row[1] == column for row in result)


def ensure_task_columns(conn) -> None:
    # Columns added after the first release of the tasks table.
    columns = {
        "do_date": "INTEGER",
        "effort": "INTEGER",
        "context": "TEXT",
    }
    for name, ddl_type in columns.items():
        if not _column_exists(conn, "tasks_tasks", name):
            conn.execute(text(f"ALTER TABLE tasks_tasks ADD COLUMN {name} {ddl_type}"))


def ensure_user_indexes(conn) -> None:
    for table in ("tasks_tasks", "tasks_projects", "tasks_areas", "tasks_daily_log"):
        conn.execute(
            text(f"CREATE INDEX IF NOT EXISTS ix_{table}_user_id ON {table} (user_id)")
        )


def ensure_lookup_indexes(conn) -> None:
    conn.execute(
        text(
            """
            CREATE INDEX IF NOT EXISTS ix_tasks_daily_log_user_date
            ON tasks_daily_log (user_id, log_date)
            """
        )
    )
    conn.execute(
        text(
            """
            CREATE INDEX IF NOT EXISTS ix_tasks_tasks_user_due
            ON tasks_tasks (user_id, due_date)
            """
        )
    )
    conn.execute(
        text(
            """
            CREATE INDEX IF NOT EXISTS ix_tasks_tasks_user_do
            ON tasks_tasks (user_id, do_date)
            """
        )
    )


def run_all(engine) -> None:
    with engine.begin() as conn:
        ensure_task_columns(conn)
        ensure_user_indexes(conn)
        ensure_lookup_indexes(conn)


__all__ = ["run_all"]
