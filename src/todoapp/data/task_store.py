# src/todoapp/data/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..core.ports import GetTaskCallback, LoadTasksCallback
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store (the local data source).

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL DEFAULT '',
                    description TEXT NOT NULL DEFAULT '',
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("title", "TEXT NOT NULL DEFAULT ''")
            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("completed", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_completed ON tasks(completed)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            id=str(row["id"]),
            completed=bool(row["completed"]),
        )

    def _set_completed(self, task_id: str, completed: bool) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "UPDATE tasks SET completed = ?, updated_at = ? WHERE id = ?",
                (int(completed), time.time(), task_id),
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def list_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY created_at ASC, rowid ASC")
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()

    def find_task(self, task_id: str) -> Task | None:
        if not task_id:
            return None

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
            row = cur.fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def get_tasks(self, callback: LoadTasksCallback) -> None:
        tasks = self.list_tasks()
        if tasks:
            callback.on_tasks_loaded(tasks)
        else:
            callback.on_data_not_available()

    def get_task(self, task_id: str, callback: GetTaskCallback) -> None:
        task = self.find_task(task_id)
        if task is not None:
            callback.on_task_loaded(task)
        else:
            callback.on_data_not_available()

    def save_task(self, task: Task) -> None:
        """Insert or update by id. created_at is kept on update."""
        now = time.time()
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(id, title, description, completed, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title = excluded.title,
                    description = excluded.description,
                    completed = excluded.completed,
                    updated_at = excluded.updated_at
                """,
                (task.id, task.title, task.description, int(task.completed), now, now),
            )
            conn.commit()
            logger.debug("Task saved id=%s completed=%s", task.id, task.completed)
        finally:
            conn.close()

    def complete_task(self, task_id: str) -> None:
        self._set_completed(task_id, True)

    def activate_task(self, task_id: str) -> None:
        self._set_completed(task_id, False)

    def clear_completed_tasks(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("DELETE FROM tasks WHERE completed = 1")
            conn.commit()
            logger.debug("Cleared %s completed tasks", cur.rowcount)
        finally:
            conn.close()

    def refresh_tasks(self) -> None:
        # The repository owns cache invalidation; storage is always fresh.
        return

    def delete_all_tasks(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM tasks")
            conn.commit()
        finally:
            conn.close()

    def delete_task(self, task_id: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            conn.commit()
        finally:
            conn.close()
