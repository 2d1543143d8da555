"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import get_data_dir

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "ring_tracker.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT UNIQUE NOT NULL,
                name TEXT NOT NULL,
                image TEXT,
                provider_account_id TEXT,
                settings TEXT NOT NULL DEFAULT '{}',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)

        # Exercise logs are embedded as a JSON array
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                date TEXT NOT NULL,
                phase INTEGER NOT NULL,
                week INTEGER NOT NULL,
                session TEXT NOT NULL,
                is_deload INTEGER DEFAULT 0,
                exercises TEXT NOT NULL DEFAULT '[]',
                notes TEXT,
                duration INTEGER,
                is_seed INTEGER DEFAULT 0,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS body_metrics (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                date TEXT NOT NULL,
                weight REAL,
                measurements TEXT,
                notes TEXT,
                is_seed INTEGER DEFAULT 0,
                created_at TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_progress (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                data TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                UNIQUE(user_id, exercise_name)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_variants (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                variants TEXT NOT NULL DEFAULT '[]',
                UNIQUE(user_id, exercise_name)
            )
        """)

        # Indexes for the per-user queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user_date
            ON workouts(user_id, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user_session
            ON workouts(user_id, session)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_body_metrics_user_date
            ON body_metrics(user_id, date)
        """)

        await db.commit()

    logger.debug("Database schema ready at %s", db_path)
