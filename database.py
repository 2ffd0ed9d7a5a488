"""
database.py — SQLite schema creation and key-value operations.

The device keeps one small table: every persisted document (the signed-in
user, Sheet-1, Sheet-2) is a JSON string under a namespaced key.
Uses WAL mode so autosave writes never block page reads.
"""

import sqlite3
import os


def get_db_path():
    """Get the database path from environment or default."""
    default_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'tgrec.db')
    return os.environ.get('TGREC_DB_PATH', default_path)


def get_db(db_path=None):
    """Get a database connection with WAL mode enabled."""
    db_path = db_path or get_db_path()
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path=None):
    """Create the storage table if it doesn't exist."""
    conn = get_db(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    finally:
        conn.close()


def get_value(key, db_path=None):
    """Return the raw JSON text stored under key, or None."""
    conn = get_db(db_path)
    try:
        row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
    finally:
        conn.close()
    if row:
        return row['value']
    return None


def set_value(key, value, db_path=None):
    """Insert or replace the JSON text stored under key."""
    conn = get_db(db_path)
    try:
        conn.execute(
            """INSERT INTO storage (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
               ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                              updated_at = CURRENT_TIMESTAMP""",
            (key, value)
        )
        conn.commit()
    finally:
        conn.close()


def delete_value(key, db_path=None):
    """Remove a key. Returns True if a row was deleted."""
    conn = get_db(db_path)
    try:
        cursor = conn.execute("DELETE FROM storage WHERE key = ?", (key,))
        conn.commit()
        return cursor.rowcount > 0
    finally:
        conn.close()
