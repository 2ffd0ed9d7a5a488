"""
storage.py — On-device persistence for the profile documents.

ProfileStore is the single gateway the pages use:
- read(key, default): a value still waiting in the autosave queue wins over
  the stored copy, so a page always sees the latest edit.
- write(key, value): immediate, best-effort. Failures are logged and passed
  to the on_error side channel; the caller's in-memory state stays valid.
- schedule_write(key, value, delay_ms): debounced autosave (600 ms default).

Also holds the storage keys and the user/sheet helpers built on top.
"""

import json
import logging
import sqlite3
import threading
from datetime import datetime, timezone

from flask import current_app

from database import get_value, set_value, delete_value, init_db
from models import Sheet1Data, Sheet2Data, User
from utils.autosave import Debouncer, DEFAULT_DELAY_MS

logger = logging.getLogger(__name__)


class StorageKeys:
    USER = 'tgrec.user'
    SHEET1 = 'tgrec.sheet1'
    SHEET2 = 'tgrec.sheet2'


def utc_now_iso():
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class ProfileStore:
    """Persistence adapter over the SQLite key-value table."""

    def __init__(self, db_path, delay_ms=DEFAULT_DELAY_MS, on_error=None,
                 timer_factory=threading.Timer):
        self.db_path = db_path
        self.delay_ms = delay_ms
        self._on_error = on_error
        self._debouncer = Debouncer(self.write, timer_factory=timer_factory)
        self._saved_at = {}

    def init(self):
        init_db(self.db_path)

    def read(self, key, default=None):
        """Latest value for key, or default when absent or unreadable."""
        pending, value = self._debouncer.peek(key)
        if pending:
            return value
        try:
            raw = get_value(key, self.db_path)
            return json.loads(raw) if raw is not None else default
        except (sqlite3.Error, ValueError) as e:
            logger.error("Error reading %s from storage: %s", key, e)
            return default

    def write(self, key, value):
        """Save value under key now. Returns True on success."""
        try:
            set_value(key, json.dumps(value, ensure_ascii=False), self.db_path)
            self._saved_at[key] = utc_now_iso()
            return True
        except (sqlite3.Error, TypeError, ValueError) as e:
            logger.error("Error saving %s to storage: %s", key, e)
            if self._on_error:
                self._on_error(key, e)
            return False

    def schedule_write(self, key, value, delay_ms=None):
        """Autosave value after delay_ms of quiet on this key."""
        self._debouncer.schedule(key, value, self.delay_ms if delay_ms is None else delay_ms)

    def save_status(self, key):
        """(saving, saved_at) for the "Saved" indicator of a page.

        saving is True while an autosave for key is still queued; saved_at is
        the time of the last successful write in this process, or None.
        """
        pending, _ = self._debouncer.peek(key)
        return pending, self._saved_at.get(key)

    def flush(self, key=None):
        """Write pending autosaves now. Returns how many were written."""
        return self._debouncer.flush(key)

    def remove(self, key):
        """Forget key, including any autosave still pending for it."""
        self._debouncer.flush(key)
        try:
            return delete_value(key, self.db_path)
        except sqlite3.Error as e:
            logger.error("Error removing %s from storage: %s", key, e)
            if self._on_error:
                self._on_error(key, e)
            return False

    def close(self, flush=True):
        """Stop autosave timers, writing what is pending unless flush=False."""
        if flush:
            self._debouncer.flush()
        else:
            self._debouncer.cancel_all()


# ========================================
# User helpers
# ========================================

def get_current_user(store):
    data = store.read(StorageKeys.USER, None)
    if not data:
        return None
    return User.from_dict(data)


def is_logged_in(store):
    return get_current_user(store) is not None


def login_user(store, username):
    """Record username as the device's signed-in surveyor."""
    user = User(username=username, logged_in_at=utc_now_iso())
    store.write(StorageKeys.USER, user.to_dict())
    return user


def logout_user(store):
    """Forget the signed-in user. Form data stays on the device."""
    store.remove(StorageKeys.USER)


# ========================================
# Sheet documents
# ========================================

def load_sheet1(store):
    return Sheet1Data.from_dict(store.read(StorageKeys.SHEET1, None))


def load_sheet2(store):
    return Sheet2Data.from_dict(store.read(StorageKeys.SHEET2, None))


def has_sheet(store, key):
    return store.read(key, None) is not None


def get_store():
    """The ProfileStore of the running Flask app."""
    return current_app.extensions['profile_store']
