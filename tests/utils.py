from __future__ import annotations

from typing import Any

from school_portal_api.app.core.db import Database


def stored_user(db: Database, user_id: int) -> dict[str, Any] | None:
    """Read a user row straight from the database, hash included."""
    row = db.fetch_one('SELECT * FROM "user" WHERE id = ?', (user_id,))
    return dict(row) if row else None


def user_count(db: Database) -> int:
    return db.fetch_one('SELECT COUNT(*) AS count FROM "user"')["count"]
