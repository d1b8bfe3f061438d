"""Read‑only access to the ``vakken`` (subjects) table."""

from typing import Any, Dict, List

from ..core.db import Database, call_db


class SubjectService:
    """Service for subjects.  Rows are passed through without interpretation."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_subjects(self) -> List[Dict[str, Any]]:
        rows = await call_db(self.db.fetch_all, "SELECT * FROM vakken ORDER BY rowid")
        return [dict(row) for row in rows]
