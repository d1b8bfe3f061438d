"""
Business logic for users.

``UserService`` creates, lists, updates and authenticates rows of the
``user`` table.  Passwords are hashed before they reach the database
and are never returned or logged.  Blocking work (SQLite statements and
PBKDF2 hashing) runs in the threadpool so requests waiting on the
database do not hold up the event loop.
"""

import logging
from typing import Any, Dict, List, Mapping

from starlette.concurrency import run_in_threadpool

from ..core.db import Database, call_db
from ..core.errors import AuthError, InfrastructureError, NotFoundError, ValidationError
from ..core.security import hash_password, verify_password
from ..schemas.user import LoginRequest, UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)

# Columns that an update may replace, in UPDATE statement order.
UPDATABLE_FIELDS = (
    "voornaam",
    "tussenvoegsel",
    "achternaam",
    "adres",
    "wachtwoord",
    "email",
    "telefoonnummer",
    "mobiel_nummer",
)

INSERT_USER_SQL = (
    'INSERT INTO "user" (id, voornaam, tussenvoegsel, achternaam, adres, wachtwoord, email, '
    "telefoonnummer, mobiel_nummer) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)"
)

UPDATE_USER_SQL = (
    'UPDATE "user" SET '
    + ", ".join(f"{field} = ?" for field in UPDATABLE_FIELDS)
    + " WHERE id = ?"
)


def _row_to_user(row: Mapping[str, Any]) -> UserRead:
    data = dict(row)
    data.pop("wachtwoord", None)
    return UserRead(**data)


class UserService:
    """Service for the ``user`` table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def _hash(self, password: str) -> str:
        try:
            return await run_in_threadpool(hash_password, password)
        except (TypeError, ValueError) as exc:
            logger.error("Password hashing failed: %s", exc)
            raise InfrastructureError("Er is een fout opgetreden bij het verwerken van de gegevens") from exc

    async def list_users(self) -> List[UserRead]:
        """Return every user in stored order."""
        rows = await call_db(self.db.fetch_all, 'SELECT * FROM "user" ORDER BY rowid')
        return [_row_to_user(row) for row in rows]

    async def create_user(self, data: UserCreate) -> UserRead:
        """Validate, hash the password and insert a new user.

        Raises ``ValidationError`` before touching the database when
        ``voornaam``, ``achternaam``, ``email`` or ``wachtwoord`` is
        missing or empty.  The caller‑supplied ``id`` is stored as is;
        a clash with an existing row surfaces as ``InfrastructureError``.
        """
        if not (data.voornaam and data.achternaam and data.email and data.wachtwoord):
            raise ValidationError(
                "Alle verplichte velden moeten worden ingevuld: voornaam, achternaam, email en wachtwoord"
            )
        hashed = await self._hash(data.wachtwoord)
        user_id = await call_db(
            self.db.insert,
            INSERT_USER_SQL,
            (
                data.id,
                data.voornaam,
                data.tussenvoegsel,
                data.achternaam,
                data.adres,
                hashed,
                data.email,
                data.telefoonnummer,
                data.mobiel_nummer,
            ),
        )
        logger.info("Created user %s", user_id)
        return UserRead(id=user_id, **data.model_dump(exclude={"id", "wachtwoord"}))

    async def authenticate(self, credentials: LoginRequest) -> UserRead:
        """Check an email/password pair.

        When several rows share the email only the first one (lowest
        rowid) is considered.
        """
        if not (credentials.email and credentials.wachtwoord):
            raise ValidationError("Email en wachtwoord zijn verplicht")
        row = await call_db(
            self.db.fetch_one,
            'SELECT * FROM "user" WHERE email = ? ORDER BY rowid LIMIT 1',
            (credentials.email,),
        )
        if row is None:
            logger.info("Login failed: unknown email")
            raise NotFoundError("Gebruiker niet gevonden")
        valid = await run_in_threadpool(verify_password, credentials.wachtwoord, row["wachtwoord"])
        if not valid:
            logger.info("Login failed for user %s: wrong password", row["id"])
            raise AuthError("Ongeldig wachtwoord")
        logger.info("User %s logged in", row["id"])
        return _row_to_user(row)

    async def update_user(self, user_id: str, data: UserUpdate) -> UserRead:
        """Apply a partial update to an existing user.

        Fields that are absent or falsy keep their stored value.  The
        password is re‑hashed only when a new non‑empty one is given.
        Reading the current row and writing the merged row happen in
        one transaction.
        """
        changes = data.model_dump()
        if changes.get("wachtwoord"):
            changes["wachtwoord"] = await self._hash(changes["wachtwoord"])
        row = await call_db(self._apply_update, user_id, changes)
        logger.info("Updated user %s", user_id)
        return _row_to_user(row)

    def _apply_update(self, user_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        with self.db.transaction() as cursor:
            current = cursor.execute('SELECT * FROM "user" WHERE id = ?', (user_id,)).fetchone()
            if current is None:
                raise NotFoundError(f"Gebruiker met id {user_id} niet gevonden")
            merged = dict(current)
            for field in UPDATABLE_FIELDS:
                merged[field] = changes.get(field) or current[field]
            cursor.execute(
                UPDATE_USER_SQL,
                tuple(merged[field] for field in UPDATABLE_FIELDS) + (user_id,),
            )
        return merged

