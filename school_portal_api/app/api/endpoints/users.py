"""
User endpoints.

List, create and update users.  Confirmations are returned as plain
text; service errors are turned into plain‑text responses by the
exception handler registered in ``main.create_app``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from school_portal_api.app.api.deps import get_user_service
from school_portal_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from school_portal_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users, unfiltered and unpaginated, in stored order."""
    return await service.list_users()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> str:
    """Register a new user.

    ``voornaam``, ``achternaam``, ``email`` and ``wachtwoord`` are
    required; a missing or empty value yields 400 and nothing is
    written.
    """
    created = await service.create_user(user)
    return f"{created.voornaam} is toegevoegd aan de database"


@router.put("/{user_id}", response_class=PlainTextResponse)
async def update_user(
    user_id: str,
    changes: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
) -> str:
    """Update any subset of a user's fields.

    Empty values keep the stored value, so a field can be replaced but
    not cleared.  The body may be omitted entirely, which rewrites the
    stored values.  The id is matched as given, so an id that is not a
    number simply finds no user.
    """
    await service.update_user(user_id, changes if changes is not None else UserUpdate())
    return f"Gebruiker met id {user_id} is succesvol bijgewerkt"
