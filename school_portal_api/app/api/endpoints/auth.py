"""Login endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from school_portal_api.app.api.deps import get_user_service
from school_portal_api.app.schemas.user import LoginRequest
from school_portal_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/login", response_class=PlainTextResponse)
async def login(credentials: LoginRequest, service: UserService = Depends(get_user_service)) -> str:
    """Check an email and password.

    Responds 400 when either is missing, 404 for an unknown email and
    401 for a wrong password.  No session or token is issued.
    """
    user = await service.authenticate(credentials)
    return f"Welkom, {user.voornaam} u bent nu ingelogd!"
