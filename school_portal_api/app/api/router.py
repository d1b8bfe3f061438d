"""
Top‑level API router.

Aggregates the domain routers.  Paths are mounted at the root
(``/user``, ``/login``, ``/vakken``) because existing clients call
them there.
"""

from fastapi import APIRouter

from .endpoints import auth, subjects, users

router = APIRouter()

router.include_router(users.router, prefix="/user", tags=["users"])
# The auth router defines its own "/login" path.
router.include_router(auth.router, tags=["auth"])
router.include_router(subjects.router, prefix="/vakken", tags=["vakken"])
