"""FastAPI dependencies for the database handle and services."""

from fastapi import Depends, Request

from ..core.db import Database
from ..services.subject_service import SubjectService
from ..services.user_service import UserService


def get_database(request: Request) -> Database:
    """Return the database opened by the application lifespan."""
    return request.app.state.db


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(db)


def get_subject_service(db: Database = Depends(get_database)) -> SubjectService:
    return SubjectService(db)
