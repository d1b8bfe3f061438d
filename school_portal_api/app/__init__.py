"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, authentication, subjects) lives in its
own module under ``api/endpoints`` with the matching business logic in
``services`` and request/response models in ``schemas``.
"""

from .main import app  # noqa: F401
