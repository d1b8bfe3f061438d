"""
API package.

``router.py`` aggregates the domain routers from ``endpoints`` and
``deps.py`` provides the FastAPI dependencies that hand the shared
database handle to the services.
"""
