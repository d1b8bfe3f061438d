"""
Top‑level package for the School Portal API.

This file makes ``school_portal_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``school_portal_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
