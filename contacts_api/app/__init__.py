"""
Application package initializer.

The API is organised in vertical slices: every contact operation lives
in its own module under ``api/endpoints`` and talks to storage through
``services.contact_service``.  Shared infrastructure (settings, logging,
storage) lives in ``core``.
"""

from .main import app, create_app  # noqa: F401
