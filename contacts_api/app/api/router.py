"""
Endpoint registry.

``ENDPOINTS`` is the fixed list of contact endpoint modules.  Each one
exposes a single ``router``; ``register_endpoints`` mounts all of them
under ``/contacts``.  To add an endpoint, write a new module in
``endpoints`` and append it here.
"""

import logging

from fastapi import FastAPI

from .endpoints import (
    create_contact,
    get_contact,
    get_contacts,
    update_contact,
    remove_contact,
)

logger = logging.getLogger(__name__)

CONTACTS_PREFIX = "/contacts"

ENDPOINTS = (
    create_contact,
    get_contact,
    get_contacts,
    update_contact,
    remove_contact,
)


def register_endpoints(app: FastAPI) -> None:
    """Mount every endpoint in ``ENDPOINTS`` on ``app``.

    Registration happens once per application; a second call raises
    ``RuntimeError`` rather than mounting duplicate routes.
    """
    if getattr(app.state, "endpoints_registered", False):
        raise RuntimeError("Endpoints are already registered on this application")
    for module in ENDPOINTS:
        app.include_router(module.router, prefix=CONTACTS_PREFIX, tags=["contacts"])
    app.state.endpoints_registered = True
    logger.debug("Registered %d contact endpoints", len(ENDPOINTS))
