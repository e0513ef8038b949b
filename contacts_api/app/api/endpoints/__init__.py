"""
Endpoint modules.

Each module is one vertical slice: it defines an ``APIRouter`` named
``router`` carrying a single route.  The contact slices are collected
explicitly in ``contacts_api.app.api.router``; nothing is discovered
at runtime.
"""
