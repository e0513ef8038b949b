"""
Top-level package for the Contacts API.

All functionality lives in the ``app`` subpackage; ``client`` provides
a small HTTP client for talking to a running instance.
"""

__all__ = []
