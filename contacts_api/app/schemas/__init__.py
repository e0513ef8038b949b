"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and double as the stored
record type, since the in-memory store keeps validated models as-is.
"""
