"""
Identifier generation for stored records.
"""
import uuid


def new_id() -> str:
    """Return a new opaque identifier (random UUID4 string)."""
    return str(uuid.uuid4())
