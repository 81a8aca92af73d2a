"""UUID and identity helpers."""

import uuid


def uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4 (used for primary keys)."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def new_identity() -> str:
    """Return a fresh opaque identity for locally created users."""
    return f"user_{uuid7_or_4().hex}"


def canonical_pair(first_id, second_id):
    """Return the two identities in canonical (lexicographic) order."""
    a, b = str(first_id), str(second_id)
    return (a, b) if a < b else (b, a)


def parse_uuid(value):
    """Return value as a UUID, or None when it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None
