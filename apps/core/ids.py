"""Helpers for opaque string identifiers backed by UUID primary keys."""

import uuid


def is_uuid(value) -> bool:
    if value is None:
        return False
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def valid_uuids(ids) -> list:
    """Drop ids that cannot be primary keys; they would never match a row."""
    return [value for value in ids if is_uuid(value)]


def canonical_id(value) -> str:
    """
    Return the canonical text of a UUID id, or ``value`` as text if it is not one.

    Upper-case, hyphen-less and brace-wrapped spellings of one UUID all map to
    the same string.
    """
    text = str(value).strip()
    try:
        return str(uuid.UUID(text))
    except ValueError:
        return text
