"""Primary keys: 26-character ULID strings, sortable by creation time."""

import ulid


def generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ulid.ULID())
