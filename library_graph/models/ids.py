"""Record identifier generation shared by all record stores."""

import uuid


def new_record_id() -> str:
    """Return a new 24-character lowercase hex identifier."""
    return uuid.uuid4().hex[:24]
