"""Primary keys for likes, matches, chats and company records."""

import uuid


def new_row_id() -> uuid.UUID:
    """Return a time-ordered uuid7 where the interpreter has one, uuid4 otherwise."""
    factory = getattr(uuid, "uuid7", None)
    return factory() if factory is not None else uuid.uuid4()
