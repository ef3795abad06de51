import uuid


def new_id() -> str:
    """Return a fresh UUID4 string identifier."""
    return str(uuid.uuid4())
