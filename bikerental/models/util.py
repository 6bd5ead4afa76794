from uuid import uuid4


def generate_id() -> str:
    """Creates a new identifier, unique for the lifetime of the process."""
    return uuid4().hex
