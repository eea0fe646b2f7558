from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Authenticated identity for the current request. Never persisted."""
    user_id: str
    username: str
