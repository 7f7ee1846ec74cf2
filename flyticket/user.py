"""User accounts and their one-line text representation."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["User", "parse_user_line", "format_user"]


@dataclass
class User:
    """An account that can sign in, with a role such as ``admin`` or ``user``."""

    id: int
    username: str
    password: str
    role: str


def parse_user_line(line: str) -> User:
    """Parse ``"<id> <username> <password> <role>"``; extra fields are ignored.

    Raises ValueError when the line has too few fields or a non-numeric id.
    """
    fields = line.split()
    if len(fields) < 4:
        raise ValueError(f"expected 4 fields in user line, got {len(fields)}: {line!r}")
    user_id, username, password, role = fields[:4]
    return User(int(user_id), username, password, role)


def format_user(user: User) -> str:
    """Render a user as a single space-separated line, without a newline."""
    return f"{user.id} {user.username} {user.password} {user.role}"