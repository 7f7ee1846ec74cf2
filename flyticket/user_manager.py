"""A file-backed collection of user accounts."""

from __future__ import annotations

import logging
from pathlib import Path

from .user import User, format_user, parse_user_line

__all__ = ["UserManager"]

logger = logging.getLogger(__name__)


class UserManager:
    """Keeps user accounts in memory and mirrors every change to a text file."""

    def __init__(self, path: str | Path = "users.txt") -> None:
        self.path = Path(path)
        self.users: list[User] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory users with those in the file; bad lines are skipped."""
        self.users = []
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return
        for line in text.splitlines():
            try:
                user = parse_user_line(line)
            except ValueError:
                continue
            self.users.append(user)
            logger.info("Loaded user: %s (%s)", user.username, user.role)

    def save(self) -> None:
        """Write all users to the file, replacing its contents."""
        self.path.write_text(
            "".join(format_user(user) + "\n" for user in self.users), encoding="utf-8"
        )

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user with these credentials, or None."""
        logger.debug("Authenticating: %s", username)
        return next(
            (u for u in self.users if u.username == username and u.password == password),
            None,
        )

    def add_user(self, user: User) -> None:
        self.users.append(user)
        self.save()

    def delete_user(self, user_id: int) -> None:
        """Remove every user with this id."""
        self.users = [u for u in self.users if u.id != user_id]
        self.save()

    def update_user(self, user: User) -> None:
        """Replace the first user with the same id; unknown ids change nothing."""
        for position, existing in enumerate(self.users):
            if existing.id == user.id:
                self.users[position] = user
                break
        self.save()

    def get_user(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def new_user_id(self) -> int:
        """One more than the largest id in use, or 1 when there are no users."""
        return max((u.id for u in self.users if u.id > 0), default=0) + 1