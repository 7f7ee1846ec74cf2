"""The sign-in form: credential entry, focus handling and authentication."""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from .user import User, parse_user_line
from .user_manager import UserManager

__all__ = ["Field", "LoginForm", "load_users"]

logger = logging.getLogger(__name__)

MAX_INPUT = 20
MASK_CHAR = "D"

ADMIN_OPENING = "✓ Login successful! Opening Admin Panel..."
USER_OPENING = "✓ Login successful! Opening User Panel..."
LOGIN_FAILED = "✗ Login failed: Invalid username or password"


class Field(enum.Enum):
    """An input field of the sign-in form."""

    USERNAME = "username"
    PASSWORD = "password"


class LoginForm:
    """Holds what has been typed into the sign-in form and checks it on submit.

    Text goes to the focused field only; each field takes at most 20 ASCII
    characters.
    """

    def __init__(self, user_manager: UserManager) -> None:
        self.user_manager = user_manager
        self.username = ""
        self.password = ""
        self.focused: Field | None = None
        self.message = ""
        self.user: User | None = None

    @property
    def password_display(self) -> str:
        """The password as shown on screen: one mask character per character typed."""
        return MASK_CHAR * len(self.password)

    @property
    def show_username_placeholder(self) -> bool:
        return not self.username and self.focused is not Field.USERNAME

    @property
    def show_password_placeholder(self) -> bool:
        return not self.password and self.focused is not Field.PASSWORD

    def focus(self, field: Field | None) -> None:
        """Give a field the input focus; None removes it from both."""
        self.focused = field

    def _append(self, char: str) -> None:
        if self.focused is Field.USERNAME and len(self.username) < MAX_INPUT:
            self.username += char
        elif self.focused is Field.PASSWORD and len(self.password) < MAX_INPUT:
            self.password += char

    def type_text(self, text: str) -> None:
        """Feed typed characters to the focused field.

        A backspace character deletes; tabs, carriage returns and non-ASCII
        characters are ignored.
        """
        for char in text:
            if char == "\b":
                self.backspace()
            elif char in "\t\r" or ord(char) >= 128:
                continue
            else:
                self._append(char)

    def backspace(self) -> None:
        """Delete the last character of the focused field, if any."""
        if self.focused is Field.USERNAME and self.username:
            self.username = self.username[:-1]
        elif self.focused is Field.PASSWORD and self.password:
            self.password = self.password[:-1]

    def tab(self) -> Field:
        """Move focus to the other field, or to the username when none has it."""
        self.focused = Field.PASSWORD if self.focused is Field.USERNAME else Field.USERNAME
        return self.focused

    def submit(self) -> User | None:
        """Check the credentials; return the signed-in user, or None on failure."""
        user = self.user_manager.authenticate(self.username, self.password)
        self.user = user
        if user is None:
            self.message = LOGIN_FAILED
        elif user.role == "admin":
            self.message = ADMIN_OPENING
        else:
            self.message = USER_OPENING
        return user

    def reset(self) -> None:
        """Clear inputs, focus, message and the signed-in user."""
        self.username = ""
        self.password = ""
        self.focused = None
        self.message = ""
        self.user = None


def load_users(user_manager: UserManager, path: str | Path) -> list[User]:
    """Add every user listed in a file to the manager and return those added.

    A file that cannot be opened adds nothing; lines that do not parse are skipped.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as error:
        logger.error("Cannot open %s: %s", path, error)
        return []
    added = []
    for line in text.splitlines():
        try:
            user = parse_user_line(line)
        except ValueError:
            continue
        user_manager.add_user(user)
        logger.info("Loaded user: %s (%s)", user.username, user.role)
        added.append(user)
    return added