import pytest

from flyticket.login import (
    ADMIN_OPENING,
    LOGIN_FAILED,
    USER_OPENING,
    Field,
    LoginForm,
    load_users,
)
from flyticket.user import User
from flyticket.user_manager import UserManager


@pytest.fixture
def manager(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("1 alice password admin\n2 bob password user\n", encoding="utf-8")
    return UserManager(path)


@pytest.fixture
def form(manager):
    return LoginForm(manager)


def test_typing_without_focus_is_ignored(form):
    form.type_text("alice")
    assert form.username == ""
    assert form.password == ""


def test_typing_goes_to_focused_field(form):
    form.focus(Field.USERNAME)
    form.type_text("alice")
    form.focus(Field.PASSWORD)
    form.type_text("password")
    assert form.username == "alice"
    assert form.password == "password"


def test_input_is_limited_to_twenty_characters(form):
    form.focus(Field.USERNAME)
    form.type_text("x" * 30)
    assert form.username == "x" * 20


def test_backspace_removes_last_character(form):
    form.focus(Field.USERNAME)
    form.type_text("alice")
    form.backspace()
    assert form.username == "alic"
    form.type_text("\b\b")
    assert form.username == "al"


def test_backspace_on_empty_field_keeps_it_empty(form):
    form.focus(Field.PASSWORD)
    form.backspace()
    assert form.password == ""


def test_control_and_non_ascii_characters_are_ignored(form):
    form.focus(Field.USERNAME)
    form.type_text("a\tb\rcé")
    assert form.username == "abc"


def test_tab_cycles_focus(form):
    assert form.tab() is Field.USERNAME
    assert form.tab() is Field.PASSWORD
    assert form.tab() is Field.USERNAME
    assert form.focused is Field.USERNAME


def test_password_is_masked(form):
    form.focus(Field.PASSWORD)
    form.type_text("password")
    assert form.password_display == "D" * len("password")


def test_placeholders(form):
    assert form.show_username_placeholder
    form.focus(Field.USERNAME)
    assert not form.show_username_placeholder
    assert form.show_password_placeholder


def test_admin_login(form):
    form.focus(Field.USERNAME)
    form.type_text("alice")
    form.tab()
    form.type_text("password")
    user = form.submit()
    assert user == User(1, "alice", "password", "admin")
    assert form.message == ADMIN_OPENING


def test_user_login(form):
    form.focus(Field.USERNAME)
    form.type_text("bob")
    form.tab()
    form.type_text("password")
    user = form.submit()
    assert user.username == "bob"
    assert form.message == USER_OPENING


def test_failed_login(form):
    form.focus(Field.USERNAME)
    form.type_text("alice")
    form.tab()
    form.type_text("secret")
    assert form.submit() is None
    assert form.message == LOGIN_FAILED


def test_reset_clears_everything(form):
    form.focus(Field.USERNAME)
    form.type_text("alice")
    form.tab()
    form.type_text("password")
    form.submit()
    form.reset()
    assert (form.username, form.password, form.focused, form.message, form.user) == (
        "",
        "",
        None,
        "",
        None,
    )


def test_load_users_adds_and_saves(tmp_path):
    manager = UserManager(tmp_path / "store.txt")
    source = tmp_path / "source.txt"
    source.write_text("3 carol password user\nbad line\n4 dave password admin\n", encoding="utf-8")
    added = load_users(manager, source)
    assert [u.username for u in added] == ["carol", "dave"]
    assert manager.users == added
    assert UserManager(tmp_path / "store.txt").users == added


def test_load_users_missing_file(tmp_path):
    manager = UserManager(tmp_path / "store.txt")
    assert load_users(manager, tmp_path / "missing.txt") == []
    assert manager.users == []