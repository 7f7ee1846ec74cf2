import pytest

from flyticket.user import User
from flyticket.user_manager import UserManager


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("1 alice password admin\n2 bob secret user\n", encoding="utf-8")
    return path


def test_load_reads_users(users_file):
    manager = UserManager(users_file)
    assert [u.username for u in manager.users] == ["alice", "bob"]
    assert manager.users[0] == User(1, "alice", "password", "admin")


def test_missing_file_gives_no_users(tmp_path):
    manager = UserManager(tmp_path / "absent.txt")
    assert manager.users == []


def test_malformed_lines_are_skipped(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("x bob secret user\n\n2 carol secret user\n3 short\n", encoding="utf-8")
    manager = UserManager(path)
    assert manager.users == [User(2, "carol", "secret", "user")]


def test_authenticate(users_file):
    manager = UserManager(users_file)
    user = manager.authenticate("bob", "secret")
    assert user is manager.users[1]
    assert manager.authenticate("bob", "password") is None
    assert manager.authenticate("nobody", "secret") is None


def test_add_user_persists(users_file):
    manager = UserManager(users_file)
    new_user = User(manager.new_user_id(), "carol", "secret", "user")
    manager.add_user(new_user)
    reloaded = UserManager(users_file)
    assert reloaded.users[-1] == new_user
    assert len(reloaded.users) == 3


def test_delete_user_persists(users_file):
    manager = UserManager(users_file)
    manager.delete_user(1)
    assert [u.id for u in manager.users] == [2]
    assert [u.id for u in UserManager(users_file).users] == [2]


def test_delete_unknown_id_keeps_users(users_file):
    manager = UserManager(users_file)
    manager.delete_user(99)
    assert len(manager.users) == 2


def test_update_user(users_file):
    manager = UserManager(users_file)
    manager.update_user(User(2, "bobby", "password", "admin"))
    assert manager.get_user(2) == User(2, "bobby", "password", "admin")
    assert UserManager(users_file).get_user(2).username == "bobby"


def test_update_unknown_user_changes_nothing(users_file):
    manager = UserManager(users_file)
    before = list(manager.users)
    manager.update_user(User(50, "ghost", "secret", "user"))
    assert manager.users == before


def test_get_user_missing_returns_none(users_file):
    manager = UserManager(users_file)
    assert manager.get_user(3) is None
    assert manager.get_user(1).username == "alice"


def test_new_user_id_on_empty(tmp_path):
    assert UserManager(tmp_path / "none.txt").new_user_id() == 1


def test_new_user_id_exceeds_all(tmp_path):
    path = tmp_path / "users.txt"
    path.write_text("3 a secret user\n7 b secret user\n5 c secret user\n", encoding="utf-8")
    manager = UserManager(path)
    new_id = manager.new_user_id()
    assert all(new_id > u.id for u in manager.users)
    manager.add_user(User(new_id, "d", "secret", "user"))
    assert manager.new_user_id() > new_id