"""Tests for the shell profile store."""

import errno
import io
from pathlib import Path

import pytest

from envperm.errors import EnvPermError
from envperm.stores.profile import ProfileStore, find_profile
from envperm.utils.env import get_home_dir


PROFILES = (".bash_profile", ".bash_login", ".profile")


def _existing(home: Path) -> set[str]:
    return {name for name in PROFILES if (home / name).exists()}


class TestSet:
    def test_writes_export_line(self, tmp_path):
        ProfileStore().set("FOO", 1)

        assert (tmp_path / ".bash_profile").read_text() == "\nexport FOO=1\n"

    def test_no_quoting_added(self, tmp_path):
        ProfileStore().set("DUMMY", '"/something"')

        assert (tmp_path / ".bash_profile").read_text() == '\nexport DUMMY="/something"\n'

    def test_twice_gives_two_lines(self, tmp_path):
        store = ProfileStore()
        store.set("FOO", 1)
        store.set("FOO", 2)

        text = (tmp_path / ".bash_profile").read_text()
        assert text == "\nexport FOO=1\n\nexport FOO=2\n"

    def test_keeps_existing_content(self, tmp_path):
        profile = tmp_path / ".profile"
        profile.write_text("# existing\nexport A=b")

        ProfileStore().set("FOO", 1)

        assert profile.read_text() == "# existing\nexport A=b\nexport FOO=1\n"

    def test_explicit_home(self, tmp_path):
        home = tmp_path / "elsewhere"
        home.mkdir()

        ProfileStore(home=home).set("FOO", "bar")

        assert (home / ".bash_profile").read_text() == "\nexport FOO=bar\n"
        assert not (tmp_path / ".bash_profile").exists()


class TestAppend:
    def test_writes_literal_self_reference(self, tmp_path):
        ProfileStore().append("PATH", "$HOME/some/cool/bin")

        text = (tmp_path / ".bash_profile").read_text()
        assert text == '\nexport PATH="$HOME/some/cool/bin:$PATH"\n'


class TestLookupChain:
    @pytest.mark.parametrize(
        "present, expected",
        [
            ((".bash_profile", ".bash_login", ".profile"), ".bash_profile"),
            ((".bash_login", ".profile"), ".bash_login"),
            ((".bash_profile", ".profile"), ".bash_profile"),
            ((".profile",), ".profile"),
            ((), ".bash_profile"),
        ],
    )
    def test_preference_order(self, tmp_path, present, expected):
        for name in present:
            (tmp_path / name).write_text("")

        ProfileStore().set("FOO", 1)

        for name in PROFILES:
            text = (tmp_path / name).read_text() if (tmp_path / name).exists() else None
            if name == expected:
                assert text == "\nexport FOO=1\n"
            elif name in present:
                assert text == ""
        assert _existing(tmp_path) == set(present) | {expected}

    def test_only_profile_is_touched(self, tmp_path):
        (tmp_path / ".profile").write_text("")

        ProfileStore().set("FOO", 1)

        assert (tmp_path / ".profile").read_text() == "\nexport FOO=1\n"
        assert _existing(tmp_path) == {".profile"}

    def test_empty_home_creates_bash_profile(self, tmp_path):
        ProfileStore().set("FOO", 1)

        assert (tmp_path / ".bash_profile").read_text() == "\nexport FOO=1\n"
        assert _existing(tmp_path) == {".bash_profile"}

    def test_skips_candidate_that_cannot_be_opened(self, tmp_path):
        (tmp_path / ".bash_profile").mkdir()
        (tmp_path / ".profile").write_text("")

        ProfileStore().set("FOO", 1)

        assert (tmp_path / ".profile").read_text() == "\nexport FOO=1\n"

    def test_creating_open_failure(self, tmp_path):
        (tmp_path / ".bash_profile").mkdir()

        with pytest.raises(EnvPermError, match="Could not open profile"):
            ProfileStore().set("FOO", 1)

    def test_find_profile_returns_path(self, tmp_path):
        (tmp_path / ".bash_login").write_text("")

        path, handle = find_profile(tmp_path)
        handle.close()

        assert path == tmp_path / ".bash_login"


def test_no_home_directory(monkeypatch):
    def _no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", _no_home)

    with pytest.raises(EnvPermError, match="No home directory"):
        ProfileStore().set("FOO", 1)


def test_error_is_an_os_error(tmp_path):
    (tmp_path / ".bash_profile").mkdir()

    with pytest.raises(OSError):
        ProfileStore().append("PATH", "/opt/bin")


def test_empty_home_variable(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", "")

    with pytest.raises(EnvPermError, match="No home directory"):
        ProfileStore().set("FOO", 1)

    with pytest.raises(EnvPermError, match="No home directory"):
        get_home_dir()


class _FailingHandle(io.StringIO):
    def write(self, s):
        raise OSError(errno.ENOSPC, "No space left on device")


def test_write_failure_is_wrapped(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "envperm.stores.profile.open_append",
        lambda path, create=False: _FailingHandle(),
    )

    with pytest.raises(EnvPermError, match="Could not write to") as exc_info:
        ProfileStore().set("FOO", 1)

    cause = exc_info.value.__cause__
    assert isinstance(cause, OSError)
    assert cause.errno == errno.ENOSPC
