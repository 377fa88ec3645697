"""Tests for the credential store adapters."""

import json
import os
import sys

import pytest

from adapters.credential_store import FileCredentialStore, MemoryCredentialStore
from core.domain.models import UserProfile
from core.interfaces.credential_store import TOKEN_KEY, USER_KEY, CredentialStore
from core.services.session_store import SessionStore


@pytest.fixture
def path(tmp_path):
    return tmp_path / "nested" / "credentials.json"


class TestFileCredentialStore:
    """JSON file persistence."""

    def test_implements_protocol(self, path):
        assert isinstance(FileCredentialStore(path), CredentialStore)
        assert isinstance(MemoryCredentialStore(), CredentialStore)

    def test_missing_file_reads_as_empty(self, path):
        assert FileCredentialStore(path).get(TOKEN_KEY) is None

    def test_values_survive_a_new_instance(self, path):
        FileCredentialStore(path).set_many({TOKEN_KEY: "tok1", USER_KEY: '{"id": "u1"}'})

        reopened = FileCredentialStore(path)
        assert reopened.get(TOKEN_KEY) == "tok1"
        assert reopened.get(USER_KEY) == '{"id": "u1"}'

    def test_set_many_keeps_other_keys(self, path):
        store = FileCredentialStore(path)
        store.set_many({"theme": "dark"})
        store.set_many({TOKEN_KEY: "tok1"})
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", TOKEN_KEY: "tok1"}

    def test_delete_many_removes_file_when_empty(self, path):
        store = FileCredentialStore(path)
        store.set_many({TOKEN_KEY: "tok1", USER_KEY: "{}"})

        store.delete_many([TOKEN_KEY, USER_KEY])

        assert not path.exists()

    def test_delete_many_keeps_remaining_keys(self, path):
        store = FileCredentialStore(path)
        store.set_many({TOKEN_KEY: "tok1", "theme": "dark"})

        store.delete_many([TOKEN_KEY, "absent"])

        assert store.get(TOKEN_KEY) is None
        assert store.get("theme") == "dark"

    def test_delete_on_missing_file_is_noop(self, path):
        FileCredentialStore(path).delete_many([TOKEN_KEY])
        assert not path.exists()

    def test_corrupt_file_reads_as_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("{broken", encoding="utf-8")

        assert FileCredentialStore(path).get(TOKEN_KEY) is None

    def test_non_object_file_reads_as_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2]", encoding="utf-8")

        assert FileCredentialStore(path).get(TOKEN_KEY) is None

    @pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
    def test_file_is_private(self, path):
        FileCredentialStore(path).set_many({TOKEN_KEY: "tok1"})
        assert os.stat(path).st_mode & 0o777 == 0o600

    def test_session_survives_restart(self, path):
        SessionStore(FileCredentialStore(path)).login(UserProfile(email="a@b.c"), "tok1")

        restored = SessionStore(FileCredentialStore(path))

        assert restored.token == "tok1"
        assert restored.user.email == "a@b.c"


class TestMemoryCredentialStore:
    def test_round_trip_and_delete(self):
        store = MemoryCredentialStore({"a": "1"})
        store.set_many({"b": "2"})
        store.delete_many(["a", "missing"])
        assert store.snapshot() == {"b": "2"}
