# -*- coding: utf-8 -*-
"""
Tests for session persistence.

Tests cover:
- JWT shape checks
- Memory and file backed stores
- Auth helpers
"""

import json

import pytest

from services.session_store import (
    TOKEN_KEY,
    USER_KEY,
    FileSessionStore,
    MemorySessionStore,
    auth_headers,
    clear_auth,
    get_valid_token,
    is_valid_jwt,
)


class TestJwtShape:
    """Test the token shape check."""

    def test_valid(self, valid_token):
        assert is_valid_jwt(valid_token)

    @pytest.mark.parametrize("token", [None, "", "abc", "a.b", "a b.c.d", 123])
    def test_invalid(self, token):
        assert not is_valid_jwt(token)


class TestMemoryStore:
    """Test the in-memory store."""

    def test_set_get_remove(self, valid_token):
        store = MemorySessionStore()
        assert store.get(TOKEN_KEY) is None
        store.set(TOKEN_KEY, valid_token)
        assert store.get(TOKEN_KEY) == valid_token
        store.remove(TOKEN_KEY)
        assert store.get(TOKEN_KEY, "none") == "none"

    def test_initial_values(self):
        store = MemorySessionStore({USER_KEY: {"role": "student"}})
        assert store.get(USER_KEY) == {"role": "student"}

    def test_clear(self, valid_token):
        store = MemorySessionStore({TOKEN_KEY: valid_token, "theme": "dark"})
        store.clear()
        assert store.get(TOKEN_KEY) is None
        assert store.get("theme") is None


class TestFileStore:
    """Test the JSON file store."""

    def test_persists_between_instances(self, tmp_path, valid_token):
        path = tmp_path / "session.json"
        FileSessionStore(path).set(TOKEN_KEY, valid_token)

        reloaded = FileSessionStore(path)
        reloaded.load()
        assert reloaded.get(TOKEN_KEY) == valid_token
        assert json.loads(path.read_text(encoding="utf-8")) == {TOKEN_KEY: valid_token}

    def test_missing_file_is_empty(self, tmp_path):
        store = FileSessionStore(tmp_path / "absent.json")
        assert store.get(TOKEN_KEY) is None

    def test_corrupt_file_is_discarded(self, tmp_path, valid_token):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")
        store = FileSessionStore(path)
        assert store.get(TOKEN_KEY) is None
        store.set(TOKEN_KEY, valid_token)
        assert json.loads(path.read_text(encoding="utf-8")) == {TOKEN_KEY: valid_token}

    def test_non_object_file_is_discarded(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert FileSessionStore(path).get(TOKEN_KEY) is None

    def test_write_leaves_no_temp_files(self, tmp_path, valid_token):
        store = FileSessionStore(tmp_path / "nested" / "session.json")
        store.set(TOKEN_KEY, valid_token)
        store.remove(TOKEN_KEY)
        assert [p.name for p in (tmp_path / "nested").iterdir()] == ["session.json"]


class TestAuthHelpers:
    """Test token helpers."""

    def test_valid_token_and_header(self, signed_in_store, valid_token):
        assert get_valid_token(signed_in_store) == valid_token
        assert auth_headers(signed_in_store) == {"Authorization": f"Bearer {valid_token}"}

    def test_malformed_token_gives_no_header(self):
        store = MemorySessionStore({TOKEN_KEY: "garbage"})
        assert get_valid_token(store) is None
        assert auth_headers(store) == {}

    def test_clear_auth_keeps_other_keys(self, signed_in_store):
        signed_in_store.set("language", "en")
        clear_auth(signed_in_store)
        assert signed_in_store.get(TOKEN_KEY) is None
        assert signed_in_store.get(USER_KEY) is None
        assert signed_in_store.get("language") == "en"
