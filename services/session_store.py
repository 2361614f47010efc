# -*- coding: utf-8 -*-
"""
Session store - persisted sign-in state (token + user).

The store is injected into the services that need it, so tests can use
MemorySessionStore while the application persists to a JSON file.
"""

import json
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"

# Basic JWT shape: three base64url segments separated by dots
JWT_PATTERN = re.compile(r"^[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_.+/=]*$")


def is_valid_jwt(token: Optional[str]) -> bool:
    """Check that a token looks like a JWT."""
    if not token or not isinstance(token, str):
        return False
    return JWT_PATTERN.match(token) is not None


class SessionStore(ABC):
    """Key/value store with an explicit load/read/clear lifecycle."""

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._loaded = False

    def load(self):
        """Read persisted values (called once before first use)."""
        self._values = self._read()
        self._loaded = True

    def _ensure_loaded(self):
        if not self._loaded:
            self.load()

    def get(self, key: str, default: Any = None) -> Any:
        self._ensure_loaded()
        return self._values.get(key, default)

    def set(self, key: str, value: Any):
        self._ensure_loaded()
        self._values[key] = value
        self._write(self._values)

    def remove(self, key: str):
        self._ensure_loaded()
        if key in self._values:
            del self._values[key]
            self._write(self._values)

    def clear(self):
        """Remove all session values."""
        self._values = {}
        self._loaded = True
        self._write(self._values)

    @abstractmethod
    def _read(self) -> Dict[str, Any]:
        pass

    @abstractmethod
    def _write(self, values: Dict[str, Any]):
        pass


class MemorySessionStore(SessionStore):
    """Non-persistent store."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        super().__init__()
        self._initial = dict(initial or {})

    def _read(self) -> Dict[str, Any]:
        return dict(self._initial)

    def _write(self, values: Dict[str, Any]):
        self._initial = dict(values)


class FileSessionStore(SessionStore):
    """Store persisted as a JSON document on disk."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Discarding unreadable session file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def _write(self, values: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(values, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def get_valid_token(store: SessionStore) -> Optional[str]:
    """Return the stored token if it has a JWT shape, else None."""
    token = store.get(TOKEN_KEY)
    return token if is_valid_jwt(token) else None


def clear_auth(store: SessionStore):
    """Forget the signed-in user."""
    store.remove(TOKEN_KEY)
    store.remove(USER_KEY)


def auth_headers(store: SessionStore) -> Dict[str, str]:
    """Bearer authorization header for the stored token, if any."""
    token = get_valid_token(store)
    return {"Authorization": f"Bearer {token}"} if token else {}
