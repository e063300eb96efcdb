"""
File-backed credential check.

The store is a JSON array of `{"username": ..., "password": ...}` objects. It
is re-read on every call (no caching) and passwords are compared as plain,
case-sensitive strings.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol


class CredentialStoreError(RuntimeError):
    pass


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


class JsonFileCredentialVerifier:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CredentialStoreError(f"{self.path.name} missing") from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CredentialStoreError(f"{self.path.name} is not valid JSON") from exc

        if not isinstance(data, list):
            raise CredentialStoreError(f"{self.path.name} must contain a JSON array")
        return data

    def verify(self, username: str, password: str) -> bool:
        for entry in self.load():
            if not isinstance(entry, dict):
                continue
            if entry.get("username") == username and entry.get("password") == password:
                return True
        return False
