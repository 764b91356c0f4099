"""
Directory storage backends for the identity store.

Why: The store owns directory semantics (uniqueness, session coupling) but
delegates where identities live. The default backend keeps them in a dict, so
all data is lost on restart. A durable backend only needs the same four calls.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from identity_access.domain import Identity


class DirectoryBackend(Protocol):
    def load_all(self) -> List[Identity]:
        ...

    def get(self, email: str) -> Optional[Identity]:
        ...

    def upsert(self, identity: Identity) -> None:
        ...

    def delete(self, email: str) -> Optional[Identity]:
        ...


class InMemoryDirectoryBackend:
    def __init__(self):
        self._data: Dict[str, Identity] = {}

    def load_all(self) -> List[Identity]:
        return list(self._data.values())

    def get(self, email: str) -> Optional[Identity]:
        return self._data.get(email)

    def upsert(self, identity: Identity) -> None:
        self._data[identity.email] = identity

    def delete(self, email: str) -> Optional[Identity]:
        return self._data.pop(email, None)

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["DirectoryBackend", "InMemoryDirectoryBackend"]
