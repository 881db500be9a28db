"""
subspace_core.causality
-----------------------
Per-subspace causality tracking.

A SubspaceKey maps causality key ids to independent Lamport-style counters.
Counters are separate scalars, not a merged vector clock: there is no
ordering between different key ids.

Mutation contract (kept exactly as the accepting side relies on it):
- add_key() always inserts or overwrites, so a stale write can move a
  counter backwards.
- update_counter() only touches keys that already exist; an unknown key is
  a silent no-op, never an implicit insert.

The tracker itself is not thread-safe. A process that accepts operations for
one subspace from several threads must serialize mutation, or use
SynchronizedSubspaceKey.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from threading import Lock
from typing import Dict, Optional, Union

from .auth import Action, AuthTag

SubspaceRef = Union[int, str]


@dataclass(frozen=True)
class CausalityKey:
    key: int       # causality key identifier
    counter: int   # Lamport clock


def new_causality_key(key: int, counter: int) -> CausalityKey:
    return CausalityKey(key=key, counter=counter)


@dataclass
class SubspaceKey:
    subspace_id: SubspaceRef
    keys: Dict[int, CausalityKey] = field(default_factory=dict)

    @classmethod
    def new(cls, subspace_id: SubspaceRef) -> "SubspaceKey":
        return cls(subspace_id=subspace_id)

    def add_key(self, key: CausalityKey) -> None:
        # Overwrite, not max-merge
        self.keys[key.key] = key

    def get_key(self, key_id: int) -> Optional[CausalityKey]:
        return self.keys.get(key_id)

    def update_counter(self, key_id: int, counter: int) -> None:
        current = self.keys.get(key_id)
        if current is None:
            return
        self.keys[key_id] = CausalityKey(key=current.key, counter=counter)

    def permits(self, auth: AuthTag, requested: Union[Action, int]) -> bool:
        """
        Check an auth tag against this subspace's current clock for its key.

        The tag's causality key must be tracked here, the key's counter must
        still be below the tag's expiration, and the tag must carry any of
        the requested permission bits.
        """
        current = self.get_key(auth.key)
        if current is None:
            return False
        if auth.is_expired(current.counter):
            return False
        return auth.has_permission(requested)


class SynchronizedSubspaceKey(SubspaceKey):
    """SubspaceKey whose reads and writes are serialized by one lock."""

    def __init__(self, subspace_id: SubspaceRef, keys: Optional[Dict[int, CausalityKey]] = None):
        super().__init__(subspace_id=subspace_id, keys=dict(keys or {}))
        self._lock = Lock()

    def add_key(self, key: CausalityKey) -> None:
        with self._lock:
            super().add_key(key)

    def get_key(self, key_id: int) -> Optional[CausalityKey]:
        with self._lock:
            return super().get_key(key_id)

    def update_counter(self, key_id: int, counter: int) -> None:
        with self._lock:
            super().update_counter(key_id, counter)

    def snapshot(self) -> Dict[int, CausalityKey]:
        with self._lock:
            return dict(self.keys)


def new_subspace(subspace_id: SubspaceRef) -> SubspaceKey:
    return SubspaceKey.new(subspace_id)
