"""
subspace_core.utils
-------------------
Small helpers for timestamps, hex/sha256 digests and canonical JSON.
Envelope ids and subspace identities both go through these so that hashing
stays byte-for-byte deterministic.
"""

from __future__ import annotations
import json, time, hashlib
from typing import Any


def now_unix() -> int:
    # Envelope created_at is whole seconds since the epoch
    return int(time.time())


def canonical_json(obj: Any) -> bytes:
    # Compact, no escaping of non-ASCII: the substrate hashes the exact UTF-8 bytes
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def is_hex(s: str) -> bool:
    return all(c in "0123456789abcdefABCDEF" for c in s)
