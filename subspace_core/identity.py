"""
subspace_core.identity
----------------------
Content-addressed subspace identifiers.

    sid = "0x" + sha256(name + ops + rules).hexdigest()

The three strings are concatenated with no separator or length prefix.
Different (name, ops, rules) triples with the same concatenation, such as
("ab", "c", "") and ("a", "bc", ""), therefore share one identity. Anyone
relying on the sid as a binding must compare the declared fields too.
"""

from __future__ import annotations

from .errors import InvalidSubspaceId
from .utils import sha256, is_hex

SUBSPACE_ID_PREFIX = "0x"
SUBSPACE_ID_LENGTH = 66  # 0x + 64 hex chars


def calculate_subspace_id(name: str, ops: str, rules: str) -> str:
    return SUBSPACE_ID_PREFIX + sha256((name + ops + rules).encode("utf-8"))


def is_valid_subspace_id(sid: str) -> bool:
    if len(sid) != SUBSPACE_ID_LENGTH:
        return False
    if not sid.startswith(SUBSPACE_ID_PREFIX):
        return False
    return is_hex(sid[len(SUBSPACE_ID_PREFIX):])


def validate_subspace_id(sid: str) -> None:
    if not is_valid_subspace_id(sid):
        raise InvalidSubspaceId(sid)


def verify_subspace_id(sid: str, name: str, ops: str, rules: str) -> bool:
    """True when sid is exactly the identity of the declared configuration."""
    return sid == calculate_subspace_id(name, ops, rules)
