"""
subspace_core.errors
--------------------
Error types raised by the decode/encode core.

Every failure here is terminal and synchronous: the data is already in hand,
so there is nothing transient to retry. Callers reject the whole envelope.
"""

from __future__ import annotations
from typing import Optional


class SubspaceError(Exception):
    """Base error for every subspace_core failure."""
    pass


# --- Decode errors ---

class MalformedAuthTag(SubspaceError, ValueError):
    """Auth tag text does not follow action=<u8>,key=<u32>,exp=<u64>."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid auth tag {text!r}: {reason}")


class UnknownKind(SubspaceError, LookupError):
    """Envelope kind is not present in the registry."""

    def __init__(self, kind: int):
        self.kind = kind
        super().__init__(f"unknown kind value: {kind}")


class UnknownOperation(SubspaceError, LookupError):
    """Kind is known globally but the module has no decoder for it."""

    def __init__(self, operation: str, module: Optional[str] = None):
        self.operation = operation
        self.module = module
        where = f" in module '{module}'" if module else ""
        super().__init__(f"unknown operation type: {operation}{where}")


class InvalidSubspaceId(SubspaceError, ValueError):
    def __init__(self, sid: str, reason: str = "invalid subspace ID format"):
        self.sid = sid
        super().__init__(f"{reason}: {sid}")


class SubspaceIdMismatch(InvalidSubspaceId):
    """Declared sid does not hash from the declared name/ops/rules."""

    def __init__(self, sid: str, expected: str):
        self.expected = expected
        super().__init__(sid, f"invalid subspace ID, expected {expected}")


class InvalidOpsFormat(SubspaceError, ValueError):
    def __init__(self, ops: str):
        self.ops = ops
        super().__init__(f"invalid ops format: {ops}")


class MissingRequiredContentField(SubspaceError, ValueError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"missing {field_name} in content")


class MissingRequiredTag(SubspaceError, ValueError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"missing required tag: {tag}")


class InvalidEventKind(SubspaceError, ValueError):
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"invalid event kind: expected {expected}, got {got}")


class InvalidContent(SubspaceError, ValueError):
    pass


# --- Registry errors ---

class RegistryError(SubspaceError):
    """Base error for kind/operation registry configuration."""
    pass


class DuplicateKindError(RegistryError):
    """Kind already mapped to a different operation name."""

    def __init__(self, kind: int, existing: str, new: str):
        self.kind = kind
        self.existing = existing
        self.new = new
        super().__init__(
            f"kind {kind} is already registered as '{existing}'. "
            f"Cannot register it as '{new}'."
        )


class DuplicateOperationError(RegistryError):
    """Operation name already bound to a different kind."""

    def __init__(self, operation: str, existing: int, new: int):
        self.operation = operation
        self.existing = existing
        self.new = new
        super().__init__(
            f"operation '{operation}' is already registered under kind {existing}. "
            f"Cannot register it under kind {new}."
        )


class RegistryLockedError(RegistryError):
    def __init__(self):
        super().__init__(
            "kind registry is locked after startup. "
            "No dynamic registration allowed."
        )


class SchemaError(SubspaceError, ValueError):
    """Module schema declaration is incomplete or inconsistent."""
    pass
