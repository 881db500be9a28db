# subspace_core/auth.py

"""
subspace_core.auth
------------------
Capability token attached to subspace operations.

Wire form: ``action=<uint8>,key=<uint32>,exp=<uint64>``.
Fields may arrive in any order but are always written in the order
action, key, exp. The parser is strict: exactly those three keys, once each,
plain decimal digits, within their bit widths.
"""

from __future__ import annotations
import enum
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Union

from .constants import TAG_AUTH
from .errors import MalformedAuthTag


class Action(enum.IntFlag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


# field name -> bit width
_AUTH_FIELDS = {"action": 8, "key": 32, "exp": 64}
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class AuthTag:
    """
    Permission mask bound to a causality key and a logical-clock expiration.

    Never mutated after creation: a new AuthTag replaces an old one.
    """
    action: int   # Action bitmask
    key: int      # causality key id
    exp: int      # expiration clock value

    def __post_init__(self):
        for name, width in _AUTH_FIELDS.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedAuthTag(str(self), f"{name} must be an integer")
            if not 0 <= value < 1 << width:
                raise MalformedAuthTag(str(self), f"{name} value {value} out of range")

    @classmethod
    def new(cls, action: Union[Action, int], key: int, exp: int) -> "AuthTag":
        return cls(action=int(action), key=key, exp=exp)

    @classmethod
    def parse(cls, text: str) -> "AuthTag":
        parts = text.split(",")
        if len(parts) != len(_AUTH_FIELDS):
            raise MalformedAuthTag(text, f"expected {len(_AUTH_FIELDS)} fields, got {len(parts)}")

        values: Dict[str, int] = {}
        for part in parts:
            kv = part.split("=")
            if len(kv) != 2:
                raise MalformedAuthTag(text, f"invalid part {part!r}")
            name, raw = kv
            if name not in _AUTH_FIELDS:
                raise MalformedAuthTag(text, f"unknown field {name!r}")
            if name in values:
                raise MalformedAuthTag(text, f"duplicate field {name!r}")
            if not _DIGITS.fullmatch(raw):
                raise MalformedAuthTag(text, f"invalid {name} value {raw!r}")
            value = int(raw)
            if value >= 1 << _AUTH_FIELDS[name]:
                raise MalformedAuthTag(text, f"{name} value {raw} out of range")
            values[name] = value

        return cls(action=values["action"], key=values["key"], exp=values["exp"])

    def serialize(self) -> str:
        return f"action={self.action},key={self.key},exp={self.exp}"

    def __str__(self) -> str:
        return self.serialize()

    def has_permission(self, requested: Union[Action, int]) -> bool:
        # ANY of the requested bits, not all of them
        return self.action & int(requested) != 0

    def is_expired(self, current_clock: int) -> bool:
        # The expiration value itself already counts as expired
        return current_clock >= self.exp

    @property
    def permissions(self) -> Action:
        return Action(self.action & int(Action.READ | Action.WRITE | Action.EXECUTE))

    def to_tag(self) -> List[str]:
        return [TAG_AUTH, self.serialize()]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthTag":
        return cls(action=int(data["action"]), key=int(data["key"]), exp=int(data["exp"]))


def new_auth_tag(action: Union[Action, int], key: int, exp: int) -> AuthTag:
    return AuthTag.new(action, key, exp)


def parse_auth_tag(text: str) -> AuthTag:
    return AuthTag.parse(text)
