"""
subspace_core.envelope
----------------------
Defines the Envelope class: the signed event container every subspace
operation travels in.

Key features:
- Deterministic serialization for id computation and signing
- Ordered, append-only tag lists (each tag is a list of strings)
- Opaque string content; the core never interprets it beyond copying
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional
from .utils import canonical_json, now_unix, sha256
import copy
import json

Tag = List[str]
Tags = List[Tag]


@dataclass
class Envelope:
    id: str = ""                # sha256 of serialize(); set when signed
    pubkey: str = ""            # hex public key of the author
    created_at: int = field(default_factory=now_unix)
    kind: int = 0
    tags: Tags = field(default_factory=list)
    content: str = ""
    sig: Optional[str] = None   # hex signature over id

    def serialize(self) -> bytes:
        """Canonical form hashed into the id: [0, pubkey, created_at, kind, tags, content]."""
        return canonical_json([0, self.pubkey, self.created_at, self.kind, self.tags, self.content])

    def compute_id(self) -> str:
        return sha256(self.serialize())

    def check_id(self) -> bool:
        return self.id == self.compute_id()

    def get_tag(self, name: str) -> Optional[Tag]:
        """Last tag with the given name and at least one value."""
        found = None
        for tag in self.tags:
            if len(tag) >= 2 and tag[0] == name:
                found = tag
        return found

    def tag_values(self, name: str) -> List[str]:
        """Every trailing value of every tag with the given name, in order."""
        values: List[str] = []
        for tag in self.tags:
            if len(tag) >= 2 and tag[0] == name:
                values.extend(tag[1:])
        return values

    def copy(self) -> "Envelope":
        return copy.deepcopy(self)

    def to_dict(self, include_sig: bool = True) -> Dict[str, Any]:
        d = asdict(self)
        if not include_sig:
            d["sig"] = None
        return d

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True)

    @classmethod
    def from_dict(cls, data: dict) -> "Envelope":
        """Reconstruct an Envelope from its dict form (inverse of to_dict)."""
        return cls(
            id=data.get("id", ""),
            pubkey=data.get("pubkey", ""),
            created_at=int(data.get("created_at", now_unix())),
            kind=int(data.get("kind", 0)),
            tags=[list(t) for t in data.get("tags", [])],
            content=data.get("content", ""),
            sig=data.get("sig"),
        )

    @classmethod
    def from_json(cls, raw: str) -> "Envelope":
        return cls.from_dict(json.loads(raw))
