"""
subspace_core.operation
-----------------------
Common header and typed-record base for subspace operations.

Every operation record holds one SubspaceOperation header by composition
(subspace id, operation name, auth tag, parents, and the envelope itself) and
exposes it through read-only accessors. Payload fields are ordinary dataclass
fields declared with tag_field(), which binds each one to its wire tag.

Write path:
    vote = VoteEvent.new(sid)          # kind resolved from the registry by name
    vote.set_auth(Action.WRITE, 1, 100)
    vote.set_vote("prop-1", "yes")     # appends tags, never replaces

Read path: see subspace_core.dispatch.parse_event().
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, Field
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Type, TypeVar, Union

from .auth import Action, AuthTag
from .constants import (
    SUBSPACE_OP_MARKER,
    TAG_MARKER,
    TAG_OPERATION,
    TAG_PARENT,
    TAG_SUBSPACE_ID,
)
from .envelope import Envelope, Tag
from .errors import MissingRequiredTag, UnknownOperation

# Payload field shapes
SCALAR = "scalar"   # ["name", value]
LIST = "list"       # ["name", v1, v2, ...]
PAIRS = "pairs"     # ["name", "k1:v1,k2:v2"]

R = TypeVar("R", bound="OperationRecord")


def tag_field(tag: str, *, shape: str = SCALAR, required: bool = False, omit_empty: bool = False) -> Any:
    """Declare a payload field carried in the envelope tag `tag`."""
    metadata = {"tag": tag, "shape": shape, "required": required, "omit_empty": omit_empty}
    if shape == LIST:
        return field(default_factory=list, metadata=metadata)
    if shape == PAIRS:
        return field(default_factory=dict, metadata=metadata)
    return field(default="", metadata=metadata)


def encode_pairs(pairs: Dict[str, str]) -> str:
    return ",".join(f"{k}:{v}" for k, v in pairs.items())


def decode_pairs(text: str) -> Dict[str, str]:
    # Segments that are not exactly k:v are skipped
    out: Dict[str, str] = {}
    for pair in text.split(","):
        parts = pair.split(":")
        if len(parts) == 2:
            out[parts[0]] = parts[1]
    return out


@dataclass
class SubspaceOperation:
    """Decoded common header shared by every subspace operation."""
    subspace_id: str
    operation: str
    auth_tag: Optional[AuthTag] = None   # None when the envelope carries no auth tag
    parents: List[str] = field(default_factory=list)
    event: Envelope = field(default_factory=Envelope)


def new_subspace_op_event(subspace_id: str, operation: str, registry=None) -> SubspaceOperation:
    """Skeleton header + envelope for an operation, kind resolved by name."""
    from .registry import get_registry

    registry = registry if registry is not None else get_registry()
    kind = registry.get_kind(operation)
    if kind is None:
        raise UnknownOperation(operation)

    event = Envelope(
        kind=kind,
        tags=[
            [TAG_MARKER, SUBSPACE_OP_MARKER],
            [TAG_SUBSPACE_ID, subspace_id],
            [TAG_OPERATION, operation],
        ],
    )
    return SubspaceOperation(subspace_id=subspace_id, operation=operation, event=event)


@dataclass
class OperationRecord:
    """
    Base of every typed operation record.

    Subclasses set OPERATION and declare payload fields with tag_field().
    """
    OPERATION: ClassVar[str] = ""

    header: SubspaceOperation
    content: str = ""

    # ------------------------------------------------------------------
    # Header accessors
    # ------------------------------------------------------------------
    @property
    def subspace_id(self) -> str:
        return self.header.subspace_id

    @property
    def operation(self) -> str:
        return self.header.operation

    @property
    def auth_tag(self) -> Optional[AuthTag]:
        return self.header.auth_tag

    @property
    def parents(self) -> List[str]:
        return self.header.parents

    @property
    def event(self) -> Envelope:
        return self.header.event

    @property
    def kind(self) -> int:
        return self.header.event.kind

    @property
    def tags(self) -> List[Tag]:
        return self.header.event.tags

    # ------------------------------------------------------------------
    # Construction (write path)
    # ------------------------------------------------------------------
    @classmethod
    def new(cls: Type[R], subspace_id: str, registry=None) -> R:
        return cls(header=new_subspace_op_event(subspace_id, cls.OPERATION, registry))

    def set_auth(self, action: Union[Action, int], key: int, exp: int) -> AuthTag:
        auth = AuthTag.new(action, key, exp)
        self.header.auth_tag = auth
        self.event.tags.append(auth.to_tag())
        return auth

    def set_parents(self, parents: Iterable[str]) -> None:
        parents = list(parents)
        if not parents:
            return
        self.header.parents.extend(parents)
        self.event.tags.append([TAG_PARENT, *parents])

    def set_content(self, content: str) -> None:
        self.content = content
        self.event.content = content

    def set_fields(self, **values: Any) -> None:
        """Set payload fields by name; each one appends its tag in argument order."""
        by_name = {f.name: f for f in self.payload_fields()}
        for name, value in values.items():
            f = by_name.get(name)
            if f is None:
                raise TypeError(f"{type(self).__name__} has no payload field '{name}'")
            self._put(f, value)

    def _put(self, f: Field, value: Any) -> None:
        tag = f.metadata["tag"]
        shape = f.metadata["shape"]
        if shape == LIST:
            value = list(value)
            setattr(self, f.name, value)
            if value:
                self.event.tags.append([tag, *value])
        elif shape == PAIRS:
            value = dict(value)
            setattr(self, f.name, value)
            if value:
                self.event.tags.append([tag, encode_pairs(value)])
        else:
            setattr(self, f.name, value)
            if value or not f.metadata["omit_empty"]:
                self.event.tags.append([tag, value])

    # ------------------------------------------------------------------
    # Decoding (read path, second tag scan)
    # ------------------------------------------------------------------
    @classmethod
    def payload_fields(cls) -> List[Field]:
        return [f for f in fields(cls) if "tag" in f.metadata]

    @classmethod
    def decode(cls: Type[R], header: SubspaceOperation) -> R:
        """
        Build a record from a header whose event is already a private copy.

        Scalars take the last occurrence of their tag, lists the trailing
        values of the last occurrence. Content is copied verbatim.
        """
        by_tag = {f.metadata["tag"]: f for f in cls.payload_fields()}
        values: Dict[str, Any] = {}
        for tag in header.event.tags:
            if len(tag) < 2:
                continue
            f = by_tag.get(tag[0])
            if f is None:
                continue
            shape = f.metadata["shape"]
            if shape == LIST:
                values[f.name] = list(tag[1:])
            elif shape == PAIRS:
                values[f.name] = decode_pairs(tag[1])
            else:
                values[f.name] = tag[1]
        return cls(header=header, content=header.event.content, **values)

    def payload(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in self.payload_fields()}

    def missing_fields(self) -> List[str]:
        return [
            f.metadata["tag"] for f in self.payload_fields()
            if f.metadata["required"] and not getattr(self, f.name)
        ]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise MissingRequiredTag(missing[0])
