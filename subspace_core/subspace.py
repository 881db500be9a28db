"""
subspace_core.subspace
----------------------
Subspace lifecycle events: creation and join.

A creation event declares the subspace's name, its allowed operations
("name=kind,..."), and optional rules. The sid it carries must be the
identity of exactly those three strings; that hash is the tamper-evidence
link between the declared configuration and the identifier every later
operation references.

Creation content is JSON: {"desc": <required, non-empty>, "img_url": <optional>}.
"""

from __future__ import annotations
import json
import re
from dataclasses import dataclass
from typing import Dict

from .constants import (
    KIND_SUBSPACE_CREATE,
    KIND_SUBSPACE_JOIN,
    OP_SUBSPACE_CREATE,
    OP_SUBSPACE_JOIN,
    TAG_MARKER,
    TAG_SUBSPACE_ID,
)
from .dispatch import OperationModule, parse_event
from .envelope import Envelope
from .errors import (
    InvalidContent,
    InvalidEventKind,
    InvalidOpsFormat,
    MissingRequiredContentField,
    MissingRequiredTag,
    SubspaceIdMismatch,
)
from .identity import calculate_subspace_id, validate_subspace_id
from .operation import OperationRecord, SubspaceOperation, tag_field

_OPS_PART = re.compile(r"([^=,]+)=([0-9]+)")


def parse_ops(ops: str) -> Dict[str, int]:
    """Parse "name=kind,name=kind" into {name: kind}."""
    parsed: Dict[str, int] = {}
    for part in ops.split(","):
        match = _OPS_PART.fullmatch(part)
        if match is None:
            raise InvalidOpsFormat(ops)
        parsed[match.group(1)] = int(match.group(2))
    return parsed


def _check_required_tags(evt: Envelope, *names: str) -> None:
    present = {tag[0] for tag in evt.tags if len(tag) >= 2}
    for name in names:
        if name not in present:
            raise MissingRequiredTag(name)


@dataclass
class SubspaceCreateEvent(OperationRecord):
    OPERATION = OP_SUBSPACE_CREATE

    subspace_name: str = tag_field("subspace_name", required=True)
    ops: str = tag_field("ops", required=True)
    rules: str = tag_field("rules", omit_empty=True)
    description: str = ""
    image_url: str = ""

    @classmethod
    def new(cls, name: str, ops: str, rules: str = "", description: str = "",
            image_url: str = "") -> "SubspaceCreateEvent":
        sid = calculate_subspace_id(name, ops, rules)
        event = Envelope(
            kind=KIND_SUBSPACE_CREATE,
            tags=[[TAG_MARKER, OP_SUBSPACE_CREATE], [TAG_SUBSPACE_ID, sid]],
        )
        evt = cls(header=SubspaceOperation(subspace_id=sid, operation=OP_SUBSPACE_CREATE, event=event))
        evt.set_fields(subspace_name=name, ops=ops, rules=rules)
        evt.description = description
        evt.image_url = image_url
        evt.set_content(json.dumps({"desc": description, "img_url": image_url}, separators=(",", ":")))
        return evt

    @classmethod
    def decode(cls, header: SubspaceOperation) -> "SubspaceCreateEvent":
        evt = super().decode(header)
        content = _load_content(evt.content)
        evt.description = content.get("desc", "")
        evt.image_url = content.get("img_url", "")
        validate_subspace_create(evt)
        return evt

    def allowed_operations(self) -> Dict[str, int]:
        return parse_ops(self.ops)


def _load_content(raw: str) -> Dict[str, str]:
    try:
        content = json.loads(raw)
    except ValueError as e:
        raise InvalidContent(f"invalid content format: {e}") from e
    if not isinstance(content, dict):
        raise InvalidContent("invalid content format: expected a JSON object")
    for key in ("desc", "img_url"):
        if key in content and not isinstance(content[key], str):
            raise InvalidContent(f"invalid content format: {key} must be a string")
    return content


def validate_subspace_create(evt: SubspaceCreateEvent) -> None:
    if evt.kind != KIND_SUBSPACE_CREATE:
        raise InvalidEventKind(KIND_SUBSPACE_CREATE, evt.kind)

    _check_required_tags(evt.event, TAG_MARKER, TAG_SUBSPACE_ID, "subspace_name", "ops")

    expected = calculate_subspace_id(evt.subspace_name, evt.ops, evt.rules)
    if evt.subspace_id != expected:
        raise SubspaceIdMismatch(evt.subspace_id, expected)

    content = _load_content(evt.content)
    if not content.get("desc"):
        raise MissingRequiredContentField("description")

    for part in evt.ops.split(","):
        if "=" not in part:
            raise InvalidOpsFormat(evt.ops)


def parse_subspace_create(envelope: Envelope, registry=None) -> SubspaceCreateEvent:
    if envelope.kind != KIND_SUBSPACE_CREATE:
        raise InvalidEventKind(KIND_SUBSPACE_CREATE, envelope.kind)
    return parse_event(envelope, MODULE, registry)


@dataclass
class SubspaceJoinEvent(OperationRecord):
    OPERATION = OP_SUBSPACE_JOIN

    @classmethod
    def new(cls, subspace_id: str) -> "SubspaceJoinEvent":
        event = Envelope(
            kind=KIND_SUBSPACE_JOIN,
            tags=[[TAG_MARKER, OP_SUBSPACE_JOIN], [TAG_SUBSPACE_ID, subspace_id]],
        )
        return cls(header=SubspaceOperation(subspace_id=subspace_id, operation=OP_SUBSPACE_JOIN, event=event))

    @classmethod
    def decode(cls, header: SubspaceOperation) -> "SubspaceJoinEvent":
        evt = super().decode(header)
        validate_subspace_join(evt)
        return evt


def validate_subspace_join(evt: SubspaceJoinEvent) -> None:
    if evt.kind != KIND_SUBSPACE_JOIN:
        raise InvalidEventKind(KIND_SUBSPACE_JOIN, evt.kind)
    _check_required_tags(evt.event, TAG_MARKER, TAG_SUBSPACE_ID)
    validate_subspace_id(evt.subspace_id)


def parse_subspace_join(envelope: Envelope, registry=None) -> SubspaceJoinEvent:
    if envelope.kind != KIND_SUBSPACE_JOIN:
        raise InvalidEventKind(KIND_SUBSPACE_JOIN, envelope.kind)
    return parse_event(envelope, MODULE, registry)


MODULE = OperationModule(
    name="subspace",
    package="cip00",
    description="Subspace creation and membership",
    kinds={
        KIND_SUBSPACE_CREATE: OP_SUBSPACE_CREATE,
        KIND_SUBSPACE_JOIN: OP_SUBSPACE_JOIN,
    },
    records=(SubspaceCreateEvent, SubspaceJoinEvent),
)
