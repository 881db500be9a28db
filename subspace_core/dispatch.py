"""
subspace_core.dispatch
----------------------
Envelope parser/dispatcher.

parse_event() runs a single pass per call, no retries:

1. Common extraction: sid (last wins), auth (parsed; failure is fatal),
   parent (every occurrence contributes all trailing values, in order).
2. Kind resolution through the registry (UnknownKind on a miss).
3. Dispatch to the module's record class for that operation
   (UnknownOperation when the module does not implement it).
4. Payload decode by the record class.

Decoding never mutates the input envelope and either returns one complete
record or raises.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Type

from .auth import AuthTag
from .constants import TAG_AUTH, TAG_PARENT, TAG_SUBSPACE_ID
from .envelope import Envelope
from .errors import SchemaError, SubspaceError, UnknownKind, UnknownOperation
from .logger import get_logger
from .operation import OperationRecord, SubspaceOperation

log = get_logger("Subspace.Dispatch")


@dataclass(frozen=True)
class CommonFields:
    subspace_id: str = ""
    auth_tag: Optional[AuthTag] = None
    parents: Tuple[str, ...] = ()


def extract_common(envelope: Envelope) -> CommonFields:
    subspace_id = ""
    auth_tag: Optional[AuthTag] = None
    parents: List[str] = []

    for tag in envelope.tags:
        if len(tag) < 2:
            continue
        name = tag[0]
        if name == TAG_SUBSPACE_ID:
            subspace_id = tag[1]
        elif name == TAG_AUTH:
            auth_tag = AuthTag.parse(tag[1])
        elif name == TAG_PARENT:
            parents.extend(tag[1:])

    return CommonFields(subspace_id=subspace_id, auth_tag=auth_tag, parents=tuple(parents))


@dataclass(frozen=True, eq=False)
class OperationModule:
    """
    One pluggable unit: a closed set of record classes bound to reserved kinds.

    `kinds` lists every kind the module reserves. A kind may be reserved
    without a record class; dispatching it raises UnknownOperation.
    """
    name: str
    package: str
    kinds: Dict[int, str]
    records: Tuple[Type[OperationRecord], ...] = ()
    description: str = ""
    _decoders: Dict[str, Type[OperationRecord]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        declared = set(self.kinds.values())
        for record in self.records:
            if record.OPERATION not in declared:
                raise SchemaError(
                    f"module '{self.name}': record {record.__name__} implements "
                    f"undeclared operation '{record.OPERATION}'"
                )
            self._decoders[record.OPERATION] = record

    def declarations(self) -> Dict[int, str]:
        return dict(self.kinds)

    def decoder_for(self, operation: str) -> Optional[Type[OperationRecord]]:
        return self._decoders.get(operation)

    def parse(self, envelope: Envelope, registry=None) -> OperationRecord:
        return parse_event(envelope, self, registry)


def parse_event(envelope: Envelope, module: OperationModule, registry=None) -> OperationRecord:
    from .registry import get_registry

    registry = registry if registry is not None else get_registry()
    try:
        common = extract_common(envelope)

        operation = registry.get_operation(envelope.kind)
        if operation is None:
            raise UnknownKind(envelope.kind)

        decoder = module.decoder_for(operation)
        if decoder is None:
            raise UnknownOperation(operation, module.name)

        header = SubspaceOperation(
            subspace_id=common.subspace_id,
            operation=operation,
            auth_tag=common.auth_tag,
            parents=list(common.parents),
            event=envelope.copy(),
        )
        record = decoder.decode(header)
    except SubspaceError as e:
        log.warning(f"rejected envelope id={envelope.id or '-'} kind={envelope.kind}: {type(e).__name__}")
        raise

    log.debug(f"decoded {module.name}/{operation} id={envelope.id or '-'} sid={common.subspace_id}")
    return record


def decode_event(envelope: Envelope, registry=None) -> OperationRecord:
    """Decode with whichever registered module owns the envelope's kind."""
    from .registry import get_registry

    registry = registry if registry is not None else get_registry()
    module = registry.module_for_kind(envelope.kind)
    if module is None:
        operation = registry.get_operation(envelope.kind)
        error = UnknownKind(envelope.kind) if operation is None else UnknownOperation(operation)
        log.warning(f"rejected envelope id={envelope.id or '-'} kind={envelope.kind}: {type(error).__name__}")
        raise error
    return parse_event(envelope, module, registry)
