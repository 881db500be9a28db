"""
Subspace Core Package
=====================
Shared primitives for subspace operations carried in signed event envelopes.

Provides:
- AuthTag capability tokens and per-subspace causality tracking
- Content-addressed subspace identities
- Kind <-> operation registry and the envelope parser/dispatcher
- Typed operation records for the built-in modules, plus JSON-declared modules
"""

from .auth import Action, AuthTag, new_auth_tag, parse_auth_tag
from .causality import (
    CausalityKey,
    SubspaceKey,
    SynchronizedSubspaceKey,
    new_causality_key,
    new_subspace,
)
from .dispatch import OperationModule, decode_event, extract_common, parse_event
from .envelope import Envelope
from .identity import calculate_subspace_id, validate_subspace_id, verify_subspace_id
from .operation import OperationRecord, SubspaceOperation, new_subspace_op_event
from .registry import KindRegistry, get_registry, load_registry, reset_registry

__version__ = "0.1.0"
