"""
subspace_core.registry
----------------------
Bidirectional kind <-> operation registry.

Built once at startup from every module's {kind: operation} declarations,
then locked. After lock() the registry is read-only and may be shared by
any number of readers without further locking.

The kind -> operation mapping must be a bijection. A kind declared under two
names, or a name declared under two kinds, is a configuration error raised
at registration time, so get_kind() never has to pick between candidates.
"""

from __future__ import annotations
import os
from threading import Lock
from typing import Any, Dict, List, Optional

from .errors import (
    DuplicateKindError,
    DuplicateOperationError,
    RegistryError,
    RegistryLockedError,
)
from .logger import get_logger

log = get_logger("Subspace.Registry")


class KindRegistry:
    """
    Usage:
        registry = KindRegistry()
        registry.register_module(governance.MODULE)
        registry.lock()

        registry.get_operation(30302)   # "vote"
        registry.get_kind("vote")       # 30302
    """

    def __init__(self):
        self._operations: Dict[int, str] = {}   # kind -> operation
        self._kinds: Dict[str, int] = {}        # operation -> kind
        self._owners: Dict[int, Any] = {}       # kind -> module
        self._modules: Dict[str, Any] = {}
        self._locked = False
        self._lock = Lock()

    # ------------------------------------------------------------------
    # Registration (startup only)
    # ------------------------------------------------------------------
    def register(self, kind: int, operation: str, module: Any = None) -> None:
        with self._lock:
            if self._locked:
                raise RegistryLockedError()
            self._check(kind, operation, module)
            self._put(kind, operation, module)

    def register_module(self, module: Any) -> None:
        """
        Register every kind a module declares.

        All declarations are checked before any is applied, so a conflicting
        module leaves the registry untouched.
        """
        declarations = module.declarations()
        with self._lock:
            if self._locked:
                raise RegistryLockedError()
            if module.name in self._modules:
                raise RegistryError(f"module '{module.name}' is already registered.")

            seen: Dict[str, int] = {}
            for kind, operation in declarations.items():
                self._check(kind, operation, module)
                if operation in seen:
                    raise DuplicateOperationError(operation, seen[operation], kind)
                seen[operation] = kind

            for kind, operation in declarations.items():
                self._put(kind, operation, module)
            self._modules[module.name] = module

        log.info(f"module registered: '{module.name}' ({len(declarations)} kinds)")

    def _check(self, kind: int, operation: str, module: Any) -> None:
        existing = self._operations.get(kind)
        if existing is not None and existing != operation:
            raise DuplicateKindError(kind, existing, operation)
        bound = self._kinds.get(operation)
        if bound is not None and bound != kind:
            raise DuplicateOperationError(operation, bound, kind)
        owner = self._owners.get(kind)
        if module is not None and owner is not None and owner is not module:
            raise RegistryError(
                f"kind {kind} is already owned by module '{owner.name}'. "
                f"Cannot assign it to '{module.name}'."
            )

    def _put(self, kind: int, operation: str, module: Any) -> None:
        self._operations[kind] = operation
        self._kinds[operation] = kind
        if module is not None:
            self._owners[kind] = module

    def lock(self) -> None:
        with self._lock:
            self._locked = True

    @property
    def is_locked(self) -> bool:
        return self._locked

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_operation(self, kind: int) -> Optional[str]:
        return self._operations.get(kind)

    def get_kind(self, operation: str) -> Optional[int]:
        return self._kinds.get(operation)

    def module_for_kind(self, kind: int) -> Optional[Any]:
        return self._owners.get(kind)

    def get_module(self, name: str) -> Optional[Any]:
        return self._modules.get(name)

    def modules(self) -> List[Any]:
        return list(self._modules.values())

    def operations(self) -> Dict[int, str]:
        return dict(self._operations)

    def __contains__(self, kind: object) -> bool:
        return kind in self._operations

    def __len__(self) -> int:
        return len(self._operations)


# ----------------------------------------------------------------------
# Process-wide default
# ----------------------------------------------------------------------
_default: Optional[KindRegistry] = None
_default_lock = Lock()


def load_registry(config: dict | None = None) -> KindRegistry:
    """
    Build and lock a registry.

    Sources:
        - the built-in modules (unless config["include_builtin"] is False)
        - module schema files from config["schema_paths"] or the
          SUBSPACE_SCHEMA_PATHS environment variable (os.pathsep-separated)
    """
    from .modules import BUILTIN_MODULES
    from .schema import load_module_schema

    config = config or {}
    registry = KindRegistry()

    if config.get("include_builtin", True):
        for module in BUILTIN_MODULES:
            registry.register_module(module)

    paths = config.get("schema_paths")
    if paths is None:
        raw = os.getenv("SUBSPACE_SCHEMA_PATHS", "")
        paths = [p for p in raw.split(os.pathsep) if p]
    for path in paths:
        registry.register_module(load_module_schema(path))

    registry.lock()
    log.info(f"registry loaded: {len(registry)} kinds, {len(registry.modules())} modules")
    return registry


def get_registry() -> KindRegistry:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = load_registry()
    return _default


def reset_registry() -> None:
    global _default
    with _default_lock:
        _default = None
