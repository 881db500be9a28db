# subspace_core/modules/__init__.py

from ..subspace import MODULE as SUBSPACE
from .governance import MODULE as GOVERNANCE
from .common_graph import MODULE as COMMON_GRAPH
from .model_graph import MODULE as MODEL_GRAPH
from .open_research import MODULE as OPEN_RESEARCH
from .social import MODULE as SOCIAL
from .community import MODULE as COMMUNITY

BUILTIN_MODULES = (
    SUBSPACE,
    GOVERNANCE,
    COMMON_GRAPH,
    MODEL_GRAPH,
    OPEN_RESEARCH,
    SOCIAL,
    COMMUNITY,
)

__all__ = [
    "BUILTIN_MODULES",
    "SUBSPACE",
    "GOVERNANCE",
    "COMMON_GRAPH",
    "MODEL_GRAPH",
    "OPEN_RESEARCH",
    "SOCIAL",
    "COMMUNITY",
]
