from .config import BuildConfig
from .node import EmployeeNode, NodeKind
from .resolver import ResolutionBudget, normalize_reference

__all__ = [
    "BuildConfig",
    "EmployeeNode",
    "NodeKind",
    "ResolutionBudget",
    "normalize_reference",
]
