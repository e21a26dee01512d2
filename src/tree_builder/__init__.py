from tree_builder.build_tree import build_tree
from tree_builder.components import BuildConfig, EmployeeNode, NodeKind, normalize_reference
from tree_builder.errors import (
    AmbiguousResultError,
    AssetWriteError,
    ConfigurationError,
    DepthExceededError,
    GraphConsistencyError,
    InvalidInputError,
    NotFoundError,
    OrgChartError,
    ResourceExhaustedError,
)

__all__ = [
    "AmbiguousResultError",
    "AssetWriteError",
    "BuildConfig",
    "ConfigurationError",
    "DepthExceededError",
    "EmployeeNode",
    "GraphConsistencyError",
    "InvalidInputError",
    "NodeKind",
    "NotFoundError",
    "OrgChartError",
    "ResourceExhaustedError",
    "build_tree",
    "normalize_reference",
]
