"""
TreeBuilder - recursively resolves an employee and everyone below them.

Starting from one directory identifier, each person is looked up exactly
once, their direct-report references are normalized to identifiers and
resolved in turn, depth-first. The result is an immutable
:class:`EmployeeNode` tree with every level's reports sorted by name.

Two hard limits bound a build:

    max_depth        deepest level resolved, the root being level 1
    max_total_nodes  number of directory records resolved in total

Usage (library):
    from directory_connector import DirectoryConnector
    from tree_builder import BuildConfig, build_tree

    config = BuildConfig(max_depth=5, max_total_nodes=500)
    with DirectoryConnector(uri=..., username=..., password=..., base_dn=...) as directory:
        root = build_tree("jdoe", config, directory)
"""

import logging

from tree_builder.components.config import BuildConfig
from tree_builder.components.node import EmployeeNode
from tree_builder.components.resolver import Directory, ResolutionBudget, resolve_employee
from tree_builder.errors import ConfigurationError

logger = logging.getLogger(__name__)


def build_tree(root_identifier: str, config: BuildConfig, directory: Directory) -> EmployeeNode:
    """Resolve *root_identifier* into a complete employee tree.

    Raises:
        ConfigurationError:     A limit or field mapping is unset.
        NotFoundError:          Some identifier matched no record.
        AmbiguousResultError:   Some identifier matched several records.
        DepthExceededError:     The hierarchy is deeper than ``max_depth``.
        ResourceExhaustedError: More than ``max_total_nodes`` people.
        AssetWriteError:        A portrait could not be written.
    """
    if not root_identifier:
        raise ConfigurationError("root identifier cannot be empty")
    config.validate_limits()

    budget = ResolutionBudget(limit=config.max_total_nodes)
    root = resolve_employee(directory, root_identifier, config, budget)
    logger.info("Resolved %d people below and including %s", budget.resolved, root.name)
    return root
