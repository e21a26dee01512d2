"""
GraphRenderer - serializes an employee tree into a Graphviz DOT description.

The root is emitted first, then every report depth-first in the tree's own
(name-sorted) order: the edge from the manager, the report's node, then the
report's own reports. Managers are drawn as large darker circles and
individual contributors as boxes; see :mod:`graph_renderer.components.styles`.

Usage (library):
    from graph_renderer import render_graph
    dot = render_graph("Engineering", root)
"""

import logging

import pydot

from tree_builder.components.node import EmployeeNode
from tree_builder.errors import GraphConsistencyError, InvalidInputError

from graph_renderer.components.labels import node_label, sanitize_id
from graph_renderer.components.styles import EDGE_ATTRIBUTES, ROOT_ATTRIBUTES, style_for

logger = logging.getLogger(__name__)

BLANK_TITLE = " "


def default_title(root: EmployeeNode) -> str:
    return f"Org Chart - {root.name}"


def render_graph(title: str, root: EmployeeNode) -> str:
    """Return the DOT description of *root* and everyone below it.

    Nodes are keyed by ``EmployeeNode.key``; two people sharing a key cannot
    both be drawn and raise :class:`GraphConsistencyError`.

    Raises:
        InvalidInputError:     The root has no name.
        GraphConsistencyError: Two nodes share a key.
    """
    if not root.name:
        raise InvalidInputError("root name cannot be empty")
    if not title:
        title = default_title(root)

    graph = pydot.Dot(sanitize_id(title), graph_type="digraph")
    graph.set("label", sanitize_id(title))
    for name, value in ROOT_ATTRIBUTES.items():
        graph.set(name, value)

    emitted: set[str] = set()

    def _add_node(employee: EmployeeNode) -> str:
        node_id = sanitize_id(employee.key)
        if node_id in emitted:
            raise GraphConsistencyError(
                f"node {node_id} emitted twice; keys must be unique within a tree"
            )
        emitted.add(node_id)

        employee_title = employee.title
        if not employee_title:
            logger.warning("empty title for user %s", employee.name)
            employee_title = BLANK_TITLE

        logger.debug("Adding %s node %s", employee.kind, employee.name)
        label = node_label(employee.name, employee_title, employee.image)
        graph.add_node(pydot.Node(node_id, **style_for(employee.kind).attributes(label)))
        return node_id

    def _walk(parent_id: str, manager: EmployeeNode) -> None:
        for report in manager.direct_reports:
            if not report.name:
                raise InvalidInputError(f"report of {manager.name} has no name")
            logger.debug("Adding Edge %s %s", manager.name, report.name)
            graph.add_edge(pydot.Edge(parent_id, sanitize_id(report.key), **EDGE_ATTRIBUTES))
            report_id = _add_node(report)
            _walk(report_id, report)

    _walk(_add_node(root), root)
    return graph.to_string()
