from .labels import format_text, node_label, sanitize_id
from .styles import EDGE_ATTRIBUTES, NODE_STYLES, ROOT_ATTRIBUTES, NodeStyle, style_for

__all__ = [
    "EDGE_ATTRIBUTES",
    "NODE_STYLES",
    "ROOT_ATTRIBUTES",
    "NodeStyle",
    "format_text",
    "node_label",
    "sanitize_id",
    "style_for",
]
