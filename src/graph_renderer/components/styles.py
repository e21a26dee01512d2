from dataclasses import dataclass

from tree_builder.components.node import NodeKind

EDGE_ATTRIBUTES: dict[str, str] = {
    "penwidth": "3",
}

ROOT_ATTRIBUTES: dict[str, str] = {
    "bgcolor": "transparent",
    "labelloc": "t",
    "fontsize": "50",
    "rankdir": "LR",
    "overlap": "false",
    "splines": "ortho",
    "nodesep": "2",
    "ranksep": "4",
}


@dataclass(frozen=True)
class NodeStyle:
    shape: str
    width: str
    height: str
    fillcolor: str
    fixedsize: str = "shape"
    penwidth: str = "3"
    style: str = "filled"

    def attributes(self, label: str) -> dict[str, str]:
        return {
            "shape": self.shape,
            "label": label,
            "fixedsize": self.fixedsize,
            "width": self.width,
            "height": self.height,
            "penwidth": self.penwidth,
            "fillcolor": self.fillcolor,
            "style": self.style,
        }


NODE_STYLES: dict[NodeKind, NodeStyle] = {
    NodeKind.LEAF: NodeStyle(shape="box", width="8", height="4", fillcolor="#CCCCCC88"),
    NodeKind.MANAGER: NodeStyle(shape="circle", width="5", height="5", fillcolor="#88888888"),
}


def style_for(kind: NodeKind) -> NodeStyle:
    return NODE_STYLES[kind]
