from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(StrEnum):
    LEAF = "leaf"
    MANAGER = "manager"


class EmployeeNode(BaseModel):
    """One person in the organization and everyone reporting to them.

    ``identifier`` is the directory key the node was resolved from. Hand-built
    trees may leave it empty, in which case ``name`` doubles as the key.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    title: str = ""
    image: str | None = None
    identifier: str = ""
    direct_reports: Tuple["EmployeeNode", ...] = Field(default_factory=tuple)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.MANAGER if self.direct_reports else NodeKind.LEAF

    @property
    def key(self) -> str:
        return self.identifier or self.name

    def walk(self) -> Iterator["EmployeeNode"]:
        """Yield this node and its reports depth-first, in report order."""
        yield self
        for report in self.direct_reports:
            yield from report.walk()

    def size(self) -> int:
        return sum(1 for _ in self.walk())

    def depth(self) -> int:
        if not self.direct_reports:
            return 1
        return 1 + max(report.depth() for report in self.direct_reports)


def sort_reports(reports: list[EmployeeNode]) -> Tuple[EmployeeNode, ...]:
    """Order reports by display name; equal names keep lookup order."""
    return tuple(sorted(reports, key=lambda report: report.name))
