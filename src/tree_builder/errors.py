"""Error taxonomy shared by the tree builder and the graph renderer.

Every error aborts the operation it was raised in; callers are expected to
report the message verbatim rather than attempt a recovery.
"""

from __future__ import annotations


class OrgChartError(Exception):
    """Base class for every org chart failure."""


class ConfigurationError(OrgChartError):
    """A required limit or field mapping was left zero or empty."""


class NotFoundError(OrgChartError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"{identifier} not found")


class AmbiguousResultError(OrgChartError):
    def __init__(self, identifier: str, matches: list[str]) -> None:
        self.identifier = identifier
        self.matches = matches
        super().__init__(
            f"found {len(matches)} results but expected 1 for {identifier}: "
            + "; ".join(matches)
        )


class DepthExceededError(OrgChartError):
    def __init__(self, identifier: str, depth: int, limit: int) -> None:
        self.identifier = identifier
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"search depth {depth} exceeds max depth {limit} while resolving {identifier}"
        )


class ResourceExhaustedError(OrgChartError):
    def __init__(self, identifier: str, resolved: int, limit: int) -> None:
        self.identifier = identifier
        self.resolved = resolved
        self.limit = limit
        super().__init__(
            f"users found {resolved} reached max users {limit} before resolving {identifier}"
        )


class AssetWriteError(OrgChartError):
    """Writing a portrait to the images directory failed."""


class InvalidInputError(OrgChartError):
    """The tree handed to the renderer is malformed."""


class GraphConsistencyError(OrgChartError):
    """The tree produced a duplicate node; an upstream invariant was violated."""
