import logging
import re
from dataclasses import dataclass
from typing import Protocol

from directory_connector import DirectoryRecord

from tree_builder.errors import (
    AmbiguousResultError,
    DepthExceededError,
    NotFoundError,
    ResourceExhaustedError,
)

from .assets import save_portrait
from .config import BuildConfig
from .node import EmployeeNode, sort_reports

logger = logging.getLogger(__name__)

_UNESCAPED_COMMA = re.compile(r"(?<!\\),")


class Directory(Protocol):
    def search(
        self, identifier: str, search_fields: list[str], attributes: list[str]
    ) -> list[DirectoryRecord]: ...


@dataclass
class ResolutionBudget:
    """Records resolved so far in one build, shared by every recursive call."""

    limit: int
    resolved: int = 0


def normalize_reference(reference: str) -> str:
    """Strip a directory reference down to the identifier it names.

    ``CN=Jane Doe,OU=Staff,DC=corp`` becomes ``Jane Doe``; escaped commas
    inside the first component are kept. A value without ``=`` is taken to
    be a bare identifier already.
    """
    first = _UNESCAPED_COMMA.split(reference, maxsplit=1)[0]
    _, separator, value = first.partition("=")
    bare = value if separator else first
    return bare.replace("\\,", ",").strip()


def resolve_employee(
    directory: Directory,
    identifier: str,
    config: BuildConfig,
    budget: ResolutionBudget,
    depth: int = 1,
) -> EmployeeNode:
    """Resolve *identifier* and, recursively, everyone reporting to it.

    The first failure anywhere in the subtree propagates unchanged; no
    partial tree is ever returned.
    """
    logger.debug(
        "On search depth %d of %d & user %d of %d.",
        depth, config.max_depth, budget.resolved, budget.limit,
    )
    if budget.resolved >= budget.limit:
        raise ResourceExhaustedError(identifier, budget.resolved, budget.limit)
    if depth > config.max_depth:
        raise DepthExceededError(identifier, depth, config.max_depth)

    record = _lookup_one(directory, identifier, config)
    budget.resolved += 1

    reports: list[EmployeeNode] = []
    for reference in record.get_values(config.direct_reports_field):
        report_id = normalize_reference(reference)
        logger.debug("Found direct report %s and cleansed to %s", reference, report_id)
        reports.append(resolve_employee(directory, report_id, config, budget, depth + 1))

    name = record.get_value(config.display_name_field)
    if not name:
        logger.warning("no %s for %s, using the identifier", config.display_name_field, identifier)
        name = identifier

    key = record.get_value(config.key_field) or identifier

    image = None
    if config.image_field:
        payload = record.get_raw_value(config.image_field)
        if payload:
            image = save_portrait(payload, name, config.images_dir, key)

    return EmployeeNode(
        name=name,
        title=record.get_value(config.title_field),
        image=image,
        identifier=key,
        direct_reports=sort_reports(reports),
    )


def _lookup_one(directory: Directory, identifier: str, config: BuildConfig) -> DirectoryRecord:
    records = directory.search(identifier, config.search_fields, config.attributes)

    if not records:
        raise NotFoundError(identifier)
    if len(records) > 1:
        for record in records:
            logger.warning(
                "User %s - %s found?",
                record.get_values(config.key_field),
                record.get_values(config.display_name_field),
            )
        raise AmbiguousResultError(identifier, [record.dn for record in records])

    logger.debug("Parsing %s", identifier)
    return records[0]
