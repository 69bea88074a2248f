"""Dependency closure over schema containers.

Given the path entries retained from a document, find every named schema
(or Swagger 2 definition) they need, directly or through other schemas, and
prune each container down to exactly that set.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

from openapi_filter.references import (
    DIALECTS,
    Dialect,
    UsedNames,
    collect_references,
)
from openapi_filter.utilities.logging import get_logger

logger = get_logger(__name__)

Container = dict[str, Any]


def get_container(document: Mapping[str, Any], dialect: Dialect) -> Container | None:
    """Return the dialect's container from ``document``, or None if the
    document does not carry one."""
    node: Any = document
    for key in dialect.container_path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    if not isinstance(node, Mapping):
        return None
    return node  # type: ignore[return-value]


def set_container(
    document: dict[str, Any], dialect: Dialect, container: Container
) -> None:
    """Store ``container`` at the dialect's location, creating parents as needed."""
    *parents, leaf = dialect.container_path
    node = document
    for key in parents:
        node = node.setdefault(key, {})
    node[leaf] = container


def compute_closure(
    container: Mapping[str, Any], seeds: Iterable[str], dialect: Dialect
) -> set[str]:
    """Return the names in ``container`` reachable from ``seeds``.

    Seeds and discovered names missing from the container are dangling and
    are neither expanded nor returned. Each name is queued at most once, so
    cycles terminate.
    """
    reached: set[str] = set()
    queue: deque[str] = deque()

    def visit(name: str) -> None:
        if name in reached:
            return
        if name not in container:
            logger.debug(f"Dropping dangling {dialect.name} reference '{name}'")
            return
        reached.add(name)
        queue.append(name)

    for name in seeds:
        visit(name)

    while queue:
        name = queue.popleft()
        found = collect_references(container[name], dialects=[dialect])
        for child in found[dialect.name]:
            visit(child)

    return reached


def prune_container(container: Mapping[str, Any], names: set[str]) -> Container:
    """Keep the entries of ``container`` named in ``names``, in container order."""
    return {name: body for name, body in container.items() if name in names}


def prune_definitions(
    document: Mapping[str, Any],
    retained_paths: Mapping[str, Any],
    dialects: Iterable[Dialect] = DIALECTS,
) -> dict[str, Container]:
    """Prune every schema container of ``document`` to what ``retained_paths`` need.

    Dialects are handled independently: a reference into one container never
    keeps an entry of another. Containers absent from the document are left
    out of the result.

    Args:
        document: the document holding the original containers
        retained_paths: the path entries being kept
        dialects: the container dialects to prune

    Returns:
        pruned containers keyed by dialect name
    """
    dialects = tuple(dialects)
    used: UsedNames = collect_references(retained_paths, dialects=dialects)

    pruned: dict[str, Container] = {}
    for dialect in dialects:
        container = get_container(document, dialect)
        if container is None:
            continue
        seeds = used[dialect.name]
        logger.debug(
            f"Seeded {len(seeds)} {dialect.name} reference(s) from retained paths"
        )
        names = compute_closure(container, seeds, dialect)
        pruned[dialect.name] = prune_container(container, names)
    return pruned
