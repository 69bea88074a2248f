"""Filtering of whole API description documents."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from openapi_filter.closure import get_container, prune_definitions, set_container
from openapi_filter.references import DIALECTS
from openapi_filter.selector import SelectionResult, select_paths
from openapi_filter.settings import MatchMode
from openapi_filter.utilities.logging import get_logger

logger = get_logger(__name__)


class ContainerStats(BaseModel):
    """Entry counts of one schema container before and after pruning."""

    name: str
    original: int
    retained: int


class FilterResult(BaseModel):
    """A filtered document together with what was kept from the input."""

    document: dict[str, Any]
    selection: SelectionResult | None = None
    containers: list[ContainerStats] = Field(default_factory=list)

    @property
    def path_count(self) -> int:
        return len(self.document.get("paths") or {})


def filter_paths(
    document: Mapping[str, Any], retained_paths: Mapping[str, Any]
) -> FilterResult:
    """Reduce ``document`` to ``retained_paths`` and the schemas they depend on.

    The input is deep-copied first and never modified. The output always has
    a ``paths`` mapping; schema containers appear only where the input had
    them.
    """
    filtered = copy.deepcopy(dict(document))
    retained_paths = copy.deepcopy(dict(retained_paths))
    filtered["paths"] = retained_paths

    pruned = prune_definitions(filtered, retained_paths)

    stats: list[ContainerStats] = []
    for dialect in DIALECTS:
        if dialect.name not in pruned:
            continue
        original = get_container(filtered, dialect) or {}
        container = pruned[dialect.name]
        set_container(filtered, dialect, container)
        stats.append(
            ContainerStats(
                name=dialect.name, original=len(original), retained=len(container)
            )
        )
        logger.debug(
            f"Pruned {dialect.name}: {len(original)} -> {len(container)} entries"
        )

    return FilterResult(document=filtered, containers=stats)


def filter_document(
    document: Mapping[str, Any],
    selectors: Iterable[str],
    mode: MatchMode = "exact",
) -> FilterResult:
    """Keep the paths matched by ``selectors`` and every schema they need.

    Args:
        document: a parsed OpenAPI 3 or Swagger 2 document
        selectors: path names, or regular expressions when ``mode`` is ``regex``
        mode: how selectors are matched against path names

    Returns:
        the filtered document with selection details and container counts
    """
    selection = select_paths(document.get("paths"), selectors, mode=mode)
    result = filter_paths(document, selection.paths)
    result.selection = selection
    return result
