"""Selection of path entries by exact name or regular expression."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from openapi_filter.settings import MatchMode
from openapi_filter.utilities.logging import get_logger

logger = get_logger(__name__)


class PathMatch(BaseModel):
    """A retained path and the selector that kept it."""

    path: str
    selector: str


class SelectionResult(BaseModel):
    """Outcome of matching selectors against a document's paths."""

    mode: MatchMode
    paths: dict[str, Any] = Field(default_factory=dict)
    matches: list[PathMatch] = Field(default_factory=list)
    unmatched: list[str] = Field(default_factory=list)
    total_paths: int = 0


def _select_exact(
    paths: Mapping[str, Any], selectors: list[str], result: SelectionResult
) -> None:
    for selector in dict.fromkeys(selectors):
        if selector in paths:
            result.paths[selector] = paths[selector]
            result.matches.append(PathMatch(path=selector, selector=selector))
        else:
            result.unmatched.append(selector)


def _compile_patterns(
    selectors: list[str], result: SelectionResult
) -> list[tuple[str, re.Pattern[str]]]:
    patterns: list[tuple[str, re.Pattern[str]]] = []
    for selector in dict.fromkeys(selectors):
        try:
            patterns.append((selector, re.compile(selector)))
        except re.error as e:
            logger.warning(f"Invalid regex pattern '{selector}': {e}")
            result.unmatched.append(selector)
    return patterns


def _select_regex(
    paths: Mapping[str, Any], selectors: list[str], result: SelectionResult
) -> None:
    patterns = _compile_patterns(selectors, result)
    hits: set[str] = set()

    for path, item in paths.items():
        matching = [selector for selector, regex in patterns if regex.search(path)]
        if not matching:
            continue
        result.paths[path] = item
        result.matches.append(PathMatch(path=path, selector=matching[0]))
        hits.update(matching)

    result.unmatched.extend(
        selector for selector, _ in patterns if selector not in hits
    )


def select_paths(
    paths: Mapping[str, Any] | None,
    selectors: Iterable[str],
    mode: MatchMode = "exact",
) -> SelectionResult:
    """Pick the path entries matched by ``selectors``.

    In ``exact`` mode a selector keeps the path with exactly that key, in
    selector order. In ``regex`` mode every path, in document order, is kept
    when any pattern matches somewhere in it; invalid patterns are reported as
    unmatched rather than raised.

    Args:
        paths: the document's ``paths`` mapping; None or a non-mapping value
            is treated as empty
        selectors: path names or regular expressions
        mode: ``exact`` or ``regex``

    Returns:
        the retained paths, which selector kept each one, and the selectors
        that kept nothing
    """
    if mode not in ("exact", "regex"):
        raise ValueError(f"Unknown match mode: {mode}")

    if not isinstance(paths, Mapping):
        paths = {}
    selectors = list(selectors)
    result = SelectionResult(mode=mode, total_paths=len(paths))

    if mode == "regex":
        _select_regex(paths, selectors, result)
    else:
        _select_exact(paths, selectors, result)

    logger.debug(
        f"Selected {len(result.paths)} of {result.total_paths} paths "
        f"({len(result.unmatched)} selector(s) unmatched)"
    )
    return result
