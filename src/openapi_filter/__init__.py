"""openapi-filter - reduce API descriptions to the paths you need."""

from importlib.metadata import version

import openapi_filter.settings
from openapi_filter.closure import compute_closure, prune_definitions
from openapi_filter.document import FilterResult, filter_document, filter_paths
from openapi_filter.references import (
    COMPONENT_SCHEMAS,
    DEFINITIONS,
    Dialect,
    collect_references,
)
from openapi_filter.selector import SelectionResult, select_paths

__version__ = version("openapi-filter")
__all__ = [
    "COMPONENT_SCHEMAS",
    "DEFINITIONS",
    "Dialect",
    "FilterResult",
    "SelectionResult",
    "collect_references",
    "compute_closure",
    "filter_document",
    "filter_paths",
    "prune_definitions",
    "select_paths",
]
