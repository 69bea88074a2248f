"""Reading and writing API description documents and selector files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from openapi_filter.exceptions import DocumentError, SelectorsFileError
from openapi_filter.utilities.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def load_document(path: str | Path) -> dict[str, Any]:
    """Load an OpenAPI or Swagger document from a JSON or YAML file.

    YAML is chosen by the ``.yaml``/``.yml`` suffix; anything else is read as JSON.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            if _is_yaml(path):
                document = yaml.safe_load(f)
            else:
                document = json.load(f)
    except OSError as e:
        raise DocumentError(f"Could not read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentError(f"Could not parse {path}: {e}") from e

    if not isinstance(document, dict):
        raise DocumentError(
            f"Expected a mapping at the top level of {path}, got {type(document).__name__}"
        )
    logger.debug(f"Loaded {path} ({len(document.get('paths') or {})} paths)")
    return document


def dump_document(document: Any, path: str | Path, indent: int = 2) -> None:
    """Write ``document`` as JSON, or as YAML when the suffix asks for it.

    Key order is kept as is and non-ASCII text is written unescaped. The file
    is only touched once the whole document has been serialized.
    """
    path = Path(path)
    try:
        if _is_yaml(path):
            text = yaml.safe_dump(
                document,
                allow_unicode=True,
                sort_keys=False,
                indent=indent or None,
            )
        else:
            text = (
                json.dumps(
                    document,
                    ensure_ascii=False,
                    indent=indent or None,
                    default=str,
                )
                + "\n"
            )
    except (ValueError, yaml.YAMLError) as e:
        raise DocumentError(f"Could not serialize document for {path}: {e}") from e

    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise DocumentError(f"Could not write {path}: {e}") from e


def parse_selectors(text: str) -> list[str]:
    """Split selector file content into selectors, skipping blanks and ``#`` comments."""
    selectors = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            selectors.append(line)
    return selectors


def read_selectors_file(path: str | Path) -> list[str]:
    """Read one selector per line from ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SelectorsFileError(f"Could not read selectors file {path}: {e}") from e
    return parse_selectors(text)
