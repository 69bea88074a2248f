"""Discovery of in-document schema references.

A reference is any mapping holding a ``$ref`` key with a string value. Only
references into the document's own schema containers are classified; external
files, URLs and references into other component types are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

REF_KEY = "$ref"

UsedNames = dict[str, set[str]]


class Dialect(BaseModel):
    """A named schema container and the reference prefix that points into it."""

    model_config = ConfigDict(frozen=True)

    name: str
    container_path: tuple[str, ...]
    ref_prefix: str

    def ref_name(self, ref: str) -> str | None:
        """Return the entry name a reference points to, or None if the
        reference does not target this dialect's container."""
        if ref.startswith(self.ref_prefix):
            return ref[len(self.ref_prefix) :]
        return None


COMPONENT_SCHEMAS = Dialect(
    name="schemas",
    container_path=("components", "schemas"),
    ref_prefix="#/components/schemas/",
)
DEFINITIONS = Dialect(
    name="definitions",
    container_path=("definitions",),
    ref_prefix="#/definitions/",
)
DIALECTS: tuple[Dialect, ...] = (COMPONENT_SCHEMAS, DEFINITIONS)


def iter_refs(node: Any) -> Iterator[str]:
    """Yield every ``$ref`` string found anywhere below ``node``.

    Containers are tracked by identity, so a subtree shared between several
    parents (or reachable from itself, as YAML aliases allow) is walked once.
    """
    seen: set[int] = set()

    def walk(node: Any) -> Iterator[str]:
        if isinstance(node, Mapping):
            if id(node) in seen:
                return
            seen.add(id(node))
            ref = node.get(REF_KEY)
            if isinstance(ref, str):
                yield ref
            for value in node.values():
                yield from walk(value)
        elif isinstance(node, list | tuple):
            if id(node) in seen:
                return
            seen.add(id(node))
            for value in node:
                yield from walk(value)

    yield from walk(node)


def collect_references(
    node: Any,
    used: UsedNames | None = None,
    dialects: Iterable[Dialect] = DIALECTS,
) -> UsedNames:
    """Add the names referenced below ``node`` to ``used``.

    Args:
        node: any subtree of a document; scalars and None contribute nothing
        used: accumulator keyed by dialect name, grown in place
        dialects: the dialects to classify references into

    Returns:
        the accumulator, so callers can start from an empty one
    """
    if used is None:
        used = {}
    dialects = tuple(dialects)
    for dialect in dialects:
        used.setdefault(dialect.name, set())

    for ref in iter_refs(node):
        for dialect in dialects:
            name = dialect.ref_name(ref)
            if name is not None:
                used[dialect.name].add(name)
                break
    return used
