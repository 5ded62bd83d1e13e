"""Flattening of the STEP assembly tree into named, placed solids.

The walker never talks to the kernel directly. Everything it needs from the
document (reference resolution, names, locations, components, shapes and the
transform algebra) is asked from a ``ShapeTree`` provider, which keeps the
traversal order and naming rules testable without a STEP file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Protocol, Sequence

from . import config

logger = logging.getLogger(__name__)


class ShapeTree(Protocol):
    """Lookup capability over a labelled shape tree."""

    def free_labels(self) -> Sequence[Any]: ...

    def referred(self, label: Any) -> Any: ...

    def name(self, label: Any) -> str: ...

    def location(self, label: Any) -> Any: ...

    def components(self, label: Any) -> Sequence[Any]: ...

    def shape(self, label: Any) -> Any: ...

    def identity(self) -> Any: ...

    def compose(self, parent: Any, local: Any) -> Any: ...

    def is_solid(self, shape: Any) -> bool: ...

    def apply(self, shape: Any, location: Any) -> Any: ...


@dataclass(frozen=True)
class NamedSolid:
    """A solid placed in world coordinates and its full hierarchical name."""
    solid: Any
    name: str


class TraversalContext:
    """State shared by every node of one traversal.

    Unnamed nodes draw their fallback name from a single counter, so ids are
    unique across the whole document rather than per sibling group.
    """

    def __init__(self, tree: ShapeTree, first_id: int = config.FIRST_FALLBACK_ID):
        self.tree = tree
        self._next_id = first_id

    def next_id(self) -> int:
        current = self._next_id
        self._next_id += 1
        return current


def iter_named_solids(
    tree: ShapeTree,
    labels: Optional[Iterable[Any]] = None,
    context: Optional[TraversalContext] = None,
) -> Iterator[NamedSolid]:
    """Yield named solids depth-first, starting at ``labels`` or the free shapes."""
    if context is None:
        context = TraversalContext(tree)
    if labels is None:
        labels = tree.free_labels()

    root_location = tree.identity()
    for label in labels:
        yield from _walk(context, label, root_location, "")


def flatten(tree: ShapeTree, labels: Optional[Iterable[Any]] = None) -> List[NamedSolid]:
    """Return every solid of the tree in traversal order."""
    named_solids = list(iter_named_solids(tree, labels))
    logger.info("Found %d solids", len(named_solids))
    return named_solids


def _walk(context: TraversalContext, label: Any, parent_location: Any, prefix: str) -> Iterator[NamedSolid]:
    tree = context.tree

    # Instances are named after their definition but placed by their own location
    referred_label = tree.referred(label)
    name = tree.name(referred_label)
    if not name:
        name = str(context.next_id())
    full_name = f"{prefix}{config.PATH_SEPARATOR}{name}"

    location = tree.compose(parent_location, tree.location(label))

    components = tree.components(referred_label)
    if components:
        logger.debug("%s is an assembly with %d components", full_name, len(components))
        for component in components:
            yield from _walk(context, component, location, full_name)
        return

    shape = tree.shape(referred_label)
    if tree.is_solid(shape):
        logger.debug("%s is a solid", full_name)
        yield NamedSolid(tree.apply(shape, location), full_name)
    else:
        logger.debug("Skipping %s: not a solid", full_name)
