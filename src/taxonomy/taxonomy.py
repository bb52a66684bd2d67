"""Directed acyclic tag graph with reflexive-transitive is-a queries.

Taxonomies are append-only while building. Sealing them makes them
read-only so concurrent dispatch lookups can share one instance.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from core.errors import CycleError, TaxonomySealedError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class Taxonomy:
    """Mapping from tag to its direct parent tags."""

    def __init__(self, edges: Iterable[tuple[str, str]] = ()) -> None:
        self._parents: dict[str, tuple[str, ...]] = {}
        self._sealed = False
        self.add_edges(edges)

    @property
    def sealed(self) -> bool:
        """Whether the taxonomy rejects further edges."""
        return self._sealed

    def add_edge(self, child: str, parent: str) -> None:
        """Register ``child`` as a direct descendant of ``parent``.

        Raises:
            TaxonomySealedError: If the taxonomy has been sealed.
            CycleError: If ``parent`` already is-a ``child``.
        """
        if self._sealed:
            raise TaxonomySealedError(
                f"Cannot add taxonomy edge {child!r} -> {parent!r}: taxonomy is sealed. "
                "Build a new taxonomy instead."
            )
        if self.is_a(parent, child):
            raise CycleError(child, parent)
        existing = self._parents.get(child, ())
        if parent in existing:
            return
        self._parents[child] = existing + (parent,)
        self._parents.setdefault(parent, ())

    def add_edges(self, edges: Iterable[tuple[str, str]]) -> None:
        """Register several edges in order, stopping at the first rejection."""
        for child, parent in edges:
            self.add_edge(child, parent)

    def seal(self) -> None:
        """Freeze the taxonomy against further edges."""
        if not self._sealed:
            self._sealed = True
            _LOGGER.info("taxonomy_sealed", tag_count=len(self._parents))

    def parents(self, tag: str) -> tuple[str, ...]:
        """Direct parents of ``tag`` in registration order."""
        return self._parents.get(tag, ())

    def tags(self) -> frozenset[str]:
        """Every tag appearing as a child or a parent."""
        return frozenset(self._parents)

    def ancestors(self, tag: str) -> frozenset[str]:
        """Every tag reachable from ``tag`` through parent edges, excluding itself."""
        return frozenset(self._distances(tag)) - {tag}

    def is_a(self, descendant: str, ancestor: str) -> bool:
        """Return True when ``descendant`` equals or derives from ``ancestor``."""
        return self.distance(descendant, ancestor) is not None

    def distance(self, descendant: str, ancestor: str) -> int | None:
        """Shortest number of parent edges from ``descendant`` to ``ancestor``.

        Returns:
            0 for the same tag, None when the tags are unrelated.
        """
        if descendant == ancestor:
            return 0
        return self._distances(descendant).get(ancestor)

    def depth(self, tag: str) -> int:
        """Length of the longest parent chain from ``tag`` to a root.

        Unknown tags are roots.
        """
        depths: dict[str, int] = {}
        stack = [tag]
        while stack:
            current = stack[-1]
            pending = [parent for parent in self.parents(current) if parent not in depths]
            if pending:
                stack.extend(pending)
                continue
            stack.pop()
            depths[current] = max((depths[parent] + 1 for parent in self.parents(current)), default=0)
        return depths[tag]

    def _distances(self, tag: str) -> dict[str, int]:
        distances = {tag: 0}
        queue = deque([tag])
        while queue:
            current = queue.popleft()
            for parent in self.parents(current):
                if parent not in distances:
                    distances[parent] = distances[current] + 1
                    queue.append(parent)
        return distances
