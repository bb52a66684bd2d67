"""Unit tests for the tag taxonomy."""

from __future__ import annotations

import pytest

from core.errors import CycleError, TaxonomySealedError
from taxonomy.taxonomy import Taxonomy


def test_is_a_is_transitive(distro_taxonomy: Taxonomy) -> None:
    """Descendants should derive from every ancestor along the chain."""
    assert distro_taxonomy.is_a("ubuntu", "linux")


def test_is_a_is_not_symmetric(distro_taxonomy: Taxonomy) -> None:
    """Ancestors should not derive from their descendants."""
    assert not distro_taxonomy.is_a("linux", "ubuntu")


def test_is_a_is_reflexive_for_unknown_tags(distro_taxonomy: Taxonomy) -> None:
    """Every tag should derive from itself, even outside the graph."""
    assert distro_taxonomy.is_a("windows", "windows") and not distro_taxonomy.is_a(
        "windows", "linux"
    )


def test_add_edge_rejects_cycle_without_mutation() -> None:
    """Cycle-creating edges should be rejected and leave parents unchanged."""
    taxonomy = Taxonomy([("ubuntu", "debian"), ("debian", "linux")])

    with pytest.raises(CycleError) as raised:
        taxonomy.add_edge("linux", "ubuntu")

    assert raised.value.child == "linux" and taxonomy.parents("linux") == ()


def test_add_edge_rejects_self_edge() -> None:
    """A tag cannot be its own parent."""
    with pytest.raises(CycleError):
        Taxonomy().add_edge("linux", "linux")


def test_add_edge_is_idempotent() -> None:
    """Repeated edges should not duplicate parents."""
    taxonomy = Taxonomy([("ubuntu", "debian"), ("ubuntu", "debian")])
    assert taxonomy.parents("ubuntu") == ("debian",)


def test_depth_uses_longest_parent_chain() -> None:
    """Depth should follow the longest path to a root in a diamond."""
    taxonomy = Taxonomy(
        [("mint", "ubuntu"), ("ubuntu", "debian"), ("debian", "linux"), ("mint", "linux")]
    )
    assert (taxonomy.depth("mint"), taxonomy.depth("linux"), taxonomy.depth("unknown")) == (3, 0, 0)


def test_distance_uses_shortest_parent_chain() -> None:
    """Distance should follow the shortest path and be None when unrelated."""
    taxonomy = Taxonomy(
        [("mint", "ubuntu"), ("ubuntu", "debian"), ("debian", "linux"), ("mint", "linux")]
    )
    assert (
        taxonomy.distance("mint", "linux"),
        taxonomy.distance("mint", "mint"),
        taxonomy.distance("linux", "mint"),
    ) == (1, 0, None)


def test_tags_include_children_and_parents(distro_taxonomy: Taxonomy) -> None:
    """Tag enumeration should cover both sides of every edge."""
    assert distro_taxonomy.tags() == frozenset({"ubuntu", "debian", "linux", "centos"})


def test_ancestors_exclude_the_tag_itself(distro_taxonomy: Taxonomy) -> None:
    """Ancestors should list every reachable parent tag."""
    assert distro_taxonomy.ancestors("ubuntu") == frozenset({"debian", "linux"})


def test_sealed_taxonomy_rejects_edges(distro_taxonomy: Taxonomy) -> None:
    """Sealing should make the taxonomy read-only."""
    with pytest.raises(TaxonomySealedError):
        distro_taxonomy.add_edge("mint", "ubuntu")

    assert distro_taxonomy.sealed
