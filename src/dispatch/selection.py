"""Filter-then-most-specific selection shared by registries and lookup maps."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Protocol, Sequence, TypeVar

from dispatch.criteria import Criterion
from dispatch.specificity import compare_criteria
from taxonomy.taxonomy import Taxonomy
from versions.version_vector import VersionVector


class Candidate(Protocol):
    """Anything carrying a criterion and a registration index."""

    @property
    def criterion(self) -> Criterion: ...

    @property
    def index(self) -> int: ...


CandidateT = TypeVar("CandidateT", bound=Candidate)


def criterion_matches(
    taxonomy: Taxonomy,
    criterion: Criterion,
    family: str,
    family_version: VersionVector | None,
    version: VersionVector | None,
) -> bool:
    """Return True when a criterion accepts the query."""
    return taxonomy.is_a(family, criterion.family) and criterion.version_matches(
        family_version, version
    )


def ordered_matches(
    taxonomy: Taxonomy,
    candidates: Sequence[CandidateT],
    family: str,
    family_version: VersionVector | None,
    version: VersionVector | None,
) -> list[CandidateT]:
    """Return matching candidates, most specific first.

    Exact ties keep the earliest registered candidate first, so repeated
    calls against the same candidates always agree.
    """
    matching = [
        candidate
        for candidate in candidates
        if criterion_matches(taxonomy, candidate.criterion, family, family_version, version)
    ]

    def _order(left: CandidateT, right: CandidateT) -> int:
        specificity = compare_criteria(taxonomy, family, left.criterion, right.criterion)
        return -specificity or left.index - right.index

    return sorted(matching, key=cmp_to_key(_order))


def best_match(
    taxonomy: Taxonomy,
    candidates: Sequence[CandidateT],
    family: str,
    family_version: VersionVector | None,
    version: VersionVector | None,
) -> CandidateT | None:
    """Return the single most specific matching candidate, or None."""
    ranked = ordered_matches(taxonomy, candidates, family, family_version, version)
    return ranked[0] if ranked else None
