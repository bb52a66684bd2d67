"""Specificity order over matching criteria.

When several criteria match one query, the winner is the criterion with the
greatest ``(family, family_version, version)`` specificity, compared
component by component with the family most significant. Family specificity
prefers the tag closest to the queried family, then the deepest tag in the
taxonomy. Criteria that tie on every component rank equally; callers break
those ties by registration order.
"""

from __future__ import annotations

from core.errors import DispatchError
from dispatch.criteria import Criterion
from taxonomy.taxonomy import Taxonomy
from versions.version_spec import compare_spec_specificity


def family_specificity(taxonomy: Taxonomy, query_family: str, entry_family: str) -> tuple[int, int]:
    """Rank a criterion family relative to the queried family.

    Args:
        taxonomy: Taxonomy providing depth and distance.
        query_family: Family from the query.
        entry_family: Family named by the criterion; must be an ancestor
            of ``query_family`` or the same tag.

    Returns:
        ``(-distance, depth)``; larger tuples are more specific.
    """
    distance = taxonomy.distance(query_family, entry_family)
    if distance is None:
        raise DispatchError(
            f"Family {entry_family!r} is not an ancestor of {query_family!r}; "
            "only matching criteria can be ranked."
        )
    return (-distance, taxonomy.depth(entry_family))


def compare_criteria(
    taxonomy: Taxonomy, query_family: str, left: Criterion, right: Criterion
) -> int:
    """Compare two matching criteria for one query.

    Returns:
        A positive number when ``left`` is more specific, negative when
        ``right`` is, and 0 on an exact tie.
    """
    left_family = family_specificity(taxonomy, query_family, left.family)
    right_family = family_specificity(taxonomy, query_family, right.family)
    if left_family != right_family:
        return 1 if left_family > right_family else -1
    family_version_order = compare_spec_specificity(left.family_version, right.family_version)
    if family_version_order:
        return family_version_order
    return compare_spec_specificity(left.version, right.version)
