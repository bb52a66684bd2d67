"""Static per-platform value lookup.

A lookup map binds ``(family, family_version)`` keys to plain values and
picks the most specific matching key with the same ordering the dispatch
registry uses. A missing match is a normal outcome and returns None.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from core.errors import LookupKeyError
from core.yaml_document import validate_keys
from dispatch.criteria import LookupEntry, PlatformKey
from dispatch.selection import best_match
from taxonomy.taxonomy import Taxonomy
from versions.version_vector import as_version_vector

LookupSource = Union[Mapping[object, object], Iterable[tuple[object, object]]]
_RECORD_KEY_FIELDS = {"family", "family_version"}


class LookupMap:
    """Immutable ordered collection of platform-keyed values."""

    def __init__(self, entries: Iterable[LookupEntry] = ()) -> None:
        self._entries = tuple(entries)

    @classmethod
    def build(cls, entries: LookupSource) -> LookupMap:
        """Build a map from keys to values.

        Keys may be ``PlatformKey`` instances, bare family tags,
        ``(family, family_version)`` tuples, or, in pair form,
        ``{"family": ..., "family_version": ...}`` records. Versions take
        config-style values. Insertion order is the tie-break order.

        Raises:
            LookupKeyError: If a key does not name a family.
        """
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        return cls(
            LookupEntry(key=as_platform_key(raw_key), value=value, index=index)
            for index, (raw_key, value) in enumerate(pairs)
        )

    @property
    def entries(self) -> tuple[LookupEntry, ...]:
        """Entries in insertion order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def families(self) -> tuple[str, ...]:
        """Distinct key families in insertion order."""
        return tuple(dict.fromkeys(entry.key.family for entry in self._entries))

    def lookup_entry(
        self, taxonomy: Taxonomy, family: str, family_version: object = None
    ) -> LookupEntry | None:
        """Return the most specific matching entry, or None."""
        return best_match(
            taxonomy, self._entries, family, as_version_vector(family_version), None
        )

    def lookup(self, taxonomy: Taxonomy, family: str, family_version: object = None) -> object:
        """Return the value of the most specific matching key, or None."""
        entry = self.lookup_entry(taxonomy, family, family_version)
        return None if entry is None else entry.value


def build(entries: LookupSource) -> LookupMap:
    """Build a lookup map; see ``LookupMap.build``."""
    return LookupMap.build(entries)


def as_platform_key(raw_key: object) -> PlatformKey:
    """Coerce a caller-supplied map key into a ``PlatformKey``.

    Raises:
        LookupKeyError: If the key does not name a family.
    """
    if isinstance(raw_key, PlatformKey):
        return raw_key
    if isinstance(raw_key, str):
        return PlatformKey(raw_key)
    if isinstance(raw_key, tuple) and len(raw_key) == 2 and isinstance(raw_key[0], str):
        return PlatformKey(raw_key[0], raw_key[1])
    if isinstance(raw_key, Mapping) and isinstance(raw_key.get("family"), str):
        validate_keys(raw_key, _RECORD_KEY_FIELDS, f"lookup key {dict(raw_key)!r}", LookupKeyError)
        return PlatformKey(raw_key["family"], raw_key.get("family_version"))
    raise LookupKeyError(
        f"Invalid lookup key {raw_key!r}: expected a PlatformKey, a family tag, "
        "a (family, family_version) tuple, or a {'family': ..., 'family_version': ...} record."
    )
