"""Version-aware dispatch registry.

A registry holds ``(criterion, handler)`` entries in registration order plus
an optional default handler. ``select`` filters entries against a query,
invokes the most specific match, and falls back to the default handler.

Registries are built during setup and then sealed. Sealed registries hold no
mutable state, so ``select`` may run from any number of threads.
"""

from __future__ import annotations

from typing import Callable

from core.constants import DEFAULT_REGISTRY_NAME
from core.errors import DispatchNotFound, DuplicateDefaultError, RegistrySealedError
from core.logging_config import get_logger
from core.types import REGISTRY_STATE_TRANSITIONS, RegistryState
from dispatch.criteria import Criterion, Handler, RegistryEntry
from dispatch.selection import best_match, ordered_matches
from taxonomy.taxonomy import Taxonomy
from versions.version_vector import as_version_vector

_LOGGER = get_logger(__name__)


class DispatchRegistry:
    """Ordered criterion-to-handler registry with an optional default."""

    def __init__(self, name: str = DEFAULT_REGISTRY_NAME) -> None:
        self._name = name
        self._entries: list[RegistryEntry] = []
        self._default: Handler | None = None
        self._state: RegistryState = "building"

    @property
    def name(self) -> str:
        """Registry name used in diagnostics."""
        return self._name

    @property
    def state(self) -> RegistryState:
        """Lifecycle state, ``building`` or ``frozen``."""
        return self._state

    @property
    def entries(self) -> tuple[RegistryEntry, ...]:
        """Registered entries in registration order."""
        return tuple(self._entries)

    @property
    def default_handler(self) -> Handler | None:
        """The default handler, when one is registered."""
        return self._default

    def families(self) -> tuple[str, ...]:
        """Distinct criterion families in first-registration order."""
        return tuple(dict.fromkeys(entry.criterion.family for entry in self._entries))

    def register(self, criterion: Criterion, handler: Handler) -> RegistryEntry:
        """Append one entry.

        Args:
            criterion: Dispatch key served by ``handler``.
            handler: Callable invoked as ``handler(family, family_version,
                version, *args, **kwargs)``.

        Returns:
            The stored entry.

        Raises:
            RegistrySealedError: If the registry is frozen.
        """
        self._require_building("register a handler")
        if not callable(handler):
            raise TypeError(f"Handler for {criterion} must be callable, got {type(handler).__name__}.")
        entry = RegistryEntry(criterion=criterion, handler=handler, index=len(self._entries))
        self._entries.append(entry)
        return entry

    def register_for(
        self,
        family: str,
        family_version: object = None,
        version: object = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering a function for one criterion.

        Version values take config-style forms: None or ``"*"`` for any
        version, ``"1.2"`` for an exact version, ``["1.0", None]`` for a range.

        Example:
            @registry.register_for("ubuntu", family_version=["12.04", None])
            def install_ubuntu(family, family_version, version):
                ...
        """
        criterion = Criterion(family, family_version, version)

        def decorator(func: Handler) -> Handler:
            self.register(criterion, func)
            return func

        return decorator

    def register_default(self, handler: Handler) -> Handler:
        """Set the sole default handler; usable as a decorator.

        Raises:
            DuplicateDefaultError: If a default is already registered.
            RegistrySealedError: If the registry is frozen.
        """
        self._require_building("register a default handler")
        if self._default is not None:
            raise DuplicateDefaultError(
                f"Registry {self._name!r} already has a default handler. "
                "Register at most one default per registry."
            )
        self._default = handler
        return handler

    def seal(self) -> None:
        """Move the registry from ``building`` to ``frozen``."""
        if self._state == "frozen":
            return
        self._transition("frozen")
        _LOGGER.info(
            "registry_sealed",
            registry=self._name,
            entry_count=len(self._entries),
            has_default=self._default is not None,
        )

    def matching_entries(
        self,
        taxonomy: Taxonomy,
        family: str,
        family_version: object = None,
        version: object = None,
    ) -> tuple[RegistryEntry, ...]:
        """All entries matching the query, most specific first."""
        return tuple(
            ordered_matches(
                taxonomy,
                self._entries,
                family,
                as_version_vector(family_version),
                as_version_vector(version),
            )
        )

    def best_entry(
        self,
        taxonomy: Taxonomy,
        family: str,
        family_version: object = None,
        version: object = None,
    ) -> RegistryEntry | None:
        """The entry ``select`` would invoke, or None when nothing matches."""
        return best_match(
            taxonomy,
            self._entries,
            family,
            as_version_vector(family_version),
            as_version_vector(version),
        )

    def select(
        self,
        taxonomy: Taxonomy,
        family: str,
        family_version: object,
        version: object,
        *args: object,
        **kwargs: object,
    ) -> object:
        """Invoke the most specific handler for a query.

        Versions are parsed for matching only; handlers receive the query
        exactly as the caller supplied it.

        Args:
            taxonomy: Taxonomy answering is-a queries for ``family``.
            family: Platform family tag.
            family_version: Platform version, dotted string or vector, or None.
            version: Component version, dotted string or vector, or None.
            *args: Extra positional arguments passed to the handler.
            **kwargs: Extra keyword arguments passed to the handler.

        Returns:
            The handler's return value, unmodified.

        Raises:
            ParseError: If a version string is malformed.
            DispatchNotFound: If nothing matches and no default exists.
        """
        entry = best_match(
            taxonomy,
            self._entries,
            family,
            as_version_vector(family_version),
            as_version_vector(version),
        )
        if entry is not None:
            return entry.handler(family, family_version, version, *args, **kwargs)
        if self._default is not None:
            _LOGGER.debug(
                "dispatch_default_used",
                registry=self._name,
                family=family,
                family_version=str(family_version),
                version=str(version),
            )
            return self._default(family, family_version, version, *args, **kwargs)
        raise DispatchNotFound(family, family_version, version, self._name)

    def _require_building(self, action: str) -> None:
        if self._state != "building":
            raise RegistrySealedError(
                f"Cannot {action}: registry {self._name!r} is sealed. "
                "Register every handler before sealing."
            )

    def _transition(self, next_state: RegistryState) -> None:
        allowed_states = REGISTRY_STATE_TRANSITIONS[self._state]
        if next_state not in allowed_states:
            raise RegistrySealedError(
                f"Invalid registry state transition {self._state!r} -> {next_state!r}. "
                f"Allowed: {', '.join(allowed_states) or 'none'}."
            )
        self._state = next_state
