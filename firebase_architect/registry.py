"""Read-only, ordered registries with a guaranteed default entry.

Every catalog in the package (design systems, layouts, color themes,
typography presets) is a ``Registry``.  Lookups never fail: an unknown id
resolves to the registry's declared default so that browsing and preview code
never has to handle a missing entry.

Entries are shared by every caller for the lifetime of the process, so the
mapping fields of registered models are declared as ``ReadOnlyDict``: nested
dicts become ``MappingProxyType`` views and lists become tuples at
validation time.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Generic, Optional, Protocol, TypeVar

from pydantic import AfterValidator, PlainSerializer


def freeze(value: Any) -> Any:
    """Recursively replace dicts with read-only views and lists with tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Recursively build plain, mutable dicts and lists from *value*."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


_K = TypeVar("_K")
_V = TypeVar("_V")

# Validates as a dict, stores a frozen view, dumps as a plain dict.
ReadOnlyDict = Annotated[dict[_K, _V], AfterValidator(freeze), PlainSerializer(thaw)]


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=_HasId)


class Registry(Generic[T]):
    """An immutable ``id -> entry`` table that preserves declaration order.

    Args:
        entries: Entries in the order pickers should list them.
        default_id: Id of the entry returned for unknown lookups.  Must be
            one of the registered ids.
        kind: Human-readable name used in error messages.

    Raises:
        ValueError: On duplicate ids or an unregistered *default_id*.
    """

    def __init__(self, entries: Iterable[T], default_id: str, kind: str = "entry") -> None:
        table: dict[str, T] = {}
        for entry in entries:
            if entry.id in table:
                raise ValueError(f"Duplicate {kind} id: {entry.id!r}")
            table[entry.id] = entry
        if default_id not in table:
            raise ValueError(f"Default {kind} {default_id!r} is not registered")

        self._entries = MappingProxyType(table)
        self._order: tuple[T, ...] = tuple(table.values())
        self.default_id = default_id
        self.kind = kind

    # -- Lookup ------------------------------------------------------------

    @property
    def default(self) -> T:
        """The fallback entry."""
        return self._entries[self.default_id]

    def get(self, entry_id: Optional[str]) -> T:
        """Return the entry for *entry_id*, or the default when unknown."""
        if entry_id is None:
            return self.default
        return self._entries.get(entry_id, self.default)

    def list(self) -> list[T]:
        """All entries in declaration order."""
        return list(self._order)

    def ids(self) -> list[str]:
        """All registered ids in declaration order."""
        return [entry.id for entry in self._order]

    @property
    def entries(self) -> MappingProxyType:
        """Read-only ``{id: entry}`` view."""
        return self._entries

    # -- Container protocol -------------------------------------------------

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"Registry(kind={self.kind!r}, ids={self.ids()!r}, default={self.default_id!r})"
