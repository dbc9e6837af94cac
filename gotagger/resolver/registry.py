"""
Type Registry

Tracks the type names declared so far while scanning Go source. The
receiver resolver consults it to decide whether a free function looks like
a constructor for a known type.

The registry is an explicit value owned by the caller. Each file normally
gets a fresh one; a caller that wants whole-program behaviour passes the
same instance across files and is responsible for serializing updates.
"""

from typing import Iterable, Iterator


class TypeRegistry:
    """
    Append-only set of declared type names.

    Usage:
        registry = TypeRegistry()
        registry.register("Widget")
        assert registry.contains("Widget")
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set(names)

    def register(self, name: str) -> None:
        """Record a declared type name. Registering twice is a no-op."""
        self._names.add(name)

    def contains(self, name: str) -> bool:
        """Check whether a type name has been registered."""
        return name in self._names

    def names(self) -> frozenset[str]:
        """Snapshot of all registered names."""
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __repr__(self) -> str:
        return f"TypeRegistry({sorted(self._names)!r})"
