"""
Core Data Models for gotagger

This module defines the canonical data structures used throughout the system:
- TypeExpr: The closed set of Go type-expression nodes (Identifier, Pointer, ...)
- Field: A group of co-declared names sharing one type
- Declaration: A top-level function or method as seen by the scanner
- TypeDeclaration: A top-level type name introduced by a `type` spec
- Tag: The emitted record describing one declaration
- ScanResult: Aggregated tags and errors for a multi-file run

These models are designed to be:
- Immutable (frozen dataclasses, tuples instead of lists)
- Structurally comparable, so equal type trees format identically
- Free of parser objects, so they outlive the syntax tree they came from
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Type expressions
# =============================================================================


@dataclass(frozen=True)
class Identifier:
    """A plain type name such as `int` or `Widget`."""

    name: str


@dataclass(frozen=True)
class Pointer:
    """A pointer type, `*inner`."""

    inner: "TypeExpr"


@dataclass(frozen=True)
class Qualified:
    """A package-qualified type name, `package.name`."""

    package: str
    name: str


@dataclass(frozen=True)
class ArrayType:
    """
    An array or slice type.

    Attributes:
        element: The element type
        length: Source text of the length expression for fixed-size arrays
                ("..." for `[...]T`), None for slices
    """

    element: "TypeExpr"
    length: Optional[str] = None


@dataclass(frozen=True)
class FuncType:
    """A function type with its parameter and result field groups."""

    params: tuple["Field", ...] = ()
    results: tuple["Field", ...] = ()


@dataclass(frozen=True)
class MapType:
    """A map type, `map[key]value`."""

    key: "TypeExpr"
    value: "TypeExpr"


class ChanDir(Enum):
    """Direction of a channel type."""

    BOTH = "both"
    SEND = "send"
    RECEIVE = "receive"


@dataclass(frozen=True)
class ChanType:
    """A channel type, `chan element` (optionally directional)."""

    element: "TypeExpr"
    direction: ChanDir = ChanDir.BOTH


@dataclass(frozen=True)
class InterfaceType:
    """An interface type. Method sets are not tracked."""


@dataclass(frozen=True)
class StructType:
    """An anonymous struct type. Fields are not tracked."""


@dataclass(frozen=True)
class Variadic:
    """The type of a variadic parameter, `...element`."""

    element: "TypeExpr"


@dataclass(frozen=True)
class GenericType:
    """An instantiated generic type, `base[arguments]`."""

    base: "TypeExpr"
    arguments: tuple["TypeExpr", ...] = ()


TypeExpr = Union[
    Identifier,
    Pointer,
    Qualified,
    ArrayType,
    FuncType,
    MapType,
    ChanType,
    InterfaceType,
    StructType,
    Variadic,
    GenericType,
]


@dataclass(frozen=True)
class Field:
    """
    A group of names declared together with a single type.

    `func(a, b int, s string)` has two groups: (("a", "b"), int) and
    (("s",), string). Anonymous parameters and results have no names.
    """

    names: tuple[str, ...]
    type: TypeExpr


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True)
class Declaration:
    """
    A top-level function or method declaration extracted from a Go file.

    This is the intermediate representation between the syntax tree and a
    Tag. It is produced and discarded per file.

    Attributes:
        name: Function or method name
        file_name: Name of the file the declaration was scanned from
        start_line: 1-indexed line of the `func` keyword
        end_line: 1-indexed line of the last token (usually the closing brace)
        receiver: Receiver field groups; empty for plain functions
        params: Parameter field groups
        results: Result field groups
    """

    name: str
    file_name: str
    start_line: int
    end_line: int
    receiver: tuple[Field, ...] = ()
    params: tuple[Field, ...] = ()
    results: tuple[Field, ...] = ()

    @property
    def is_method(self) -> bool:
        return len(self.receiver) > 0


@dataclass(frozen=True)
class TypeDeclaration:
    """A type name introduced by a top-level `type` spec or alias."""

    name: str
    line: int


TopLevelItem = Union[TypeDeclaration, Declaration]


# =============================================================================
# Tags
# =============================================================================


class TagKind(Enum):
    """
    Classification of a tagged declaration.

    States:
        METHOD: The declaration has an explicit receiver clause.
        FUNCTION: A free function. It may still carry an inferred owning
                  type when it looks like a constructor for that type.
    """

    METHOD = "method"
    FUNCTION = "function"


@dataclass(frozen=True)
class Tag:
    """
    The emitted record describing one declaration.

    Attributes:
        name: Declared function or method name
        file_path: File the declaration lives in
        start_line: 1-indexed starting line
        end_line: 1-indexed ending line
        kind: METHOD or FUNCTION
        receiver_types: Rendered receiver types. One entry for a method,
            one entry for a function with an inferred owner, none otherwise.
        receiver_names: Receiver name groups aligned with receiver_types.
            Inferred owners never carry names, so this stays empty for them.
        signature: Canonical rendering of the parameters and results,
            e.g. "func(a, b int) int"

    Invariants:
        - start_line <= end_line
        - receiver_types is empty for a plain function with no inferred owner
    """

    name: str
    file_path: str
    start_line: int
    end_line: int
    kind: TagKind = TagKind.FUNCTION
    receiver_types: tuple[str, ...] = ()
    receiver_names: tuple[tuple[str, ...], ...] = ()
    signature: str = ""

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if self.start_line > self.end_line:
            raise ValueError(
                f"start_line ({self.start_line}) must be <= end_line ({self.end_line})"
            )

    @property
    def is_method(self) -> bool:
        return self.kind is TagKind.METHOD

    @property
    def owner(self) -> Optional[str]:
        """The owning type name without pointer marker, if any."""
        if not self.receiver_types:
            return None
        return self.receiver_types[0].lstrip("*")

    @property
    def qualified_name(self) -> str:
        """Return `Owner.Name` when an owner is known, else the bare name."""
        owner = self.owner
        if owner:
            return f"{owner}.{self.name}"
        return self.name

    def to_line(self) -> str:
        """Render the tag as one tab-separated line."""
        return "\t".join(
            [
                self.name,
                self.file_path,
                str(self.start_line),
                str(self.end_line),
                self.kind.value,
                ",".join(self.receiver_types),
                self.signature,
            ]
        )

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the tag."""
        return {
            "name": self.name,
            "file": self.file_path,
            "start": self.start_line,
            "end": self.end_line,
            "kind": self.kind.value,
            "receiver_types": list(self.receiver_types),
            "receiver_names": [list(group) for group in self.receiver_names],
            "signature": self.signature,
        }


@dataclass
class ScanResult:
    """
    Result of tagging a set of files.

    Attributes:
        tags: All tags, in input file order then declaration order
        files_scanned: Number of files that parsed successfully
        errors: Files that were skipped, with their error messages
        scan_time_seconds: Total time taken for the run
    """

    tags: list[Tag] = field(default_factory=list)
    files_scanned: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    scan_time_seconds: float = 0.0

    @property
    def tag_count(self) -> int:
        """Total number of tags emitted."""
        return len(self.tags)

    @property
    def error_count(self) -> int:
        """Number of files that were skipped."""
        return len(self.errors)
