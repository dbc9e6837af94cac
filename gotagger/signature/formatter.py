"""
Canonical Type Formatter

This module renders Go type-expression trees into canonical signature
strings. The output grammar is relied on by downstream tooling, so spacing
and punctuation are fixed:

    func(a, b int) int
    map[string]*Widget
    []*pkg.Type
    chan<- error

Design Decisions:
    - The variant set is closed; every node kind is matched explicitly and an
      unknown node raises TypeError instead of rendering something silently
    - Only the outermost pointer marker can be dropped (for registry lookups);
      nested element, value and result types always keep their markers
    - Result lists render without names and without parentheses, repeating
      the type once per co-declared name so arity matches the results
"""

from typing import Iterable

from gotagger.models import (
    ArrayType,
    ChanDir,
    ChanType,
    Field,
    FuncType,
    GenericType,
    Identifier,
    InterfaceType,
    MapType,
    Pointer,
    Qualified,
    StructType,
    TypeExpr,
    Variadic,
)


def format_type(expr: TypeExpr, dereference_pointers: bool = False) -> str:
    """
    Render a type expression as a canonical string.

    Args:
        expr: The type expression to render
        dereference_pointers: Drop the outermost pointer marker, so `*T`
            renders as `T`. Used when matching result types against the
            type registry.

    Returns:
        The canonical textual form of the type

    Raises:
        TypeError: If expr is not one of the known type-expression nodes

    Example:
        >>> format_type(MapType(Identifier("string"), Pointer(Identifier("Widget"))))
        'map[string]*Widget'
        >>> format_type(Pointer(Qualified("pkg", "Type")), dereference_pointers=True)
        'pkg.Type'
    """
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, Pointer):
        if dereference_pointers:
            return format_type(expr.inner)
        return "*" + format_type(expr.inner)
    if isinstance(expr, Qualified):
        return f"{expr.package}.{expr.name}"
    if isinstance(expr, ArrayType):
        if expr.length is None:
            return "[]" + format_type(expr.element)
        return f"[{expr.length}]" + format_type(expr.element)
    if isinstance(expr, FuncType):
        rendered = "func(" + render_field_list(expr.params, include_names=True) + ")"
        if expr.results:
            rendered += " " + render_field_list(expr.results, include_names=False)
        return rendered
    if isinstance(expr, MapType):
        return f"map[{format_type(expr.key)}]" + format_type(expr.value)
    if isinstance(expr, ChanType):
        return _CHAN_PREFIX[expr.direction] + format_type(expr.element)
    if isinstance(expr, InterfaceType):
        return "interface{}"
    if isinstance(expr, StructType):
        return "struct{}"
    if isinstance(expr, Variadic):
        return "..." + format_type(expr.element)
    if isinstance(expr, GenericType):
        arguments = ", ".join(format_type(arg) for arg in expr.arguments)
        return f"{format_type(expr.base)}[{arguments}]"
    raise TypeError(f"Unsupported type expression: {expr!r}")


_CHAN_PREFIX = {
    ChanDir.BOTH: "chan ",
    ChanDir.SEND: "chan<- ",
    ChanDir.RECEIVE: "<-chan ",
}


def render_field_list(fields: Iterable[Field], include_names: bool) -> str:
    """
    Render parameter or result field groups.

    With names, each named group renders once as `a, b T`. Without names, a
    group with several names repeats its type once per name (`T, T`) so the
    rendered arity still matches. Anonymous groups render as the type alone.

    Args:
        fields: Field groups in declaration order
        include_names: Whether parameter names are part of the output

    Returns:
        The groups joined with ", "
    """
    parts: list[str] = []
    for group in fields:
        type_text = format_type(group.type)
        if not group.names:
            parts.append(type_text)
        elif include_names:
            parts.append(", ".join(group.names) + " " + type_text)
        else:
            parts.append(", ".join([type_text] * len(group.names)))
    return ", ".join(parts)


def format_signature(params: Iterable[Field], results: Iterable[Field]) -> str:
    """Render a declaration signature the same way as a function type."""
    return format_type(FuncType(params=tuple(params), results=tuple(results)))
