"""
Tree-sitter Go Declaration Scanner

This module provides the parsing front end for gotagger, turning Go source
text into an ordered list of top-level items: type declarations and
function/method declarations.

Key Components:
    - DeclarationScanner: Walks a tree-sitter Go syntax tree and builds
      Declaration and TypeDeclaration records
    - scan_source: Main entry point for string-based scanning
    - scan_file: Entry point for file-based scanning

Design Decisions:
    - Uses tree-sitter with the Go grammar, so no Go toolchain is needed
    - Only top-level declarations are visited; function literals and nested
      types are ignored
    - Type syntax is converted into the closed TypeExpr model; syntax outside
      that model degrades to an Identifier holding the source text
    - Any ERROR or MISSING node makes the whole file a syntax error, as does a
      statement outside a function body

Limitations:
    Items are returned in source order and the caller registers type names as
    it walks them. A function that returns a type declared further down the
    file therefore cannot see that type.
"""

from pathlib import Path
from typing import Optional

import structlog
import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from gotagger.errors import GoSyntaxError, ParseError
from gotagger.models import (
    ArrayType,
    ChanDir,
    ChanType,
    Declaration,
    Field,
    FuncType,
    GenericType,
    Identifier,
    InterfaceType,
    MapType,
    Pointer,
    Qualified,
    StructType,
    TopLevelItem,
    TypeDeclaration,
    TypeExpr,
    Variadic,
)

logger = structlog.get_logger(__name__)

GO_LANGUAGE = Language(tsgo.language())

# Top-level nodes that carry nothing we tag but are valid Go.
_IGNORED_TOP_LEVEL = frozenset(
    {
        "package_clause",
        "import_declaration",
        "var_declaration",
        "const_declaration",
        "comment",
    }
)

_NAME_NODES = frozenset(
    {"type_identifier", "identifier", "field_identifier", "package_identifier"}
)


class DeclarationScanner:
    """
    Builds declaration records from a parsed Go source file.

    Usage:
        scanner = DeclarationScanner(source_bytes, "widget.go")
        items = scanner.scan(tree.root_node)
    """

    def __init__(self, source: bytes, file_name: str) -> None:
        """
        Initialize the scanner.

        Args:
            source: The UTF-8 encoded source the tree was parsed from
            file_name: Name recorded on every declaration
        """
        self.source = source
        self.file_name = file_name

    def scan(self, root: Node) -> list[TopLevelItem]:
        """
        Collect top-level type and function declarations in source order.

        Raises:
            GoSyntaxError: If a statement appears outside a function body
        """
        items: list[TopLevelItem] = []
        for node in root.named_children:
            if node.type in ("function_declaration", "method_declaration"):
                items.append(self._declaration(node))
            elif node.type == "type_declaration":
                items.extend(self._type_declarations(node))
            elif node.type not in _IGNORED_TOP_LEVEL:
                raise GoSyntaxError(
                    self.file_name,
                    "non-declaration statement outside function body",
                    line=_line(node),
                )
        return items

    def _declaration(self, node: Node) -> Declaration:
        decl = Declaration(
            name=self._text(node.child_by_field_name("name")),
            file_name=self.file_name,
            start_line=_line(node),
            end_line=node.end_point[0] + 1,
            receiver=self.field_list(node.child_by_field_name("receiver")),
            params=self.field_list(node.child_by_field_name("parameters")),
            results=self.field_list(node.child_by_field_name("result")),
        )
        logger.debug(
            "declaration",
            file=self.file_name,
            name=decl.name,
            start=decl.start_line,
            end=decl.end_line,
            method=decl.is_method,
        )
        return decl

    def _type_declarations(self, node: Node) -> list[TypeDeclaration]:
        # Grouped `type ( ... )` blocks hold their specs as direct children.
        found = []
        for spec in node.named_children:
            if spec.type not in ("type_spec", "type_alias"):
                continue
            name_node = spec.child_by_field_name("name")
            if name_node is None:
                continue
            found.append(TypeDeclaration(name=self._text(name_node), line=_line(spec)))
        return found

    def field_list(self, node: Optional[Node]) -> tuple[Field, ...]:
        """
        Convert a parameter list (or a bare result type) into field groups.

        A result written without parentheses, e.g. `func F() *T`, becomes a
        single anonymous group.
        """
        if node is None:
            return ()
        if node.type != "parameter_list":
            return (Field(names=(), type=self.type_expr(node)),)

        fields = []
        for child in node.named_children:
            if child.type == "parameter_declaration":
                names = tuple(self._text(n) for n in child.children_by_field_name("name"))
                fields.append(
                    Field(names=names, type=self.type_expr(child.child_by_field_name("type")))
                )
            elif child.type == "variadic_parameter_declaration":
                name_node = child.child_by_field_name("name")
                names = (self._text(name_node),) if name_node is not None else ()
                element = self.type_expr(child.child_by_field_name("type"))
                fields.append(Field(names=names, type=Variadic(element)))
        return tuple(fields)

    def type_expr(self, node: Optional[Node]) -> TypeExpr:
        """Convert a tree-sitter type node into a TypeExpr."""
        if node is None:
            return Identifier("")

        kind = node.type
        if kind in _NAME_NODES:
            return Identifier(self._text(node))
        if kind == "pointer_type":
            return Pointer(self.type_expr(_first_named(node)))
        if kind == "qualified_type":
            return Qualified(
                package=self._text(node.child_by_field_name("package")),
                name=self._text(node.child_by_field_name("name")),
            )
        if kind == "array_type":
            return ArrayType(
                element=self.type_expr(node.child_by_field_name("element")),
                length=self._text(node.child_by_field_name("length")),
            )
        if kind == "implicit_length_array_type":
            return ArrayType(
                element=self.type_expr(node.child_by_field_name("element")),
                length="...",
            )
        if kind == "slice_type":
            return ArrayType(element=self.type_expr(node.child_by_field_name("element")))
        if kind == "map_type":
            return MapType(
                key=self.type_expr(node.child_by_field_name("key")),
                value=self.type_expr(node.child_by_field_name("value")),
            )
        if kind == "channel_type":
            return ChanType(
                element=self.type_expr(node.child_by_field_name("value")),
                direction=_chan_direction(node),
            )
        if kind == "function_type":
            return FuncType(
                params=self.field_list(node.child_by_field_name("parameters")),
                results=self.field_list(node.child_by_field_name("result")),
            )
        if kind == "interface_type":
            return InterfaceType()
        if kind == "struct_type":
            return StructType()
        if kind == "generic_type":
            arguments_node = node.child_by_field_name("type_arguments")
            arguments = ()
            if arguments_node is not None:
                arguments = tuple(self.type_expr(arg) for arg in arguments_node.named_children)
            return GenericType(
                base=self.type_expr(node.child_by_field_name("type")),
                arguments=arguments,
            )
        if kind in ("parenthesized_type", "type_elem") and node.named_child_count == 1:
            return self.type_expr(_first_named(node))
        return Identifier(self._text(node))

    def _text(self, node: Optional[Node]) -> str:
        if node is None:
            return ""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _first_named(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _chan_direction(node: Node) -> ChanDir:
    tokens = [child.type for child in node.children if not child.is_named]
    if tokens[:1] == ["<-"]:
        return ChanDir.RECEIVE
    if "<-" in tokens:
        return ChanDir.SEND
    return ChanDir.BOTH


def _first_error_line(node: Node) -> Optional[int]:
    """Return the 1-indexed line of the first ERROR or MISSING node."""
    if node.type == "ERROR" or node.is_missing:
        return _line(node)
    if not node.has_error:
        return None
    for child in node.children:
        line = _first_error_line(child)
        if line is not None:
            return line
    return None


def parse_source(source: str, file_name: str = "<source>") -> tuple[bytes, Node]:
    """
    Parse Go source with tree-sitter and reject files with syntax errors.

    Returns:
        The encoded source and the root node of its syntax tree

    Raises:
        GoSyntaxError: If the tree contains any error or missing node
    """
    encoded = source.encode("utf-8")
    tree = Parser(GO_LANGUAGE).parse(encoded)
    root = tree.root_node
    if root.has_error:
        raise GoSyntaxError(file_name, "syntax error", line=_first_error_line(root))
    return encoded, root


def scan_source(source: str, file_name: str = "<source>") -> list[TopLevelItem]:
    """
    Scan Go source code for top-level type and function declarations.

    This is the main entry point for scanning source strings.

    Args:
        source: Go source code as a string
        file_name: Name recorded on every declaration

    Returns:
        TypeDeclaration and Declaration items in source order

    Raises:
        GoSyntaxError: If the source has syntax errors

    Example:
        >>> items = scan_source('''
        ... package shapes
        ...
        ... type Widget struct{}
        ...
        ... func (w *Widget) Name() string { return "w" }
        ... ''')
        >>> [type(item).__name__ for item in items]
        ['TypeDeclaration', 'Declaration']
    """
    encoded, root = parse_source(source, file_name)
    return DeclarationScanner(encoded, file_name).scan(root)


def scan_file(file_path: Path | str) -> list[TopLevelItem]:
    """
    Scan a Go file for top-level type and function declarations.

    Args:
        file_path: Path to the Go file

    Returns:
        TypeDeclaration and Declaration items in source order

    Raises:
        ParseError: If the file is missing, not UTF-8, or has syntax errors
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise ParseError(str(file_path), "file not found")

    try:
        source = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(str(file_path), f"not valid UTF-8: {e.reason}") from e

    return scan_source(source, file_name=str(file_path))


def declarations_only(items: list[TopLevelItem]) -> list[Declaration]:
    """Filter scanned items down to function and method declarations."""
    return [item for item in items if isinstance(item, Declaration)]
