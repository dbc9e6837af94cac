"""
Tag Emitter

Assembles Tag records from scanned declarations and their resolutions,
and drives the per-file scan -> register -> resolve -> emit loop.

Key Components:
    - emit_tag: Pure assembly of one Tag
    - extract_tags_from_source: Tags for one source string
    - extract_tags_from_file: Tags for one file on disk

Ordering:
    Tags come out in exactly the order declarations appear in the file. No
    sorting or deduplication happens here.
"""

from pathlib import Path
from typing import Optional

import structlog

from gotagger.models import Declaration, Tag, TopLevelItem, TypeDeclaration
from gotagger.parser import scan_file, scan_source
from gotagger.resolver import Resolution, TypeRegistry, resolve_receiver
from gotagger.signature import format_signature

logger = structlog.get_logger(__name__)


def emit_tag(
    decl: Declaration,
    resolution: Resolution,
    file_name: Optional[str] = None,
) -> Tag:
    """
    Build the Tag for one declaration.

    Args:
        decl: The scanned declaration
        resolution: Its kind and receiver information
        file_name: File path to record; defaults to the declaration's own

    Returns:
        An immutable Tag with line numbers copied from the declaration and
        the signature rendered from its parameters and results
    """
    return Tag(
        name=decl.name,
        file_path=file_name if file_name is not None else decl.file_name,
        start_line=decl.start_line,
        end_line=decl.end_line,
        kind=resolution.kind,
        receiver_types=resolution.receiver_types,
        receiver_names=resolution.receiver_names,
        signature=format_signature(decl.params, decl.results),
    )


def tag_items(
    items: list[TopLevelItem],
    registry: TypeRegistry,
    file_name: Optional[str] = None,
) -> list[Tag]:
    """
    Walk scanned items in order, registering types and emitting tags.

    Type names enter the registry as they are reached, so a declaration only
    sees types declared above it (or in files tagged earlier with the same
    registry).
    """
    tags: list[Tag] = []
    for item in items:
        if isinstance(item, TypeDeclaration):
            registry.register(item.name)
            continue
        resolution = resolve_receiver(item, registry)
        tags.append(emit_tag(item, resolution, file_name))
    return tags


def extract_tags_from_source(
    source: str,
    file_name: str = "<source>",
    registry: Optional[TypeRegistry] = None,
) -> list[Tag]:
    """
    Extract tags for every top-level function and method in Go source.

    Args:
        source: Go source code as a string
        file_name: Path to attribute to the source
        registry: Registry to consult and extend; a fresh one if None

    Returns:
        Tags in declaration order

    Raises:
        GoSyntaxError: If the source has syntax errors

    Example:
        >>> source = '''
        ... package shapes
        ...
        ... type Widget struct{}
        ...
        ... func NewWidget() *Widget { return &Widget{} }
        ... '''
        >>> tags = extract_tags_from_source(source, "shapes.go")
        >>> tags[0].receiver_types
        ('Widget',)
    """
    if registry is None:
        registry = TypeRegistry()
    items = scan_source(source, file_name=file_name)
    tags = tag_items(items, registry, file_name)
    logger.debug("file_tagged", file=file_name, tags=len(tags), types=len(registry))
    return tags


def extract_tags_from_file(
    file_path: Path | str,
    registry: Optional[TypeRegistry] = None,
) -> list[Tag]:
    """
    Extract tags from a Go file.

    Raises:
        ParseError: If the file cannot be read or has syntax errors
    """
    if registry is None:
        registry = TypeRegistry()
    items = scan_file(file_path)
    tags = tag_items(items, registry, str(file_path))
    logger.debug("file_tagged", file=str(file_path), tags=len(tags), types=len(registry))
    return tags
