"""
Parser module for gotagger.

This module provides tree-sitter based extraction of top-level
type and function declarations from Go source files.
"""

from gotagger.parser.scanner import (
    scan_source,
    scan_file,
    parse_source,
    declarations_only,
    DeclarationScanner,
)

__all__ = [
    "scan_source",
    "scan_file",
    "parse_source",
    "declarations_only",
    "DeclarationScanner",
]
