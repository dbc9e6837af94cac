"""
Tags module for gotagger.

This module assembles Tag records from scanned declarations and
aggregates them across files.
"""

from gotagger.tags.emitter import (
    emit_tag,
    tag_items,
    extract_tags_from_source,
    extract_tags_from_file,
)
from gotagger.tags.pipeline import (
    find_go_files,
    extract_tags_from_paths,
    extract_tags_from_sources,
    extract_tags_from_directory,
)

__all__ = [
    "emit_tag",
    "tag_items",
    "extract_tags_from_source",
    "extract_tags_from_file",
    "find_go_files",
    "extract_tags_from_paths",
    "extract_tags_from_sources",
    "extract_tags_from_directory",
]
