"""
Multi-file Tagging Pipeline

This module runs the emitter over many Go files and aggregates the results
into a ScanResult.

Design Decisions:
    - Files are processed sequentially, in the order given, so output is
      reproducible: input file order, then declaration order
    - Each file gets its own TypeRegistry unless whole-program mode is on,
      in which case one registry is threaded through all files in order
    - A file that fails to read or parse contributes no tags; the failure is
      recorded and logged and the run continues
"""

import time
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, Optional

import structlog

from gotagger.errors import ParseError
from gotagger.models import ScanResult
from gotagger.resolver import TypeRegistry
from gotagger.tags.emitter import extract_tags_from_file, extract_tags_from_source

logger = structlog.get_logger(__name__)

GO_FILE_SUFFIX = ".go"

# Always applied along with caller patterns; hidden directories are skipped too.
DEFAULT_EXCLUDE_PATTERNS = ("vendor/*", "*/vendor/*")


def find_go_files(
    directory: Path | str,
    exclude_patterns: Optional[list[str]] = None,
    include_tests: bool = True,
) -> list[Path]:
    """
    Recursively find Go source files under a directory.

    Args:
        directory: Root directory to search
        exclude_patterns: Glob patterns matched against the path relative
            to directory, e.g. "*_gen.go" or "internal/*"
        include_tests: Whether to keep `_test.go` files

    Returns:
        Matching files, sorted by path

    Raises:
        FileNotFoundError: If the directory doesn't exist
        ValueError: If the path is not a directory
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    patterns = [*DEFAULT_EXCLUDE_PATTERNS, *(exclude_patterns or [])]

    found = []
    for file_path in sorted(directory.rglob(f"*{GO_FILE_SUFFIX}")):
        if not file_path.is_file():
            continue
        if not include_tests and file_path.name.endswith(f"_test{GO_FILE_SUFFIX}"):
            continue

        relative_path = file_path.relative_to(directory)
        if any(part.startswith(".") for part in relative_path.parts[:-1]):
            continue
        if any(fnmatch(relative_path.as_posix(), pattern) for pattern in patterns):
            continue

        found.append(file_path)

    return found


def extract_tags_from_paths(
    paths: Iterable[Path | str],
    whole_program: bool = False,
) -> ScanResult:
    """
    Tag a sequence of Go files.

    Args:
        paths: Files to tag, in the order their tags should appear
        whole_program: Share one type registry across all files, so a
            constructor can be matched to a type declared in an earlier file

    Returns:
        ScanResult with tags, counts, and per-file errors

    Example:
        >>> result = extract_tags_from_paths(["a.go", "b.go"])
        >>> print(f"{result.tag_count} tags from {result.files_scanned} files")
    """
    start_time = time.time()
    result = ScanResult()
    shared_registry = TypeRegistry() if whole_program else None

    for file_path in paths:
        registry = shared_registry if shared_registry is not None else TypeRegistry()
        try:
            tags = extract_tags_from_file(file_path, registry=registry)
        except ParseError as e:
            logger.warning("file_skipped", file=str(file_path), error=str(e))
            result.errors.append((str(file_path), str(e)))
            continue
        except OSError as e:
            logger.warning("file_unreadable", file=str(file_path), error=str(e))
            result.errors.append((str(file_path), str(e)))
            continue

        result.tags.extend(tags)
        result.files_scanned += 1

    result.scan_time_seconds = time.time() - start_time
    logger.info(
        "scan_complete",
        files=result.files_scanned,
        tags=result.tag_count,
        errors=result.error_count,
    )
    return result


def extract_tags_from_sources(
    sources: Iterable[tuple[str, str]],
    whole_program: bool = False,
) -> ScanResult:
    """
    Tag in-memory Go sources given as (source, file_name) pairs.

    Follows the same ordering, registry and error rules as
    extract_tags_from_paths.
    """
    start_time = time.time()
    result = ScanResult()
    shared_registry = TypeRegistry() if whole_program else None

    for source, file_name in sources:
        registry = shared_registry if shared_registry is not None else TypeRegistry()
        try:
            tags = extract_tags_from_source(source, file_name, registry=registry)
        except ParseError as e:
            logger.warning("file_skipped", file=file_name, error=str(e))
            result.errors.append((file_name, str(e)))
            continue

        result.tags.extend(tags)
        result.files_scanned += 1

    result.scan_time_seconds = time.time() - start_time
    logger.info(
        "scan_complete",
        files=result.files_scanned,
        tags=result.tag_count,
        errors=result.error_count,
    )
    return result


def extract_tags_from_directory(
    directory: Path | str,
    whole_program: bool = False,
    exclude_patterns: Optional[list[str]] = None,
    include_tests: bool = True,
) -> ScanResult:
    """Discover Go files under a directory and tag them."""
    files = find_go_files(
        directory,
        exclude_patterns=exclude_patterns,
        include_tests=include_tests,
    )
    return extract_tags_from_paths(files, whole_program=whole_program)
