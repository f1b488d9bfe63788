"""
Path and URI merging and normalization.

Operates on path strings only; nothing here touches the filesystem.
Backslashes are treated as separators so Windows-style input normalizes to
forward slashes.
"""

import logging
import re
from typing import List, Sequence, Tuple

from datahandling.utils.exceptions import NotUnderRootError
from datahandling.utils.logger import setup_logger, log_operation_event

logger = setup_logger(__name__)

SEPARATORS = ("/", "\\")

SCHEME_PATTERN = re.compile(r"^[a-z0-9+.\-]+://", re.IGNORECASE)


def merge_paths(fragments: Sequence[str]) -> str:
    """
    Join path fragments into one path.

    Only the first fragment's leading separator and the last fragment's
    trailing separator are kept; every other boundary separator is replaced
    by a single join separator.

    Args:
        fragments: Ordered path fragments

    Returns:
        Merged path, "" for no fragments
    """
    if not fragments:
        return ""

    prefix = "/" if fragments[0].startswith(SEPARATORS) else ""
    suffix = "/" if fragments[-1].endswith(SEPARATORS) else ""

    parts = []
    for fragment in fragments:
        part = fragment.replace("\\", "/").strip("/")
        if part:
            parts.append(part)

    body = "/".join(parts)
    if body:
        body += suffix

    return prefix + body


def strip_scheme(path: str) -> Tuple[str, str]:
    """
    Split a leading URI scheme (e.g. "https://") off a path.

    Returns:
        Tuple of (path without scheme, scheme as written or "")
    """
    match = SCHEME_PATTERN.match(path)
    if not match:
        return path, ""
    return path[match.end():], match.group(0)


def _collapse_separators(path: str) -> str:
    # Collapsing can create new pairs ("/.//" -> "//"), so run to a fixpoint
    while True:
        collapsed = path.replace("/./", "/").replace("//", "/")
        if collapsed == path:
            return path
        path = collapsed


def _resolve_parent_segments(parts: List[str]) -> List[str]:
    """Collapse ".." segments, keeping leading ones that cannot be resolved."""
    parts = list(parts)
    ignored_parts = 0

    while True:
        try:
            parent_index = parts.index("..", ignored_parts)
        except ValueError:
            return parts

        # A leading ".." has nothing to collapse into
        if parent_index == 0:
            ignored_parts = parent_index + 1
            continue

        previous = parts[parent_index - 1]
        if previous == "":
            # ".." directly after the root stays at the root
            del parts[parent_index]
        elif previous == "..":
            # Consecutive unresolvable ".." run
            ignored_parts = parent_index + 1
        else:
            del parts[parent_index - 1:parent_index + 1]


def normalize_path(path: str) -> str:
    """
    Normalize a path or URI to a uniform representation.

    Steps:
    1. Convert backslashes to slashes
    2. Remove a leading URI scheme, reattached at the end
    3. Collapse "/./" and "//" until nothing changes
    4. Resolve ".." segments where possible

    Args:
        path: Path or URI, usually the output of merge_paths()

    Returns:
        Normalized path
    """
    path, scheme = strip_scheme(path.replace("\\", "/"))
    path = _collapse_separators(path)

    parts = _resolve_parent_segments(path.split("/"))
    normalized = "/".join(parts)

    # A rooted path stays absolute when every segment below the root collapsed away
    if not normalized and path.startswith("/"):
        normalized = "/"

    return scheme + normalized


def format_path(*fragments: str) -> str:
    """Merge and normalize path fragments."""
    return normalize_path(merge_paths(fragments))


def format_directory(*fragments: str) -> str:
    """Same as format_path() but with a guaranteed trailing separator."""
    return as_directory(format_path(*fragments))


def as_directory(path: str) -> str:
    """Append a trailing separator to a non-empty path."""
    if not path:
        return path
    return path.rstrip("/") + "/"


def make_relative(path: str, root_directory: str) -> str:
    """
    Express a path relative to a root directory.

    Args:
        path: Path below the root directory
        root_directory: Directory the result is relative to

    Returns:
        Remainder of the normalized path after the root, "" if they are equal

    Raises:
        NotUnderRootError: If path is not inside root_directory
    """
    root = format_directory(root_directory)
    normalized = format_path(path)

    if not as_directory(normalized).startswith(root):
        log_operation_event(
            logger, "make_relative", "Path outside root",
            level=logging.WARNING,
            path=normalized, root=root
        )
        raise NotUnderRootError(
            "Path is not inside the root directory",
            detail=f"path={normalized} root={root}"
        )

    return normalized[len(root):]
