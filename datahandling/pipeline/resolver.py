"""
Filesystem path resolution.

Implements the IPathResolver interface and the format-and-resolve helpers
that feed already-resolved absolute paths into normalize_path().
"""

from pathlib import Path
from typing import Optional

from datahandling.pipeline.interfaces import IPathResolver
from datahandling.pipeline.path_merger import as_directory, merge_paths, normalize_path
from datahandling.utils.exceptions import PathNotFoundError
from datahandling.utils.logger import setup_logger

logger = setup_logger(__name__)


class FilesystemPathResolver(IPathResolver):
    """
    Resolves paths with a strict real-path lookup.

    Relative paths are resolved against the current working directory and
    symlinks are followed.
    """

    def resolve(self, path: str) -> str:
        """
        Resolve a path against the filesystem.

        Args:
            path: Relative or absolute path

        Returns:
            Absolute resolved path

        Raises:
            PathNotFoundError: If the path does not exist
        """
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            logger.warning(f"Path could not be resolved: {path}")
            raise PathNotFoundError("Given path does not exist.", detail=str(e))


# Default resolver instance
default_resolver = FilesystemPathResolver()


def format_and_resolve_path(*fragments: str, resolver: Optional[IPathResolver] = None) -> str:
    """
    Merge path fragments, resolve them and normalize the result.

    Args:
        *fragments: Ordered path fragments
        resolver: Resolver to use, the filesystem resolver by default

    Returns:
        Normalized absolute path

    Raises:
        PathNotFoundError: If the merged path does not exist
    """
    resolver = resolver or default_resolver
    return normalize_path(resolver.resolve(merge_paths(fragments)))


def format_and_resolve_directory(*fragments: str, resolver: Optional[IPathResolver] = None) -> str:
    """Same as format_and_resolve_path() but with a guaranteed trailing separator."""
    return as_directory(format_and_resolve_path(*fragments, resolver=resolver))
