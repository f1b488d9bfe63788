"""
Collaborator interface definitions.

The path layer only normalizes strings; anything that needs the filesystem
goes through these interfaces so it can be swapped out or faked in tests.
"""

from abc import ABC, abstractmethod


class IPathResolver(ABC):
    """Interface for turning a path into an absolute, symlink-resolved path."""

    @abstractmethod
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
        pass
