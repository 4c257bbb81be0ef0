"""Path normalization utilities for cross-platform compatibility.

Paths handled here may arrive in POSIX form (``/a/b``), Windows form
(``C:\\a\\b``, ``\\a``) or a mix of both. Every result uses forward slashes.
Nothing in this module touches the filesystem.
"""

import logging
import os
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

_DRIVE_ROOT = re.compile(r'^[A-Za-z]:[/\\]')


class PathUtils:
    """Utilities for consistent path handling across platforms."""

    @staticmethod
    def normalize(path: Optional[str]) -> str:
        """
        Normalize path separators to forward slashes.

        Only backslashes are rewritten; repeated slashes, case and
        ``.``/``..`` segments are left alone.

        Args:
            path: File path with potentially mixed separators

        Returns:
            Path with forward slashes only
        """
        if not path:
            return ""
        return path.replace('\\', '/')

    @staticmethod
    def is_rooted(path: Optional[str]) -> bool:
        """
        Check whether a path is absolute under any known root convention.

        Recognizes a POSIX root (``/``), a Windows backslash root (``\\``)
        and a drive-letter root (``C:/`` or ``C:\\``). The raw path is
        inspected, so it does not need to be normalized first.

        Args:
            path: Path to check

        Returns:
            True if the path is rooted, False otherwise
        """
        if not path:
            return False
        if path[0] in ('/', '\\'):
            return True
        return _DRIVE_ROOT.match(path) is not None

    @staticmethod
    def root_of(path: Optional[str]) -> str:
        """
        Get the normalized root prefix of a path.

        Returns ``"/"`` for POSIX and backslash roots, ``"<Letter>:/"`` for
        drive roots and an empty string for paths that are not rooted.
        """
        if not PathUtils.is_rooted(path):
            return ""
        if path[0] in ('/', '\\'):
            return '/'
        return path[:2] + '/'

    @staticmethod
    def join_path(*segments: Optional[str]) -> str:
        """
        Join path segments into one normalized path.

        Empty pieces produced by splitting (doubled, leading or trailing
        separators) are dropped. Only the first segment may contribute a
        root; rooted segments further along are treated as relative.

        Args:
            *segments: Path segments, each possibly containing separators

        Returns:
            The joined path, or ``"."`` when there is nothing to join
        """
        if not any(segments):
            return "."

        root = PathUtils.root_of(segments[0])

        components: List[str] = []
        for index, segment in enumerate(segments):
            if not segment:
                continue
            if index == 0 and len(root) > 1:
                # Drive prefix; a bare separator root vanishes on split.
                segment = segment[len(root):]
            components.extend(
                part for part in PathUtils.normalize_and_split(segment) if part
            )

        joined = PathUtils.join_path_components(components)
        if root:
            return root + joined
        return joined or "."

    @staticmethod
    def resolve_path(*segments: Optional[str]) -> str:
        """
        Resolve path segments into an absolute path.

        The segments are joined first. A separator root is kept as is; a
        drive root is kept only if this host treats it as absolute.
        Anything else is joined onto the current working directory.

        Args:
            *segments: Path segments to resolve

        Returns:
            An absolute, normalized path
        """
        if not any(segments):
            return PathUtils.join_path(os.getcwd())

        candidate = PathUtils.join_path(*segments)
        # Separator roots always count; drive roots only where the host accepts them
        if candidate.startswith('/') or (PathUtils.is_rooted(candidate) and os.path.isabs(candidate)):
            return candidate

        cwd = os.getcwd()
        logger.debug(f"Resolving '{candidate}' against working directory '{cwd}'")
        return PathUtils.join_path(cwd, candidate)

    @staticmethod
    def normalize_and_split(path: str) -> List[str]:
        """
        Normalize path and split into components.

        Args:
            path: File path to split

        Returns:
            List of path components
        """
        return PathUtils.normalize(path).split('/')

    @staticmethod
    def join_path_components(components: List[str]) -> str:
        """
        Join path components with forward slashes.

        Args:
            components: List of path components

        Returns:
            Joined path with forward slashes
        """
        return '/'.join(components)

    # Alias kept for callers of the older name
    normalize_path = normalize


normalize = PathUtils.normalize
is_rooted = PathUtils.is_rooted
join_path = PathUtils.join_path
resolve_path = PathUtils.resolve_path
