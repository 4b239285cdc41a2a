"""Path algebra over TreePath values.

Every operation works on segment tuples; none re-parses path text. Results are
new TreePath values sharing the flavor of their inputs.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .errors import FlavorMismatchError, NotAbsoluteError, PathIndexError
from .normalizer import PARENT, resolve_segments
from .tree_path import TreePath, join_segments

logger = logging.getLogger(__name__)


def _require_absolute(path: TreePath, role: str) -> None:
    if not path.is_absolute:
        raise NotAbsoluteError(str(path), f"{role} path must be absolute")


def _require_same_flavor(a: TreePath, b: TreePath) -> None:
    if a.flavor != b.flavor:
        raise FlavorMismatchError(
            str(b), f"cannot combine {a.flavor.name!r} and {b.flavor.name!r} paths"
        )


def form_absolute_path(base: TreePath, other: TreePath) -> TreePath:
    """Resolve ``other`` against the absolute ``base``.

    An absolute ``other`` is returned unchanged. A relative ``other`` is appended
    to ``base`` and its '..' segments cancel trailing segments of ``base``.

    Raises:
        NotAbsoluteError: If ``base`` is relative
        FlavorMismatchError: If the inputs have different flavors
        AboveRootError: If resolution would ascend past the root
    """
    _require_absolute(base, "base")
    _require_same_flavor(base, other)
    if other.is_absolute:
        return other

    combined = base.segments + other.segments
    resolved = resolve_segments(combined, path=join_segments(combined, True, base.flavor))
    result = TreePath(tuple(resolved), True, base.flavor)
    logger.debug("formed absolute path %s from base %s and %s", result, base, other)
    return result


def form_relative_path(from_path: TreePath, to_path: TreePath) -> TreePath:
    """Return the relative path leading from ``from_path`` to ``to_path``.

    The result climbs out of ``from_path`` with one '..' per segment past the
    common prefix, then descends into the rest of ``to_path``. Equal inputs give
    the empty relative path.

    The string form of a result that climbs (e.g. "../d") is for display only:
    parsing it back raises AboveRootError. Keep the returned value and combine
    it with ``form_absolute_path`` instead of storing its text.

    Raises:
        NotAbsoluteError: If either input is relative
        FlavorMismatchError: If the inputs have different flavors
    """
    _require_absolute(from_path, "from")
    _require_absolute(to_path, "to")
    _require_same_flavor(from_path, to_path)

    common = 0
    for a, b in zip(from_path.segments, to_path.segments):
        if a != b:
            break
        common += 1

    climb = (PARENT,) * (from_path.num_levels - common)
    result = TreePath(climb + to_path.segments[common:], False, from_path.flavor)
    logger.debug("formed relative path %r from %s to %s", str(result), from_path, to_path)
    return result


def get_parent_path(path: TreePath) -> TreePath:
    """Drop the last segment; a path with no segments is its own parent."""
    if not path.segments:
        return path
    return TreePath(path.segments[:-1], path.is_absolute, path.flavor)


def get_parent_path_string(path: TreePath) -> str:
    return get_parent_path(path).to_string()


def get_subcomponent_name_at_level(path: TreePath, index: int) -> str:
    """Segment at ``index``, counting from 0 at the segment closest to the root.

    Raises:
        PathIndexError: If ``index`` is negative or not below ``path.num_levels``
    """
    if index < 0 or index >= path.num_levels:
        raise PathIndexError(str(path), index, path.num_levels)
    return path.segments[index]


def get_component_name(path: TreePath) -> str:
    """Last segment, or ``""`` for a path with no segments."""
    if not path.segments:
        return ""
    return get_subcomponent_name_at_level(path, path.num_levels - 1)


def split(path: TreePath) -> Tuple[TreePath, str]:
    """Return ``(get_parent_path(path), get_component_name(path))``."""
    return get_parent_path(path), get_component_name(path)


__all__ = [
    "form_absolute_path",
    "form_relative_path",
    "get_parent_path",
    "get_parent_path_string",
    "get_subcomponent_name_at_level",
    "get_component_name",
    "split",
]
