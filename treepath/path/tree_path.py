"""Immutable tree path value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import InvalidSegmentError
from .flavor import COMPONENT_FLAVOR, PathFlavor
from .normalizer import CURRENT, PARENT, normalize, tokenize


@dataclass(frozen=True, slots=True)
class TreePath:
    """Ordered segments plus an absolute flag, for one path flavor.

    Build instances with ``TreePath.parse`` (raw text) or
    ``TreePath.from_segments`` (already-split segments). Every route, the bare
    constructor included, checks the segments: relative paths may begin with a
    run of '..' segments (as produced by ``form_relative_path``); anywhere else
    '..' and '.' are rejected.

    Raises:
        InvalidSegmentError: If any segment is empty, '.', a misplaced '..',
                             or contains the separator or a disallowed character
    """

    segments: Tuple[str, ...] = ()
    is_absolute: bool = False
    flavor: PathFlavor = COMPONENT_FLAVOR

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        object.__setattr__(self, "segments", segments)

        leading_parents = not self.is_absolute
        for segment in segments:
            if segment == PARENT and leading_parents:
                continue
            leading_parents = False
            if segment in (CURRENT, PARENT) or not self.flavor.is_legal_segment(segment):
                raise InvalidSegmentError(
                    join_segments(segments, self.is_absolute, self.flavor),
                    f"illegal path element {segment!r}",
                )

    @classmethod
    def parse(cls, raw: str, flavor: PathFlavor = COMPONENT_FLAVOR) -> "TreePath":
        """Validate, normalize and tokenize ``raw``.

        Raises:
            InvalidCharacterError: If ``raw`` contains a disallowed character
            AboveRootError: If a '..' element would ascend past the first element
        """
        segments, is_absolute = tokenize(normalize(raw, flavor), flavor)
        return cls(segments, is_absolute, flavor)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[str],
        is_absolute: bool,
        flavor: PathFlavor = COMPONENT_FLAVOR,
    ) -> "TreePath":
        """Build a path from segments without re-parsing text."""
        return cls(tuple(segments), is_absolute, flavor)

    @property
    def num_levels(self) -> int:
        """Number of segments."""
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return self.is_absolute and not self.segments

    def to_string(self) -> str:
        """Canonical string form; ``""`` for the empty relative path."""
        return join_segments(self.segments, self.is_absolute, self.flavor)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TreePath({self.to_string()!r}, flavor={self.flavor.name!r})"


def join_segments(segments: Tuple[str, ...], is_absolute: bool, flavor: PathFlavor) -> str:
    body = flavor.separator.join(segments)
    return flavor.separator + body if is_absolute else body


def component_path(raw: str) -> TreePath:
    """Parse ``raw`` as a component path, e.g. ``component_path("/bodyset/pelvis")``."""
    return TreePath.parse(raw, COMPONENT_FLAVOR)


__all__ = ["TreePath", "component_path", "join_segments"]
