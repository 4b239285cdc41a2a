"""Path flavors: the separator and disallowed characters for a kind of path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional


@dataclass(frozen=True, slots=True)
class PathFlavor:
    """Immutable character configuration shared by every path of one flavor.

    Args:
        name: Short identifier used in reprs and trace output
        separator: Single character delimiting segments
        invalid_chars: Characters rejected anywhere in a raw path string
    """

    name: str
    separator: str
    invalid_chars: FrozenSet[str]

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError(f"separator must be a single character, got: {self.separator!r}")
        if self.separator in self.invalid_chars:
            raise ValueError("separator cannot also be a disallowed character")

    def find_invalid(self, raw: str) -> Optional[str]:
        """Return the first disallowed character in ``raw``, or None."""
        for ch in raw:
            if ch in self.invalid_chars:
                return ch
        return None

    def is_legal_segment(self, text: str) -> bool:
        """Check a single segment: non-empty, no separator, no disallowed character."""
        if not text or self.separator in text:
            return False
        return self.find_invalid(text) is None


# Component paths address nodes in a model tree, e.g. "/bodyset/pelvis".
COMPONENT_FLAVOR = PathFlavor(
    name="component",
    separator="/",
    invalid_chars=frozenset("\\*+ \t\n"),
)

__all__ = ["PathFlavor", "COMPONENT_FLAVOR"]
