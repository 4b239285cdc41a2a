"""Lexical validation, normalization and tokenization of tree path strings.

No tree lookup is performed by any function in this module; everything works on
the path text alone.

Key functions:
- validate: Check a raw string against a flavor's disallowed characters
- normalize: Produce the canonical string (no '.'/'..', no repeated or trailing separators)
- tokenize: Split a canonical string into segments plus an absolute flag
- resolve_segments: Stack-based '.'/'..' resolution shared with path algebra

Canonical strings are fixed points: ``normalize(normalize(s)) == normalize(s)``.
"""

from __future__ import annotations

import atexit
import threading
from typing import Iterable, List, Optional, Tuple

from treepath import config
from treepath.logging import StructuredLogger, create_logger

from .errors import AboveRootError, InvalidCharacterError
from .flavor import COMPONENT_FLAVOR, PathFlavor

CURRENT = "."
PARENT = ".."


class _ResolverTracer:
    """Settings-driven resolver trace logger.

    Rebuilt (closing the previous one) whenever the log directory or console
    setting changes, and closed once tracing is turned off.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: Optional[Tuple[Optional[str], bool]] = None
        self._logger: Optional[StructuredLogger] = None

    def get(self) -> StructuredLogger:
        settings = config.settings
        key = (settings.log_dir, settings.log_console)
        with self._lock:
            if self._logger is None or key != self._key:
                self._close_locked()
                self._logger = create_logger(
                    "resolver", log_dir=settings.log_dir, enable_console=settings.log_console
                )
                self._key = key
            return self._logger

    def close(self) -> None:
        if self._logger is None:
            return
        with self._lock:
            self._close_locked()

    def _close_locked(self) -> None:
        if self._logger is not None:
            self._logger.close()
        self._logger = None
        self._key = None


_default_tracer = _ResolverTracer()
atexit.register(_default_tracer.close)


def _active_tracer(tracer: Optional[StructuredLogger]) -> Optional[StructuredLogger]:
    if tracer is not None:
        return tracer
    if config.settings.trace_resolution:
        return _default_tracer.get()
    _default_tracer.close()
    return None


def find_invalid_character(raw: str, flavor: PathFlavor = COMPONENT_FLAVOR) -> Optional[str]:
    """Return the first disallowed character in ``raw``, or None if there is none."""
    return flavor.find_invalid(raw)


def validate(raw: str, flavor: PathFlavor = COMPONENT_FLAVOR) -> bool:
    """Return True if ``raw`` contains no disallowed character for ``flavor``.

    The separator itself is allowed here since it delimits segments; it is only
    illegal inside an individual segment (see ``PathFlavor.is_legal_segment``).
    """
    return find_invalid_character(raw, flavor) is None


def resolve_segments(
    elements: Iterable[str],
    *,
    path: str = "",
    tracer: Optional[StructuredLogger] = None,
) -> List[str]:
    """Resolve '.' and '..' elements against a stack of previously kept elements.

    Args:
        elements: Elements in root-to-leaf order; empty strings (from repeated or
                  trailing separators) are dropped
        path: Text naming the path being resolved, used in error messages
        tracer: Optional structured logger receiving one entry per element

    Returns:
        The resolved segments

    Raises:
        AboveRootError: If a '..' has no previously kept element to cancel
    """
    trace = _active_tracer(tracer)
    resolved: List[str] = []

    for element in elements:
        if not element or element == CURRENT:
            action = "skip"
        elif element == PARENT:
            if not resolved:
                if trace is not None:
                    trace.debug("resolve", path=path, element=element, action="above_root")
                raise AboveRootError(path)
            resolved.pop()
            action = "pop"
        else:
            resolved.append(element)
            action = "push"

        if trace is not None:
            trace.debug("resolve", path=path, element=element, action=action, stack=list(resolved))

    return resolved


def normalize(
    raw: str,
    flavor: PathFlavor = COMPONENT_FLAVOR,
    *,
    tracer: Optional[StructuredLogger] = None,
) -> str:
    """Rewrite ``raw`` into its canonical form.

    Args:
        raw: Raw path string
        flavor: Separator and disallowed characters to apply
        tracer: Optional structured logger for per-element resolution traces

    Returns:
        Canonical string. Absolute paths keep exactly one leading separator; the
        root is the bare separator; a path resolving to nothing relative is ``""``.

    Raises:
        InvalidCharacterError: If ``raw`` contains a disallowed character
        AboveRootError: If a '..' element would ascend past the first element

    Examples:
        "a/./b" -> "a/b", "a//b" -> "a/b", "/a/b/../../c" -> "/c", "./a" -> "a"
    """
    bad = find_invalid_character(raw, flavor)
    if bad is not None:
        raise InvalidCharacterError(raw, bad)

    sep = flavor.separator
    is_absolute = raw.startswith(sep)
    body = raw[1:] if is_absolute else raw

    resolved = resolve_segments(body.split(sep), path=raw, tracer=tracer)

    canonical = sep.join(resolved)
    if is_absolute:
        canonical = sep + canonical
    return canonical


def tokenize(canonical: str, flavor: PathFlavor = COMPONENT_FLAVOR) -> Tuple[Tuple[str, ...], bool]:
    """Split a canonical string into its segments and whether it is absolute.

    Only call this on the output of ``normalize``; raw input is not checked.
    """
    sep = flavor.separator
    is_absolute = canonical.startswith(sep)
    body = canonical[1:] if is_absolute else canonical
    if not body:
        return (), is_absolute
    return tuple(body.split(sep)), is_absolute


__all__ = [
    "CURRENT",
    "PARENT",
    "find_invalid_character",
    "validate",
    "resolve_segments",
    "normalize",
    "tokenize",
]
