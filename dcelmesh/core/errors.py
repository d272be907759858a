"""Typed exceptions for the arena and the DCEL engine.

Every error carries an optional ``context`` dict rendered as a compact
``| key=value`` suffix so stale handles and broken cycles are easy to locate
in logs.

Taxonomy
--------
UseAfterFreeError
    A handle resolved to a tombstoned slot.
OutOfBoundsError
    A handle index lies outside the arena's allocated storage (foreign mesh
    or a malformed handle).
UnsetRelationError
    A twin/next/prev relation (or a face's incident edge) was read before
    being wired.
StructuralCorruptionError
    A ``next`` cycle failed to close within the live half-edge bound, or the
    post-mutation integrity check failed.

Refused operations (e.g. ``remove_inner_edge`` across the outer face) are not
exceptions; they return ``(False, reason, None)``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

__all__ = [
    'DCELError',
    'UseAfterFreeError',
    'OutOfBoundsError',
    'UnsetRelationError',
    'StructuralCorruptionError',
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append(f"{k}={sv}")
    return " | " + ", ".join(parts)


class DCELError(Exception):
    """
    Base class for all dcelmesh errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended to the string form (e.g. ``{"handle": h}``).
    """
    def __init__(self, message: str, context: Optional[Mapping[str, Any]] = None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return super().__str__() + _format_context(self.context)


class UseAfterFreeError(DCELError, LookupError):
    """Dereferencing a handle whose slot has been removed."""


class OutOfBoundsError(DCELError, IndexError):
    """Handle index beyond the arena's allocated slots (or negative)."""


class UnsetRelationError(DCELError):
    """Reading a twin/next/prev (or incident edge) that has not been wired yet."""


class StructuralCorruptionError(DCELError, RuntimeError):
    """A boundary cycle does not close, or an invariant check failed after a mutation."""
