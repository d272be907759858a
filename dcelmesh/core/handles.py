"""Typed handles addressing one specific arena.

A handle is a thin frozen wrapper over a raw slot index. Each entity kind gets
its own subclass so that, for example, a ``VertexId`` can never be used to
index the half-edge arena without a type checker flagging it. Equality takes
the concrete class into account (``VertexId(0) != FaceId(0)``); handles are
hashable but deliberately unordered.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Type, TypeVar

__all__ = ['Handle', 'VertexId', 'HalfEdgeId', 'FaceId']

H = TypeVar('H', bound='Handle')


@dataclass(frozen=True)
class Handle:
    """Small typed handle wrapper."""

    index: int

    @classmethod
    def from_index(cls: Type[H], index: int) -> H:
        return cls(int(index))

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.index})'


@dataclass(frozen=True, repr=False)
class VertexId(Handle):
    """Handle into the vertex arena."""


@dataclass(frozen=True, repr=False)
class HalfEdgeId(Handle):
    """Handle into the half-edge arena."""


@dataclass(frozen=True, repr=False)
class FaceId(Handle):
    """Handle into the face arena."""
