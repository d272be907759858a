"""Mesh records stored in the DCEL arenas.

Records reference each other only through typed handles; relations that are
wired after creation (twin/next/prev, outgoing/incident edges) start as None.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .geometry import Point2
from .handles import FaceId, HalfEdgeId, VertexId

__all__ = ['Vertex', 'HalfEdge', 'Face']


@dataclass
class Vertex:
    coord: Point2
    outgoing_edge: Optional[HalfEdgeId] = None
    deleted: bool = False


@dataclass
class HalfEdge:
    """One directed side of an undirected edge.

    ``origin`` and ``face`` are set at creation (``face`` is rewritten when
    two faces merge); ``twin``, ``next`` and ``prev`` are wired afterwards.
    """
    origin: VertexId
    face: FaceId
    twin: Optional[HalfEdgeId] = None
    next: Optional[HalfEdgeId] = None
    prev: Optional[HalfEdgeId] = None
    deleted: bool = False

    @property
    def is_linked(self) -> bool:
        """True once twin, next and prev are all set."""
        return self.twin is not None and self.next is not None and self.prev is not None


@dataclass
class Face:
    incident_edge: Optional[HalfEdgeId] = None
    deleted: bool = False
