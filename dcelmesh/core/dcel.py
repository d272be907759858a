"""Doubly-connected edge list engine.

The mesh is three parallel arenas (vertices, half-edges, faces) whose records
point at each other only through typed handles, so the cyclic
vertex/edge/face graph never holds Python object references to itself.

Half-edge lifecycle
-------------------
``add_half_edge`` creates an *unlinked* record (origin and face set, twin,
next and prev unset). ``make_twins`` / ``make_next`` wire it up; once all three
relations are set it is *fully linked* and takes part in cycle traversal.
Structural mutations remove records by tombstoning them in their arena.

Invariants (over fully-linked half-edges ``e``)
-----------------------------------------------
- ``twin(twin(e)) == e``
- ``next(prev(e)) == e`` and ``prev(next(e)) == e``
- following ``next`` from ``e`` returns to ``e``
- every half-edge on a ``next`` cycle has the same face
- no live record references a removed slot

Traversals are capped at the live half-edge count; a walk that does not close
within that bound raises ``StructuralCorruptionError``.
"""
from __future__ import annotations

import time
from collections import defaultdict
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

import numpy as np

from .arena import Arena
from .config import DCELConfig
from .entities import Face, HalfEdge, Vertex
from .errors import DCELError, StructuralCorruptionError, UnsetRelationError
from .geometry import Point2, midpoint, points_to_array, polygon_signed_area
from .handles import FaceId, HalfEdgeId, VertexId
from .integrity import check_dcel_integrity
from .logging_utils import get_logger
from .stats import OpStats

__all__ = ['DCEL', 'SplitResult']


class SplitResult(NamedTuple):
    """Records created by ``split_edge_in_half``.

    ``forward`` continues the split half-edge on its face; ``backward`` is the
    new half-edge on the twin's face.
    """
    vertex: VertexId
    forward: HalfEdgeId
    backward: HalfEdgeId


class DCEL:
    """Planar subdivision stored as paired half-edges.

    Parameters
    ----------
    config : DCELConfig, optional
        Behaviour switches (post-mutation validation, timings, debug logging).

    Attributes
    ----------
    vertices, half_edges, faces : Arena
        Backing storage. Prefer the accessor methods; the arenas are exposed
        for read-only inspection and for the integrity checker.
    outer_face : FaceId
        The reserved unbounded face, created with the mesh.
    """

    def __init__(self, config: Optional[DCELConfig] = None):
        self.config = config or DCELConfig()
        self.logger = get_logger(f'dcelmesh.dcel.{self.__class__.__name__}')
        self.vertices: Arena[Vertex, VertexId] = Arena(VertexId, 'vertex')
        self.half_edges: Arena[HalfEdge, HalfEdgeId] = Arena(HalfEdgeId, 'half-edge')
        self.faces: Arena[Face, FaceId] = Arena(FaceId, 'face')
        self.outer_face: FaceId = self.faces.add(Face())
        self._op_stats: Dict[str, OpStats] = defaultdict(OpStats)

    def __repr__(self):
        return (f'DCEL(vertices={self.num_vertices()}, half_edges={self.num_edges()}, '
                f'faces={self.num_faces()})')

    # --- counts (live records) ---
    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        """Number of live half-edges (two per undirected edge)."""
        return len(self.half_edges)

    def num_faces(self) -> int:
        """Number of live faces, the outer face included."""
        return len(self.faces)

    def allocated_counts(self) -> Dict[str, int]:
        """Physical slots per arena, tombstoned slots included."""
        return {
            'vertices': self.vertices.allocated,
            'half_edges': self.half_edges.allocated,
            'faces': self.faces.allocated,
        }

    # --- record access ---
    def vertex(self, v: VertexId) -> Vertex:
        return self.vertices.get(v)

    def half_edge(self, e: HalfEdgeId) -> HalfEdge:
        return self.half_edges.get(e)

    def face(self, f: FaceId) -> Face:
        return self.faces.get(f)

    def coord(self, v: VertexId) -> Point2:
        return self.vertices.get(v).coord

    def origin(self, e: HalfEdgeId) -> VertexId:
        return self.half_edges.get(e).origin

    def face_of(self, e: HalfEdgeId) -> FaceId:
        return self.half_edges.get(e).face

    def _relation(self, e: HalfEdgeId, name: str) -> HalfEdgeId:
        value = getattr(self.half_edges.get(e), name)
        if value is None:
            raise UnsetRelationError(f"{name} of half-edge is unset", {'edge': e})
        return value

    def twin(self, e: HalfEdgeId) -> HalfEdgeId:
        return self._relation(e, 'twin')

    def next(self, e: HalfEdgeId) -> HalfEdgeId:
        return self._relation(e, 'next')

    def prev(self, e: HalfEdgeId) -> HalfEdgeId:
        return self._relation(e, 'prev')

    def destination(self, e: HalfEdgeId) -> VertexId:
        """Origin of ``e``'s twin."""
        return self.half_edges.get(self.twin(e)).origin

    # --- construction ---
    def add_vertex(self, coord: Point2) -> VertexId:
        """Insert an isolated vertex (no outgoing edge)."""
        if not isinstance(coord, Point2):
            raise TypeError("coord must be a Point2; convert pairs with Point2.from_pair")
        return self.vertices.add(Vertex(coord))

    def add_face(self) -> FaceId:
        """Insert a bare face with no incident edge."""
        return self.faces.add(Face())

    def add_half_edge(self, origin: VertexId, face: FaceId) -> HalfEdgeId:
        """Insert an unlinked half-edge from ``origin`` bounding ``face``.

        The origin's outgoing edge and the face's incident edge are both
        overwritten with the new handle (last write wins); twin/next/prev must
        be wired separately.
        """
        vert = self.vertices.get(origin)
        f = self.faces.get(face)
        h = self.half_edges.add(HalfEdge(origin, face))
        vert.outgoing_edge = h
        f.incident_edge = h
        if self.config.debug:
            self.logger.debug("add_half_edge %r: origin=%r face=%r", h, origin, face)
        return h

    def make_twins(self, a: HalfEdgeId, b: HalfEdgeId) -> None:
        """Pair ``a`` and ``b`` as opposite directions of one edge.

        The caller guarantees they connect the same two vertices; this is not
        checked here (see ``validate``).
        """
        ea = self.half_edges.get(a)
        eb = self.half_edges.get(b)
        ea.twin = b
        eb.twin = a
        if self.config.debug:
            self.logger.debug("make_twins %r <-> %r", a, b)

    def make_next(self, a: HalfEdgeId, b: HalfEdgeId) -> None:
        """Set ``next(a) = b`` and ``prev(b) = a`` together."""
        ea = self.half_edges.get(a)
        eb = self.half_edges.get(b)
        ea.next = b
        eb.prev = a
        if self.config.debug:
            self.logger.debug("make_next %r -> %r", a, b)

    # --- traversal ---
    def cycle_from(self, start: HalfEdgeId) -> List[HalfEdgeId]:
        """Half-edges met following ``next`` from ``start`` until it recurs.

        Raises
        ------
        UnsetRelationError
            If a ``next`` is unset before the cycle closes.
        StructuralCorruptionError
            If the walk exceeds the live half-edge count without closing.
        """
        self.half_edges.get(start)
        limit = len(self.half_edges)
        cycle = [start]
        cur = self.next(start)
        while cur != start:
            if len(cycle) >= limit:
                raise StructuralCorruptionError(
                    "boundary cycle does not close within the live half-edge count",
                    {'start': start, 'limit': limit})
            cycle.append(cur)
            cur = self.next(cur)
        return cycle

    def face_cycle(self, face: FaceId) -> List[HalfEdgeId]:
        inc = self.faces.get(face).incident_edge
        if inc is None:
            raise UnsetRelationError("face has no incident edge", {'face': face})
        return self.cycle_from(inc)

    def face_vertices(self, face: FaceId) -> List[VertexId]:
        return [self.half_edges.get(e).origin for e in self.face_cycle(face)]

    def face_coordinates(self, face: FaceId) -> np.ndarray:
        """(k,2) float64 array of the face's boundary vertices in cycle order."""
        return points_to_array(self.coord(v) for v in self.face_vertices(face))

    def face_signed_area(self, face: FaceId) -> float:
        """Signed area of the face boundary; positive when it runs counter-clockwise."""
        return polygon_signed_area(self.face_coordinates(face))

    def outgoing_edges(self, v: VertexId) -> List[HalfEdgeId]:
        """Half-edges leaving ``v``, rotating via ``next(twin(e))``.

        Empty for an isolated vertex. Bounded like ``cycle_from``.
        """
        start = self.vertices.get(v).outgoing_edge
        if start is None:
            return []
        limit = len(self.half_edges)
        fan = [start]
        cur = self.next(self.twin(start))
        while cur != start:
            if len(fan) >= limit:
                raise StructuralCorruptionError(
                    "vertex fan does not close within the live half-edge count",
                    {'vertex': v, 'limit': limit})
            fan.append(cur)
            cur = self.next(self.twin(cur))
        return fan

    def points_array(self) -> Tuple[List[VertexId], np.ndarray]:
        """Live vertex handles and their coordinates as an (N,2) float64 array."""
        handles = []
        coords = []
        for v, vert in self.vertices.items():
            handles.append(v)
            coords.append(vert.coord)
        return handles, points_to_array(coords)

    # --- structural mutations ---
    def split_edge_in_half(self, edge: HalfEdgeId) -> SplitResult:
        """Insert a vertex at the midpoint of ``edge``.

        With ``e = edge`` on face F (next ``n``) and its twin ``t`` on F'
        (next ``n'``), two half-edges ``n1`` (on F) and ``n2`` (on F') are
        created at the midpoint ``m`` and the cycles become
        ``e -> n1 -> n`` and ``t -> n2 -> n'``; ``n1`` is twinned with ``t``
        and ``e`` with ``n2``. Adds one vertex and two half-edges.

        Raises
        ------
        UnsetRelationError
            If ``edge`` has no twin, or either side has no next.
        """
        return self._run_op('split_edge', self._split_edge_in_half, edge)

    def _split_edge_in_half(self, edge: HalfEdgeId) -> SplitResult:
        e = self.half_edges.get(edge)
        twin = self.twin(edge)
        t = self.half_edges.get(twin)
        n = self.next(edge)
        n_twin = self.next(twin)
        face, twin_face = e.face, t.face

        m = self.add_vertex(midpoint(self.coord(e.origin), self.coord(t.origin)))
        n1 = self.add_half_edge(m, face)
        n2 = self.add_half_edge(m, twin_face)

        self.make_next(edge, n1)
        self.make_next(n1, n)
        self.make_next(twin, n2)
        self.make_next(n2, n_twin)
        self.make_twins(n1, twin)
        self.make_twins(edge, n2)

        self.logger.debug("split_edge_in_half %r: vertex=%r forward=%r backward=%r",
                          edge, m, n1, n2)
        self._check_after('split_edge_in_half')
        return SplitResult(m, n1, n2)

    def remove_inner_edge(self, edge: HalfEdgeId) -> Tuple[bool, Optional[str], Optional[Dict[str, Any]]]:
        """Delete ``edge`` and its twin, merging the two faces they separate.

        The face of ``edge`` survives and absorbs the face of its twin.
        Refused (no change) when either side is the outer face or both sides
        already bound the same face.

        Returns
        -------
        (ok, message, info)
            ``(False, reason, None)`` on refusal; on success ``info`` holds
            ``surviving_face``, ``removed_face`` and ``removed_edges``.
        """
        return self._run_op('remove_inner_edge', self._remove_inner_edge, edge)

    def _remove_inner_edge(self, edge: HalfEdgeId):
        e = self.half_edges.get(edge)
        twin = self.twin(edge)
        t = self.half_edges.get(twin)
        keep, absorbed = e.face, t.face
        if keep == self.outer_face or absorbed == self.outer_face:
            return False, "Edge touches the outer face", None
        if keep == absorbed:
            return False, "Both sides of the edge already bound the same face", None

        e_prev, e_next = self.prev(edge), self.next(edge)
        t_prev, t_next = self.prev(twin), self.next(twin)

        self.make_next(t_prev, e_next)
        self.make_next(e_prev, t_next)

        # Repoint back-pointers that would dangle once the pair is removed
        u = self.vertices.get(e.origin)
        if u.outgoing_edge == edge:
            u.outgoing_edge = t_next
        v = self.vertices.get(t.origin)
        if v.outgoing_edge == twin:
            v.outgoing_edge = e_next

        self.half_edges.remove(edge)
        self.half_edges.remove(twin)
        self.faces.remove(absorbed)

        merged = self.cycle_from(e_next)
        for h in merged:
            self.half_edges.get(h).face = keep
        self.faces.get(keep).incident_edge = e_next

        self.logger.debug("remove_inner_edge %r: %r absorbed into %r (%d boundary edges)",
                          edge, absorbed, keep, len(merged))
        self._check_after('remove_inner_edge')
        return True, None, {
            'surviving_face': keep,
            'removed_face': absorbed,
            'removed_edges': (edge, twin),
        }

    def flip_edge(self, edge: HalfEdgeId):
        """Diagonal flip (extension point for Delaunay-style refinement); not implemented."""
        self.half_edges.get(edge)
        raise NotImplementedError("flip_edge is not implemented")

    # --- validation ---
    def validate(self, allow_unlinked: bool = True) -> Tuple[bool, List[str]]:
        """Run the integrity checker; see ``check_dcel_integrity``."""
        return check_dcel_integrity(self, allow_unlinked=allow_unlinked)

    def _check_after(self, op_label: str) -> None:
        if not self.config.validate_after_mutation:
            return
        ok, msgs = self.validate()
        if not ok:
            self.logger.error("%s left the mesh inconsistent: %s", op_label, msgs)
            raise StructuralCorruptionError(
                f"integrity check failed after {op_label}", {'issues': msgs[:5]})

    # --- stats ---
    def _run_op(self, op_name: str, fn, edge):
        stats = self._op_stats[op_name]
        stats.attempts += 1
        t0 = time.perf_counter()
        try:
            result = fn(edge)
        except DCELError:
            stats.fail += 1
            raise
        finally:
            if self.config.record_timings:
                stats.record_time(time.perf_counter() - t0)
        if isinstance(result, tuple) and len(result) == 3 and result[0] is False:
            stats.refused += 1
            self.logger.debug("%s %r refused: %s", op_name, edge, result[1])
        else:
            stats.success += 1
        return result

    def stats_summary(self) -> Dict[str, Dict[str, Any]]:
        return {k: v.to_dict() for k, v in self._op_stats.items()}

    def reset_stats(self, drop_ops: bool = False) -> None:
        """Zero all counters and timings; with ``drop_ops`` forget the op keys too."""
        if drop_ops:
            self._op_stats.clear()
        else:
            for k in list(self._op_stats):
                self._op_stats[k] = OpStats()
