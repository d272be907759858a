"""Convenience constructors that wire whole faces in one call.

This is the boundary where external numeric input enters the mesh: every
coordinate pair is converted with ``Point2.from_pair`` before it reaches the
engine.
"""
from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence

from .config import DCELConfig
from .constants import EPS_AREA
from .dcel import DCEL
from .geometry import Point2, points_to_array, polygon_signed_area
from .handles import FaceId, HalfEdgeId, VertexId

__all__ = ['PolygonResult', 'build_polygon']


class PolygonResult(NamedTuple):
    mesh: DCEL
    face: FaceId
    vertices: List[VertexId]
    inner_edges: List[HalfEdgeId]
    outer_edges: List[HalfEdgeId]


def build_polygon(coords: Iterable[Sequence[float]], mesh: Optional[DCEL] = None,
                  config: Optional[DCELConfig] = None) -> PolygonResult:
    """Add a simple polygon as a new face bounded by fully linked half-edges.

    Parameters
    ----------
    coords : iterable of (x, y)
        Polygon corners, either orientation. They are stored
        counter-clockwise, so clockwise input is reversed.
    mesh : DCEL, optional
        Mesh to add to; a new one (built with ``config``) when omitted. The
        polygon becomes an island in the mesh's outer face and shares no
        vertices with existing geometry.

    Returns
    -------
    PolygonResult
        ``inner_edges[i]`` runs from ``vertices[i]`` to ``vertices[i+1]`` on
        the new face; ``outer_edges[i]`` is its twin on the outer face.

    Raises
    ------
    ValueError
        Fewer than three corners, or a polygon with (near) zero area.
    """
    points = [Point2.from_pair(c) for c in coords]
    if len(points) < 3:
        raise ValueError(f"a polygon needs at least 3 corners, got {len(points)}")
    area = polygon_signed_area(points_to_array(points))
    if abs(area) <= EPS_AREA:
        raise ValueError(f"degenerate polygon (signed area {area:.3e})")
    if area < 0:
        points.reverse()
    if mesh is None:
        mesh = DCEL(config)

    n = len(points)
    verts = [mesh.add_vertex(p) for p in points]
    face = mesh.add_face()
    inner = [mesh.add_half_edge(verts[i], face) for i in range(n)]
    outer = [mesh.add_half_edge(verts[(i + 1) % n], mesh.outer_face) for i in range(n)]
    for i in range(n):
        mesh.make_twins(inner[i], outer[i])
        mesh.make_next(inner[i], inner[(i + 1) % n])
        # outer[i] ends at verts[i], where outer[i-1] starts
        mesh.make_next(outer[i], outer[i - 1])
    mesh.logger.debug("build_polygon: face=%r with %d corners", face, n)
    return PolygonResult(mesh, face, verts, inner, outer)
