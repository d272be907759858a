"""Public package API for dcelmesh.

A doubly-connected edge list (DCEL) for planar subdivisions, stored in
tombstoning arenas addressed by typed handles.

Example
-------
    from dcelmesh import build_polygon

    res = build_polygon([(0, 0), (1, 0), (0, 1)])
    mesh = res.mesh
    mesh.split_edge_in_half(res.inner_edges[0])
    mesh.cycle_from(res.inner_edges[0])

The modules under ``dcelmesh.core`` are the implementation; rely on this
layer for public symbols.
"""
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("dcelmesh")
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.arena import Arena
from .core.builders import PolygonResult, build_polygon
from .core.config import DCELConfig
from .core.dcel import DCEL, SplitResult
from .core.entities import Face, HalfEdge, Vertex
from .core.errors import (DCELError, OutOfBoundsError, StructuralCorruptionError,
                          UnsetRelationError, UseAfterFreeError)
from .core.geometry import (Point2, area_of_parallelogram, area_of_triangle, in_circle,
                            is_lht, is_lht_or_on, is_rht, is_rht_or_on, is_same_side,
                            midpoint, polygon_signed_area)
from .core.handles import FaceId, HalfEdgeId, Handle, VertexId
from .core.integrity import check_dcel_integrity
from .core.logging_utils import configure_logging, get_logger
from .core.stats import OpStats, format_stats_table

__all__ = [
    '__version__',
    # engine
    'DCEL', 'DCELConfig', 'SplitResult', 'check_dcel_integrity',
    # storage
    'Arena', 'Handle', 'VertexId', 'HalfEdgeId', 'FaceId', 'Vertex', 'HalfEdge', 'Face',
    # geometry
    'Point2', 'midpoint', 'area_of_parallelogram', 'area_of_triangle', 'is_lht',
    'is_lht_or_on', 'is_rht', 'is_rht_or_on', 'is_same_side', 'in_circle',
    'polygon_signed_area',
    # construction helpers
    'build_polygon', 'PolygonResult',
    # errors
    'DCELError', 'UseAfterFreeError', 'OutOfBoundsError', 'UnsetRelationError',
    'StructuralCorruptionError',
    # logging / stats
    'configure_logging', 'get_logger', 'OpStats', 'format_stats_table',
]
