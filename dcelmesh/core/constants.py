"""Central numerical tolerances and small structural constants.

Tiny thresholds used by the geometry predicates and the integrity checker are
kept here so they can be tuned consistently without scattering literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12           # minimum |signed area| treated as non-degenerate
EPS_COLINEAR: float = 0.0         # orientation threshold for the turn predicates

# Integrity reporting
MAX_REPORTED_ISSUES: int = 50     # cap on messages returned by check_dcel_integrity

__all__ = [
    'EPS_AREA',
    'EPS_COLINEAR',
    'MAX_REPORTED_ISSUES',
]
