"""Configuration objects for the DCEL engine."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DCELConfig:
    """Engine behaviour switches.

    Attributes
    ----------
    validate_after_mutation : bool
        Run the integrity checker after every structural mutation
        (``split_edge_in_half``, ``remove_inner_edge``) and raise
        ``StructuralCorruptionError`` when it reports a problem.
    record_timings : bool
        Accumulate wall-clock timings in the per-operation stats.
    debug : bool
        Log every wiring call (``add_half_edge``, ``make_twins``,
        ``make_next``) at DEBUG level.
    """
    validate_after_mutation: bool = False
    record_timings: bool = True
    debug: bool = False


__all__ = ['DCELConfig']
