"""Structural integrity checks for a DCEL.

Verifies, over live records only:

1. Every handle stored in a live record resolves to a live slot.
2. Twin involution: ``twin(twin(e)) == e`` and ``twin(e) != e``.
3. Next/prev symmetry: ``prev(next(e)) == e`` and ``next(prev(e)) == e``.
4. Face agreement: ``face(next(e)) == face(e)``.
5. Endpoint agreement: ``origin(next(e)) == origin(twin(e))``.
6. Back-pointers: a vertex's outgoing edge originates at it; a face's
   incident edge lies on it.
7. Closure: following ``next`` from a fully-linked half-edge returns to it.

Unset relations are tolerated while a mesh is being wired
(``allow_unlinked=True``) and reported otherwise.
"""
from __future__ import annotations

from typing import List, Tuple

from .constants import MAX_REPORTED_ISSUES

__all__ = ['check_dcel_integrity']


def check_dcel_integrity(mesh, allow_unlinked: bool = True,
                         max_issues: int = MAX_REPORTED_ISSUES) -> Tuple[bool, List[str]]:
    """Check the DCEL invariants of ``mesh``.

    Parameters
    ----------
    mesh : DCEL
    allow_unlinked : bool
        If False, unset twin/next/prev relations are reported as problems.
    max_issues : int
        Maximum number of messages returned; counting continues past the cap.

    Returns
    -------
    (ok, messages)
        ``ok`` is False when at least one problem was found.
    """
    verts, edges, faces = mesh.vertices, mesh.half_edges, mesh.faces
    msgs: List[str] = []
    n_issues = 0

    def report(msg):
        nonlocal n_issues
        n_issues += 1
        if len(msgs) < max_issues:
            msgs.append(msg)

    if not faces.is_live(mesh.outer_face):
        report(f"Outer face {mesh.outer_face!r} is not live.")

    for h, e in edges.items():
        if not verts.is_live(e.origin):
            report(f"{h!r} has dead origin {e.origin!r}.")
        if not faces.is_live(e.face):
            report(f"{h!r} has dead face {e.face!r}.")

        twin_ok = False
        if e.twin is None:
            if not allow_unlinked:
                report(f"{h!r} has no twin.")
        elif not edges.is_live(e.twin):
            report(f"{h!r} twin {e.twin!r} is not live.")
        elif e.twin == h:
            report(f"{h!r} is its own twin.")
        elif edges[e.twin].twin != h:
            report(f"Twin involution broken: twin(twin({h!r})) is {edges[e.twin].twin!r}.")
        else:
            twin_ok = True

        if e.next is None:
            if not allow_unlinked:
                report(f"{h!r} has no next.")
        elif not edges.is_live(e.next):
            report(f"{h!r} next {e.next!r} is not live.")
        else:
            nxt = edges[e.next]
            if nxt.prev != h:
                report(f"prev(next({h!r})) is {nxt.prev!r}.")
            if nxt.face != e.face:
                report(f"{h!r} on {e.face!r} but next {e.next!r} on {nxt.face!r}.")
            if twin_ok and nxt.origin != edges[e.twin].origin:
                report(f"next({h!r}) starts at {nxt.origin!r}, expected destination "
                       f"{edges[e.twin].origin!r}.")

        if e.prev is None:
            if not allow_unlinked:
                report(f"{h!r} has no prev.")
        elif not edges.is_live(e.prev):
            report(f"{h!r} prev {e.prev!r} is not live.")
        elif edges[e.prev].next != h:
            report(f"next(prev({h!r})) is {edges[e.prev].next!r}.")

    for v, vert in verts.items():
        out = vert.outgoing_edge
        if out is None:
            continue
        if not edges.is_live(out):
            report(f"{v!r} outgoing edge {out!r} is not live.")
        elif edges[out].origin != v:
            report(f"{v!r} outgoing edge {out!r} originates at {edges[out].origin!r}.")

    for f, face in faces.items():
        inc = face.incident_edge
        if inc is None:
            continue
        if not edges.is_live(inc):
            report(f"{f!r} incident edge {inc!r} is not live.")
        elif edges[inc].face != f:
            report(f"{f!r} incident edge {inc!r} lies on {edges[inc].face!r}.")

    # Cycle closure. Edges on walks that end at an unset next are "open";
    # a walk that runs into an open chain is itself open. Running into a
    # closed cycle other than at its own start means next is not injective.
    closed = set()
    open_chain = set()
    for h, e in edges.items():
        if h in closed or h in open_chain or e.next is None:
            continue
        path = [h]
        on_path = {h}
        cur = h
        while True:
            nxt = edges[cur].next
            if nxt is None:
                if not allow_unlinked:
                    report(f"Boundary walk from {h!r} stops at {cur!r} (next unset).")
                open_chain.update(path)
                break
            if nxt in open_chain or not edges.is_live(nxt):
                open_chain.update(path)
                break
            if nxt == h:
                closed.update(path)
                break
            if nxt in closed or nxt in on_path:
                report(f"Boundary walk from {h!r} does not return to it.")
                open_chain.update(path)
                break
            path.append(nxt)
            on_path.add(nxt)
            cur = nxt

    return n_issues == 0, msgs
