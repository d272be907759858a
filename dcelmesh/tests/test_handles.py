import dataclasses

import pytest

from dcelmesh.core.handles import FaceId, HalfEdgeId, VertexId


def test_equality_is_by_index_within_a_kind():
    assert VertexId(3) == VertexId(3)
    assert VertexId(3) != VertexId(4)
    assert hash(HalfEdgeId(5)) == hash(HalfEdgeId(5))


def test_handles_of_different_kinds_never_compare_equal():
    assert VertexId(0) != HalfEdgeId(0)
    assert HalfEdgeId(0) != FaceId(0)
    assert len({VertexId(0), HalfEdgeId(0), FaceId(0)}) == 3


def test_handles_are_not_ordered():
    with pytest.raises(TypeError):
        VertexId(0) < VertexId(1)


def test_handles_are_immutable():
    h = FaceId(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        h.index = 2


def test_index_conversion_round_trip():
    h = HalfEdgeId.from_index(7)
    assert isinstance(h, HalfEdgeId)
    assert int(h) == 7
    assert repr(h) == "HalfEdgeId(7)"
