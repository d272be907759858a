import numpy as np
import pytest

from dcelmesh.core.builders import build_polygon
from dcelmesh.core.config import DCELConfig
from dcelmesh.core.dcel import DCEL


def test_triangle_matches_hand_wired_layout():
    res = build_polygon([(0, 0), (1, 0), (0, 1)])
    mesh = res.mesh
    assert mesh.num_faces() == 2
    assert mesh.num_edges() == 6
    assert mesh.num_vertices() == 3
    e12 = res.inner_edges[0]
    assert mesh.cycle_from(e12) == res.inner_edges
    for inner, outer in zip(res.inner_edges, res.outer_edges):
        assert mesh.twin(inner) == outer
        assert mesh.face_of(inner) == res.face
        assert mesh.face_of(outer) == mesh.outer_face
    ok, msgs = mesh.validate(allow_unlinked=False)
    assert ok, msgs


def test_coordinates_are_converted_at_the_boundary():
    res = build_polygon(np.array([[0, 0], [2, 0], [2, 1]]))
    coords = res.mesh.face_coordinates(res.face)
    assert coords.dtype == np.float64
    assert sorted(map(tuple, coords.tolist())) == [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0)]


def test_clockwise_input_is_stored_counter_clockwise():
    res = build_polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
    assert res.mesh.face_signed_area(res.face) == pytest.approx(1.0)
    assert res.mesh.face_signed_area(res.mesh.outer_face) == pytest.approx(-1.0)


def test_several_polygons_in_one_mesh():
    res1 = build_polygon([(0, 0), (1, 0), (0, 1)])
    mesh = res1.mesh
    res2 = build_polygon([(5, 5), (6, 5), (6, 6), (5, 6)], mesh=mesh)
    assert res2.mesh is mesh
    assert mesh.num_faces() == 3
    assert mesh.num_edges() == 6 + 8
    assert len(mesh.face_cycle(res2.face)) == 4
    ok, msgs = mesh.validate(allow_unlinked=False)
    assert ok, msgs


def test_config_is_forwarded_to_new_mesh():
    cfg = DCELConfig(validate_after_mutation=True)
    res = build_polygon([(0, 0), (1, 0), (0, 1)], config=cfg)
    assert res.mesh.config is cfg


@pytest.mark.parametrize("coords", [[], [(0, 0)], [(0, 0), (1, 1)]])
def test_too_few_corners(coords):
    with pytest.raises(ValueError):
        build_polygon(coords)


def test_degenerate_polygon_rejected():
    mesh = DCEL()
    with pytest.raises(ValueError):
        build_polygon([(0, 0), (1, 0), (2, 0)], mesh=mesh)
    # nothing was added
    assert mesh.num_vertices() == 0
