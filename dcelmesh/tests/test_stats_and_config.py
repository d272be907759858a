import pytest

from dcelmesh.core.builders import build_polygon
from dcelmesh.core.config import DCELConfig
from dcelmesh.core.errors import StructuralCorruptionError
from dcelmesh.core.stats import OpStats, format_stats_table


def make_triangle(**cfg):
    return build_polygon([(0, 0), (1, 0), (0, 1)], config=DCELConfig(**cfg))


def assert_counting_invariant(summary):
    for op, s in summary.items():
        assert s['attempts'] == s['success'] + s['refused'] + s['fail'], op
        if s['attempts']:
            assert 0.0 <= s['time_min'] <= s['time_max'] <= s['time_total'] + 1e-12, op


def test_stats_record_success_and_refusal():
    res = make_triangle()
    mesh = res.mesh
    mesh.split_edge_in_half(res.inner_edges[0])
    mesh.remove_inner_edge(res.inner_edges[1])  # touches the outer face
    summary = mesh.stats_summary()
    assert summary['split_edge']['success'] == 1
    assert summary['remove_inner_edge']['refused'] == 1
    assert summary['remove_inner_edge']['success'] == 0
    assert_counting_invariant(summary)


def test_reset_stats():
    res = make_triangle()
    mesh = res.mesh
    mesh.split_edge_in_half(res.inner_edges[0])
    mesh.reset_stats()
    assert mesh.stats_summary()['split_edge']['attempts'] == 0
    mesh.reset_stats(drop_ops=True)
    assert mesh.stats_summary() == {}


def test_timings_can_be_disabled():
    res = make_triangle(record_timings=False)
    res.mesh.split_edge_in_half(res.inner_edges[0])
    assert res.mesh.stats_summary()['split_edge']['time_total'] == 0.0


def test_validate_after_mutation_passes_on_sound_mesh():
    res = make_triangle(validate_after_mutation=True)
    res.mesh.split_edge_in_half(res.inner_edges[0])
    assert res.mesh.num_edges() == 8


def test_validate_after_mutation_flags_corruption():
    res = make_triangle(validate_after_mutation=True)
    mesh = res.mesh
    # corrupt an edge the split does not touch
    mesh.half_edge(res.inner_edges[1]).face = mesh.outer_face
    with pytest.raises(StructuralCorruptionError) as exc:
        mesh.split_edge_in_half(res.inner_edges[0])
    assert 'split_edge_in_half' in str(exc.value)
    assert mesh.stats_summary()['split_edge']['fail'] == 1


def test_op_stats_to_dict_and_table():
    s = OpStats(attempts=4, success=3, refused=1)
    s.record_time(0.002)
    s.record_time(0.001)
    d = s.to_dict()
    assert d['success_rate'] == pytest.approx(0.75)
    assert d['time_min'] == pytest.approx(0.001)
    assert d['time_max'] == pytest.approx(0.002)
    table = format_stats_table({'split_edge': d})
    lines = table.splitlines()
    assert lines[0].split()[0] == 'op'
    assert lines[2].split()[:5] == ['split_edge', '4', '3', '1', '0']
    assert format_stats_table({}) == "<no stats>"
