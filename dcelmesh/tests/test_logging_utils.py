import logging

from dcelmesh.core.builders import build_polygon
from dcelmesh.core.config import DCELConfig
from dcelmesh.core.logging_utils import configure_logging, get_logger


def test_get_logger_namespaces_names():
    assert get_logger('custom').name == 'dcelmesh.custom'
    assert get_logger('dcelmesh.dcel').name == 'dcelmesh.dcel'
    assert get_logger('dcelmesh.x', level='WARNING').level == logging.WARNING


def test_configure_logging_does_not_touch_process_root():
    root_handlers = list(logging.getLogger().handlers)
    pkg = configure_logging('DEBUG')
    assert pkg.name == 'dcelmesh'
    assert pkg.level == logging.DEBUG
    assert pkg.propagate is False
    assert any(not isinstance(h, logging.NullHandler) for h in pkg.handlers)
    assert list(logging.getLogger().handlers) == root_handlers


def test_mutations_and_refusals_are_logged(capture_test_logs):
    res = build_polygon([(0, 0), (1, 0), (0, 1)], config=DCELConfig(debug=True))
    mesh = res.mesh
    mesh.split_edge_in_half(res.inner_edges[0])
    mesh.remove_inner_edge(res.inner_edges[1])
    text = capture_test_logs.getvalue()
    assert 'split_edge_in_half' in text
    assert 'make_next' in text
    assert 'refused' in text
    assert 'dcelmesh.dcel.DCEL' in text
