import pytest

from logicboard.connector import Connector, SourceKind
from logicboard.gates import Rect


def _make(**overrides):
    fields = dict(
        start_x=100,
        start_y=50,
        dis_x=40,
        dis_y=30,
        value=True,
        up_down=True,
        source_kind=SourceKind.GATE,
        source_index=0,
        dir_x=True,
        dir_y=True,
    )
    fields.update(overrides)
    return Connector(**fields)


def _endpoints(segment):
    return {(segment.x1, segment.y1), (segment.x2, segment.y2)}


@pytest.mark.parametrize("up_down", [True, False])
def test_segments_are_joined(up_down):
    segs = _make(up_down=up_down).segments()
    assert len(segs) == 3
    assert _endpoints(segs[0]) & _endpoints(segs[1])
    assert _endpoints(segs[1]) & _endpoints(segs[2])


def test_upward_wire_spans_box():
    conn = _make(dis_x=40, dis_y=30, up_down=True)
    segs = conn.segments()
    assert (segs[0].x1, segs[0].y1) == (0, 0)
    assert (segs[2].x2, segs[2].y2) == (40, 30)


def test_downward_wire_spans_box():
    conn = _make(dis_x=40, dis_y=30, up_down=False)
    segs = conn.segments()
    assert (segs[0].x1, segs[0].y1) == (0, 30)
    assert (segs[2].x2, segs[2].y2) == (40, 0)


def test_vertical_segment_is_in_middle():
    segs = _make(dis_x=41, dis_y=10).segments()
    assert segs[1].x1 == segs[1].x2 == 20


def test_end_point_follows_direction_flags():
    assert _make(dir_x=True, dir_y=True).end_point() == (140, 80)
    assert _make(dir_x=False, dir_y=True).end_point() == (100, 80)
    assert _make(dir_x=True, dir_y=False).end_point() == (140, 50)
    assert _make(dir_x=False, dir_y=False).end_point() == (100, 50)


def test_distance_from_start_is_zero():
    conn = _make()
    assert conn.distance_from(conn.position) == 0


def test_distance_grows_with_offset():
    conn = _make()
    near = conn.distance_from((101, 50))
    far = conn.distance_from((110, 50))
    assert near < far


def test_bounds_cover_box():
    assert _make(dis_x=40, dis_y=30).bounds == Rect(0, 0, 40, 30)


def test_source_kind_values():
    assert SourceKind(1) is SourceKind.GATE
    assert SourceKind(2) is SourceKind.ON
    assert SourceKind(3) is SourceKind.OFF


def test_value_is_mutable():
    conn = _make(value=False)
    conn.value = True
    assert conn.value is True