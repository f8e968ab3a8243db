import pytest

from three_body.boundary import split_at_wraps, wrap, wrap_coord

W = 800.0
H = 600.0


def test_wrap_negative_reappears_at_far_edge():
    assert wrap_coord(-1.0, W) == W - 1


def test_wrap_past_extent_reappears_at_near_edge():
    assert wrap_coord(W + 1, W) == 1.0


def test_wrap_identity_inside_range():
    assert wrap_coord(0.5 * W, W) == 0.5 * W
    assert wrap_coord(0.0, W) == 0.0


def test_wrap_edge_maps_to_zero():
    assert wrap_coord(W, W) == 0.0


def test_wrap_many_extents_away():
    assert wrap_coord(-3 * W - 10.0, W) == pytest.approx(W - 10.0)
    assert wrap_coord(5 * W + 10.0, W) == pytest.approx(10.0)


def test_wrap_tiny_negative_stays_in_range():
    x = wrap_coord(-1e-20, W)
    assert 0.0 <= x < W


def test_wrap_is_per_axis():
    assert wrap((-1.0, H + 2.0), W, H) == (W - 1, 2.0)
    assert wrap((10.0, 20.0), W, H) == (10.0, 20.0)


def test_wrap_rejects_non_positive_extent():
    with pytest.raises(ValueError):
        wrap_coord(1.0, 0.0)
    with pytest.raises(ValueError):
        wrap((1.0, 1.0), W, -5.0)


def test_split_at_wraps_breaks_on_jump():
    trail = [(790.0, 100.0), (795.0, 100.0), (2.0, 100.0), (7.0, 100.0)]

    runs = split_at_wraps(trail, W, H)

    assert runs == [[(790.0, 100.0), (795.0, 100.0)], [(2.0, 100.0), (7.0, 100.0)]]


def test_split_at_wraps_vertical_jump():
    trail = [(100.0, 5.0), (100.0, 595.0)]

    assert len(split_at_wraps(trail, W, H)) == 2


def test_split_at_wraps_continuous_trail():
    trail = [(float(i), float(i)) for i in range(50)]

    assert split_at_wraps(trail, W, H) == [trail]
    assert split_at_wraps([], W, H) == []
