from three_body.collisions import describe_close_pairs, find_close_pairs
from three_body.data_models import Body


def _bodies(*positions):
    return [Body(name, 1.0, 5.0, p, (0.0, 0.0)) for name, p in zip("ABC", positions)]


def test_no_close_pairs():
    bodies = _bodies((0.0, 0.0), (50.0, 0.0), (0.0, 50.0))

    assert find_close_pairs(bodies) == []
    assert describe_close_pairs(bodies, []) is None


def test_close_pairs_found_in_order():
    bodies = _bodies((0.0, 0.0), (3.0, 4.0), (8.0, 4.0))

    pairs = find_close_pairs(bodies)

    assert pairs == [(0, 1), (0, 2), (1, 2)]


def test_threshold_is_exclusive():
    bodies = _bodies((0.0, 0.0), (10.0, 0.0), (100.0, 0.0))

    assert find_close_pairs(bodies) == []
    assert find_close_pairs(bodies, min_distance=10.5) == [(0, 1)]


def test_message_names_bodies():
    bodies = _bodies((0.0, 0.0), (1.0, 0.0), (100.0, 0.0))

    assert describe_close_pairs(bodies, find_close_pairs(bodies)) == "Close approach: A ↔ B"
