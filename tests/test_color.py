import numpy as np
import pytest

from gradient_strip import RGB, BlendWeightError, InvalidHexError


def test_hex_round_trip_lowercases():
    for s in ("#A0b1C2", "#000000", "#FFFFFF", "#7f7F7f"):
        assert str(RGB.from_hex(s)) == s.lower()


def test_hex_prefix_match_ignores_tail():
    assert RGB.from_hex("#102030 and more").to_tuple() == (16, 32, 48)
    assert RGB.from_hex("#1020304").to_tuple() == (16, 32, 48)


@pytest.mark.parametrize("bad", ["", "102030", "#10203", "#10203g", " #102030", "#"])
def test_invalid_hex_raises(bad):
    with pytest.raises(InvalidHexError):
        RGB.from_hex(bad)


def test_invalid_hex_is_a_value_error():
    with pytest.raises(ValueError):
        RGB.from_hex("not a colour")


def test_default_is_black():
    assert RGB.default() == RGB(0, 0, 0)
    assert RGB.default().to_hex() == "#000000"


def test_to_tuple_order():
    assert RGB(1, 2, 3).to_tuple() == (1, 2, 3)


def test_frozen():
    c = RGB(1, 2, 3)
    with pytest.raises(AttributeError):
        c.r = 5  # type: ignore[misc]


def test_add_wraps_past_255():
    assert RGB(200, 10, 255).add(RGB(100, 10, 1)).to_tuple() == (44, 20, 0)


def test_scale_truncates():
    assert RGB(255, 100, 3).scale_by(0.5).to_tuple() == (127, 50, 1)
    assert RGB(255, 255, 255).scale_by(0.75).to_tuple() == (191, 191, 191)


def test_scale_saturates():
    assert RGB(200, 100, 0).scale_by(2.0).to_tuple() == (255, 200, 0)
    assert RGB(200, 100, 0).scale_by(-1.0).to_tuple() == (0, 0, 0)
    assert RGB(200, 100, 0).scale_by(float("nan")).to_tuple() == (0, 0, 0)


def test_blend_with_itself_is_identity():
    rng = np.random.default_rng(7)
    for _ in range(50):
        c = RGB.random(rng)
        a = float(rng.random())
        out = c.blend(c, a, 1.0 - a)
        # two truncations lose at most one unit per channel
        assert all(0 <= x - y <= 1 for x, y in zip(c.to_tuple(), out.to_tuple()))


def test_blend_endpoints_exact():
    a, b = RGB(10, 20, 30), RGB(200, 150, 100)
    assert a.blend(b, 1.0, 0.0) == a
    assert a.blend(b, 0.0, 1.0) == b


def test_blend_weights_must_sum_to_one():
    with pytest.raises(BlendWeightError):
        RGB(1, 2, 3).blend(RGB(4, 5, 6), 0.5, 0.6)
    with pytest.raises(BlendWeightError):
        RGB(1, 2, 3).blend(RGB(4, 5, 6), 0.0, 0.0)


def test_random_is_reproducible_with_seed():
    a = [RGB.random(np.random.default_rng(42)) for _ in range(2)]
    assert a[0] == a[1]


def test_random_covers_full_range():
    rng = np.random.default_rng(1234)
    seen = set()
    for _ in range(5000):
        seen.update(RGB.random(rng).to_tuple())
    assert min(seen) == 0
    assert max(seen) == 255
    assert len(seen) == 256


def test_random_without_rng():
    c = RGB.random()
    assert all(0 <= v <= 255 for v in c.to_tuple())
