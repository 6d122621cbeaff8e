import pytest

from mobagen.color import Color, Color32, Colorf


@pytest.mark.parametrize("packed", [0, 0xFFFFFFFF, 0xFF0000FF, 0xFFE16941, 0x12345678])
def test_packed_round_trip(packed):
    assert Color32.from_packed(packed).packed() == packed


def test_from_packed_channel_order():
    assert Color32.from_packed(0xFF0000FF) == Color32(255, 0, 0, 255)


def test_named_colors_from_source():
    assert Color.RED == Color32(255, 0, 0)
    assert Color.WHITE.packed() == 0xFFFFFFFF
    assert Color.CYAN == Color.AQUA
    assert Color.MAGENTA == Color.FUCHSIA
    assert Color.TRANSPARENT.a == 0


def test_default_alpha_is_opaque():
    assert Color32(1, 2, 3).a == 255
    assert Color32() == Color.BLACK


@pytest.mark.parametrize("bad", [-1, 256])
def test_channel_out_of_range_raises(bad):
    with pytest.raises(ValueError):
        Color32(bad, 0, 0)


def test_packed_out_of_range_raises():
    with pytest.raises(ValueError):
        Color32.from_packed(0x1FFFFFFFF)


def test_subscript_order():
    c = Color32(10, 20, 30, 40)
    assert [c[0], c[1], c[2], c[3]] == [c.a, c.r, c.g, c.b]
    assert c[4] == c.a


@pytest.mark.parametrize("index", [-1, 5])
def test_subscript_out_of_range(index):
    with pytest.raises(IndexError):
        Color32(1, 2, 3)[index]


def test_random_color_within_bounds():
    for _ in range(50):
        c = Color32.random_color(10, 20)
        assert all(10 <= v <= 20 for v in (c.r, c.g, c.b))
        assert c.a == 255


def test_random_color_fixed_range():
    assert Color32.random_color(7, 7) == Color32(7, 7, 7, 255)


def test_random_color_empty_range_raises():
    with pytest.raises(ValueError):
        Color32.random_color(20, 10)


def test_lerp_endpoints():
    c1 = Color32(10, 20, 30)
    c2 = Color32(200, 150, 100)
    assert Color32.lerp(c1, c2, 0.0) == c1
    assert Color32.lerp(c1, c2, 1.0) == c2


def test_lerp_midpoint_is_between():
    c = Color32.lerp(Color.BLACK, Color.WHITE, 0.5)
    assert 0 < c.r < 255
    assert c.r == c.g == c.b


def test_light_and_dark_bounds():
    base = Color.CORNFLOWER_BLUE
    light = base.light()
    dark = base.dark()
    for channel in ("r", "g", "b"):
        assert getattr(dark, channel) <= getattr(base, channel) <= getattr(light, channel)
    assert Color.WHITE.light() == Color.WHITE
    assert Color.BLACK.dark() == Color.BLACK


@pytest.mark.parametrize("color", [Color.BLACK, Color.WHITE, Color.RED, Color.TRANSPARENT])
def test_colorf_round_trip(color):
    assert Color32.from_colorf(Colorf.from_color32(color)) == color


def test_from_colorf_clamps():
    assert Color32.from_colorf(Colorf(2.0, -1.0, 1.0, 1.0)) == Color32(255, 0, 255, 255)


def test_colorf_from_packed_alpha():
    c = Colorf.from_packed(0xFF000000)
    assert (c.r, c.g, c.b, c.a) == (0.0, 0.0, 0.0, 1.0)


def test_hsv_zero_saturation_is_gray():
    c = Colorf.hsv_to_rgb(0.3, 0.0, 0.25)
    assert (c.r, c.g, c.b) == (0.25, 0.25, 0.25)


def test_hsv_zero_value_is_black():
    c = Colorf.hsv_to_rgb(0.3, 0.5, 0.0)
    assert (c.r, c.g, c.b) == (0.0, 0.0, 0.0)
    assert c.a == 1.0


def test_hsv_primary_hues():
    red = Colorf.hsv_to_rgb(0.0, 1.0, 1.0)
    assert (red.r, red.g, red.b) == (1.0, 0.0, 0.0)
    green = Colorf.hsv_to_rgb(1 / 3, 1.0, 1.0)
    assert (green.r, green.g, green.b) == pytest.approx((0.0, 1.0, 0.0))


def test_hsv_hdr_clamping():
    unclamped = Colorf.hsv_to_rgb(0.0, 2.0, 1.0, hdr=True)
    clamped = Colorf.hsv_to_rgb(0.0, 2.0, 1.0, hdr=False)
    assert unclamped.g < 0.0
    assert clamped.g == 0.0
    assert all(0.0 <= v <= 1.0 for v in (clamped.r, clamped.g, clamped.b))


def test_hsv_hue_out_of_range_raises():
    with pytest.raises(ValueError):
        Colorf.hsv_to_rgb(2.0, 1.0, 1.0)