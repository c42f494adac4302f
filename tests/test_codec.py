"""Tests for golden_palette.core.codec — hex, RGB and HSL conversion."""

import pytest
from golden_palette.core.codec import (
    InvalidHexInput,
    decode_hex,
    encode_hex,
    hsl_to_rgb,
    normalize_hex,
    normalize_hex_input,
    rgb_to_hsl,
)


class TestDecodeHex:
    def test_white(self):
        assert decode_hex('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert decode_hex('#000000') == (0, 0, 0)

    def test_blue600(self):
        assert decode_hex('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert decode_hex('#FF8000') == (255, 128, 0)

    def test_no_hash(self):
        assert decode_hex('ff0000') == (255, 0, 0)

    def test_named_fields(self):
        rgb = decode_hex('#102030')
        assert (rgb.r, rgb.g, rgb.b) == (16, 32, 48)

    @pytest.mark.parametrize(
        'value',
        ['blue', '#ff0', 'fff', '#gggggg', '#ff', '#ffffffff', '', '#', ' #ff0000', '##ff0000', 'ff0000\n'],
    )
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidHexInput):
            decode_hex(value)

    def test_non_string_raises(self):
        with pytest.raises(InvalidHexInput):
            decode_hex(None)  # type: ignore[arg-type]

    def test_error_carries_value(self):
        with pytest.raises(InvalidHexInput) as exc:
            decode_hex('blue')
        assert exc.value.value == 'blue'
        assert 'blue' in str(exc.value)

    def test_is_value_error(self):
        assert issubclass(InvalidHexInput, ValueError)


class TestEncodeHex:
    def test_lowercase_zero_padded(self):
        assert encode_hex((255, 10, 0)) == '#ff0a00'

    def test_black(self):
        assert encode_hex((0, 0, 0)) == '#000000'

    def test_hex_round_trip_normalises_case(self):
        for value in ['#FFAA00', 'ffaa00', '#3A7bD5', '000000']:
            expected = '#' + value.lstrip('#').lower()
            assert encode_hex(decode_hex(value)) == expected

    def test_normalize_hex(self):
        assert normalize_hex('3A7BD5') == '#3a7bd5'


class TestRgbToHsl:
    def test_red(self):
        assert rgb_to_hsl((255, 0, 0)) == (0.0, 100.0, 50.0)

    def test_green(self):
        h, s, l = rgb_to_hsl((0, 255, 0))  # noqa: E741
        assert h == pytest.approx(120)
        assert s == pytest.approx(100)
        assert l == pytest.approx(50)

    def test_blue(self):
        assert rgb_to_hsl((0, 0, 255)).h == pytest.approx(240)

    def test_grey_is_achromatic(self):
        hsl = rgb_to_hsl((128, 128, 128))
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.l == pytest.approx(50.196, abs=1e-3)

    def test_light_branch_saturation(self):
        # l > 0.5 uses d / (2 - max - min)
        hsl = rgb_to_hsl((255, 128, 128))
        assert hsl.l > 50
        assert hsl.s == pytest.approx(100)

    def test_red_dominant_blue_over_green_wraps_into_range(self):
        # g < b in the red branch: hue sits just below 360, never negative
        hsl = rgb_to_hsl((255, 0, 128))
        assert 0 <= hsl.h < 360
        assert hsl.h == pytest.approx(329.88, abs=0.01)

    def test_red_dominant_near_zero(self):
        hsl = rgb_to_hsl((255, 0, 1))
        assert 359 < hsl.h < 360

    def test_hue_always_in_range(self):
        for rgb in [(255, 0, 0), (255, 0, 255), (255, 1, 2), (1, 0, 0), (200, 10, 199)]:
            assert 0 <= rgb_to_hsl(rgb).h < 360


class TestHslToRgb:
    def test_red(self):
        assert hsl_to_rgb((0, 100, 50)) == (255, 0, 0)

    def test_achromatic_rounds_half_up(self):
        # 0.5 * 255 = 127.5
        assert hsl_to_rgb((0, 0, 50)) == (128, 128, 128)

    def test_white_and_black(self):
        assert hsl_to_rgb((200, 70, 100)) == (255, 255, 255)
        assert hsl_to_rgb((200, 70, 0)) == (0, 0, 0)

    def test_golden_angle_from_red(self):
        assert hsl_to_rgb((137.5, 100, 50)) == (0, 255, 74)

    def test_hue_360_equals_zero(self):
        assert hsl_to_rgb((360, 100, 50)) == hsl_to_rgb((0, 100, 50))

    def test_channels_in_range(self):
        for h in range(0, 360, 15):
            for s in (0, 33.3, 100):
                for l in (0, 25, 50, 75, 100):  # noqa: E741
                    assert all(0 <= c <= 255 for c in hsl_to_rgb((h, s, l)))


class TestRoundTrip:
    def test_rgb_hsl_rgb_within_one(self):
        values = list(range(0, 256, 17)) + [1, 127, 128, 254]
        for r in values:
            for g in values:
                for b in values:
                    back = hsl_to_rgb(rgb_to_hsl((r, g, b)))
                    assert abs(back.r - r) <= 1, (r, g, b, back)
                    assert abs(back.g - g) <= 1, (r, g, b, back)
                    assert abs(back.b - b) <= 1, (r, g, b, back)

    def test_red_dominant_edge_round_trip(self):
        assert hsl_to_rgb(rgb_to_hsl((255, 0, 1))) == (255, 0, 1)


class TestNormalizeHexInput:
    def test_adds_hash_and_uppercases(self):
        assert normalize_hex_input('3a7bd5') == '#3A7BD5'

    def test_strips_non_hex(self):
        assert normalize_hex_input(' #3a-7b zd5 ') == '#3A7BD5'

    def test_truncates_to_seven(self):
        assert normalize_hex_input('#12345678') == '#123456'

    def test_partial_left_alone_without_complete(self):
        assert normalize_hex_input('#F8') == '#F8'

    def test_complete_pads_with_zeros(self):
        assert normalize_hex_input('#F8', complete=True) == '#F80000'
        assert normalize_hex_input('3a7', complete=True) == '#3A7000'

    def test_complete_ignores_bare_hash(self):
        assert normalize_hex_input('#', complete=True) == '#'

    def test_empty(self):
        assert normalize_hex_input('') == ''

    def test_result_may_still_be_invalid(self):
        assert normalize_hex_input('#F8') == '#F8'
        with pytest.raises(InvalidHexInput):
            decode_hex(normalize_hex_input('#F8'))
