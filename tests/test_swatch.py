"""Tests for golden_palette.core.swatch — PNG strip rendering."""

import pytest
from golden_palette.core.codec import decode_hex
from golden_palette.core.palette import generate_palette
from golden_palette.core.swatch import render_swatch, swatch_filename


class TestRenderSwatch:
    def test_dimensions(self):
        img = render_swatch(generate_palette('#ff0000'), width=200, height=20)
        assert img.size == (200, 20)
        assert img.mode == 'RGB'

    def test_blocks_in_slot_order(self):
        palette = generate_palette('#ff0000')
        img = render_swatch(palette, width=100, height=10)
        for slot in palette:
            x = (slot - 1) * 10 + 5
            assert img.getpixel((x, 5)) == tuple(decode_hex(palette[slot]))

    def test_remainder_goes_to_last_block(self):
        palette = generate_palette('#3a7bd5')
        img = render_swatch(palette, width=105, height=4)
        assert img.getpixel((104, 0)) == tuple(decode_hex(palette[10]))

    def test_too_small(self):
        with pytest.raises(ValueError):
            render_swatch(generate_palette('#ff0000'), width=5, height=10)
        with pytest.raises(ValueError):
            render_swatch(generate_palette('#ff0000'), width=100, height=0)


class TestSwatchFilename:
    def test_uses_base(self):
        assert swatch_filename(generate_palette('#3A7BD5')) == 'palette-3a7bd5.png'
