from asciigrid.charsets import BLOCKS, CLASSIC_PALETTE, DEFAULT_PALETTE, DENSE, PALETTES, PaletteConfig


def test_default_palette_has_eleven_glyphs():
    assert DEFAULT_PALETTE == ".,:;+*?%S#@"
    assert len(DEFAULT_PALETTE) == 11


def test_classic_palette_has_eleven_glyphs():
    assert len(CLASSIC_PALETTE) == 11
    assert CLASSIC_PALETTE[0] == "."
    assert CLASSIC_PALETTE[-1] == "@"


def test_named_palettes_have_unique_glyphs():
    for palette in PALETTES.values():
        assert len(set(palette)) == len(palette)


def test_ramps_start_with_lightest_ink():
    assert BLOCKS[0] == " "
    assert BLOCKS[-1] == "█"
    assert DENSE[0] == " "
    assert DENSE[-1] == "$"


def test_config_defaults_to_default_palette():
    assert PaletteConfig().resolve() == DEFAULT_PALETTE


def test_custom_palette_overrides_default():
    config = PaletteConfig(custom_palette="abc")
    assert config.resolve() == "abc"


def test_empty_custom_palette_falls_back():
    assert PaletteConfig(custom_palette="").resolve() == DEFAULT_PALETTE
    assert PaletteConfig(custom_palette=[]).resolve() == DEFAULT_PALETTE


def test_custom_default_palette():
    config = PaletteConfig(default_palette=BLOCKS)
    assert config.resolve() == BLOCKS
    assert PaletteConfig(default_palette=BLOCKS, custom_palette=["x", "y"]).resolve() == ["x", "y"]
