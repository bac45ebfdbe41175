from PIL import Image

from asciigrid.converter import image_to_ascii


def test_solid_white_maps_to_brightest():
    img = Image.new("L", (3, 2), 255)
    assert image_to_ascii(img) == "@ @ @ \n@ @ @ \n"


def test_solid_black_maps_to_darkest():
    img = Image.new("L", (3, 2), 0)
    assert image_to_ascii(img) == ". . . \n. . . \n"


def test_output_dimensions():
    img = Image.new("L", (50, 60), 128)
    lines = image_to_ascii(img, width=5, height=3).splitlines()
    assert len(lines) == 3
    assert all(len(line) == 10 for line in lines)


def test_width_parameter():
    img = Image.new("L", (100, 200), 128)
    lines = image_to_ascii(img, width=5).splitlines()
    assert len(lines) == 10
    assert all(line == "* * * * * " for line in lines)


def test_custom_palette():
    img = Image.new("L", (2, 1))
    img.putdata([0, 255])
    assert image_to_ascii(img, palette="ab") == "a b \n"


def test_gradient_produces_varying_characters():
    img = Image.new("L", (4, 1))
    img.putdata([0, 64, 128, 255])
    assert image_to_ascii(img) == ". ; * @ \n"


def test_accepts_file_path(tmp_path):
    path = tmp_path / "test.png"
    Image.new("L", (20, 20), 255).save(path)
    result = image_to_ascii(path, width=4)
    assert result == "@ @ @ @ \n" * 4


def test_accepts_rgb_image():
    img = Image.new("RGB", (2, 2), (255, 255, 255))
    assert "@" in image_to_ascii(img)


def test_zero_size_gives_empty_string():
    img = Image.new("L", (5, 10), 128)
    assert image_to_ascii(img, width=0) == ""
