import pytest

from meshmath.textures import checkerboard_texture, cold_warm_colors

BLUE = (42, 157, 223)
WHITE = (255, 255, 255)


def _pixel(image, resolution, x, y):
    offset = (x * resolution + y) * 3
    return tuple(image[offset:offset + 3])


def test_cold_warm_has_256_entries():
    assert len(cold_warm_colors()) == 256


def test_cold_warm_first_entry():
    assert cold_warm_colors()[0] == (59, 76, 192)


def test_cold_warm_neutral_middle():
    assert cold_warm_colors()[128] == (221, 221, 221)


def test_cold_warm_entries_are_bytes():
    for color in cold_warm_colors():
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_cold_warm_returns_fresh_list():
    colors = cold_warm_colors()
    colors[0] = (0, 0, 0)
    assert cold_warm_colors()[0] == (59, 76, 192)


def test_cold_warm_goes_from_blue_to_red():
    colors = cold_warm_colors()
    r0, _, b0 = colors[0]
    r1, _, b1 = colors[200]
    assert b0 > r0
    assert r1 > b1


def test_checkerboard_size():
    resolution = 70
    image = checkerboard_texture(resolution)
    assert len(image) == resolution * resolution * 3


def test_checkerboard_default_resolution():
    assert len(checkerboard_texture()) == 512 * 512 * 3


def test_checkerboard_origin_is_white():
    image = checkerboard_texture(64)
    assert _pixel(image, 64, 0, 0) == WHITE


def test_checkerboard_neighbouring_cells_are_blue():
    image = checkerboard_texture(64)
    assert _pixel(image, 64, 0, 32) == BLUE
    assert _pixel(image, 64, 32, 0) == BLUE
    assert _pixel(image, 64, 32, 32) == WHITE


def test_checkerboard_only_two_colors():
    resolution = 80
    image = checkerboard_texture(resolution)
    pixels = {tuple(image[k:k + 3]) for k in range(0, len(image), 3)}
    assert pixels == {BLUE, WHITE}


def test_checkerboard_is_symmetric():
    resolution = 72
    image = checkerboard_texture(resolution)
    for x in range(0, resolution, 7):
        for y in range(0, resolution, 5):
            assert _pixel(image, resolution, x, y) == _pixel(image, resolution, y, x)


def test_checkerboard_cells_are_uniform():
    resolution = 64
    image = checkerboard_texture(resolution)
    for x in range(32):
        for y in range(32):
            assert _pixel(image, resolution, x, y) == WHITE
            assert _pixel(image, resolution, x, y + 32) == BLUE


@pytest.mark.parametrize("resolution", [0, -4])
def test_checkerboard_rejects_non_positive_resolution(resolution):
    with pytest.raises(ValueError):
        checkerboard_texture(resolution)