import numpy as np
import pytest

from neon.image import Image, TileIterator


def test_new_image_is_blank():
    image = Image(4, 3)
    assert image.size == (4, 3)
    assert image.num_pixels == 12
    assert image[3, 2] == (0, 0, 0, 0)


def test_byte_counts():
    image = Image(5, 2)
    assert image.pixel_bytes == 4
    assert image.total_bytes == image.num_pixels * image.pixel_bytes


def test_set_and_get_round_trip():
    image = Image(3, 3)
    image[1, 2] = (10, 20, 30, 255)
    assert image[1, 2] == (10, 20, 30, 255)
    assert image[2, 1] == (0, 0, 0, 0)


def test_bottom_up_flips_rows():
    image = Image(3, 4)
    image.set_bottom_up((2, 0), (1, 2, 3, 4))
    assert image[2, image.height - 1] == (1, 2, 3, 4)
    assert image.get_bottom_up((2, 0)) == (1, 2, 3, 4)


def test_out_of_range_index():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image[2, 0]
    with pytest.raises(IndexError):
        image[0, -1] = (1, 1, 1, 1)
    assert np.count_nonzero(image.pixels) == 0
    assert image[1, 1] == (0, 0, 0, 0)


def test_bad_color_rejected():
    image = Image(2, 2)
    with pytest.raises(ValueError):
        image[0, 0] = (1, 2, 3)
    with pytest.raises(ValueError):
        image[0, 0] = (1, 2, 3, 256)
    assert image[0, 0] == (0, 0, 0, 0)
    assert np.count_nonzero(image.pixels) == 0


def test_tile_iterator_row_order():
    tile = TileIterator((1, 0), (3, 2))
    assert list(tile) == [(1, 0), (2, 0), (1, 1), (2, 1)]
    assert len(tile) == 4


def test_tiles_cover_every_pixel_once():
    image = Image(5, 3)
    tiles = image.to_tiles((2, 2))
    indices = [index for tile in tiles for index in tile]
    assert len(indices) == image.num_pixels
    assert set(indices) == {(x, y) for x in range(5) for y in range(3)}


def test_tiles_clip_to_image():
    image = Image(5, 3)
    tiles = image.to_tiles((2, 2))
    assert all(t.end[0] <= 5 and t.end[1] <= 3 for t in tiles)
    assert tiles[0] == TileIterator((0, 0), (2, 2))


def test_zero_tile_size_rejected():
    with pytest.raises(ValueError):
        Image(4, 4).to_tiles((0, 2))


def test_resize_keeps_leading_pixels():
    image = Image(2, 2)
    image[0, 0] = (9, 9, 9, 9)
    image[1, 0] = (8, 8, 8, 8)
    image.resize(4, 1)
    assert image.size == (4, 1)
    assert image[0, 0] == (9, 9, 9, 9)
    assert image[1, 0] == (8, 8, 8, 8)
    assert image[3, 0] == (0, 0, 0, 0)


def test_save_and_load_round_trip(tmp_path):
    image = Image(3, 2)
    image[0, 0] = (255, 0, 0, 255)
    image[2, 1] = (0, 128, 64, 200)
    path = tmp_path / "out.png"
    image.save(path)
    loaded = Image.from_file(path)
    assert loaded.size == image.size
    assert np.array_equal(loaded.pixels, image.pixels)


def test_load_replaces_contents(tmp_path):
    source = Image(2, 5)
    source[1, 4] = (1, 2, 3, 4)
    path = tmp_path / "in.png"
    source.save(path)
    target = Image(7, 7)
    target.load(path)
    assert target.size == (2, 5)
    assert target[1, 4] == (1, 2, 3, 4)


def test_save_empty_image_rejected(tmp_path):
    with pytest.raises(ValueError):
        Image().save(tmp_path / "empty.png")


def test_inject_places_at_offset():
    big = Image(4, 4)
    small = Image(2, 2)
    small[0, 0] = (5, 5, 5, 5)
    small[1, 1] = (6, 6, 6, 6)
    small.offset = (1, 2)
    big.inject(small)
    assert big[1, 2] == (5, 5, 5, 5)
    assert big[2, 3] == (6, 6, 6, 6)
    assert big[0, 0] == (0, 0, 0, 0)


def test_inject_clips_at_edge():
    big = Image(3, 3)
    small = Image(2, 2)
    small[0, 0] = (7, 7, 7, 7)
    small[1, 0] = (8, 8, 8, 8)
    small.offset = (2, 0)
    big.inject(small)
    assert big[2, 0] == (7, 7, 7, 7)


def test_inject_larger_image_rejected():
    with pytest.raises(ValueError):
        Image(2, 2).inject(Image(3, 1))