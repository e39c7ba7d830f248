import pytest

from ohmbadge.ledmatrix import (
    COLORS,
    LAYOUT,
    NUM_PIXELS,
    Color,
    LedMatrix,
    band_frame,
    urgb,
)


def test_urgb_black_is_zero():
    assert urgb(0, 0, 0) == 0


def test_urgb_puts_green_in_top_byte():
    assert urgb(0, 0xFF, 0) == 0xFF0000


@pytest.mark.parametrize("r,g,b", [(1, 2, 3), (255, 0, 128), (40, 40, 0)])
def test_urgb_channels_can_be_recovered(r, g, b):
    word = urgb(r, g, b)
    assert (word >> 16) & 0xFF == g
    assert (word >> 8) & 0xFF == r
    assert word & 0xFF == b
    assert word < 1 << 24


@pytest.mark.parametrize("r,g,b", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_urgb_rejects_out_of_range(r, g, b):
    with pytest.raises(ValueError):
        urgb(r, g, b)


def test_color_word_matches_urgb():
    color = Color(10, 0, 20)
    assert color.word == urgb(10, 0, 20)


def test_frame_places_bands_by_layout():
    frame = band_frame(4, 7, 2)
    assert len(frame) == NUM_PIXELS
    expected = {0: 0, 1: COLORS[4].word, 2: COLORS[7].word, 3: COLORS[2].word}
    for band, word in zip(LAYOUT, frame):
        assert word == expected[band]


def test_frame_supports_gold_and_silver():
    frame = band_frame(1, 0, 11)
    third_band = [word for band, word in zip(LAYOUT, frame) if band == 3]
    assert third_band == [COLORS[11].word] * 3


@pytest.mark.parametrize("args", [(12, 0, 0), (0, -1, 0), (0, 0, 20)])
def test_frame_rejects_bad_index(args):
    with pytest.raises(ValueError):
        band_frame(*args)


def test_matrix_sends_every_pixel_shifted():
    sent = []
    matrix = LedMatrix(sent.append)
    frame = matrix.show_bands(3, 3, 3)
    assert len(sent) == NUM_PIXELS
    assert [word >> 8 for word in sent] == frame
    assert all(word & 0xFF == 0 for word in sent)


def test_matrix_edge_pixels_are_dark():
    sent = []
    LedMatrix(sent.append).show_bands(9, 9, 9)
    edges = [word for band, word in zip(LAYOUT, sent) if band == 0]
    assert edges and all(word == 0 for word in edges)