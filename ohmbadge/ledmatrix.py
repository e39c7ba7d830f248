"""Colour bands of a resistor drawn on a 5x5 WS2812 LED matrix."""

from dataclasses import dataclass

NUM_PIXELS = 25
WS2812_PIN = 7
IS_RGBW = False

# Which band lights each pixel: 1 first digit, 2 second digit, 3 multiplier.
# Rows are mirrored to match the wiring of the matrix.
LAYOUT = (
    0, 0, 0, 0, 0,
    0, 3, 3, 3, 0,
    0, 0, 0, 0, 0,
    0, 2, 2, 2, 0,
    0, 1, 1, 1, 0,
)


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    @property
    def word(self):
        """The colour packed in the matrix's GRB order."""
        return urgb(self.r, self.g, self.b)


COLORS = (
    Color(0, 0, 0),      # black
    Color(20, 2, 0),     # brown
    Color(20, 0, 0),     # red
    Color(20, 5, 0),     # orange
    Color(20, 10, 0),    # yellow
    Color(0, 20, 0),     # green
    Color(0, 0, 20),     # blue
    Color(10, 0, 20),    # violet
    Color(10, 10, 10),   # grey
    Color(20, 20, 20),   # white
    Color(40, 40, 0),    # gold
    Color(40, 40, 40),   # silver
)


def urgb(r, g, b):
    """Pack 8-bit channels into a 24-bit GRB word."""
    for name, channel in (("r", r), ("g", g), ("b", b)):
        if not 0 <= channel <= 0xFF:
            raise ValueError(f"channel {name} out of range: {channel}")
    return (r << 8) | (g << 16) | b


def _color(index):
    if not 0 <= index < len(COLORS):
        raise ValueError(f"colour index out of range: {index}")
    return COLORS[index]


def band_frame(digit1, digit2, multiplier):
    """Return the GRB word of every pixel for the given band colour indices."""
    words = {
        0: 0,
        1: _color(digit1).word,
        2: _color(digit2).word,
        3: _color(multiplier).word,
    }
    return [words[band] for band in LAYOUT]


class LedMatrix:
    """Sends band frames to the matrix through ``sink``.

    ``sink`` is called once per pixel with the word the state machine takes:
    the GRB value shifted into the upper 24 bits.
    """

    def __init__(self, sink):
        self._sink = sink

    def show_bands(self, digit1, digit2, multiplier):
        """Light the matrix with three bands and return the frame sent."""
        frame = band_frame(digit1, digit2, multiplier)
        for word in frame:
            self._sink(word << 8)
        return frame