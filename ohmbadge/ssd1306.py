"""Frame buffer and command stream for an SSD1306 OLED on an I2C bus."""

from enum import IntEnum

from .font import GLYPH_WIDTH, glyph

WIDTH = 128
HEIGHT = 64

COMMAND_PREFIX = 0x80
DATA_PREFIX = 0x40


class Command(IntEnum):
    """SSD1306 command bytes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


_CONFIG_SEQUENCE = (
    Command.SET_DISP | 0x00,
    Command.SET_MEM_ADDR, 0x01,
    Command.SET_DISP_START_LINE | 0x00,
    Command.SET_SEG_REMAP | 0x01,
    Command.SET_MUX_RATIO, HEIGHT - 1,
    Command.SET_COM_OUT_DIR | 0x08,
    Command.SET_DISP_OFFSET, 0x00,
    Command.SET_COM_PIN_CFG, 0x12,
    Command.SET_DISP_CLK_DIV, 0x80,
    Command.SET_PRECHARGE, 0xF1,
    Command.SET_VCOM_DESEL, 0x30,
    Command.SET_CONTRAST, 0xFF,
    Command.SET_ENTIRE_ON,
    Command.SET_NORM_INV,
    Command.SET_CHARGE_PUMP, 0x14,
    Command.SET_DISP | 0x01,
)


class SSD1306:
    """An SSD1306 display in vertical addressing mode.

    ``bus`` is called as ``bus(address, payload)`` for every I2C write, with
    ``payload`` as bytes.
    """

    def __init__(self, width, height, external_vcc, address, bus):
        self.width = width
        self.height = height
        self.pages = height // 8
        self.external_vcc = external_vcc
        self.address = address
        self._bus = bus
        self._buffer = bytearray(self.pages * width + 1)
        self._buffer[0] = DATA_PREFIX

    @property
    def buffer(self):
        """The data transfer sent by :meth:`send_data`, prefix byte first."""
        return bytes(self._buffer)

    def config(self):
        """Send the power-up configuration and switch the panel on."""
        for command in _CONFIG_SEQUENCE:
            self.command(command)

    def command(self, command):
        """Send a single command byte."""
        self._bus(self.address, bytes((COMMAND_PREFIX, int(command))))

    def send_data(self):
        """Set the full address window and transfer the whole frame buffer."""
        for command in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(command)
        self._bus(self.address, bytes(self._buffer))

    def _index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the display")
        return (y >> 3) + (x << 3) + 1

    def pixel(self, x, y, value):
        """Switch the pixel at ``(x, y)`` on or off."""
        index = self._index(x, y)
        mask = 1 << (y & 0b111)
        if value:
            self._buffer[index] |= mask
        else:
            self._buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x, y):
        """Return whether the pixel at ``(x, y)`` is on."""
        return bool(self._buffer[self._index(x, y)] & (1 << (y & 0b111)))

    def fill(self, value):
        """Set every pixel of the display to ``value``."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top, left, width, height, value, fill):
        """Draw a rectangle outline, and its interior when ``fill`` is true."""
        right = left + width - 1
        bottom = top + height - 1
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, bottom, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(right, y, value)
        if fill:
            for x in range(left + 1, right):
                for y in range(top + 1, bottom):
                    self.pixel(x, y, value)

    def line(self, x0, y0, x1, y1, value):
        """Draw a straight line between two points, both included."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0, x1, y, value):
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x, y0, y1, value):
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char, x, y):
        """Draw one 8x8 character with its top-left corner at ``(x, y)``."""
        for column, bits in enumerate(glyph(char)):
            for row in range(8):
                self.pixel(x + column, y + row, bits & (1 << row))

    def draw_string(self, text, x, y):
        """Draw ``text``, wrapping at the right edge and stopping at the bottom."""
        for char in text:
            self.draw_char(char, x, y)
            x += GLYPH_WIDTH
            if x + GLYPH_WIDTH >= self.width:
                x = 0
                y += 8
            if y + 8 >= self.height:
                break