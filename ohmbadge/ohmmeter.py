"""Ohmmeter: resistance from a voltage divider read by the ADC.

The unknown resistor sits against a known 10k resistor; the averaged ADC
reading gives its value, its colour bands and the nearest E24 value.
"""

import argparse
import sys
from dataclasses import dataclass

from .colorcode import ColorCode, color_code
from .ledmatrix import LedMatrix
from .ssd1306 import HEIGHT, SSD1306, WIDTH

KNOWN_RESISTANCE = 10000
ADC_VREF = 3.31
ADC_RESOLUTION = 4095
SAMPLE_COUNT = 500
DISPLAY_ADDRESS = 0x3C

COLOR_NAMES = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)

MULTIPLIER_NAMES = COLOR_NAMES + ("Ouro", "Prata")


@dataclass(frozen=True)
class Reading:
    """An averaged ADC value and what it says about the resistor."""

    mean: float
    resistance: float
    code: ColorCode

    @property
    def band_names(self):
        """Names of the first digit, second digit and multiplier bands."""
        return (
            COLOR_NAMES[self.code.digit1],
            COLOR_NAMES[self.code.digit2],
            MULTIPLIER_NAMES[self.code.multiplier_index],
        )

    @property
    def adc_text(self):
        return f"{self.mean:1.0f}"

    @property
    def resistance_text(self):
        return f"{self.resistance:1.0f}"

    @property
    def normalized_text(self):
        return str(self.code.normalized)


def resistance_from_adc(mean, known=KNOWN_RESISTANCE):
    """Resistance of the lower divider leg for an averaged ADC value."""
    if mean >= ADC_RESOLUTION:
        raise ValueError(f"ADC value {mean!r} is at full scale: open circuit")
    return known * mean / (ADC_RESOLUTION - mean)


def take_reading(samples):
    """Average ADC samples and work out the resistance and its bands."""
    values = list(samples)
    if not values:
        raise ValueError("no ADC samples given")
    mean = sum(values) / len(values)
    resistance = resistance_from_adc(mean)
    return Reading(mean=mean, resistance=resistance, code=color_code(resistance))


def render(display, reading, colour):
    """Draw the reading screen on ``display`` and send it."""
    names = reading.band_names
    display.fill(not colour)
    display.rect(3, 3, 122, 60, colour, not colour)
    display.line(3, 37, 123, 37, colour)
    display.draw_string(names[0], 8, 6)
    display.draw_string(names[1], 8, 16)
    display.draw_string(names[2], 8, 28)
    display.draw_string("E24", 72, 6)
    display.draw_string(reading.normalized_text, 72, 16)
    display.draw_string("ADC", 13, 41)
    display.draw_string("Resisten.", 50, 41)
    display.line(44, 37, 44, 60, colour)
    display.line(70, 3, 70, 37, colour)
    display.draw_string(reading.adc_text, 8, 52)
    display.draw_string(reading.resistance_text, 59, 52)
    display.send_data()


def _screen_text(display):
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def _parse_samples(parser, raw):
    try:
        return [float(item) for item in raw]
    except ValueError as exc:
        parser.error(f"invalid ADC sample: {exc}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="ohmbadge",
        description="Measure a resistor from ADC samples of a 10k voltage divider.",
    )
    parser.add_argument(
        "samples", nargs="*",
        help="ADC samples (0-4095); read from standard input when none are given",
    )
    parser.add_argument("--show", action="store_true",
                        help="print the display contents")
    parser.add_argument("--leds", action="store_true",
                        help="print the LED matrix frame")
    args = parser.parse_args(argv)

    raw = args.samples or sys.stdin.read().split()
    samples = _parse_samples(parser, raw)

    try:
        reading = take_reading(samples)
    except ValueError as exc:
        print(f"ohmbadge: {exc}", file=sys.stderr)
        return 1

    print("Bands: " + " ".join(reading.band_names))
    print(f"E24: {reading.normalized_text}")
    print(f"ADC: {reading.adc_text}")
    print(f"Resistance: {reading.resistance_text}")

    if args.leds:
        matrix = LedMatrix(lambda word: None)
        frame = matrix.show_bands(
            reading.code.digit1, reading.code.digit2, reading.code.multiplier_index
        )
        for start in range(0, len(frame), 5):
            print(" ".join(f"{word:06X}" for word in frame[start:start + 5]))

    if args.show:
        display = SSD1306(WIDTH, HEIGHT, False, DISPLAY_ADDRESS, lambda address, data: None)
        render(display, reading, True)
        print(_screen_text(display))
    return 0


if __name__ == "__main__":
    sys.exit(main())