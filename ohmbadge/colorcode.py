"""Resistor colour-band digits and E24 normalisation."""

from dataclasses import dataclass

E24 = (10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
       33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91, 100)

MIN_EXPONENT = -2
MAX_EXPONENT = 9
GOLD_INDEX = 10
SILVER_INDEX = 11


@dataclass(frozen=True)
class ColorCode:
    """Bands of a resistance: two significant digits and a multiplier."""

    digit1: int
    digit2: int
    exponent: int
    multiplier_index: int
    normalized: int


def normalize_to_e24(value):
    """Round an integer resistance to the nearest E24 value of its decade.

    Ties go to the lower series value.
    """
    value = int(value)
    decade = 1
    while value >= 100:
        value //= 10
        decade *= 10
    best = min(E24, key=lambda candidate: abs(value - candidate))
    return best * decade


def _multiplier_index(exponent):
    if exponent >= 0:
        return exponent
    return GOLD_INDEX if exponent == -1 else SILVER_INDEX


def color_code(resistance):
    """Work out the colour bands and E24 value for ``resistance`` ohms.

    Raises ValueError when the resistance cannot be written with a
    multiplier between 10**-2 and 10**9.
    """
    exponent = next(
        (i for i in range(MIN_EXPONENT, MAX_EXPONENT + 1)
         if 10 <= resistance / 10.0 ** i < 100),
        None,
    )
    if exponent is None:
        raise ValueError(f"resistance out of range: {resistance!r}")

    significant = int(resistance / 10.0 ** exponent + 0.5)
    digit1, digit2 = divmod(significant, 10)
    normalized = normalize_to_e24(int((digit1 * 10 + digit2) * 10.0 ** exponent))
    return ColorCode(
        digit1=digit1,
        digit2=digit2,
        exponent=exponent,
        multiplier_index=_multiplier_index(exponent),
        normalized=normalized,
    )