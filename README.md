# ohmbadge

ohmbadge holds the logic of a small resistor ohmmeter. The meter puts a known
10 kΩ resistor and an unknown resistor in series as a voltage divider, reads
the midpoint with a 12-bit ADC (full scale 4095), works out the unknown
resistance, and presents the result:

- as the first two colour bands and the multiplier band of a resistor,
- as the nearest value from the E24 series,
- as a screen for a 128×64 SSD1306 monochrome display and a frame for a 5×5
  RGB LED matrix.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ohmbadge [--show] [--leds] [SAMPLE ...]
```

The `ohmbadge` command takes ADC samples (0–4095) as arguments, or reads them
from standard input, separated by whitespace, when none are given. It
averages them and prints the band colours, the E24 value, the mean ADC value
and the resistance:

```
$ ohmbadge 2047 2048
Bands: Marrom Preto Laranja
E24: 10000
ADC: 2048
Resistance: 10000
```

Band colours are named in Portuguese: Preto, Marrom, Vermelho, Laranja,
Amarelo, Verde, Azul, Violeta, Cinza, Branco, and for the multiplier also
Ouro (gold) and Prata (silver).

Options:

- `--leds` also prints the 25 LED matrix pixel words as five rows of
  six-digit hexadecimal GRB values.
- `--show` also prints the display screen as 64 lines of 128 characters,
  `#` for a lit pixel and `.` for a dark one.

A sample that is not a number is rejected with a usage error (exit status 2).
No samples, a mean at full scale (open circuit), or a resistance that cannot
be given bands prints a message on standard error and exits with status 1.

## Library use

### Resistance from the ADC

`ohmbadge.ohmmeter.resistance_from_adc(mean, known=10000)` turns a mean ADC
reading into the unknown resistance with `known * mean / (4095 - mean)`. It
raises `ValueError` when `mean` is at or above 4095.

```python
from ohmbadge.ohmmeter import resistance_from_adc

resistance_from_adc(2047.5, 10000)   # 10000.0, the midpoint of the divider
```

`take_reading(samples)` averages an iterable of ADC samples into a `Reading`
with `mean`, `resistance` and `code` (a `ColorCode`). A `Reading` also offers
`band_names`, `adc_text`, `resistance_text` and `normalized_text`. It raises
`ValueError` when no samples are given or the resistance is out of range.

`render(display, reading, colour)` draws the reading screen onto an `SSD1306`
and sends it; `colour` chooses lit-on-dark (`True`) or the inverse.

### Colour code and E24

```python
from ohmbadge.colorcode import color_code, normalize_to_e24

normalize_to_e24(4800)     # 4700
code = color_code(4700.0)  # ColorCode(digit1=4, digit2=7, exponent=2,
                           #           multiplier_index=2, normalized=4700)
```

`normalize_to_e24` rounds to the nearest E24 value of the number's decade,
ties going to the lower value. `color_code` finds the multiplier exponent
from -2 to 9 and raises `ValueError` for a resistance outside that range.
The multiplier index follows the colour table: 0 to 9 run from black to
white, 10 is gold (×0.1) and 11 is silver (×0.01).

### LED matrix

`band_frame(digit1, digit2, multiplier)` builds the 25 GRB pixel words that
paint the three bands on the 5×5 matrix, from colour indices 0–11.
`LedMatrix(sink)` calls `sink` once per pixel with the word shifted left by
eight bits, as the WS2812 state machine takes it, and `show_bands` returns
the frame:

```python
from ohmbadge.ledmatrix import LedMatrix, urgb

words = []
matrix = LedMatrix(words.append)
matrix.show_bands(4, 7, 2)
len(words)           # 25
urgb(20, 0, 0)       # 0x001400, red packed in GRB order
```

### SSD1306 framebuffer

`SSD1306(width, height, external_vcc, address, bus)` keeps the display RAM in
memory and draws into it. `bus` is a callable called as
`bus(address, payload)` with `payload` as bytes for every I2C write. The
drawing methods are `pixel`, `fill`, `rect`, `line`, `hline`, `vline`,
`draw_char` and `draw_string`; drawing outside the display raises
`IndexError`. `get_pixel` reads a pixel back and `buffer` gives the data
transfer bytes. `config` sends the initialisation sequence, `command` sends
one command byte (the commands are in the `Command` enum) and `send_data`
transfers the framebuffer. Text uses the built-in 8×8 font, which
`ohmbadge.font.glyph` exposes.

## What the package does not do

The package does not read an ADC, talk to an I2C bus or drive LEDs by itself.
The command works from samples given to it and prints what the display and
the matrix would show; in library use, bus and LED output go to the
callables you pass in. There is no continuous measuring loop.