"""Resistor ohmmeter logic: divider maths, colour bands, E24 values, LED frames and display rendering."""

__version__ = "0.1.0"