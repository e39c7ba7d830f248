[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmbadge"
version = "0.1.0"
description = "Resistor ohmmeter logic: ADC divider maths, E24 normalisation, colour bands, LED matrix frames and an SSD1306 framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ohmmeter",
    "resistor",
    "color-code",
    "e24",
    "ssd1306",
    "ws2812",
    "adc",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmbadge = "ohmbadge.ohmmeter:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmbadge"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"
