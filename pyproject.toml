[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpsfirm"
version = "0.1.0"
description = "Character LCD over I2C, button debouncing, great-circle distance and speed conversion for a GPS field station"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "lcd", "i2c", "pcf8574", "hd44780", "debounce", "great-circle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gpsfirm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
