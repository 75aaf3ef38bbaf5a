"""HD44780 character LCD driven in 4-bit mode through a PCF8574 I2C expander."""

from __future__ import annotations

import struct
import time
from typing import Callable

from gpsfirm.i2c import I2CMaster

LCD_ADDRESS = 0x27

# Expander pins: P0=RS P1=RW P2=EN P3=backlight P4..P7=D4..D7
_RS = 0x01
_EN = 0x04
_BACKLIGHT = 0x08

CMD_CLEAR = 0x01
CMD_HOME = 0x02
CMD_ENTRY_RIGHT = 0x06
CMD_DISPLAY_ON = 0x0C
CMD_FUNCTION_4BIT_2LINE = 0x28

_LINE_ADDRESSES = (0x80, 0xC0, 0x94, 0xD4)

_PRESENTATION = (
    (("Alejo y Gaston",), 2000),
    (("Un Pais con", "buena Gente"), 4000),
    (("Hacemos historia",), 2000),
    (("Somos historia",), 2000),
)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _u16(value: float) -> int:
    return int(value) & 0xFFFF


def _digit_char(digit: int) -> str:
    return chr((digit + 48) & 0xFF)


def format_lcd_float(value: float, fixed_width: bool = False) -> str:
    """Return the characters the display shows for ``value``.

    Two decimals are always shown. With ``fixed_width`` four integer
    digits are always written and no sign is handled; otherwise a minus
    sign precedes negative values and the thousands, hundreds and tens
    digits appear only when the remaining value exceeds 999, 99 and 9.
    """
    v = _f32(value)
    out: list[str] = []
    if not fixed_width and v < 0:
        out.append("-")
        v = _f32(-v)
    for divisor, threshold in ((1000, 999), (100, 99), (10, 9)):
        if v > threshold:
            digit = _u16(_f32(v / divisor))
            v = _f32(v - digit * divisor)
            out.append(_digit_char(digit))
        elif fixed_width:
            out.append(_digit_char(0))
    unit = _u16(v)
    out.append(_digit_char(unit))
    out.append(".")
    fraction = _f32(v - unit)
    tenth = _u16(_f32(fraction * 10))
    out.append(_digit_char(tenth))
    hundredth = _u16(_f32(_f32(fraction * 100) - tenth * 10))
    out.append(_digit_char(hundredth))
    return "".join(out)


class Lcd:
    """A 16x2 (or 20x4) character display behind an I2C port expander."""

    def __init__(
        self,
        master: I2CMaster,
        address: int = LCD_ADDRESS,
        *,
        fixed_width: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.master = master
        self.address = address
        self.fixed_width = fixed_width
        self._sleep = sleep

    def _wait(self, ms: int) -> None:
        self._sleep(ms / 1000.0)

    def _write_nibbles(self, value: int, flags: int) -> None:
        for nibble in (value & 0xF0, (value << 4) & 0xF0):
            base = nibble | _BACKLIGHT | flags
            self.master.send(base | _EN, self.address)
            self._wait(1)
            self.master.send(base, self.address)
            self._wait(1)

    def init(self) -> None:
        """Reset the expander and configure the display for 4-bit, 2-line use."""
        self.master.send(0xFF, self.address)
        self._wait(30)
        self.command(CMD_HOME)
        self.command(CMD_FUNCTION_4BIT_2LINE)
        self.command(CMD_DISPLAY_ON)
        self.command(CMD_CLEAR)
        self._wait(2)
        self.command(CMD_ENTRY_RIGHT)

    def command(self, cmnd: int) -> None:
        """Send a configuration command byte (RS low)."""
        self._write_nibbles(cmnd & 0xFF, 0)

    def data(self, value: int) -> None:
        """Send a character code to be shown (RS high)."""
        self._write_nibbles(value & 0xFF, _RS)

    def goto(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` of line ``y``, both counted from 1."""
        if not 1 <= y <= len(_LINE_ADDRESSES):
            raise ValueError(f"line out of range: {y!r}")
        if x < 1:
            raise ValueError(f"column out of range: {x!r}")
        self.command((_LINE_ADDRESSES[y - 1] + x - 1) & 0xFF)
        self._wait(2)

    def print_text(self, text: str) -> None:
        """Write ``text`` at the cursor; a NUL character ends the text."""
        for code in text.split("\0", 1)[0].encode("latin-1"):
            self.data(code)

    def print_float(self, value: float) -> None:
        """Write ``value`` with two decimals at the cursor."""
        self.print_text(format_lcd_float(value, self.fixed_width))

    def clear(self) -> None:
        """Clear the screen and wait for the display to finish."""
        self.command(CMD_CLEAR)
        self._wait(10)

    def presentation(self) -> None:
        """Show the sequence of welcome screens."""
        for index, (lines, pause_ms) in enumerate(_PRESENTATION):
            if index:
                self.command(CMD_CLEAR)
                self._wait(100)
            for row, line in enumerate(lines, start=1):
                self.goto(1, row)
                self.print_text(line)
            self._wait(pause_ms)