"""Push-button debouncing state machine and the operating-mode cycle."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable, Optional

DEBOUNCE_TICKS = 10


class ButtonState(Enum):
    """State of the debouncing state machine."""

    HIGH = "high"
    LOW = "low"
    FALLING = "falling"
    RISING = "rising"


class Mode(IntEnum):
    """Operating mode selected with the push button."""

    MAIN_MENU = 0
    GPS = 1
    MEASURE_POWER = 2
    SAVE_DATA = 3
    WIFI = 4


def next_mode(mode: Mode | int) -> Mode:
    """Return the mode after ``mode``, wrapping from the last to the first."""
    return Mode((int(Mode(mode)) + 1) % len(Mode))


class Debouncer:
    """Debounce a digital input sampled at a fixed period.

    A level change must persist for the debounce period before it is
    accepted; ``on_press`` runs when a high level is confirmed and
    ``on_release`` when a low level is confirmed.
    """

    def __init__(
        self,
        on_press: Optional[Callable[[], None]] = None,
        on_release: Optional[Callable[[], None]] = None,
        ticks: int = DEBOUNCE_TICKS,
    ) -> None:
        self.on_press = on_press
        self.on_release = on_release
        self.ticks = ticks
        self.state = ButtonState.HIGH
        self._rising_count = 0
        self._falling_count = 0

    def error(self) -> None:
        """Force the machine into the LOW state."""
        self.state = ButtonState.LOW

    def update(self, level) -> ButtonState:
        """Advance the machine with the current input level; return the new state."""
        pressed = bool(level)
        if self.state is ButtonState.LOW:
            if pressed:
                self.state = ButtonState.RISING
        elif self.state is ButtonState.RISING:
            if self._rising_count >= self.ticks:
                if pressed:
                    self.state = ButtonState.HIGH
                    if self.on_press is not None:
                        self.on_press()
                else:
                    self.state = ButtonState.LOW
                self._rising_count = 0
            self._rising_count += 1
        elif self.state is ButtonState.HIGH:
            if not pressed:
                self.state = ButtonState.FALLING
        elif self.state is ButtonState.FALLING:
            if self._falling_count >= self.ticks:
                if not pressed:
                    self.state = ButtonState.LOW
                    if self.on_release is not None:
                        self.on_release()
                else:
                    self.state = ButtonState.HIGH
                self._falling_count = 0
            self._falling_count += 1
        else:
            self.error()
        return self.state