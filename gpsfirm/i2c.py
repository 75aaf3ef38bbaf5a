"""I2C master transactions over a pluggable bus, plus an in-memory bus."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Union

PORT = 1
SDA_PIN = 21
SCL_PIN = 22
CLOCK_HZ = 1_000_000
TIMEOUT_MS = 1000

WRITE_BIT = 0
READ_BIT = 1
IDLE_BYTE = 0xFF


class I2CError(Exception):
    """A transaction on the bus failed, e.g. the slave did not acknowledge."""


def _check_address(address: int) -> None:
    if not 0 <= address <= 0x7F:
        raise ValueError(f"I2C address out of 7-bit range: {address!r}")


class MemoryBus:
    """An in-memory bus with simulated slave devices.

    Only attached addresses acknowledge; every completed transaction is
    recorded in ``frames`` as the address byte followed by the data bytes.
    Reads return queued response bytes, or ``0xFF`` (idle line) when none
    are queued.
    """

    def __init__(self, addresses: Iterable[int] = ()) -> None:
        self._responses: dict[int, deque[int]] = {}
        self.frames: list[bytes] = []
        for address in addresses:
            self.attach(address)

    def attach(self, address: int, responses: Iterable[int] = ()) -> None:
        """Make ``address`` acknowledge and queue bytes it returns on reads."""
        _check_address(address)
        self._responses.setdefault(address, deque()).extend(b & 0xFF for b in responses)

    def written(self, address: int) -> list[bytes]:
        """Return the payloads of all write transactions to ``address``."""
        header = (address << 1) | WRITE_BIT
        return [frame[1:] for frame in self.frames if frame[0] == header]

    def transfer(self, address: int, write: bool, payload: Union[bytes, int]) -> bytes:
        """Run one start..stop transaction.

        ``payload`` is the bytes to write when ``write`` is true, otherwise
        the number of bytes to read. Returns the bytes read (empty on write).
        """
        _check_address(address)
        header = (address << 1) | (WRITE_BIT if write else READ_BIT)
        queue = self._responses.get(address)
        if queue is None:
            raise I2CError(f"no acknowledge from slave 0x{address:02X}")
        if write:
            data = bytes(payload)
            self.frames.append(bytes([header]) + data)
            return b""
        count = int(payload)
        if count < 0:
            raise ValueError("read length must not be negative")
        data = bytes(queue.popleft() if queue else IDLE_BYTE for _ in range(count))
        self.frames.append(bytes([header]) + data)
        return data


class I2CMaster:
    """I2C master that sends and reads single bytes or arrays to 7-bit slaves."""

    def __init__(
        self,
        bus,
        *,
        port: int = PORT,
        sda: int = SDA_PIN,
        scl: int = SCL_PIN,
        clock_hz: int = CLOCK_HZ,
        timeout_ms: int = TIMEOUT_MS,
    ) -> None:
        self.bus = bus
        self.port = port
        self.sda = sda
        self.scl = scl
        self.clock_hz = clock_hz
        self.timeout_ms = timeout_ms

    def send(self, value: int, address: int) -> None:
        """Write one byte; the value is truncated to 8 bits."""
        self.send_array([value], address)

    def send_array(self, data: Iterable[int], address: int) -> None:
        """Write all bytes of ``data`` in a single transaction."""
        _check_address(address)
        payload = bytes(b & 0xFF for b in data)
        self.bus.transfer(address, True, payload)

    def read(self, address: int) -> int:
        """Read a single byte from the slave, answering it with NACK."""
        _check_address(address)
        data = self.bus.transfer(address, False, 1)
        if len(data) != 1:
            raise I2CError(f"expected one byte from 0x{address:02X}, got {len(data)}")
        return data[0]