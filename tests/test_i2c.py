import pytest

from gpsfirm.i2c import I2CError, I2CMaster, MemoryBus


def make_master(*addresses):
    bus = MemoryBus(addresses)
    return I2CMaster(bus), bus


def test_send_records_address_and_byte():
    master, bus = make_master(0x27)
    master.send(0xAB, 0x27)
    assert len(bus.frames) == 1
    frame = bus.frames[0]
    assert frame[0] >> 1 == 0x27
    assert frame[0] & 1 == 0
    assert frame[1:] == bytes([0xAB])


def test_write_address_byte_for_lcd():
    master, bus = make_master(0x27)
    master.send(0x0C, 0x27)
    assert bus.frames[0][0] == 0x4E


def test_send_truncates_to_eight_bits():
    master, bus = make_master(0x27)
    master.send(0x1FF, 0x27)
    assert bus.written(0x27) == [bytes([0xFF])]


def test_send_to_absent_slave_raises():
    master, bus = make_master(0x27)
    with pytest.raises(I2CError):
        master.send(1, 0x30)
    assert bus.frames == []


@pytest.mark.parametrize("address", [-1, 0x80, 200])
def test_invalid_address_raises(address):
    master, _ = make_master(0x27)
    with pytest.raises(ValueError):
        master.send(1, address)


def test_send_array_is_one_transaction():
    master, bus = make_master(0x10)
    data = [1, 2, 3, 250]
    master.send_array(data, 0x10)
    assert bus.written(0x10) == [bytes(data)]
    assert len(bus.frames) == 1


def test_read_returns_queued_bytes_then_idle():
    master, bus = make_master()
    bus.attach(0x20, [0x5A, 0x11])
    assert master.read(0x20) == 0x5A
    assert master.read(0x20) == 0x11
    assert master.read(0x20) == 0xFF


def test_read_frame_has_read_bit():
    master, bus = make_master()
    bus.attach(0x20, [7])
    master.read(0x20)
    assert bus.frames[0][0] >> 1 == 0x20
    assert bus.frames[0][0] & 1 == 1
    assert bus.written(0x20) == []


def test_read_from_absent_slave_raises():
    master, _ = make_master(0x27)
    with pytest.raises(I2CError):
        master.read(0x28)


def test_bus_transfer_read_length():
    bus = MemoryBus()
    bus.attach(0x40, [1, 2])
    data = bus.transfer(0x40, False, 3)
    assert data == bytes([1, 2, 0xFF])
    with pytest.raises(ValueError):
        bus.transfer(0x40, False, -1)