# gpsfirm

This package holds building blocks for a small GPS and RF power field station,
written in plain Python. It needs nothing outside the standard library.

## Modules

### `gpsfirm.geo`

- `distance_bearing(lat_start, lon_start, lat_end, lon_end)` takes two points in
  degrees. It returns `(distance_m, bearing_deg)`. The distance is the
  great-circle distance in metres, based on `EARTH_RADIUS_KM` (6371 km). The
  bearing is measured clockwise from north and lies in `[0, 360)`.
- `to_speed(knots, unit)` converts a speed in knots to any `SpeedUnit`. The
  units include `KPH`, `MPS`, `MPH`, `FPS`, `SPK`, `SMPH` and others. It returns
  `0.0` when the unit is unknown.

### `gpsfirm.i2c`

- `I2CMaster(bus)` runs I2C master transactions on a bus object. It has three
  methods:
  - `send(value, address)` writes one byte, cut to 8 bits.
  - `send_array(data, address)` writes several bytes in one transaction.
  - `read(address)` reads one byte.

  An address outside the 7-bit range raises `ValueError`.
- `MemoryBus(addresses)` is an in-memory bus. Only the addresses you attach
  answer. A transfer to any other address raises `I2CError`.
  - `attach(address, responses)` adds a slave and queues bytes for it to return
    on reads. A read with nothing queued returns `0xFF`.
  - Every transaction is stored in `frames`. `written(address)` returns the
    payloads written to one address.

Any object with a `transfer(address, write, payload)` method can act as the bus.

### `gpsfirm.lcd`

`Lcd(master, address=0x27, fixed_width=False, sleep=time.sleep)` drives an
HD44780 character display. It runs in 4-bit mode through a PCF8574 I2C
expander, with the backlight kept on. Its methods are:

- `init()`
- `command(cmnd)`
- `data(value)`
- `goto(x, y)`: columns and lines are counted from 1.
- `print_text(text)`
- `print_float(value)`: always shows two decimals.
- `clear()`
- `presentation()`: shows a sequence of welcome screens.

`format_lcd_float(value, fixed_width)` returns the characters that
`print_float` writes.

### `gpsfirm.button`

- `Debouncer(on_press, on_release, ticks=10)` is a debounce state machine for a
  push button.
  - Call `update(level)` once per sampling period. It returns the new
    `ButtonState`.
  - A level change must last `ticks` updates before it counts. When it does,
    `on_press` or `on_release` is called.
  - `error()` forces the machine into `ButtonState.LOW`.
- `Mode` lists the operating modes. `next_mode(mode)` returns the next mode and
  wraps from `WIFI` back to `MAIN_MENU`.

## Example

```python
from gpsfirm.i2c import I2CMaster, MemoryBus
from gpsfirm.lcd import Lcd, format_lcd_float

bus = MemoryBus([0x27])
lcd = Lcd(I2CMaster(bus), sleep=lambda seconds: None)
lcd.init()
lcd.print_text("HOLA")
print(format_lcd_float(3.14))   # 3.14
print(len(bus.written(0x27)))   # number of expander writes so far
```

## What it does not do

The package does not:

- parse NMEA sentences,
- read from a serial port or a real I2C bus,
- provide a command to start a station.

It has the display, I2C, button and geometry parts only. You supply the
hardware access and the main loop.

## Tests

```
pip install .[test]
pytest
```