"""Character LCD over I2C, button debouncing and GPS geometry for a field station."""

__version__ = "0.1.0"
__all__ = ["geo", "i2c", "button", "lcd"]