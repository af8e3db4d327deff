"""Conversions between itemp values and Fahrenheit or Celsius temperatures.

Integer arguments are taken as int16 values and integer results are int16
values. Results outside the 16 bit range wrap silently, no error is raised.

    itemp = from_fahrenheit_degrees(70)
    itemp -= 2 * ITEMP_ONE_DEGREE_F  # 68F, 20C
"""

from itemp.const import Scale
from itemp.transform import CELSIUS, FAHRENHEIT

# fahrenheit


def from_fahrenheit_degrees(fahrenheit_1: int) -> int:
    return FAHRENHEIT.encode_scaled(fahrenheit_1, Scale.DEGREE)


def from_fahrenheit_tenths(fahrenheit_10: int) -> int:
    return FAHRENHEIT.encode_scaled(fahrenheit_10, Scale.TENTH)


def from_fahrenheit_hundredths(fahrenheit_100: int) -> int:
    return FAHRENHEIT.encode_hundredths(fahrenheit_100)


def from_fahrenheit(fahrenheit: float) -> int:
    return FAHRENHEIT.encode_float(fahrenheit)


def to_fahrenheit_degrees(itemp: int) -> int:
    return FAHRENHEIT.decode_scaled(itemp, Scale.DEGREE)


def to_fahrenheit_tenths(itemp: int) -> int:
    return FAHRENHEIT.decode_scaled(itemp, Scale.TENTH)


def to_fahrenheit_hundredths(itemp: int) -> int:
    return FAHRENHEIT.decode_hundredths(itemp)


def to_fahrenheit(itemp: int) -> float:
    return FAHRENHEIT.decode_float(itemp)


# celsius


def from_celsius_degrees(celsius_1: int) -> int:
    return CELSIUS.encode_scaled(celsius_1, Scale.DEGREE)


def from_celsius_tenths(celsius_10: int) -> int:
    return CELSIUS.encode_scaled(celsius_10, Scale.TENTH)


def from_celsius_hundredths(celsius_100: int) -> int:
    return CELSIUS.encode_hundredths(celsius_100)


def from_celsius(celsius: float) -> int:
    return CELSIUS.encode_float(celsius)


def to_celsius_degrees(itemp: int) -> int:
    return CELSIUS.decode_scaled(itemp, Scale.DEGREE)


def to_celsius_tenths(itemp: int) -> int:
    return CELSIUS.decode_scaled(itemp, Scale.TENTH)


def to_celsius_hundredths(itemp: int) -> int:
    return CELSIUS.decode_hundredths(itemp)


def to_celsius(itemp: int) -> float:
    return CELSIUS.decode_float(itemp)
