from itemp import conversions
from itemp.adapter.base_adapter import BaseAdapter


class ItempFahrenheit(BaseAdapter[float, int]):
    """Adapter to encode and decode degrees Fahrenheit."""

    @classmethod
    def _encode(cls, value: float) -> int:
        return conversions.from_fahrenheit(value)

    @classmethod
    def _decode(cls, value: int) -> float:
        return conversions.to_fahrenheit(value)


class ItempFahrenheitHundredths(BaseAdapter[int, int]):
    """Adapter to encode and decode hundredths of a degree Fahrenheit."""

    @classmethod
    def _encode(cls, value: int) -> int:
        return conversions.from_fahrenheit_hundredths(value)

    @classmethod
    def _decode(cls, value: int) -> int:
        return conversions.to_fahrenheit_hundredths(value)


class ItempCelsius(BaseAdapter[float, int]):
    """Adapter to encode and decode degrees Celsius."""

    @classmethod
    def _encode(cls, value: float) -> int:
        return conversions.from_celsius(value)

    @classmethod
    def _decode(cls, value: int) -> float:
        return conversions.to_celsius(value)


class ItempCelsiusHundredths(BaseAdapter[int, int]):
    """Adapter to encode and decode hundredths of a degree Celsius."""

    @classmethod
    def _encode(cls, value: int) -> int:
        return conversions.from_celsius_hundredths(value)

    @classmethod
    def _decode(cls, value: int) -> int:
        return conversions.to_celsius_hundredths(value)
