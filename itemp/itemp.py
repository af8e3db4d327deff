from typing import Self, Type

from construct import Adapter

from itemp import conversions
from itemp.fixed_width import to_uint16


class Itemp(int):
    """A temperature encoded as a 16 bit unsigned integer.

    Adding or subtracting integers wraps modulo 2**16, so unit step constants
    can be applied directly:

        itemp = Itemp.from_fahrenheit_degrees(70)
        itemp -= 2 * ITEMP_ONE_DEGREE_F
    """

    def __new__(cls, value: int):
        return super().__new__(cls, to_uint16(int(value)))

    def __add__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.__class__(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.__class__(int(self) - int(other))

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.__class__(int(other) - int(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({int(self)})"

    @classmethod
    def from_fahrenheit(cls, value: float) -> Self:
        return cls(conversions.from_fahrenheit(value))

    @classmethod
    def from_fahrenheit_degrees(cls, value: int) -> Self:
        return cls(conversions.from_fahrenheit_degrees(value))

    @classmethod
    def from_fahrenheit_tenths(cls, value: int) -> Self:
        return cls(conversions.from_fahrenheit_tenths(value))

    @classmethod
    def from_fahrenheit_hundredths(cls, value: int) -> Self:
        return cls(conversions.from_fahrenheit_hundredths(value))

    @classmethod
    def from_celsius(cls, value: float) -> Self:
        return cls(conversions.from_celsius(value))

    @classmethod
    def from_celsius_degrees(cls, value: int) -> Self:
        return cls(conversions.from_celsius_degrees(value))

    @classmethod
    def from_celsius_tenths(cls, value: int) -> Self:
        return cls(conversions.from_celsius_tenths(value))

    @classmethod
    def from_celsius_hundredths(cls, value: int) -> Self:
        return cls(conversions.from_celsius_hundredths(value))

    @property
    def fahrenheit(self) -> float:
        return conversions.to_fahrenheit(self)

    @property
    def fahrenheit_degrees(self) -> int:
        return conversions.to_fahrenheit_degrees(self)

    @property
    def fahrenheit_tenths(self) -> int:
        return conversions.to_fahrenheit_tenths(self)

    @property
    def fahrenheit_hundredths(self) -> int:
        return conversions.to_fahrenheit_hundredths(self)

    @property
    def celsius(self) -> float:
        return conversions.to_celsius(self)

    @property
    def celsius_degrees(self) -> int:
        return conversions.to_celsius_degrees(self)

    @property
    def celsius_tenths(self) -> int:
        return conversions.to_celsius_tenths(self)

    @property
    def celsius_hundredths(self) -> int:
        return conversions.to_celsius_hundredths(self)

    @classmethod
    def adapter(cls) -> Type[Adapter]:
        """Return a construct adapter producing Itemp values."""

        class ItempAdapter(Adapter):
            def _decode(self, obj: int, ctx, path) -> "Itemp":
                return cls(obj)

            def _encode(self, obj: int, ctx, path) -> int:
                return int(cls(obj))

        return ItempAdapter
