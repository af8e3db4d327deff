"""Affine transforms between a temperature scale and the itemp encoding."""

from dataclasses import dataclass

from itemp.const import C_100_OFFSET, C_100_SLOPE, F_100_OFFSET, F_100_SLOPE, Scale
from itemp.fixed_width import float_to_uint16, to_float32, to_int16, to_uint16
from itemp.rounding import rounded_quotient


@dataclass(frozen=True)
class LinearTransform:
    """Map hundredths of a degree to itemp as (value + offset) * slope.

    Decoding to hundredths divides by the slope with rounding. Coarser
    integer results are rounded again from the hundredths value, so a
    reading can differ by one unit from rounding the itemp directly.
    """

    offset: int
    slope: int

    def encode_hundredths(self, value: int) -> int:
        """Return the itemp for a temperature in hundredths of a degree."""

        return to_uint16((to_int16(value) + self.offset) * self.slope)

    def decode_hundredths(self, itemp: int) -> int:
        """Return the temperature in hundredths of a degree."""

        return to_int16(rounded_quotient(to_uint16(itemp), self.slope) - self.offset)

    def encode_scaled(self, value: int, scale: Scale) -> int:
        """Return the itemp for a temperature given in units of 1/scale degree."""

        return self.encode_hundredths(
            to_int16(to_int16(value) * (Scale.HUNDREDTH // scale))
        )

    def decode_scaled(self, itemp: int, scale: Scale) -> int:
        """Return the temperature in units of 1/scale degree."""

        hundredths = self.decode_hundredths(itemp)
        if scale == Scale.HUNDREDTH:
            return hundredths

        return to_int16(rounded_quotient(hundredths, Scale.HUNDREDTH // scale))

    def encode_float(self, value: float) -> int:
        """Return the itemp for a temperature in degrees, without rounding."""

        return float_to_uint16((to_float32(value) * 100.0 + self.offset) * self.slope)

    def decode_float(self, itemp: int) -> float:
        """Return the temperature in degrees as a single precision value."""

        quotient = to_float32(to_uint16(itemp) / self.slope)
        degrees_100 = to_float32(quotient - self.offset)
        return to_float32(degrees_100 / 100.0)


FAHRENHEIT = LinearTransform(offset=F_100_OFFSET, slope=F_100_SLOPE)
CELSIUS = LinearTransform(offset=C_100_OFFSET, slope=C_100_SLOPE)
