"""Constants for the itemp library."""

from enum import IntEnum

from construct import Int16ul

F_100_OFFSET = 1552
F_100_SLOPE = 5
C_100_OFFSET = 2640
C_100_SLOPE = 9

ITEMP_MIN = 0x0000
ITEMP_MAX = 0xFFFF
ITEMP_FORMAT = Int16ul

ITEMP_ONE_DEGREE_F = 100 * F_100_SLOPE
ITEMP_ONE_TENTH_DEGREE_F = 10 * F_100_SLOPE
ITEMP_ONE_HUNDREDTH_DEGREE_F = F_100_SLOPE
ITEMP_ONE_DEGREE_C = 100 * C_100_SLOPE
ITEMP_ONE_TENTH_DEGREE_C = 10 * C_100_SLOPE
ITEMP_ONE_HUNDREDTH_DEGREE_C = C_100_SLOPE


class Scale(IntEnum):
    """Integer granularities, as the number of units per degree."""

    DEGREE = 1
    TENTH = 10
    HUNDREDTH = 100
