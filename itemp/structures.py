"""Binary structures holding itemp values."""
from dataclasses import dataclass
from typing import Self

from construct_typed import DataclassMixin, DataclassStruct, csfield

from itemp.const import ITEMP_FORMAT
from itemp.itemp import Itemp


class ItempStruct(DataclassMixin):
    """Structure for itemp data."""

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Convert the data to a structure."""

        return DataclassStruct(cls).parse(data)

    def to_bytes(self) -> bytes:
        """Convert the structure to bytes."""

        return DataclassStruct(self.__class__).build(self)


@dataclass
class TemperatureStruct(ItempStruct):
    """Structure for a single itemp value in its 2 byte form."""

    itemp: Itemp = csfield(Itemp.adapter()(ITEMP_FORMAT))
