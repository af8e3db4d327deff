from abc import ABC, abstractmethod
from typing import Generic, Type, TypeVar

from construct import Adapter

from itemp.itemp import Itemp

EncodedType = TypeVar("EncodedType")
DecodedType = TypeVar("DecodedType")


class BaseAdapter(ABC, Generic[DecodedType, EncodedType]):
    """Base class for temperature adapters."""

    def __init__(self, value: DecodedType):
        """Initialize the adapter with a temperature."""

        self._value: DecodedType = value

    @property
    def value(self) -> DecodedType:
        """Return the temperature."""

        return self._value

    @property
    def itemp(self) -> Itemp:
        """Return the temperature as an itemp value."""

        return Itemp(self.encode())

    @classmethod
    def adapter(cls) -> Type[Adapter]:
        """Return a construct adapter for fields holding an itemp."""

        class TemperatureAdapter(Adapter):
            def _decode(
                self, obj: EncodedType, ctx, path
            ) -> BaseAdapter[DecodedType, EncodedType]:
                return cls.decode(obj)

            def _encode(self, obj: BaseAdapter, ctx, path) -> EncodedType:
                return obj.encode()

        return TemperatureAdapter

    def encode(self) -> EncodedType:
        """Return the itemp for the temperature."""

        return self._encode(self.value)

    @classmethod
    def decode(cls, value: EncodedType) -> "BaseAdapter":
        """Return the adapter for an itemp."""

        return cls(cls._decode(value))

    @classmethod
    @abstractmethod
    def _encode(cls, value: DecodedType) -> EncodedType:
        """Return the encoded value."""

    @classmethod
    @abstractmethod
    def _decode(cls, value: EncodedType) -> DecodedType:
        """Return the decoded value."""

    def __eq__(self, __value: object) -> bool:
        return isinstance(__value, self.__class__) and self.value == __value.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"
