import enum
from typing import TypeVar

OrderedEnumT = TypeVar("OrderedEnumT", bound="OrderedEnum")


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class OrderedEnum(PrintableEnum):
    """Members compare by their declaration order"""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: "OrderedEnum") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: "OrderedEnum") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: "OrderedEnum") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: "OrderedEnum") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() >= other._rank()

    def lower(self: OrderedEnumT) -> OrderedEnumT:
        members = list(type(self))
        return members[max(0, self._rank() - 1)]
