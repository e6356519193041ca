"""
Целые фиксированной разрядности.

Python-овский ``int`` не ограничен, поэтому для форм, где важен диапазон
(порты, байты, беззнаковые счётчики), есть подклассы ``int`` с проверкой
границ при разборе и при создании.
"""

from __future__ import annotations

from typing import ClassVar

from .core import EString
from .errors import ParseError, Reason
from .scalars import parse_int


class BoundedInt(int):
    """Базовый класс целого с диапазоном ``[MIN, MAX]``."""

    MIN: ClassVar[int]
    MAX: ClassVar[int]

    def __new__(cls, value: int = 0) -> BoundedInt:
        number = int.__new__(cls, value)
        if not cls.MIN <= number <= cls.MAX:
            raise ValueError(f"{cls.__name__} out of range [{cls.MIN}, {cls.MAX}]: {int(number)}")
        return number

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    @classmethod
    def parse_frag(cls, es: EString) -> BoundedInt:
        number = parse_int(es)
        # "-0" для беззнаковых тоже ошибка
        if cls.MIN == 0 and es.startswith("-"):
            raise ParseError(es, Reason.PARSE)
        if not cls.MIN <= number <= cls.MAX:
            raise ParseError(es, Reason.PARSE)
        return cls(number)


def _bounded(name: str, bits: int, signed: bool) -> type:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    return type(name, (BoundedInt,), {"MIN": lo, "MAX": hi, "__module__": __name__})


Int8 = _bounded("Int8", 8, True)
Int16 = _bounded("Int16", 16, True)
Int32 = _bounded("Int32", 32, True)
Int64 = _bounded("Int64", 64, True)
UInt8 = _bounded("UInt8", 8, False)
UInt16 = _bounded("UInt16", 16, False)
UInt32 = _bounded("UInt32", 32, False)
UInt64 = _bounded("UInt64", 64, False)


__all__ = [
    "BoundedInt",
    "Int8", "Int16", "Int32", "Int64",
    "UInt8", "UInt16", "UInt32", "UInt64",
]
