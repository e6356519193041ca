"""
Фрагмент строки — базовая единица разбора и форматирования.

Каждый разбираемый тип получает ровно один фрагмент и каждый
форматируемый тип возвращает ровно один фрагмент.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Type, TypeVar

T = TypeVar("T")


class EString(str):
    """
    Неизменяемый фрагмент строки, который ещё предстоит разобрать.

    Создаётся из строки или любого значения, имеющего строковое
    представление: ``EString(5) == "5"``. Разбиение всегда порождает
    новые фрагменты, исходный не меняется.
    """

    __slots__ = ()

    def __new__(cls, value: Any = "") -> EString:
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"EString({str.__repr__(self)})"

    def parse(self, tp: Type[T]) -> T:
        """
        Разбирает фрагмент в значение типа ``tp``.

        Тип может быть листовым (``int``, ``bool``, ``str`` ...),
        ``Optional[...]`` или любой композицией ``SepVec``/``Pair``/``Trio``/
        ``Sum``/``Product``/``Trim``.

        Raises:
            ParseError: если фрагмент не соответствует форме типа
            TypeError: если тип не умеет разбираться из фрагмента
        """
        from .resolve import parser_for
        return parser_for(tp)(self)

    def trim(self) -> EString:
        """Фрагмент без пробельных символов по краям."""
        return EString(self.strip())

    def split_once(self, sep: str) -> Optional[Tuple[EString, EString]]:
        """Делит по первому вхождению ``sep``; None, если разделителя нет."""
        left, found, right = self.partition(sep)
        if not found:
            return None
        return EString(left), EString(right)


__all__ = ["EString"]
