"""
Протоколы участия типов в разборе, форматировании и агрегации.

Любой класс становится разбираемым, если определяет classmethod
``parse_frag``; составные типы выражают свой разбор только через вызовы
разбора подфрагментов, поэтому пользовательские типы встраиваются
в композиции без дополнительной регистрации.
"""

from __future__ import annotations

from typing import Any, List, Protocol, runtime_checkable

from .core import EString


@runtime_checkable
class ParseFragment(Protocol):
    """
    Тип, который строится из фрагмента.

    Пример::

        @dataclass(frozen=True)
        class Point:
            x: int
            y: int

            @classmethod
            def parse_frag(cls, es: EString) -> "Point":
                parts = EString(es.strip("()")).split_once(",")
                if parts is None:
                    raise ParseError(es, Reason.SPLIT)
                return cls(parts[0].parse(int), parts[1].parse(int))
    """

    @classmethod
    def parse_frag(cls, es: EString) -> Any:
        """
        Разбирает фрагмент ``es`` в значение этого типа.

        Raises:
            ParseError: с наименьшим фрагментом, на котором произошёл сбой
        """
        ...


@runtime_checkable
class FormatFragment(Protocol):
    """Значение, которое умеет записать себя обратно во фрагмент."""

    def fmt_frag(self) -> EString:
        ...


@runtime_checkable
class Aggregatable(Protocol):
    """Значение, отдающее плоский список элементов для агрегации."""

    def items(self) -> List[Any]:
        ...


__all__ = ["ParseFragment", "FormatFragment", "Aggregatable"]
