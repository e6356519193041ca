"""
Контейнер элементов, разделённых символом.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Iterable, List, Tuple

from ..agg import items
from ..core import EString
from ..resolve import Parser, parser_for, to_estring
from ..typeparams import Parametrized, check_sep


class SepVec(Parametrized, tuple):
    """
    Упорядоченная неизменяемая последовательность ``T``, разделённая ``SEP``.

    Разбор делит фрагмент по каждому вхождению разделителя, обрезает пробелы
    у каждой части и разбирает её как ``T``. Первая же ошибка элемента
    прерывает разбор без частичного результата. Пустой фрагмент даёт один
    элемент, разобранный из ``""`` (для ``Optional[T]`` это ``None``).

    Пример::

        >>> EString("1, 2, 3").parse(SepVec[int, ","])
        SepVec[int, ','](1, 2, 3)
    """

    __slots__ = ()

    _arity = 2
    _item_parser: ClassVar[Parser]
    _sep: ClassVar[str]

    def __new__(cls, values: Iterable[Any] = ()) -> SepVec:
        cls._require_params()
        return super().__new__(cls, values)

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        item_type, sep = params
        return {
            "_item_parser": staticmethod(parser_for(item_type)),
            "_sep": check_sep(sep, cls.__name__),
        }

    @classmethod
    def parse_frag(cls, es: EString) -> SepVec:
        cls._require_params()
        parse_item = cls._item_parser
        return cls(parse_item(EString(part.strip())) for part in es.split(cls._sep))

    def fmt_frag(self) -> EString:
        return EString(self._sep.join(to_estring(v) for v in self))

    def items(self) -> List[Any]:
        return [item for v in self for item in items(v)]

    def __str__(self) -> str:
        return self.fmt_frag()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"


__all__ = ["SepVec"]
