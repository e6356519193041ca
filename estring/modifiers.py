"""
Модификаторы фрагмента перед разбором.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Tuple

from .agg import items
from .core import EString
from .resolve import Parser, parser_for, to_estring
from .typeparams import Parametrized


@dataclass(frozen=True)
class Trim(Parametrized):
    """
    Обрезает пробельные символы по краям фрагмента один раз и передаёт
    результат вложенному типу: ``Trim[int]`` разбирает ``"  99 "`` в ``Trim(99)``.

    Форматирование делегируется вложенному значению без возврата пробелов,
    поэтому повторное применение идемпотентно.
    """

    value: Any

    _inner_parser: ClassVar[Parser]

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        (inner,) = params
        return {"_inner_parser": staticmethod(parser_for(inner))}

    @classmethod
    def parse_frag(cls, es: EString) -> Trim:
        cls._require_params()
        return cls(cls._inner_parser(es.trim()))

    def fmt_frag(self) -> EString:
        return to_estring(self.value)

    def items(self) -> List[Any]:
        return items(self.value)

    def __str__(self) -> str:
        return self.fmt_frag()


__all__ = ["Trim"]
