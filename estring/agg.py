"""
Агрегация разобранных структур в скаляр.

``Sum[T]`` и ``Product[T]`` оборачивают разобранное значение ``T`` и сворачивают
его рекурсивно уплощённые элементы (``items``) слева направо. Агрегаты могут
вкладываться в контейнеры и наоборот: элементы агрегата — это один его итог.

Пример::

    >>> EString("10+5*2+3").parse(Sum[SepVec[Product[SepVec[float, "*"]], "+"]]).agg()
    23.0
"""

from __future__ import annotations

import numbers
import operator
from decimal import InvalidOperation, localcontext
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, ClassVar, Dict, List, Tuple

from .core import EString
from .protocols import Aggregatable
from .resolve import Parser, parser_for, to_estring
from .typeparams import Parametrized


def items(value: Any) -> List[Any]:
    """
    Плоский список элементов значения для агрегации.

    - контейнеры и кортежи: конкатенация элементов их ``items()``;
    - агрегат: один элемент — его итог;
    - отсутствующее значение (``None``): пустой список;
    - число (в т.ч. ``bool`` и ``Decimal``): список из него самого.

    Raises:
        TypeError: если значение не агрегируется (например, строка)
    """
    if value is None:
        return []
    if isinstance(value, Aggregatable) and not isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, numbers.Number):
        return [value]
    raise TypeError(f"{type(value).__name__} value {value!r} cannot be aggregated")


@dataclass(frozen=True)
class Aggregate(Parametrized):
    """Обёртка, сворачивающая элементы вложенного значения ассоциативной операцией."""

    inner: Any

    _inner_parser: ClassVar[Parser]
    _identity: ClassVar[Any]
    _op: ClassVar[Callable[[Any, Any], Any]]

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        (inner,) = params
        return {"_inner_parser": staticmethod(parser_for(inner))}

    @classmethod
    def parse_frag(cls, es: EString) -> Aggregate:
        cls._require_params()
        return cls(cls._inner_parser(es))

    def agg(self) -> Any:
        """Свёртка ``items()`` вложенного значения слева направо от нейтрального элемента."""
        # Infinity + -Infinity для Decimal даёт NaN, как и для float
        with localcontext() as ctx:
            ctx.traps[InvalidOperation] = False
            return reduce(self._op, items(self.inner), self._identity)

    def items(self) -> List[Any]:
        return [self.agg()]

    def fmt_frag(self) -> EString:
        return to_estring(self.inner)

    def __str__(self) -> str:
        return self.fmt_frag()


class Sum(Aggregate):
    """
    Сумма элементов; пустая сумма равна 0.

    Нейтральный элемент всегда целый: сумма без присутствующих элементов
    даёт ``0``, а не ``0.0``, даже для ``SepVec[float | None, ...]``.
    """

    _identity = 0
    _op = staticmethod(operator.add)


class Product(Aggregate):
    """Произведение элементов; пустое произведение равно 1 (целое, как и у Sum)."""

    _identity = 1
    _op = staticmethod(operator.mul)


__all__ = ["items", "Aggregate", "Sum", "Product"]
