"""
Кортежи фиксированной арности: пара и тройка.

Разбиение жадное слева: фрагмент делится по *первому* вхождению разделителя,
а правая часть целиком уходит следующему типу. Поэтому вложенные пары с тем
же разделителем естественно забирают оставшиеся вхождения::

    >>> EString("a=b=c").parse(Pair[str, "=", str])
    Pair[str, '=', str]('a', 'b=c')
    >>> EString("a=b=c").parse(Pair[str, "=", Pair[str, "=", str]])
    Pair[str, '=', Pair[str, '=', str]]('a', Pair[str, '=', str]('b', 'c'))
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Iterable, List, Tuple

from ..agg import items
from ..core import EString
from ..errors import ParseError, Reason
from ..resolve import Parser, parser_for, to_estring
from ..typeparams import Parametrized, check_sep

_LOG = logging.getLogger("estring.structs")


def _parse_part(parse: Parser, part: EString) -> Any:
    """Разбирает часть кортежа; сбой сообщается с фрагментом этой части."""
    try:
        return parse(part)
    except ParseError as e:
        _LOG.debug("Tuple part %r failed: %s", str(part), e)
        raise ParseError(part, Reason.PARSE) from e


class _FixedTuple(Parametrized, tuple):
    """Общая часть Pair и Trio: создание, форматирование, агрегация."""

    __slots__ = ()

    _size: ClassVar[int]
    _seps: ClassVar[Tuple[str, ...]]

    def __new__(cls, values: Iterable[Any]) -> _FixedTuple:
        cls._require_params()
        values = tuple(values)
        if len(values) != cls._size:
            raise ValueError(f"{cls.__name__} takes exactly {cls._size} values, got {len(values)}")
        return super().__new__(cls, values)

    def fmt_frag(self) -> EString:
        out = [to_estring(self[0])]
        for sep, value in zip(self._seps, self[1:]):
            out.append(sep)
            out.append(to_estring(value))
        return EString("".join(out))

    def items(self) -> List[Any]:
        return [item for v in self for item in items(v)]

    def __str__(self) -> str:
        return self.fmt_frag()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"


class Pair(_FixedTuple):
    """
    Пара ``(A, B)``, разделённая символом ``SEP``: ``Pair[A, SEP, B]``.

    Нет разделителя — ``ParseError(весь фрагмент, SPLIT)``; не разобралась
    часть — ``ParseError(эта часть, PARSE)``.
    """

    __slots__ = ()

    _arity = 3
    _size = 2
    _left_parser: ClassVar[Parser]
    _right_parser: ClassVar[Parser]

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        left, sep, right = params
        return {
            "_left_parser": staticmethod(parser_for(left)),
            "_right_parser": staticmethod(parser_for(right)),
            "_seps": (check_sep(sep, cls.__name__),),
        }

    @classmethod
    def parse_frag(cls, es: EString) -> Pair:
        cls._require_params()
        parts = es.split_once(cls._seps[0])
        if parts is None:
            raise ParseError(es, Reason.SPLIT)
        left, right = parts
        return cls((_parse_part(cls._left_parser, left), _parse_part(cls._right_parser, right)))

    @property
    def left(self) -> Any:
        return self[0]

    @property
    def right(self) -> Any:
        return self[1]


class Trio(_FixedTuple):
    """
    Тройка ``(A, B, C)``: ``Trio[A, SEP1, B, SEP2, C]``.

    Разбирается как ``Pair[A, SEP1, EString]``, затем остаток —
    как ``Pair[B, SEP2, C]``; правила ошибок те же, что у пары.
    """

    __slots__ = ()

    _arity = 5
    _size = 3
    _head: ClassVar[type]
    _tail: ClassVar[type]

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        first, sep1, second, sep2, third = params
        return {
            "_head": Pair[first, check_sep(sep1, cls.__name__), EString],
            "_tail": Pair[second, check_sep(sep2, cls.__name__), third],
            "_seps": (sep1, sep2),
        }

    @classmethod
    def parse_frag(cls, es: EString) -> Trio:
        cls._require_params()
        first, rest = cls._head.parse_frag(es)
        second, third = cls._tail.parse_frag(rest)
        return cls((first, second, third))


__all__ = ["Pair", "Trio"]
