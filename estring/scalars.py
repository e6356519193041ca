"""
Листовые типы: логические значения, числа и строки.

Разбор делегируется штатному преобразованию Python; любой сбой
превращается в ParseError(фрагмент, Reason.PARSE).
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, FrozenSet, TypeVar

from .core import EString
from .errors import ParseError, Reason
from .resolve import register_leaf

_LOG = logging.getLogger("estring.scalars")

N = TypeVar("N")

TRUTHY: FrozenSet[str] = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSY: FrozenSet[str] = frozenset({"false", "f", "no", "n", "off", "0", ""})

# Знак и цифры; пробелы и '_' (допустимые для int()) частью записи не считаются
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _fail(es: EString, target: str) -> ParseError:
    _LOG.debug("Cannot parse %r as %s", str(es), target)
    return ParseError(es, Reason.PARSE)


def _has_junk(es: EString) -> bool:
    return "_" in es or es != es.strip()


def parse_bool(es: EString) -> bool:
    token = es.lower()
    if token in TRUTHY:
        return True
    if token in FALSY:
        return False
    raise _fail(es, "bool")


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_int(es: EString) -> int:
    if not _INT_RE.fullmatch(es):
        raise _fail(es, "int")
    return int(es)


def _native(convert: Callable[[str], N], name: str) -> Callable[[EString], N]:
    def parse(es: EString) -> N:
        if not es or not es.isascii() or _has_junk(es):
            raise _fail(es, name)
        try:
            return convert(es)
        except (ValueError, InvalidOperation):
            raise _fail(es, name) from None

    parse.__name__ = f"parse_{name}"
    return parse


def _quiet_decimal(text: str) -> Decimal:
    # sNaN ломает любую арифметику над ним
    number = Decimal(text)
    if number.is_snan():
        raise InvalidOperation(text)
    return number


parse_float = _native(float, "float")
parse_decimal = _native(_quiet_decimal, "Decimal")


def parse_str(es: EString) -> str:
    return str(es)


def parse_estring(es: EString) -> EString:
    return es


register_leaf(bool, parse_bool, format_bool)
register_leaf(int, parse_int)
register_leaf(float, parse_float)
register_leaf(Decimal, parse_decimal)
register_leaf(str, parse_str)
register_leaf(EString, parse_estring)


__all__ = [
    "TRUTHY",
    "FALSY",
    "parse_bool",
    "format_bool",
    "parse_int",
    "parse_float",
    "parse_decimal",
    "parse_str",
    "parse_estring",
]
