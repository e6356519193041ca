from __future__ import annotations

import logging
import typing as t
from types import UnionType
from typing import Any, Callable, Dict, Tuple, get_args, get_origin

from .core import EString

# -------------------- Logging --------------------

_LOG = logging.getLogger("estring.resolve")

# -------------------- Registries --------------------

Parser = Callable[[EString], Any]
Formatter = Callable[[Any], str]

# Листовые типы: точное совпадение класса → (разбор, форматирование)
_LEAVES: Dict[type, Tuple[Parser, Formatter]] = {}

# Разрешённые аннотации; заполняется при композиции, при разборе только читается
_PARSERS: Dict[Any, Parser] = {}

# -------------------- Helpers --------------------

def _type_name(tp: Any) -> str:
    try:
        return tp.__name__  # type: ignore[attr-defined]
    except Exception:
        return str(tp)

def _strip_annotated(tp: Any) -> Any:
    origin = get_origin(tp)
    if origin is t.Annotated:
        args = get_args(tp)
        return args[0] if args else Any
    return tp

def _optional_parser(tp: Any) -> Parser:
    variants = get_args(tp)
    inner = [v for v in variants if v is not type(None)]
    if len(inner) != 1 or len(inner) == len(variants):
        raise TypeError(
            f"{tp}: only Optional[T] unions can be parsed from a fragment "
            f"(choosing between {len(inner)} alternatives would need backtracking)"
        )
    parse_inner = parser_for(inner[0])
    _LOG.debug("Optional of %s", _type_name(inner[0]))

    def parse_optional(es: EString) -> Any:
        if not es:
            return None
        return parse_inner(es)

    return parse_optional

def _resolve(tp: Any) -> Parser:
    tp = _strip_annotated(tp)

    # Пользовательские и составные типы: протокол ParseFragment
    if isinstance(tp, type):
        parse_frag = getattr(tp, "parse_frag", None)
        if callable(parse_frag):
            _LOG.debug("%s: parse_frag", _type_name(tp))
            return parse_frag
        leaf = _LEAVES.get(tp)
        if leaf is not None:
            _LOG.debug("%s: leaf", _type_name(tp))
            return leaf[0]

    # Optional[T] / T | None
    if get_origin(tp) in (t.Union, UnionType):
        return _optional_parser(tp)

    raise TypeError(f"{_type_name(tp)} cannot be parsed from a fragment")

# -------------------- Public API --------------------

def register_leaf(tp: type, parse: Parser, fmt: Formatter = str) -> None:
    """
    Регистрирует листовой тип, который не может сам реализовать ``parse_frag``
    (встроенные и сторонние скаляры).

    ``parse`` обязан бросать ParseError с полученным фрагментом при неудаче.

    Уже разрешённый тип перерегистрировать с другим разборщиком нельзя:
    составные типы, построенные ранее, держат старый разборщик.

    Raises:
        ValueError: если ``tp`` уже разрешён с другим разборщиком
    """
    resolved = _PARSERS.get(tp)
    if resolved is not None and resolved is not parse:
        raise ValueError(f"{_type_name(tp)} is already resolved; cannot re-register its parser")
    _LEAVES[tp] = (parse, fmt)
    _LOG.debug("Leaf registered: %s", _type_name(tp))

def parser_for(tp: Any) -> Parser:
    """
    Возвращает функцию разбора фрагмента в значение аннотации ``tp``.

    Разрешение выполняется один раз на аннотацию; составные типы вызывают
    его при параметризации, поэтому ошибка композиции проявляется сразу
    при построении типа, а не при первом разборе.

    Raises:
        TypeError: если аннотация не поддерживает разбор из фрагмента
    """
    try:
        cached = _PARSERS.get(tp)
    except TypeError:  # нехешируемые метаданные Annotated
        return _resolve(tp)
    if cached is not None:
        return cached
    parser = _resolve(tp)
    _PARSERS[tp] = parser
    return parser

def to_estring(value: Any) -> EString:
    """
    Форматирует значение обратно во фрагмент.

    Порядок: протокол FormatFragment (``fmt_frag``), ``None`` как пустой
    фрагмент, зарегистрированные листья, затем ``str()``.
    """
    fmt_frag = getattr(value, "fmt_frag", None)
    if callable(fmt_frag) and not isinstance(value, type):
        return EString(fmt_frag())
    if value is None:
        return EString()
    leaf = _LEAVES.get(type(value))
    if leaf is not None:
        return EString(leaf[1](value))
    return EString(value)


__all__ = ["Parser", "Formatter", "register_leaf", "parser_for", "to_estring"]
