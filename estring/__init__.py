"""
estring — разбор плоских строк по объявленной форме типа.

Форма строки описывается композицией обобщённых типов, а единый механизм
рекурсивного спуска разбирает её, опираясь только на эти аннотации::

    >>> from estring import EString, SepVec, Sum, Product
    >>> EString("10+5*2+3").parse(Sum[SepVec[Product[SepVec[float, "*"]], "+"]]).agg()
    23.0
"""

from __future__ import annotations

from .core import EString
from .errors import ConfigError, EStringError, ParseError, Reason
from .protocols import Aggregatable, FormatFragment, ParseFragment
from .resolve import parser_for, register_leaf, to_estring
from . import scalars  # noqa: F401  регистрация листовых типов
from .integers import BoundedInt, Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64
from .agg import Aggregate, Product, Sum, items
from .structs import Pair, SepVec, Trio
from .modifiers import Trim

__all__ = [
    "EString",
    "to_estring",
    "parser_for",
    "register_leaf",
    # Errors
    "EStringError",
    "ParseError",
    "Reason",
    "ConfigError",
    # Protocols
    "ParseFragment",
    "FormatFragment",
    "Aggregatable",
    # Shapes
    "SepVec",
    "Pair",
    "Trio",
    "Trim",
    # Aggregation
    "Aggregate",
    "Sum",
    "Product",
    "items",
    # Fixed-width integers
    "BoundedInt",
    "Int8", "Int16", "Int32", "Int64",
    "UInt8", "UInt16", "UInt32", "UInt64",
]
