"""
Составные типы: контейнер с разделителем и кортежи фиксированной арности.
"""

from __future__ import annotations

from .sequence import SepVec
from .tuples import Pair, Trio

__all__ = ["SepVec", "Pair", "Trio"]
