"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from EStringError.

Programming errors (a type that cannot take part in parsing,
a separator that is not a single character) are raised as TypeError
and propagate with full tracebacks.
"""

from __future__ import annotations

import enum
from typing import Optional

from .core import EString


class EStringError(ValueError):
    """Base class for all user-facing errors of estring."""
    pass


class Reason(enum.Enum):
    """Причина неудачного разбора фрагмента."""
    SPLIT = "split"  # не найден обязательный разделитель
    PARSE = "parse"  # фрагмент не преобразуется в целевой тип


class ParseError(EStringError):
    """
    Ошибка разбора фрагмента.

    Хранит наименьший фрагмент, на котором произошёл сбой (а не весь вход),
    и причину сбоя. Составные типы, которые сами выбирают точку разбиения,
    заворачивают ошибку потомка в новую с собственным фрагментом; исходная
    ошибка остаётся доступной через ``__cause__`` и ``root_cause``.
    """

    def __init__(self, fragment: str, reason: Reason):
        self.fragment = EString(fragment)
        self.reason = reason
        super().__init__(f'Failed to parse "{self.fragment}" with reason {reason.name}')

    @property
    def root_cause(self) -> ParseError:
        """Самая глубокая ошибка разбора в цепочке ``__cause__``."""
        err: ParseError = self
        while isinstance(err.__cause__, ParseError):
            err = err.__cause__
        return err

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.fragment, self.reason) == (other.fragment, other.reason)

    def __hash__(self) -> int:
        return hash((self.fragment, self.reason))

    def __repr__(self) -> str:
        return f"ParseError({str.__repr__(self.fragment)}, {self.reason})"


class ConfigError(EStringError):
    """Ошибка загрузки конфигурации с указанием пути поля."""

    def __init__(self, path: str, message: str, *, source: Optional[str] = None):
        self.path = path
        self.source = source
        where = f"{source}: " if source else ""
        super().__init__(f"{where}{path}: {message}")


__all__ = ["EStringError", "Reason", "ParseError", "ConfigError"]
