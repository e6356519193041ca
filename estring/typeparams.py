"""
Параметризация составных типов.

``SepVec[int, ","]`` не описывает грамматику во время выполнения, а строит
(и кэширует) конкретный подкласс, у которого разделители и функции разбора
вложенных типов уже связаны. Повторная параметризация теми же аргументами
возвращает тот же класс.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple

_SPECIALIZED: Dict[Tuple[type, Tuple[Any, ...]], type] = {}


def param_name(p: Any) -> str:
    if isinstance(p, str):
        return repr(p)
    if isinstance(p, type):
        return p.__name__
    return str(p).replace("typing.", "")


def check_sep(sep: Any, owner: str) -> str:
    """Разделитель — ровно один символ."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise TypeError(f"{owner}: separator must be a single character, got {sep!r}")
    return sep


class Parametrized:
    """
    Базовый класс составных типов, параметризуемых подпиской.

    Наследник задаёт ``_arity`` и реализует ``_specialize``, который
    проверяет аргументы и возвращает атрибуты конкретного подкласса.
    """

    __slots__ = ()

    _arity: ClassVar[int] = 1
    _params: ClassVar[Tuple[Any, ...]] = ()

    def __class_getitem__(cls, params: Any) -> type:
        if not isinstance(params, tuple):
            params = (params,)
        if cls._params:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if len(params) != cls._arity:
            raise TypeError(f"{cls.__name__} expects {cls._arity} parameter(s), got {len(params)}")
        key = (cls, params)
        try:
            return _SPECIALIZED[key]
        except KeyError:
            pass
        except TypeError:  # нехешируемый параметр
            key = None
        name = f"{cls.__name__}[{', '.join(param_name(p) for p in params)}]"
        attrs = cls._specialize(params)
        attrs.update({"_params": params, "__slots__": (), "__module__": cls.__module__, "__qualname__": name})
        specialized = type(name, (cls,), attrs)
        if key is not None:
            _SPECIALIZED[key] = specialized
        return specialized

    @classmethod
    def _specialize(cls, params: Tuple[Any, ...]) -> Dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def _require_params(cls) -> None:
        if not cls._params:
            raise TypeError(f"{cls.__name__} must be parameterized before use, e.g. {cls.__name__}[...]")


__all__ = ["Parametrized", "param_name", "check_sep"]
