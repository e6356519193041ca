from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_CFG_FILE = ".estring.yaml"
DEBUG_ENV = "ESTRING_DEBUG"

_LOG = logging.getLogger("estring.config")

# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #

def setup_logging() -> None:
    """
    Один обработчик на логгер ``estring``; уровень DEBUG при заданной
    переменной окружения ESTRING_DEBUG, иначе WARNING.
    Библиотека сама логирование не настраивает — это делает CLI.
    """
    if getattr(setup_logging, "_inited", False):
        return
    setup_logging._inited = True  # type: ignore[attr-defined]
    root = logging.getLogger("estring")
    root.setLevel(logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.WARNING)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)

# --------------------------------------------------------------------------- #
# Model
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class CalcConfig:
    plus: str = "+"
    times: str = "*"


@dataclass(frozen=True)
class DotenvConfig:
    line: str = "\n"
    assign: str = "="
    comment: str = "#"


@dataclass(frozen=True)
class Settings:
    calc: CalcConfig = field(default_factory=CalcConfig)
    dotenv: DotenvConfig = field(default_factory=DotenvConfig)
    source: Optional[Path] = None  # файл, из которого загружены настройки

# Поля, которые являются разделителями (ровно один символ)
_SEPARATORS = {"calc.plus", "calc.times", "dotenv.line", "dotenv.assign"}

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #

_yaml = YAML(typ="safe")

def _load_section(tp: Any, node: Any, name: str, source: str) -> Any:
    if node is None:
        return tp()
    if not isinstance(node, dict):
        raise ConfigError(name, f"must be a mapping, got {type(node).__name__}", source=source)
    known = {f.name for f in fields(tp)}
    extras = set(node) - known
    if extras:
        raise ConfigError(name, f"unknown key(s): {sorted(map(str, extras))}", source=source)
    kwargs: Dict[str, str] = {}
    for key, val in node.items():
        path = f"{name}.{key}"
        if not isinstance(val, str) or not val:
            raise ConfigError(path, f"expected non-empty string, got {val!r}", source=source)
        if path in _SEPARATORS and len(val) != 1:
            raise ConfigError(path, f"separator must be a single character, got {val!r}", source=source)
        kwargs[key] = val
    return tp(**kwargs)

# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #

def find_config(root: Path) -> Optional[Path]:
    """Путь к .estring.yaml в каталоге ``root`` или None."""
    p = (root / DEFAULT_CFG_FILE).resolve()
    return p if p.is_file() else None


def load_settings(path: Optional[Path] = None, *, root: Optional[Path] = None) -> Settings:
    """
    Загрузить настройки CLI.

    • Явный ``path`` обязан существовать.
    • Иначе ищется .estring.yaml в ``root`` (по умолчанию — текущий каталог).
    • Если файла нет — вернуть дефолты.
    """
    if path is None:
        path = find_config(root or Path.cwd())
        if path is None:
            _LOG.debug("No %s found, using defaults", DEFAULT_CFG_FILE)
            return Settings()
    elif not path.is_file():
        raise ConfigError("$", "config file not found", source=str(path))

    source = str(path)
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError("$", f"invalid YAML: {e}", source=source) from e
    if not isinstance(raw, dict):
        raise ConfigError("$", "config must be a mapping with keys: calc?, dotenv?", source=source)
    extras = set(raw) - {"calc", "dotenv"}
    if extras:
        raise ConfigError("$", f"unknown key(s): {sorted(map(str, extras))}", source=source)

    settings = Settings(
        calc=_load_section(CalcConfig, raw.get("calc"), "calc", source),
        dotenv=_load_section(DotenvConfig, raw.get("dotenv"), "dotenv", source),
        source=path,
    )
    _LOG.debug("Settings loaded from %s: %r", source, settings)
    return settings


__all__ = [
    "DEFAULT_CFG_FILE",
    "DEBUG_ENV",
    "CalcConfig",
    "DotenvConfig",
    "Settings",
    "setup_logging",
    "find_config",
    "load_settings",
]
