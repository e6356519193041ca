from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, Optional

from .agg import Product, Sum
from .config import CalcConfig, DotenvConfig, load_settings, setup_logging
from .core import EString
from .errors import EStringError
from .modifiers import Trim
from .structs import Pair, SepVec
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="estring",
        description="Parse flat strings by their declared shape",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="YAML с разделителями (по умолчанию ./.estring.yaml, если есть)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_calc = sub.add_parser("calc", help="Сумма произведений: '10+5*2+3' → 23.0")
    sp_calc.add_argument("expr", help="выражение из чисел, '+' и '*'")

    sp_dotenv = sub.add_parser("dotenv", help="Пары KEY=VALUE построчно → JSON")
    sp_dotenv.add_argument(
        "source",
        nargs="?",
        default="-",
        metavar="FILE|-",
        help="файл с переменными или - для чтения из stdin (по умолчанию)",
    )

    return p


def run_calc(expr: str, cfg: CalcConfig) -> float:
    """Сумма произведений с разделителями из конфигурации."""
    shape = Sum[SepVec[Product[SepVec[float, cfg.times]], cfg.plus]]
    return EString(expr).parse(shape).agg()


def run_dotenv(text: str, cfg: DotenvConfig) -> Dict[str, str]:
    """
    Разбирает содержимое .env в словарь.

    Строки-комментарии отбрасываются до разбора; пустые строки разбираются
    как отсутствующие пары (Optional) и пропускаются.
    """
    lines = [ln for ln in text.split(cfg.line) if not ln.lstrip().startswith(cfg.comment)]
    shape = Trim[SepVec[Optional[Pair[str, cfg.assign, str]], cfg.line]]
    parsed = EString(cfg.line.join(lines)).parse(shape)
    return {pair.left: pair.right for pair in parsed.value if pair is not None}


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise ValueError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    ns = _build_parser().parse_args(argv)

    try:
        settings = load_settings(ns.config)

        if ns.cmd == "calc":
            result = run_calc(ns.expr, settings.calc)
            sys.stdout.write(f"{result}\n")
            return 0

        if ns.cmd == "dotenv":
            data = run_dotenv(_read_source(ns.source), settings.dotenv)
            sys.stdout.write(json.dumps(data, ensure_ascii=False) + "\n")
            return 0

    except (EStringError, ValueError) as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
