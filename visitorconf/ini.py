from __future__ import annotations

import configparser
from pathlib import Path
from typing import Dict, Union

Sections = Dict[str, Dict[str, str]]


def _new_parser() -> configparser.ConfigParser:
    # No "%" interpolation: sk values may contain any character.
    return configparser.ConfigParser(interpolation=None, default_section="__default__")


def _to_sections(parser: configparser.ConfigParser) -> Sections:
    out: Sections = {}
    for name in parser.sections():
        out[name] = {k: v for k, v in parser.items(name)}
    return out


def parse_ini_sections(text: str) -> Sections:
    """Parse INI text into ``{section: {key: value}}``, keeping section order.

    Keys are lower-cased by configparser; values are returned verbatim.
    """
    parser = _new_parser()
    parser.read_string(text)
    return _to_sections(parser)


def load_ini_sections(path: Union[str, Path]) -> Sections:
    p = Path(path)
    return parse_ini_sections(p.read_text(encoding="utf-8"))
