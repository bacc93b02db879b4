"""Textual style post-processing for rendered artifacts.

Templates are written with tab indentation, single quotes and semicolons.
:func:`apply_style` rewrites rendered text to the configured profile with
three line-oriented passes.  No pass re-parses the code, and each one only
matches constructs that the other two leave alone, so the passes commute
and running them twice is the same as running them once.
"""

from __future__ import annotations

import re

from ..config import StyleConfig

# import x from '...', export * from '...', import type { X } from '...'
_FROM_CLAUSE = re.compile(
    r"""^(?P<head>\s*(?:import|export)\b[^'"\n]*?\bfrom\s+)(?P<q>['"])(?P<spec>[^'"\n]*)(?P=q)""",
    re.MULTILINE,
)
# import 'reflect-metadata'
_SIDE_EFFECT_IMPORT = re.compile(
    r"""^(?P<head>\s*import\s+)(?P<q>['"])(?P<spec>[^'"\n]*)(?P=q)""",
    re.MULTILINE,
)
# Symbol('TOKEN')
_SYMBOL_LITERAL = re.compile(r"""\bSymbol\((?P<q>['"])(?P<spec>[^'"\n]*)(?P=q)\)""")

_DECLARATION_KEYWORDS = ("import ", "export ", "const ", "let ", "type ", "declare ")
# Lines ending in one of these close a block or continue onto the next line.
_CONTINUATIONS = ("{", "}", "(", "[", ",", "=", "=>", "|", "&", ":", "?")

_LEADING_TABS = re.compile(r"^\t+", re.MULTILINE)


def normalize_quotes(text: str, quote: str) -> str:
    """Use *quote* around module specifiers and ``Symbol()`` names."""

    def _requote(match: re.Match[str]) -> str:
        return f"{match.group('head')}{quote}{match.group('spec')}{quote}"

    text = _FROM_CLAUSE.sub(_requote, text)
    text = _SIDE_EFFECT_IMPORT.sub(_requote, text)
    return _SYMBOL_LITERAL.sub(
        lambda m: f"Symbol({quote}{m.group('spec')}{quote})", text
    )


def normalize_terminators(text: str, semicolons: bool) -> str:
    """Add or strip ``;`` on single-line top-level declarations."""
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if not _is_top_level_declaration(line):
            continue
        body = line.rstrip()
        trailing = line[len(body):]
        if semicolons and not body.endswith(";"):
            lines[index] = f"{body};{trailing}"
        elif not semicolons and body.endswith(";"):
            lines[index] = f"{body.rstrip(';').rstrip()}{trailing}"
    return "\n".join(lines)


def normalize_indentation(text: str, unit: str) -> str:
    """Replace each leading tab with *unit*."""
    if unit == "\t":
        return text
    return _LEADING_TABS.sub(lambda m: unit * len(m.group(0)), text)


def apply_style(text: str, style: StyleConfig) -> str:
    """Rewrite *text* to match *style*."""
    styled = normalize_quotes(text, style.quote_char)
    styled = normalize_terminators(styled, style.semicolons)
    return normalize_indentation(styled, style.indent_unit)


def _is_top_level_declaration(line: str) -> bool:
    if not line or line[0].isspace():
        return False
    if not line.startswith(_DECLARATION_KEYWORDS):
        return False
    body = line.rstrip().rstrip(";").rstrip()
    if body.startswith(("//", "/*", "*")):
        return False
    return not body.endswith(_CONTINUATIONS)
