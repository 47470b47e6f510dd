# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2024/11/03 10:27:44
# @Author : Kariko Lin

"""Turn an `IniDocument` back into text the scanner reads identically.

Not everything survives the trip. Keys and values can't hold whitespace,
since the scanner drops it outside brackets, and no token may span lines.
Those raise `UnrepresentableToken` instead of being silently mangled.
Sections without any pair are written as bare headers,
which read back as nothing at all.
"""

from typing import TextIO

from .consts import (
    ASSIGN, DEFAULT_SECTION, ESCAPE, IGNORED_CHARS,
    SECTION_CLOSE, SECTION_OPEN, SPACE, STRUCTURAL_CHARS
)
from .errors import UnrepresentableToken
from .model import IniDocument, IniSection

__all__ = ['escape', 'dumps', 'dump']

_NEVER_IN_HEADER = IGNORED_CHARS | {'\n'}
_NEVER_IN_PAIR = _NEVER_IN_HEADER | {SPACE}


def escape(token: str) -> str:
    """Backslash every structural character in `token`."""
    return ''.join(
        ESCAPE + c if c in STRUCTURAL_CHARS else c for c in token)


def _check(token: str, banned: frozenset[str], what: str) -> None:
    for c in token:
        if c in banned:
            raise UnrepresentableToken(
                f'{what} {token!r} contains {c!r}, which can\'t be read back')


def _header(name: str) -> str:
    if not name:
        raise UnrepresentableToken('Section name cannot be empty')
    _check(name, _NEVER_IN_HEADER, 'Section name')
    return f'{SECTION_OPEN}{escape(name)}{SECTION_CLOSE}'


def _pair(key: str, value: str, delimiter: str) -> str:
    if not key:
        raise UnrepresentableToken('Key can\'t be empty')
    _check(key, _NEVER_IN_PAIR, 'Key')
    _check(value, _NEVER_IN_PAIR, 'Value')
    return f'{escape(key)}{delimiter}{escape(value)}'.rstrip(SPACE)


def _section_lines(sect: IniSection, delimiter: str) -> list[str]:
    return [_pair(k, v, delimiter) for k, v in sect.items()]


def dumps(
    doc: IniDocument, *,
    delimiter: str = ' = ',
    blank_lines: int = 1
) -> str:
    """Serialize `doc`.

    Pairs of the default section go first (they'd land elsewhere
    if written after a header), then each section in insertion order.

    Raises:
        UnrepresentableToken: see module docstring.
    """
    if delimiter.strip(SPACE) != ASSIGN:
        raise ValueError(f'Delimiter must be {ASSIGN!r} padded with spaces')

    blocks: list[list[str]] = []
    if DEFAULT_SECTION in doc and len(doc[DEFAULT_SECTION]) > 0:
        blocks.append(_section_lines(doc[DEFAULT_SECTION], delimiter))
    for name, sect in doc.items():
        if name == DEFAULT_SECTION:
            continue
        blocks.append([_header(name), *_section_lines(sect, delimiter)])

    if not blocks:
        return ''
    separator = '\n' * (blank_lines + 1)
    return separator.join('\n'.join(b) for b in blocks) + '\n'


def dump(doc: IniDocument, fp: TextIO, **kwargs) -> None:
    fp.write(dumps(doc, **kwargs))
