# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2024/11/02 15:03:47
# @Author : Kariko Lin

"""Character level scanner of the strict INI dialect.

    ```ini
    default_key = 1     ; pairs before any header go to DEFAULT_SECTION.

    [server name]       ; spaces are kept inside brackets.
    host = localhost    ; but dropped around keys and values.
    note = a\\;b        ; backslash makes `\\ ; = [ ]` literal.
    ```

The scanner holds no state of its own. Everything lives in a `ScanState`
that the caller creates per document and threads through `scan_line()`
(or `step()`, one character at a time).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple

from .consts import (
    ASSIGN, BOM, COMMENT, DEFAULT_SECTION, ESCAPE, IGNORED_CHARS,
    SECTION_CLOSE, SECTION_OPEN, SPACE, Token
)
from .errors import (
    EmptyKey, EmptySectionName, IncompleteLine, MisplacedBracket,
    TrailingContent, UnexpectedBracket
)

__all__ = ['Pair', 'ScanState', 'step', 'finish_line', 'scan_line', 'scan']


class Pair(NamedTuple):
    section: str
    key: str
    value: str


@dataclass
class ScanState:
    # persists across lines until the next header.
    section: str = DEFAULT_SECTION

    # per line.
    target: Token = Token.KEY
    pending: str = ''  # header text while inside `[...]`
    key: str = ''
    value: str = ''
    escape: bool = False
    seen: bool = False
    closed: bool = False

    lineno: int = 0
    column: int = 0
    source: str | None = None

    def begin_line(self) -> None:
        self.target = Token.KEY
        self.pending = self.key = self.value = ''
        self.escape = self.seen = self.closed = False
        self.lineno += 1
        self.column = 0

    def feed(self, char: str) -> None:
        match self.target:
            case Token.SECTION:
                self.pending += char
            case Token.KEY:
                self.key += char
            case Token.VALUE:
                self.value += char

    def where(self) -> dict:
        return {
            'lineno': self.lineno,
            'column': self.column,
            'source': self.source
        }


def step(state: ScanState, char: str) -> bool:
    """Consume one character.

    Returns `False` once an unescaped `;` turned the rest of the line
    into a comment, `True` otherwise.

    Raises:
        InvalidToken: on the structural violations, see `errors`.
    """
    state.column += 1
    if char in IGNORED_CHARS:
        return True

    # only blanks or a comment may follow a finished header.
    if state.closed:
        if char == SPACE:
            return True
        if char == COMMENT:
            return False
        raise TrailingContent(char, **state.where())

    if char == SPACE and state.target is not Token.SECTION:
        return True

    if state.escape:
        state.escape = False
        state.feed(char)
        state.seen = True
        return True

    if char == COMMENT:
        return False

    first = not state.seen
    state.seen = True

    if char == ASSIGN:
        if not state.key:
            raise EmptyKey(**state.where())
        state.target = Token.VALUE
    elif char == SECTION_OPEN:
        if not first:
            raise MisplacedBracket(**state.where())
        state.pending = ''
        state.target = Token.SECTION
    elif char == SECTION_CLOSE:
        if state.target is not Token.SECTION:
            raise UnexpectedBracket(**state.where())
        if not state.pending:
            raise EmptySectionName(**state.where())
        state.section = state.pending
        state.closed = True
    elif char == ESCAPE:
        state.escape = True
    else:
        state.feed(char)
    return True


def finish_line(state: ScanState, commented: bool = False) -> Pair | None:
    """Decide what the line produced once scanning stopped.

    `commented` tells whether an unescaped `;` stopped it early.
    """
    if state.closed:
        return None
    if state.target is Token.SECTION:
        raise IncompleteLine(
            'Section header is never closed', **state.where())
    if commented:
        # a trailing comment is fine, after a *complete* pair only.
        if state.key and state.value:
            return Pair(state.section, state.key, state.value)
        return None
    if not state.seen:
        return None
    if not state.key and not state.value:
        raise IncompleteLine('Uncomplete line', **state.where())
    return Pair(state.section, state.key, state.value)


def scan_line(state: ScanState, line: str) -> Pair | None:
    """Scan a single line (the trailing newline is optional).

    A header line updates `state.section` and gives `None`,
    as do blank and comment-only lines.
    """
    state.begin_line()
    for char in line:
        if char == '\n':
            break
        if not step(state, char):
            return finish_line(state, commented=True)
    return finish_line(state)


def _split_lines(chunk: str) -> list[str]:
    # only `\n` ends a line, `\r` `\f` `\v` are dropped by `step()`.
    parts = chunk.split('\n')
    if len(parts) > 1 and parts[-1] == '':
        parts.pop()
    return parts


def scan(
    lines: Iterable[str], state: ScanState | None = None
) -> Iterator[Pair]:
    """Yield every pair of a document, line by line.

    Items of `lines` holding more than one line get split first,
    and a leading byte order mark is dropped.
    """
    if state is None:
        state = ScanState()
    first = True
    for chunk in lines:
        if first:
            chunk = chunk.removeprefix(BOM)
            first = False
        for line in _split_lines(chunk):
            if (pair := scan_line(state, line)) is not None:
                yield pair
