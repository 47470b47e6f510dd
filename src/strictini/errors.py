# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 14:41:09
# @Author : Kariko Lin

"""All the ways a strict INI can fail.

Parsing errors are fatal for the whole `load()`; nothing gets skipped.
"""


class IniError(Exception):
    """Base class. Carries the location when it's known."""

    def __init__(
        self, reason: str, *,
        lineno: int | None = None,
        column: int | None = None,
        source: str | None = None
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.lineno = lineno
        self.column = column
        self.source = source

    def __str__(self) -> str:
        where = []
        if self.source is not None:
            where.append(self.source)
        if self.lineno is not None:
            where.append(f'line {self.lineno}')
        if self.column is not None:
            where.append(f'column {self.column}')
        if not where:
            return self.reason
        return f'{self.reason} ({", ".join(where)})'


class SourceUnavailable(IniError, OSError):
    """The underlying file can't be opened or read."""
    pass


class InvalidToken(IniError):
    """Structural grammar violation."""
    pass


class EmptyKey(InvalidToken):
    def __init__(self, **where) -> None:
        super().__init__('Key can\'t be empty', **where)


class MisplacedBracket(InvalidToken):
    def __init__(self, **where) -> None:
        super().__init__(
            '\'[\' must be the first character in a line', **where)


class UnexpectedBracket(InvalidToken):
    def __init__(self, **where) -> None:
        super().__init__('Unexpected character: \']\'', **where)


class EmptySectionName(InvalidToken):
    def __init__(self, **where) -> None:
        super().__init__('Section name cannot be empty', **where)


class TrailingContent(InvalidToken):
    def __init__(self, char: str, **where) -> None:
        super().__init__(
            f'Unexpected {char!r} after section header', **where)
        self.char = char


class IncompleteLine(IniError):
    """Something was read, but neither a pair nor a header came out of it."""
    pass


class SectionNotFound(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(f'Section not found: {section!r}')
        self.section = section


class KeyNotFound(IniError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'Key not found: {key!r} in section {section!r}')
        self.section = section
        self.key = key


class UnrepresentableToken(IniError, ValueError):
    """The writer can't express this token in the grammar."""
    pass
