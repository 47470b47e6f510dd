# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/03 14:35:50
# @Author : Kariko Lin

"""Loaded configuration, queried by section and key.

One `IniConfig` must not be loaded from two threads at once.
Concurrent `get()` calls after a finished `load()` are fine.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from typing import overload

from .consts import DEFAULT_SECTION
from .model import IniDocument
from .parser import IniParser


class IniConfig:
    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        self._doc = IniDocument()

    @property
    def document(self) -> IniDocument:
        return self._doc

    def load(self, source: str | PathLike[str] | TextIOBase) -> IniDocument:
        """Parse a whole document, replacing what was loaded before.

        `source` is a file path, or an already opened text stream.
        On failure the previous content is gone anyway,
        and what's left must not be relied on.

        Raises:
            SourceUnavailable: the file can't be opened or decoded.
            InvalidToken, IncompleteLine: the document is malformed.
        """
        self._doc = IniDocument()
        if isinstance(source, (str, PathLike)):
            IniParser(source, self._codec).read(self._doc)
        else:
            IniParser.readstream(
                source, self._doc, source=getattr(source, 'name', None))
        logging.debug(f'Loaded sections: {list(self._doc)}')
        return self._doc

    def loads(self, text: str) -> IniDocument:
        """Same as `load()`, from a string."""
        return self.load(StringIO(text))

    @overload
    def get(self, key: str, /) -> str: ...
    @overload
    def get(self, section: str, key: str, /) -> str: ...

    def get(self, section_or_key: str, key: str | None = None, /) -> str:
        """`get(key)` looks in the default section,
        `get(section, key)` in the named one.

        Raises:
            SectionNotFound, KeyNotFound
        """
        if key is None:
            return self._doc.find(DEFAULT_SECTION, section_or_key)
        return self._doc.find(section_or_key, key)

    def sections(self) -> list[str]:
        """Declared section names, the default one excluded."""
        return [i for i in self._doc if i != DEFAULT_SECTION]

    def __contains__(self, section: object) -> bool:
        return section in self._doc

    def __repr__(self) -> str:
        return f'IniConfig({self._doc!r})'
