# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 11:02:18
# @Author : Kariko Lin

"""INI file reading and writing.

Reading is strict: the first malformed line aborts the whole read,
see `errors` for what may come out.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from typing import Iterable

import chardet

from .abstract import FileHandler
from .errors import SourceUnavailable
from .model import IniDocument
from .scanner import ScanState, scan
from .writer import dumps


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase | Iterable[str],
        ins: IniDocument | None = None, *,
        source: str | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        `ins` 不为空时，键值对将合并进该实例（出错时会留下已读的部分）。
        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = IniDocument()
        for section, key, val in scan(buf, ScanState(source=source)):
            # bare headers never get here, so they leave no empty section.
            ins.section(section)[key] = val
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None
                or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            codec = {'encoding': 'utf-8'}
        logging.warning(
            f'"{filename}" decoded as {codec["encoding"]} (guessed).')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('gbk')
        return StringIO(buf)

    def _open(self) -> StringIO:
        try:
            try:
                # when encoding is None, `open()` would fallback to
                # system default, and when it got wrong, fallback to chardet.
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return StringIO(fp.read())
            except UnicodeDecodeError:
                return self._decode_file(self._fn)
        except UnicodeDecodeError as e:
            raise SourceUnavailable(
                'Failed to decode file', source=self._fn) from e
        except LookupError as e:
            raise SourceUnavailable(
                f'Unknown encoding: {self._codec}', source=self._fn) from e
        except OSError as e:
            raise SourceUnavailable(
                f'Failed to open file: {e.strerror or e}',
                source=self._fn) from e

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        Raises:
            SourceUnavailable: 文件打不开，或者怎么都解不了码。
            InvalidToken, IncompleteLine: 文件格式有误。
        """
        ret = self.readstream(self._open(), ins, source=self._fn)
        logging.debug(
            f'Read {sum(len(s) for s in ret.values())} pair(s) '
            f'in {len(ret)} section(s) from "{self._fn}".')
        return ret

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = ' = '
    ) -> None:
        """保存到一个 INI 文件。

        Raises:
            UnrepresentableToken: 有读不回来的键、值或小节名。
        """
        # render first, so a bad token can't leave a half written file.
        text = dumps(instance, delimiter=delimiter, blank_lines=blank_lines)
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                fp.write(text)
        except LookupError as e:
            raise SourceUnavailable(
                f'Unknown encoding: {self._codec}', source=self._fn) from e
        except OSError as e:
            raise SourceUnavailable(
                f'Failed to write file: {e.strerror or e}',
                source=self._fn) from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
