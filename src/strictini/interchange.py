# -*- encoding: utf-8 -*-
# @File   : interchange.py
# @Time   : 2024/11/05 21:48:12
# @Author : Kariko Lin

"""JSON and YAML import/export of `IniDocument`.

Both share one layout, so a real section may be named anything.
The top level key of the default section is `header` unless
the handler is told otherwise:

    ```yaml
    protocol: 1
    header:           # the default section
      default_key: '1'
    sections:
      server:
        host: localhost
        port: '8080'
    ```
"""

import json
from os import PathLike
from typing import Any

import yaml

from .abstract import FileHandler
from .consts import DEFAULT_SECTION
from .errors import IniError, SourceUnavailable
from .model import IniDocument

__all__ = ['IniJsonParser', 'IniYamlParser']


class IniTreeParser(FileHandler[IniDocument]):
    PROTOCOL = 1

    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', *,
        header_key: str = 'header'
    ) -> None:
        if header_key in ('protocol', 'sections'):
            raise ValueError(f'{header_key!r} is already taken')
        super().__init__(filename)
        self._codec = encoding
        self._header_key = header_key

    def _to_tree(self, doc: IniDocument) -> dict[str, Any]:
        sections: dict[str, dict[str, str]] = {}
        ret = {
            'protocol': self.PROTOCOL,
            self._header_key: {},
            'sections': sections
        }
        for name, sect in doc.items():
            if name == DEFAULT_SECTION:
                ret[self._header_key] = sect.to_dict()
            else:
                sections[name] = sect.to_dict()
        return ret

    @staticmethod
    def __to_value(val: Any) -> str:
        # may there be some pure digits considered as int
        return '' if val is None else str(val)

    def _from_tree(self, tree: Any) -> IniDocument:
        if not isinstance(tree, dict):
            raise IniError('Not a mapping at top level', source=self._fn)
        ret = IniDocument()
        blocks = [(DEFAULT_SECTION, tree.get(self._header_key) or {})]
        blocks.extend((tree.get('sections') or {}).items())
        for name, pairs in blocks:
            if not isinstance(pairs, dict):
                raise IniError(
                    f'Section {name!r} is not a mapping', source=self._fn)
            if name == DEFAULT_SECTION and not pairs:
                continue
            sect = ret.section(str(name))
            for k, v in pairs.items():
                sect[str(k)] = self.__to_value(v)
        return ret


class IniJsonParser(IniTreeParser):
    def read(self) -> IniDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = json.load(fp)
        except OSError as e:
            raise SourceUnavailable(
                f'Failed to open file: {e.strerror or e}',
                source=self._fn) from e
        except json.JSONDecodeError as e:
            raise IniError(
                f'Invalid JSON: {e.msg}',
                lineno=e.lineno, column=e.colno, source=self._fn) from e
        return self._from_tree(src)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                self._to_tree(instance), fp,
                ensure_ascii=False, indent=indent)


class IniYamlParser(IniTreeParser):
    def read(self) -> IniDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = yaml.safe_load(fp)
        except OSError as e:
            raise SourceUnavailable(
                f'Failed to open file: {e.strerror or e}',
                source=self._fn) from e
        except yaml.YAMLError as e:
            raise IniError(f'Invalid YAML: {e}', source=self._fn) from e
        return self._from_tree(src)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                self._to_tree(instance), fp,
                allow_unicode=True, sort_keys=False, indent=indent)
