# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 16:12:05
# @Author : Kariko Lin

"""
Basically INI structure, without inheritance nor `[#include]`.

Pairs before any header are kept in `DEFAULT_SECTION`,
see `IniDocument.header`.
"""

from collections.abc import Mapping, MutableMapping
from typing import Callable, Iterator

from .consts import DEFAULT_SECTION
from .errors import KeyNotFound, SectionNotFound


class IniSection(MutableMapping[str, str]):
    """A plain `str: str` dict of one section. Last write wins."""

    def __init__(
        self, section_name: str = DEFAULT_SECTION,
        pairs: Mapping[str, str] | None = None, *,
        on_write: Callable[['IniSection'], 'IniSection'] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        # detached until the first write, see `IniDocument.header`.
        self._on_write = on_write
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        if self._on_write is not None:
            # share the dict of whatever section got registered.
            self._data = self._on_write(self)._data
            self._on_write = None
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。形如：

        ```ini
        key = val  ; 使用 self.header 访问游离的键值对。

        [section]
        key233 = val666
        [section]  ; 重复声明的小节会合并，而不是覆盖。
        key114 = val514
        ```
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    @property
    def header(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。

        只读不会创建默认小节，写入第一个键值对时才会。
        """
        if DEFAULT_SECTION in self.__raw:
            return self.__raw[DEFAULT_SECTION]
        return IniSection(DEFAULT_SECTION, on_write=self.__adopt)

    def __adopt(self, sect: IniSection) -> IniSection:
        return self.__raw.setdefault(sect.name, sect)

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'IniDocument({list(self.__raw)!r})'

    def section(self, name: str) -> IniSection:
        """Get the section `name`, creating it if missing."""
        if name not in self.__raw:
            self.__raw[name] = IniSection(name)
        return self.__raw[name]

    def find(self, section: str, key: str) -> str:
        """Strict lookup, no defaults, no partial matches.

        Raises:
            SectionNotFound: `section` was never filled.
            KeyNotFound: `section` exists but lacks `key`.
        """
        if section not in self.__raw:
            raise SectionNotFound(section)
        if key not in self.__raw[section]:
            raise KeyNotFound(section, key)
        return self.__raw[section][key]

    def pairs(self) -> Iterator[tuple[str, str, str]]:
        """Iterate over every `(section, key, value)`."""
        for name, sect in self.__raw.items():
            for k, v in sect.items():
                yield name, k, v

    def update_from(self, another: 'IniDocument') -> None:
        """Merge `another` into self; its values win."""
        for name, sect in another.items():
            self.section(name).update(sect)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: sect.to_dict() for name, sect in self.__raw.items()}
