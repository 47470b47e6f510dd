# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 14:05:12
# @Author : Kariko Lin

import logging
from io import TextIOBase
from os import PathLike

from .config import IniConfig
from .consts import DEFAULT_SECTION
from .errors import (
    IniError, SourceUnavailable, InvalidToken, EmptyKey, MisplacedBracket,
    UnexpectedBracket, EmptySectionName, TrailingContent, IncompleteLine,
    SectionNotFound, KeyNotFound, UnrepresentableToken
)
from .interchange import IniJsonParser, IniYamlParser
from .model import IniDocument, IniSection
from .parser import IniParser
from .writer import dump, dumps

__all__ = [
    'IniConfig', 'IniDocument', 'IniSection', 'DEFAULT_SECTION',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'load', 'loads', 'dump', 'dumps',
    'IniError', 'SourceUnavailable', 'InvalidToken', 'EmptyKey',
    'MisplacedBracket', 'UnexpectedBracket', 'EmptySectionName',
    'TrailingContent', 'IncompleteLine', 'SectionNotFound', 'KeyNotFound',
    'UnrepresentableToken'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')


def load(
    source: str | PathLike[str] | TextIOBase,
    encoding: str | None = None
) -> IniConfig:
    ret = IniConfig(encoding)
    ret.load(source)
    return ret


def loads(text: str) -> IniConfig:
    ret = IniConfig()
    ret.loads(text)
    return ret
