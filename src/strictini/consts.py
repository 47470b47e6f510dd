# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 14:20:31
# @Author : Kariko Lin

from enum import Enum


class Token(int, Enum):
    """Which buffer the scanner is feeding right now."""
    SECTION = 0
    KEY = 1
    VALUE = 2


# no header can declare an empty name, so it's free to use.
DEFAULT_SECTION = ''

ESCAPE = '\\'
COMMENT = ';'
ASSIGN = '='
SECTION_OPEN = '['
SECTION_CLOSE = ']'
SPACE = ' '

# utf-8 files saved by Notepad start with it.
BOM = '\ufeff'

# dropped everywhere, even right after a backslash.
IGNORED_CHARS = frozenset('\t\r\f\v')

# anything here needs a backslash to be read literally.
STRUCTURAL_CHARS = frozenset((
    ESCAPE, COMMENT, ASSIGN, SECTION_OPEN, SECTION_CLOSE))
